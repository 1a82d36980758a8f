"""Configuration package for the workout log tools.

Provides a layered configuration system with support for:
- Multiple configuration sources (defaults, settings file, environment, CLI)
- Hierarchical configuration with proper precedence
- Type-safe configuration objects with validation
- Simplified access through facade pattern

Main components:
- config.py: Configuration dataclasses and loader
- service.py: Facade for simplified configuration access
"""
