"""Application layer: use cases, text import and the command-line entry."""
