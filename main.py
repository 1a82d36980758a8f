"""Main entry point for the workout log parser."""
from __future__ import annotations

import sys

from dotenv import load_dotenv

from app.startup import run_application


def main() -> None:
    """Application entry point."""
    # Load .env early so the configuration loader sees its variables
    load_dotenv()
    sys.exit(run_application(sys.argv[1:]))


__all__ = ["main"]

if __name__ == "__main__":
    main()
