"""
Main entry point for the EBPL CLI when run as a module.

This allows the CLI to be executed using:
    python -m ebpl.cli

or the equivalent ``ebpl`` console script.
"""

from . import main

if __name__ == '__main__':
    main()
