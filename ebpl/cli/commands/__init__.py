"""
CLI command modules.

Each module handles one subcommand of the EBPL CLI.
"""

from .compile import cmd_compile
from .examples import cmd_examples
from .serve import cmd_serve

__all__ = ["cmd_compile", "cmd_examples", "cmd_serve"]
