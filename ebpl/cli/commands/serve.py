"""
Serve command implementation.

Runs the EBPL HTTP API with uvicorn.
"""

import argparse

from ebpl.config import CompilerConfig
from ebpl.observability.logging import get_logger

from ..errors import CLIDependencyError, handle_cli_exception

logger = get_logger("ebpl.cli")


def check_uvicorn_available() -> bool:
    try:
        import uvicorn  # noqa: F401
    except ImportError:
        return False
    return True


def cmd_serve(args: argparse.Namespace) -> None:
    """Handle the 'serve' subcommand."""
    if not check_uvicorn_available():
        handle_cli_exception(
            CLIDependencyError(
                "uvicorn is required to run the EBPL server",
                hint="Install with: pip install uvicorn",
            ),
            verbose=getattr(args, "verbose", False),
        )
        return

    import uvicorn

    from ebpl.server import create_app

    config = getattr(args, "compiler_config", None) or CompilerConfig()
    app = create_app(config)
    logger.info("Starting EBPL server on %s:%d", args.host, args.port)
    log_level = "warning" if config.log_level == "warn" else config.log_level
    uvicorn.run(app, host=args.host, port=args.port, log_level=log_level)
