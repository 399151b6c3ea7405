"""Entry-point for launching the CLI application."""
from __future__ import annotations

import logging

from .presentation.cli.app import main as cli_main
from .presentation.cli.config import debug_enabled


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> None:
    """Run the CLI presentation layer."""
    setup_logging(verbose=debug_enabled())
    cli_main()


if __name__ == "__main__":
    main()
