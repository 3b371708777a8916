"""Console logging setup for the CLI"""

import logging


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Configure a simple stderr logger; verbose forces DEBUG."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
