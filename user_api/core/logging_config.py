"""Root logger setup shared by the API process and the CLI entry point."""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once.

    Unknown level names fall back to INFO. Calling this again only adjusts
    the level, handlers installed by uvicorn or pytest are left alone.
    """
    resolved = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
    root.setLevel(resolved)
