"""Coloured console logging for the ``az_mgmt`` logger."""

import logging


def setup_logging(level: int = logging.WARNING, use_colors: bool = True) -> None:
    """Configure the root ``az_mgmt`` logger with uvicorn-style colours."""
    from uvicorn.logging import DefaultFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(DefaultFormatter(fmt="%(levelprefix)s %(name)s - %(message)s", use_colors=use_colors))
    pkg_logger = logging.getLogger("az_mgmt")
    pkg_logger.handlers = [handler]
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False

    # azure-identity logs every credential it tries
    logging.getLogger("azure").setLevel(logging.WARNING)
