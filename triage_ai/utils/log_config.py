"""Root logger configuration."""

import logging

_LOGGING_CONFIGURED = False


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls are no-ops."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
