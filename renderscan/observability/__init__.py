"""Observability helpers for renderscan."""

from renderscan.observability.logging import LOG_FORMATS, bind_session, get_logger, setup_logging

__all__ = ["LOG_FORMATS", "bind_session", "get_logger", "setup_logging"]
