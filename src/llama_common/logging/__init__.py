from .logging import get_configured_level, get_logger, reset_logger, set_level

__all__ = ["get_configured_level", "get_logger", "reset_logger", "set_level"]
