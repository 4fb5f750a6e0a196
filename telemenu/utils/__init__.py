"""telemenu utilities"""

from .logger import StructuredLogger, correlation_scope, current_correlation_id, get_logger

__all__ = ["StructuredLogger", "correlation_scope", "current_correlation_id", "get_logger"]
