"""
FilterSet - Core Module

This module provides core functionality used throughout the package:
- Configuration management
- Logging
- Custom exceptions
- Shared type definitions
"""

from filterset.core.config import Settings, get_settings, settings
from filterset.core.exceptions import (
    FilterSetException,
    UnsupportedColumnTypeError,
    UnknownColumnError,
    FilterValidationError,
)
from filterset.core.logging import get_logger, setup_logging, LoggerMixin
from filterset.core.types import (
    ColumnType,
    ViolationKind,
    FilterSetState,
    Column,
    Violation,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "settings",
    # Logging
    "get_logger",
    "setup_logging",
    "LoggerMixin",
    # Exceptions
    "FilterSetException",
    "UnsupportedColumnTypeError",
    "UnknownColumnError",
    "FilterValidationError",
    # Enums
    "ColumnType",
    "ViolationKind",
    "FilterSetState",
    # Models
    "Column",
    "Violation",
]
