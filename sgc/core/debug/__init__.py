"""
Debug exports.

Provides the static console logger used by every sgc module.
"""

from sgc.core.debug.debug_logger import DebugLogger, LoggerConfig

__all__ = [
    'DebugLogger',
    'LoggerConfig',
]
