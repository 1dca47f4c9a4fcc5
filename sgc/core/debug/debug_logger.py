"""
debug_logger.py
---------------
Diagnostic console logger with category filtering and formatted output.

Used by every sgc module in place of print(); novice-facing alerts are
routed through it as well so that a game's console shows the same
message its window does.

Line format: ``[HH:MM:SS] [Caller][TAG] message``. The caller is the
class (or module) that made the call, found by frame inspection.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Controls which components emit log messages and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE
    SHOW_TIMESTAMP = True

    CATEGORIES = {
        # Engine
        "system": True,
        "loading": False,
        "input": False,

        # Game lifecycle
        "game_state": True,

        # Sprites
        "sprite": True,
        "materialize": False,
        "collision": False,
        "animation": False,

        # Rendering
        "background": True,
        "ui": True,
    }


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger with category filtering and colored output."""

    LINE_LENGTH = 59

    # tag -> (color, level)
    TAGS = {
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
        "FAIL": (Colors.RED, "ERROR"),
    }

    LEVEL_VALUES = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}

    @staticmethod
    def _get_caller() -> str:
        """Name the class or module three frames up (the logger's caller)."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__
        cls = frame.f_locals.get("cls")
        if isinstance(cls, type):
            return cls.__name__

        module_name = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1][:-3]
        return "".join(part.capitalize() for part in module_name.split("_"))

    # ===========================================================
    # Core Logging
    # ===========================================================

    @staticmethod
    def _should_log(category: str, level: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        # Errors always get through, whatever the category switch says
        if level != "ERROR" and not LoggerConfig.CATEGORIES.get(category, False):
            return False
        limit = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return DebugLogger.LEVEL_VALUES[level] <= limit

    @staticmethod
    def _log(tag: str, message: str, category: str):
        color, level = DebugLogger.TAGS[tag]
        if not DebugLogger._should_log(category, level):
            return

        source = DebugLogger._get_caller()
        prefix = f"[{source}][{tag}] "
        if LoggerConfig.SHOW_TIMESTAMP:
            prefix = f"[{datetime.now():%H:%M:%S}] " + prefix
        print(f"{color}{prefix}{message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "game_state"):
        DebugLogger._log("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        """Per-frame detail; shown only at VERBOSE."""
        DebugLogger._log("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        """Error log; ignores the category switches."""
        DebugLogger._log("FAIL", msg, category)

    # ===========================================================
    # Boot Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a section header."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        line = "─" * DebugLogger.LINE_LENGTH
        title_line = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        print(f"\n{Colors.WHITE}{line}\n{title_line}{Colors.RESET}\n")

    @staticmethod
    def init_entry(item: str):
        """Print a dotted "> item ...... [OK]" boot line."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        label = f"> {item}"
        dots = max(DebugLogger.LINE_LENGTH - len(label) - len(" [OK]") - 1, 1)
        print(f"{Colors.WHITE}{label} {'.' * dots} {Colors.GREEN}[OK]{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str):
        """Print an indented detail under the last boot line."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"    • {Colors.WHITE}{detail}{Colors.RESET}")
