"""
errors.py
---------
Error kinds reported to the person writing a game.

No error is raised across the facade. Each is a configuration
mistake surfaced once through report_error(), which logs the problem
and shows a blocking alert; execution then continues with a placeholder
asset or a no-op.
"""

from sgc.core.debug.debug_logger import DebugLogger


class SgcError(Exception):
    """Base class for problems reported by sgc."""

    prefix = "Error"

    def user_message(self) -> str:
        return f"{self.prefix}: {self}"


class MissingAssetError(SgcError):
    """An image was referenced but never preloaded."""

    def __init__(self, sprite_name, image):
        self.sprite_name = sprite_name
        self.image = image
        super().__init__(f"{sprite_name} uses an image {image} that was not preloaded.")


class AssetLoadError(SgcError):
    """An image file could not be read from disk."""

    def __init__(self, file_name):
        self.file_name = file_name
        super().__init__(f"Unable to load file {file_name}")


class MisuseError(SgcError):
    """A facade helper was used with the wrong kind of argument or at the wrong time."""

    prefix = "Warning"


def report_error(engine, error: SgcError):
    """
    Report a non-fatal error to the console and to the player.

    Args:
        engine: Engine used to show the alert; may be None before one exists
        error: The error to report
    """
    message = error.user_message()
    DebugLogger.fail(message)
    if engine is not None:
        engine.alert(message)
    return error
