"""
text_area.py
------------
On-screen text boxes: user text areas, the scoreboard and the game-over banner.
"""

import pygame

from sgc.core.runtime.game_settings import Text


class TextArea:
    """A block of (possibly multi-line) text drawn over a translucent box."""

    def __init__(self, x, y, font_size=Text.FONT_SIZE, background=Text.BACKGROUND, text=""):
        """
        Args:
            x: Left edge of the box
            y: Top edge of the box
            font_size: Point size of the system font
            background: RGBA box color, or None for no box
            text: Initial content
        """
        self.x = x
        self.y = y
        self.font_size = font_size
        self.background = background
        self.text = text
        self._font = None

    def _get_font(self):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont(Text.FONT_NAME, self.font_size)
        return self._font

    def render(self, surface):
        """Draw this text area onto surface."""
        if not self.text:
            return

        font = self._get_font()
        lines = [font.render(line, True, Text.COLOR) for line in self.text.split("\n")]
        width = max(line.get_width() for line in lines)
        height = sum(line.get_height() for line in lines)

        box = pygame.Surface((width, height), pygame.SRCALPHA)
        if self.background is not None:
            box.fill(self.background)

        y = 0
        for line in lines:
            box.blit(line, ((width - line.get_width()) // 2, y))
            y += line.get_height()

        surface.blit(box, (self.x, self.y))

    def __repr__(self) -> str:
        return f"<TextArea ({self.x}, {self.y}) {self.text!r}>"
