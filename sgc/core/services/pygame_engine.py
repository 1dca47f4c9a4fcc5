"""
pygame_engine.py
----------------
Engine that shows a game in a pygame window.

Responsibilities:
- Window creation and caption
- Event pump feeding the InputManager, quit detection
- Frame pacing with pygame.time.Clock
- Layered rendering: background, sprites, text areas, scoreboard, game over
- Blocking alert box for reported errors
"""

import pygame

from sgc.core.debug.debug_logger import DebugLogger
from sgc.core.runtime.game_settings import Debug, Display, Text
from sgc.core.services.engine import Engine


class PygameEngine(Engine):
    """Engine backed by a real pygame display."""

    ALERT_BOX_COLOR = (40, 40, 40)
    ALERT_BORDER_COLOR = (255, 255, 255)

    def __init__(self, width=Display.WIDTH, height=Display.HEIGHT,
                 caption=Display.CAPTION, asset_dir=None, blocking_alerts=True):
        """
        Args:
            width: Window width in pixels
            height: Window height in pixels
            caption: Window title
            asset_dir: Directory image file names are resolved against
            blocking_alerts: Wait for a key or click before continuing after an alert
        """
        super().__init__(width, height, asset_dir)
        self.caption = caption
        self.blocking_alerts = blocking_alerts
        self.screen = None
        self.clock = None

    # ===========================================================
    # Window
    # ===========================================================

    def _open_display(self):
        pygame.init()
        pygame.font.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.caption)
        self.clock = pygame.time.Clock()

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {self.width}x{self.height} '{self.caption}'")

    def poll_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                DebugLogger.action("Quit signal received")
                return False
            self.input.handle_event(event)
        return True

    def wait_frame(self, fps) -> float:
        if self.clock is None:
            return super().wait_frame(fps)
        return self.clock.tick(fps) / 1000.0

    def shutdown(self):
        pygame.quit()
        super().shutdown()

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, scoreboard=None):
        """Draw back to front: background, sprites, text, scoreboard, banner."""
        if self.screen is None:
            return

        self.screen.fill(Display.BACKGROUND_COLOR)

        if self.background is not None:
            self.background.render(self.screen)

        self.sprites.draw(self.screen)

        if Debug.HITBOX_VISIBLE:
            for live in self.sprites.sprites():
                pygame.draw.rect(self.screen, Debug.HITBOX_COLOR, live.rect, 1)

        for area in self.texts:
            area.render(self.screen)

        if scoreboard is not None:
            scoreboard.render(self.screen)

        if self.game_over_text is not None:
            self.game_over_text.render(self.screen)

        pygame.display.flip()

    # ===========================================================
    # Alerts
    # ===========================================================

    def alert(self, message):
        """Show message in a box and wait for a key press or click."""
        DebugLogger.warn(f"Alert: {message}", category="ui")
        if self.screen is None or not self.blocking_alerts:
            return

        font = pygame.font.SysFont(Text.FONT_NAME, Text.FONT_SIZE - 6)
        text = font.render(message, True, Text.COLOR)
        hint = font.render("Press any key to continue", True, Text.COLOR)

        width = min(max(text.get_width(), hint.get_width()) + 40, self.width)
        height = text.get_height() + hint.get_height() + 40
        box = pygame.Rect(0, 0, width, height)
        box.center = (self.width // 2, self.height // 2)

        pygame.draw.rect(self.screen, self.ALERT_BOX_COLOR, box)
        pygame.draw.rect(self.screen, self.ALERT_BORDER_COLOR, box, 2)
        self.screen.blit(text, (box.x + 20, box.y + 15))
        self.screen.blit(hint, (box.x + 20, box.y + 25 + text.get_height()))
        pygame.display.flip()

        while True:
            event = pygame.event.wait()
            if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN, pygame.QUIT):
                if event.type == pygame.QUIT:
                    pygame.event.post(pygame.event.Event(pygame.QUIT))
                return
