"""
main_loop.py
------------
Frame loop driving a Game on its engine.

Responsibilities:
- Boot the game if the caller has not
- Pace frames and clamp long frames
- Coordinate event polling, the game tick and rendering
- Shut the engine down on quit
"""

from sgc.core.debug.debug_logger import DebugLogger
from sgc.core.runtime.game_settings import Physics


class MainLoop:
    """
    Runtime controller for one Game.

    Variable timestep: each frame advances the game by the real frame
    time, clamped to Physics.MAX_FRAME_TIME so a stall cannot tunnel
    sprites through each other.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, game):
        self.game = game
        self.engine = game.engine
        self.running = False
        self.frame_count = 0

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self, max_frames=None):
        """
        Execute the frame loop until quit.

        Args:
            max_frames: Stop after this many frames (None runs until quit)
        """
        self.game.boot()

        DebugLogger.section("Game Loop")
        self.running = True
        fps = self.game.config.fps

        try:
            while self.running:
                frame_time = self.engine.wait_frame(fps)
                frame_time = min(frame_time, Physics.MAX_FRAME_TIME)

                if not self.engine.poll_events():
                    self.running = False
                    break

                self.game.tick(frame_time)
                self.engine.render(self.game.scoreboard)

                self.frame_count += 1
                if max_frames is not None and self.frame_count >= max_frames:
                    self.running = False
        finally:
            self.engine.shutdown()
            DebugLogger.system(f"Loop stopped after {self.frame_count} frames")
