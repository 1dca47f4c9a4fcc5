"""
__main__.py
-----------
Small demo game: `python -m sgc`.

Balls bounce around the window and off each other; the paddle follows the
arrow keys, clicking a ball scores a point and Esc ends the game. Images
are drawn at start-up, so the demo needs no asset files.
"""

import random

import pygame

from sgc import Game, Sprite


BALL_SIZE = 32
PADDLE_SIZE = (96, 20)


def _ball_surface(color):
    surface = pygame.Surface((BALL_SIZE, BALL_SIZE), pygame.SRCALPHA)
    pygame.draw.circle(surface, color, (BALL_SIZE // 2, BALL_SIZE // 2), BALL_SIZE // 2)
    return surface


def _paddle_surface():
    surface = pygame.Surface(PADDLE_SIZE, pygame.SRCALPHA)
    surface.fill((200, 200, 220))
    return surface


class Ball(Sprite):
    def __init__(self, game, x, y):
        super().__init__(game)
        self.name = "A ball"
        self.image = random.choice(("red ball", "blue ball"))
        self.x = x
        self.y = y
        self.angle = random.uniform(0, 360)
        self.speed = random.uniform(120, 220)

    def handle_game_loop(self):
        # Reflect off the window edges
        if self.x < 0 or self.x + self.width > self.game.display_width:
            self.x = min(max(self.x, 0), self.game.display_width - self.width)
            self.angle = 180 - self.angle
        if self.y < 0 or self.y + self.height > self.game.display_height:
            self.y = min(max(self.y, 0), self.game.display_height - self.height)
            self.angle = -self.angle

    def handle_mouse_click(self):
        self.game.score += 1
        self.game.remove_sprite(self)
        if not any(isinstance(s, Ball) for s in self.game.sprites):
            self.game.end("          You caught them all!")

    def handle_collision(self, other):
        return True


class Paddle(Sprite):
    STEP = 8

    def __init__(self, game):
        super().__init__(game)
        self.name = "The paddle"
        self.image = "paddle"
        self.accelerate_on_bounce = False
        self.x = (game.display_width - PADDLE_SIZE[0]) / 2
        self.y = game.display_height - 60

    def handle_left_arrow_key(self):
        self.x = max(0, self.x - self.STEP)

    def handle_right_arrow_key(self):
        self.x = min(self.game.display_width - self.width, self.x + self.STEP)

    def handle_esc_key(self):
        self.game.end()


def main():
    game = Game({"display": {"caption": "sgc demo"}, "show_score": True})

    game.engine.assets.add_surface("red ball", _ball_surface((220, 60, 60)))
    game.engine.assets.add_surface("blue ball", _ball_surface((60, 120, 220)))
    game.engine.assets.add_surface("paddle", _paddle_surface())

    hint = game.create_text_area(220, 560)
    game.write_to_text_area(hint, "Arrows move the paddle, click the balls")

    Paddle(game)
    for _ in range(6):
        Ball(game,
             random.uniform(0, game.display_width - BALL_SIZE),
             random.uniform(0, game.display_height / 2))

    game.run()


if __name__ == "__main__":
    main()
