"""A grid-based snake game with the rules kept apart from the window."""

from __future__ import annotations

import argparse
import enum
import os
import random
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

WIDTH = 800
HEIGHT = 600
BOX_SIZE = 20
INITIAL_SPEED = 10
INITIAL_SNAKE = ((10, 10), (10, 11), (10, 12))


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Direction(enum.Enum):
    """A direction of travel, valued by its (dx, dy) step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        dx, dy = self.value
        return Direction((-dx, -dy))


@dataclass(frozen=True)
class Segment:
    """One cell of the grid."""

    x: int
    y: int

    def moved(self, direction: Direction) -> Segment:
        dx, dy = direction.value
        return Segment(self.x + dx, self.y + dy)


class StepResult(enum.Enum):
    """What happened during one step of the game."""

    MOVED = "moved"
    ATE = "ate"
    DIED = "died"
    OVER = "over"


class SnakeGame:
    """Game state: the snake, its heading, the food, score and speed."""

    def __init__(
        self,
        columns: int = WIDTH // BOX_SIZE,
        rows: int = HEIGHT // BOX_SIZE,
        rng: _RandomSource | None = None,
    ) -> None:
        if columns < 1 or rows < 1:
            raise ValueError("the grid needs at least one column and one row")
        self.columns = columns
        self.rows = rows
        self.rng: _RandomSource = rng if rng is not None else random.Random()
        self.snake: deque[Segment] = deque(Segment(x, y) for x, y in INITIAL_SNAKE)
        self.direction = Direction.UP
        self.score = 0
        self.speed = INITIAL_SPEED
        self.game_over = False
        self.food = self.place_food()

    @property
    def head(self) -> Segment:
        return self.snake[0]

    def turn(self, direction: Direction) -> bool:
        """Change heading unless it would reverse the current one; report success."""
        if direction is self.direction.opposite():
            return False
        self.direction = direction
        return True

    def _outside(self, cell: Segment) -> bool:
        return not (0 <= cell.x < self.columns and 0 <= cell.y < self.rows)

    def step(self) -> StepResult:
        """Advance the snake by one cell."""
        if self.game_over:
            return StepResult.OVER

        new_head = self.head.moved(self.direction)
        died = self._outside(new_head) or new_head in self.snake
        if died:
            self.game_over = True

        self.snake.appendleft(new_head)
        ate = new_head == self.food
        if ate:
            self.score += 1
            self.speed += 1
            self.food = self.place_food()
        else:
            self.snake.pop()

        if died:
            return StepResult.DIED
        return StepResult.ATE if ate else StepResult.MOVED

    def place_food(self) -> Segment:
        """Pick a random cell for the food and return it."""
        x = self.rng.randrange(self.columns)
        y = self.rng.randrange(self.rows)
        self.food = Segment(x, y)
        return self.food


def _load_sound(pygame, path: Path):
    try:
        return pygame.mixer.Sound(str(path))
    except (pygame.error, FileNotFoundError):
        return None


def _play(sound) -> None:
    if sound is not None:
        sound.play()


def _load_font(pygame, path: Path, size: int):
    try:
        return pygame.font.Font(str(path), size)
    except (pygame.error, FileNotFoundError, OSError):
        return pygame.font.Font(None, size)


def main(argv: list[str] | None = None) -> int:
    """Open a window and play the game until it is closed."""
    parser = argparse.ArgumentParser(description="Snake game.")
    parser.add_argument("--assets", default="assets", help="directory of font and sounds")
    args = parser.parse_args(argv)
    assets = Path(args.assets)

    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        pygame.mixer.init()
        eat_sound = _load_sound(pygame, assets / "eat.wav")
        die_sound = _load_sound(pygame, assets / "die.wav")
    except pygame.error:
        eat_sound = die_sound = None

    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake Game")
    score_font = _load_font(pygame, assets / "font.ttf", 20)
    over_font = _load_font(pygame, assets / "font.ttf", 30)
    clock = pygame.time.Clock()

    keys = {
        pygame.K_UP: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
    }
    game = SnakeGame(WIDTH // BOX_SIZE, HEIGHT // BOX_SIZE)
    cell = (BOX_SIZE - 1, BOX_SIZE - 1)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in keys:
                game.turn(keys[event.key])
        if not running:
            break

        if not game.game_over:
            result = game.step()
            if result is StepResult.DIED:
                _play(die_sound)
            if game.head == game.snake[0] and result is StepResult.ATE:
                _play(eat_sound)

            screen.fill((0, 0, 0))
            for segment in game.snake:
                pygame.draw.rect(
                    screen, (0, 255, 0), ((segment.x * BOX_SIZE, segment.y * BOX_SIZE), cell)
                )
            pygame.draw.rect(
                screen,
                (255, 0, 0),
                ((game.food.x * BOX_SIZE, game.food.y * BOX_SIZE), cell),
            )
            text = score_font.render(f"Score: {game.score}", True, (255, 255, 255))
            screen.blit(text, (10, 10))
        else:
            y = HEIGHT // 2
            for line in ("GAME OVER", f"Score: {game.score}"):
                text = over_font.render(line, True, (255, 255, 0))
                screen.blit(text, (WIDTH // 3, y))
                y += text.get_height()

        pygame.display.flip()
        clock.tick(game.speed)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())