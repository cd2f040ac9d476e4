"""The snake: its movement on a wrapping grid, growth and death."""

from __future__ import annotations

import math
from enum import Enum


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


_INITIAL_SPEED = {
    Difficulty.EASY: 0.1,
    Difficulty.MEDIUM: 0.2,
    Difficulty.HARD: 0.4,
}


class Snake:
    """A snake whose head moves continuously and whose body follows by cells."""

    def __init__(self, grid_width: int, grid_height: int, difficulty: Difficulty):
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.difficulty = difficulty
        self.direction = Direction.UP
        self.speed = _INITIAL_SPEED[difficulty]
        self.size = 1
        self.alive = True
        self.head_x = float(grid_width // 2)
        self.head_y = float(grid_height // 2)
        self.body: list[tuple[int, int]] = []
        self._growing = False

    def _head_cell(self) -> tuple[int, int]:
        return int(self.head_x), int(self.head_y)

    def update(self) -> None:
        """Move the head one step and let the body follow if the cell changed."""
        prev_cell = self._head_cell()
        self._update_head()
        current_cell = self._head_cell()
        if current_cell != prev_cell:
            self._update_body(current_cell, prev_cell)

    def _update_head(self) -> None:
        if self.direction is Direction.UP:
            self.head_y -= self.speed
        elif self.direction is Direction.DOWN:
            self.head_y += self.speed
        elif self.direction is Direction.LEFT:
            self.head_x -= self.speed
        elif self.direction is Direction.RIGHT:
            self.head_x += self.speed
        self.head_x = math.fmod(self.head_x + self.grid_width, self.grid_width)
        self.head_y = math.fmod(self.head_y + self.grid_height, self.grid_height)

    def _update_body(self, current_cell, prev_cell) -> None:
        self.body.append(prev_cell)
        if self._growing:
            self._growing = False
            self.size += 1
        else:
            self.body.pop(0)
        if current_cell in self.body:
            self.alive = False

    def grow_body(self) -> None:
        """Grow by one cell on the next move into a new cell."""
        self._growing = True

    def snake_cell(self, x: int, y: int) -> bool:
        """Return whether the cell ``(x, y)`` is occupied by the snake."""
        return (x, y) == self._head_cell() or (x, y) in self.body