"""Keyboard control of the snake."""

from __future__ import annotations

import pygame

from .snake import Direction

_KEY_DIRECTIONS = {
    pygame.K_UP: (Direction.UP, Direction.DOWN),
    pygame.K_DOWN: (Direction.DOWN, Direction.UP),
    pygame.K_LEFT: (Direction.LEFT, Direction.RIGHT),
    pygame.K_RIGHT: (Direction.RIGHT, Direction.LEFT),
}


class Controller:
    """Turns key presses into changes of the snake's direction."""

    def change_direction(self, snake, direction, opposite) -> None:
        """Turn unless that would reverse a snake longer than one cell."""
        if snake.direction != opposite or snake.size == 1:
            snake.direction = direction

    def handle_key(self, snake, key) -> None:
        """Apply one key press; keys other than the arrows are ignored."""
        move = _KEY_DIRECTIONS.get(key)
        if move is not None:
            self.change_direction(snake, *move)

    def handle_input(self, snake) -> bool:
        """Process pending events; return ``False`` once the window is closed."""
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                self.handle_key(snake, event.key)
        return running