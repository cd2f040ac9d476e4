"""The snake game: food placement, scoring, the frame loop and a score file."""

from __future__ import annotations

import random
import re
import threading
import time
from concurrent.futures import Future
from pathlib import Path

from .snake import Difficulty, Snake

DEFAULT_SCORES_PATH = "../scores/scores.txt"

_LEADING_INT = re.compile(r"\s*(-?\d+)")
_RECORD = re.compile(r"\s*(-?\d+)\s*:\s*(-?\d+)")
_ASYNC_DELAY = 0.01


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


def _in_thread(function) -> Future:
    """Run ``function`` in a new thread and return a future for its result."""
    future: Future = Future()

    def target():
        if not future.set_running_or_notify_cancel():
            return
        try:
            future.set_result(function())
        except BaseException as exc:  # handed to whoever waits on the future
            future.set_exception(exc)

    threading.Thread(target=target, daemon=True).start()
    return future


class Game:
    """One round of snake on a wrapping grid, with a shared score file."""

    def __init__(
        self,
        grid_width: int,
        grid_height: int,
        name: str,
        level: Difficulty = Difficulty.HARD,
        scores_path=DEFAULT_SCORES_PATH,
        rng=None,
    ):
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.name = name
        self.level = level
        self.scores_path = Path(scores_path)
        self.score = 0
        self.snake = Snake(grid_width, grid_height, level)
        self.food: tuple[int, int] = (0, 0)
        self._rng = rng if rng is not None else random.Random()
        self._file_condition = threading.Condition()
        self.file_exists = False
        self.place_food()

    @property
    def size(self) -> int:
        """Length of the snake in cells."""
        return self.snake.size

    def run(self, controller, renderer, target_frame_duration: int) -> None:
        """Run input, update and render until the controller reports a quit."""
        title_timestamp = _now_ms()
        frame_count = 0
        running = True
        while running:
            frame_start = _now_ms()

            running = controller.handle_input(self.snake)
            self.update()
            renderer.render(self.snake, self.food)

            frame_end = _now_ms()
            frame_count += 1
            frame_duration = frame_end - frame_start

            if frame_end - title_timestamp >= 1000:
                renderer.update_window_title(self.score, frame_count)
                frame_count = 0
                title_timestamp = frame_end

            if frame_duration < target_frame_duration:
                time.sleep((target_frame_duration - frame_duration) / 1000)

    def place_food(self) -> None:
        """Put the food on a random cell not occupied by the snake."""
        while True:
            x = self._rng.randint(0, self.grid_width - 1)
            y = self._rng.randint(0, self.grid_height - 1)
            if not self.snake.snake_cell(x, y):
                self.food = (x, y)
                return

    def update(self) -> None:
        """Advance the snake; eating food scores, grows and speeds it up."""
        if not self.snake.alive:
            return
        self.snake.update()
        head = (int(self.snake.head_x), int(self.snake.head_y))
        if head == self.food:
            self.score += 1
            self.place_food()
            self.snake.grow_body()
            self.snake.speed += 0.02

    # -- score file -----------------------------------------------------

    def write_score(self) -> None:
        """Append ``attempt : score - name`` to the score file."""
        with self._file_condition:
            attempt = 1
            if self.scores_path.exists():
                lines = self.scores_path.read_text(encoding="utf-8").splitlines()
                last = next((line for line in reversed(lines) if line.strip()), None)
                if last is None:
                    previous = 1
                else:
                    match = _LEADING_INT.match(last)
                    previous = int(match.group(1)) if match else 0
                attempt = previous + 1
            self.scores_path.parent.mkdir(parents=True, exist_ok=True)
            with self.scores_path.open("a", encoding="utf-8") as stream:
                stream.write(f"{attempt} : {self.score} - {self.name}\n")
            self._file_condition.notify_all()

    def reset_scores(self) -> None:
        """Empty the score file if it exists."""
        with self._file_condition:
            if self.scores_path.exists():
                self.file_exists = True
                self.scores_path.write_text("", encoding="utf-8")
            self._file_condition.notify_all()

    def read_highest_score(self) -> int | None:
        """Print and return the highest recorded score, or ``None`` if there is none."""
        with self._file_condition:
            highest = None
            if self.scores_path.exists():
                self.file_exists = True
                for line in self.scores_path.read_text(encoding="utf-8").splitlines():
                    match = _RECORD.match(line)
                    if match is None:
                        continue
                    value = int(match.group(2))
                    if highest is None or value > highest:
                        highest = value
                if highest is not None:
                    print(f"Highest score : {highest}")
            self._file_condition.notify_all()
            return highest

    def write_score_async(self) -> Future:
        time.sleep(_ASYNC_DELAY)
        return _in_thread(self.write_score)

    def reset_scores_async(self) -> Future:
        time.sleep(_ASYNC_DELAY)
        return _in_thread(self.reset_scores)

    def read_highest_score_async(self) -> Future:
        time.sleep(_ASYNC_DELAY)
        return _in_thread(self.read_highest_score)