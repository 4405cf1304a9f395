"""Terminal snake game."""

from __future__ import annotations

import os
import random
import select
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass

from taskkit.snake_field import APPLE, EMPTY, Direction, Field, neighbour, turn

FIELD_SIZE = 10
DELAY_MS = 350
_CLEAR = "\x1b[2J\x1b[H"


@dataclass(frozen=True)
class Rating:
    """Outcome of a game: the snake's final length and whether it filled the field."""

    length: int
    win: bool


class KeyReader:
    """Non-blocking key reader; puts a terminal into unbuffered, no-echo mode."""

    def __init__(self, fd: int | None = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._saved = None

    def __enter__(self) -> KeyReader:
        if os.isatty(self.fd):
            import termios

            self._saved = termios.tcgetattr(self.fd)
            attrs = termios.tcgetattr(self.fd)
            attrs[3] &= ~(termios.ICANON | termios.ECHO)
            attrs[6][termios.VMIN] = 1
            attrs[6][termios.VTIME] = 0
            termios.tcsetattr(self.fd, termios.TCSANOW, attrs)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved is not None:
            import termios

            termios.tcsetattr(self.fd, termios.TCSANOW, self._saved)
            self._saved = None

    def read_key(self) -> str | None:
        """Drain pending input and return the last key, or None if there was none."""
        data = b""
        while select.select([self.fd], [], [], 0)[0]:
            chunk = os.read(self.fd, 1)
            if not chunk:
                break
            data += chunk
        text = data.decode("utf-8", errors="ignore")
        return text[-1] if text else None


_SYMBOLS = {APPLE: "🍎 ", EMPTY: "⬛ "}


def render(field: Field) -> str:
    """Draw the field, one text line per row."""
    return "".join(
        "".join(_SYMBOLS.get(value, "🐍 ") for value in row) + "\n" for row in field.cells
    )


def _show(frame: str) -> None:
    sys.stdout.write(_CLEAR + frame)
    sys.stdout.flush()


def play(
    size: int = FIELD_SIZE,
    delay: int = DELAY_MS,
    keys: Callable[[], str | None] | None = None,
    rng: random.Random | None = None,
    output: Callable[[str], None] | None = None,
) -> Rating:
    """Run the game until the snake bites itself or fills the field.

    ``keys`` is polled once per tick for the latest key press, ``output``
    receives every drawn frame and ``delay`` is the tick length in milliseconds.
    """
    rng = rng or random.Random()
    keys = keys or (lambda: None)
    output = output or _show

    field = Field.generate(size, rng)
    length = 1
    direction = Direction.LEFT

    while True:
        direction = turn(direction, keys())
        target = neighbour(field.head(length), direction, size)
        value = field[target]
        if value == APPLE:
            length = field.lengthen(length, target)
            if length == size * size:
                output(render(field))
                return Rating(length, True)
            field.add_apple(rng)
        elif value in (EMPTY, 1):
            field[target] = length + 1
        else:
            return Rating(length, False)

        field.step()
        output(render(field))
        time.sleep(delay / 1000)


def main(argv: list[str] | None = None) -> int:
    with KeyReader() as reader:
        result = play(FIELD_SIZE, DELAY_MS, reader.read_key)
    if not result.win:
        print(f"Ты проиграл!\nДлина: {result.length}")
        return 1
    print(f"Ты выйграл!\nДлина: {result.length}")
    return 0


if __name__ == "__main__":
    sys.exit(main())