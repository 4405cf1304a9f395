# taskkit

This package bundles four small console programs:

- **knapsack**: works out the heaviest load of gold ingots that still fits in a backpack.
- **trains**: lists the trains that depart after a time you give.
- **ranges**: expands a list such as `1-3,7,10-12` into single numbers.
- **snake**: the classic snake game, played in the terminal.

## Installation

```
pip install .
```

To get pytest as well, install the `test` extra:

```
pip install ".[test]"
```

## Commands

### taskkit-knapsack

```
taskkit-knapsack [PATH]
```

The command reads a text file made of whitespace-separated integers. The first integer is the backpack capacity and the second is the number of ingots. The ingot weights come after those two. The command prints the largest total weight that fits into the backpack. If you give no PATH, it reads `input_1.txt` from the current directory. If the file cannot be opened, the command exits with status 1.

### taskkit-trains

```
taskkit-trains [PATH] [--count N]
```

The command reads the first `N` records from a timetable file, skipping blank lines. `N` is 8 unless you pass `--count`. Each record has the form `name;train_id;HH:MM`. The command then asks for a time as `HH:MM` and prints every train that departs strictly later, in the same record format. If no train departs later, it prints a message saying so. If you give no PATH, it reads `Train.dat`. It exits with status 1 in three cases: the file is missing, a record is malformed, or the timetable holds fewer records than requested.

### taskkit-ranges

```
taskkit-ranges 1-3,7,10-12
```

```
1 2 3 7 10 11 12 
```

The argument is split at commas, and empty items are skipped. An item that contains `-` is an inclusive range, split at its first `-`. A range whose end is below its start produces nothing.

### taskkit-snake

```
taskkit-snake
```

This starts the game on a 10×10 field, with one tick every 350 ms. Steer with `w`, `a`, `s` and `d`. The snake cannot reverse straight back on itself. It wraps around at the edges of the field. You win when the snake fills the whole field and lose when it runs into itself. The final length is printed at the end. The command exits with status 0 on a win and 1 on a loss. It needs a POSIX terminal, because keys are read without echo and without waiting for Enter.

## Library use

```python
import random

from taskkit.knapsack import max_weight, read_input
from taskkit.ranges import expand_ranges
from taskkit.trains import departures_after, parse_flight
from taskkit.snake_field import Direction, Field, neighbour, turn
from taskkit.snake_game import play, render

max_weight(10, [3, 4, 5])          # 9
expand_ranges("1-3,5")             # [1, 2, 3, 5]

flight = parse_flight("Moscow;12;18:30")
departures_after([flight], 18, 0)  # [flight]

turn(Direction.LEFT, "d")          # Direction.LEFT (no reversing)
neighbour((0, 0), Direction.UP, 10)  # (9, 0)

field = Field.generate(10, random.Random(1))
print(render(field))
```

`play(size, delay, keys, rng, output)` runs a whole game and returns a `Rating` with `length` and `win`. `keys` is a callable that is polled once per tick for the latest key, or `None` when no key was pressed. `output` receives each drawn frame. `KeyReader` is a context manager that switches the terminal into the mode the game needs, and its `read_key` method can be passed as `keys`.