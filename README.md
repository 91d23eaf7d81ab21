# interntasks

Four small command-line utilities. Each one lives in its own module:
`interntasks.textfile`, `interntasks.rle`, `interntasks.expression` and
`interntasks.snake`.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Commands

### Text file modes

```
interntasks-textfile [path]
```

This writes `ABC` and `PQR` to the file, which is `intern.txt` unless you give
a path. It then appends `XYZ`, reads the file back and prints every line. If
the file cannot be opened, it prints `Unable to open the file!` and exits with
status 1.

From Python, `interntasks.textfile.write_append_read(path)` does the same and
returns the lines as a list. It raises `OSError` when the file cannot be
opened.

### Run-length encoding

```
interntasks-rle [--directory DIR] [--threads N] [--lines N]
```

The command works in `DIR`, which defaults to the current directory:

1. It writes `input.txt`, made of a fixed test line repeated `--lines` times
   (default 100000).
2. It compresses that file to `compressed.rle`.
3. It decompresses the result to `decompressed.txt`.
4. It checks that file against the original.

It runs through these steps twice: once in a single thread, and once split
across `--threads` worker threads (default 4). It prints how long each pass
took. On an error it prints `Error: ...` to standard error and exits with
status 1.

Each run is stored as a pair of bytes: first the byte value, then the run
length (1–255). A run longer than 255 is split into several pairs.

```python
from interntasks import rle

packed = rle.compress(b"aaab")        # b"a\x03b\x01"
assert rle.decompress(packed) == b"aaab"
```

`rle.decompress` raises `rle.RLEError` when its input has an odd length.

These functions work on files directly, and each one returns the bytes it
wrote:

- `rle.process_file(input_path, output_path, compress, thread_count)` splits
  the input across threads. When compressing, it never splits a run. When
  decompressing, it never splits a pair.
- `rle.process_file_single_thread(input_path, output_path, compress)` does the
  work in the calling thread.

Both raise `rle.RLEError` when the input cannot be read or the output cannot
be opened. `process_file` also raises `ValueError` when `thread_count` is
below 1.

`rle.validate_files(original, decompressed)` prints whether the two files
match and returns `True` or `False`. When they differ, it also prints both
sizes. A file that cannot be read counts as empty.

### Infix expression evaluator

```
interntasks-expr [expression]
```

The command converts the expression to postfix form and prints that form and
the expression's integer value. If you give no expression, it prompts for one
and reads the first word you type.

- The operators are `+ - * / % ^`, and parentheses group terms.
- Only non-negative integer literals are read.
- Division and modulo truncate toward zero.

Errors are printed as `Error: ...`.

```python
from interntasks import expression

postfix = expression.infix_to_postfix("3+4*2")   # "3 4 2 * + "
assert expression.evaluate_postfix(postfix) == 11
```

The module also offers these functions:

- `expression.validate(infix)`
- `expression.is_operator(ch)`
- `expression.precedence(ch)`

Bad input raises `expression.ExpressionError`. That includes:

- an empty expression
- an expression that starts with an operator other than `-`
- unbalanced parentheses
- too few operands
- division or modulo by zero

### Snake

```
interntasks-snake [--assets DIR]
```

The command opens an 800×600 window on a 40×30 grid. The arrow keys steer the
snake, and it cannot reverse onto itself. Each piece of food you eat adds a
point and raises the frame rate by one, starting from 10. The game ends when
the snake hits a wall or itself. Close the window to quit.

The game looks in `DIR` (default `assets`) for these files:

- `font.ttf`
- `eat.wav`
- `die.wav`

If the font is missing, the default font is used. If a sound is missing, it is
not played.

The rules live in `interntasks.snake.SnakeGame`, which you can drive without a
window:

```python
import random
from interntasks.snake import Direction, SnakeGame, StepResult

game = SnakeGame(40, 30, random.Random(0))
game.turn(Direction.LEFT)
result = game.step()
assert result in (StepResult.MOVED, StepResult.ATE, StepResult.DIED)
```

Here is what the game offers:

- `turn(direction)` returns `False` if the new direction would reverse the
  current heading.
- `step()` returns a `StepResult`: `MOVED`, `ATE`, `DIED`, or `OVER` once the
  game has ended.
- `place_food()` puts the food on a random cell.
- The state is kept in `snake`, `direction`, `food`, `score`, `speed` and
  `game_over`.