# safecracker

A solver for rotating-ring safe puzzles. A safe is a stack of layers. Each
layer is a ring of numbers in two rows, an outer row and an inner row. An inner
cell may be a hole, written as `-1`. Through a hole you see the outer number of
the next layer. Every layer can be turned. The safe is open when each column,
summed over all layers, equals the target number.

The solver tries every combination of rotations, odometer style, and can
report each position that opens the safe.

## Installation

```
pip install .
```

## Input format

```
<target>
<number of layers>
<number of columns>
<separator line>
<outer row of a layer>
<inner row of a layer>
<separator line>
<outer row of the next layer>
<inner row of the next layer>
...
```

The first three lines give the target sum, the number of layers and the number
of columns; the number of layers and of columns must each be at least 1. Each
layer starts with a separator line whose content is ignored (usually blank),
followed by its outer row and its inner row. A row holds one value for each
column, and each value takes a fixed width of three characters, so a row must
be at least three times the number of columns long. Inner values of `-1` mark
holes. The last layer in the file becomes the first layer of the safe.

A missing line or a row that is too short raises
`safecracker.reader.SafeFileError`, whose message names the line number (the
first line of the file is line 1) and whose `line_number` attribute holds it.

## Usage

```python
from safecracker.reader import read_safe
from safecracker.solver import iter_solutions
from safecracker.report import format_solution

safe = read_safe("puzzle.txt")
count = 0
for solved in iter_solutions(safe):
    print(format_solution(solved), end="")
    count += 1
print(f"Total number of solutions: {count}.")
```

### Modules

- `safecracker.layer`: `Layer` (an `outer` row, an `inner` row and a
  `rotation`, with `outer_at(col)` and `inner_at(col)` giving the value seen at
  a column) and `Safe` (its `layers`, `columns` and `target`, with `offsets()`
  returning every layer's rotation). `HOLE` is the hole marker, `-1`.
- `safecracker.reader`: `read_safe(path)` loads a safe from a file;
  `parse_safe(lines, source)` does the same from lines of text;
  `parse_row(line, columns)` reads one row.
- `safecracker.solver`:
  - `sum_column(safe, col)` sums the values visible in one column. A hole in
    the last layer counts as `-1`.
  - `rotate(safe)` steps to the next rotation and returns `False` once every
    layer has wrapped back to 0.
  - `is_solved(safe)` checks every column against the target.
  - `crack(safe)` rotates from the current position, that position included,
    until the safe is solved (`True`) or the rotations run out (`False`).
  - `iter_solutions(safe)` yields the same safe object in each solved
    position.
- `safecracker.report`: `format_layer(safe, index)` renders one layer's
  visible values, with a hole in the last layer shown as 0.
  `format_solution(safe)` renders every layer, then every layer's rotation, in
  the form `Layer rotation: N`.
- `safecracker.lines`: `iter_lines(stream, chunk_size)` yields the lines of a
  text or binary stream, read in fixed-size chunks.

The package also has small helper modules: `chars` (ASCII character classes
and case conversion), `numbers` (atoi-style parsing and base conversion),
`strings` (C-style comparison and search returning indices), `words`
(splitting and trimming), `strbuild` (building strings from parts), `memory`
(bounds-checked byte buffer operations), `linked` (a singly linked `Node`
list), `arrays` (`bubble_sort`, `find_biggest`) and `matrix` (`Matrix`
holding int or float cells, with `scale`, `add_scalar`, `multiply` and the
`a @ b` operator; `MatrixError` for bad operands).

## What this package does not do

There is no command-line program. The package installs no command. To solve a
puzzle file, call the library as in the example above. That example also
prints the solution count.

## Running the tests

```
pip install ".[test]"
pytest
```