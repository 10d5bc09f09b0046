# homeworkkit

homeworkkit contains four small console exercises. Each one reads its whole input from
standard input and writes its results to standard output. The messages each
command prints are fixed strings, some of them in Romanian. You can find them as
constants at the top of each module.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Commands

### `homeworkkit-circuits`

This command checks Kirchhoff's laws for a circuit. The first line names the law: `I` or `II`.
If the first line starts with `II` but has more characters after it, the command
reports that only the two laws exist.

- Law I: the node count and wire count come first. Then each wire gives `from to current`.
  The output names the first node where the circuit is open. If no node is open,
  the output says either that current is balanced at every node, or which node is
  the first unbalanced one. In that case it prints both sums with nine decimals.
- Law II: the node count and branch count come first. Then each branch gives
  `from to current k` followed by `k` components. A component is `R value` for a
  resistor or `E value` for a source. A negative source stops the check with an
  error. A negative component of any other kind discards that branch and is
  reported as an unknown component. The output compares the sum of the voltage
  drops with the sum of the source voltages.

```
printf 'I\n3 3\n0 1 2\n1 2 2\n2 0 2\n' | homeworkkit-circuits
```

### `homeworkkit-shapes`

This command draws ASCII shapes. The first token is a count, followed by that many commands:

- `p size angle` draws a square. At odd multiples of 45° it draws a diamond instead.
  The angle must be a multiple of 45.
- `d width height` draws a filled rectangle. Both sides must be positive.
- `t size angle` draws a right triangle. The angle must be a multiple of 90.
- `c size angle` draws a cross: a plus sign at multiples of 90°, an X otherwise.
  The size must be odd and the angle a multiple of 45.
- `f size` draws a window, a square frame split into four panes. The size must be odd.

A shape that cannot be drawn prints `Unsupported size to display shape` or
`Unsupported angle to display shape` in its place.

```
printf '2\np 3 0\nf 5\n' | homeworkkit-shapes
```

### `homeworkkit-boss-fight`

This command simulates a fight. The input is read in this order:

1. The starting health.
2. The item count, then the items: `S value` for a shield, `H value` for a heal.
   An item of any other kind is reported as invalid.
3. The boss count, then each boss's damage.

Heals are added to the starting health before the first fight. Each boss uses up one shield.
The shield chosen is the largest one that does not exceed the damage. If there is none,
it is the smallest one that covers the damage. The command prints the health after
each fight, together with the shield used. The fight ends with either `You died.`
or `Foe Vanquished!`.

```
printf '10 2\nS 3\nH 5\n2\n4 6\n' | homeworkkit-boss-fight
```

### `homeworkkit-segment-display`

This command drives a seven-segment display. The first line gives the grid size
`n m` and the segment length `l`. Each later line holds one command:

- `F digit` clears the grid and draws the digit. A value outside 0–9 is reported as not a digit.
- `P` prints the grid, with `^ ` for a lit cell and two spaces otherwise, followed by a blank line.
- `W`, `A`, `S` or `D count` shifts the grid up, left, down or right, wrapping around the edges.
- `Q` quits.

Any other command prints `Invalid command.`.

```
printf '9 9 3\nF 8\nP\nD 1\nP\nQ\n' | homeworkkit-segment-display
```

## Library use

Every module has a `run(text)` function. It takes the whole input as a string
and returns the output text, so you can use it without standard input. The
building blocks are available too:

- `homeworkkit.circuits`: `Wire`, `Branch`, `first_law(node_count, wires)` and
  `second_law(branches)`. The two law functions return the verdict text.
- `homeworkkit.shapes`: `square`, `rectangle`, `triangle`, `cross` and `window`.
  Each one returns the drawing as a string, or raises `ValueError` with the
  unsupported size or angle message.
- `homeworkkit.boss_fight`: `ShieldPool(shields)` and its `choose(damage)` method.
  `simulate(health, items, bosses)` takes `items` as `(kind, value)` pairs.
- `homeworkkit.segment_display`: `SegmentDisplay(rows, cols, length)` with the
  methods `draw_digit`, `shift` and `render`.

```python
from homeworkkit.shapes import window
from homeworkkit.segment_display import SegmentDisplay

print(window(5))

display = SegmentDisplay(9, 9, 3)
display.draw_digit(4)
display.shift("S", 1)
print(display.render())
```

## Running the tests

```
pytest
```