"""Checks of Kirchhoff's first and second laws on a described circuit."""

from __future__ import annotations

import sys
from collections import defaultdict
from dataclasses import dataclass, field

OPEN_NODE = "Circuitul este deschis in nodul {}."
FIRST_LAW_OK = "Legea 1 a lui Kirchhoff se respecta pentru circuitul dat."
FIRST_LAW_FAIL = (
    "Legea 1 a lui Kirchhoff nu se respecta pentru egalitatea "
    "{:.9f}A = {:.9f}A in nodul {}."
)
SECOND_LAW_OK = "Legea a 2-a lui Kirchhoff se respecta pentru circuitul dat."
SECOND_LAW_FAIL = (
    "Legea a 2-a lui Kirchhoff nu se respecta pentru egalitatea {:.9f}V = {:.9f}V."
)
NEGATIVE_SOURCE = "Sursa de tensiune nu poate fi negativa."
UNKNOWN_COMPONENT = "Componenta dorita nu exista."
UNKNOWN_LAW = "Legile existente sunt doar Legea 1 si Legea a 2-a"


@dataclass(frozen=True)
class Wire:
    """A wire carrying ``current`` from node ``source`` to node ``target``."""

    source: int
    target: int
    current: float


@dataclass
class Branch:
    """A branch with a current and a list of ``(kind, value)`` components."""

    current: float
    components: list[tuple[str, float]] = field(default_factory=list)


def first_law(node_count: int, wires: list[Wire]) -> str:
    """Return the verdict of the first law for the circuit."""
    inputs: defaultdict[int, float] = defaultdict(float)
    outputs: defaultdict[int, float] = defaultdict(float)
    touches: defaultdict[int, int] = defaultdict(int)
    for wire in wires:
        inputs[wire.source] += wire.current
        outputs[wire.target] += wire.current
        touches[wire.source] += 1
        touches[wire.target] += 1

    for node in range(node_count):
        if outputs[node] == 0 and inputs[node] != 0 and touches[node] in (0, 1):
            return OPEN_NODE.format(node)

    bad_node = None
    for node in range(node_count):
        if inputs[node] == 0 and outputs[node] == 0:
            if not any(
                inputs[j] != 0 or outputs[j] != 0 for j in range(node, node_count + 1)
            ):
                return OPEN_NODE.format(node)
        if bad_node is None and abs(inputs[node] - outputs[node]) > 1e-8:
            bad_node = node

    if bad_node is None:
        return FIRST_LAW_OK
    return FIRST_LAW_FAIL.format(outputs[bad_node], inputs[bad_node], bad_node)


def second_law(branches: list[Branch]) -> str:
    """Return the report (one or more lines) of the second law for the circuit."""
    lines: list[str] = []
    negatives = 0
    plus = minus = 0.0
    for branch in branches:
        saved_plus, saved_minus = plus, minus
        for kind, value in branch.components:
            if kind == "E" and value < 0:
                lines.append(NEGATIVE_SOURCE)
                return "\n".join(lines)
            if value < 0:
                negatives += 1
                plus, minus = saved_plus, saved_minus
                break
            if kind == "R":
                minus += branch.current * value
            elif kind == "E":
                plus += value
            else:
                lines.append(UNKNOWN_COMPONENT)
    lines.extend([UNKNOWN_COMPONENT] * negatives)
    if abs(minus - plus) < 1e-10:
        lines.append(SECOND_LAW_OK)
    else:
        lines.append(SECOND_LAW_FAIL.format(minus, plus))
    return "\n".join(lines)


def _parse_first(tokens: list[str]) -> tuple[int, list[Wire]]:
    it = iter(tokens)
    node_count, wire_count = int(next(it)), int(next(it))
    wires = [
        Wire(int(next(it)), int(next(it)), float(next(it))) for _ in range(wire_count)
    ]
    return node_count, wires


def _parse_second(tokens: list[str]) -> list[Branch]:
    it = iter(tokens)
    next(it)
    branch_count = int(next(it))
    branches = []
    for _ in range(branch_count):
        next(it)
        next(it)
        current = float(next(it))
        count = int(next(it))
        components = [(next(it)[0], float(next(it))) for _ in range(count)]
        branches.append(Branch(current, components))
    return branches


def run(text: str) -> str:
    """Process a whole input document and return the program output."""
    head, _, rest = text.partition("\n")
    if head == "I":
        return first_law(*_parse_first(rest.split())) + "\n"
    if head.startswith("II"):
        if head != "II":
            return UNKNOWN_LAW + "\n"
        return second_law(_parse_second(rest.split())) + "\n"
    return ""


def main(argv=None) -> int:
    sys.stdout.write(run(sys.stdin.read()))
    return 0