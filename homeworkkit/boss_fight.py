"""A fight against a sequence of bosses using a pool of shields."""

from __future__ import annotations

import sys

_USED = -1


class ShieldPool:
    """Shields kept largest first; each fight narrows the usable window by one."""

    def __init__(self, shields):
        self._slots = sorted((s for s in shields if s), reverse=True)
        self._count = len(self._slots)

    def _sort_window(self) -> None:
        n = max(self._count, 0)
        self._slots[:n] = sorted(self._slots[:n], reverse=True)

    def choose(self, damage: int) -> int:
        """Pick the shield for one fight, or 0 when none fits."""
        n = max(self._count, 0)
        window = self._slots[:n]
        pick = next(
            (i for i, s in enumerate(window) if damage >= s and s != _USED), None
        )
        if pick is None:
            pick = next(
                (i for i in reversed(range(n)) if damage <= window[i]), None
            )
        chosen = 0
        if pick is not None:
            chosen = self._slots[pick]
            self._slots[pick] = _USED
        self._sort_window()
        self._count -= 1
        return chosen


def simulate(health: int, items, bosses) -> str:
    """Run the fight; ``items`` are ``(kind, value)`` pairs, kind 'S' or 'H'."""
    out: list[str] = []
    shields = []
    for kind, value in items:
        if kind == "S":
            shields.append(value)
        elif kind == "H":
            health += value
        else:
            out.append("Invalid item type.")
    out.append(f"Initial health points: {health}")
    pool = ShieldPool(shields)
    for damage in bosses:
        shield = pool.choose(damage)
        if health - damage + shield > 0:
            if shield <= damage:
                health = health - damage + shield
            out.append(f"{health} {shield}" if shield else f"{health}")
            continue
        if shield:
            health = health - damage + shield
            out.append(f"{max(health, 0) if health > 0 else 0} {shield}")
        else:
            out.append("0")
        out.append("You died.")
        return "\n".join(out) + "\n"
    out.append("Foe Vanquished!")
    return "\n".join(out) + "\n"


def run(text: str) -> str:
    """Process a whole input document and return the program output."""
    tokens = iter(text.split())
    health, count = int(next(tokens)), int(next(tokens))
    items = [(next(tokens)[0], int(next(tokens))) for _ in range(count)]
    boss_count = int(next(tokens))
    bosses = [int(t) for _, t in zip(range(boss_count), tokens)]
    return simulate(health, items, bosses)


def main(argv=None) -> int:
    sys.stdout.write(run(sys.stdin.read()))
    return 0