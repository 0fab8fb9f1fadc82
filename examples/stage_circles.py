"""Example: stage three circles from given, random and sized player lists."""

import numpy as np

from circulator import Circulator, InsertionError, check_circles, format_circles

PLAYERS = "A/x B/y C/y D/z E/z F/x G/u H/u I/v J/t K/s L/s".split()


def show(title: str, build) -> None:
    print(f"=== {title}")
    try:
        circ = build()
    except InsertionError as exc:
        print(f"failed: {exc}")
        return
    print(format_circles(circ.circles()))
    for warning in check_circles(circ.participants):
        print(f"  warning: {warning}")


def main() -> None:
    rng = np.random.default_rng(2024)
    show("Circles from given input", lambda: Circulator(PLAYERS, rng=rng))
    show("Circles from random input (20 players, 9 groups)",
         lambda: Circulator.generate(20, 9, rng=rng))
    show("Circles from random input (groups with given sizes)",
         lambda: Circulator.generate(34, [10, 8, 5, 4, 3, 2, 1, 1], rng=rng))


if __name__ == "__main__":
    main()
