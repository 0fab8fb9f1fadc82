import argparse
import logging
import sys
from typing import List, Optional, Sequence

from circulator import (
    Circulator,
    CirculatorOptions,
    InsertionError,
    ValidationError,
    ParseError,
    check_circles,
    count_disjoint_circles,
    disjoint_ratio,
    format_circles,
    generate_participants,
    parse_participants,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_sizes(value: Optional[str]) -> Optional[List[int]]:
    if not value:
        return None
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"group sizes must be integers: {value!r}")


def _print_stats(limit: int) -> None:
    for n in range(2, limit + 1):
        print(f"{n}: {count_disjoint_circles(n)} ({disjoint_ratio(n)})")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Stage three disjoint hunting circles for a murder game"
    )
    parser.add_argument(
        "players",
        nargs="*",
        help="Players as name/group (or just name), space or comma separated",
    )
    parser.add_argument(
        "--generate",
        type=int,
        metavar="N",
        help="Generate N players P1..PN instead of reading them",
    )
    group_opts = parser.add_mutually_exclusive_group()
    group_opts.add_argument(
        "--groups",
        type=int,
        metavar="G",
        help="Assign generated players randomly to G groups",
    )
    group_opts.add_argument(
        "--group-sizes",
        type=_parse_sizes,
        metavar="S1,S2,...",
        help="Explicit group sizes for generated players, e.g. 10,8,5",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: unseeded)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Check the staged circles and print any violations",
    )
    parser.add_argument(
        "--stats",
        type=int,
        metavar="N",
        help="Print the share of circles disjoint from a given one for 2..N players",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.stats is not None:
        _print_stats(args.stats)
        return

    options = CirculatorOptions(random_seed=args.seed)
    rng = options.make_rng()

    try:
        if args.players:
            players = parse_participants(args.players)
        elif args.generate is not None or args.group_sizes:
            groups = args.group_sizes if args.group_sizes else args.groups
            n = args.generate if args.generate is not None else sum(args.group_sizes)
            players = generate_participants(n, groups, rng)
        else:
            parser.error("give players or --generate N")
        logger.info("Staging circles for %d player(s)", len(players))
        circ = Circulator(players, options=options, rng=rng)
    except (ParseError, ValidationError) as exc:
        logger.error("%s", exc)
        raise SystemExit(2)
    except InsertionError as exc:
        logger.error("Staging failed: %s", exc)
        raise SystemExit(1)

    print(format_circles(circ.circles()))

    if args.check:
        warnings = check_circles(circ.participants)
        print("Warnings:")
        if warnings:
            for warning in warnings:
                print(f"  - {warning}")
        else:
            print("  (none)")


if __name__ == "__main__":
    main(sys.argv[1:])
