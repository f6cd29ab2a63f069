"""
graphgen/cli.py — Command-line interface for graphgen.

Parses a degree list, forwards it to the generator and prints or saves the
resulting edge set.

Usage:
    python -m graphgen generate 3 3 2 2 2         # print edges "u v" per line
    python -m graphgen generate --file degs.csv --output edges.csv --seed 41
    python -m graphgen check 5 1                   # graphical / not graphical
    python -m graphgen sample 50 --gamma 2.5       # random power-law sequence

Exit codes:
    0  success
    1  sequence is not graphical (or no sample could be drawn)
    2  bad command-line input
    3  edge sampling exhausted its attempt budget
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from graphgen.config import DEFAULT_CONFIG
from graphgen.exceptions import GenerationExhausted, InvalidDistributionException
from graphgen.graph.graphical import FEASIBILITY_TESTS, get_feasibility_test
from graphgen.sequences import parse_degree_list, read_degree_sequence_csv

EXIT_OK = 0
EXIT_NOT_GRAPHICAL = 1
EXIT_BAD_INPUT = 2
EXIT_EXHAUSTED = 3


# ── Logging setup ─────────────────────────────────────────────────────────────

def _setup_logging(level: str = "INFO") -> None:
    """Configure root logger with timestamps and level names."""
    numeric = getattr(logging, level.upper(), logging.INFO)
    fmt = "%(asctime)s  %(levelname)-8s  %(name)s — %(message)s"
    datefmt = "%H:%M:%S"
    logging.basicConfig(level=numeric, format=fmt, datefmt=datefmt, stream=sys.stderr)
    logging.getLogger("matplotlib").setLevel(logging.WARNING)


logger = logging.getLogger("graphgen.cli")


def _load_degrees(args: argparse.Namespace) -> list[int]:
    if args.file and args.degrees:
        raise ValueError("pass degrees either inline or with --file, not both")
    if args.file:
        return read_degree_sequence_csv(args.file, column=args.column)
    return parse_degree_list(" ".join(args.degrees))


# ── Subcommand: generate ─────────────────────────────────────────────────────

def cmd_generate(args: argparse.Namespace) -> int:
    """Sample a realization and print or save its edges."""
    _setup_logging(args.log_level)

    from graphgen.graph.generator import realize_degree_sequence
    from graphgen.graph.materialize import write_edge_list

    try:
        degrees = _load_degrees(args)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.max_attempts is not None and args.max_attempts < 0:
        print("error: --max-attempts must be >= 0", file=sys.stderr)
        return EXIT_BAD_INPUT
    if args.max_restarts < 0:
        print("error: --max-restarts must be >= 0", file=sys.stderr)
        return EXIT_BAD_INPUT

    max_attempts = args.max_attempts if args.max_attempts else None
    config = replace(
        DEFAULT_CONFIG,
        max_attempts_per_edge=max_attempts,
        max_restarts=args.max_restarts,
        feasibility_test=args.feasibility_test,
        seed=args.seed,
    )

    try:
        result = realize_degree_sequence(degrees, config=config)
    except InvalidDistributionException as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_NOT_GRAPHICAL
    except GenerationExhausted as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_EXHAUSTED

    if args.output:
        write_edge_list(result.edges, args.output)
    else:
        for u, v in sorted(result.edges):
            print(f"{u} {v}")

    if args.plot or args.draw:
        from graphgen.viz.figures import draw_realization, plot_degree_comparison

        if args.plot:
            plot_degree_comparison(degrees, result.edges, args.plot)
        if args.draw:
            draw_realization(result.edges, len(degrees), args.draw, seed=args.seed)

    logger.info(
        "Done: %d nodes, %d edges, %d restart(s).",
        len(degrees), len(result.edges), result.restarts,
    )
    return EXIT_OK


# ── Subcommand: check ────────────────────────────────────────────────────────

def cmd_check(args: argparse.Namespace) -> int:
    """Report whether a degree sequence is graphical."""
    _setup_logging(args.log_level)

    try:
        degrees = _load_degrees(args)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    test = get_feasibility_test(args.feasibility_test)
    if test(degrees):
        print("graphical")
        return EXIT_OK
    print("not graphical")
    return EXIT_NOT_GRAPHICAL


# ── Subcommand: sample ───────────────────────────────────────────────────────

def cmd_sample(args: argparse.Namespace) -> int:
    """Print a random graphical power-law degree sequence."""
    _setup_logging(args.log_level)

    from graphgen.sequences import powerlaw_degree_sequence

    try:
        sequence = powerlaw_degree_sequence(
            args.n,
            gamma=args.gamma,
            seed=args.seed,
            min_degree=args.min_degree,
            max_degree=args.max_degree,
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except RuntimeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_NOT_GRAPHICAL

    print(",".join(str(d) for d in sequence))
    return EXIT_OK


# ── Argument parser ───────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphgen",
        description="Random simple graphs with a prescribed degree sequence.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sample a 4-cycle-like realization of [2,2,2,2]
  python -m graphgen generate 2 2 2 2 --seed 41

  # Degrees from a CSV column, edges to CSV, figures alongside
  python -m graphgen generate --file degrees.csv --output edges.csv \\
      --plot degrees.png --draw graph.png

  # Is [5,1] graphical?
  python -m graphgen check 5 1

  # Draw a power-law sequence and realize it
  python -m graphgen generate $(python -m graphgen sample 40 --seed 1)
        """,
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    def add_degree_input(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "degrees",
            nargs="*",
            metavar="DEGREE",
            help="Target degrees, one per node (commas or spaces)",
        )
        p.add_argument(
            "--file",
            default=None,
            metavar="CSV",
            help="Read degrees from a CSV file instead",
        )
        p.add_argument(
            "--column",
            default="degree",
            metavar="NAME",
            help="CSV column holding the degrees (default: degree)",
        )
        p.add_argument(
            "--feasibility-test",
            default=DEFAULT_CONFIG.feasibility_test,
            choices=sorted(FEASIBILITY_TESTS),
            help=f"Graphicality test (default: {DEFAULT_CONFIG.feasibility_test})",
        )

    # generate
    p_generate = subparsers.add_parser(
        "generate",
        help="Sample a simple graph realizing the degree sequence",
    )
    add_degree_input(p_generate)
    p_generate.add_argument(
        "--seed", type=int, default=None, metavar="N",
        help="Random seed for reproducible output",
    )
    p_generate.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_CONFIG.max_attempts_per_edge,
        metavar="N",
        help=(
            "Partner draws per pivot before giving up; 0 = unbounded "
            f"(default: {DEFAULT_CONFIG.max_attempts_per_edge})"
        ),
    )
    p_generate.add_argument(
        "--max-restarts",
        type=int,
        default=DEFAULT_CONFIG.max_restarts,
        metavar="N",
        help=f"Restarts of a run that exhausted its attempts (default: {DEFAULT_CONFIG.max_restarts})",
    )
    p_generate.add_argument(
        "--output", default=None, metavar="PATH",
        help="Write edges as CSV (source,target) instead of printing them",
    )
    p_generate.add_argument(
        "--plot", default=None, metavar="PNG",
        help="Write a requested-vs-realized degree chart",
    )
    p_generate.add_argument(
        "--draw", default=None, metavar="PNG",
        help="Write a drawing of the realized graph",
    )
    p_generate.set_defaults(func=cmd_generate)

    # check
    p_check = subparsers.add_parser(
        "check",
        help="Test whether the degree sequence is graphical",
    )
    add_degree_input(p_check)
    p_check.set_defaults(func=cmd_check)

    # sample
    p_sample = subparsers.add_parser(
        "sample",
        help="Print a random graphical power-law degree sequence",
    )
    p_sample.add_argument("n", type=int, metavar="N", help="Number of nodes")
    p_sample.add_argument(
        "--gamma", type=float, default=2.5,
        help="Power-law exponent, > 1 (default: 2.5)",
    )
    p_sample.add_argument("--seed", type=int, default=None, metavar="N")
    p_sample.add_argument(
        "--min-degree", type=int, default=1, metavar="K",
        help="Smallest sampled degree (default: 1)",
    )
    p_sample.add_argument(
        "--max-degree", type=int, default=None, metavar="K",
        help="Largest allowed degree (default: N-1)",
    )
    p_sample.set_defaults(func=cmd_sample)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
