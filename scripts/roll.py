"""Command line harness for seeded draws with luck scores."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "roll_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from twister_random import DrawConfig, run_draws
from twister_random.report import DRAW_KINDS


def _parse_int_list(value: str) -> tuple[int, ...]:
    """Parse `6,6,20` (or the `3d6` shorthand) into a tuple of die sizes."""

    text = value.strip().lower()
    if not text:
        raise argparse.ArgumentTypeError("Dice list cannot be empty.")

    if "d" in text:
        count, _, sides = text.partition("d")
        try:
            return (int(sides),) * int(count or 1)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"Expected NdS dice notation, received '{value}'.") from exc

    try:
        return tuple(int(part.strip()) for part in text.split(",") if part.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Dice list must contain integers.") from exc


def _parse_float_list(value: str) -> tuple[float, ...]:
    """Parse a comma-separated weight list."""

    if not value.strip():
        raise argparse.ArgumentTypeError("Weight list cannot be empty.")
    try:
        return tuple(float(part.strip()) for part in value.split(",") if part.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Weight list must contain numbers.") from exc


def _parse_seed(value: str) -> int:
    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Seed must be an integer, received '{value}'.") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Roll seeded Mersenne-Twister draws and score their luck")
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=None,
        help="Engine seed (accepts decimal or 0x-prefixed hex); omit for a fresh one",
    )
    parser.add_argument("--kind", choices=DRAW_KINDS, default="int", help="Kind of draw to perform")
    parser.add_argument("--count", type=int, default=3, help="Number of draws")
    parser.add_argument("--min", dest="minimum", type=float, default=1, help="Lower bound for int/float draws")
    parser.add_argument("--max", dest="maximum", type=float, default=6, help="Upper bound for int/float draws")
    parser.add_argument("--probability", type=float, default=0.5, help="Chance of true for bool draws")
    parser.add_argument("--mean", type=float, default=0.0, help="Mean for gaussian draws")
    parser.add_argument("--stddev", type=float, default=1.0, help="Standard deviation for gaussian draws")
    parser.add_argument(
        "--dice",
        metavar="sides",
        type=_parse_int_list,
        default=(6, 6),
        help="Die sizes for dice draws (e.g. 6,6,20 or 3d6)",
    )
    parser.add_argument(
        "--weights",
        metavar="list",
        type=_parse_float_list,
        default=(1.0, 1.0),
        help="Comma-separated weights for weighted draws",
    )
    parser.add_argument(
        "--start-state",
        dest="start_state",
        type=int,
        default=0,
        help="Units to consume before the first reported draw",
    )
    parser.add_argument("--verbose", action="store_true", help="Emit debug logging on stderr")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "roll_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    cfg = DrawConfig(
        seed=args.seed,
        kind=args.kind,
        count=args.count,
        minimum=args.minimum,
        maximum=args.maximum,
        probability=args.probability,
        mean=args.mean,
        stddev=args.stddev,
        dice=args.dice,
        weights=args.weights,
        start_state=args.start_state,
    )
    result = run_draws(cfg)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
