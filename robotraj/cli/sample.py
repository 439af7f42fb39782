"""
CLI entry point for the robotraj-sample command.

Reads a waypoint document and prints the sampled trajectory as CSV.

Input (JSON, file path or "-" for stdin):
    {"times": [0, 1, 2], "waypoints": [[0, 1, 0]], "mode": "euclidean"}

Output columns: t, p0..p{m-1}, v0..v{m-1}, a0..a{m-1}
"""

import argparse
import csv
import json
import logging
import sys

from robotraj.config import CONTROL_RATE_HZ, LOG_LEVEL_DEFAULT, TRACE
from robotraj.smooth_motion.spline import CubicSplineTrajectory
from robotraj.utils.errors import TrajectoryPlanningError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sample a cubic spline trajectory")
    parser.add_argument("input", nargs="?", default="-", help="Waypoint JSON file ('-' for stdin)")
    parser.add_argument(
        "--rate", type=float, default=CONTROL_RATE_HZ, help="Sample rate in Hz"
    )
    parser.add_argument(
        "--mode", choices=["euclidean", "rotation", "quaternion"],
        help="Override the mode given in the input document",
    )
    parser.add_argument("--no-header", action="store_true", help="Omit the CSV header row")

    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Enable quiet logging (WARNING level)")
    parser.add_argument("--log-level", choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Set specific log level")
    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        if args.log_level == "TRACE":
            return TRACE
        return getattr(logging, args.log_level)
    if args.verbose >= 3:
        return TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.WARNING
    return getattr(logging, LOG_LEVEL_DEFAULT)


def _load_document(path: str):
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def main(argv=None) -> int:
    """Main entry point for the sampler."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=_log_level(args),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        doc = _load_document(args.input)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read waypoints from {args.input}: {e}")
        return 1
    if not isinstance(doc, dict):
        logger.error(f"Expected a JSON object in {args.input}, got {type(doc).__name__}")
        return 1

    try:
        mode = args.mode or doc.get("mode", "euclidean")
        spline = CubicSplineTrajectory(doc["times"], doc["waypoints"], mode)
        ts, pos, vel, acc = spline.sample(args.rate)
    except KeyError as e:
        logger.error(f"Missing field {e} in {args.input}")
        return 1
    except (TrajectoryPlanningError, ValueError, TypeError) as e:
        logger.error(f"Invalid trajectory: {e}")
        return 1

    logger.info(f"Sampled {len(ts)} points from {spline!r} at {args.rate:g} Hz")

    writer = csv.writer(sys.stdout)
    m = spline.dimensions
    if not args.no_header:
        writer.writerow(
            ["t"]
            + [f"p{i}" for i in range(m)]
            + [f"v{i}" for i in range(m)]
            + [f"a{i}" for i in range(m)]
        )
    for k, tk in enumerate(ts):
        writer.writerow([repr(float(tk))] + [repr(float(x)) for x in (*pos[k], *vel[k], *acc[k])])
    return 0


def main_entry():
    """Entry point for the robotraj-sample command."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
