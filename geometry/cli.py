"""
Command-Line Interface

CLI for point and segment distance queries.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from .core.point import Point
from .core.segment import Segment, CLOSEST_METHODS
from sg_policies.precision import PrecisionPolicy


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="segment-geometry",
        description="Segment Geometry - point and segment distance queries",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Distance command
    dist_parser = subparsers.add_parser("distance", help="Closest distance between two segments")
    dist_parser.add_argument(
        "--seg1",
        type=str,
        required=True,
        help='First segment as six numbers "x1 y1 z1 x2 y2 z2"',
    )
    dist_parser.add_argument(
        "--seg2",
        type=str,
        required=True,
        help='Second segment as six numbers "x1 y1 z1 x2 y2 z2"',
    )
    dist_parser.add_argument(
        "--method",
        type=str,
        choices=list(CLOSEST_METHODS),
        default=None,
        help="Closest distance method (default: refined)",
    )
    dist_parser.add_argument(
        "--tolerance",
        type=float,
        default=None,
        help="Parallel/degenerate detection threshold (default: machine epsilon)",
    )
    dist_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full closest approach as JSON",
    )

    # Point command
    point_parser = subparsers.add_parser("point", help="Parse and print a point")
    point_parser.add_argument("coords", type=str, help='Point as "x y z"')
    point_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Keep whatever coordinates parse; missing ones default to 0",
    )

    # Normalize command
    norm_parser = subparsers.add_parser("normalize", help="Print the unit vector of a point")
    norm_parser.add_argument("coords", type=str, help='Vector as "x y z"')

    # Common arguments for all commands
    for p in [dist_parser, point_parser, norm_parser]:
        p.add_argument(
            "--policy",
            type=str,
            default=None,
            help="Path to a PrecisionPolicy JSON file",
        )
        p.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose output",
        )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        policy = PrecisionPolicy.load(args.policy) if args.policy else PrecisionPolicy()

        if args.command == "distance":
            run_distance(args, policy)
        elif args.command == "point":
            run_point(args, policy)
        elif args.command == "normalize":
            run_normalize(args, policy)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


def parse_segment(text: str, strict: bool = True) -> Segment:
    """Parse six whitespace-separated numbers into a Segment."""
    tokens = text.split()
    if len(tokens) != 6:
        raise ValueError(f"Expected 6 numbers for a segment, got {len(tokens)}: {text!r}")
    start, end = _split_points(tokens, strict)
    return Segment(start, end)


def _split_points(tokens: List[str], strict: bool) -> Tuple[Point, Point]:
    start = Point.parse(" ".join(tokens[:3]), strict=strict)
    end = Point.parse(" ".join(tokens[3:]), strict=strict)
    return start, end


def run_distance(args, policy: PrecisionPolicy):
    """Run the distance command."""
    seg1 = parse_segment(args.seg1, strict=policy.strict_parse)
    seg2 = parse_segment(args.seg2, strict=policy.strict_parse)

    approach = Segment.closest_approach(
        seg1, seg2,
        tolerance=args.tolerance,
        method=args.method,
        policy=policy,
    )

    if args.json:
        print(json.dumps(approach.to_dict(), indent=2))
    else:
        print(f"{approach.distance:.12g}")


def run_point(args, policy: PrecisionPolicy):
    """Run the point command."""
    strict = policy.strict_parse and not args.lenient
    print(Point.parse(args.coords, strict=strict))


def run_normalize(args, policy: PrecisionPolicy):
    """Run the normalize command."""
    point = Point.parse(args.coords, strict=policy.strict_parse)
    print(point.normalize(policy.effective_normalize_epsilon()))


if __name__ == "__main__":
    sys.exit(main())
