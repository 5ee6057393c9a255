"""Command-line polygon intersection scan.

Examples:
  polycross-scan --a "0,0 1,0 1,1 0,1" --b "0.5,0.5 1.5,0.5 1.5,1.5 0.5,1.5"
  polycross-scan --a ... --b ... --points --vectorized numba
  polycross-scan --a ... --b ... --plot overlap.png --log-level DEBUG
"""
from __future__ import annotations

import argparse
import json
import re
import sys
from typing import List, Optional, Sequence

from .core.config import ScanConfig
from .core.layers import scan_polygons
from .core.logging_utils import configure_logging, get_logger

logger = get_logger('polycross.cli')


def parse_flat(text: str) -> List[float]:
    """Parse "x0,y0 x1,y1 ..." (any mix of commas/whitespace) into floats."""
    tokens = [t for t in re.split(r'[,\s]+', text.strip()) if t]
    try:
        return [float(t) for t in tokens]
    except ValueError as exc:
        raise ValueError(f"could not parse coordinates {text!r}: {exc}") from exc


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='polycross-scan',
                                description='Intersect the edges of two closed polygons.')
    p.add_argument('--a', required=True, help='Flat vertices of polygon A, e.g. "0,0 1,0 1,1 0,1"')
    p.add_argument('--b', required=True, help='Flat vertices of polygon B')
    p.add_argument('--points', action='store_true', help='Print [[x, y], ...] instead of the flat list')
    p.add_argument('--vectorized', nargs='?', const='numpy', choices=['numpy', 'numba'], default=None,
                   help='Use an array backend (default numpy when given without a value)')
    p.add_argument('--plot', default=None, help='Write a diagnostic PNG to this path')
    p.add_argument('--log-level', default='WARNING', help='Logging level (default: WARNING)')
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        a = parse_flat(args.a)
        b = parse_flat(args.b)
        cfg = ScanConfig(backend=args.vectorized or 'python')
        flat = scan_polygons(a, b, cfg)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logger.info("%d intersection(s)", len(flat) // 2)
    if args.points:
        print(json.dumps([[flat[i], flat[i + 1]] for i in range(0, len(flat), 2)]))
    else:
        print(json.dumps(flat))

    if args.plot:
        from .core.visualization import plot_intersections
        plot_intersections(a, b, flat, outname=args.plot)
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
