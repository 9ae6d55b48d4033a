"""Command line entry point: generate one color map and print it."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from . import __version__
from .types.map_type import MapType, OutputFormat
from .colormaps.assembly import generate
from .defaults import resolve_params
from .export import serialize

logger = logging.getLogger(__name__)

# argparse dest -> resolve_params option
PARAM_OPTIONS = (
    "hue", "divergence", "contrast", "saturation", "brightness", "warmth",
    "lightness", "rotations", "temperature", "range", "lightness_range",
    "saturation_range", "gamma", "color0", "color1", "periods",
)


def byte_triplet(text: str) -> Tuple[int, int, int]:
    """Parse "r,g,b" with each channel in [0, 255]."""
    parts = text.split(",")
    try:
        values = tuple(int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected r,g,b integers, got {text!r}") from None
    if len(values) != 3 or not all(0 <= v <= 255 for v in values):
        raise argparse.ArgumentTypeError(f"expected three values in [0, 255], got {text!r}")
    return values  # type: ignore[return-value]


def build_parser() -> argparse.ArgumentParser:
    # -h is the hue, so help gets -H
    parser = argparse.ArgumentParser(
        prog="gencolormap",
        description=(
            "Generates a color map and prints it to standard output. "
            "Prints the number of colors that had to be clipped to standard error."
        ),
        epilog="Angles are in degrees. Defaults: format=csv, n=256, type=brewer-sequential",
        add_help=False,
    )
    parser.add_argument('-H', '--help', action='help', help='Show this help and exit')
    parser.add_argument('-v', '--version', action='version', version=f'gencolormap {__version__}')
    parser.add_argument('--verbose', action='store_true', help='Log debug messages to standard error')

    common = parser.add_argument_group('common options')
    common.add_argument('-f', '--format', default=OutputFormat.CSV.value,
                        choices=[f.value for f in OutputFormat], help='Output format')
    common.add_argument('-t', '--type', default=MapType.BREWER_SEQUENTIAL.value,
                        choices=[m.value for m in MapType], metavar='TYPE',
                        help='Color map type: %(choices)s')
    common.add_argument('-n', '--n', type=int, default=256, help='Number of colors, at least 2')
    common.add_argument('-o', '--output', metavar='FILE', help='Write to FILE instead of standard output')

    maps = parser.add_argument_group('color map options (defaults depend on the type)')
    maps.add_argument('-h', '--hue', type=float, help='Hue in degrees')
    maps.add_argument('-d', '--divergence', type=float, help='Hue divergence in degrees')
    maps.add_argument('-c', '--contrast', type=float, help='Contrast in [0,1]')
    maps.add_argument('-s', '--saturation', type=float, help='Saturation')
    maps.add_argument('-b', '--brightness', type=float, help='Brightness in [0,1]')
    maps.add_argument('-w', '--warmth', type=float, help='Warmth in [0,1]')
    maps.add_argument('-l', '--lightness', type=float, help='Lightness in [0,1]')
    maps.add_argument('-r', '--rotations', type=float, help='Number of hue rotations')
    maps.add_argument('-T', '--temperature', type=float, help='Start temperature in K')
    maps.add_argument('-R', '--range', type=float,
                      help='Lightness, saturation or temperature range, depending on the type')
    maps.add_argument('--lightness-range', dest='lightness_range', type=float, help='Lightness range in [0,1]')
    maps.add_argument('--saturation-range', dest='saturation_range', type=float, help='Saturation range in [0,1]')
    maps.add_argument('-g', '--gamma', type=float, help='CubeHelix gamma correction, > 0')
    maps.add_argument('-A', '--color0', type=byte_triplet, metavar='R,G,B', help='First Moreland color')
    maps.add_argument('-O', '--color1', type=byte_triplet, metavar='R,G,B', help='Last Moreland color')
    maps.add_argument('-p', '--periods', type=float, help='McNames number of periods')
    return parser


def write_output(data, path: Optional[str]) -> None:
    payload = data.encode("ascii") if isinstance(data, str) else data
    if path is None:
        if isinstance(data, str):
            sys.stdout.write(data)
        else:
            sys.stdout.buffer.write(payload)
        sys.stdout.flush()
        return
    with open(path, "wb") as f:
        f.write(payload)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    overrides = {name: getattr(args, name) for name in PARAM_OPTIONS}
    try:
        params = resolve_params(args.type, args.n, **overrides)
    except ValueError as e:
        parser.error(str(e))

    result = generate(args.type, args.n, params)
    write_output(serialize(result.colors, args.format), args.output)
    if args.output is not None:
        logger.info("wrote %d colors to %s", result.n, args.output)
    print(f"{result.clipped} color(s) were clipped", file=sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
