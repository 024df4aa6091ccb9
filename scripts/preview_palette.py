"""
Headless preview for poline palettes.

Builds a palette from anchor colors given on the command line and exports a
PNG with one swatch per flattened color for quick inspection.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) in sys.path:
    sys.path.remove(str(SRC_ROOT))
sys.path.insert(0, str(SRC_ROOT))

from common import setup_default_logging  # noqa: E402
from poline import LineSampling, Poline, PolineOptions, PositionScale, default_rng  # noqa: E402
from poline.preview import render_swatches_png  # noqa: E402

logger = logging.getLogger("scripts.preview_palette")


def parse_anchor(text: str) -> tuple[float, float, float]:
    """Parse ``"h,s,l"`` into a color triple."""
    parts = [p for p in text.split(",") if p.strip()]
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"anchor must be 'h,s,l', got {text!r}")
    try:
        h, s, l = (float(p) for p in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"anchor must be numeric, got {text!r}") from exc
    return (h, s, l)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--anchors", type=parse_anchor, nargs="*", default=None, help="h,s,l triples")
    p.add_argument("--num-points", type=int, default=4)
    p.add_argument("--position-function", default="sinusoidal", help="name or ordinal 0-8")
    p.add_argument("--closed-loop", action="store_true")
    p.add_argument("--inverted-lightness", action="store_true")
    p.add_argument(
        "--sampling", choices=[m.value for m in LineSampling], default=LineSampling.TRUNCATED.value
    )
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--out", default="screenshots/poline.png")
    p.add_argument("--log-level", default=None)
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    fn = args.position_function
    options = PolineOptions(
        anchor_colors=args.anchors or None,
        num_points=args.num_points,
        position_function=PositionScale.from_value(int(fn) if fn.isdigit() else fn),
        inverted_lightness=args.inverted_lightness,
        closed_loop=args.closed_loop,
        line_sampling=LineSampling.from_value(args.sampling),
    )
    poline = Poline(options, rng=default_rng(args.seed))
    colors = poline.colors()
    for css in poline.colors_css():
        logger.info("%s", css)
    render_swatches_png(colors, args.out)
    print(args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
