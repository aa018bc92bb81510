#!/usr/bin/env python3
"""
Color scheme generator CLI.

Generates Material-Design-3-style color tokens from 1-4 hex seed colors and
writes them as JSON, CSS custom properties and a plain-text summary.

Usage:
  generate-scheme "#0051e0"
  generate-scheme "#0051e0" "#40617f" "#006878" "#bb0e45"
  generate-scheme "#0051e0" --variant tonalspot --strategy triadic
  generate-scheme "#0051e0" --policy hsl --legacy-seed-order
  CSG_OUTPUT_DIR=tokens generate-scheme "#0051e0" --no-preview

Notes:
  - Seed order is primary, secondary, tertiary, error.
  - Defaults come from, in order: command-line flags, CSG_* environment
    variables, the `scheme:` section of configs/default.yaml / config.yaml.
  - Nothing is written when validation or generation fails.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from common import settings
from common.env import to_bool
from common.logging import setup_default_logging
from util.color import is_hex_color
from util.utils import scheme_defaults

from .api import generate_color_scheme_from_colors
from .errors import MAX_COLORS, MIN_COLORS, SchemeError
from .export import ExportFormat
from .harmony import ColorStrategy
from .seeds import SchemePolicy
from .summary import generate_summary, render_preview
from .variant import SchemeVariant

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "generated-colors"

INVALID_COUNT_MESSAGE = f"""\
Invalid input: You must provide between {MIN_COLORS} and {MAX_COLORS} hex color codes.

Usage:
  generate-scheme <primary> [secondary] [tertiary] [error]

Examples:
  generate-scheme "#0051e0"
  generate-scheme "#0051e0" "#40617f"
  generate-scheme "#0051e0" "#40617f" "#006878"
  generate-scheme "#0051e0" "#40617f" "#006878" "#bb0e45"

Note: Colors must be in hex format (e.g. #RRGGBB).
"""


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    ap = argparse.ArgumentParser(
        prog="generate-scheme",
        description="Generate a light/dark color scheme from 1-4 seed colors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument(
        "colors",
        nargs="*",
        help="1-4 hex colors (#RRGGBB). Order: primary, secondary, tertiary, error.",
    )
    ap.add_argument("--variant", choices=[v.value for v in SchemeVariant], default=None)
    ap.add_argument("--strategy", choices=[s.value for s in ColorStrategy], default=None)
    ap.add_argument("--policy", choices=[p.value for p in SchemePolicy], default=None)
    ap.add_argument(
        "--legacy-seed-order",
        action="store_true",
        default=None,
        help="hsl policy: first color is the tertiary role (earlier releases)",
    )
    ap.add_argument("--output-dir", "-o", type=Path, default=None)
    ap.add_argument(
        "--no-preview",
        dest="preview",
        action="store_false",
        default=None,
        help="Do not print the terminal preview",
    )
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return ap.parse_args(argv)


def resolve_options(args: argparse.Namespace, cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Merge flags, environment settings and YAML config into final options."""
    env = settings.get()

    def pick(flag: Any, env_value: Any, key: str, default: Any) -> Any:
        if flag is not None:
            return flag
        if env_value is not None:
            return env_value
        return cfg.get(key, default)

    return {
        "policy": pick(args.policy, None, "policy", SchemePolicy.TONAL.value),
        "variant": pick(args.variant, None, "variant", SchemeVariant.VIBRANT.value),
        "strategy": pick(args.strategy, None, "strategy", ColorStrategy.COMPLEMENTARY.value),
        "legacy_seed_order": to_bool(pick(args.legacy_seed_order, None, "legacy_seed_order", False)),
        "output_dir": Path(pick(args.output_dir, env.OUTPUT_DIR, "output_dir", DEFAULT_OUTPUT_DIR)),
        "preview": to_bool(pick(args.preview, env.PREVIEW, "preview", True), True),
    }


def validate_colors(colors: Sequence[str]) -> Optional[str]:
    """Return an error message, or None when the input is acceptable."""
    if len(colors) < MIN_COLORS or len(colors) > MAX_COLORS:
        return INVALID_COUNT_MESSAGE
    for color in colors:
        if not is_hex_color(color):
            return f"Invalid hex color: {color}. Please use format #RRGGBB"
    return None


def build_base_filename(colors: Sequence[str], label: str, now: Optional[datetime] = None) -> str:
    timestamp = (now or datetime.now(timezone.utc)).strftime("%Y-%m-%dT%H-%M-%S")
    suffix = "-".join(c[1:].lower() for c in colors)
    return f"color-scheme-{suffix}-{label}-{timestamp}"


def write_artifacts(output_dir: Path, files: Dict[str, str]) -> List[Path]:
    """Write all artifacts; on failure remove the ones already written."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    try:
        for name, content in files.items():
            path = output_dir / name
            # Tracked before writing: a failed write may leave a truncated file.
            written.append(path)
            path.write_text(content, encoding="utf-8")
    except OSError:
        for path in written:
            path.unlink(missing_ok=True)
        raise
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_default_logging(args.log_level or settings.get().LOG_LEVEL)
    opts = resolve_options(args, scheme_defaults())

    problem = validate_colors(args.colors)
    if problem is not None:
        print(problem, file=sys.stderr)
        return 1

    print(f"Generating color scheme from {len(args.colors)} color(s):")
    for i, color in enumerate(args.colors, start=1):
        print(f"  Color {i}: {color}")

    try:
        result = generate_color_scheme_from_colors(
            args.colors,
            opts["variant"],
            opts["strategy"],
            policy=opts["policy"],
            legacy_seed_order=opts["legacy_seed_order"],
        )
    except (SchemeError, ValueError) as e:
        print(f"Error generating color scheme: {e}", file=sys.stderr)
        return 1

    label = opts["variant"] if opts["policy"] == SchemePolicy.TONAL.value else opts["policy"]
    base = build_base_filename(args.colors, label)
    summary = generate_summary(
        args.colors,
        base,
        result.scheme,
        variant=opts["variant"],
        strategy=opts["strategy"],
        policy=opts["policy"],
        legacy_seed_order=opts["legacy_seed_order"],
    )
    files = {
        f"{base}{ExportFormat.JSON.suffix}": result.json,
        f"{base}{ExportFormat.CSS.suffix}": result.css,
        f"{base}-summary.txt": summary,
    }

    try:
        paths = write_artifacts(opts["output_dir"], files)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1
    for path in paths:
        logger.info("wrote %s", path)

    if opts["preview"]:
        render_preview(result.scheme)

    print(f"Saved to: {opts['output_dir']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
