"""Human-readable reporting of a generated scheme.

- :func:`generate_summary` builds the plain-text summary written next to
  the JSON/CSS artifacts.
- :func:`build_preview_table` / :func:`render_preview` show base and
  container swatches per theme in the terminal via rich.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Mapping, Optional, Sequence

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from .assembly import scheme_key
from .roles import THEMES

PREVIEW_ROLES = ("primary", "secondary", "tertiary", "success", "warning", "error", "info")
SEED_ROLE_NAMES = ("Primary", "Secondary", "Tertiary", "Error")
LEGACY_SEED_ROLE_NAMES = ("Tertiary", "Primary", "Secondary", "Error")


def generate_summary(
    colors: Sequence[str],
    base_filename: str,
    scheme: Mapping[str, str],
    *,
    variant: str,
    strategy: str,
    policy: str,
    legacy_seed_order: bool = False,
    generated_at: Optional[datetime] = None,
) -> str:
    """Return the plain-text summary of one generation run."""
    stamp = (generated_at or datetime.now(timezone.utc)).isoformat(timespec="seconds")
    light_count = sum(1 for k in scheme if k.startswith("light__"))
    dark_count = sum(1 for k in scheme if k.startswith("dark__"))

    names = LEGACY_SEED_ROLE_NAMES if legacy_seed_order and policy == "hsl" else SEED_ROLE_NAMES
    by_role = dict(zip(names, colors))
    seed_lines = "\n".join(
        f"- {name}: {by_role.get(name, 'Generated automatically')}" for name in SEED_ROLE_NAMES
    )

    return (
        "Color Scheme Generation Summary\n"
        f"Generated at: {stamp}\n"
        f"Input colors: {', '.join(colors)}\n"
        f"Policy: {policy}  Variant: {variant}  Strategy: {strategy}\n"
        "\n"
        "Files generated:\n"
        f"- {base_filename}.json (Complete color scheme object)\n"
        f"- {base_filename}.css (CSS custom properties)\n"
        "\n"
        "Seed colors used:\n"
        f"{seed_lines}\n"
        "\n"
        "The color scheme includes:\n"
        f"- Light theme colors ({light_count} properties)\n"
        f"- Dark theme colors ({dark_count} properties)\n"
        "- Fixed colors for both themes\n"
        "- Semantic colors (warning, success, info, error)\n"
        "- Surface and container variants\n"
        "\n"
        "To use in your project:\n"
        "1. Copy the CSS custom properties to your stylesheet\n"
        "2. Import the JSON in your JavaScript/TypeScript code\n"
        f"3. Apply the colors using the CSS variables (e.g., var(--{scheme_key('light', 'primary')}))\n"
    )


def _swatch(label: str, bg: str, fg: str) -> Text:
    return Text(f" {label} {bg} ", style=Style(color=fg, bgcolor=bg))


def build_preview_table(scheme: Mapping[str, str], theme: str) -> Table:
    """Table with one row per role: base swatch and container swatch."""
    table = Table(title=f"{theme.upper()} THEME", show_header=True, header_style="bold")
    table.add_column("role")
    table.add_column("base")
    table.add_column("container")

    for role in PREVIEW_ROLES:
        base = scheme.get(scheme_key(theme, role))
        if base is None:
            continue
        on = scheme.get(scheme_key(theme, role, "on"), "#000000")
        container = scheme.get(scheme_key(theme, role, suffix="container"))
        on_container = scheme.get(scheme_key(theme, role, "on", "container"), on)
        table.add_row(
            role,
            _swatch(role, base, on),
            _swatch(f"{role} container", container, on_container) if container else Text(""),
        )
    return table


def render_preview(scheme: Mapping[str, str], console: Optional[Console] = None) -> None:
    """Print preview tables for both themes."""
    console = console or Console()
    for theme in THEMES:
        console.print(build_preview_table(scheme, theme))


__all__ = ["generate_summary", "build_preview_table", "render_preview"]
