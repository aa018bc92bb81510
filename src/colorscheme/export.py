"""Serialization of schemes to JSON and CSS custom properties.

Both formats emit keys in the scheme's insertion order.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_JSON_FILENAME = "color-scheme.json"


class ExportFormat(Enum):
    """Supported text formats for exported schemes."""

    JSON = "json"
    CSS = "css"

    @classmethod
    def from_value(cls, value: "ExportFormat | str") -> "ExportFormat":
        if isinstance(value, cls):
            return value
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")

    @property
    def suffix(self) -> str:
        return f".{self.value}"


def scheme_to_json(scheme: Mapping[str, str]) -> str:
    """Return the scheme as 2-space indented JSON."""
    return json.dumps(dict(scheme), indent=2)


def generate_css_custom_properties(scheme: Mapping[str, str]) -> str:
    """Return a ``:root { ... }`` block with one ``--key: value;`` line per key."""
    lines = "\n".join(f"  --{key}: {value};" for key, value in scheme.items())
    return f":root {{\n{lines}\n}}\n"


def export_scheme(scheme: Mapping[str, str], fmt: ExportFormat | str) -> str:
    """Serialize ``scheme`` in the desired format."""
    export_fmt = ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.JSON:
        return scheme_to_json(scheme)
    if export_fmt == ExportFormat.CSS:
        return generate_css_custom_properties(scheme)
    raise ValueError(f"Unsupported export format: {fmt}")


def export_scheme_to_json(
    scheme: Mapping[str, str], filename: str | Path = DEFAULT_JSON_FILENAME
) -> Path:
    """Write the scheme as JSON to ``filename`` and return the path.

    A single blocking write; ``OSError`` propagates to the caller.
    """
    path = Path(filename)
    path.write_text(scheme_to_json(scheme), encoding="utf-8")
    logger.debug("wrote %s", path)
    return path


__all__ = [
    "DEFAULT_JSON_FILENAME",
    "ExportFormat",
    "scheme_to_json",
    "generate_css_custom_properties",
    "export_scheme",
    "export_scheme_to_json",
]
