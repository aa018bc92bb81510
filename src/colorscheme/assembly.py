"""Scheme assembly: role sources -> one flat, ordered token mapping.

Keys follow ``{theme}__{name}_hlv`` where ``name`` is the lowercased role
name with its sub-role prefix/suffix, e.g. ``light__onprimarycontainer_hlv``.
These strings are consumed by stylesheets and JSON schemas as-is; renaming
one is a breaking change.

Insertion order is: for each theme (light, dark), core roles, semantic
roles, surface roles (constants, inversePrimary, container elevations),
fixed roles. Dicts preserve it through JSON and CSS serialization.
"""

from __future__ import annotations

import logging
from operator import attrgetter
from typing import Callable, Dict, Optional, Tuple

from .roles import THEMES, FixedVariant, RoleSource, RoleVariant, Theme
from .seeds import SeedPalette
from .tables import DEFAULT_CONFIG, SchemeConfig

logger = logging.getLogger(__name__)

Scheme = Dict[str, str]
RoleAccessor = Callable[[SeedPalette], RoleSource]

CORE_ROLES: Tuple[Tuple[str, RoleAccessor], ...] = (
    ("primary", attrgetter("primary")),
    ("secondary", attrgetter("secondary")),
    ("tertiary", attrgetter("tertiary")),
    ("error", attrgetter("error")),
)
SEMANTIC_ROLES: Tuple[Tuple[str, RoleAccessor], ...] = (
    ("warning", attrgetter("warning")),
    ("success", attrgetter("success")),
    ("info", attrgetter("info")),
)
FIXED_ROLES: Tuple[Tuple[str, RoleAccessor], ...] = CORE_ROLES[:3]

# (key prefix, key suffix, field) per sub-role.
ROLE_KEYS: Tuple[Tuple[str, str, str], ...] = (
    ("", "", "base"),
    ("on", "", "on"),
    ("", "container", "container"),
    ("on", "container", "on_container"),
)
FIXED_KEYS: Tuple[Tuple[str, str, str], ...] = (
    ("", "fixed", "fixed"),
    ("", "fixeddim", "fixed_dim"),
    ("on", "fixed", "on_fixed"),
    ("on", "fixedvariant", "on_fixed_variant"),
)


def scheme_key(theme: Theme, name: str, prefix: str = "", suffix: str = "") -> str:
    """Build a token key, e.g. ``scheme_key("dark", "primary", "on")``."""
    return f"{theme}__{prefix}{name.lower()}{suffix}_hlv"


def _emit_role(out: Scheme, theme: Theme, name: str, variant: RoleVariant) -> None:
    for prefix, suffix, attr in ROLE_KEYS:
        out[scheme_key(theme, name, prefix, suffix)] = getattr(variant, attr)


def _emit_fixed(out: Scheme, theme: Theme, name: str, variant: FixedVariant) -> None:
    for prefix, suffix, attr in FIXED_KEYS:
        out[scheme_key(theme, name, prefix, suffix)] = getattr(variant, attr)


def assemble_scheme(palette: SeedPalette, config: Optional[SchemeConfig] = None) -> Scheme:
    """Build the complete light + dark scheme for ``palette``."""
    cfg = config or DEFAULT_CONFIG

    # Fixed variants are theme-independent: compute once, emit per theme.
    fixed = {name: get(palette).fixed_variant() for name, get in FIXED_ROLES}

    scheme: Scheme = {}
    for theme in THEMES:
        for name, get in CORE_ROLES + SEMANTIC_ROLES:
            _emit_role(scheme, theme, name, get(palette).role_variant(theme))

        for name, value in cfg.surfaces(theme):
            scheme[scheme_key(theme, name)] = value
        scheme[scheme_key(theme, "inversePrimary")] = palette.primary.inverse(theme)
        for name, value in cfg.surface_containers(theme):
            scheme[scheme_key(theme, name)] = value

        for name, _ in FIXED_ROLES:
            _emit_fixed(scheme, theme, name, fixed[name])

    logger.debug("assembled scheme with %d keys", len(scheme))
    return scheme


__all__ = [
    "Scheme",
    "CORE_ROLES",
    "SEMANTIC_ROLES",
    "FIXED_ROLES",
    "scheme_key",
    "assemble_scheme",
]
