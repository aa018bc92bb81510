"""Role synthesis: one seed color -> base/on/container/on-container.

Two role sources implement the same contract:

- :class:`HslRole` shifts HSL lightness of a seed :class:`Color` by fixed
  deltas.
- :class:`TonalRole` looks up fixed perceptual tones of a
  :class:`TonalPalette`.

A scheme is always built from role sources of a single kind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, NamedTuple, Optional, Protocol, Tuple

from .color import Color
from .engine import ColorEngine, DefaultColorEngine
from .tables import DEFAULT_CONFIG, SchemeConfig
from .tonal import TonalPalette

Theme = Literal["light", "dark"]
THEMES: Tuple[Theme, Theme] = ("light", "dark")


class RoleVariant(NamedTuple):
    base: str
    on: str
    container: str
    on_container: str


class FixedVariant(NamedTuple):
    fixed: str
    fixed_dim: str
    on_fixed: str
    on_fixed_variant: str


class RoleSource(Protocol):
    """Anything that can synthesize the color set of one role."""

    def role_variant(self, theme: Theme) -> RoleVariant: ...

    def fixed_variant(self) -> FixedVariant: ...

    def inverse(self, theme: Theme) -> str: ...


@dataclass(frozen=True)
class HslRole:
    """Role colors derived by HSL lightness arithmetic."""

    color: Color
    config: SchemeConfig = field(default=DEFAULT_CONFIG, compare=False)

    def _shift(self, delta: float) -> str:
        return self.color.adjust_lightness(delta).to_hex()

    def role_variant(self, theme: Theme) -> RoleVariant:
        d = self.config.lightness
        if theme == "light":
            return RoleVariant(
                base=self.color.to_hex(),
                on=self.color.contrast_color(self.config).to_hex(),
                container=self._shift(d.container_light),
                on_container=self._shift(d.on_container_light),
            )
        return RoleVariant(
            base=self._shift(d.base_dark),
            on=self._shift(d.on_dark),
            container=self._shift(d.container_dark),
            on_container=self._shift(d.on_container_dark),
        )

    def fixed_variant(self) -> FixedVariant:
        # Computed from the unshifted seed; identical for both themes.
        d = self.config.lightness
        return FixedVariant(
            fixed=self._shift(d.fixed),
            fixed_dim=self._shift(d.fixed_dim),
            on_fixed=self._shift(d.on_fixed),
            on_fixed_variant=self._shift(d.on_fixed_variant),
        )

    def inverse(self, theme: Theme) -> str:
        return self._shift(self.config.lightness.inverse_primary)


@dataclass(frozen=True)
class TonalRole:
    """Role colors looked up on a perceptual tone scale."""

    palette: TonalPalette
    config: SchemeConfig = field(default=DEFAULT_CONFIG, compare=False)
    engine: Optional[ColorEngine] = field(default=None, compare=False)

    def _tones(self, stops: Tuple[float, float, float, float]) -> Tuple[str, str, str, str]:
        engine = self.engine or DefaultColorEngine()
        a, b, c, d = (self.palette.tone(t, engine) for t in stops)
        return a, b, c, d

    def role_variant(self, theme: Theme) -> RoleVariant:
        stops = self.config.tones.light if theme == "light" else self.config.tones.dark
        return RoleVariant(*self._tones(stops))

    def fixed_variant(self) -> FixedVariant:
        return FixedVariant(*self._tones(self.config.tones.fixed))

    def inverse(self, theme: Theme) -> str:
        tones = self.config.tones
        t = tones.inverse_primary_light if theme == "light" else tones.inverse_primary_dark
        return self.palette.tone(t, self.engine)


__all__ = [
    "Theme",
    "THEMES",
    "RoleVariant",
    "FixedVariant",
    "RoleSource",
    "HslRole",
    "TonalRole",
]
