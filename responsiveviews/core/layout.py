"""Layout selection: device context to layout variant."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

DEFAULT_WIDE_THRESHOLD = 600


class WidthClass(Enum):
    NARROW = "narrow"
    WIDE = "wide"


class Orientation(Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"
    # Square surfaces report neither.
    UNDEFINED = "undefined"


class LayoutVariant(Enum):
    TABLET_PORTRAIT = "tablet_portrait"
    TABLET_LANDSCAPE = "tablet_landscape"
    PHONE_PORTRAIT = "phone_portrait"
    PHONE_LANDSCAPE = "phone_landscape"
    ROUND_SCREEN = "round_screen"


@dataclass(frozen=True)
class DeviceContext:
    """Device characteristics observed on a single layout pass."""

    width_class: WidthClass
    orientation: Orientation
    is_round: bool = False

    @classmethod
    def from_size(
        cls,
        width: float,
        height: float,
        *,
        is_round: bool = False,
        threshold: float = DEFAULT_WIDE_THRESHOLD,
    ) -> "DeviceContext":
        """Build a context from an available size in density-independent units.

        The width is *wide* only when it strictly exceeds ``threshold``.
        Orientation follows the aspect ratio; a square size is undefined.
        """
        width_class = WidthClass.WIDE if width > threshold else WidthClass.NARROW
        if width > height:
            orientation = Orientation.LANDSCAPE
        elif height > width:
            orientation = Orientation.PORTRAIT
        else:
            orientation = Orientation.UNDEFINED
        return cls(width_class=width_class, orientation=orientation, is_round=is_round)


def classify(context: DeviceContext, *, round_aware: bool = True) -> LayoutVariant:
    """Return the layout variant for *context*.

    Rules are checked in order and the first match wins. The four
    width/orientation rules come before the round check, so a round display
    only gets :attr:`LayoutVariant.ROUND_SCREEN` when it reports no regular
    orientation. Anything left over falls back to phone portrait.
    """
    wide = context.width_class is WidthClass.WIDE
    orientation = context.orientation

    if orientation is Orientation.LANDSCAPE and wide:
        return LayoutVariant.TABLET_LANDSCAPE
    if orientation is Orientation.PORTRAIT and wide:
        return LayoutVariant.TABLET_PORTRAIT
    if orientation is Orientation.LANDSCAPE and not wide:
        return LayoutVariant.PHONE_LANDSCAPE
    if orientation is Orientation.PORTRAIT and not wide:
        return LayoutVariant.PHONE_PORTRAIT
    if round_aware and context.is_round:
        return LayoutVariant.ROUND_SCREEN
    return LayoutVariant.PHONE_PORTRAIT


# Panel identifiers used by VariantLayout.panels
HEADING = "heading"
CLICKER = "clicker"
SCOREBOARD = "scoreboard"


@dataclass(frozen=True)
class PanelSlot:
    name: str
    stretch: int = 0


@dataclass(frozen=True)
class VariantLayout:
    """Declarative arrangement of the panels shown by one variant."""

    variant: LayoutVariant
    heading: str
    direction: str  # "column" or "row"
    panels: Tuple[PanelSlot, ...]

    def panel_names(self) -> Tuple[str, ...]:
        return tuple(slot.name for slot in self.panels)

    @property
    def shows_scoreboard(self) -> bool:
        return SCOREBOARD in self.panel_names()


_VARIANT_LAYOUTS = {
    LayoutVariant.TABLET_PORTRAIT: VariantLayout(
        variant=LayoutVariant.TABLET_PORTRAIT,
        heading="Tablet Portrait Layout",
        direction="column",
        panels=(PanelSlot(HEADING), PanelSlot(CLICKER), PanelSlot(SCOREBOARD)),
    ),
    LayoutVariant.TABLET_LANDSCAPE: VariantLayout(
        variant=LayoutVariant.TABLET_LANDSCAPE,
        heading="Tablet Landscape Layout",
        direction="row",
        panels=(PanelSlot(HEADING, 1), PanelSlot(SCOREBOARD), PanelSlot(CLICKER, 2)),
    ),
    LayoutVariant.PHONE_PORTRAIT: VariantLayout(
        variant=LayoutVariant.PHONE_PORTRAIT,
        heading="Phone Portrait Layout",
        direction="column",
        panels=(PanelSlot(HEADING), PanelSlot(CLICKER)),
    ),
    LayoutVariant.PHONE_LANDSCAPE: VariantLayout(
        variant=LayoutVariant.PHONE_LANDSCAPE,
        heading="Phone Landscape Layout",
        direction="row",
        panels=(PanelSlot(SCOREBOARD), PanelSlot(CLICKER, 2)),
    ),
    LayoutVariant.ROUND_SCREEN: VariantLayout(
        variant=LayoutVariant.ROUND_SCREEN,
        heading="Round Screen Layout",
        direction="column",
        panels=(PanelSlot(CLICKER),),
    ),
}


def variant_layout(variant: LayoutVariant) -> VariantLayout:
    """Return the panel arrangement for *variant*."""
    return _VARIANT_LAYOUTS[variant]
