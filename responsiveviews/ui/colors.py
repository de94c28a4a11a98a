"""Panel colors and color utilities for the UI."""

from responsiveviews.core.layout import LayoutVariant


class PanelColors:
    """Background colors of the layout variants and their panels."""

    LIGHT_GRAY = "#CCCCCC"
    CYAN = "#00FFFF"
    YELLOW = "#FFFF00"
    GREEN = "#00FF00"
    MAGENTA = "#FF00FF"
    RED = "#FF0000"
    BLACK = "#000000"

    TEXT = "#1C1B1F"
    TEXT_ON_DARK = "#FFFFFF"

    BUTTON = "#6750A4"
    BUTTON_TEXT = "#FFFFFF"


# Background of the whole screen per variant.
VARIANT_BACKGROUNDS = {
    LayoutVariant.TABLET_PORTRAIT: PanelColors.LIGHT_GRAY,
    LayoutVariant.TABLET_LANDSCAPE: PanelColors.CYAN,
    LayoutVariant.PHONE_PORTRAIT: PanelColors.LIGHT_GRAY,
    LayoutVariant.PHONE_LANDSCAPE: PanelColors.MAGENTA,
    LayoutVariant.ROUND_SCREEN: PanelColors.BLACK,
}

# Backgrounds of individual panels inside row layouts.
HEADING_BACKGROUNDS = {
    LayoutVariant.TABLET_LANDSCAPE: PanelColors.YELLOW,
}
CLICKER_BACKGROUNDS = {
    LayoutVariant.TABLET_LANDSCAPE: PanelColors.GREEN,
    LayoutVariant.PHONE_LANDSCAPE: PanelColors.RED,
}


def text_color_for(background: str) -> str:
    """Readable text color on top of *background*."""
    return PanelColors.TEXT_ON_DARK if background == PanelColors.BLACK else PanelColors.TEXT


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        channels = []
        for i in (1, 3, 5):
            start = int(a[i:i + 2], 16)
            end = int(b[i:i + 2], 16)
            channels.append(int(start + (end - start) * t))
        return "#{:02X}{:02X}{:02X}".format(*channels)
    except ValueError:
        return a
