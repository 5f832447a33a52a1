"""Embed accent colors."""

from __future__ import annotations

MAX_COLOR = 0xFFFFFF


class DiscordColor(int):
    """A 24-bit RGB color as Discord expects it in ``embed.color``.

    Instances are plain integers, so they compare, hash and JSON-encode by
    value. Named constants follow the palette used by the Discord client.
    """

    def __new__(cls, value: int = 0) -> DiscordColor:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"color must be an int, not {type(value).__name__}")
        if not 0 <= value <= MAX_COLOR:
            raise ValueError(f"color {value} is outside the 24-bit range")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"DiscordColor({self.hex})"

    @property
    def value(self) -> int:
        return int(self)

    @property
    def hex(self) -> str:
        return f"#{int(self):06X}"

    @classmethod
    def from_hex(cls, text: str) -> DiscordColor | None:
        """Parse ``"#RRGGBB"`` or ``"RRGGBB"``.

        Returns None when the text is not a hexadecimal number or does not
        fit in 24 bits.
        """
        digits = text.strip()
        if digits.startswith("#"):
            digits = digits[1:]
        # int(x, 16) would also accept signs, underscores and a 0x prefix
        if not digits or any(c not in "0123456789abcdefABCDEF" for c in digits):
            return None
        value = int(digits, 16)
        if value > MAX_COLOR:
            return None
        return cls(value)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> DiscordColor:
        for channel in (r, g, b):
            if not 0 <= channel <= 255:
                raise ValueError(f"channel value {channel} is outside 0-255")
        return cls((r << 16) | (g << 8) | b)


# Palette: https://gist.github.com/thomasbnt/b6f455e2c7d743b796917fa3c205f812
_NAMED_COLORS: dict[str, int] = {
    "default": 0,
    "aqua": 1752220,
    "dark_aqua": 1146986,
    "green": 5763719,
    "dark_green": 2067276,
    "blue": 3447003,
    "dark_blue": 2123412,
    "purple": 10181046,
    "dark_purple": 7419530,
    "luminous_vivid_pink": 15277667,
    "dark_vivid_pink": 11342935,
    "gold": 15844367,
    "dark_gold": 12745742,
    "orange": 15105570,
    "dark_orange": 11027200,
    "red": 15548997,
    "dark_red": 10038562,
    "grey": 9807270,
    "dark_grey": 9936031,
    "darker_grey": 8359053,
    "light_grey": 12370112,
    "navy": 3426654,
    "dark_navy": 2899536,
    "yellow": 16776960,
    "white": 16777215,
    "greyple": 10070709,
    "black": 2303786,
    "dark_but_not_black": 2895667,
    "not_quite_black": 2303786,
    "blurple": 5793266,
    "yellow_official": 16705372,
    "fuchsia": 15418782,
    "unnamed_role_1": 6323595,
    "unnamed_role_2": 5533306,
    "background_black": 3553599,
}

for _name, _value in _NAMED_COLORS.items():
    setattr(DiscordColor, _name, DiscordColor(_value))
del _name, _value


def named_colors() -> dict[str, DiscordColor]:
    """Return the named palette as a fresh ``name -> color`` mapping."""
    return {name: getattr(DiscordColor, name) for name in _NAMED_COLORS}
