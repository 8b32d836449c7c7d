"""
Emotion to color lookup and palette generation.
"""
import colorsys
from dataclasses import dataclass

from worldfeel.core.emotion_table import DEFAULT_COLOR_HEX, EMOTIONS
from worldfeel.core.vocabulary import resolve_emotion_key


@dataclass(frozen=True)
class ColorMatch:
    hex: str
    matched: bool


def get_emotion_color(word: str) -> str | None:
    """Color for a word resolvable to a canonical emotion, else None."""
    key = resolve_emotion_key(word)
    if key is None:
        return None
    return EMOTIONS[key]


def word_to_color(word: str) -> ColorMatch:
    """Map a word to its color, falling back to DEFAULT_COLOR_HEX for unknown words."""
    hex_value = get_emotion_color(word)
    if hex_value is None:
        return ColorMatch(hex=DEFAULT_COLOR_HEX, matched=False)
    return ColorMatch(hex=hex_value, matched=True)


def _hex_to_hls(hex_value: str) -> tuple[float, float, float]:
    h = hex_value.lstrip("#")
    r, g, b = (int(h[i:i + 2], 16) / 255 for i in (0, 2, 4))
    return colorsys.rgb_to_hls(r, g, b)


def _hls_to_hex(hue: float, lightness: float, saturation: float) -> str:
    r, g, b = colorsys.hls_to_rgb(hue, lightness, saturation)
    return "#{:02X}{:02X}{:02X}".format(round(r * 255), round(g * 255), round(b * 255))


def generate_palette(base_hex: str, count: int = 5) -> list[str]:
    """
    Base color followed by count-1 related colors.

    Each step rotates the hue by 60 degrees and nudges lightness by 0.1,
    alternating darker and lighter, clamped to [0.2, 0.8].
    """
    hue, lightness, saturation = _hex_to_hls(base_hex)
    palette = [base_hex.upper()]
    for i in range(1, count):
        new_hue = (hue + (i * 60 % 360) / 360) % 1.0
        shift = 0.1 if i % 2 == 0 else -0.1
        new_lightness = max(0.2, min(0.8, lightness + shift))
        palette.append(_hls_to_hex(new_hue, new_lightness, saturation))
    return palette
