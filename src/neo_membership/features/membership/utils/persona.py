"""Persona presentation helpers: initials and initials colour."""

from enum import Enum


class PersonaColor(str, Enum):
    """Palette for initials badges when no photo is available."""
    LIGHT_BLUE = "lightBlue"
    LIGHT_GREEN = "lightGreen"
    LIGHT_PINK = "lightPink"
    MAGENTA = "magenta"
    ORANGE = "orange"
    TEAL = "teal"
    VIOLET = "violet"
    WARM_GRAY = "warmGray"
    CYAN = "cyan"
    RUST = "rust"
    BURGUNDY = "burgundy"
    COOL_GRAY = "coolGray"


_PALETTE = list(PersonaColor)


def get_initials(display_name: str) -> str:
    """First and last initials, the first two letters of a single word, or '?'."""
    if not display_name or not display_name.strip():
        return "?"
    
    parts = display_name.split()
    if len(parts) == 1:
        return parts[0][:2].upper()
    return f"{parts[0][0]}{parts[-1][0]}".upper()


def get_persona_color(display_name: str) -> PersonaColor:
    """Stable colour derived from the sum of the name's code points."""
    checksum = sum(ord(char) for char in display_name or "")
    return _PALETTE[checksum % len(_PALETTE)]
