"""Terminal-independent key events consumed by the controller."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyCode(Enum):
    """Keys the controller distinguishes."""
    CHAR = "char"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"
    HOME = "home"
    END = "end"
    OTHER = "other"


# Textual key names for the non-printable keys we care about
TEXTUAL_KEY_NAMES = {
    "enter": KeyCode.ENTER,
    "escape": KeyCode.ESCAPE,
    "backspace": KeyCode.BACKSPACE,
    "up": KeyCode.UP,
    "down": KeyCode.DOWN,
    "left": KeyCode.LEFT,
    "right": KeyCode.RIGHT,
    "pageup": KeyCode.PAGE_UP,
    "pagedown": KeyCode.PAGE_DOWN,
    "home": KeyCode.HOME,
    "end": KeyCode.END,
}


@dataclass(frozen=True)
class KeyEvent:
    """A single key press.

    ``char`` is set only for ``KeyCode.CHAR`` and holds the typed character,
    already shifted (``"D"`` for shift+d).
    """
    code: KeyCode
    char: Optional[str] = None

    @classmethod
    def character(cls, char: str) -> "KeyEvent":
        return cls(KeyCode.CHAR, char)

    @classmethod
    def from_textual(cls, key: str, character: Optional[str], is_printable: bool) -> "KeyEvent":
        """Translate a Textual key event into a KeyEvent.

        Named keys win over their character (enter and escape carry control
        characters). Anything with a modifier other than shift arrives without
        a printable character and maps to ``KeyCode.OTHER``.
        """
        if key in TEXTUAL_KEY_NAMES:
            return cls(TEXTUAL_KEY_NAMES[key])
        if is_printable and character:
            return cls.character(character)
        return cls(KeyCode.OTHER)

    def is_char(self, *chars: str) -> bool:
        """True if this is a character key matching one of ``chars``."""
        return self.code is KeyCode.CHAR and self.char in chars
