"""Static key catalogue: physical key ids, ISO positions and non-printing keys."""
import msgspec

from .types import KeyDefinition, KeyType, LayerName

SHIFT_KEYS = frozenset({"ShiftLeft", "ShiftRight"})
ALT_KEYS = frozenset({"AltLeft", "AltRight"})
CMD_KEYS = frozenset({"MetaLeft", "MetaRight"})
CTRL_KEYS = frozenset({"ControlLeft", "ControlRight"})
CAPS_LOCK_KEY = "CapsLock"

MOBILE_SYMBOLS_KEY = "MobileSymbols"
MOBILE_SYMBOLS2_KEY = "MobileSymbols2"
SYMBOLS_KEYS = frozenset({MOBILE_SYMBOLS_KEY, MOBILE_SYMBOLS2_KEY})

BACKSPACE_KEY = "Backspace"
ENTER_KEY = "Enter"
TAB_KEY = "Tab"
SPACE_KEY = "Space"

MODIFIER_KEYS = SHIFT_KEYS | ALT_KEYS | CMD_KEYS | CTRL_KEYS | SYMBOLS_KEYS | {CAPS_LOCK_KEY}

# Alphanumeric block of an ISO keyboard, one tuple per physical row, in the
# order kbdgen layer strings list them.
ISO_KEY_POSITIONS = (
    ("Backquote", "Digit1", "Digit2", "Digit3", "Digit4", "Digit5", "Digit6", "Digit7", "Digit8", "Digit9", "Digit0", "Minus", "Equal"),
    ("KeyQ", "KeyW", "KeyE", "KeyR", "KeyT", "KeyY", "KeyU", "KeyI", "KeyO", "KeyP", "BracketLeft", "BracketRight"),
    ("KeyA", "KeyS", "KeyD", "KeyF", "KeyG", "KeyH", "KeyJ", "KeyK", "KeyL", "Semicolon", "Quote", "Backslash"),
    ("IntlBackslash", "KeyZ", "KeyX", "KeyC", "KeyV", "KeyB", "KeyN", "KeyM", "Comma", "Period", "Slash"),
)


def _special(key_id: str, output: str, label: str, width: float, key_type: KeyType = KeyType.MODIFIER, height: float = 1.0):
    return KeyDefinition(id=key_id, layers={LayerName.DEFAULT: output}, label=label, width=width, height=height, type=key_type)


DESKTOP_SPECIAL_KEYS = {
    key.id: key
    for key in (
        _special(BACKSPACE_KEY, "\b", "⌫", 2.0),
        _special(TAB_KEY, "\t", "Tab", 1.5),
        _special(ENTER_KEY, "\n", "Enter", 1.3, key_type=KeyType.ENTER, height=2.075),
        _special(CAPS_LOCK_KEY, "", "Caps", 1.75),
        _special("ShiftLeft", "", "Shift", 1.25),
        _special("ShiftRight", "", "Shift", 2.75),
        _special("ControlLeft", "", "Ctrl", 1.25),
        _special("MetaLeft", "", "⌘", 1.25),
        _special("AltLeft", "", "Alt", 1.25),
        _special(SPACE_KEY, " ", "", 6.25, key_type=KeyType.SPACE),
        _special("AltRight", "", "Alt", 1.25),
        _special("MetaRight", "", "⌘", 1.25),
        _special("ControlRight", "", "Ctrl", 1.25),
    )
}

# left to right, mirrored around the space bar
DESKTOP_BOTTOM_ROW = ("ControlLeft", "MetaLeft", "AltLeft", SPACE_KEY, "AltRight", "MetaRight", "ControlRight")


class MobileSpecial(msgspec.Struct, frozen=True):
    ids: tuple[str, ...]
    output: str
    label: str
    width: float
    type: KeyType


# Names used by the \s{name} escape in mobile layer strings. A name may map to
# several ids; repeated keys in one layout take them in order.
MOBILE_SPECIAL_KEYS = {
    "shift": MobileSpecial(ids=("ShiftLeft", "ShiftRight"), output="", label="⇧", width=1.5, type=KeyType.MODIFIER),
    "backspace": MobileSpecial(ids=(BACKSPACE_KEY,), output="\b", label="⌫", width=1.5, type=KeyType.MODIFIER),
    "return": MobileSpecial(ids=(ENTER_KEY,), output="\n", label="return", width=2.0, type=KeyType.ENTER),
    "enter": MobileSpecial(ids=(ENTER_KEY,), output="\n", label="return", width=2.0, type=KeyType.ENTER),
    "symbols": MobileSpecial(ids=(MOBILE_SYMBOLS_KEY, MOBILE_SYMBOLS2_KEY), output="", label="123", width=1.5, type=KeyType.MODIFIER),
    "space": MobileSpecial(ids=(SPACE_KEY,), output=" ", label="space", width=5.0, type=KeyType.SPACE),
}
