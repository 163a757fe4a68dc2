"""Key name parsing for editor shortcuts."""

from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'z', 'left', 'enter')
    raw: str  # The key name as received
    is_alt: bool = False
    is_ctrl: bool = False
    is_shift: bool = False
    is_meta: bool = False


_MODIFIER_ALIASES = {
    'ctrl': 'ctrl',
    'control': 'ctrl',
    'alt': 'alt',
    'option': 'alt',
    'shift': 'shift',
    'meta': 'meta',
    'cmd': 'meta',
    'super': 'meta',
}


def parse_key(name: str) -> KeyEvent:
    """Parse a Textual-style key name such as ``ctrl+shift+z`` into a KeyEvent.

    Cmd/Meta counts as Ctrl so that Cmd+Z and Ctrl+Z behave the same. With
    shift held, single letters are reported uppercase ('Z'), which is how
    the command registry tells redo apart from undo.

    Raises:
        ValueError: if ``name`` is empty.
    """
    if not name:
        raise ValueError("empty key name")

    parts = name.split('+')
    # A literal '+' key shows up as trailing empty parts
    if parts[-1] == '' and len(parts) > 1:
        base = '+'
        parts = [p for p in parts[:-1] if p]
    else:
        base = parts[-1]
        parts = parts[:-1]

    modifiers = set()
    for part in parts:
        modifier = _MODIFIER_ALIASES.get(part.lower())
        if modifier is None:
            raise ValueError(f"unknown modifier {part!r} in key {name!r}")
        modifiers.add(modifier)

    if len(base) == 1 and base.isalpha() and base.isupper():
        modifiers.add('shift')

    is_ctrl = 'ctrl' in modifiers or 'meta' in modifiers
    is_alt = 'alt' in modifiers
    is_shift = 'shift' in modifiers

    if len(base) != 1:
        value = base.lower()
    elif is_shift and base.isalpha():
        value = base.upper()
    elif is_ctrl or is_alt:
        value = base.lower()
    else:
        value = base

    if is_ctrl:
        key_type = KeyType.CTRL
    elif is_alt:
        key_type = KeyType.ALT
    elif len(base) == 1:
        key_type = KeyType.REGULAR
    else:
        key_type = KeyType.SPECIAL

    return KeyEvent(
        key_type=key_type,
        value=value,
        raw=name,
        is_alt=is_alt,
        is_ctrl=is_ctrl,
        is_shift=is_shift,
        is_meta='meta' in modifiers,
    )
