# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging
import typing

from ..layout.catalogue import (
    ALT_KEYS,
    BACKSPACE_KEY,
    CAPS_LOCK_KEY,
    CMD_KEYS,
    CTRL_KEYS,
    ENTER_KEY,
    SHIFT_KEYS,
    SYMBOLS_KEYS,
    TAB_KEY,
)
from ..layout.types import KeyDefinition, LayerName, Layout
from .layers import output_for, resolve_layer
from .types import (
    ClearRequested,
    DeleteRequested,
    KeyboardOutput,
    KeyboardSnapshot,
    ModifierFlags,
    ModifierState,
    TextCommitted,
)

logger = logging.getLogger(__name__)

# modifier name on ModifierFlags -> key ids that drive it
MOMENTARY_MODIFIERS = {
    "shift": SHIFT_KEYS,
    "alt": ALT_KEYS,
    "cmd": CMD_KEYS,
    "ctrl": CTRL_KEYS,
}

LINE_KEYS = {
    ENTER_KEY: "\n",
    TAB_KEY: "\t",
}


def _momentary_modifier(key_id: str) -> typing.Optional[str]:
    for name, key_ids in MOMENTARY_MODIFIERS.items():
        if key_id in key_ids:
            return name
    return None


class KeyboardEngine:
    """Turns key activations into committed text for one active layout.

    Virtual clicks and physical key events are handled synchronously, one at
    a time, and each call returns the output events it produced. Nothing here
    raises: without a layout, or for keys with no output, calls are no-ops.
    """

    layout: typing.Optional[Layout]
    pressed_key_id: typing.Optional[str]
    pending_deadkey: typing.Optional[str]

    def __init__(self, layout: typing.Optional[Layout] = None):
        self.flags = ModifierFlags()
        self.pressed_key_id = None
        self.pending_deadkey = None
        self._keys_by_id: dict[str, KeyDefinition] = {}
        self.layout = None
        if layout is not None:
            self.set_layout(layout)

    @property
    def modifiers(self) -> ModifierState:
        return self.flags.snapshot()

    @property
    def active_layer(self) -> LayerName:
        return resolve_layer(self.modifiers)

    def snapshot(self) -> KeyboardSnapshot:
        return KeyboardSnapshot(
            layout_id=self.layout.id if self.layout is not None else None,
            active_layer=self.active_layer,
            modifiers=self.modifiers,
            pressed_key_id=self.pressed_key_id,
            pending_deadkey=self.pending_deadkey,
        )

    def set_layout(self, layout: typing.Optional[Layout]) -> list[KeyboardOutput]:
        self.layout = layout
        self._keys_by_id = {key.id: key for key in layout.iter_keys()} if layout is not None else {}
        logger.info("Active layout is now %s", layout.id if layout is not None else None)
        return self.clear_state()

    def clear_state(self) -> list[KeyboardOutput]:
        self.flags = ModifierFlags()
        self.pending_deadkey = None
        self.pressed_key_id = None
        return [ClearRequested()]

    def find_key(self, code: str) -> typing.Optional[KeyDefinition]:
        return self._keys_by_id.get(code)

    def _release_latches(self):
        flags = self.flags
        for name in MOMENTARY_MODIFIERS:
            latch = f"{name}_latched"
            if getattr(flags, latch):
                setattr(flags, name, False)
                setattr(flags, latch, False)

    # physical keyboard

    def key_down(self, code: str) -> list[KeyboardOutput]:
        key = self.find_key(code)
        if key is None:
            return []
        if (modifier := _momentary_modifier(key.id)) is not None:
            self.pressed_key_id = key.id
            setattr(self.flags, modifier, True)
            setattr(self.flags, f"{modifier}_latched", False)
            return []
        if key.id == CAPS_LOCK_KEY:
            # toggles show their state instead of a pressed highlight
            self.flags.caps = not self.flags.caps
            return []
        self.pressed_key_id = key.id
        return self.click(key)

    def key_up(self, code: str) -> list[KeyboardOutput]:
        key = self.find_key(code)
        if key is not None and (modifier := _momentary_modifier(key.id)) is not None:
            if not getattr(self.flags, f"{modifier}_latched"):
                setattr(self.flags, modifier, False)
        self.pressed_key_id = None
        return []

    # virtual keyboard

    def click(self, key: typing.Optional[KeyDefinition]) -> list[KeyboardOutput]:
        if self.layout is None or key is None:
            return []
        flags = self.flags

        if key.id in SHIFT_KEYS and flags.symbols:
            # on the symbols pages, shift flips between the two pages
            flags.symbols2 = not flags.symbols2
            return []
        if (modifier := _momentary_modifier(key.id)) is not None:
            active = not getattr(flags, modifier)
            setattr(flags, modifier, active)
            setattr(flags, f"{modifier}_latched", active)
            return []
        if key.id == CAPS_LOCK_KEY:
            flags.caps = not flags.caps
            return []
        if key.id in SYMBOLS_KEYS:
            flags.symbols = not flags.symbols
            if not flags.symbols:
                flags.symbols2 = False
            return []

        if key.id == BACKSPACE_KEY:
            outputs: list[KeyboardOutput] = []
            if self.pending_deadkey is not None:
                logger.debug("Backspace cancels pending deadkey %r", self.pending_deadkey)
                self.pending_deadkey = None
            else:
                outputs.append(DeleteRequested())
            self._release_latches()
            return outputs

        if key.id in LINE_KEYS:
            outputs = []
            if self.pending_deadkey is not None:
                outputs.append(TextCommitted(text=self.pending_deadkey))
                self.pending_deadkey = None
            outputs.append(TextCommitted(text=LINE_KEYS[key.id]))
            self._release_latches()
            return outputs

        return self._type_character(key)

    def _type_character(self, key: KeyDefinition) -> list[KeyboardOutput]:
        layer = self.active_layer
        char = output_for(key, layer)
        if not char:
            return []
        deadkeys = self.layout.deadkeys
        outputs: list[KeyboardOutput] = []
        if self.pending_deadkey is not None:
            composed = deadkeys.compose(self.pending_deadkey, char)
            if composed is None:
                logger.debug("No composition for %r + %r", self.pending_deadkey, char)
                composed = self.pending_deadkey + char
            outputs.append(TextCommitted(text=composed))
            self.pending_deadkey = None
        elif deadkeys.is_trigger(char):
            logger.debug("Deadkey %r pending", char)
            self.pending_deadkey = char
        else:
            outputs.append(TextCommitted(text=char))
        self._release_latches()
        return outputs
