# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Keyboard input stages
# stage 0: physical key codes (key down/up) or virtual clicks on rendered keys
# stage 1: track held, click-latched and locked modifiers
# stage 2: resolve the active layer and the key's output on it
# stage 3: deadkey composition, then committed text / delete / clear events
from .keyboard import KeyboardEngine
from .layers import LAYER_RULES, layer_display_name, output_for, resolve_layer
from .types import (
    ClearRequested,
    DeleteRequested,
    KeyboardOutput,
    KeyboardSnapshot,
    ModifierState,
    TextCommitted,
)

__all__ = [
    "LAYER_RULES",
    "ClearRequested",
    "DeleteRequested",
    "KeyboardEngine",
    "KeyboardOutput",
    "KeyboardSnapshot",
    "ModifierState",
    "TextCommitted",
    "layer_display_name",
    "output_for",
    "resolve_layer",
]
