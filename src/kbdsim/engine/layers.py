"""Map modifier state to the active layer, and a key plus layer to its output."""
from __future__ import annotations

import collections.abc

from ..layout.types import KeyDefinition, LayerName
from .types import ModifierState

LayerRule = tuple[collections.abc.Callable[[ModifierState], bool], LayerName]

# Evaluated top to bottom, first match wins. More specific combinations must
# come before the combinations they contain.
LAYER_RULES: tuple[LayerRule, ...] = (
    (lambda m: m.cmd and m.alt and m.shift, LayerName.CMD_ALT_SHIFT),
    (lambda m: m.cmd and m.alt, LayerName.CMD_ALT),
    (lambda m: m.cmd and m.shift, LayerName.CMD_SHIFT),
    (lambda m: m.cmd, LayerName.CMD),
    (lambda m: m.alt and m.shift, LayerName.ALT_SHIFT),
    (lambda m: m.alt and m.caps, LayerName.ALT_CAPS),
    (lambda m: m.alt, LayerName.ALT),
    (lambda m: m.ctrl and m.shift, LayerName.CTRL_SHIFT),
    (lambda m: m.ctrl, LayerName.CTRL),
    (lambda m: m.caps and m.shift, LayerName.CAPS_SHIFT),
    (lambda m: m.caps, LayerName.CAPS),
    (lambda m: m.shift, LayerName.SHIFT),
    (lambda m: True, LayerName.DEFAULT),
)

DESKTOP_LAYERS = frozenset(layer for _, layer in LAYER_RULES)

MODIFIER_DISPLAY_NAMES = {
    "cmd": "Cmd",
    "alt": "Alt",
    "ctrl": "Ctrl",
    "shift": "Shift",
    "caps": "Caps",
}


def resolve_layer(state: ModifierState) -> LayerName:
    if state.symbols:
        return LayerName.SYMBOLS_2 if state.symbols2 else LayerName.SYMBOLS_1
    for predicate, layer in LAYER_RULES:
        if predicate(state):
            return layer
    raise AssertionError("LAYER_RULES must end with an unconditional rule")


def output_for(key: KeyDefinition, layer: LayerName) -> str:
    if output := key.layers.get(layer):
        return output
    if layer is LayerName.SYMBOLS_2 and (output := key.layers.get(LayerName.SYMBOLS_1)):
        return output
    return key.layers.get(LayerName.DEFAULT, "")


def layer_display_name(layer: LayerName) -> str:
    match layer:
        case LayerName.DEFAULT:
            return "Default"
        case LayerName.SYMBOLS_1:
            return "Symbols 1"
        case LayerName.SYMBOLS_2:
            return "Symbols 2"
    return " + ".join(MODIFIER_DISPLAY_NAMES[part] for part in layer.value.split("+"))
