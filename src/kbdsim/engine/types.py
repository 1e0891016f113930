# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import typing

import attr
import msgspec

from ..layout.types import KeyDefinition, LayerName, Layout


class ModifierState(msgspec.Struct, frozen=True):
    shift: bool = False
    caps: bool = False
    alt: bool = False
    cmd: bool = False
    ctrl: bool = False
    symbols: bool = False
    symbols2: bool = False


@attr.define(kw_only=True)
class ModifierFlags:
    """Mutable modifier flags owned by the engine.

    A ``*_latched`` flag is set when its modifier was switched on by a
    virtual click rather than held down; latched modifiers are released by
    the next committed action.
    """

    shift: bool = False
    shift_latched: bool = False
    caps: bool = False
    alt: bool = False
    alt_latched: bool = False
    cmd: bool = False
    cmd_latched: bool = False
    ctrl: bool = False
    ctrl_latched: bool = False
    symbols: bool = False
    symbols2: bool = False

    def snapshot(self) -> ModifierState:
        return ModifierState(
            shift=self.shift,
            caps=self.caps,
            alt=self.alt,
            cmd=self.cmd,
            ctrl=self.ctrl,
            symbols=self.symbols,
            symbols2=self.symbols2,
        )


class TextCommitted(msgspec.Struct, frozen=True, tag=True):
    text: str


class DeleteRequested(msgspec.Struct, frozen=True, tag=True):
    pass


class ClearRequested(msgspec.Struct, frozen=True, tag=True):
    pass


KeyboardOutput = TextCommitted | DeleteRequested | ClearRequested


class KeyboardSnapshot(msgspec.Struct, frozen=True):
    """Everything a renderer needs to draw the keyboard's current state."""

    layout_id: typing.Optional[str]
    active_layer: LayerName
    modifiers: ModifierState
    pressed_key_id: typing.Optional[str] = None
    pending_deadkey: typing.Optional[str] = None


# input events, for the keystream adapter


class KeyDown(msgspec.Struct, frozen=True, tag=True):
    code: str


class KeyUp(msgspec.Struct, frozen=True, tag=True):
    code: str


class KeyClick(msgspec.Struct, frozen=True, tag=True):
    key: KeyDefinition


class SwapLayout(msgspec.Struct, frozen=True, tag=True):
    layout: typing.Optional[Layout]


class ClearKeyboard(msgspec.Struct, frozen=True, tag=True):
    pass


KeyboardInput = KeyDown | KeyUp | KeyClick | SwapLayout | ClearKeyboard
