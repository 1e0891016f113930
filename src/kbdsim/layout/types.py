# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import enum
import typing

import msgspec

from ..commontypes import DeviceVariant, KbdsimError, Platform
from .deadkeys import DeadkeyTable

if typing.TYPE_CHECKING:
    import collections.abc


class LayoutError(KbdsimError):
    pass


class UnsupportedPlatformError(LayoutError):
    def __init__(self, platform):
        self.platform = platform
        super().__init__(f'Platform "{platform}" not found in layout')


class MissingLayerError(LayoutError):
    def __init__(self, platform, variant=None):
        self.platform = platform
        self.variant = variant
        where = f"{platform}" if variant is None else f"{platform} {variant}"
        super().__init__(f'No default layer found for platform "{where}"')


class NoPlatformsAvailableError(LayoutError):
    def __init__(self):
        super().__init__("No platforms found in layout definition")


class InvalidDefinitionError(LayoutError):
    pass


@enum.unique
class LayerName(enum.Enum):
    DEFAULT = "default"
    SHIFT = "shift"
    CAPS = "caps"
    CAPS_SHIFT = "caps+shift"
    ALT = "alt"
    ALT_SHIFT = "alt+shift"
    ALT_CAPS = "alt+caps"
    CTRL = "ctrl"
    CTRL_SHIFT = "ctrl+shift"
    CMD = "cmd"
    CMD_SHIFT = "cmd+shift"
    CMD_ALT = "cmd+alt"
    CMD_ALT_SHIFT = "cmd+alt+shift"
    SYMBOLS_1 = "symbols-1"
    SYMBOLS_2 = "symbols-2"

    @classmethod
    def lookup(cls, name: str) -> typing.Optional[LayerName]:
        try:
            return cls(name)
        except ValueError:
            return None


@enum.unique
class KeyType(enum.Enum):
    NORMAL = "normal"
    SPACE = "space"
    ENTER = "enter"
    MODIFIER = "modifier"
    FUNCTION = "function"


class KeyDefinition(msgspec.Struct, frozen=True, kw_only=True):
    id: str
    layers: dict[LayerName, str]
    label: typing.Optional[str] = None
    width: float = 1.0
    height: float = 1.0
    type: KeyType = KeyType.NORMAL

    def __post_init__(self):
        if LayerName.DEFAULT not in self.layers:
            raise ValueError(f"Key {self.id} has no default layer")

    @property
    def display_label(self):
        if self.label is not None:
            return self.label
        return self.layers[LayerName.DEFAULT]


class Row(msgspec.Struct, frozen=True, kw_only=True):
    keys: tuple[KeyDefinition, ...]
    offset: float = 0.0


class Layout(msgspec.Struct, frozen=True, kw_only=True):
    id: str
    name: str
    rows: tuple[Row, ...]
    deadkeys: DeadkeyTable
    platform: Platform
    variant: typing.Optional[DeviceVariant] = None
    is_mobile: bool = False

    def iter_keys(self) -> collections.abc.Iterator[KeyDefinition]:
        for row in self.rows:
            yield from row.keys

    def key_ids(self) -> frozenset[str]:
        return frozenset(key.id for key in self.iter_keys())
