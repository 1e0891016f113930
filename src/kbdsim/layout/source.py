"""Schema of kbdgen layout definitions, the source format for the transformer.

Only the parts the transformer reads are declared; any other keys in a
definition (``config``, ``keyNames``, ``longpress`` and so on) are ignored
on decode.
"""
from __future__ import annotations

import collections.abc
import typing

import msgspec
import msgspec.json
import msgspec.yaml

from ..commontypes import DeviceVariant, Platform
from .types import InvalidDefinitionError

Transforms = dict[str, typing.Any]


class LayerBundle(msgspec.Struct, frozen=True):
    layers: typing.Optional[dict[str, str]] = None


class DesktopPlatform(msgspec.Struct, frozen=True, rename={"dead_keys": "deadKeys"}):
    primary: typing.Optional[LayerBundle] = None
    layers: typing.Optional[dict[str, str]] = None
    space: typing.Optional[dict[str, str]] = None
    dead_keys: typing.Optional[dict[str, list[str]]] = None
    transforms: typing.Optional[Transforms] = None

    @property
    def layer_strings(self) -> typing.Optional[dict[str, str]]:
        if self.primary is not None and self.primary.layers:
            return self.primary.layers
        return self.layers


class MobilePlatform(
    msgspec.Struct,
    frozen=True,
    rename={"ipad_9in": "iPad-9in", "ipad_12in": "iPad-12in", "tablet_600": "tablet-600"},
):
    primary: typing.Optional[LayerBundle] = None
    ipad_9in: typing.Optional[LayerBundle] = None
    ipad_12in: typing.Optional[LayerBundle] = None
    tablet_600: typing.Optional[LayerBundle] = None
    layers: typing.Optional[dict[str, str]] = None
    transforms: typing.Optional[Transforms] = None

    def bundle_for(self, variant: DeviceVariant) -> typing.Optional[LayerBundle]:
        match variant:
            case DeviceVariant.PRIMARY:
                if self.primary is None and self.layers is not None:
                    return LayerBundle(layers=self.layers)
                return self.primary
            case DeviceVariant.IPAD_9IN:
                return self.ipad_9in
            case DeviceVariant.IPAD_12IN:
                return self.ipad_12in
            case DeviceVariant.TABLET_600:
                return self.tablet_600


class KeyboardDefinition(
    msgspec.Struct,
    frozen=True,
    rename={
        "display_names": "displayNames",
        "macos": "macOS",
        "ios": "iOS",
    },
):
    display_names: typing.Optional[dict[str, str]] = None
    locale: typing.Optional[str] = None
    macos: typing.Optional[DesktopPlatform] = None
    windows: typing.Optional[DesktopPlatform] = None
    android: typing.Optional[MobilePlatform] = None
    ios: typing.Optional[MobilePlatform] = None
    chrome: typing.Optional[DesktopPlatform] = None
    transforms: typing.Optional[Transforms] = None

    def platform_entry(self, platform: Platform) -> typing.Optional[DesktopPlatform | MobilePlatform]:
        match platform:
            case Platform.MACOS:
                return self.macos
            case Platform.WINDOWS:
                return self.windows
            case Platform.ANDROID:
                return self.android
            case Platform.IOS:
                return self.ios
            case Platform.CHROME:
                return self.chrome


def definition_from_dict(data: collections.abc.Mapping[str, typing.Any]) -> KeyboardDefinition:
    try:
        return msgspec.convert(data, type=KeyboardDefinition)
    except msgspec.ValidationError as exc:
        raise InvalidDefinitionError(str(exc)) from exc


def decode_definition(raw: bytes | str, format: str = "yaml") -> KeyboardDefinition:
    match format:
        case "yaml":
            decode = msgspec.yaml.decode
        case "json":
            decode = msgspec.json.decode
        case _:
            raise ValueError(f"Unexpected format {format}")
    try:
        return decode(raw, type=KeyboardDefinition)
    except (msgspec.ValidationError, msgspec.DecodeError) as exc:
        raise InvalidDefinitionError(str(exc)) from exc
