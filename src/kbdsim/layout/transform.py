"""Convert kbdgen keyboard definitions into the internal layout model."""
from __future__ import annotations

import collections.abc
import logging
import typing

from ..commontypes import DeviceVariant, Platform
from .catalogue import (
    DESKTOP_BOTTOM_ROW,
    DESKTOP_SPECIAL_KEYS,
    ENTER_KEY,
    ISO_KEY_POSITIONS,
    MOBILE_SPECIAL_KEYS,
    SPACE_KEY,
)
from .deadkeys import DeadkeyTable
from .source import DesktopPlatform, KeyboardDefinition, MobilePlatform, definition_from_dict
from .tokens import Literal, Special, Token, leading_spacer_width, positional, tokenize_layer, unescape
from .types import (
    KeyDefinition,
    KeyType,
    LayerName,
    Layout,
    MissingLayerError,
    NoPlatformsAvailableError,
    Row,
    UnsupportedPlatformError,
)

logger = logging.getLogger(__name__)

Grid = list[list[str]]

# The physical row each ISO position row sits on, with the special keys
# before and after the alphanumeric block.
DESKTOP_ROW_FRAMES = (
    ((), ("Backspace",)),
    (("Tab",), (ENTER_KEY,)),
    (("CapsLock",), ()),
    (("ShiftLeft",), ("ShiftRight",)),
)

# Mobile source formats never encode the bottom row. Only iOS puts a
# symbols toggle there.
MOBILE_BOTTOM_ROWS = {
    Platform.IOS: ("symbols", "space", "return"),
    Platform.ANDROID: ("space", "return"),
}


def available_platforms(definition: KeyboardDefinition) -> list[Platform]:
    return [platform for platform in Platform if definition.platform_entry(platform) is not None]


def select_platform(definition: KeyboardDefinition, requested: typing.Optional[Platform] = None) -> Platform:
    platforms = available_platforms(definition)
    if not platforms:
        raise NoPlatformsAvailableError()
    if requested in platforms:
        return requested
    return platforms[0]


def _coerce_platform(platform: Platform | str) -> Platform:
    if isinstance(platform, Platform):
        return platform
    try:
        return Platform(platform)
    except ValueError:
        raise UnsupportedPlatformError(platform) from None


def _coerce_variant(variant: DeviceVariant | str | None) -> typing.Optional[DeviceVariant]:
    if variant is None or isinstance(variant, DeviceVariant):
        return variant
    try:
        return DeviceVariant(variant)
    except ValueError:
        logger.info("Unknown device variant %r, using the primary variant", variant)
        return None


def parse_layer_string(layer: str) -> Grid:
    return [[unescape(token) for token in line.split()] for line in layer.strip().splitlines() if line.strip()]


def catalogue_layers(layer_strings: collections.abc.Mapping[str, str]) -> dict[LayerName, str]:
    """Validate source layer names against the layer catalogue, dropping unknown names."""
    layers = {}
    for name, value in layer_strings.items():
        layer_name = LayerName.lookup(name)
        if layer_name is None:
            logger.warning("Ignoring unknown layer %r", name)
            continue
        if value:
            layers[layer_name] = value
    return layers


def merge_transforms(definition: KeyboardDefinition, entry: DesktopPlatform | MobilePlatform) -> DeadkeyTable:
    transforms = {}
    if definition.transforms:
        transforms.update(definition.transforms)
    if entry.transforms:
        transforms.update(entry.transforms)
    return DeadkeyTable.from_transforms(transforms)


def _cell(grid: Grid, row: int, col: int) -> typing.Optional[str]:
    if row < len(grid) and col < len(grid[row]):
        return grid[row][col]
    return None


def _cell_layers(grids: dict[LayerName, Grid], row: int, col: int) -> dict[LayerName, str]:
    layers = {LayerName.DEFAULT: ""}
    for layer_name, grid in grids.items():
        value = _cell(grid, row, col)
        if value:
            layers[layer_name] = value
    return layers


def _space_key(space: typing.Optional[dict[str, str]]) -> KeyDefinition:
    key = DESKTOP_SPECIAL_KEYS[SPACE_KEY]
    if not space:
        return key
    layers = dict(key.layers)
    layers.update(catalogue_layers({name: unescape(value) for name, value in space.items()}))
    return KeyDefinition(id=key.id, layers=layers, label=key.label, width=key.width, height=key.height, type=key.type)


def build_desktop_rows(layers: dict[LayerName, str], space: typing.Optional[dict[str, str]] = None) -> tuple[Row, ...]:
    grids = {layer_name: parse_layer_string(value) for layer_name, value in layers.items()}
    rows = []
    for row_index, (positions, (before, after)) in enumerate(zip(ISO_KEY_POSITIONS, DESKTOP_ROW_FRAMES)):
        keys = [DESKTOP_SPECIAL_KEYS[key_id] for key_id in before]
        keys.extend(
            KeyDefinition(id=key_id, layers=_cell_layers(grids, row_index, col))
            for col, key_id in enumerate(positions)
        )
        keys.extend(DESKTOP_SPECIAL_KEYS[key_id] for key_id in after)
        rows.append(Row(keys=tuple(keys)))
    bottom = [_space_key(space) if key_id == SPACE_KEY else DESKTOP_SPECIAL_KEYS[key_id] for key_id in DESKTOP_BOTTOM_ROW]
    rows.append(Row(keys=tuple(bottom)))
    return tuple(rows)


class _MobileKeyIds:
    """Hands out layout-unique key ids."""

    def __init__(self):
        self.used: set[str] = set()

    def claim(self, candidates: collections.abc.Sequence[str]) -> str:
        for candidate in candidates:
            if candidate not in self.used:
                self.used.add(candidate)
                return candidate
        base = candidates[-1]
        n = 2
        while f"{base}-{n}" in self.used:
            n += 1
        key_id = f"{base}-{n}"
        self.used.add(key_id)
        return key_id


def _mobile_special_key(name: str, width: typing.Optional[float], ids: _MobileKeyIds) -> KeyDefinition:
    special = MOBILE_SPECIAL_KEYS.get(name)
    if special is None:
        logger.warning("Unknown special key %r", name)
        return KeyDefinition(
            id=ids.claim((f"Mobile-{name}",)),
            layers={LayerName.DEFAULT: ""},
            label=name,
            width=width if width is not None else 1.0,
            type=KeyType.FUNCTION,
        )
    return KeyDefinition(
        id=ids.claim(special.ids),
        layers={LayerName.DEFAULT: special.output},
        label=special.label,
        width=width if width is not None else special.width,
        type=special.type,
    )


def build_mobile_rows(layers: dict[LayerName, str], platform: Platform) -> tuple[Row, ...]:
    token_grids: dict[LayerName, list[list[Token]]] = {
        layer_name: tokenize_layer(value) for layer_name, value in layers.items()
    }
    positional_grids = {
        layer_name: [positional(row) for row in grid] for layer_name, grid in token_grids.items()
    }
    default_grid = token_grids[LayerName.DEFAULT]
    ids = _MobileKeyIds()
    rows = []
    for row_index, row_tokens in enumerate(positional_grids[LayerName.DEFAULT]):
        keys = []
        for col, token in enumerate(row_tokens):
            match token:
                case Special(name=name, width=width):
                    keys.append(_mobile_special_key(name, width, ids))
                case Literal():
                    key_layers = {LayerName.DEFAULT: ""}
                    for layer_name, grid in positional_grids.items():
                        cell = grid[row_index][col] if row_index < len(grid) and col < len(grid[row_index]) else None
                        if isinstance(cell, Literal) and cell.char:
                            key_layers[layer_name] = cell.char
                    keys.append(KeyDefinition(id=ids.claim((f"Mobile-{row_index}-{col}",)), layers=key_layers))
        rows.append(Row(keys=tuple(keys), offset=leading_spacer_width(default_grid[row_index])))

    bottom = []
    for name in MOBILE_BOTTOM_ROWS[platform]:
        special = MOBILE_SPECIAL_KEYS[name]
        if special.ids[0] in ids.used:
            continue
        bottom.append(_mobile_special_key(name, None, ids))
    rows.append(Row(keys=tuple(bottom)))
    return tuple(rows)


def _resolve_variant(
    entry: MobilePlatform, platform: Platform, variant: typing.Optional[DeviceVariant]
) -> DeviceVariant:
    if variant is None or variant is DeviceVariant.PRIMARY:
        return DeviceVariant.PRIMARY
    if variant not in platform.variants:
        logger.info("Variant %s does not apply to %s, using the primary variant", variant.value, platform.value)
        return DeviceVariant.PRIMARY
    if entry.bundle_for(variant) is None:
        logger.info("Variant %s missing from %s definition, using the primary variant", variant.value, platform.value)
        return DeviceVariant.PRIMARY
    return variant


def display_name(
    definition: KeyboardDefinition,
    platform: Platform,
    variant: typing.Optional[DeviceVariant],
    source_id: str,
    layout_name: str,
    locale: str = "en",
) -> str:
    if definition.display_names and definition.display_names.get(locale):
        return definition.display_names[locale]
    if definition.locale:
        return definition.locale
    platform_part = platform.value
    if variant is not None and variant is not DeviceVariant.PRIMARY:
        platform_part = f"{platform_part} {variant.value}"
    return f"{source_id} - {layout_name} ({platform_part})"


def layout_id(source_id: str, layout_name: str, platform: Platform, variant: typing.Optional[DeviceVariant]) -> str:
    parts = [source_id, layout_name, platform.value]
    if variant is not None and variant is not DeviceVariant.PRIMARY:
        parts.append(variant.value)
    return "-".join(parts)


def transform(
    definition: KeyboardDefinition | collections.abc.Mapping[str, typing.Any],
    platform: Platform | str,
    variant: DeviceVariant | str | None = None,
    *,
    source_id: str = "",
    layout_name: str = "",
    display_locale: str = "en",
) -> Layout:
    """Build a Layout for one platform (and, on mobile, one device variant) of a definition.

    Raises NoPlatformsAvailableError if the definition has no platform at all,
    UnsupportedPlatformError if it lacks the requested one, and
    MissingLayerError if that platform has no default layer. Nothing is
    retried or substituted here; choosing a fallback is up to the caller.
    """
    if not isinstance(definition, KeyboardDefinition):
        definition = definition_from_dict(definition)
    if not available_platforms(definition):
        raise NoPlatformsAvailableError()
    platform = _coerce_platform(platform)
    entry = definition.platform_entry(platform)
    if entry is None:
        raise UnsupportedPlatformError(platform.value)

    resolved_variant: typing.Optional[DeviceVariant] = None
    if isinstance(entry, MobilePlatform):
        resolved_variant = _resolve_variant(entry, platform, _coerce_variant(variant))
        bundle = entry.bundle_for(resolved_variant)
        layers = catalogue_layers(bundle.layers or {}) if bundle is not None else {}
        if LayerName.DEFAULT not in layers:
            raise MissingLayerError(platform.value, resolved_variant.value)
        rows = build_mobile_rows(layers, platform)
    else:
        layers = catalogue_layers(entry.layer_strings or {})
        if LayerName.DEFAULT not in layers:
            raise MissingLayerError(platform.value)
        rows = build_desktop_rows(layers, entry.space)

    layout = Layout(
        id=layout_id(source_id, layout_name, platform, resolved_variant),
        name=display_name(definition, platform, resolved_variant, source_id, layout_name, display_locale),
        rows=rows,
        deadkeys=merge_transforms(definition, entry),
        platform=platform,
        variant=resolved_variant,
        is_mobile=platform.is_mobile,
    )
    logger.debug("Built layout %s with %d rows", layout.id, len(layout.rows))
    return layout
