# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Layout stages
# source: kbdgen definition, already parsed from YAML/JSON into nested mappings
# stage 1: validate against the definition schema (source.py)
# stage 2: select platform bundle and device variant, parse layer strings into grids
# stage 3: assemble rows from grids plus the static key catalogue, merge transforms into a deadkey table
from .deadkeys import DeadkeyTable
from .source import KeyboardDefinition, decode_definition, definition_from_dict
from .transform import available_platforms, select_platform, transform
from .types import (
    InvalidDefinitionError,
    KeyDefinition,
    KeyType,
    LayerName,
    Layout,
    LayoutError,
    MissingLayerError,
    NoPlatformsAvailableError,
    Row,
    UnsupportedPlatformError,
)

__all__ = [
    "DeadkeyTable",
    "InvalidDefinitionError",
    "KeyDefinition",
    "KeyType",
    "KeyboardDefinition",
    "LayerName",
    "Layout",
    "LayoutError",
    "MissingLayerError",
    "NoPlatformsAvailableError",
    "Row",
    "UnsupportedPlatformError",
    "available_platforms",
    "decode_definition",
    "definition_from_dict",
    "select_platform",
    "transform",
]
