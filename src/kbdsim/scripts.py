import argparse
import logging
import pathlib
import typing

from .commontypes import DeviceVariant, Platform
from .engine.keyboard import KeyboardEngine
from .engine.layers import layer_display_name, output_for
from .engine.types import DeleteRequested, TextCommitted
from .layout.source import KeyboardDefinition, decode_definition
from .layout.transform import available_platforms, select_platform, transform
from .layout.types import LayerName, Layout
from .settings import Settings


def _load_definition(path: pathlib.Path) -> KeyboardDefinition:
    file_format = "json" if path.suffix == ".json" else "yaml"
    return decode_definition(path.read_bytes(), format=file_format)


def _load_settings(path: typing.Optional[pathlib.Path]) -> Settings:
    if path is not None:
        return Settings.load(path)
    return Settings(_path=pathlib.Path("kbdsim.settings.json"), default_platform=Platform.MACOS)


def _build_layout(args, settings: Settings) -> Layout:
    definition = _load_definition(args.definition)
    requested = Platform(args.platform) if args.platform else settings.default_platform
    platform = select_platform(definition, requested)
    variant = DeviceVariant(args.variant) if args.variant else settings.default_variant
    return transform(
        definition,
        platform,
        variant,
        source_id=settings.source_id,
        layout_name=settings.layout_name or args.definition.stem,
        display_locale=settings.display_locale,
    )


def _cell_text(key, layer: LayerName) -> str:
    if key.label is not None:
        return f"[{key.label or key.id}]"
    return output_for(key, layer) or "·"


def format_layer(layout: Layout, layer: LayerName) -> str:
    return "\n".join(" ".join(_cell_text(key, layer) for key in row.keys) for row in layout.rows)


def _common_parser():
    parser = argparse.ArgumentParser()
    parser.add_argument("definition", type=pathlib.Path)
    parser.add_argument("--platform", choices=[p.value for p in Platform])
    parser.add_argument("--variant", choices=[v.value for v in DeviceVariant])
    parser.add_argument("--settings", type=pathlib.Path)
    return parser


show_parser = _common_parser()
show_parser.add_argument("--layer", choices=[layer.value for layer in LayerName], default=LayerName.DEFAULT.value)


def show_layout_cli():
    args = show_parser.parse_args()
    settings = _load_settings(args.settings)
    logging.basicConfig(level=settings.log_level)
    layout = _build_layout(args, settings)
    layer = LayerName(args.layer)
    print(f"{layout.name} [{layout.id}]")
    print("platforms:", ", ".join(p.value for p in available_platforms(_load_definition(args.definition))))
    print(f"layer: {layer_display_name(layer)}")
    print(format_layer(layout, layer))
    triggers = layout.deadkeys.triggers()
    if triggers:
        print("deadkeys:", " ".join(triggers))


type_parser = _common_parser()
type_parser.add_argument("keys", nargs="+", help="key ids to click, in order")


def type_keys_cli():
    args = type_parser.parse_args()
    settings = _load_settings(args.settings)
    logging.basicConfig(level=settings.log_level)
    engine = KeyboardEngine(_build_layout(args, settings))
    text = ""
    for key_id in args.keys:
        key = engine.find_key(key_id)
        if key is None:
            raise SystemExit(f"No key {key_id!r} in layout")
        for output in engine.click(key):
            match output:
                case TextCommitted(text=committed):
                    text += committed
                case DeleteRequested():
                    text = text[:-1]
    print(text)
