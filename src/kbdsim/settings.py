import dataclasses
import json
import pathlib
import typing

import cattrs
import cattrs.gen

from .commontypes import DeviceVariant, Platform

settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(Platform, lambda p: p.value)
settings_converter.register_structure_hook(Platform, lambda v, _: Platform(v))
settings_converter.register_unstructure_hook(DeviceVariant, lambda v: v.value)
settings_converter.register_structure_hook(DeviceVariant, lambda v, _: DeviceVariant(v))


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: pathlib.Path
    default_platform: Platform
    default_variant: typing.Optional[DeviceVariant] = None
    display_locale: str = "en"
    source_id: str = ""
    layout_name: str = ""
    log_level: str = "INFO"

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        with dest.open("w") as outfile:
            json.dump(raw, outfile, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        with src.open() as infile:
            raw = json.load(infile)
        raw["_path"] = src
        return settings_converter.structure(raw, cls)

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "_path": "test.settings.json",
                "default_platform": "macOS",
                "default_variant": None,
                "display_locale": "en",
                "source_id": "test",
                "layout_name": "test",
                "log_level": "DEBUG",
            },
            cls,
        )


settings_converter.register_structure_hook(Settings, cattrs.gen.make_dict_structure_fn(Settings, settings_converter))
