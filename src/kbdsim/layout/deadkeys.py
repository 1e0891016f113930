# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import collections.abc
import logging
import typing

import pygtrie

logger = logging.getLogger(__name__)

TransformTable = collections.abc.Mapping[str, typing.Any]


class DeadkeyTable:
    """Deadkey compositions for one layout.

    Stored as a trie keyed by character tuples: ("´", "a") -> "á". Only the
    first two levels take part in composition. Deeper paths from chained
    transforms are stored, but compose() never reaches them. Any trigger with
    a mapping counts as a trigger, even when the mapping is empty.
    """

    def __init__(self, trie: typing.Optional[pygtrie.Trie] = None, triggers: collections.abc.Iterable[str] = ()):
        self._trie = trie if trie is not None else pygtrie.Trie()
        self._triggers = frozenset(triggers) | {path[0] for path in self._trie.keys()}

    @classmethod
    def from_transforms(cls, transforms: TransformTable):
        trie = pygtrie.Trie()
        triggers = set()
        for trigger, combinations in transforms.items():
            if isinstance(combinations, collections.abc.Mapping):
                triggers.add(trigger)
            _flatten_into(trie, (trigger,), combinations)
        return cls(trie, triggers)

    def is_trigger(self, char: str) -> bool:
        return char in self._triggers

    def compose(self, trigger: str, base: str) -> typing.Optional[str]:
        return self._trie.get((trigger, base))

    def triggers(self) -> list[str]:
        return sorted(self._triggers)

    def to_dict(self) -> dict[str, dict[str, str]]:
        result: dict[str, dict[str, str]] = {trigger: {} for trigger in self._triggers}
        for path, composed in self._trie.items():
            if len(path) == 2:
                result.setdefault(path[0], {})[path[1]] = composed
        return result

    def __len__(self):
        return len(self._trie)

    def __eq__(self, other):
        if not isinstance(other, DeadkeyTable):
            return NotImplemented
        return self._triggers == other._triggers and dict(self._trie.items()) == dict(other._trie.items())

    def __repr__(self):
        return f"DeadkeyTable({self.to_dict()!r})"


def _flatten_into(trie: pygtrie.Trie, path: tuple[str, ...], value: typing.Any):
    if isinstance(value, str):
        if len(path) >= 2:
            trie[path] = value
        else:
            logger.debug("Dropping transform %r without a base character", path)
    elif isinstance(value, collections.abc.Mapping):
        for char, nested in value.items():
            _flatten_into(trie, path + (char,), nested)
    else:
        logger.debug("Dropping non-string transform %r -> %r", path, value)
