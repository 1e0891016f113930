# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import abc
import typing
from contextlib import aclosing, asynccontextmanager
from typing import Any, AsyncIterable, cast

import trio
import trio_util

from .keyboard import KeyboardEngine
from .types import (
    ClearKeyboard,
    KeyboardInput,
    KeyboardOutput,
    KeyClick,
    KeyDown,
    KeyUp,
    SwapLayout,
)

if typing.TYPE_CHECKING:
    from ..layout.types import Layout


class Section(abc.ABC):
    @abc.abstractmethod
    async def pump(self, source: trio.MemoryReceiveChannel[Any], sink: trio.MemorySendChannel[Any]): ...


class KeyboardSection(Section):
    """Feed keyboard input events through an engine, in arrival order.

    ``state`` holds a snapshot of the engine after every event, for
    renderers to wait on. Layout swaps travel through the same channel as key
    events, so no key is ever handled against a half-replaced layout.
    """

    def __init__(self, engine: typing.Optional[KeyboardEngine] = None):
        self.engine = engine if engine is not None else KeyboardEngine()
        self.state = trio_util.AsyncValue(self.engine.snapshot())

    def handle(self, event: KeyboardInput) -> list[KeyboardOutput]:
        match event:
            case KeyDown(code=code):
                return self.engine.key_down(code)
            case KeyUp(code=code):
                return self.engine.key_up(code)
            case KeyClick(key=key):
                return self.engine.click(key)
            case SwapLayout(layout=layout):
                return self.engine.set_layout(layout)
            case ClearKeyboard():
                return self.engine.clear_state()
        raise TypeError(f"Unexpected keyboard input {event!r}")

    async def pump(self, source: trio.MemoryReceiveChannel[KeyboardInput], sink: trio.MemorySendChannel[KeyboardOutput]):
        async with aclosing(source), aclosing(sink):
            async for event in source:
                outputs = self.handle(event)
                snapshot = self.engine.snapshot()
                if snapshot != self.state.value:
                    self.state.value = snapshot
                for output in outputs:
                    await sink.send(output)


@asynccontextmanager
async def pump_all(first_source: AsyncIterable[Any], *sections: Section):
    async with trio.open_nursery() as nursery:
        section_input = first_source
        for section in sections:
            section_send_channel, section_receive_channel = trio.open_memory_channel(0)
            nursery.start_soon(section.pump, section_input, section_send_channel)
            section_input = section_receive_channel
        yield section_input
        nursery.cancel_scope.cancel()


@asynccontextmanager
async def make_keystream(
    input_channel: trio.MemoryReceiveChannel[KeyboardInput],
    layout: typing.Optional[Layout] = None,
):
    section = KeyboardSection(KeyboardEngine(layout))
    async with pump_all(input_channel, section) as keystream:
        yield section, cast(trio.MemoryReceiveChannel[KeyboardOutput], keystream)
