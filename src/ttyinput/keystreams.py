# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import abc
import logging
import unicodedata
from contextlib import aclosing, asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterable, cast

import msgspec
import trio

from . import keys
from .keycodes import KeyCode, KeyPress
from .keys import InputMode, Key

if TYPE_CHECKING:
    from .settings import Settings
    from .terminal import Terminal

logger = logging.getLogger(__name__)


class KeyEvent(msgspec.Struct, frozen=True):
    key: KeyCode
    press: KeyPress

    @classmethod
    def pressed(cls, key: KeyCode):
        return cls(key=key, press=KeyPress.PRESSED)

    @classmethod
    def released(cls, key: KeyCode):
        return cls(key=key, press=KeyPress.RELEASED)


# Data to transmit to the controlling process.
class KeyInput(msgspec.Struct, frozen=True, tag=True):
    key: Key


# A change in how that data should be transmitted.
class ModeChange(msgspec.Struct, frozen=True, tag=True):
    mode: InputMode


InputEvent = KeyInput | ModeChange

FIXED_KEYS: dict[KeyCode, type[keys.PressableKey]] = {
    KeyCode.KEY_UP: keys.Up,
    KeyCode.KEY_DOWN: keys.Down,
    KeyCode.KEY_LEFT: keys.Left,
    KeyCode.KEY_RIGHT: keys.Right,
    KeyCode.KEY_LEFTSHIFT: keys.ShiftLeft,
    KeyCode.KEY_RIGHTSHIFT: keys.ShiftRight,
    KeyCode.KEY_LEFTCTRL: keys.CtrlLeft,
    KeyCode.KEY_RIGHTCTRL: keys.CtrlRight,
    KeyCode.KEY_LEFTALT: keys.AltLeft,
    KeyCode.KEY_RIGHTALT: keys.AltRight,
    KeyCode.KEY_LEFTMETA: keys.MetaLeft,
    KeyCode.KEY_RIGHTMETA: keys.MetaRight,
    KeyCode.KEY_PAGEUP: keys.PageUp,
    KeyCode.KEY_PAGEDOWN: keys.PageDown,
    KeyCode.KEY_HOME: keys.Home,
    KeyCode.KEY_END: keys.End,
    KeyCode.KEY_INSERT: keys.Insert,
    KeyCode.KEY_DELETE: keys.Delete,
    KeyCode.KEY_CAPSLOCK: keys.CapsLock,
    KeyCode.KEY_NUMLOCK: keys.NumLock,
    KeyCode.KEY_SCROLLLOCK: keys.ScrollLock,
    KeyCode.KEY_ENTER: keys.Enter,
    KeyCode.KEY_KPENTER: keys.Enter,
}

# Autorepeat of a lock key is not another toggle.
LOCK_KEYS = frozenset({KeyCode.KEY_CAPSLOCK, KeyCode.KEY_NUMLOCK, KeyCode.KEY_SCROLLLOCK})

FUNCTION_KEYS = {
    KeyCode.KEY_F1: 1,
    KeyCode.KEY_F2: 2,
    KeyCode.KEY_F3: 3,
    KeyCode.KEY_F4: 4,
    KeyCode.KEY_F5: 5,
    KeyCode.KEY_F6: 6,
    KeyCode.KEY_F7: 7,
    KeyCode.KEY_F8: 8,
    KeyCode.KEY_F9: 9,
    KeyCode.KEY_F10: 10,
    KeyCode.KEY_F11: 11,
    KeyCode.KEY_F12: 12,
}


class Section(abc.ABC):
    @abc.abstractmethod
    async def pump(self, source: trio.MemoryReceiveChannel[Any], sink: trio.MemorySendChannel[Any]): ...


# stage 1: convert keycode + press state into a logical key
class TranslateKeys(Section):
    def __init__(self, keymaps: dict[KeyCode, list[str]]):
        self.keymaps = keymaps
        # Only tracked to pick the keymap level; the terminal tracks modifiers for encoding.
        self.shift = {KeyCode.KEY_LEFTSHIFT: False, KeyCode.KEY_RIGHTSHIFT: False}
        self.capslock = False

    def translate(self, event: KeyEvent) -> Key | None:
        if event.key in LOCK_KEYS and event.press == KeyPress.REPEATED:
            return None
        press = event.press != KeyPress.RELEASED
        if event.key in self.shift:
            self.shift[event.key] = press
        if event.key == KeyCode.KEY_CAPSLOCK and event.press == KeyPress.PRESSED:
            self.capslock = not self.capslock

        if event.key in FIXED_KEYS:
            return FIXED_KEYS[event.key](press=press)
        if event.key in FUNCTION_KEYS:
            return keys.Function(FUNCTION_KEYS[event.key], press=press)
        if event.key in self.keymaps:
            keymap = self.keymaps[event.key]
            is_shifted = any(self.shift.values())
            if unicodedata.category(keymap[0]).startswith("L"):
                is_shifted ^= self.capslock
            level = 1 if is_shifted else 0
            return keys.Char(keymap[level], press=press)
        return None

    async def pump(self, source: trio.MemoryReceiveChannel[KeyEvent | ModeChange], sink: trio.MemorySendChannel[InputEvent]):
        async with aclosing(source), aclosing(sink):
            async for event in source:
                if isinstance(event, ModeChange):
                    await sink.send(event)
                    continue
                key = self.translate(event)
                if key is None:
                    logger.debug("dropping %s %s", event.key.name, event.press.name)
                    continue
                await sink.send(KeyInput(key=key))


async def feed_terminal(source: AsyncIterable[InputEvent], terminal: Terminal):
    async for event in source:
        match event:
            case KeyInput(key=key):
                terminal.send_input(key)
            case ModeChange(mode=mode):
                terminal.set_input_mode(mode)


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
    key_event_channel: trio.MemoryReceiveChannel[KeyEvent | ModeChange],
    settings: Settings,
):
    sections = [
        TranslateKeys(settings.keymaps),
    ]

    async with pump_all(key_event_channel, *sections) as keystream:
        yield cast(trio.MemoryReceiveChannel[InputEvent], keystream)
