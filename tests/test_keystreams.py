# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc
import io
import typing
from contextlib import aclosing

import pytest
import trio
from trio.lowlevel import checkpoint

from ttyinput import keys
from ttyinput.keycodes import KeyCode, KeyPress
from ttyinput.keys import InputMode
from ttyinput.keystreams import KeyEvent, KeyInput, ModeChange, TranslateKeys, feed_terminal, make_keystream, pump_all
from ttyinput.settings import Settings
from ttyinput.terminal import Terminal

T = typing.TypeVar("T")


async def make_async_source(
    items: collections.abc.Sequence[T],
):
    for item in items:
        await checkpoint()
        yield item


@pytest.mark.trio
async def test_translate_keys():
    settings = Settings.for_test()
    async with (
        aclosing(
            make_async_source(
                [
                    KeyEvent.pressed(KeyCode.KEY_LEFTSHIFT),
                    KeyEvent.pressed(KeyCode.KEY_H),
                    KeyEvent.released(KeyCode.KEY_H),
                    KeyEvent.released(KeyCode.KEY_LEFTSHIFT),
                    KeyEvent.pressed(KeyCode.KEY_1),
                    KeyEvent(key=KeyCode.KEY_1, press=KeyPress.REPEATED),
                    KeyEvent.pressed(KeyCode.KEY_UP),
                    KeyEvent.pressed(KeyCode.KEY_F5),
                    KeyEvent.pressed(KeyCode.KEY_KPENTER),
                    ModeChange(mode=InputMode.APPLICATION),
                ]
            )
        ) as keysource,
        pump_all(keysource, TranslateKeys(settings.keymaps)) as resultsource,
    ):
        results = [event async for event in resultsource]
    assert results == [
        KeyInput(key=keys.ShiftLeft()),
        KeyInput(key=keys.Char("H")),
        KeyInput(key=keys.Char("H", press=False)),
        KeyInput(key=keys.ShiftLeft(press=False)),
        KeyInput(key=keys.Char("1")),
        KeyInput(key=keys.Char("1")),
        KeyInput(key=keys.Up()),
        KeyInput(key=keys.Function(5)),
        KeyInput(key=keys.Enter()),
        ModeChange(mode=InputMode.APPLICATION),
    ]


def test_capslock_only_shifts_letters():
    translate = TranslateKeys(Settings.for_test().keymaps)
    assert translate.translate(KeyEvent.pressed(KeyCode.KEY_CAPSLOCK)) == keys.CapsLock()
    assert translate.translate(KeyEvent.released(KeyCode.KEY_CAPSLOCK)) == keys.CapsLock(press=False)
    assert translate.translate(KeyEvent.pressed(KeyCode.KEY_A)) == keys.Char("A")
    assert translate.translate(KeyEvent.pressed(KeyCode.KEY_SLASH)) == keys.Char("/")
    translate.translate(KeyEvent.pressed(KeyCode.KEY_RIGHTSHIFT))
    assert translate.translate(KeyEvent.pressed(KeyCode.KEY_A)) == keys.Char("a")
    assert translate.translate(KeyEvent.pressed(KeyCode.KEY_SLASH)) == keys.Char("?")


def test_unmapped_keys_are_dropped():
    translate = TranslateKeys({})
    assert translate.translate(KeyEvent.pressed(KeyCode.KEY_A)) is None
    assert translate.translate(KeyEvent.pressed(KeyCode.KEY_DOWN)) == keys.Down()


@pytest.mark.trio
async def test_keystream_to_terminal():
    settings = Settings.for_test()
    tty = io.BytesIO()
    terminal = Terminal.from_settings(settings, tty)
    send_channel, receive_channel = trio.open_memory_channel(0)

    async def typist():
        async with send_channel:
            for event in [
                KeyEvent.pressed(KeyCode.KEY_L),
                KeyEvent.released(KeyCode.KEY_L),
                KeyEvent.pressed(KeyCode.KEY_S),
                KeyEvent.released(KeyCode.KEY_S),
                KeyEvent.pressed(KeyCode.KEY_ENTER),
                KeyEvent.released(KeyCode.KEY_ENTER),
                KeyEvent.pressed(KeyCode.KEY_LEFTCTRL),
                KeyEvent.pressed(KeyCode.KEY_C),
                KeyEvent.released(KeyCode.KEY_C),
                KeyEvent.released(KeyCode.KEY_LEFTCTRL),
                ModeChange(mode=InputMode.APPLICATION),
                KeyEvent.pressed(KeyCode.KEY_UP),
                KeyEvent.released(KeyCode.KEY_UP),
            ]:
                await send_channel.send(event)

    async with trio.open_nursery() as nursery:
        nursery.start_soon(typist)
        async with make_keystream(receive_channel, settings) as keystream:
            await feed_terminal(keystream, terminal)

    assert tty.getvalue() == b"ls\r\x03\x1bOA"


def test_lock_key_autorepeat_is_dropped():
    translate = TranslateKeys(Settings.for_test().keymaps)
    assert translate.translate(KeyEvent.pressed(KeyCode.KEY_CAPSLOCK)) == keys.CapsLock()
    assert translate.translate(KeyEvent(key=KeyCode.KEY_CAPSLOCK, press=KeyPress.REPEATED)) is None
    assert translate.translate(KeyEvent(key=KeyCode.KEY_NUMLOCK, press=KeyPress.REPEATED)) is None
    assert translate.translate(KeyEvent.released(KeyCode.KEY_CAPSLOCK)) == keys.CapsLock(press=False)
    assert translate.capslock


@pytest.mark.trio
async def test_held_capslock_agrees_with_terminal():
    settings = Settings.for_test()
    tty = io.BytesIO()
    terminal = Terminal.from_settings(settings, tty)
    async with (
        aclosing(
            make_async_source(
                [
                    KeyEvent.pressed(KeyCode.KEY_CAPSLOCK),
                    KeyEvent(key=KeyCode.KEY_CAPSLOCK, press=KeyPress.REPEATED),
                    KeyEvent(key=KeyCode.KEY_CAPSLOCK, press=KeyPress.REPEATED),
                    KeyEvent.released(KeyCode.KEY_CAPSLOCK),
                    KeyEvent.pressed(KeyCode.KEY_A),
                    KeyEvent.pressed(KeyCode.KEY_UP),
                ]
            )
        ) as keysource,
        make_keystream(keysource, settings) as keystream,
    ):
        await feed_terminal(keystream, terminal)
    assert tty.getvalue() == b"A\x1b[1;2A"
    assert terminal.tty.modifiers.caps
