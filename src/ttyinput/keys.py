# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""The logical key vocabulary.

Every key is a frozen, tagged msgspec struct; `Key` is the closed union of all of them.
Apart from `Cmd`, each key records whether it was pressed (True) or released (False).
"""

from __future__ import annotations

import enum
import typing

import msgspec


@enum.unique
class InputMode(enum.Enum):
    # ANSI-compatible mode.
    ANSI = "ansi"
    # ANSI-compatible mode with application cursor keys.
    APPLICATION = "application"
    EXTENDED = "extended"


class Modifiers(msgspec.Struct, frozen=True):
    shift: bool = False
    caps: bool = False
    ctrl: bool = False
    alt: bool = False

    @property
    def triplet(self) -> tuple[bool, bool, bool]:
        return (self.shift or self.caps, self.ctrl, self.alt)


class KeyStruct(msgspec.Struct, frozen=True, tag=True):
    pass


class PressableKey(KeyStruct, kw_only=True):
    press: bool = True


class Char(PressableKey):
    char: str

    def __post_init__(self):
        if len(self.char) != 1:
            raise ValueError(f"Char holds exactly one code point, got {self.char!r}")


class Up(PressableKey):
    pass


class Down(PressableKey):
    pass


class Left(PressableKey):
    pass


class Right(PressableKey):
    pass


class ShiftLeft(PressableKey):
    pass


class ShiftRight(PressableKey):
    pass


class CtrlLeft(PressableKey):
    pass


class CtrlRight(PressableKey):
    pass


class AltLeft(PressableKey):
    pass


class AltRight(PressableKey):
    pass


class MetaLeft(PressableKey):
    pass


class MetaRight(PressableKey):
    pass


class PageUp(PressableKey):
    pass


class PageDown(PressableKey):
    pass


class Home(PressableKey):
    pass


class End(PressableKey):
    pass


class Insert(PressableKey):
    pass


class Delete(PressableKey):
    pass


class CapsLock(PressableKey):
    pass


class NumLock(PressableKey):
    pass


class ScrollLock(PressableKey):
    pass


class Function(PressableKey):
    number: int

    def __post_init__(self):
        if self.number < 1:
            raise ValueError(f"Function keys are numbered from 1, got {self.number}")


class Enter(PressableKey):
    pass


class Cmd(KeyStruct):
    text: str

    @classmethod
    def menu_selection(cls, index: int, template: str):
        return cls(text=template.format(index=index))


Key = typing.Union[
    Char,
    Up,
    Down,
    Left,
    Right,
    ShiftLeft,
    ShiftRight,
    CtrlLeft,
    CtrlRight,
    AltLeft,
    AltRight,
    MetaLeft,
    MetaRight,
    PageUp,
    PageDown,
    Home,
    End,
    Insert,
    Delete,
    CapsLock,
    NumLock,
    ScrollLock,
    Function,
    Enter,
    Cmd,
]

# Keys that only ever matter as modifiers on other keys.
MODIFIER_KEYS = (ShiftLeft, ShiftRight, CtrlLeft, CtrlRight, AltLeft, AltRight, CapsLock)
META_KEYS = (MetaLeft, MetaRight)
