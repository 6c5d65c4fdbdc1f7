# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing

from .encoding import encode
from .keys import (
    AltLeft,
    AltRight,
    CapsLock,
    Cmd,
    CtrlLeft,
    CtrlRight,
    InputMode,
    MetaLeft,
    MetaRight,
    Modifiers,
    ShiftLeft,
    ShiftRight,
    MODIFIER_KEYS,
    META_KEYS,
)

if typing.TYPE_CHECKING:
    from .keys import Key

logger = logging.getLogger(__name__)


class TtyInput:
    """The write side of the pty: encodes keys for the current mode and sends them.

    Bare modifier keys never reach the encoder; they are tracked here and applied to
    whatever keys come after them.
    """

    def __init__(self, sink: typing.BinaryIO, mode: InputMode = InputMode.ANSI):
        self.sink = sink
        self.mode = mode
        self.momentary_state = {
            AltLeft: False,
            AltRight: False,
            CtrlLeft: False,
            CtrlRight: False,
            MetaLeft: False,
            MetaRight: False,
            ShiftLeft: False,
            ShiftRight: False,
        }
        self.lock_state = {
            CapsLock: False,
        }

    @property
    def modifiers(self) -> Modifiers:
        held = self.momentary_state
        return Modifiers(
            shift=held[ShiftLeft] or held[ShiftRight],
            caps=self.lock_state[CapsLock],
            ctrl=held[CtrlLeft] or held[CtrlRight],
            # Meta has no sequence of its own and behaves like alt.
            alt=held[AltLeft] or held[AltRight] or held[MetaLeft] or held[MetaRight],
        )

    def set_mode(self, mode: InputMode):
        if mode is not self.mode:
            logger.debug("input mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode

    def _track(self, key: Key):
        key_type = type(key)
        if key_type in self.momentary_state:
            self.momentary_state[key_type] = key.press
        if key_type in self.lock_state and key.press:
            self.lock_state[key_type] = not self.lock_state[key_type]

    def write(self, key: Key):
        if isinstance(key, MODIFIER_KEYS):
            self._track(key)
            return
        if isinstance(key, META_KEYS):
            self._track(key)
        code = encode(key, self.mode, self.modifiers)
        if code is None:
            return
        self.sink.write(code)
        self.sink.flush()

    def write_literal(self, text: str):
        self.write(Cmd(text=text))
