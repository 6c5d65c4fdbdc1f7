# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import msgspec


class Coords(msgspec.Struct, frozen=True):
    x: int
    y: int

    @classmethod
    def zeroes(cls):
        return cls(x=0, y=0)


class Size(msgspec.Struct, frozen=True):
    width: int
    height: int

    def __contains__(self, item):
        if not isinstance(item, Coords):
            return False
        return 0 <= item.x < self.width and 0 <= item.y < self.height


class TtyInputError(Exception):
    pass


class EncodingNotImplemented(TtyInputError, NotImplementedError):
    """No encoding table has been defined for this key or mode yet.

    Distinct from an encoder returning None: None means the key legitimately
    produces no bytes, this means nobody has decided what it should produce.
    """


class ModifierKeyError(TtyInputError):
    def __init__(self, key):
        self.key = key
        super().__init__(f"Bare modifier key {key!r} must be tracked, not encoded")
