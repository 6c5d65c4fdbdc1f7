# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import dataclasses
import enum
import typing

from .keys import Down, Enter, Up

if typing.TYPE_CHECKING:
    from .keys import Key


class Interaction(enum.Enum):
    # The widget did not use the key; send it on to the process.
    FORWARD = enum.auto()
    # The widget used the key and there is nothing to send.
    CONSUMED = enum.auto()


@dataclasses.dataclass(kw_only=True)
class BasicTooltip:
    text: str

    def interact(self, key: Key) -> int | Interaction:
        return Interaction.FORWARD


@dataclasses.dataclass(kw_only=True)
class MenuTooltip:
    """A list of options the user can walk through with the arrow keys.

    `position` is the highlighted option, or None before the user has moved into the
    menu. Enter on a highlighted option returns its index.
    """

    options: list[str]
    position: typing.Optional[int] = None

    def __post_init__(self):
        if self.position is not None and not 0 <= self.position < len(self.options):
            raise ValueError(f"position {self.position} is outside a menu of {len(self.options)} options")

    def _clamp(self):
        # options may have shrunk since the position was set
        if self.position is not None and self.position >= len(self.options):
            self.position = len(self.options) - 1 if self.options else None

    @property
    def selected(self) -> typing.Optional[str]:
        self._clamp()
        if self.position is None:
            return None
        return self.options[self.position]

    def interact(self, key: Key) -> int | Interaction:
        self._clamp()
        if not self.options:
            return Interaction.FORWARD
        match key, self.position:
            case Down(), None:
                self.position = 0
                return Interaction.CONSUMED
            case Down(), n:
                self.position = min(n + 1, len(self.options) - 1)
                return Interaction.CONSUMED
            case Up(), None:
                return Interaction.FORWARD
            case Up(), 0:
                self.position = None
                return Interaction.CONSUMED
            case Up(), n:
                self.position = n - 1
                return Interaction.CONSUMED
            case Enter(), None:
                return Interaction.FORWARD
            case Enter(), n:
                return n
            case _:
                return Interaction.FORWARD


Tooltip = BasicTooltip | MenuTooltip
