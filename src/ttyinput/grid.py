# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import dataclasses
import typing

from .commontypes import Coords, Size

if typing.TYPE_CHECKING:
    from .tooltip import Tooltip


@dataclasses.dataclass(kw_only=True)
class CharGrid:
    """One screen buffer, as far as input handling is concerned.

    Cell contents live elsewhere; this keeps the dimensions, how the buffer scrolls,
    where the cursor is and which tooltips are anchored to which cells.
    """

    width: int
    height: int
    scroll_x: bool = False
    scroll_y: bool = True
    cursor: Coords = dataclasses.field(default_factory=Coords.zeroes)
    tooltips: dict[Coords, Tooltip] = dataclasses.field(default_factory=dict)

    @property
    def size(self):
        return Size(width=self.width, height=self.height)

    def _clamp(self, coords: Coords):
        return Coords(
            x=max(0, min(coords.x, self.width - 1)),
            y=max(0, min(coords.y, self.height - 1)),
        )

    def _trim(self):
        self.cursor = self._clamp(self.cursor)
        self.tooltips = {coords: tooltip for coords, tooltip in self.tooltips.items() if coords in self.size}

    def set_width(self, cols: int):
        self.width = cols
        self._trim()

    def set_height(self, rows: int):
        self.height = rows
        self._trim()

    def move_cursor_to(self, coords: Coords):
        self.cursor = self._clamp(coords)

    def add_tooltip(self, coords: Coords, tooltip: Tooltip):
        if coords not in self.size:
            raise ValueError(f"{coords!r} is outside a {self.width}x{self.height} grid")
        self.tooltips[coords] = tooltip

    def remove_tooltip(self, coords: Coords):
        self.tooltips.pop(coords, None)

    def tooltip_at(self, coords: Coords) -> typing.Optional[Tooltip]:
        return self.tooltips.get(coords)
