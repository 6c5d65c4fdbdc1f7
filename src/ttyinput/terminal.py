# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing

from .grid import CharGrid
from .input import TtyInput
from .keys import Cmd, Down, Enter, InputMode, Up
from .tooltip import Interaction, MenuTooltip

if typing.TYPE_CHECKING:
    from .commontypes import Coords
    from .keys import Key
    from .settings import Settings
    from .tooltip import Tooltip

logger = logging.getLogger(__name__)

# An APC string terminated with a 7-bit ST.
DEFAULT_MENU_SELECTION_TEMPLATE = "\x1b_[menu;{index}\x1b\\"


class Terminal:
    def __init__(
        self,
        width: int,
        height: int,
        tty: typing.BinaryIO,
        *,
        mode: InputMode = InputMode.ANSI,
        scroll_x: bool = False,
        scroll_y: bool = True,
        menu_selection_template: str = DEFAULT_MENU_SELECTION_TEMPLATE,
    ):
        self.width = width
        self.height = height
        self.title = ""
        self.active = CharGrid(width=width, height=height, scroll_x=scroll_x, scroll_y=scroll_y)
        self.inactive: list[CharGrid] = []
        self.tty = TtyInput(tty, mode)
        self.menu_selection_template = menu_selection_template

    @classmethod
    def from_settings(cls, settings: Settings, tty: typing.BinaryIO):
        return cls(
            settings.width,
            settings.height,
            tty,
            mode=settings.input_mode,
            scroll_x=settings.scroll_x,
            scroll_y=settings.scroll_y,
            menu_selection_template=settings.menu_selection_template,
        )

    @property
    def cursor_position(self) -> Coords:
        return self.active.cursor

    def tooltip_at(self, coords: Coords) -> typing.Optional[Tooltip]:
        return self.active.tooltip_at(coords)

    def send_input(self, key: Key):
        match key:
            case Down(press=True) | Up(press=True) | Enter(press=True):
                match self.tooltip_at(self.cursor_position):
                    case MenuTooltip() as menu:
                        outcome = menu.interact(key)
                    case _:
                        outcome = Interaction.FORWARD
                match outcome:
                    case Interaction.FORWARD:
                        self.tty.write(key)
                    case Interaction.CONSUMED:
                        logger.debug("menu at %r consumed %r", self.cursor_position, key)
                    case int(index):
                        logger.debug("menu at %r selected option %d", self.cursor_position, index)
                        self.tty.write(Cmd.menu_selection(index, self.menu_selection_template))
            case _:
                self.tty.write(key)

    def push_buffer(self, scroll_x: bool, scroll_y: bool):
        grid = CharGrid(width=self.width, height=self.height, scroll_x=scroll_x, scroll_y=scroll_y)
        self.inactive.append(self.active)
        self.active = grid
        logger.debug("pushed buffer, %d saved", len(self.inactive))

    def pop_buffer(self):
        if not self.inactive:
            return
        self.active = self.inactive.pop()
        logger.debug("popped buffer, %d saved", len(self.inactive))

    def set_title(self, title: str):
        self.title = title

    def set_input_mode(self, mode: InputMode):
        self.tty.set_mode(mode)

    def bell(self):
        logger.info("BELL")

    def set_visible_height(self, rows: int):
        self.active.set_height(rows)
        self.height = rows

    def set_visible_width(self, cols: int):
        self.active.set_width(cols)
        self.width = cols
