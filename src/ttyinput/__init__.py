# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Keyboard input stages
# host level:
# stage 0: watch the keyboard device and issue raw keycode events
# stage 1: translate keycodes into logical keys, using the configured keymaps

# terminal level:
# stage 2: offer arrow/enter presses to a menu under the cursor
# stage 3: track modifier keys and encode everything else for the current input mode
