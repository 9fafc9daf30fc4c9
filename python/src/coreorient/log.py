# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of coreorient.

# coreorient is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# coreorient is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with coreorient.  If not, see <https://www.gnu.org/licenses/>.

"""
Logging for coreorient.

Provides a single package logger with a console handler and a switch for
debug output.
"""

import logging

logger = logging.getLogger("coreorient")
logger.setLevel(logging.WARNING)

_handler = logging.StreamHandler()
_handler.setLevel(logging.DEBUG)
_formatter = logging.Formatter("[coreorient] %(levelname)s: %(message)s")
_handler.setFormatter(_formatter)
logger.addHandler(_handler)

# Keep records off the root logger to avoid duplicate console lines
logger.propagate = False


def set_debug_mode(enabled: bool):
    """Toggle debug logging on/off.

    Args:
        enabled: If True, sets log level to DEBUG. Otherwise, WARNING.
    """
    logger.setLevel(logging.DEBUG if enabled else logging.WARNING)
