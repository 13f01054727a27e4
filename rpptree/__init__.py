# -*- coding: utf-8 -*-
#
# This file is part of `rpptree`, a library for REAPER and the `.rpp` format
#
# Copyright © 2026 by the rpptree contributors
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
The rpptree module.

Read REAPER project files (``.rpp``) into a tree of DOM nodes, query them and
write them back.

"""

from .pkginfo import version, version_string
from .registry import find


__all__ = ('find', 'version', 'version_string')
