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
This module defines a DOM (Document Object Model) for REAPER project files.

The DOM is a simple tree structure where every element of the project is
represented by a node, with the lines of its contents as child nodes.

This DOM is used in two ways:

1. Building a REAPER project (or a part of it, such as a track template) from
   scratch.

2. Transform a *parce* tree of an existing project text. Using the
   ``with_origin`` argument of the functions in :mod:`.read`, the tokens are
   kept in the nodes (in the ``origin`` attributes), so every node knows its
   position in the text.

"""

