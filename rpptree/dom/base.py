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
Base classes for the transforms that build rpptree.dom elements.
"""


from parce import transform


class Transform(transform.Transform):
    """Transform base class that keeps the origin tokens.

    Provides the :meth:`factory` method that creates the DOM node.

    """
    def factory(self, element_class, head_origin, tail_origin=(), *children, **attrs):
        """Create an Element, keeping its origin.

        The ``head_origin`` and optionally ``tail_origin`` is an iterable of
        Token instances. All elements should be created using this method, so
        that it can be overridden for the case you don't want to remember the
        origin. Keyword arguments are given to the element's constructor.

        """
        return element_class.with_origin(tuple(head_origin), tuple(tail_origin), *children, **attrs)


class AdHocTransform:
    """Transform mixin class that does *not* keep the origin tokens.

    This is used to create pieces (nodes) of a REAPER project from text, and
    then use that pieces to compose a larger project. It is undesirable that
    origin tokens then would mistakenly be used as if they originated from the
    project the pieces are added to.

    """
    def factory(self, element_class, head_origin, tail_origin=(), *children, **attrs):
        """Create an Element *without* keeping its origin.

        The ``head_origin`` and optionally ``tail_origin`` is an iterable of
        Token instances.

        """
        return element_class.from_origin(tuple(head_origin), tuple(tail_origin), *children, **attrs)
