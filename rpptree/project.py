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
Thin wrappers giving named access to the common parts of a REAPER project.

A :class:`Project` wraps the root ``REAPER_PROJECT`` element, a :class:`Track`
a ``TRACK`` element and an :class:`Item` an ``ITEM`` element. The wrapped
:class:`~rpptree.dom.rpp.Element` is in the ``element`` attribute, and can be
used to get at everything else.

Missing or differently typed data results in None.

Example::

    >>> from rpptree.project import Project
    >>> project = Project.from_text('''<REAPER_PROJECT 0.1 "6.42/macOS-arm64" 1640001046
    ...   <TRACK
    ...     NAME "quando una stella"
    ...   >
    ... >
    ... ''')
    >>> project.reaper_version
    '6.42/macOS-arm64'
    >>> [track.name for track in project.tracks()]
    ['quando una stella']

"""

from .dom import read, rpp


class _ElementWrapper:
    """Base class for an object wrapping an :class:`~rpptree.dom.rpp.Element`."""
    def __init__(self, element):
        self.element = element

    def __repr__(self):
        return '<{} {!r}>'.format(type(self).__name__, self.element)


class Project(_ElementWrapper):
    """A REAPER project."""

    @classmethod
    def from_text(cls, text):
        """Read a Project from text. Raises :class:`~rpptree.errors.ParseError`
        if the text is invalid.

        """
        return cls(read.rpp_document(text))

    @property
    def reaper_version(self):
        """The version of REAPER that saved the project, e.g. ``'6.42/macOS-arm64'``.

        This is the second argument of the element, when it is a quoted string.

        """
        args = self.element.args
        if len(args) > 1 and isinstance(args[1], rpp.String):
            return args[1].head

    @property
    def timestamp(self):
        """The time the project was saved (in seconds since the epoch), as a float."""
        return self.element.argument_number(2)

    def tracks(self):
        """Yield a :class:`Track` for every ``TRACK`` element."""
        for element in self.element.elements('TRACK'):
            yield Track(element)


class Track(_ElementWrapper):
    """A track in a project, or in a track template."""

    @property
    def name(self):
        return self.element.attribute('NAME')

    def items(self):
        """Yield an :class:`Item` for every media ``ITEM`` element."""
        for element in self.element.elements('ITEM'):
            yield Item(element)


class Item(_ElementWrapper):
    """A media item on a track."""

    @property
    def name(self):
        return self.element.attribute('NAME')

    @property
    def position(self):
        """The start of the item in seconds."""
        return self.element.attribute_number('POSITION')

    @property
    def length(self):
        """The length of the item in seconds."""
        return self.element.attribute_number('LENGTH')
