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
Elements needed for REAPER projects.

An :class:`Element` has a tag name as ``head`` value, a tuple of values in its
``args`` attribute, and the lines of its contents as children: child
:class:`Element` nodes, :class:`Attribute`, :class:`BinData` and
:class:`Empty` nodes, in the order they appear in the text.

An :class:`Attribute` has its name as ``head`` value and its values as
children. A value is a :class:`String`, a :class:`Bare` word or a
:class:`Number`.

A project can be built manually::

    >>> from rpptree.dom.rpp import *
    >>> track = Element('TRACK',
    ...     Attribute('NAME', String('quando una stella')),
    ...     Attribute('VOLPAN', Number(1), Number(0), Number(-1)),
    ...     args=[Bare('{E1E2E3}')])
    >>> print(track.write(2), end='')
    <TRACK {E1E2E3}
      NAME "quando una stella"
      VOLPAN 1 0 -1
    >

Elements read from text (see :mod:`rpptree.dom.read`) are of the same types.

"""

import itertools
import math

import parce.action as a

from ..lang import patterns
from . import element


class Value(element.TextElement):
    """Base class for a value in the argument list of an element or attribute."""
    def write(self):
        """Return the text of this single value."""
        return self.write_head()


class Text(Value):
    """Base class for a textual value."""
    @classmethod
    def check_head(cls, head):
        return isinstance(head, str)


class String(Text):
    """A quoted string value.

    The head value is the unescaped text. Backslash, double quote, newline and
    tab are escaped on output.

    """
    @classmethod
    def read_head(cls, origin):
        end = -1 if len(origin) > 1 and origin[-1] == '"' else None
        return ''.join(patterns.ESCAPES.get(t.text, t.text) if t.action is a.String.Escape else t.text
            for t in origin[1:end])

    def write_head(self):
        return '"{}"'.format(''.join(patterns.ESCAPE_CHARS.get(c, c) for c in self.head))


class Bare(Text):
    """An unquoted word that is not a number, e.g. ``{3F2504E0}`` or ``-``."""
    @classmethod
    def check_head(cls, head):
        return isinstance(head, str) and patterns.is_bare(head)


class Number(Value):
    """A numerical value, always read as a float.

    Integral numbers are written without fraction, so ``6.0`` is written as
    ``6``. Other numbers are written using the shortest representation that
    reads back to the same float.

    """
    @classmethod
    def check_head(cls, head):
        if not isinstance(head, (int, float)) or isinstance(head, bool):
            return False
        try:
            return math.isfinite(head)
        except OverflowError:
            # an int too large for a float
            return False

    @classmethod
    def read_head(cls, origin):
        return float(origin[0].text)

    def write_head(self):
        text = repr(float(self.head))
        return text[:-2] if text.endswith('.0') else text


def _text(node):
    """Return the head of a Text node, or None for another node."""
    if isinstance(node, Text):
        return node.head


def _number(node):
    """Return the head of a Number node as a float, or None for another node."""
    if isinstance(node, Number):
        return float(node.head)


def _nth(iterable, index):
    """Return the item at index of iterable, or None."""
    if index >= 0:
        for item in itertools.islice(iterable, index, None):
            return item


class Attribute(element.TextElement):
    """A named list of values, on a line of its own.

    The head value is the name, and the values are the children.

    """
    @classmethod
    def check_head(cls, head):
        return isinstance(head, str) and patterns.is_identifier(head)

    def write_head(self):
        # the space after the name is also written without values
        return '{} {}'.format(self.head, ' '.join(v.write_head() for v in self))

    def value(self, index=0):
        """Return the text of the value at ``index``, None if there is no such
        value or it is a number.

        """
        return _text(_nth(self, index))

    def number(self, index=0):
        """Return the value at ``index`` as a float, None if there is no such
        value or it is not a number.

        """
        return _number(_nth(self, index))


class BinData(element.TextElement):
    """A line of base64 encoded binary data, stored verbatim."""
    @classmethod
    def check_head(cls, head):
        return isinstance(head, str) and patterns.is_bindata(head)


class Empty(element.HeadElement):
    """An empty line inside an element."""
    head = ''


class Element(element.BlockElement):
    """A REAPER project element, such as ``REAPER_PROJECT``, ``TRACK`` or ``ITEM``.

    The head value is the tag name. The arguments on the first line are
    given as a tuple of :class:`Value` nodes in the ``args`` keyword
    argument. The children are the contents.

    The methods to query the contents never raise an exception when something
    can't be found or has the wrong type; instead None is returned, or an
    iterator that yields nothing.

    """
    __slots__ = ('args',)

    tail = '>'

    def __init__(self, head, *children, args=(), **attrs):
        self.args = tuple(args)     #: the values on the first line
        super().__init__(head, *children, **attrs)

    @classmethod
    def check_head(cls, head):
        return isinstance(head, str) and patterns.is_identifier(head)

    @classmethod
    def read_head(cls, origin):
        return origin[-1].text

    def write_head(self):
        return '<' + ' '.join((self.head, *(v.write_head() for v in self.args)))

    def body_equals(self, other):
        """Compares the tag and the arguments."""
        return self.head == other.head and len(self.args) == len(other.args) \
            and all(v.equals(w) for v, w in zip(self.args, other.args))

    def _copy(self):
        """Copy the node and its arguments, without children and origin."""
        return self._factory(self.head, args=(v.copy() for v in self.args))

    def argument(self, index):
        """Return the text of the argument at ``index``.

        Returns None if there is no such argument, or when it is a number.

        """
        return _text(_nth(self.args, index))

    def argument_number(self, index):
        """Return the argument at ``index`` as a float.

        Returns None if there is no such argument, or when it is not a number.

        """
        return _number(_nth(self.args, index))

    def attributes(self, name=None):
        """Yield the :class:`Attribute` nodes, optionally only those with ``name``."""
        for n in self / Attribute:
            if name is None or n.head == name:
                yield n

    def attribute(self, name, index=0):
        """Return the text of the first value of the ``index``-th attribute
        with that name, or None.

        """
        node = _nth(self.attributes(name), index)
        if node is not None:
            return node.value()

    def attribute_number(self, name, index=0):
        """Return the first value of the ``index``-th attribute with that name
        as a float, or None.

        """
        node = _nth(self.attributes(name), index)
        if node is not None:
            return node.number()

    def elements(self, tag=None):
        """Yield the child :class:`Element` nodes, optionally only those with
        the ``tag``.

        """
        for n in self / Element:
            if tag is None or n.head == tag:
                yield n

    def bindata(self):
        """Yield the text of the :class:`BinData` lines."""
        for n in self / BinData:
            yield n.head
