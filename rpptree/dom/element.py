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
This module defines the :class:`Element` class.

An Element describes an object and can have child objects. An Element can
display a ``head`` and optionally a ``tail``. The head is text that is printed
before the children (if any). The tail is displayed after the children, and
is used as a closing delimiter.

An Element can be constructed in two ways: either using the
:meth:`~HeadElement.from_origin` class method from tokens (this is done by the
RppTransform class), or manually using the normal constructor.

You can specify all child elements in the constructor, so theoretically you can
build a whole document in one expression.

To get the textual output of an element and all its child elements, use the
:meth:`~Element.write` method.

:class:`Element` inherits from  :class:`~rpptree.node.Node`, and thus from
:class:`list`, to build a reliable and easy to navigate tree structure.

"""

import reprlib

from ..node import Node


class ElementType(type):
    """Metaclass for Element.

    This meta class automatically adds an empty ``__slots__`` attribute if it
    is not defined in the class body.

    """
    def __new__(cls, name, bases, namespace):
        if '__slots__' not in namespace:
            namespace['__slots__'] = ()
        return type.__new__(cls, name, bases, namespace)


class Element(Node, metaclass=ElementType):
    """Base class for all element types.

    The Element has no head or tail value.

    Child elements can be specified directly as arguments to the constructor.
    Keyword arguments are set as attributes.

    """
    _head = None
    _tail = None

    def __init__(self, *children, **attrs):
        super().__init__(*children)
        for attribute, value in attrs.items():
            setattr(self, attribute, value)

    def __repr__(self):
        def result():
            # class name with last part module prepended
            cls = self.__class__
            mod = cls.__module__.split('.')[-1]
            yield "{}.{}".format(mod, cls.__name__)
            # head and tail
            head = self.repr_head()
            if head is not None:
                yield head
            tail = self.repr_tail()
            if tail is not None:
                yield '...'
                yield tail
            # child count
            if len(self):
                yield "({} child{})".format(len(self), '' if len(self) == 1 else 'ren')
            # position
            if getattr(self, 'head_origin', None):
                yield '[{}:{}]'.format(self.pos, self.end)
        return "<{}>".format(" ".join(result()))

    @property
    def pos(self):
        """Return the position of this element.

        Only makes sense for elements that have an origin, or one of the
        descendants has an origin. Returns None if this node and no single
        descendant of it has an origin.

        """
        try:
            return self.head_origin[0].pos
        except (AttributeError, IndexError):
            for n in self.descendants():
                try:
                    return n.head_origin[0].pos
                except (AttributeError, IndexError):
                    pass

    @property
    def end(self):
        """Return the end position of this element.

        Only makes sense for elements that have an origin, or one of the
        descendants has an origin. Returns None if this node and no single
        descendant of it has an origin.

        """
        try:
            return self.tail_origin[-1].end
        except (AttributeError, IndexError):
            for n in reversed(self):
                end = n.end
                if end is not None:
                    return end
            try:
                return self.head_origin[-1].end
            except (AttributeError, IndexError):
                pass

    @property
    def head(self):
        """The head contents."""
        return self._head

    @property
    def tail(self):
        """The tail contents."""
        return self._tail

    @classmethod
    def read_head(cls, head_origin):
        """Return the value as computed from the specified origin Tokens.

        The default implementation concatenates the text from all tokens.

        """
        return ''.join(t.text for t in head_origin)

    def write_head(self):
        """Return the textual output that represents our ``head`` value.

        The default implementation just returns the ``head`` attribute,
        assuming it is text.

        """
        return self.head

    def write_tail(self):
        """Return the textual output that represents our ``tail`` value.

        The default implementation just returns the ``tail`` attribute,
        assuming it is text.

        """
        return self.tail

    def repr_head(self):
        """Return a representation for the head.

        The default implementation returns None.

        """
        return None

    def repr_tail(self):
        """Return a representation for the tail.

        The default implementation returns None.

        """
        return None

    def indent_children(self):
        """Return True if the children should be written on their own lines,
        one indent level deeper.

        """
        return False

    def write(self, indent_width=1, start_indent=0):
        """Return the output of this node and its children, one line per node.

        See for the arguments the :class:`~rpptree.dom.indent.Indenter` class
        from the :mod:`~rpptree.dom.indent` module.

        """
        from . import indent
        return indent.Indenter(indent_width, start_indent).write(self)


class HeadElement(Element):
    """Element that has a fixed head value."""
    __slots__ = ('head_origin',)

    @classmethod
    def from_origin(cls, head_origin=(), tail_origin=(), *children, **attrs):
        """Instantiate an Element from the origin tokens, but don't keep the tokens."""
        return cls(*children, **attrs)

    @classmethod
    def with_origin(cls, head_origin=(), tail_origin=(), *children, **attrs):
        """Instantiate an Element from the origin tokens, and keep the tokens.

        This way, this element knows its position in the text source.

        """
        node = cls.from_origin(head_origin, tail_origin, *children, **attrs)
        node.head_origin = head_origin  #: tuple of parce Tokens the head value is read from
        return node


class TextElement(HeadElement):
    """Element that has a variable head value.

    This value must be given to the constructor.

    If you want to, you can implement the :meth:`check_head` method, which by
    default returns True, to perform some checking on the ``head`` value of
    this element. An invalid head value raises a :class:`TypeError`. This
    method is not called when an element is copied or constructed from or with
    an origin.

    """
    __slots__ = ('_head',)

    def __new__(cls, head, *children, **attrs):
        if not cls.check_head(head):
            raise TypeError("invalid head value for {}: {}".format(cls.__name__, repr(head)))
        return super().__new__(cls)

    @classmethod
    def _factory(cls, head, *children, **attrs):
        """Factory bypassing the ``check_head`` check."""
        instance = super().__new__(cls)
        instance.__init__(head, *children, **attrs)
        return instance

    def __init__(self, head, *children, **attrs):
        self._head = head
        super().__init__(*children, **attrs)

    def repr_head(self):
        """Return a repr value for our head value."""
        h = self.head
        if h is not None:
            return reprlib.repr(h)

    @classmethod
    def check_head(cls, head):
        """Returns whether the proposed head value is valid."""
        ### Raise error when forgetting the head value, and abusively using the first child
        return not isinstance(head, Element)

    def body_equals(self, other):
        """Compares the head values, called by :meth:`Node.equals() <rpptree.node.Node.equals>`."""
        return self.head == other.head

    @classmethod
    def from_origin(cls, head_origin=(), tail_origin=(), *children, **attrs):
        head = cls.read_head(head_origin)
        return cls._factory(head, *children, **attrs)

    def _copy(self):
        """Copy the node without children and without the origin."""
        return self._factory(self.head)


class BlockElement(TextElement):
    """TextElement that has a fixed tail value, and its children on separate lines."""
    __slots__ = ('tail_origin',)

    @classmethod
    def with_origin(cls, head_origin=(), tail_origin=(), *children, **attrs):
        node = cls.from_origin(head_origin, tail_origin, *children, **attrs)
        node.head_origin = head_origin
        node.tail_origin = tail_origin  #: tuple of parce Tokens the tail value is read from
        return node

    def indent_children(self):
        """Reimplemented to indent children of a BlockElement type by default."""
        return True
