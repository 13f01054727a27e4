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
This module defines a :class:`Node` class, to build simple tree structures
based on Python lists.

A node owns its children; there are no references from a child back to its
parent, so a node tree never contains cycles and a subtree can be used on its
own without keeping the rest of the tree alive.

"""


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
    "double":  (" ║ ", "   ", " ╠═", " ╚═"),
    "thick":   (" ┃ ", "   ", " ┣╸", " ┗╸"),
    "flat":    ("│", " ", "├", "╰"),
}

DUMP_STYLE_DEFAULT = "round"


class Node(list):
    """Node implements a simple tree type, based on Python :class:`list`.

    You can inherit of Node and add your own attributes and methods.

    Iterating over a node yields the child nodes, just like the underlying
    Python list, in the order they were added. Unlike Python's list, a node
    always evaluates to True, even if there are no children.

    Besides the usual methods, Node defines the ``/`` query operator. It
    expects a Node (sub)class (or instance) as argument, and iterates lazily
    over the children that are instances of the specified class::

        for n in node / MyClass:
            # do_something with n, which is a child of node and
            # an instance of MyClass

    Instead of a subclass, a class instance or a tuple of more than one class
    may also be given. If a class instance is given, :meth:`body_equals` must
    return true for the compared nodes. (Child nodes are not compared when using
    a class instance to compare with.)

    Tree-wide operations like :meth:`copy`, :meth:`equals`,
    :meth:`descendants` and :meth:`dump` do not recurse, so the depth of a
    tree is not limited by Python's recursion limit.

    """

    __slots__ = ()

    def __repr__(self):
        c = "child" if len(self) == 1 else "children"
        return '<{} ({} {})>'.format(type(self).__name__, len(self), c)

    def __bool__(self):
        """Always True."""
        return True

    def __init__(self, *children):
        """Constructor.

        If children are given they are appended to the list.

        """
        if children:
            list.extend(self, children)

    __hash__ = object.__hash__

    def __eq__(self, other):
        """Identity compare to make Node.index robust and "faster"."""
        return self is other

    def __ne__(self, other):
        """Identity compare to make Node.index robust and "faster"."""
        return self is not other

    def _get_predicate_iterator(self, other, source_iterator):
        """Return an iterator or NotImplemented.

        This is used by the ``/`` operator.

        If the argument ``other`` is a :class:`Node` instance, the type must
        match and :meth:`body_equals` must return True. The argument may also
        be a :class:`type` or a :class:`tuple`, in which case it is used as
        argument for the :func:`isinstance` builtin function.

        For other types of argument, NotImplemented is returned.

        """
        if isinstance(other, Node):
            predicate = lambda node: type(node) is type(other) and node.body_equals(other)
        elif isinstance(other, (tuple, type)):
            predicate = lambda node: isinstance(node, other)
        else:
            return NotImplemented
        return filter(predicate, source_iterator)

    def __truediv__(self, cls):
        """Iterate over children that inherit the specified class(es)."""
        return self._get_predicate_iterator(cls, self)

    def _copy(self):
        """Return a copy of this node without children.

        Inherit this method to also copy instance attributes.

        """
        return type(self)()

    def copy(self, with_children=True):
        """Return a copy of this Node.

        If ``with_children`` is True (the default), child nodes are also
        copied.

        """
        copy = self._copy()
        if with_children:
            stack = [(self, copy)]
            while stack:
                node, new = stack.pop()
                for n in node:
                    c = n._copy()
                    new.append(c)
                    stack.append((n, c))
        return copy

    def equals(self, other):
        """Return True if we and other are equivalent.

        This is the case when we and the other have the same class, the same
        amount of children, :meth:`body_equals` returns True, and finally for
        all the children this method returns True.

        Before the children are compared, this method calls
        :meth:`body_equals`; implement that method if you want to add more
        tests, e.g. for certain instance attributes.

        """
        stack = [(self, other)]
        while stack:
            n, m = stack.pop()
            if type(n) is not type(m) or len(n) != len(m) or not n.body_equals(m):
                return False
            stack.extend(zip(n, m))
        return True

    def body_equals(self, other):
        """Implement this to add more :meth:`equals` tests, before all the
        children are compared.

        The default implementation returns True.

        """
        return True

    def descendants(self, reverse=False):
        """Iterate over all the descendants of this node.

        If ``reverse`` is set to True, yields all descendants in backward
        direction.

        When you :meth:`~generator.send` False to this generator, child nodes
        of the just yielded node will not be yielded.

        """
        iterate = reversed if reverse else iter
        stack = []
        gen = iterate(self)
        while True:
            for n in gen:
                if (yield n) is not False and len(n):
                    stack.append(gen)
                    gen = iterate(n)
                    break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    break

    def height(self):
        """Return the height of the tree (the longest distance to a descendant)."""
        stack = []
        height = 0
        gen = iter((self,))
        while True:
            for node in gen:
                if len(node):
                    stack.append(gen)
                    height = max(height, len(stack))
                    gen = iter(node)
                    break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    return height

    def dump(self, file=None, style=None):
        """Display a graphical representation of the node and its contents.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        print(repr(self), file=file)
        # a stack of (prefix, iterator over (is_last, node)) tuples
        def children(node):
            z = len(node) - 1
            return ((i == z, n) for i, n in enumerate(node))
        stack = []
        prefix, gen = '', children(self)
        while True:
            for is_last, node in gen:
                print(prefix + d[2 + int(is_last)] + repr(node), file=file)
                if len(node):
                    stack.append((prefix, gen))
                    prefix, gen = prefix + d[int(is_last)], children(node)
                    break
            else:
                if stack:
                    prefix, gen = stack.pop()
                else:
                    break
