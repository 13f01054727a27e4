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
Functionality to write a DOM document out as indented lines.

A REAPER project is line based: every element head, attribute, binary data
line and closing ``>`` is on a line of its own, and the contents of an element
are indented one level deeper than the element itself.

"""


class _Block:
    """Keeps the administration of a line of output text.

    The number of spaces to indent this line is in the ``indent`` attribute;
    the line itself is built as a list in the ``line`` attribute.

    """
    def __init__(self, indent):
        self.indent = indent
        self.line = []

    def output(self):
        """Get the output line. An empty line gets no indent."""
        text = ''.join(self.line)
        if text:
            return ' ' * self.indent + text + '\n'
        return '\n'


class Indenter:
    """Prints the indented output of a node.

    Indentation preferences can be given on instantiation or by setting the
    attributes of the same name.

    The default ``indent_width`` can be given, and the additional
    ``start_indent`` which is prepended to every output line, both in number of
    spaces. REAPER itself uses an indent width of 2; the default is 1.

    Call :meth:`write` to get the indented text output of a node.

    """
    def __init__(self,
            indent_width = 1,
            start_indent = 0,
        ):

        #: the default indent width
        self.indent_width = indent_width

        #: the number of spaces to prepend to every output line
        self.start_indent = start_indent

        # initialize working variables
        self._output = []               # the list in which the result output is built up
        self._indent_stack = []         # the list of indenting history

    def write(self, node):
        """Get the indented output of the node.

        Called by :meth:`Element.write() <rpptree.dom.element.Element.write>`.

        """
        self._output.clear()
        self._indent_stack.clear()
        self.output_node(node)
        return ''.join(block.output() for block in self._output)

    def output_node(self, node):
        """*(Internal.)* Output one node and, if it indents, its descendants.

        The children are visited using a stack of iterators, so deeply nested
        nodes do not hit the recursion limit.

        """
        stack = []
        gen = iter((node,))
        while True:
            for n in gen:
                self.create_new_block()
                self._output[-1].line.append(n.write_head())
                if n.indent_children():
                    self.enter_indent()
                    stack.append((n, gen))
                    gen = iter(n)
                    break
            else:
                if not stack:
                    break
                n, gen = stack.pop()
                self.leave_indent()
                tail = n.write_tail()
                if tail:
                    self.create_new_block()
                    self._output[-1].line.append(tail)

    def enter_indent(self):
        """*(Internal.)* Enter a new indent level."""
        self._indent_stack.append(self.current_indent() + self.indent_width)

    def leave_indent(self):
        """*(Internal.)* Leave the youngest indent level."""
        self._indent_stack.pop()

    def current_indent(self):
        """*(Internal.)* Get the current indent (including ``start_indent``)
        in nr of spaces.

        """
        return self._indent_stack[-1] if self._indent_stack else self.start_indent

    def create_new_block(self):
        """*(Internal.)* Go to a new line."""
        self._output.append(_Block(self.current_indent()))
