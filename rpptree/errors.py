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
Exceptions raised when reading text that is not a valid REAPER project.

All of them inherit from :class:`ParseError`, which itself is a
:class:`ValueError`. A parse error is always fatal to the reading call: no
partial tree is returned.

"""


class ParseError(ValueError):
    """Raised when the text can't be read.

    ``pos`` is the position in the text where the problem was found, and
    ``expected`` a short description of what was expected there. If the
    ``text`` is given, the :attr:`line` and :attr:`column` (both counting from
    1) are computed as well.

    """
    description = "parse error"

    def __init__(self, pos, expected, text=None):
        self.pos = pos
        self.expected = expected
        self.line = self.column = None
        if text is not None:
            self.line = text.count('\n', 0, pos) + 1
            self.column = pos - text.rfind('\n', 0, pos)
        super().__init__(pos, expected)

    def __str__(self):
        if self.line is not None:
            where = "line {}, column {}".format(self.line, self.column)
        else:
            where = "position {}".format(self.pos)
        return "{} at {}: expected {}".format(self.description, where, self.expected)


class UnexpectedCharacter(ParseError):
    """The text does not match the grammar at this position."""
    description = "unexpected character"


class UnterminatedQuotedString(ParseError):
    """A quoted string has no closing ``"``.

    The position is the one of the opening quote.

    """
    description = "unterminated quoted string"


class UnterminatedElement(ParseError):
    """An element has no closing ``>``.

    The position is the one of the opening ``<``.

    """
    description = "unterminated element"


class EmptyIdentifier(ParseError):
    """A ``<`` is not followed by a tag name."""
    description = "empty identifier"
