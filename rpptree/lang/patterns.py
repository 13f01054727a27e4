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
Regular expressions describing the words of the REAPER project format.

They are used by the :class:`~rpptree.lang.rpp.Rpp` language definition to
lex text, and by the :mod:`rpptree.dom.rpp` elements to check whether a
manually given head value would be read back the same way.

"""

import math
import re


#: A tag or attribute name.
IDENTIFIER = r'\w+'

#: A number: optional sign, digits with an optional fraction, optional
#: exponent. Only matches when the full bare token is a number.
NUMBER = r'[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?(?!\S)'

#: Any other unquoted token.
BARE = r'\S+'

#: A line with binary (base64) data.
BINDATA = r'[A-Za-z0-9+/=]+'

#: Spaces and tabs, i.e. whitespace that does not end the line.
SPACE = r'[ \t]+'

#: A line ending.
NEWLINE = r'\r?\n'

#: The two-character escapes in a quoted string, and what they mean.
ESCAPES = {
    '\\\\': '\\',
    '\\"': '"',
    '\\n': '\n',
    '\\t': '\t',
}

#: The characters that need to be escaped when writing a quoted string.
ESCAPE_CHARS = {v: k for k, v in ESCAPES.items()}


_RE_MATCH_IDENTIFIER = re.compile(IDENTIFIER).fullmatch
_RE_MATCH_NUMBER = re.compile(NUMBER).fullmatch
_RE_MATCH_BARE = re.compile(BARE).fullmatch
_RE_MATCH_BINDATA = re.compile(BINDATA).fullmatch


def is_identifier(text):
    """Return True if the text is a valid tag or attribute name."""
    return bool(_RE_MATCH_IDENTIFIER(text))


def is_number(text):
    """Return True if the full text is read as a number.

    A number that is too large to be represented as a finite float is not
    read as a number, but as bare text.

    """
    return bool(_RE_MATCH_NUMBER(text)) and math.isfinite(float(text))


def is_bare(text):
    """Return True if the text is read back as one unquoted, non-numeric token."""
    return bool(_RE_MATCH_BARE(text)) and not text.startswith('"') and not is_number(text)


def is_bindata(text):
    """Return True if the text is a valid binary data line."""
    return bool(_RE_MATCH_BINDATA(text))
