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
REAPER project language and transform definition.

A REAPER project (``.rpp``) file consists of one element. An element starts
with a ``<`` directly followed by a tag name and a list of arguments on the
same line, then come zero or more lines with the contents, and finally a line
with a ``>`` closes the element. Every line of the contents is a child element,
an attribute (a name followed by a list of values), a line of base64 data or an
empty line::

    <REAPER_PROJECT 0.1 "6.42/macOS-arm64" 1640001046
      RIPPLE 0
      <TRACK
        NAME "quando una stella"
      >
    >

The :class:`Rpp` language definition lexes the text into a parce tree, where
every element, every value list and every quoted string gets its own context.
The lexer is strict: everything that does not fit the grammar gets an
``Invalid`` action, which is picked up by :func:`validate`.

The :class:`RppTransform` transforms a valid tree into
:mod:`rpptree.dom.rpp` nodes. Use the functions in :mod:`rpptree.dom.read`
which do both.

"""

import parce.action as a
from parce import Language, lexicon, default_action, skip

from rpptree import errors
from rpptree.dom import base, rpp
from . import patterns


class Rpp(Language):
    """REAPER project language definition."""
    @lexicon
    def root(cls):
        yield r'\s+', skip
        yield r'<', a.Bracket.Start, cls.element
        yield default_action, a.Invalid.Document

    @lexicon(consume=True)
    def element(cls):
        """An element, the ``<`` is in the context.

        The tag directly follows the ``<``, after that every rule matches at
        the beginning of a line, because all other lexicons consume the rest of
        their line, including the line ending.

        """
        yield r'(?<=<)' + patterns.IDENTIFIER, a.Name.Tag, cls.values
        yield r'(?<=<)\W', a.Invalid.Identifier
        yield patterns.SPACE, skip
        yield r'<', a.Bracket.Start, cls.element
        yield r'>', a.Bracket.End, -1, cls.line_end
        yield patterns.IDENTIFIER + r'(?=[ \t])', a.Name.Attribute, cls.values
        yield patterns.BINDATA, a.Literal.Data, cls.line_end
        yield patterns.NEWLINE, a.Whitespace
        yield default_action, a.Invalid.Fragment

    @lexicon
    def values(cls):
        """A list of values, upto and including the end of the line."""
        yield patterns.SPACE, skip
        yield r'(?<=")\S', a.Invalid.Value     # a value glued to a closing quote
        yield r'"', a.Delimiter.Quote, cls.string
        yield patterns.NUMBER, a.Number
        yield patterns.BARE, a.Text
        yield patterns.NEWLINE, a.Whitespace, -1
        yield default_action, a.Invalid.Value

    @lexicon(consume=True)
    def string(cls):
        """A quoted string, which may span more lines."""
        yield r'"', a.Delimiter.Quote, -1
        yield r'\\[\\"nt]', a.String.Escape
        yield r'[^"\\]+', a.String
        yield r'\\', a.String

    @lexicon
    def line_end(cls):
        """Only whitespace may follow until the end of the line."""
        yield patterns.SPACE, skip
        yield patterns.NEWLINE, a.Whitespace, -1
        yield default_action, a.Invalid.LineEnd


class RppTransform(base.Transform):
    """Transform a REAPER project to :mod:`rpptree.dom.rpp` elements.

    The text must be valid, see :func:`validate`; invalid parts are silently
    ignored here.

    """
    ## the rest of a line after a bindata line or closing ``>``
    line_end = None

    ## transforming methods
    def root(self, items):
        """Return the root :class:`rpp.Element <rpptree.dom.rpp.Element>`."""
        for i in items:
            if not i.is_token and i.name == "element":
                return i.obj

    def element(self, items):
        """Create an Element with its arguments and fragments."""
        head_origin = items[:2]     # the ``<`` and the tag name
        tail_origin = (items.pop(),) if items[-1] == '>' else ()
        args = ()
        fragments = []
        name = None
        for i in items[2:]:
            if i.is_token:
                if i.action is a.Name.Attribute:
                    name = i
                elif i.action is a.Literal.Data:
                    fragments.append(self.factory(rpp.BinData, (i,)))
                elif i.action is a.Whitespace:
                    fragments.append(self.factory(rpp.Empty, (i,)))
            elif i.name == "values":
                if name:
                    fragments.append(self.factory(rpp.Attribute, (name,), (), *i.obj))
                    name = None
                else:
                    args = i.obj
            elif i.name == "element":
                fragments.append(i.obj)
        return self.factory(rpp.Element, head_origin, tail_origin, *fragments, args=args)

    def values(self, items):
        """Return a list of Value nodes."""
        nodes = []
        for i in items:
            if i.is_token:
                if i.action is a.Number and patterns.is_number(i.text):
                    nodes.append(self.factory(rpp.Number, (i,)))
                elif i.action in (a.Number, a.Text):
                    nodes.append(self.factory(rpp.Bare, (i,)))     # e.g. 1e999
            elif i.name == "string":
                nodes.append(i.obj)
        return nodes

    def string(self, items):
        """Create a String node."""
        return self.factory(rpp.String, items)


class RppAdHocTransform(base.AdHocTransform, RppTransform):
    """RppTransform that does not keep the origin tokens."""
    pass


# maps the action of an invalid token to the error type and what was expected
_invalid = {
    a.Invalid.Document: (errors.UnexpectedCharacter, "'<'"),
    a.Invalid.Identifier: (errors.EmptyIdentifier, "a tag name"),
    a.Invalid.Fragment: (errors.UnexpectedCharacter,
        "a child element, an attribute, binary data, an empty line or '>'"),
    a.Invalid.Value: (errors.UnexpectedCharacter, "a value or the end of the line"),
    a.Invalid.LineEnd: (errors.UnexpectedCharacter, "the end of the line"),
}


def _is_element(context):
    """Return True if the parce context is an element context."""
    return len(context) > 0 and context[0].is_token and context[0].action is a.Bracket.Start


def _is_string(context):
    """Return True if the parce context is a string context."""
    return len(context) > 0 and context[0].is_token and context[0].action is a.Delimiter.Quote


def check_tokens(context, text=None):
    """Raise a :class:`~rpptree.errors.ParseError` for the first invalid token.

    The ``text``, if given, is used to compute the line and column number of
    the error.

    """
    for t in context.tokens():
        try:
            error, expected = _invalid[t.action]
        except KeyError:
            continue
        raise error(t.pos, expected, text)


def check_terminated(context, text=None):
    """Raise a :class:`~rpptree.errors.ParseError` if an element or string is
    not closed.

    Unclosed contexts can only be found at the end of the tree; if there are
    more, the innermost one is reported.

    """
    error = None
    while len(context) and not context[-1].is_token:
        context = context[-1]
        if _is_element(context):
            if len(context) < 2 or context[1].action is not a.Name.Tag:
                error = errors.EmptyIdentifier(context[0].end, "a tag name", text)
            elif not (context[-1].is_token and context[-1].action is a.Bracket.End):
                error = errors.UnterminatedElement(context[0].pos, "'>'", text)
        elif _is_string(context):
            if len(context) < 2 or not (context[-1].is_token
                                        and context[-1].action is a.Delimiter.Quote):
                error = errors.UnterminatedQuotedString(context[0].pos, "'\"'", text)
    if error:
        raise error


def validate(tree, text=None):
    """Raise a :class:`~rpptree.errors.ParseError` if the tree lexed by
    ``Rpp.root`` is not a valid REAPER project.

    A valid project contains exactly one element, optionally surrounded by
    whitespace. The first error in the text is reported.

    """
    root_element = None
    for node in tree:
        if node.is_token:
            expected = "'<'" if root_element is None else "the end of the document"
            raise errors.UnexpectedCharacter(node.pos, expected, text)
        if _is_element(node):
            if root_element is not None:
                raise errors.UnexpectedCharacter(node[0].pos, "the end of the document", text)
            root_element = node
        check_tokens(node, text)
    if root_element is None:
        raise errors.UnexpectedCharacter(len(text or ''), "'<'", text)
    check_terminated(tree, text)
