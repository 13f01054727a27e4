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
Simple helper functions to easily build DOM elements reading from text.

By default the generated DOM nodes do not know their position in the
originating text, because the origin tokens are not preserved. This is the best
when building DOM snippets using this module and inserting them in existing
documents.

If you set the ``with_origin`` argument in the reader functions to True, the
origin tokens are preserved, so the DOM nodes know their position in the
originating text.

When the text is not valid, a :class:`~rpptree.errors.ParseError` is raised,
and no nodes are returned at all.

"""

import logging

import parce
from parce.transform import Transformer

from .. import errors
from ..lang import rpp


logger = logging.getLogger(__name__)


# init two transformers, accessible by 0 (False) and 1 (True) :-)
_transformer = [Transformer(), Transformer()]
_transformer[0].transform_name_template = "{}AdHocTransform"


def _read(lexicon, validate, text, with_origin):
    """Lex text with lexicon, validate and transform the tree."""
    logger.debug("reading %d characters in %s", len(text), lexicon)
    tree = parce.root(lexicon, text)
    try:
        validate(tree, text)
    except errors.ParseError as e:
        logger.debug("invalid text: %s", e)
        raise
    return _transformer[with_origin].transform_tree(tree)


def rpp_document(text, with_origin=False):
    """Return the root :class:`.rpp.Element` from the text of a REAPER project.

    Example::

        >>> from rpptree.dom import read
        >>> node = read.rpp_document('<TRACK\\n NAME "Drums"\\n VOLPAN 1 0 -1\\n>\\n')
        >>> node.dump()
        <rpp.Element 'TRACK' (2 children)>
         ├╴<rpp.Attribute 'NAME' (1 child)>
         │  ╰╴<rpp.String 'Drums'>
         ╰╴<rpp.Attribute 'VOLPAN' (3 children)>
            ├╴<rpp.Number 1.0>
            ├╴<rpp.Number 0.0>
            ╰╴<rpp.Number -1.0>
        >>> node.attribute('NAME')
        'Drums'

    If you want the generated nodes to know the position in the original text,
    you should keep the origin tokens and set ``with_origin`` to True.

    """
    node = _read(rpp.Rpp.root, rpp.validate, text, with_origin)
    logger.debug("read element %r", node.head)
    return node


def values(text, with_origin=False):
    """Return a list of value nodes read from one line of text.

    Example::

        >>> from rpptree.dom import read
        >>> read.values('0.1 "6.42/macOS-arm64" 1640001046')
        [<rpp.Number 0.1>, <rpp.String '6.42/macOS-arm64'>, <rpp.Number 1640001046.0>]

    """
    def validate(tree, text):
        rpp.check_tokens(tree, text)
        rpp.check_terminated(tree, text)
    return _read(rpp.Rpp.values, validate, text, with_origin)


def value(text, with_origin=False):
    """Return one value node read from the text, or None if the text has no values.

    Examples::

        >>> from rpptree.dom import read
        >>> read.value('3VpEA+9e7f4CAAAA')
        <rpp.Bare '3VpEA+9e7f4CAAAA'>
        >>> read.value('"a \\\\"quoted\\\\" word"').head
        'a "quoted" word'

    """
    for node in values(text, with_origin):
        return node
