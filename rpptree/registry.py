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
Registry of the language definitions bundled with :mod:`rpptree`.

When adding languages to :mod:`rpptree.lang` please also add a registration
here.

"""

__all__ = ['find', 'register']


import parce.registry


registry = parce.registry.Registry()


def find(name=None, *, filename=None, mimetype=None, contents=None):
    """Get the root lexicon for a language with name.

    See for all the arguments :func:`parce.find`. If no root lexicon can be
    found in rpptree's bundled languages, falls back to :mod:`parce`.

    """
    if name:
        lexicon_name = registry.find(name)
    else:
        for lexicon_name in registry.suggest(filename, mimetype, contents):
            break
        else:
            lexicon_name = None
    if lexicon_name:
        return parce.registry.root_lexicon(lexicon_name)
    return parce.find(name, filename=filename, mimetype=mimetype, contents=contents)


def register(lexicon_name, *,
    name = None,
    desc = None,
    aliases = (),
    filenames = (),
    mimetypes = (),
    guesses = (),
):
    """Register a root lexicon name with specified properties.

    See for an explanation of all the arguments
    :meth:`parce.registry.Registry.register`.

    """
    registry.register(
        lexicon_name, name = name, desc = desc, aliases = list(aliases),
        filenames = list(filenames), mimetypes = list(mimetypes), guesses = list(guesses))



## register bundled languages here
register("rpptree.lang.rpp.Rpp.root",
    name = "REAPER",
    desc = "REAPER project, track template or backup",
    aliases = ["rpp"],
    filenames = [("*.rpp", 1), ("*.RPP", 1), ("*.rpp-bak", 0.9), ("*.RTrackTemplate", 0.9)],
    mimetypes = [("application/x-reaper-project", 1)],
    guesses = [(r'^\s*<REAPER_PROJECT\b', 1), (r'^\s*<TRACK\b', 0.5)],
)
