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
Test the Project, Track and Item objects.
"""

### find rpptree
import sys
sys.path.insert(0, '.')

import pytest

from rpptree import errors
from rpptree.dom import read
from rpptree.project import Project, Track, Item


text = '''\
<REAPER_PROJECT 0.1 "6.42/macOS-arm64" 1640001046
<TRACK
NAME "quando una stella"
<ITEM
LENGTH 5.01
>
>
>'''


def test_main():
    root = read.rpp_document(text)
    assert root.argument(1) == "6.42/macOS-arm64"
    tracks = list(root.elements('TRACK'))
    assert len(tracks) == 1
    assert tracks[0].attribute('NAME') == "quando una stella"
    items = list(tracks[0].elements('ITEM'))
    assert len(items) == 1
    assert items[0].attribute_number('LENGTH') == 5.01


def test_project():
    project = Project.from_text(text)
    assert project.reaper_version == "6.42/macOS-arm64"
    assert project.timestamp == 1640001046
    tracks = list(project.tracks())
    assert len(tracks) == 1
    assert isinstance(tracks[0], Track)
    assert tracks[0].name == "quando una stella"
    items = list(tracks[0].items())
    assert len(items) == 1
    assert isinstance(items[0], Item)
    assert items[0].length == 5.01
    assert items[0].position is None
    assert items[0].name is None
    assert 'REAPER_PROJECT' in repr(project)


def test_missing():
    project = Project.from_text('<REAPER_PROJECT 0.1 6.42\n>')
    assert project.reaper_version is None       # not quoted
    assert project.timestamp is None
    assert list(project.tracks()) == []
    with pytest.raises(errors.ParseError):
        Project.from_text('<REAPER_PROJECT')


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
