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
Test querying elements.
"""

### find rpptree
import sys
sys.path.insert(0, '.')

from rpptree.dom import read, rpp


track = read.rpp_document('''\
<TRACK {E1} "x" 5
  NAME "Drums"
  NAME second
  VOLPAN 1 0.5 -1
  <ITEM
    LENGTH 5.01
  >
  <FXCHAIN
  >
  <ITEM
  >
  AbCd==
  +/09
>
''')


def test_main():
    assert track.argument(0) == '{E1}'
    assert track.argument(1) == 'x'
    assert track.argument(2) is None
    assert track.argument_number(2) == 5
    assert track.argument_number(0) is None
    assert track.argument(3) is None
    assert track.argument(-1) is None
    assert track.argument_number(10) is None

    assert len(list(track.attributes())) == 3
    assert len(list(track.attributes('NAME'))) == 2
    assert list(track.attributes('MISSING')) == []
    assert track.attribute('NAME') == 'Drums'
    assert track.attribute('NAME', 1) == 'second'
    assert track.attribute('NAME', 2) is None
    assert track.attribute('NAME', -1) is None
    assert track.attribute('MISSING') is None
    assert track.attribute('VOLPAN') is None
    assert track.attribute_number('VOLPAN') == 1
    assert track.attribute_number('NAME') is None
    assert track.attribute_number('MISSING') is None


def test_elements():
    assert len(list(track.elements())) == 3
    assert [e.head for e in track.elements()] == ['ITEM', 'FXCHAIN', 'ITEM']
    items = list(track.elements('ITEM'))
    assert len(items) == 2
    assert items[0].attribute_number('LENGTH') == 5.01
    assert items[1].attribute_number('LENGTH') is None
    assert list(items[1].elements()) == []
    assert list(track.elements('MISSING')) == []
    # every call starts a new iteration
    assert len(list(track.elements('ITEM'))) == 2


def test_bindata():
    assert list(track.bindata()) == ['AbCd==', '+/09']
    assert list(track[3].bindata()) == []


def test_attribute():
    volpan = next(track.attributes('VOLPAN'))
    assert isinstance(volpan, rpp.Attribute)
    assert volpan.number() == 1
    assert volpan.number(1) == 0.5
    assert volpan.number(2) == -1
    assert volpan.number(3) is None
    assert volpan.value() is None
    name = next(track.attributes('NAME'))
    assert name.value() == 'Drums'
    assert name.value(1) is None
    assert name.number() is None


def test_queries_do_not_modify():
    text = track.write()
    list(track.attributes())
    track.attribute('NAME', 5)
    list(track.elements('ITEM'))
    assert track.write() == text


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
