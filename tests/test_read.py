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
Test reading REAPER project text.
"""

### find rpptree
import sys
sys.path.insert(0, '.')

from rpptree.dom import read, rpp


project = '''\
<REAPER_PROJECT 0.1 "6.42/macOS-arm64" 1640001046
  RIPPLE 0
  <TRACK
    NAME "quando una stella"
    <ITEM
      POSITION 0.125
      LENGTH 6

      <SOURCE WAVE
        FILE "stella.wav"
      >
    >
  >
>
'''


def test_main():
    d = read.rpp_document(project)
    assert isinstance(d, rpp.Element)
    assert d.head == "REAPER_PROJECT"
    assert [type(v) for v in d.args] == [rpp.Number, rpp.String, rpp.Number]
    assert d.args[0].head == 0.1
    assert d.args[1].head == "6.42/macOS-arm64"
    assert d.args[2].head == 1640001046
    assert [type(n) for n in d] == [rpp.Attribute, rpp.Element]
    assert d[0].head == "RIPPLE"
    assert d[0][0].head == 0

    track = d[1]
    assert track.head == "TRACK"
    assert track.args == ()
    item = track[1]
    assert item.head == "ITEM"
    # fragments are kept in source order
    assert [type(n) for n in item] == [rpp.Attribute, rpp.Attribute, rpp.Empty, rpp.Element]
    assert [n.head for n in item] == ["POSITION", "LENGTH", "", "SOURCE"]
    source = item[3]
    assert [type(v) for v in source.args] == [rpp.Bare]
    assert source.args[0].head == "WAVE"
    assert source[0][0].head == "stella.wav"


def test_values():
    assert [type(v) for v in read.values('0.1 "6.42" 1640001046 {E1-F2} -')] == \
        [rpp.Number, rpp.String, rpp.Number, rpp.Bare, rpp.Bare]
    assert read.values('') == []
    assert read.values('  \t ') == []
    assert read.value('') is None
    assert read.value('a b').head == 'a'


def test_numbers():
    """Only whole tokens that look like a number become a Number."""
    for text, value in (
        ('6', 6.0),
        ('0.125', 0.125),
        ('-1', -1.0),
        ('+2.5', 2.5),
        ('.5', 0.5),
        ('5.', 5.0),
        ('1e5', 100000.0),
        ('-2.5E-3', -0.0025),
    ):
        v = read.value(text)
        assert isinstance(v, rpp.Number), text
        assert v.head == value, text
    for text in ('3VpEA+9e7f4CAAAA', '1.2.3', '12abc', '-', 'nan', 'inf', '0x10', '1e999', '{E1}'):
        v = read.value(text)
        assert isinstance(v, rpp.Bare), text
        assert v.head == text


def test_strings():
    assert read.value('""').head == ''
    assert read.value('"with spaces  inside"').head == 'with spaces  inside'
    assert read.value(r'"a\\b\"c\nd\te"').head == 'a\\b"c\nd\te'
    # an unknown escape keeps the backslash
    assert read.value(r'"C:\x"').head == 'C:\\x'
    # a quoted string may span lines
    assert read.value('"two\nlines"').head == 'two\nlines'
    assert read.value('"12"').head == '12'
    assert isinstance(read.value('"12"'), rpp.String)


def test_elements():
    d = read.rpp_document('<FOO\n>')
    assert d.head == "FOO"
    assert d.args == ()
    assert len(d) == 0

    # the first argument may directly follow the tag
    d = read.rpp_document('<FOO"bar"\n>')
    assert d.args[0].head == "bar"
    d = read.rpp_document('<FOO-1\n>')
    assert d.args[0].head == -1

    # whitespace around the root element and the lines is allowed
    d = read.rpp_document('\n  <A 1 \t\n \t B  x  y \n\n   >  \n\n')
    assert d.head == "A"
    assert d.args[0].head == 1
    assert [type(n) for n in d] == [rpp.Attribute, rpp.Empty]
    assert [v.head for v in d[0]] == ['x', 'y']

    # an attribute without values still needs the space after the name
    d = read.rpp_document('<A\n B \n C\n>')
    assert [type(n) for n in d] == [rpp.Attribute, rpp.BinData]
    assert len(d[0]) == 0
    assert d[1].head == 'C'

    # Windows line endings
    d = read.rpp_document('<A 1\r\n B 2\r\n>\r\n')
    assert d[0].head == 'B'
    assert d[0][0].head == 2


def test_bindata():
    d = read.rpp_document('<VST "VST: ReaEQ"\n  ZXFlcu5e7f4CAAAA\n  AAAAAA==\n  +/09\n>\n')
    assert [type(n) for n in d] == [rpp.BinData] * 3
    assert [n.head for n in d] == ['ZXFlcu5e7f4CAAAA', 'AAAAAA==', '+/09']


def test_deep_nesting():
    depth = 200
    text = ''.join('<E{}\n'.format(i) for i in range(depth)) + '>\n' * depth
    d = read.rpp_document(text)
    assert d.height() == depth - 1
    node = d
    for i in range(depth - 1):
        assert node.head == 'E{}'.format(i)
        node = node[0]
    assert node.head == 'E{}'.format(depth - 1)
    assert len(node) == 0


def test_origin():
    text = '<A 1\n B x\n>\n'
    d = read.rpp_document(text, True)
    assert d.pos == 0
    assert d.end == 11
    assert d.args[0].pos == 3
    assert d[0].pos == 6
    assert d[0][0].pos == 8
    assert d[0].end == 9
    assert '[0:11]' in repr(d)

    d = read.rpp_document(text)
    assert d.pos is None
    assert d.end is None


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
