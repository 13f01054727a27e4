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
Test the node module.
"""

### find rpptree
import sys
sys.path.insert(0, '.')

import io

import pytest

from rpptree.node import Node


class N1(Node):
    pass


class N2(Node):
    pass


class N3(Node):
    pass


class M1(N1):
    pass


class M2(N2):
    pass


class M3(N3):
    pass


tree = \
N1(
    N2(
        N3(),
        M3(),
        N2(),
        M1(),
    ),
    N1(
        M2(),
    ),
)


def test_main():
    assert list(tree/N2) == [tree[0]]
    assert [type(n) for n in tree[0] / N3] == [N3, M3]     # M3 inherits from N3 :-)
    assert [type(n) for n in tree[0] / (N3, M1)] == [N3, M3, M1]
    assert list(tree[0] / N2()) == [tree[0][2]]     # an instance matches the exact type
    with pytest.raises(TypeError):
        tree / 1
    assert tree.height() == 2
    tree2 = tree.copy()
    assert tree.equals(tree2)
    assert tree2[0] is not tree[0]
    assert [type(n) for n in tree2.descendants()] == [type(n) for n in tree.descendants()]
    assert len(tree.copy(False)) == 0
    tree2[0][3] = N1()
    assert not tree.equals(tree2)


def test_identity():
    n = N1()
    assert n
    assert n == n
    assert n != N1()
    assert tree.index(tree[1]) == 1


def test_descendants():
    assert [type(n) for n in tree.descendants()] == [N2, N3, M3, N2, M1, N1, M2]
    assert [type(n) for n in tree.descendants(reverse=True)] == [N1, M2, N2, M1, N2, M3, N3]


def test_deep():
    root = node = N1()
    for i in range(5000):
        child = N1()
        node.append(child)
        node = child
    assert root.height() == 5000
    assert sum(1 for _ in root.descendants()) == 5000
    copy = root.copy()
    assert copy.height() == 5000
    assert copy.equals(root)
    node.append(N2())
    assert not copy.equals(root)


def test_dump():
    f = io.StringIO()
    tree.dump(f, "ascii")
    lines = f.getvalue().splitlines()
    assert len(lines) == 8
    assert lines[0] == "<N1 (2 children)>"
    assert lines[1] == " |-<N2 (4 children)>"
    assert lines[-1] == "    `-<M2 (0 children)>"


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
