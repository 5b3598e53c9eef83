# -*- coding: utf-8 -*-
#
# This file is part of `ussdisplay`, a library for reading USS display documents
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
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
Test resolving references between display elements.
"""

### find ussdisplay
import sys
sys.path.insert(0, '.')

import pytest

from ussdisplay.dom.element import Document, Element, Text
from ussdisplay.dom.reference import Step, parse_reference, resolve_path, resolve_reference
from ussdisplay.exceptions import (
    IndexOutOfRange, InvalidReference, NotFound, NotParentFound)


def ref(path):
    return Element('Ref', attributes={'reference': path})


# A(B, B, C) inside a Document; the refs are added to the nodes as needed
tree = \
Document(
    Element('A',
        Text('\n'),
        Element('B', Text('b1'), Element('D', Text('d1'))),
        Text('\n'),
        Element('B', Text('b2'), Element('D', Text('d2')), Element('D', Text('d3'))),
        Element('C', Text('c')),
        ref('B[2]'),
        ref('B'),
        ref('..'),
        ref('../B[2]/D[2]'),
        ref('../C/..'),
        ref('../B[3]'),
        ref('../D'),
        ref('../B[0]'),
        ref('../B[x]'),
        ref('../../..'),
    ),
)

A = tree[0]
B1, B2, C = A[1], A[3], A[4]


def refs():
    return {node.attributes['reference']: node for node in A if node.name == 'Ref'}


def test_main():
    # from A itself
    assert resolve_path(A, 'B[2]') is B2
    assert resolve_path(A, 'B') is B1
    assert resolve_path(A, 'B[1]') is B1
    assert resolve_path(A, 'C') is C
    assert resolve_path(A, '..') is tree

    # parent traversal and composition from a child
    assert resolve_path(B1, '..') is A
    assert resolve_path(B1, '../C') is C
    assert resolve_path(B1, '../B[2]/D[2]') is B2[2]
    assert resolve_path(B1, '../B[2]/D[2]/../..') is A
    assert resolve_path(B2[1], '../../B/D') is B1[1]

    # empty segments select the first element child
    assert resolve_path(A, '') is B1


def test_reference_attribute():
    r = refs()
    # paths are relative to the node carrying the reference, not its parent
    with pytest.raises(IndexOutOfRange):
        resolve_reference(r['B[2]'])
    with pytest.raises(IndexOutOfRange):
        resolve_reference(r['B'])
    assert resolve_reference(r['..']) is A
    assert resolve_reference(r['../B[2]/D[2]']) is B2[2]
    assert resolve_reference(r['../C/..']) is A

    # idempotent, by identity
    node = r['../B[2]/D[2]']
    assert resolve_reference(node) is resolve_reference(node)

    # the resolved node is the node in the tree, not a copy
    assert resolve_reference(r['../C/..']).parent is tree


def test_failures():
    r = refs()

    with pytest.raises(NotParentFound):
        resolve_path(tree, '..')
    with pytest.raises(NotParentFound) as info:
        resolve_reference(r['../../..'])
    assert info.value.path == '../../..'

    with pytest.raises(IndexOutOfRange) as info:
        resolve_reference(r['../B[3]'])
    assert info.value.name == 'B'
    assert info.value.index == 3
    assert info.value.count == 2
    with pytest.raises(IndexOutOfRange):
        resolve_reference(r['../D'])
    with pytest.raises(IndexOutOfRange):
        resolve_reference(r['../B[0]'])
    with pytest.raises(IndexError):
        resolve_path(A, 'Nothing')

    with pytest.raises(InvalidReference) as info:
        resolve_reference(r['../B[x]'])
    assert info.value.segment == 'B[x]'

    with pytest.raises(NotFound) as info:
        resolve_reference(A)
    assert info.value.name == 'reference'
    assert info.value.kind == 'attribute'

    # text nodes are never selected
    with pytest.raises(IndexOutOfRange):
        resolve_path(A, '#text')


def test_parse_reference():
    assert parse_reference('..') == [Step(None, None)]
    assert parse_reference('../B[12]/C') == [Step(None, None), Step('B', 12), Step('C', 1)]
    for path in ('B[', 'B]', 'B[2]x', 'B[-1]', 'B[2][3]'):
        with pytest.raises(InvalidReference):
            parse_reference(path)


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
