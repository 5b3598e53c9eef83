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
Test the query functions in dom.query
"""

### find ussdisplay
import sys
sys.path.insert(0, '.')

import pytest

from ussdisplay.color import Color
from ussdisplay.dom.element import Element, Text
from ussdisplay.dom import query
from ussdisplay.exceptions import CoercionError, DisplayError, NotFound


def color(r, g, b, a):
    return Element('Color',
        Element('red', Text(r)),
        Element('green', Text(g)),
        Element('blue', Text(b)),
        Element('alpha', Text(a)),
    )


def make_label():
    return Element('Label',
        Text('\n  '),
        Element('Name', Text('first')),
        Text('\n  '),
        Element('Name', Text('second')),
        Element('X', Text('12')),
        Element('Y', Text(' 7 ')),
        Element('Width', Text('3.5')),
        Element('Height', Text('wide')),
        Element('Count', Text('1_000')),
        Element('Visible', Text('true')),
        Element('Enabled', Text('True')),
        Element('Empty'),
        color('1', '0.5', '0', '1'),
        Element('Mixed', Text('a '), Element('b', Text('b')), Text(' c')),
        attributes={'reference': '../Label', 'blinking': 'true', 'hidden': 'yes'},
    )


def test_find():
    label = make_label()
    assert query.find_child(label, 'Name') is label[1]
    assert query.has_child(label, 'Name')
    assert not query.has_child(label, 'Nothing')
    with pytest.raises(NotFound) as info:
        query.find_child(label, 'Nothing')
    assert info.value.name == 'Nothing'
    assert info.value.kind == 'child'
    assert str(info.value) == 'No child node named Nothing could be found'

    names = query.find_children(label, 'Name')
    assert names == [label[1], label[3]]
    assert query.find_children(label, 'Nothing') == []
    children = query.find_children(label)
    assert not any(n.is_text for n in children)
    assert len(children) == 12
    assert query.find_children(label, '') == children


def test_read_string():
    label = make_label()
    assert query.read_string(label, 'Name') == 'first'     # first match wins
    assert query.read_string(label, 'Y') == ' 7 '          # verbatim
    assert query.read_string(label, 'Empty') == ''
    assert query.read_string(label, 'Mixed') == 'a b c'
    assert query.read_string(label, 'Nothing', 'default') == 'default'
    assert query.read_string(label, 'Nothing', None) is None
    with pytest.raises(NotFound):
        query.read_string(label, 'Nothing')


def test_read_numbers():
    label = make_label()
    assert query.read_int(label, 'X') == 12
    assert query.read_int(label, 'Y') == 7
    assert query.read_float(label, 'Width') == 3.5
    assert query.read_float(label, 'X') == 12.0
    assert query.read_int(label, 'Nothing', 5) == 5
    assert query.read_float(label, 'Nothing', 0.25) == 0.25

    with pytest.raises(CoercionError) as info:
        query.read_float(label, 'Height')
    assert info.value.name == 'Height'
    assert info.value.text == 'wide'
    assert info.value.type is float
    with pytest.raises(ValueError):
        query.read_int(label, 'Width')  # no truncation of 3.5
    # underscores are not part of decimal literals
    with pytest.raises(CoercionError):
        query.read_int(label, 'Count')
    with pytest.raises(CoercionError):
        query.read_float(label, 'Count')
    with pytest.raises(NotFound):
        query.read_int(label, 'Nothing')


def test_read_bool():
    label = make_label()
    assert query.read_bool(label, 'Visible') is True
    assert query.read_bool(label, 'Enabled') is False    # only exactly "true"
    assert query.read_bool(label, 'Empty') is False
    assert query.read_bool(label, 'Height') is False     # never fails
    assert query.read_bool(label, 'Nothing', True) is True
    with pytest.raises(NotFound):
        query.read_bool(label, 'Nothing')


def test_read_color():
    label = make_label()
    c = query.read_color(label, 'Color')
    assert isinstance(c, Color)
    assert c == Color(1.0, 0.5, 0.0, 1.0)
    assert query.read_color_node(label[12]) == c

    default = Color(0, 0, 0, 1)
    assert query.read_color(label, 'Nothing', default) is default

    # values outside 0..1 come back unchanged
    assert query.read_color_node(color('2', '-1', '0', '0.5')) == (2.0, -1.0, 0.0, 0.5)

    incomplete = Element('Color', Element('red', Text('1')), Element('green', Text('1')),
        Element('blue', Text('1')))
    with pytest.raises(NotFound) as info:
        query.read_color_node(incomplete)
    assert info.value.name == 'alpha'


def test_attributes():
    label = make_label()
    assert query.read_string_attr(label, 'reference') == '../Label'
    assert query.read_bool_attr(label, 'blinking') is True
    assert query.read_bool_attr(label, 'hidden') is False
    with pytest.raises(NotFound) as info:
        query.read_string_attr(label, 'nothing')
    assert info.value.kind == 'attribute'
    assert str(info.value) == 'No attribute named nothing'
    with pytest.raises(DisplayError):
        query.read_bool_attr(label, 'nothing')

    # attributes are not children, and children are not attributes
    assert not query.has_child(label, 'reference')
    with pytest.raises(LookupError):
        query.read_string_attr(label, 'Name')


def test_idempotent():
    label = make_label()
    assert query.read_color(label, 'Color') == query.read_color(label, 'Color')
    assert query.find_child(label, 'X') is query.find_child(label, 'X')
