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
Style records, and functions to parse the fill, draw and text styles of
display elements.

A :class:`Style` maps SVG/CSS style property names to a string, a number or a
:class:`~.color.Color`. For example::

    >>> from ussdisplay.dom import read
    >>> from ussdisplay import style
    >>> e = read.element('''
    ... <Rectangle>
    ...   <FillStyle>
    ...     <Pattern>Solid</Pattern>
    ...     <Color><red>1</red><green>0</green><blue>0</blue><alpha>1</alpha></Color>
    ...   </FillStyle>
    ... </Rectangle>''')
    >>> s = style.parse_fill_style(e)
    >>> s
    <Style fill=Color(red=1.0, green=0.0, blue=0.0, alpha=1.0) fill-opacity=1>
    >>> s.css()
    'fill:rgba(255, 0, 0, 1);fill-opacity:1'

"""

import collections.abc
import numbers

from .color import Color
from .dom.query import find_child, read_bool, read_color, read_string


#: Font names that are substituted by a font list with a generic fallback.
#: Lucida Sans Typewriter is the most common font in displays, but it is not
#: available on most systems.
FONT_FALLBACKS = {
    "Lucida Sans Typewriter": "Lucida Sans Typewriter, monospace",
}


class Style(collections.abc.Mapping):
    """An immutable mapping of style property names to values.

    Values must be a :class:`str`, a number or a :class:`~.color.Color`;
    other values raise :class:`TypeError`. Adding two styles returns a new
    style with the properties of both; the right one wins.

    """
    __slots__ = ('_properties',)

    def __init__(self, *args, **kwargs):
        properties = dict(*args, **kwargs)
        for name, value in properties.items():
            if isinstance(value, bool) or not isinstance(value, (Color, str, numbers.Real)):
                raise TypeError("invalid value for style property {}: {!r}".format(name, value))
        self._properties = properties

    def __getitem__(self, name):
        return self._properties[name]

    def __iter__(self):
        return iter(self._properties)

    def __len__(self):
        return len(self._properties)

    def __repr__(self):
        fields = [type(self).__name__]
        fields.extend('{}={!r}'.format(k, v) for k, v in self._properties.items())
        return '<{}>'.format(' '.join(fields))

    def __add__(self, other):
        if not isinstance(other, collections.abc.Mapping):
            return NotImplemented
        properties = dict(self._properties)
        properties.update(other)
        return type(self)(properties)

    def attributes(self):
        """Return a dictionary with the properties as string values,
        suitable as SVG presentation attributes."""
        return {name: str(value) for name, value in self._properties.items()}

    def css(self):
        """Return the properties as a CSS declaration string."""
        return ';'.join('{}:{}'.format(name, value) for name, value in self.attributes().items())


def _opacity(pattern):
    """Return 1 for the solid pattern, 0 for any other pattern."""
    return 1 if pattern.lower() == 'solid' else 0


def parse_fill_style(node):
    """Return the Style of the node's ``FillStyle`` child.

    The result has the ``fill`` and ``fill-opacity`` properties. Only the
    ``Solid`` pattern is visible.

    """
    fill_style = find_child(node, 'FillStyle')
    pattern = read_string(fill_style, 'Pattern')
    return Style({
        'fill': read_color(fill_style, 'Color'),
        'fill-opacity': _opacity(pattern),
    })


def parse_draw_style(node):
    """Return the Style of the node's ``DrawStyle`` child.

    The result has the ``stroke``, ``stroke-opacity`` and ``stroke-width``
    properties. The width is kept as a string, it may contain a unit.

    """
    draw_style = find_child(node, 'DrawStyle')
    pattern = read_string(draw_style, 'Pattern')
    return Style({
        'stroke': read_color(draw_style, 'Color'),
        'stroke-opacity': _opacity(pattern),
        'stroke-width': read_string(draw_style, 'Width'),
    })


def parse_text_style(node):
    """Return the Style of a text style node.

    The ``fill``, ``font-size`` and ``font-family`` properties are always
    present. The ``font-weight``, ``font-style`` and ``text-decoration``
    properties are only added when the node's ``IsBold``, ``IsItalic`` or
    ``IsUnderlined`` child is ``true``.

    """
    properties = {
        'fill': read_color(node, 'Color'),
        'font-size': read_string(node, 'Fontsize'),
        'font-family': read_string(node, 'Fontname'),
    }
    family = properties['font-family']
    if family in FONT_FALLBACKS:
        properties['font-family'] = FONT_FALLBACKS[family]
    if read_bool(node, 'IsBold', False):
        properties['font-weight'] = 'bold'
    if read_bool(node, 'IsItalic', False):
        properties['font-style'] = 'italic'
    if read_bool(node, 'IsUnderlined', False):
        properties['text-decoration'] = 'underline'
    return Style(properties)
