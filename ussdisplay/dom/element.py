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
The node types of a display document.

A document tree consists of a :class:`Document` at the root, :class:`Element`
nodes with a name and attributes, and :class:`Text` nodes containing the
character data between the elements. For example::

    >>> from ussdisplay.dom.element import Document, Element, Text
    >>> doc = Document(
    ...     Element('Display',
    ...         Element('Width', Text('800')),
    ...         Element('Rectangle', attributes={'reference': '../Width'})))
    >>> doc.dump()
    <Document (1 child)>
     ╰╴<Element 'Display' (2 children)>
        ├╴<Element 'Width' (1 child)>
        │  ╰╴<Text '800'>
        ╰╴<Element 'Rectangle' reference='../Width'>

The query functions in :mod:`.query` and :mod:`.reference` only use the
``name``, ``attributes``, ``is_text`` and ``parent`` attributes, iteration over
the children and the :meth:`~Element.text_content` method. Any other tree type
providing those can be queried as well.

"""

import reprlib
import types

from .. import node


class DisplayNode(node.Node):
    """Base class for the node types in a display document."""

    __slots__ = ()

    #: the node name, e.g. the tag name of an element
    name = None

    #: attributes are only present on Elements
    attributes = types.MappingProxyType({})

    #: True for nodes that contain raw character data
    is_text = False

    def text_content(self):
        """Return the text of all Text nodes in this node, concatenated."""
        return ''.join(n.text for n in self.descendants() if n.is_text)


class Document(DisplayNode):
    """The root node of a display document."""

    __slots__ = ()

    name = '#document'

    def root_element(self):
        """Return the first Element child, or None."""
        for n in self:
            if not n.is_text:
                return n


class Element(DisplayNode):
    """An element with a name, attributes and child nodes."""

    __slots__ = ('name', 'attributes')

    def __init__(self, name, *children, attributes=None):
        super().__init__(*children)
        self.name = name
        self.attributes = dict(attributes) if attributes else {}

    def __repr__(self):
        fields = [type(self).__name__, repr(self.name)]
        fields.extend('{}={}'.format(k, reprlib.repr(v)) for k, v in self.attributes.items())
        if len(self):
            fields.append('({} {})'.format(len(self), "child" if len(self) == 1 else "children"))
        return '<{}>'.format(' '.join(fields))

    def body_equals(self, other):
        return self.name == other.name and self.attributes == other.attributes


class Text(DisplayNode):
    """Character data, possibly only whitespace."""

    __slots__ = ('text',)

    name = '#text'
    is_text = True

    def __init__(self, text):
        super().__init__()
        self.text = text

    def __repr__(self):
        return '<{} {}>'.format(type(self).__name__, reprlib.repr(self.text))

    def text_content(self):
        return self.text

    def body_equals(self, other):
        return self.text == other.text
