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
Functions to read typed values from the direct children and the attributes of
a display node.

All ``read_*`` functions that read a child node look for the first direct
child with the specified name; later children with the same name are never
considered. When no such child exists, the ``default`` is returned if one was
given (``None`` is a valid default), otherwise :class:`~.exceptions.NotFound`
is raised. For example::

    >>> from ussdisplay.dom import read, query
    >>> e = read.element('<Label><X>12</X><Visible>true</Visible></Label>')
    >>> query.read_int(e, 'X')
    12
    >>> query.read_bool(e, 'Visible')
    True
    >>> query.read_float(e, 'Y', 0.0)
    0.0
    >>> query.read_float(e, 'Y')
    Traceback (most recent call last):
     ...
    ussdisplay.exceptions.NotFound: No child node named Y could be found

"""

from ..color import Color
from ..exceptions import CoercionError, NotFound


_NO_DEFAULT = object()


def _first_child(node, name):
    """Return the first direct child with the name, or None."""
    for child in node:
        if child.name == name:
            return child


def _default(name, default):
    """Return the default, or raise NotFound if there is none."""
    if default is _NO_DEFAULT:
        raise NotFound(name)
    return default


def _coerce(name, text, type):
    """Convert text using type, raising CoercionError on failure.

    Python-only literal forms with underscores (``1_000``) are rejected.

    """
    if '_' in text:
        raise CoercionError(name, text, type)
    try:
        return type(text)
    except ValueError:
        raise CoercionError(name, text, type) from None


def find_child(node, name):
    """Return the first direct child with the specified name.

    Raises :class:`~.exceptions.NotFound` if there is no such child.

    """
    child = _first_child(node, name)
    if child is None:
        raise NotFound(name)
    return child


def has_child(node, name):
    """Return True if the node has at least one direct child with the name."""
    return _first_child(node, name) is not None


def find_children(node, name=None):
    """Return a list of the direct children with the specified name.

    Text nodes are never returned. If ``name`` is None or empty, all non-text
    children are returned. Iterate over the node itself to get the raw
    children including text.

    """
    return [child for child in node
        if not child.is_text and (not name or child.name == name)]


def read_string(node, name, default=_NO_DEFAULT):
    """Return the text content of the first child with the name."""
    child = _first_child(node, name)
    if child is not None:
        return child.text_content()
    return _default(name, default)


def read_int(node, name, default=_NO_DEFAULT):
    """Return the text content of the first child with the name as an int.

    Raises :class:`~.exceptions.CoercionError` if the text is not a decimal
    integer literal.

    """
    child = _first_child(node, name)
    if child is not None:
        return _coerce(name, child.text_content(), int)
    return _default(name, default)


def read_float(node, name, default=_NO_DEFAULT):
    """Return the text content of the first child with the name as a float.

    Raises :class:`~.exceptions.CoercionError` if the text is not a floating
    point literal.

    """
    child = _first_child(node, name)
    if child is not None:
        return _coerce(name, child.text_content(), float)
    return _default(name, default)


def read_bool(node, name, default=_NO_DEFAULT):
    """Return True if the text of the first child with the name is ``"true"``.

    Any other text, including an empty child, results in False.

    """
    child = _first_child(node, name)
    if child is not None:
        return child.text_content() == 'true'
    return _default(name, default)


def read_color(node, name, default=_NO_DEFAULT):
    """Return the first child with the name as a :class:`~.color.Color`.

    See :func:`read_color_node`.

    """
    child = _first_child(node, name)
    if child is not None:
        return read_color_node(child)
    return _default(name, default)


def read_color_node(node):
    """Return a :class:`~.color.Color` from the node's ``red``, ``green``,
    ``blue`` and ``alpha`` children, which are all required.
    """
    return Color(
        read_float(node, 'red'),
        read_float(node, 'green'),
        read_float(node, 'blue'),
        read_float(node, 'alpha'),
    )


def read_string_attr(node, name):
    """Return the value of the attribute of the node itself.

    Raises :class:`~.exceptions.NotFound` if the attribute is absent.

    """
    try:
        return node.attributes[name]
    except KeyError:
        raise NotFound(name, "attribute") from None


def read_bool_attr(node, name):
    """Return True if the attribute value is ``"true"``, otherwise False.

    Raises :class:`~.exceptions.NotFound` if the attribute is absent.

    """
    return read_string_attr(node, name) == 'true'
