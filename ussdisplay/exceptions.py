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
Exceptions raised when querying a display document.

All exceptions inherit from :class:`DisplayError` and also from a matching
builtin exception, so ``except LookupError`` catches a missing child node as
well.

"""


class DisplayError(Exception):
    """Base class for all errors raised by ussdisplay."""


class NotFound(DisplayError, LookupError):
    """Raised when a required child node or attribute is absent.

    The ``name`` attribute is the name that was looked for, and ``kind`` is
    either ``"child"`` or ``"attribute"``.

    """
    def __init__(self, name, kind="child"):
        if kind == "attribute":
            message = "No attribute named {}".format(name)
        else:
            message = "No child node named {} could be found".format(name)
        super().__init__(message)
        self.name = name
        self.kind = kind


class NotParentFound(DisplayError, LookupError):
    """Raised when a ``..`` reference segment is evaluated at the root."""
    def __init__(self, path=None):
        super().__init__("No such parent")
        self.path = path


class IndexOutOfRange(DisplayError, IndexError):
    """Raised when a ``Name[k]`` reference segment selects a child that does
    not exist.

    ``index`` is the requested 1-based index and ``count`` the number of
    children that matched ``name``.

    """
    def __init__(self, name, index, count):
        super().__init__("No child node {}[{}] could be found ({} available)".format(
            name, index, count))
        self.name = name
        self.index = index
        self.count = count


class CoercionError(DisplayError, ValueError):
    """Raised when the text of a child node can't be converted to ``type``."""
    def __init__(self, name, text, type):
        super().__init__("Child node {} has invalid {} value: {!r}".format(
            name, type.__name__, text))
        self.name = name
        self.text = text
        self.type = type


class InvalidReference(DisplayError, ValueError):
    """Raised when a reference path contains a malformed segment."""
    def __init__(self, path, segment):
        super().__init__("Invalid segment {!r} in reference {!r}".format(segment, path))
        self.path = path
        self.segment = segment


class ParseError(DisplayError, ValueError):
    """Raised when display text does not contain the expected content."""
