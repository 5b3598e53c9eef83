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
The ussdisplay module.

Reads USS display documents and turns their contents into resolved values
that a renderer can use directly.

"""

import logging

from .pkginfo import version, version_string
from .dom import read


__all__ = ('load', 'read', 'version', 'version_string')


logging.getLogger(__name__).addHandler(logging.NullHandler())


def load(filename, encoding='utf-8', errors=None):
    """Convenience function to read a display from ``filename`` and return a
    :class:`~.dom.element.Document`.

    The ``encoding`` and ``errors`` arguments are passed to Python's
    :func:`open` function. Raises :class:`OSError` if the file can't be read.

    """
    with open(filename, encoding=encoding, errors=errors) as f:
        return read.document(f.read())
