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
The Color value type.
"""

import collections


class Color(collections.namedtuple('Color', 'red green blue alpha')):
    """An RGBA color with the components as floats, normally between 0 and 1.

    Values outside that range are kept as they are. Example::

        >>> c = Color(1, 0.5, 0, 1)
        >>> str(c)
        'rgba(255, 128, 0, 1)'
        >>> c.hex()
        '#ff8000'

    """
    __slots__ = ()

    def _bytes(self):
        return tuple(round(v * 255) for v in self[:3])

    def __str__(self):
        return 'rgba({}, {}, {}, {:g})'.format(*self._bytes(), self.alpha)

    def hex(self):
        """Return the color as ``#rrggbb``, ignoring alpha.

        Components outside the range 0..1 are clipped.

        """
        return '#' + ''.join(format(min(max(v, 0), 255), '02x') for v in self._bytes())
