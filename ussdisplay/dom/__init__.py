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
This package defines the document tree of a USS display and the functions to
query it.

A USS display is an XML document describing an instrumentation panel: shapes,
text and their styles. The tree is built from the text by :mod:`.read`, and
consists of the node types in :mod:`.element`.

The :mod:`.query` module reads typed values from the children and attributes
of a node, and the :mod:`.reference` module resolves the relative paths with
which display elements refer to each other.

"""
