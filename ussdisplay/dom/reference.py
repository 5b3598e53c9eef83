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
Resolve the ``reference`` attribute of display elements.

Display elements can refer to another element instead of repeating it, using
a relative path in their ``reference`` attribute. A path consists of segments
separated by ``/``; each segment is one of:

``..``
    the parent of the current node

``Name``
    the first child element of the current node named ``Name``

``Name[k]``
    the k-th child element named ``Name`` (1-based)

For example, in::

    <Elements>
      <Polyline>...</Polyline>
      <Polyline>...</Polyline>
      <Polyline reference="../Polyline[2]"/>
    </Elements>

the third Polyline refers to the second one. Only one level is resolved per
call; when the referenced element has a ``reference`` attribute itself, it is
up to the caller to resolve that as well.

"""

import collections
import logging
import re

from ..exceptions import IndexOutOfRange, InvalidReference, NotParentFound
from .query import find_children, read_string_attr


logger = logging.getLogger(__name__)


#: a step in a reference path; name is None for a step to the parent
Step = collections.namedtuple('Step', 'name index')

_segment_re = re.compile(r'([^\[\]]*)(?:\[(\d+)\])?')


def parse_reference(path):
    """Return the list of :class:`Step` tuples the path consists of.

    Raises :class:`~.exceptions.InvalidReference` for a malformed segment,
    e.g. ``Name[x]``.

    """
    steps = []
    for segment in path.split('/'):
        if segment == '..':
            steps.append(Step(None, None))
            continue
        m = _segment_re.fullmatch(segment)
        if not m:
            raise InvalidReference(path, segment)
        name, index = m.groups()
        steps.append(Step(name, int(index) if index else 1))
    return steps


def resolve_path(node, path):
    """Return the node the path designates, relative to the node.

    Raises :class:`~.exceptions.NotParentFound` when a ``..`` segment is
    evaluated at the root, and :class:`~.exceptions.IndexOutOfRange` when a
    segment selects a child element that does not exist.

    """
    current = node
    for name, index in parse_reference(path):
        if name is None:
            parent = current.parent
            if parent is None:
                raise NotParentFound(path)
            current = parent
        else:
            children = find_children(current, name)
            if not 0 < index <= len(children):
                raise IndexOutOfRange(name, index, len(children))
            current = children[index - 1]
    return current


def resolve_reference(node):
    """Return the node designated by the ``reference`` attribute of the node.

    Raises :class:`~.exceptions.NotFound` if the node has no ``reference``
    attribute. See :func:`resolve_path` for the other exceptions.

    """
    path = read_string_attr(node, 'reference')
    target = resolve_path(node, path)
    logger.debug("resolved reference %r of %r to %r", path, node, target)
    return target
