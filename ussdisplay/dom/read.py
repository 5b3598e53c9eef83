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
Simple helper functions to build display document trees reading from text.

Example::

    >>> from ussdisplay.dom import read
    >>> doc = read.document('<Display><Width>800</Width></Display>')
    >>> doc.dump()
    <Document (1 child)>
     ╰╴<Element 'Display' (1 child)>
        ╰╴<Element 'Width' (1 child)>
           ╰╴<Text '800'>

"""

import logging

from parce.transform import Transformer

from ..exceptions import ParseError
from ..lang import display


logger = logging.getLogger(__name__)

_transformer = Transformer()


def document(text):
    """Return a :class:`~.element.Document` from the text."""
    doc = _transformer.transform_text(display.Display.root, text)
    logger.debug("read display document: %d characters, %d top-level nodes", len(text), len(doc))
    return doc


def element(text):
    """Return the first element of the document read from the text.

    Raises :class:`~.exceptions.ParseError` if the text contains no element.
    The parent of the returned element is the Document, which is only
    weakly referenced; keep the result of :func:`document` if you need to
    navigate upwards from the root element.

    """
    node = document(text).root_element()
    if node is None:
        raise ParseError("no element found in text")
    return node
