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
Display language and transformation definition.

USS displays are plain XML, so the language is *parce*'s Xml language; the
transform builds a :mod:`ussdisplay.dom.element` tree from it.
"""

import html

import parce.action as a
from parce.lang import xml
from parce.transform import Transform

from ussdisplay.dom import element


class Display(xml.Xml):
    """USS display language definition."""


class DisplayTransform(Transform):
    """Transform a Display document to a :class:`~.element.Document`.

    Comments, processing instructions and the document type declaration are
    ignored. Adjacent text, whitespace and entity references are combined in
    one :class:`~.element.Text` node, with the entity references replaced.

    """

    ## ignored contexts
    comment = None
    doctype = None
    internal_dtd = None
    processing_instruction = None

    ## transform methods
    def root(self, items):
        """Process the ``root`` context."""
        return element.Document(*self.tag(items))

    def tag(self, items):
        """Process the ``tag`` context.

        Returns a list of nodes representing the contents. A closing tag ends
        the list.

        """
        nodes = []
        text = []

        def flush():
            if text:
                nodes.append(element.Text(''.join(text)))
                text.clear()

        z = len(items)
        i = 0
        while i < z:
            item = items[i]
            if item.is_token:
                if item.action in (a.Text, a.Whitespace) or item.action in a.Escape:
                    text.append(html.unescape(item.text))
                elif item.action is a.Delimiter and not item.text.startswith(('<?', '<!')) \
                        and i + 1 < z and items[i+1].is_token and items[i+1].action is a.Name.Tag:
                    flush()
                    if '/' in item.text:
                        # closing tag, the end of this context
                        break
                    node = element.Element(items[i+1].text)
                    nodes.append(node)
                    i += 1
                    if i + 1 < z:
                        tail = items[i+1]
                        if tail.is_token:
                            if tail.action is a.Delimiter:
                                i += 1  # ">" or "/>"
                        elif tail.name == "attrs":
                            attributes, end = tail.obj
                            node.attributes.update(attributes)
                            i += 1
            elif item.name == "tag":
                flush()
                if nodes and not nodes[-1].is_text:
                    nodes[-1].extend(item.obj)
            elif item.name == "cdata":
                text.append(item.obj)
            i += 1
        flush()
        return nodes

    def attrs(self, items):
        """Process the ``attrs`` context.

        Returns a dictionary with the attributes and the text of the ending
        delimiter (``>`` or ``/>``).

        """
        attributes = {}
        name = None
        for i in items:
            if i.is_token:
                if i.action is a.Name.Attribute:
                    name = i.text
                    attributes[name] = ''
                elif i.action is a.Delimiter:
                    return attributes, i.text
            elif i.name in ("dqstring", "sqstring") and name is not None:
                attributes[name] = i.obj
                name = None
        return attributes, ''

    def dqstring(self, items):
        """Process the ``dqstring`` context."""
        return self._string(items, '"')

    def sqstring(self, items):
        """Process the ``sqstring`` context."""
        return self._string(items, "'")

    def _string(self, items, quote):
        """Return the decoded text of a string context, without quotes."""
        return ''.join(html.unescape(t.text)
            for t in items if t.is_token and t.text != quote)

    def cdata(self, items):
        """Process the ``cdata`` context."""
        return ''.join(t.text for t in items
            if t.is_token and t.action is not a.Delimiter and t.text != 'CDATA')
