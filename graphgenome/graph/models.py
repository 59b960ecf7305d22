# -*- coding: utf-8 -*-
##    Copyright 2026 The graphgenome developers
##
##    This file is part of graphgenome.
##
##    graphgenome is free software: you can redistribute it and/or modify
##    it under the terms of the GNU Affero General Public License as
##    published by the Free Software Foundation, either version 3 of the
##    License, or (at your option) any later version.
##
##    This program is distributed in the hope that it will be useful,
##    but WITHOUT ANY WARRANTY; without even the implied warranty of
##    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
##    GNU Affero General Public License for more details.
##
##    You should have received a copy of the GNU Affero General Public License
##    along with this program. If not, see <http://www.gnu.org/licenses/>.

# pylint: disable=C0103

"""

Data model for variation graphs and the segmented layout graph derived from them.

Input primitives (immutable once constructed):
    SourceNode  - one genomic sequence, with an id and arbitrary extra attributes.
    SourceLink  - a strand-oriented adjacency between the ends of two SourceNodes.
    SourceGraph - a document of SourceNodes and SourceLinks.

Derived primitives (produced by graph.assembly):
    SegmentNode   - one positional block of a SourceNode's sequence.
    BackboneLink  - connects two consecutive SegmentNodes of the same SourceNode.
    AdjacencyLink - connects SegmentNodes of two SourceNodes, according to strand orientation.

"""

from collections.abc import Mapping
from enum import Enum

from ..constants import STRAND_FORWARD, STRAND_REVERSE
from ..errors import InputShapeError, InvalidStrandError


class Strand(Enum):
    """ Strand orientation of one end of a SourceLink. """
    FORWARD = STRAND_FORWARD
    REVERSE = STRAND_REVERSE

    @classmethod
    def parse(cls, value, link=None):
        """ Return the Strand for value, raising InvalidStrandError for anything but '+' and '-'. """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise InvalidStrandError(value, link) from None

    def __str__(self):
        return self.value


def _require_str(value, what, context):
    if value is None:
        raise InputShapeError("%s is missing (%s)" % (what, context))
    if not isinstance(value, str):
        raise InputShapeError("%s must be a string, not %s (%s)" % (what, type(value).__name__, context))
    return value


class SourceNode():
    """
    One genomic sequence of the variation graph.
    :node_id:   Unique string id of the sequence.
    :sequence:  The (non-empty) sequence string.
    :attrs:     Any other attributes of the node. These are copied onto every
                SegmentNode and BackboneLink derived from this node.
    """

    def __init__(self, node_id, sequence, attrs=None):
        self.id = _require_str(node_id, "Node id", "node %r" % (node_id,))
        self.sequence = _require_str(sequence, "Node sequence", "node %r" % (node_id,))
        if not sequence:
            raise InputShapeError("Node %r has an empty sequence." % (node_id,))
        self.attrs = dict(attrs) if attrs else {}

    @classmethod
    def from_dict(cls, data):
        """ Create a SourceNode from a document entry, e.g. {'id': 'n1', 'sequence': 'ACGT', 'name': ...} """
        if not isinstance(data, Mapping):
            raise InputShapeError("Node entry must be a mapping, not %s" % type(data).__name__)
        attrs = {k: v for k, v in data.items() if k not in ('id', 'sequence')}
        return cls(data.get('id'), data.get('sequence'), attrs)

    @property
    def length(self):
        return len(self.sequence)

    def as_dict(self):
        d = dict(self.attrs)
        d['id'] = self.id
        d['sequence'] = self.sequence
        return d

    def __repr__(self):
        return "SourceNode(%r, length=%s)" % (self.id, self.length)


class SourceLink():
    """
    Directed adjacency from one end of the source node to one end of the target node.
    strand1 and strand2 are parsed into Strand members on construction, so an invalid
    strand is rejected here rather than producing a link that silently disappears later.
    """

    def __init__(self, source, target, strand1, strand2, attrs=None):
        context = "link %r -> %r" % (source, target)
        self.source = _require_str(source, "Link source", context)
        self.target = _require_str(target, "Link target", context)
        self.strand1 = Strand.parse(strand1, link=context)
        self.strand2 = Strand.parse(strand2, link=context)
        self.attrs = dict(attrs) if attrs else {}

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, Mapping):
            raise InputShapeError("Link entry must be a mapping, not %s" % type(data).__name__)
        attrs = {k: v for k, v in data.items() if k not in ('source', 'target', 'strand1', 'strand2')}
        return cls(data.get('source'), data.get('target'), data.get('strand1'), data.get('strand2'), attrs)

    def as_dict(self):
        d = dict(self.attrs)
        d.update(source=self.source, target=self.target,
                 strand1=self.strand1.value, strand2=self.strand2.value)
        return d

    def __repr__(self):
        return "SourceLink(%r%s -> %r%s)" % (self.source, self.strand1, self.target, self.strand2)


class SourceGraph():
    """
    A variation-graph document: {nodes: [SourceNode, ...], links: [SourceLink, ...]}.
    The graph is validated on construction: node ids must be unique and every link
    must reference existing nodes.
    """

    def __init__(self, nodes, links=()):
        self.nodes = list(nodes)
        self.links = list(links)
        self.node_by_id = {}
        for node in self.nodes:
            if not isinstance(node, SourceNode):
                raise InputShapeError("Expected SourceNode, got %r" % (node,))
            if node.id in self.node_by_id:
                raise InputShapeError("Duplicate node id %r" % (node.id,))
            self.node_by_id[node.id] = node
        for link in self.links:
            if not isinstance(link, SourceLink):
                raise InputShapeError("Expected SourceLink, got %r" % (link,))
            for end in (link.source, link.target):
                if end not in self.node_by_id:
                    raise InputShapeError("%r references unknown node %r" % (link, end))

    @classmethod
    def from_dict(cls, data):
        """
        Create a SourceGraph from an in-memory document, e.g. as loaded from JSON:
            {'nodes': [{'id': 'n1', 'sequence': 'ACGT'}, ...],
             'links': [{'source': 'n1', 'target': 'n2', 'strand1': '+', 'strand2': '-'}, ...]}
        'links' may be omitted.
        """
        if not isinstance(data, Mapping):
            raise InputShapeError("Graph document must be a mapping, not %s" % type(data).__name__)
        nodes = data.get('nodes')
        if not isinstance(nodes, (list, tuple)):
            raise InputShapeError("Graph document must have a 'nodes' list.")
        links = data.get('links') or []
        if not isinstance(links, (list, tuple)):
            raise InputShapeError("Graph document 'links' must be a list.")
        return cls([SourceNode.from_dict(d) for d in nodes],
                   [SourceLink.from_dict(d) for d in links])

    def as_dict(self):
        return {'nodes': [node.as_dict() for node in self.nodes],
                'links': [link.as_dict() for link in self.links]}

    def __len__(self):
        return len(self.nodes)

    def __repr__(self):
        return "SourceGraph(%s nodes, %s links)" % (len(self.nodes), len(self.links))


class SegmentNode():
    """ One positional block of a SourceNode, starting at offset pos. """

    def __init__(self, segment_id, pos, node_id, attrs=None):
        self.id = segment_id
        self.pos = pos
        self.node_id = node_id
        self.attrs = dict(attrs) if attrs else {}

    def as_dict(self):
        d = dict(self.attrs)
        d['id'] = self.id
        d['pos'] = self.pos
        return d

    def __eq__(self, other):
        if not isinstance(other, SegmentNode):
            return NotImplemented
        return (self.id, self.pos, self.node_id, self.attrs) == (other.id, other.pos, other.node_id, other.attrs)

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return "SegmentNode(%r, pos=%s)" % (self.id, self.pos)


class BackboneLink():
    """
    Link between two consecutive SegmentNodes of the same SourceNode.
    Carries the owning node's id, its index among all source nodes (link_num),
    and the full sequence (used for coloring and tooltips).
    """
    is_sequence_link = True

    def __init__(self, source, target, node, link_num):
        self.source = source
        self.target = target
        self.id = node.id
        self.link_num = link_num
        self.length = node.length
        self.sequence = node.sequence
        self.attrs = dict(node.attrs)

    def as_dict(self):
        """ Flat link record, as handed to click callbacks. """
        d = dict(self.attrs)
        d.update(source=self.source, target=self.target, id=self.id,
                 linkNum=self.link_num, length=self.length, sequence=self.sequence)
        return d

    def __eq__(self, other):
        if not isinstance(other, BackboneLink):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    __hash__ = None

    def __repr__(self):
        return "BackboneLink(%r -> %r, id=%r)" % (self.source, self.target, self.id)


class AdjacencyLink():
    """
    Link between SegmentNodes of two different SourceNodes.
    attrs holds every attribute of the originating SourceLink except source, target and strands.
    """
    is_sequence_link = False
    sequence = None
    link_num = None

    def __init__(self, source, target, attrs=None):
        self.source = source
        self.target = target
        self.attrs = dict(attrs) if attrs else {}

    @property
    def id(self):
        return self.attrs.get('id')

    def as_dict(self):
        d = {'source': self.source, 'target': self.target}
        d.update(self.attrs)
        return d

    def __eq__(self, other):
        if not isinstance(other, AdjacencyLink):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    __hash__ = None

    def __repr__(self):
        return "AdjacencyLink(%r -> %r)" % (self.source, self.target)
