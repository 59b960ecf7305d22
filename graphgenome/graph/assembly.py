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

Module for assembling the segmented layout graph from a variation graph.

The assembled graph contains, in order:
    * the segment nodes of every source node, in source-node order,
    * the backbone links of every source node, in source-node order,
    * one adjacency link per source link, in source-link order.

The assembled graph is a multigraph; parallel links are kept as-is.
assemble_graph is a pure function of (source graph, block size).

"""

from collections.abc import Mapping
import logging
logger = logging.getLogger(__name__)

from ..constants import DEFAULT_BLOCK_SIZE
from ..errors import InputShapeError
from .models import SourceGraph, BackboneLink, AdjacencyLink
from .segmentation import segment_node, check_block_size
from .adjacency import resolve_link


class AssembledGraph():
    """
    The layout graph: segment nodes plus backbone and adjacency links.
    :source_graph:  The SourceGraph this was assembled from.
    :block_size:    Block size used for segmentation.
    """

    def __init__(self, nodes, links, source_graph=None, block_size=None):
        self.nodes = nodes
        self.links = links
        self.source_graph = source_graph
        self.block_size = block_size

    @property
    def n_source_nodes(self):
        """ Number of source nodes; used to normalize link_num for coloring. """
        return len(self.source_graph.nodes) if self.source_graph is not None else 0

    def node_ids(self):
        return [node.id for node in self.nodes]

    def backbone_links(self):
        return [link for link in self.links if isinstance(link, BackboneLink)]

    def adjacency_links(self):
        return [link for link in self.links if isinstance(link, AdjacencyLink)]

    def check(self):
        """
        Check invariants: segment node ids are unique and every link references
        an existing segment node. Raises InputShapeError if not.
        """
        ids = set()
        for node in self.nodes:
            if node.id in ids:
                raise InputShapeError("Segment node id %r is not unique." % (node.id,))
            ids.add(node.id)
        for link in self.links:
            for end in (link.source, link.target):
                if end not in ids:
                    raise InputShapeError("%r references unknown segment node %r" % (link, end))

    def to_networkx(self):
        """ Return the assembled graph as a networkx MultiDiGraph. """
        from .graph_translators import assembled_to_multidigraph
        return assembled_to_multidigraph(self)

    def __repr__(self):
        return "AssembledGraph(%s nodes, %s links, block_size=%s)" % (
            len(self.nodes), len(self.links), self.block_size)


def assemble_graph(source_graph, block_size=DEFAULT_BLOCK_SIZE):
    """
    Assemble the segmented layout graph for source_graph.
    :source_graph:  SourceGraph, or a document mapping {'nodes': [...], 'links': [...]}.
                    Documents are validated before anything is assembled.
    :block_size:    Number of nt per segment node.
    Raises InputShapeError/InvalidStrandError for malformed input and ConfigError
    for an invalid block size. No partial graph is returned.
    """
    block_size = check_block_size(block_size)
    if isinstance(source_graph, Mapping):
        source_graph = SourceGraph.from_dict(source_graph)
    elif not isinstance(source_graph, SourceGraph):
        raise InputShapeError("Cannot assemble %r; expected SourceGraph or mapping." % (source_graph,))

    nodes = []
    links = []
    for link_num, node in enumerate(source_graph.nodes):
        segments, backbone = segment_node(node, block_size, link_num)
        nodes.extend(segments)
        links.extend(backbone)
    n_backbone = len(links)
    links.extend(resolve_link(link) for link in source_graph.links)

    assembled = AssembledGraph(nodes, links, source_graph=source_graph, block_size=block_size)
    assembled.check()
    logger.info("Assembled %s segment nodes, %s backbone links and %s adjacency links from %s (block size %s)",
                len(nodes), n_backbone, len(links) - n_backbone, source_graph, block_size)
    return assembled
