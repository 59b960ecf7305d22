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
Module for conversion of the assembled layout graph to networkx graphs, plus
a few topological helpers used to check and describe layouts.

The assembled graph is directed (source -> target) and may contain parallel
links, so it is always translated to a MultiDiGraph. Edges are keyed by their
index in AssembledGraph.links.

"""

import os
import numbers
import logging
logger = logging.getLogger(__name__)

import networkx as nx
import numpy as np

from .models import BackboneLink


BACKBONE_EDGE = 'backbone'
ADJACENCY_EDGE = 'adjacency'

# Formats with a networkx write_<format> function, usable with export_graph:
EXPORT_FORMATS = ("edgelist", "gexf", "graphml")


def _exportable(value):
    """ Convert an attribute value to something all networkx writers accept. """
    if isinstance(value, (str, bool, numbers.Number)):
        return value
    return str(value)


def assembled_to_multidigraph(assembled, positions=None, include_sequence=True):
    """
    Translate an AssembledGraph to a networkx MultiDiGraph.
    :positions:         Optional {segment id: (x, y)} map; if given, nodes get 'x' and 'y' attributes.
    :include_sequence:  If False, the (potentially large) 'sequence' attribute is left off the backbone edges.
    Attribute values that are None are left out; non-scalar values are converted to str.
    """
    graph = nx.MultiDiGraph()
    if assembled.block_size is not None:
        graph.graph['block_size'] = assembled.block_size
    for node in assembled.nodes:
        attrs = {k: _exportable(v) for k, v in node.as_dict().items() if v is not None and k != 'id'}
        attrs['node_id'] = node.node_id
        if positions is not None:
            attrs['x'], attrs['y'] = (float(v) for v in positions[node.id])
        graph.add_node(node.id, **attrs)
    for idx, link in enumerate(assembled.links):
        attrs = {k: _exportable(v) for k, v in link.as_dict().items()
                 if v is not None and k not in ('source', 'target')}
        if not include_sequence:
            attrs.pop('sequence', None)
        attrs['kind'] = BACKBONE_EDGE if isinstance(link, BackboneLink) else ADJACENCY_EDGE
        graph.add_edge(link.source, link.target, key=idx, **attrs)
    return graph


def connected_components(graph):
    """ Return a list of node-id sets, one per (weakly) connected component, largest first. """
    return sorted((set(c) for c in nx.weakly_connected_components(graph)), key=len, reverse=True)


def component_extents(graph, positions):
    """
    For each connected component, return (node set, centroid, radius), where
    radius is the largest distance from the centroid to a node of the component.
    :positions: {node id: (x, y)} map, e.g. LayoutResult.positions.
    """
    extents = []
    for component in connected_components(graph):
        xy = np.array([positions[node] for node in component], dtype=float)
        centroid = xy.mean(axis=0)
        radius = float(np.sqrt(((xy - centroid)**2).sum(axis=1)).max())
        extents.append((component, centroid, radius))
    return extents


def export_graph(graph, path, fmt=None):
    """
    Write graph to path using networkx's write_<fmt> function.
    If fmt is None, it is inferred from the file extension.
    """
    if fmt is None:
        fmt = os.path.splitext(path)[1].lstrip('.').lower()
    if fmt not in EXPORT_FORMATS:
        raise ValueError("Unsupported graph export format %r (supported: %s)" % (fmt, ", ".join(EXPORT_FORMATS)))
    write_function = getattr(nx, "write_" + fmt)
    if fmt == "edgelist":
        write_function(graph, path, data=['kind'])
    else:
        write_function(graph, path)
    logger.info("Graph with %s nodes and %s edges written to %s (%s)",
                graph.number_of_nodes(), graph.number_of_edges(), path, fmt)
