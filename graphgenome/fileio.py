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

# pylint: disable=W0142,C0103,C0301,W0141

"""

Reading variation-graph documents and writing layouts.

A variation-graph document has the structure
    {"nodes": [{"id": "n1", "sequence": "ACGT...", ...}, ...],
     "links": [{"source": "n1", "target": "n2", "strand1": "+", "strand2": "-", ...}, ...]}
and can be stored as JSON (.json) or YAML (.yaml, .yml).

"""

import os
import json
import logging
logger = logging.getLogger(__name__)

import yaml

from .errors import InputShapeError
from .graph.models import SourceGraph
from .graph.graph_translators import assembled_to_multidigraph, export_graph


JSON_EXTENSIONS = ('.json',)
YAML_EXTENSIONS = ('.yaml', '.yml')


def _file_format(path, fmt=None):
    if fmt is not None:
        return fmt.lower()
    ext = os.path.splitext(path)[1].lower()
    if ext in JSON_EXTENSIONS:
        return 'json'
    if ext in YAML_EXTENSIONS:
        return 'yaml'
    raise ValueError("Cannot infer file format from extension of %s; use .json, .yaml or .yml" % (path,))


def load_graph_document(path, fmt=None):
    """ Load the raw document (dict) from a JSON or YAML file. """
    fmt = _file_format(path, fmt)
    with open(path) as fp:
        if fmt == 'json':
            try:
                data = json.load(fp)
            except ValueError as e:
                raise InputShapeError("%s is not valid JSON: %s" % (path, e)) from e
        else:
            try:
                data = yaml.safe_load(fp)
            except yaml.YAMLError as e:
                raise InputShapeError("%s is not valid YAML: %s" % (path, e)) from e
    return data


def load_graph(path, fmt=None):
    """ Load and validate a variation graph from path, returning a SourceGraph. """
    graph = SourceGraph.from_dict(load_graph_document(path, fmt))
    logger.info("Loaded %s from %s", graph, path)
    return graph


def save_graph(graph, path, fmt=None):
    """ Save SourceGraph graph as a JSON or YAML document. """
    fmt = _file_format(path, fmt)
    with open(path, 'w') as fp:
        if fmt == 'json':
            json.dump(graph.as_dict(), fp, indent=1)
        else:
            yaml.safe_dump(graph.as_dict(), fp, default_flow_style=False)


def layout_as_dict(result):
    """ Return node positions and link endpoint coordinates of LayoutResult result as a plain dict. """
    return {
        'nodes': [{'id': node.id, 'x': node.x, 'y': node.y} for node in result.nodes],
        'links': [{'source': ll.source.id, 'target': ll.target.id,
                   'x1': ll.x1, 'y1': ll.y1, 'x2': ll.x2, 'y2': ll.y2}
                  for ll in result.links],
    }


def save_layout(result, path, fmt=None):
    """
    Save the coordinates of LayoutResult result.
    fmt (or the file extension) can be 'json' or 'yaml', or any of the networkx
    graph formats supported by graph_translators.export_graph ('edgelist', 'gexf', 'graphml');
    the latter write the full assembled graph with 'x' and 'y' node attributes.
    """
    if fmt is None:
        fmt = os.path.splitext(path)[1].lstrip('.').lower()
    fmt = {'yml': 'yaml'}.get(fmt, fmt)
    if fmt in ('json', 'yaml'):
        with open(path, 'w') as fp:
            if fmt == 'json':
                json.dump(layout_as_dict(result), fp, indent=1)
            else:
                yaml.safe_dump(layout_as_dict(result), fp, default_flow_style=False)
    else:
        graph = assembled_to_multidigraph(result.assembled, positions=result.positions, include_sequence=False)
        export_graph(graph, path, fmt)
    logger.info("Layout saved to %s (%s)", path, fmt)
    return path
