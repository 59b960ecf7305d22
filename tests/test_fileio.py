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

# pylint: disable=C0103,W0621

"""
Test fileio module.

"""

import json
import pytest
import sys
if "." not in sys.path:
    sys.path.insert(0, ".")
import networkx as nx
import yaml

from graphgenome.errors import InputShapeError, InvalidStrandError
from graphgenome.graph.models import SourceGraph
from graphgenome.graph.assembly import assemble_graph
from graphgenome.graph_visualization.graph_layout import layout
from graphgenome.fileio import load_graph, load_graph_document, save_graph, layout_as_dict, save_layout


DOCUMENT = {
    'nodes': [{'id': "n1", 'sequence': "ACGT"*150, 'name': "chrM"},
              {'id': "n2", 'sequence': "TTTT"}],
    'links': [{'source': "n1", 'target': "n2", 'strand1': "+", 'strand2': "-", 'weight': 3}],
}


@pytest.fixture
def result():
    return layout(assemble_graph(DOCUMENT), steps=10)


def test_load_json(tmpdir):
    path = tmpdir.join("graph.json")
    path.write(json.dumps(DOCUMENT))
    graph = load_graph(str(path))
    assert [node.id for node in graph.nodes] == ["n1", "n2"]
    assert graph.nodes[0].attrs == {'name': "chrM"}
    assert graph.links[0].attrs == {'weight': 3}


def test_load_yaml(tmpdir):
    path = tmpdir.join("graph.yml")
    path.write(yaml.safe_dump(DOCUMENT))
    assert load_graph(str(path)).as_dict() == DOCUMENT


def test_save_graph(tmpdir):
    graph = SourceGraph.from_dict(DOCUMENT)
    for fname in ("graph.json", "graph.yaml"):
        path = str(tmpdir.join(fname))
        save_graph(graph, path)
        assert load_graph_document(path) == DOCUMENT


def test_invalid_json(tmpdir):
    path = tmpdir.join("graph.json")
    path.write("{'nodes': ")
    with pytest.raises(InputShapeError):
        load_graph(str(path))


def test_invalid_strand_in_file(tmpdir):
    doc = json.loads(json.dumps(DOCUMENT))
    doc['links'][0]['strand2'] = "x"
    path = tmpdir.join("graph.json")
    path.write(json.dumps(doc))
    with pytest.raises(InvalidStrandError):
        load_graph(str(path))


def test_unknown_extension(tmpdir):
    path = tmpdir.join("graph.gfa")
    path.write("")
    with pytest.raises(ValueError):
        load_graph(str(path))
    # Explicit format overrides the extension:
    path.write(json.dumps(DOCUMENT))
    assert len(load_graph(str(path), fmt="json")) == 2


def test_layout_as_dict(result):
    d = layout_as_dict(result)
    assert [n['id'] for n in d['nodes']] == [node.id for node in result.assembled.nodes]
    assert len(d['links']) == len(result.assembled.links)
    first = d['links'][0]
    assert (first['x1'], first['y1']) == result.positions[first['source']]


def test_save_layout_json(result, tmpdir):
    path = str(tmpdir.join("layout.json"))
    save_layout(result, path)
    with open(path) as fp:
        assert json.load(fp) == layout_as_dict(result)


def test_save_layout_graphml(result, tmpdir):
    path = str(tmpdir.join("layout.graphml"))
    save_layout(result, path)
    graph = nx.read_graphml(path)
    assert set(graph.nodes) == set(result.positions)
    x, y = result.positions["n1-end"]
    assert graph.nodes["n1-end"]['x'] == pytest.approx(x)
    assert graph.nodes["n1-end"]['y'] == pytest.approx(y)
    assert all('sequence' not in data for _, _, data in graph.edges(data=True))
