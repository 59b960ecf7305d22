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
Test graph_visualization.graph_layout module.

Layout coordinates are only checked for topological/statistical properties,
plus exact reproducibility for a fixed seed.

"""

import math
import time
import pytest
import sys
if "." not in sys.path:
    sys.path.insert(0, ".")
import numpy as np
from numpy import isclose

from graphgenome.errors import LayoutDivergenceError
from graphgenome.graph.models import SegmentNode, AdjacencyLink
from graphgenome.graph.assembly import assemble_graph, AssembledGraph
from graphgenome.graph_visualization.graph_layout import (
    ForceSimulation, layout, phyllotaxis_positions, LayoutResult)


@pytest.fixture
def two_node_graph():
    """ Two short sequences (shorter than the block size) connected by one link. """
    return assemble_graph({
        'nodes': [{'id': "A", 'sequence': "ACGT"*25}, {'id': "B", 'sequence': "GG"*20}],
        'links': [{'source': "A", 'target': "B", 'strand1': "+", 'strand2': "+"}],
    }, block_size=500)


@pytest.fixture
def chain_graph():
    return assemble_graph({
        'nodes': [{'id': "long", 'sequence': "A"*3000}, {'id': "short", 'sequence': "C"*200}],
        'links': [{'source': "long", 'target': "short", 'strand1': "+", 'strand2': "-"}],
    }, block_size=500)


def pair_graph(distance_link=None):
    """ Two segment nodes, optionally connected by one adjacency link. """
    nodes = [SegmentNode("a-start", 0, "a"), SegmentNode("b-start", 0, "b")]
    links = [AdjacencyLink("a-start", "b-start")] if distance_link else []
    return AssembledGraph(nodes, links)


def test_two_nodes_no_collapse_and_centered(two_node_graph):
    result = layout(two_node_graph, {'steps': 1000, 'width': 1000, 'height': 1000})
    xy = result.coordinates()
    assert xy.shape == (4, 2)
    # all pairs of nodes are separated:
    for i in range(len(xy)):
        for j in range(i+1, len(xy)):
            assert np.hypot(*(xy[i] - xy[j])) > 0.1
    center = np.array([500., 500.])
    assert (np.sqrt(((xy - center)**2).sum(axis=1)) < 200).all()
    assert np.allclose(xy.mean(axis=0), center, atol=0.5)


def test_layout_deterministic_for_seed(chain_graph):
    r1 = layout(chain_graph, steps=200, seed=3)
    r2 = layout(chain_graph, steps=200, seed=3)
    assert np.array_equal(r1.coordinates(), r2.coordinates())


def test_backbone_chain_is_compact(chain_graph):
    """ Consecutive segments of a sequence end up closer than the average node pair. """
    result = layout(chain_graph, steps=500)
    pos = result.positions
    backbone = [np.hypot(*(np.subtract(pos[l.source], pos[l.target]))) for l in chain_graph.backbone_links()]
    xy = result.coordinates()
    pair_dists = [np.hypot(*(xy[i] - xy[j])) for i in range(len(xy)) for j in range(i+1, len(xy))]
    assert np.mean(backbone) < np.mean(pair_dists)


def test_link_force_reaches_target_distance():
    sim = ForceSimulation(pair_graph(distance_link=True), charge_strength=0, adjacency_distance=10)
    sim.run(300)
    d = np.hypot(*(sim.pos[0] - sim.pos[1]))
    assert abs(d - 10) < 1.0


def test_charge_force_repels():
    sim = ForceSimulation(pair_graph(), charge_strength=-100)
    d0 = np.hypot(*(sim.pos[0] - sim.pos[1]))
    sim.tick(10)
    assert np.hypot(*(sim.pos[0] - sim.pos[1])) > d0


def test_center_force():
    sim = ForceSimulation(pair_graph(), width=200, height=100, charge_strength=0)
    sim.tick()
    assert isclose(sim.pos.mean(axis=0), [100., 50.]).all()


def test_zero_steps_gives_initial_positions(chain_graph):
    result = layout(chain_graph, steps=0)
    assert result.n_ticks == 0
    assert np.allclose(result.coordinates(), phyllotaxis_positions(len(chain_graph.nodes)))


def test_phyllotaxis_positions_distinct():
    xy = phyllotaxis_positions(50)
    assert len({(round(x, 6), round(y, 6)) for x, y in xy}) == 50
    assert isclose(np.hypot(*xy[0]), 10 * math.sqrt(0.5))


def test_result_links_resolve_to_node_positions(chain_graph):
    result = layout(chain_graph, steps=20)
    assert isinstance(result, LayoutResult)
    assert len(result.links) == len(chain_graph.links)
    for ll, link in zip(result.links, chain_graph.links):
        assert ll.link is link
        assert (ll.x1, ll.y1) == result.positions[link.source]
        assert (ll.x2, ll.y2) == result.positions[link.target]
        assert ll.segment == ((ll.x1, ll.y1), (ll.x2, ll.y2))


def test_layout_does_not_modify_segment_nodes(chain_graph):
    layout(chain_graph, steps=5)
    for node in chain_graph.nodes:
        assert not hasattr(node, 'x')
        assert not hasattr(node, 'vx')


def test_coincident_nodes_are_separated():
    sim = ForceSimulation(pair_graph(distance_link=True))
    sim.pos[:] = 0.
    sim.tick(50)
    assert np.hypot(*(sim.pos[0] - sim.pos[1])) > 1.


def test_chunked_charge_matches_single_chunk(chain_graph):
    sim1 = ForceSimulation(chain_graph, chunk_size=1024)
    sim2 = ForceSimulation(chain_graph, chunk_size=3)
    sim1.tick(20)
    sim2.tick(20)
    assert np.allclose(sim1.pos, sim2.pos)


def test_empty_graph_raises():
    with pytest.raises(LayoutDivergenceError):
        layout(assemble_graph({'nodes': []}))


def test_non_finite_coordinates_raise(two_node_graph):
    sim = ForceSimulation(two_node_graph)
    sim.pos[0, 0] = np.nan
    with pytest.raises(LayoutDivergenceError):
        sim.tick()


def test_negative_steps():
    with pytest.raises(ValueError):
        ForceSimulation(pair_graph()).run(-1)


def many_sequences_graph(n_sequences, length, block_size=500):
    """ n_sequences sequences of the given length, chained head to tail. """
    return assemble_graph({
        'nodes': [{'id': "s%s" % i, 'sequence': "A"*length} for i in range(n_sequences)],
        'links': [{'source': "s%s" % i, 'target': "s%s" % (i+1), 'strand1': "+", 'strand2': "+"}
                  for i in range(n_sequences - 1)],
    }, block_size=block_size)


def test_grid_charge_approximates_exact():
    graph = many_sequences_graph(750, 4)     # 1500 segment nodes
    pos = np.random.RandomState(1).random_sample((1500, 2)) * 1000
    exact = ForceSimulation(graph, exact_charge_max_nodes=10000)
    grid = ForceSimulation(graph, exact_charge_max_nodes=100)
    for sim in (exact, grid):
        sim.pos[:] = pos
        sim.apply_charge_force()
    assert not np.array_equal(exact.vel, grid.vel)
    assert np.linalg.norm(grid.vel - exact.vel) / np.linalg.norm(exact.vel) < 0.25


def test_grid_charge_with_coincident_nodes():
    graph = many_sequences_graph(300, 4)
    sim = ForceSimulation(graph, exact_charge_max_nodes=100)
    sim.pos[:300] = 0.
    sim.tick(5)
    assert np.isfinite(sim.pos).all()
    assert len({(x, y) for x, y in sim.pos[:300]}) == 300
    # All nodes coincident:
    sim.pos[:] = 7.
    sim.tick(2)
    assert np.isfinite(sim.pos).all()


def test_large_layout_is_fast():
    graph = many_sequences_graph(100, 5000)
    assert len(graph.nodes) == 1000
    t0 = time.perf_counter()
    result = layout(graph, steps=200)
    assert time.perf_counter() - t0 < 10
    xy = result.coordinates()
    assert np.isfinite(xy).all()
    assert np.allclose(xy.mean(axis=0), [500., 500.], atol=5.)
