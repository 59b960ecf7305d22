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
Test graph_visualization.coloring module.

"""

import colorsys
import pytest
import sys
if "." not in sys.path:
    sys.path.insert(0, ".")
from numpy import isclose
from matplotlib.colors import to_rgb

from graphgenome.constants import COLOR_SCHEMES
from graphgenome.errors import ConfigError
from graphgenome.graph.models import SourceNode, BackboneLink, AdjacencyLink
from graphgenome.graph.assembly import assemble_graph
from graphgenome.graph_visualization.graph_layout import layout
from graphgenome.graph_visualization.coloring import (
    get_colormap, darker, LinkColorMapper, LinkStyle)


def backbone(link_num):
    return BackboneLink("n%s-start" % link_num, "n%s-end" % link_num,
                        SourceNode("n%s" % link_num, "ACGT"), link_num)


@pytest.mark.parametrize("name", sorted(COLOR_SCHEMES))
def test_all_schemes_available(name):
    cmap = get_colormap(name)
    assert len(cmap(0.5)) == 4


def test_unknown_scheme():
    with pytest.raises(ConfigError):
        get_colormap("Plasma")
    with pytest.raises(ConfigError):
        LinkColorMapper(3, color_scheme="rainbow")


def test_darker_reduces_lightness():
    assert isclose(darker("white"), (0.7, 0.7, 0.7)).all()
    rgb = to_rgb("#3060c0")
    h1, l1, s1 = colorsys.rgb_to_hls(*rgb)
    h2, l2, s2 = colorsys.rgb_to_hls(*darker(rgb))
    assert isclose(l2, 0.7*l1)
    assert isclose(h2, h1) and isclose(s2, s1)
    assert isclose(darker(rgb, 2), darker(darker(rgb))).all()


def test_sequence_link_style():
    mapper = LinkColorMapper(4, color_scheme="Viridis", thickness=10)
    style = mapper.link_style(backbone(2))
    assert style.width == 15
    assert style.color == LinkColorMapper(4, "Viridis").link_color(backbone(2))
    expected_l = 0.7 * colorsys.rgb_to_hls(*get_colormap("Viridis")(0.5)[:3])[1]
    assert isclose(colorsys.rgb_to_hls(*to_rgb(style.color))[1], expected_l, atol=0.01)
    assert style.opacity == 0.6


def test_link_num_changes_color():
    mapper = LinkColorMapper(5, color_scheme="Turbo")
    colors = [mapper.link_color(backbone(i)) for i in range(5)]
    assert len(set(colors)) == 5


def test_adjacency_link_style():
    mapper = LinkColorMapper(3, thickness=20)
    assert mapper.link_style(AdjacencyLink("a-end", "b-start")) == LinkStyle(3, "#808080")


def test_thickness_only_affects_sequence_links():
    thin, thick = LinkColorMapper(3, thickness=2), LinkColorMapper(3, thickness=8)
    assert thin.link_width(backbone(0)) == 3
    assert thick.link_width(backbone(0)) == 12
    adj = AdjacencyLink("a-end", "b-start")
    assert thin.link_width(adj) == thick.link_width(adj) == 3


def test_style_links():
    assembled = assemble_graph({
        'nodes': [{'id': "a", 'sequence': "A"*700}, {'id': "b", 'sequence': "C"*10}],
        'links': [{'source': "a", 'target': "b", 'strand1': "-", 'strand2': "-"}]})
    result = layout(assembled, steps=10)
    styled = LinkColorMapper(2, "Spectral").style_links(result.links)
    assert len(styled) == 3
    assert [s.link for s in styled] == assembled.links
    assert styled[-1].style.color == "#808080"
    assert styled[0].segment == result.links[0].segment
