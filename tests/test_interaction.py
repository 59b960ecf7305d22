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
Test graph_visualization.interaction module.

"""

import pytest
import sys
if "." not in sys.path:
    sys.path.insert(0, ".")
import numpy as np
from numpy import isclose

from graphgenome.graph.models import SourceNode, SegmentNode, BackboneLink, AdjacencyLink
from graphgenome.graph_visualization.graph_layout import LayoutNode, LayoutLink
from graphgenome.graph_visualization.coloring import LinkColorMapper
from graphgenome.graph_visualization.interaction import (
    hover_label, strip_segment_suffix, point_segment_distances, ZoomTransform, InteractionController)


def layout_link(link, p1, p2):
    n1 = LayoutNode(SegmentNode(link.source, 0, "x"), *p1)
    n2 = LayoutNode(SegmentNode(link.target, 0, "y"), *p2)
    return LayoutLink(link, n1, n2)


@pytest.fixture
def links():
    """ A horizontal backbone link from (0, 0) to (100, 0) and a vertical adjacency link at x=200. """
    node = SourceNode("n1", "ACGT"*100, attrs={'name': "chrM"})
    return [
        layout_link(BackboneLink("n1-start", "n1-end", node, 0), (0., 0.), (100., 0.)),
        layout_link(AdjacencyLink("n1-end", "n2-start", {'weight': 2}), (200., 0.), (200., 100.)),
    ]


class Recorder():
    def __init__(self):
        self.calls = []

    def __call__(self, arg):
        self.calls.append(arg)


def test_strip_segment_suffix():
    assert strip_segment_suffix("n1-start") == "n1"
    assert strip_segment_suffix("n1-end") == "n1"
    assert strip_segment_suffix("n1-500") == "n1-500"
    assert strip_segment_suffix("a-end-end") == "a-end"
    assert strip_segment_suffix("chr1-endogenous") == "chr1-endogenous"
    assert strip_segment_suffix("chr1-endogenous-start") == "chr1-endogenous"
    assert strip_segment_suffix("start-1") == "start-1"


def test_hover_label(links):
    assert hover_label(links[0].link) == "n1"
    assert hover_label(links[1].link) == "n1-n2"
    assert hover_label(AdjacencyLink("a-start", "b-end", {'id': "edge7"})) == "edge7"
    assert hover_label(AdjacencyLink("a-1000", "b-end")) == "a-1000-b"
    assert hover_label(AdjacencyLink("chr1-endogenous-end", "B-start")) == "chr1-endogenous-B"


def test_point_segment_distances():
    segments = np.array([[[0, 0], [10, 0]], [[0, 5], [0, 5]]], dtype=float)
    assert isclose(point_segment_distances((5, 3), segments), [3, np.hypot(5, 2)]).all()
    assert isclose(point_segment_distances((13, 4), segments)[0], 5)


def test_zoom_clamped():
    t = ZoomTransform(min_scale=0.1, max_scale=8)
    t.zoom_by(100)
    assert t.k == 8
    t.zoom_by(1e-6)
    assert t.k == 0.1
    assert ZoomTransform(k=50).k == 8


def test_zoom_keeps_anchor_fixed():
    t = ZoomTransform()
    t.pan(30, -10)
    anchor = (250., 400.)
    q = t.invert(anchor)
    t.zoom_by(2.5, anchor)
    assert isclose(t.apply(q), anchor).all()
    assert t.k == 2.5


def test_pan_and_invert():
    t = ZoomTransform(k=2)
    t.pan(10, 20)
    assert t.apply((1, 1)) == (12, 22)
    assert t.invert((12, 22)) == (1, 1)
    t.reset()
    assert t.as_tuple() == (1., 0., 0.)


def test_invalid_scale_extent():
    with pytest.raises(ValueError):
        ZoomTransform(min_scale=2, max_scale=1)


def test_hit_test(links):
    ctrl = InteractionController(links, hit_tolerance=5)
    assert ctrl.hit_test(50, 3) == 0
    assert ctrl.hit_test(202, 50) == 1
    assert ctrl.hit_test(150, 50) is None


def test_hit_test_uses_zoom(links):
    ctrl = InteractionController(links, hit_tolerance=5)
    ctrl.zoom(2, 0, 0)
    # diagram point (50, 0) is now at screen (100, 0):
    assert ctrl.hit_test(100, 0) == 0
    assert ctrl.hit_test(400, 100) == 1
    ctrl.pan(1000, 0)
    assert ctrl.hit_test(100, 0) is None


def test_hover_and_hover_end(links):
    on_hover, on_hover_end = Recorder(), Recorder()
    ctrl = InteractionController(links, on_hover=on_hover, on_hover_end=on_hover_end, hit_tolerance=5)
    assert ctrl.pointer_move(50, 2) == 0
    assert ctrl.tooltip.visible
    assert ctrl.tooltip.text == "n1"
    assert (ctrl.tooltip.left, ctrl.tooltip.top) == (50, 2 - 28)
    assert len(on_hover.calls) == 1
    # Moving along the same link doesn't re-trigger hover:
    ctrl.pointer_move(60, 2)
    assert len(on_hover.calls) == 1
    # Moving directly onto another link ends the first hover:
    ctrl.pointer_move(200, 50)
    assert len(on_hover_end.calls) == 1
    assert ctrl.tooltip.text == "n1-n2"
    ctrl.pointer_move(500, 500)
    assert not ctrl.tooltip.visible
    assert len(on_hover_end.calls) == 2


def test_click_hands_off_full_record(links):
    on_click = Recorder()
    ctrl = InteractionController(links, on_click=on_click, hit_tolerance=5)
    ctrl.pointer_move(50, 0)
    record = ctrl.pointer_click(50, 0)
    assert on_click.calls == [record]
    assert record['name'] == "chrM"
    assert record['id'] == "n1"
    assert record['linkNum'] == 0
    assert record['sequence'] == "ACGT"*100
    assert not ctrl.tooltip.visible
    ctrl.click(1)
    assert on_click.calls[-1] == {'source': "n1-end", 'target': "n2-start", 'weight': 2}


def test_click_on_empty_space(links):
    on_click = Recorder()
    ctrl = InteractionController(links, on_click=on_click)
    assert ctrl.pointer_click(500, 500) is None
    assert on_click.calls == []


def test_default_click_callback(links):
    ctrl = InteractionController(links)
    assert ctrl.click(0)['id'] == "n1"


def test_styled_links_tolerance(links):
    styled = LinkColorMapper(1, thickness=20).style_links(links)
    ctrl = InteractionController(styled)
    # sequence link is 30 wide => tolerance 15; adjacency link is 3 wide => tolerance 2
    assert ctrl.hit_test(50, 14) == 0
    assert ctrl.hit_test(204, 50) is None


def test_no_links():
    ctrl = InteractionController([])
    assert ctrl.hit_test(0, 0) is None
    assert ctrl.pointer_move(0, 0) is None
