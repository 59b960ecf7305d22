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

Module with GraphView, which ties assembly, layout, styling and interaction together
for one source graph.

Recomputation is split in three levels, each cached on the inputs it depends on:

    assembled       - source graph identity and block_size
    layout_result   - assembled graph plus width, height, steps and force parameters
    styled_links    - layout plus color_scheme and thickness

so changing e.g. the color scheme re-styles the links without re-running the simulation.

"""

from collections.abc import Mapping
import logging
logger = logging.getLogger(__name__)

from ..config import DEFAULT_CONFIG, LAYOUT_KEYS, STYLE_KEYS, validate_config
from ..graph.models import SourceGraph
from ..graph.assembly import assemble_graph
from .graph_layout import layout
from .coloring import LinkColorMapper
from .interaction import InteractionController
from . import graphvis_mpl


class GraphView():
    """
    Caller-owned view of one source graph.
    :source_graph:  SourceGraph or document mapping.
    :config:        Config dict (see graphgenome.config); missing keys take default values.
    :on_click, on_hover, on_hover_end:  Interaction callbacks, see InteractionController.
    """

    def __init__(self, source_graph, config=None, on_click=None, on_hover=None, on_hover_end=None):
        self.config = validate_config(dict(DEFAULT_CONFIG, **(config or {})))
        self.on_click = on_click
        self.on_hover = on_hover
        self.on_hover_end = on_hover_end
        self._assembled = self._assembled_key = None
        self._layout = self._layout_key = None
        self._styled = self._styled_key = None
        self.n_assemblies = 0
        self.n_layouts = 0
        self.source_graph = None
        self.set_graph(source_graph)

    def set_graph(self, source_graph):
        """ Replace the source graph. Documents are validated and converted to SourceGraph here. """
        if isinstance(source_graph, Mapping):
            source_graph = SourceGraph.from_dict(source_graph)
        self.source_graph = source_graph

    def update(self, **changes):
        """ Change config values; caches are invalidated lazily, only where affected. """
        self.config = validate_config(dict(self.config, **changes))
        return self

    def _structure_inputs(self):
        return (id(self.source_graph), self.config['block_size'])

    def _layout_inputs(self):
        return (self._structure_inputs(),) + tuple(self.config[k] for k in LAYOUT_KEYS)

    def _style_inputs(self):
        return (self._layout_inputs(),) + tuple(self.config[k] for k in STYLE_KEYS)

    @property
    def assembled(self):
        key = self._structure_inputs()
        if key != self._assembled_key:
            self._assembled = assemble_graph(self.source_graph, self.config['block_size'])
            self._assembled_key = key
            self.n_assemblies += 1
        return self._assembled

    @property
    def layout_result(self):
        key = self._layout_inputs()
        if key != self._layout_key:
            assembled = self.assembled
            self._layout = layout(assembled, {k: self.config[k] for k in LAYOUT_KEYS})
            self._layout_key = key
            self.n_layouts += 1
        else:
            logger.debug("Re-using cached layout %s", self._layout)
        return self._layout

    @property
    def styled_links(self):
        key = self._style_inputs()
        if key != self._styled_key:
            result = self.layout_result
            mapper = LinkColorMapper(len(self.source_graph.nodes),
                                     color_scheme=self.config['color_scheme'],
                                     thickness=self.config['thickness'])
            self._styled = mapper.style_links(result.links)
            self._styled_key = key
        return self._styled

    def controller(self):
        """ Return a new InteractionController for the current styled links. """
        return InteractionController(self.styled_links, on_click=self.on_click, on_hover=self.on_hover,
                                     on_hover_end=self.on_hover_end,
                                     min_scale=self.config['min_scale'], max_scale=self.config['max_scale'])

    def draw(self, ax):
        """ Draw the styled links on matplotlib axes ax. """
        return graphvis_mpl.draw_styled_links(self.styled_links, ax,
                                              width=self.config['width'], height=self.config['height'])

    def export_svg(self, path):
        return graphvis_mpl.export_svg(self.styled_links, path,
                                       width=self.config['width'], height=self.config['height'])

    def show(self):
        """ Show an interactive matplotlib window (blocks until closed). """
        from matplotlib import pyplot
        width, height = self.config['width'], self.config['height']
        fig = pyplot.figure(figsize=(width / 100, height / 100))
        ax = fig.add_axes([0, 0, 1, 1])
        self.draw(ax)
        binding = graphvis_mpl.MplInteraction(ax, self.controller(), width=width, height=height)
        pyplot.show()
        return binding

    def __repr__(self):
        return "GraphView(%r, block_size=%s)" % (self.source_graph, self.config['block_size'])
