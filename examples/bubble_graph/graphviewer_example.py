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



"""

Basic interactive graph viewer example.

Lays out examples/bubble_graph/bubble_graph.json, shows it in a matplotlib window,
prints the record of clicked links and re-colors the graph when "c" is pressed.

"""

import sys
import os

sys.path.insert(0, ".")

from matplotlib import pyplot

from graphgenome.constants import COLOR_SCHEMES
from graphgenome.config import load_config
from graphgenome.fileio import load_graph
from graphgenome.utils.logging import init_logging
from graphgenome.graph_visualization.graph_view import GraphView
from graphgenome.graph_visualization.graphvis_mpl import MplInteraction


EXAMPLE_DIR = os.path.dirname(os.path.abspath(__file__))


def on_click(record):
    print("Clicked %s (%s nt): %s" % (record.get('id'), record.get('length'), record.get('name')))


def main():
    init_logging({'loglevel': "DEBUG", 'no_logfile': True})
    config = load_config(os.path.join(EXAMPLE_DIR, "graphgenome.yaml"))
    view = GraphView(load_graph(os.path.join(EXAMPLE_DIR, "bubble_graph.json")), config, on_click=on_click)
    print("Assembled graph:", view.assembled)

    width, height = config['width'], config['height']
    fig = pyplot.figure(figsize=(width / 100, height / 100))
    ax = fig.add_axes([0, 0, 1, 1])
    view.draw(ax)
    binding = MplInteraction(ax, view.controller(), width=width, height=height)
    schemes = list(COLOR_SCHEMES)

    def on_key(event):
        """ Cycle color schemes; the layout is re-used, only the links are re-styled. """
        nonlocal binding
        if event.key != 'c':
            return
        scheme = schemes[(schemes.index(view.config['color_scheme']) + 1) % len(schemes)]
        view.update(color_scheme=scheme)
        transform = binding.controller.transform
        binding.disconnect()
        ax.clear()
        view.draw(ax)
        binding = MplInteraction(ax, view.controller(), width=width, height=height)
        binding.controller.transform = transform
        binding.redraw()
        print("Color scheme: %s (layouts computed: %s)" % (scheme, view.n_layouts))

    fig.canvas.mpl_connect('key_press_event', on_key)
    pyplot.show()


if __name__ == '__main__':
    main()
