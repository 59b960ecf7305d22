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

Command line interface: lay out a variation graph and render/export it.

Examples:
    graphgenome-render MT.json --svg MT.svg
    graphgenome-render MT.json --block-size 1000 --color-scheme Viridis --show
    graphgenome-render MT.yaml --config graphgenome.yaml --layout-out MT_layout.gexf

"""

import sys
import argparse
import logging
logger = logging.getLogger(__name__)

from .constants import COLOR_SCHEMES
from .errors import GraphGenomeError
from .config import load_config
from .fileio import load_graph, save_layout
from .utils.logging import init_logging
from .graph_visualization.graph_view import GraphView


def parse_args(argv=None):
    """ Parse command line arguments. Config options default to None, i.e. "use config file/default". """
    parser = argparse.ArgumentParser(description="Force-directed layout of genome variation graphs.",
                                     prog="graphgenome-render")
    parser.add_argument("graphfile", help="Variation graph document (.json, .yaml or .yml).")
    parser.add_argument("--config", help="YAML config file.")

    parser.add_argument("--block-size", type=int, dest="block_size", help="Number of nt per segment node.")
    parser.add_argument("--steps", type=int, help="Number of simulation ticks.")
    parser.add_argument("--width", type=int)
    parser.add_argument("--height", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--color-scheme", dest="color_scheme", choices=list(COLOR_SCHEMES))
    parser.add_argument("--thickness", type=float)

    parser.add_argument("--svg", help="Export the rendered graph to this SVG file.")
    parser.add_argument("--layout-out", dest="layout_out",
                        help="Save layout coordinates (.json, .yaml, .edgelist, .gexf, .graphml).")
    parser.add_argument("--show", action="store_true", help="Show an interactive window.")

    parser.add_argument("--loglevel", default="INFO")
    parser.add_argument("--logfile", help="Write log to this file (default: no log file).")
    return parser.parse_args(argv)


def print_link(record):
    """ Default click callback: print the clicked link's record (without the sequence). """
    print(", ".join("%s=%s" % (k, v) for k, v in record.items() if k != 'sequence'))


def main(argv=None):
    args = parse_args(argv)
    init_logging({'loglevel': args.loglevel, 'no_logfile': args.logfile is None}, logfilepath=args.logfile)
    try:
        config = load_config(args.config, block_size=args.block_size, steps=args.steps,
                             width=args.width, height=args.height, seed=args.seed,
                             color_scheme=args.color_scheme, thickness=args.thickness)
        view = GraphView(load_graph(args.graphfile), config, on_click=print_link)
        if args.layout_out:
            save_layout(view.layout_result, args.layout_out)
        if args.svg:
            view.export_svg(args.svg)
        if args.show:
            view.show()
        elif not (args.svg or args.layout_out):
            logger.warning("No output requested; use --svg, --layout-out or --show.")
    except (GraphGenomeError, OSError, ValueError) as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
