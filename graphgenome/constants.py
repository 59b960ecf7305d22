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

Package-wide constants.

"""


## Strand orientation symbols used by variation-graph links:
STRAND_FORWARD = '+'
STRAND_REVERSE = '-'

## Suffixes for the first and last segment node of each sequence:
SEGMENT_START_SUFFIX = 'start'
SEGMENT_END_SUFFIX = 'end'


#### DEFAULT CONFIGURATION: ####

DEFAULT_BLOCK_SIZE = 500        # nt per segment node
DEFAULT_THICKNESS = 10
DEFAULT_COLOR_SCHEME = 'Rainbow'
DEFAULT_WIDTH = 1000
DEFAULT_HEIGHT = 1000
DEFAULT_STEPS = 2000            # simulation ticks before positions are read


#### FORCE SIMULATION PARAMETERS: ####

DEFAULT_CHARGE_STRENGTH = -100  # negative = repulsion
BACKBONE_LINK_DISTANCE = 1      # keeps each sequence's segment chain tight
ADJACENCY_LINK_DISTANCE = 10
ALPHA_START = 1.0
ALPHA_MIN = 0.001
ALPHA_DECAY = 1 - ALPHA_MIN**(1/300)
VELOCITY_DECAY = 0.4
CHARGE_DISTANCE_MIN2 = 1.0      # squared
CHARGE_EXACT_MAX_NODES = 500    # larger graphs use the grid-approximated many-body force
CHARGE_GRID_CELLS_FACTOR = 5    # grid has about 5*sqrt(N) cells
CHARGE_NEAR_RANGE = 2           # cells within this Chebyshev distance interact exactly
INITIAL_RADIUS = 10
DEFAULT_SEED = 0


#### RENDERING: ####

# Palette name => matplotlib colormap name
COLOR_SCHEMES = {
    'Turbo': 'turbo',
    'Rainbow': 'rainbow',
    'Spectral': 'Spectral',
    'Viridis': 'viridis',
    'RdYlBu': 'RdYlBu',
}
NEUTRAL_LINK_COLOR = 'grey'
SEQUENCE_LINK_WIDTH_FACTOR = 1.5
ADJACENCY_LINK_WIDTH = 3
STROKE_OPACITY = 0.6
DARKER_FACTOR = 0.7             # HSL lightness factor for one "darker" step
TOOLTIP_OFFSET_Y = -28

DEFAULT_MIN_SCALE = 0.1
DEFAULT_MAX_SCALE = 8
