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
Module for mapping layout links to visual attributes (stroke color and width).

Links carrying a sequence payload (backbone links) are colored by their source
node's index, normalized by the number of source nodes, using one of a fixed set
of perceptual colormaps. The color is then darkened one step for contrast.
All other links are drawn thin, in a neutral grey.

Refs:
* https://matplotlib.org/stable/users/explain/colors/colormaps.html
* https://github.com/d3/d3-color#color_darker

"""

import colorsys

from matplotlib import colormaps
from matplotlib.colors import to_rgb, to_hex

from ..constants import (
    COLOR_SCHEMES, DEFAULT_COLOR_SCHEME, DEFAULT_THICKNESS, NEUTRAL_LINK_COLOR,
    SEQUENCE_LINK_WIDTH_FACTOR, ADJACENCY_LINK_WIDTH, STROKE_OPACITY, DARKER_FACTOR)
from ..errors import ConfigError


def get_colormap(color_scheme):
    """ Return the matplotlib colormap for palette name color_scheme, e.g. 'Rainbow'. """
    try:
        return colormaps[COLOR_SCHEMES[color_scheme]]
    except KeyError:
        raise ConfigError("Unknown color scheme %r (available: %s)" %
                          (color_scheme, ", ".join(COLOR_SCHEMES))) from None


def darker(color, k=1):
    """ Return color with its HSL lightness reduced by k steps, as an rgb tuple. """
    r, g, b = to_rgb(color)
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return colorsys.hls_to_rgb(h, l * DARKER_FACTOR**k, s)


class LinkStyle():
    """ Stroke width, color (hex string) and opacity of one link. """

    def __init__(self, width, color, opacity=STROKE_OPACITY):
        self.width = width
        self.color = color
        self.opacity = opacity

    def __eq__(self, other):
        if not isinstance(other, LinkStyle):
            return NotImplemented
        return (self.width, self.color, self.opacity) == (other.width, other.color, other.opacity)

    __hash__ = None

    def __repr__(self):
        return "LinkStyle(width=%s, color=%r)" % (self.width, self.color)


class StyledLink():
    """ A LayoutLink together with its LinkStyle; this is what renderers draw. """

    def __init__(self, layout_link, style):
        self.layout_link = layout_link
        self.link = layout_link.link
        self.style = style
        self.x1, self.y1 = layout_link.x1, layout_link.y1
        self.x2, self.y2 = layout_link.x2, layout_link.y2

    @property
    def segment(self):
        return ((self.x1, self.y1), (self.x2, self.y2))


class LinkColorMapper():
    """
    Maps links to LinkStyles.
    :n_source_nodes:    Number of source nodes in the graph (link_num is divided by this).
    :color_scheme:      Palette name, one of COLOR_SCHEMES.
    :thickness:         Base thickness; sequence-bearing links are drawn 1.5 x thickness.
    """

    def __init__(self, n_source_nodes, color_scheme=DEFAULT_COLOR_SCHEME, thickness=DEFAULT_THICKNESS):
        self.n_source_nodes = n_source_nodes
        self.color_scheme = color_scheme
        self.cmap = get_colormap(color_scheme)
        self.thickness = thickness
        self.neutral_color = to_hex(NEUTRAL_LINK_COLOR)

    def link_color(self, link):
        if not link.is_sequence_link:
            return self.neutral_color
        frac = link.link_num / self.n_source_nodes if self.n_source_nodes else 0.0
        return to_hex(darker(self.cmap(frac)))

    def link_width(self, link):
        return self.thickness * SEQUENCE_LINK_WIDTH_FACTOR if link.is_sequence_link else ADJACENCY_LINK_WIDTH

    def link_style(self, link):
        return LinkStyle(self.link_width(link), self.link_color(link))

    def style_links(self, layout_links):
        """ Return a StyledLink for each LayoutLink in layout_links. """
        return [StyledLink(layout_link, self.link_style(layout_link.link)) for layout_link in layout_links]
