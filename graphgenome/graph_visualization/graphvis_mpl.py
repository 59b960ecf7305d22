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

Module for drawing laid-out genome graphs with matplotlib.

Links are drawn as one LineCollection with per-link stroke width and color,
in a view box of width x height units with the y-axis pointing down (as in SVG).

The MplInteraction class translates matplotlib canvas events into calls on an
InteractionController:
    * pointer motion        -> hover / hover end (tooltip drawn as an annotation)
    * button press+release  -> click (if the pointer stayed within DRAG_THRESHOLD pixels)
    * drag                  -> pan, once the pointer has moved beyond DRAG_THRESHOLD pixels
    * scroll wheel          -> zoom around the pointer

Don't use pyplot if you are embedding into an existing (gui) app; pass an Axes
created from matplotlib.figure.Figure instead.

"""

import math
import logging
logger = logging.getLogger(__name__)

from matplotlib.figure import Figure
from matplotlib.collections import LineCollection

from ..constants import DEFAULT_WIDTH, DEFAULT_HEIGHT

POINTS_PER_UNIT = 72 / 100    # figure size: 100 view-box units per inch
SCROLL_ZOOM_FACTOR = 1.2
DRAG_THRESHOLD = 3            # pixels


def make_figure(width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, dpi=100):
    """ Return (figure, axes) sized for a width x height view box, without using pyplot. """
    fig = Figure(figsize=(width / 100, height / 100), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    return fig, ax


def set_view(ax, transform=None, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT):
    """ Set axes limits to show the view box, as seen through the zoom transform (if given). """
    if transform is None:
        (x0, y0), (x1, y1) = (0, 0), (width, height)
    else:
        (x0, y0), (x1, y1) = transform.invert((0, 0)), transform.invert((width, height))
    ax.set_xlim(x0, x1)
    ax.set_ylim(y1, y0)   # y axis points down


def draw_styled_links(styled_links, ax, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT):
    """
    Draw styled_links (list of StyledLink) on ax and return the LineCollection.
    Stroke widths are given in view-box units and converted to points.
    """
    segments = [link.segment for link in styled_links]
    colors = [link.style.color for link in styled_links]
    widths = [link.style.width * POINTS_PER_UNIT for link in styled_links]
    alpha = styled_links[0].style.opacity if styled_links else None
    collection = LineCollection(segments, colors=colors, linewidths=widths, alpha=alpha,
                                capstyle='butt')
    ax.add_collection(collection)
    set_view(ax, width=width, height=height)
    ax.set_axis_off()
    return collection


def export_svg(styled_links, path, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT):
    """ Render styled_links and save the drawing as an SVG file at path. """
    fig, ax = make_figure(width, height)
    draw_styled_links(styled_links, ax, width=width, height=height)
    fig.savefig(path, format='svg')
    logger.info("%s links exported to %s", len(styled_links), path)
    return path


class MplInteraction():
    """
    Connects matplotlib canvas events for ax to controller (an InteractionController).
    Event pixel coordinates are converted to view-box ("screen") coordinates
    before they are passed on.
    """

    def __init__(self, ax, controller, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT):
        self.ax = ax
        self.controller = controller
        self.width = width
        self.height = height
        self.press_point = None
        self.press_pixel = None
        self.last_point = None
        self.dragged = False
        self.annotation = ax.annotate("", xy=(0, 0), xycoords='data',
                                      bbox=dict(boxstyle='round', fc='w', alpha=0.9))
        self.annotation.set_visible(False)
        canvas = ax.figure.canvas
        self.cids = [
            canvas.mpl_connect('motion_notify_event', self.on_motion),
            canvas.mpl_connect('button_press_event', self.on_press),
            canvas.mpl_connect('button_release_event', self.on_release),
            canvas.mpl_connect('scroll_event', self.on_scroll),
        ]

    def disconnect(self):
        for cid in self.cids:
            self.ax.figure.canvas.mpl_disconnect(cid)
        self.cids = []

    def to_screen(self, event):
        """ Convert event pixel coordinates to view-box coordinates (y pointing down). """
        bbox = self.ax.bbox
        sx = (event.x - bbox.x0) / bbox.width * self.width
        sy = (bbox.y1 - event.y) / bbox.height * self.height
        return sx, sy

    def redraw(self):
        set_view(self.ax, self.controller.transform, self.width, self.height)
        tooltip = self.controller.tooltip
        if tooltip.visible:
            self.annotation.xy = self.controller.transform.invert((tooltip.left, tooltip.top))
            self.annotation.set_text(tooltip.text)
        self.annotation.set_visible(tooltip.visible)
        self.ax.figure.canvas.draw_idle()

    def on_motion(self, event):
        if event.inaxes is not self.ax:
            return
        sx, sy = self.to_screen(event)
        if self.press_point is not None:
            if not self.dragged:
                if math.hypot(event.x - self.press_pixel[0], event.y - self.press_pixel[1]) <= DRAG_THRESHOLD:
                    return
                self.dragged = True
            self.controller.pan(sx - self.last_point[0], sy - self.last_point[1])
            self.last_point = (sx, sy)
        else:
            self.controller.pointer_move(sx, sy)
        self.redraw()

    def on_press(self, event):
        if event.inaxes is not self.ax or event.button != 1:
            return
        self.press_point = self.last_point = self.to_screen(event)
        self.press_pixel = (event.x, event.y)
        self.dragged = False

    def on_release(self, event):
        if self.press_point is None:
            return
        if not self.dragged:
            self.controller.pointer_click(*self.press_point)
        self.press_point = self.press_pixel = self.last_point = None
        self.redraw()

    def on_scroll(self, event):
        if event.inaxes is not self.ax:
            return
        factor = SCROLL_ZOOM_FACTOR if event.button == 'up' else 1 / SCROLL_ZOOM_FACTOR
        self.controller.zoom(factor, *self.to_screen(event))
        self.redraw()
