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

Module with the interaction protocol for rendered genome graphs: hover, click, pan and zoom.

The controller is toolkit-agnostic. The rendering layer feeds it pointer coordinates
(screen space) or already hit-tested link indices, and the controller calls back into
the application:

    on_hover(tooltip)       - pointer entered a link; tooltip has text and anchor position.
    on_hover_end(tooltip)   - pointer left the link; tooltip.visible is False.
    on_click(record)        - a link was clicked; record is the full link dict incl. attrs.

Pan and zoom only change the view transform applied to the drawing; they never
affect the simulated layout.

"""

import re
import logging
logger = logging.getLogger(__name__)

import numpy as np

from ..constants import DEFAULT_MIN_SCALE, DEFAULT_MAX_SCALE, TOOLTIP_OFFSET_Y

SEGMENT_SUFFIX_REGEX = re.compile(r"-(start|end)$")


def strip_segment_suffix(segment_id):
    """ Remove a trailing '-start' or '-end' from segment_id, e.g. 'n1-end' -> 'n1'. """
    return SEGMENT_SUFFIX_REGEX.sub("", segment_id)


def hover_label(link):
    """
    Return the tooltip text for link: its id if it has one, otherwise
    "<source>-<target>" with the start/end suffixes removed from both segment ids.
    """
    if link.id:
        return str(link.id)
    return "%s-%s" % (strip_segment_suffix(link.source), strip_segment_suffix(link.target))


def point_segment_distances(point, segments):
    """
    Return the distance from point (x, y) to each line segment.
    :segments:  N x 2 x 2 array, segments[i] = ((x1, y1), (x2, y2)).
    """
    p = np.asarray(point, dtype=float)
    a = segments[:, 0, :]
    ab = segments[:, 1, :] - a
    length2 = (ab**2).sum(axis=1)
    length2[length2 == 0] = 1.       # zero-length segments: t = 0 gives distance to a
    t = np.clip(((p - a) * ab).sum(axis=1) / length2, 0, 1)
    closest = a + t[:, np.newaxis] * ab
    return np.sqrt(((p - closest)**2).sum(axis=1))


class Tooltip():
    """ Floating label state. left/top is the anchor position in screen coordinates. """

    def __init__(self):
        self.text = ""
        self.left = 0.
        self.top = 0.
        self.visible = False
        self.link_index = None

    def __repr__(self):
        return "Tooltip(%r, visible=%s)" % (self.text, self.visible)


class ZoomTransform():
    """
    Scale-and-translate view transform: screen = k * diagram + (x, y).
    k is kept within [min_scale, max_scale].
    """

    def __init__(self, k=1., x=0., y=0., min_scale=DEFAULT_MIN_SCALE, max_scale=DEFAULT_MAX_SCALE):
        if not 0 < min_scale <= max_scale:
            raise ValueError("Invalid scale extent (%r, %r)" % (min_scale, max_scale))
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.k = self.clamp(k)
        self.x = x
        self.y = y

    def clamp(self, k):
        return min(max(k, self.min_scale), self.max_scale)

    def apply(self, point):
        """ Diagram coordinates -> screen coordinates. """
        return (point[0] * self.k + self.x, point[1] * self.k + self.y)

    def invert(self, point):
        """ Screen coordinates -> diagram coordinates. """
        return ((point[0] - self.x) / self.k, (point[1] - self.y) / self.k)

    def zoom_by(self, factor, anchor=(0., 0.)):
        """ Scale by factor (clamped to the scale extent), keeping the screen point anchor fixed. """
        ax, ay = self.invert(anchor)
        self.k = self.clamp(self.k * factor)
        self.x = anchor[0] - ax * self.k
        self.y = anchor[1] - ay * self.k
        return self

    def pan(self, dx, dy):
        """ Translate by (dx, dy) screen units. """
        self.x += dx
        self.y += dy
        return self

    def reset(self):
        self.k, self.x, self.y = self.clamp(1.), 0., 0.
        return self

    def as_tuple(self):
        return (self.k, self.x, self.y)

    def __repr__(self):
        return "ZoomTransform(k=%s, x=%s, y=%s)" % self.as_tuple()


def _log_click(record):
    logger.info("No feature click callback configured (clicked %s)", record.get('id'))


class InteractionController():
    """
    Hover/click/pan/zoom state for one rendered graph.
    :links:         List of StyledLinks (or LayoutLinks), in drawing order.
    :on_click:      Called with link.as_dict() when a link is clicked.
    :on_hover:      Called with the Tooltip when the pointer enters a link.
    :on_hover_end:  Called with the Tooltip when the pointer leaves a link.
    :hit_tolerance: Max. distance (diagram units) between pointer and link for a hit.
                    Default is half the link's stroke width, but at least 2.
    """

    def __init__(self, links, on_click=None, on_hover=None, on_hover_end=None,
                 min_scale=DEFAULT_MIN_SCALE, max_scale=DEFAULT_MAX_SCALE, hit_tolerance=None):
        self.links = list(links)
        self.on_click = on_click if on_click is not None else _log_click
        self.on_hover = on_hover
        self.on_hover_end = on_hover_end
        self.tooltip = Tooltip()
        self.transform = ZoomTransform(min_scale=min_scale, max_scale=max_scale)
        self.segments = np.array([link.segment for link in self.links], dtype=float).reshape(-1, 2, 2)
        if hit_tolerance is None:
            widths = np.array([getattr(getattr(link, 'style', None), 'width', 4.) for link in self.links])
            self.hit_tolerance = np.maximum(widths / 2, 2.)
        else:
            self.hit_tolerance = np.full(len(self.links), float(hit_tolerance))

    def hit_test(self, x, y):
        """ Return the index of the link closest to screen point (x, y), or None if no link is hit. """
        if not self.links:
            return None
        point = self.transform.invert((x, y))
        dists = point_segment_distances(point, self.segments)
        dists[dists > self.hit_tolerance] = np.inf
        idx = int(np.argmin(dists))
        return idx if np.isfinite(dists[idx]) else None

    def pointer_over(self, index, x, y):
        """ Pointer is over link index at screen point (x, y): show its label near the pointer. """
        self.tooltip.text = hover_label(self.links[index].link)
        self.tooltip.left = x
        self.tooltip.top = y + TOOLTIP_OFFSET_Y
        self.tooltip.visible = True
        self.tooltip.link_index = index
        if self.on_hover is not None:
            self.on_hover(self.tooltip)
        return self.tooltip

    def pointer_out(self):
        """ Pointer left the hovered link: hide the label. """
        was_visible = self.tooltip.visible
        self.tooltip.visible = False
        self.tooltip.link_index = None
        if was_visible and self.on_hover_end is not None:
            self.on_hover_end(self.tooltip)
        return self.tooltip

    def click(self, index):
        """ Link index was clicked: hide the label and hand the link record to on_click. """
        self.pointer_out()
        record = self.links[index].link.as_dict()
        self.on_click(record)
        return record

    def pointer_move(self, x, y):
        """ Hit-test screen point (x, y) and update hover state. Returns the hovered link index or None. """
        index = self.hit_test(x, y)
        if index is None:
            if self.tooltip.visible:
                self.pointer_out()
        elif index != self.tooltip.link_index:
            if self.tooltip.visible:
                self.pointer_out()
            self.pointer_over(index, x, y)
        return index

    def pointer_click(self, x, y):
        """ Hit-test screen point (x, y) and click the link there, if any. Returns the link record or None. """
        index = self.hit_test(x, y)
        if index is None:
            return None
        return self.click(index)

    def zoom(self, factor, x, y):
        """ Zoom by factor around screen point (x, y). """
        return self.transform.zoom_by(factor, (x, y))

    def pan(self, dx, dy):
        return self.transform.pan(dx, dy)
