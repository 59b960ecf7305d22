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

Module for splitting source sequences into chains of fixed-size segment nodes.

A node of length L is split into blocks of block_size nt. Each block start becomes
a SegmentNode, named "<id>-start" for offset 0 and "<id>-<offset>" for the others.
The last node of the chain is always named "<id>-end", positioned at the offset
where the block iteration stopped. Short sequences (L <= block_size) give exactly
two segment nodes, "<id>-start" and "<id>-end", both at offset 0.

Consecutive segment nodes are joined by BackboneLinks, so that the layout treats
the chain as a linear stand-in for the full sequence.

"""

import numbers
import logging
logger = logging.getLogger(__name__)

from ..constants import SEGMENT_START_SUFFIX, SEGMENT_END_SUFFIX
from ..errors import ConfigError
from .models import SegmentNode, BackboneLink


def segment_id(node_id, suffix):
    """ Return the segment node id for node_id with suffix, e.g. 'n1-start' or 'n1-500'. """
    return "%s-%s" % (node_id, suffix)


def check_block_size(block_size):
    """ Raise ConfigError unless block_size is a positive integer. """
    if isinstance(block_size, bool) or not isinstance(block_size, numbers.Integral) or block_size < 1:
        raise ConfigError("block_size must be a positive integer, got %r" % (block_size,))
    return int(block_size)


def split_node(node, block_size):
    """
    Split node into an ordered list of SegmentNodes, in increasing offset order.
    :node:          SourceNode to split.
    :block_size:    Number of nt per segment block.
    Returns a list with at least two segment nodes, the first being "<id>-start"
    and the last "<id>-end".
    """
    block_size = check_block_size(block_size)
    segments = []
    pos = 0
    # The loop bound stops one block short, so the last (partial or full) block is the "end" node.
    while pos < node.length - block_size:
        suffix = SEGMENT_START_SUFFIX if pos == 0 else pos
        segments.append(SegmentNode(segment_id(node.id, suffix), pos, node.id, node.attrs))
        pos += block_size
    if not segments:
        segments.append(SegmentNode(segment_id(node.id, SEGMENT_START_SUFFIX), 0, node.id, node.attrs))
    segments.append(SegmentNode(segment_id(node.id, SEGMENT_END_SUFFIX), pos, node.id, node.attrs))
    return segments


def backbone_links(segments, node, link_num):
    """
    Return BackboneLinks joining each consecutive pair of segments.
    :segments:  SegmentNodes of node, as returned by split_node.
    :link_num:  Index of node among all source nodes.
    """
    return [BackboneLink(seg1.id, seg2.id, node, link_num)
            for seg1, seg2 in zip(segments, segments[1:])]


def segment_node(node, block_size, link_num):
    """ Split node and return (segments, backbone links). """
    segments = split_node(node, block_size)
    links = backbone_links(segments, node, link_num)
    logger.debug("Node %s (%s nt) split into %s segments", node.id, node.length, len(segments))
    return segments, links
