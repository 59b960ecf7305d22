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

Module for mapping strand-oriented source links onto segment-node endpoints.

Which end of the segment chain a link attaches to depends on the strand of each side:

    strand1  strand2    source endpoint     target endpoint
       +        +       <source>-end        <target>-start
       -        +       <source>-start      <target>-start
       -        -       <source>-start      <target>-end
       +        -       <source>-end        <target>-end

"""

from ..constants import SEGMENT_START_SUFFIX, SEGMENT_END_SUFFIX
from ..errors import InvalidStrandError
from .models import Strand, AdjacencyLink
from .segmentation import segment_id


# (strand1, strand2) => (source suffix, target suffix)
ENDPOINT_SUFFIXES = {
    (Strand.FORWARD, Strand.FORWARD): (SEGMENT_END_SUFFIX, SEGMENT_START_SUFFIX),
    (Strand.REVERSE, Strand.FORWARD): (SEGMENT_START_SUFFIX, SEGMENT_START_SUFFIX),
    (Strand.REVERSE, Strand.REVERSE): (SEGMENT_START_SUFFIX, SEGMENT_END_SUFFIX),
    (Strand.FORWARD, Strand.REVERSE): (SEGMENT_END_SUFFIX, SEGMENT_END_SUFFIX),
}


def endpoint_suffixes(strand1, strand2):
    """ Return (source suffix, target suffix) for the given strand pair. """
    strand1 = Strand.parse(strand1)
    strand2 = Strand.parse(strand2)
    try:
        return ENDPOINT_SUFFIXES[(strand1, strand2)]
    except KeyError:
        # Unreachable as long as ENDPOINT_SUFFIXES covers all Strand pairs.
        raise InvalidStrandError((strand1, strand2)) from None


def resolve_link(link):
    """
    Return the AdjacencyLink for SourceLink link, connecting the proper
    start/end segment nodes of link.source and link.target.
    All other link attributes are copied verbatim.
    """
    source_suffix, target_suffix = endpoint_suffixes(link.strand1, link.strand2)
    return AdjacencyLink(segment_id(link.source, source_suffix),
                         segment_id(link.target, target_suffix),
                         link.attrs)
