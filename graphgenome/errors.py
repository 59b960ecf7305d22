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

Exceptions raised by graphgenome.

All of them are raised synchronously by the assembly and layout functions;
callers decide whether to retry with corrected input.

"""


class GraphGenomeError(Exception):
    """ Base class for all graphgenome errors. """


class InputShapeError(GraphGenomeError, ValueError):
    """
    A source node or source link does not have the expected shape,
    e.g. missing id, missing/empty sequence, non-string id, or a link
    referencing a node that is not in the graph.
    """


class InvalidStrandError(InputShapeError):
    """ A source link has a strand value other than '+' or '-'. """

    def __init__(self, strand, link=None):
        self.strand = strand
        self.link = link
        msg = "Invalid strand value %r (expected '+' or '-')" % (strand,)
        if link is not None:
            msg += " for link %s" % (link,)
        super().__init__(msg)


class LayoutDivergenceError(GraphGenomeError, ArithmeticError):
    """ The force simulation was given degenerate input or produced non-finite coordinates. """


class ConfigError(GraphGenomeError, ValueError):
    """ Invalid configuration value, e.g. unknown color scheme or non-positive block size. """
