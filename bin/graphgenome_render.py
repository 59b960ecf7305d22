#!/usr/bin/env python
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

Lay out and render a genome variation graph.
Run with --help for options.

"""

import os
import sys

LIBPATH = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
sys.path.insert(0, LIBPATH)

from graphgenome.render_cli import main


if __name__ == '__main__':
    sys.exit(main())
