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

# pylint: disable=W0142,C0103,C0301,W0141

"""

Module for setting up logging.

The graphgenome library modules only create module-level loggers; applications
(e.g. bin/graphgenome_render.py) call init_logging to attach handlers.

"""

import os
import logging
import logging.handlers
logger = logging.getLogger(__name__)

import appdirs

APPNAME = "graphgenome"


def default_logdir(appname=APPNAME):
    """ Return the platform's user log directory for appname. """
    return appdirs.user_log_dir(appname)


def get_loglevel(args):
    """ Return the console loglevel from args['loglevel'] (name or number), default WARNING (DEBUG if testing). """
    if args.get('loglevel'):
        try:
            return int(args['loglevel'])
        except (TypeError, ValueError):
            return getattr(logging, args['loglevel'].upper())
    return logging.DEBUG if args.get('testing') else logging.WARNING


def init_logging(args=None, logfilepath=None, logdir=None):
    """
    Set up standard logging system based on parameters in args, e.g. loglevel and testing.
    :args:          dict with keys to configure logging setup: 'loglevel', 'basic_logging', 'rotating',
                    'debug_modules', 'no_logfile'.
    :logfilepath:   filename to output logging output to.
    :logdir:        If logfilepath is not provided, generate a filename in this directory.
                    If neither logfilepath or logdir is provided, the user log directory is used.
    After initializing the logging system it can be further configured through direct access
    to logging.root properties, e.g. logging.root.handlers.
    """
    if args is None:
        args = {}
    loglevel = get_loglevel(args)

    ## Different output formatting for file vs console logging output.
    ## File logs should be simple and easy to regex; console logs should be short and nice on the eyes
    logfilefmt = '%(asctime)s %(levelname)-6s - %(name)s:%(lineno)s - %(funcName)s() - %(message)s'
    logdatefmt = "%Y%m%d-%H:%M:%S"
    loguserfmt = "%(asctime)s %(levelname)-5s %(module)20s:%(lineno)-4s%(funcName)16s() %(message)s"
    logtimefmt = "%H:%M:%S"

    if args.get('basic_logging', False):
        logging.basicConfig(level=loglevel, format=loguserfmt, datefmt=logtimefmt)
        logger.debug("Logging system initialized with loglevel %s", loglevel)
        return

    logging.root.setLevel(logging.DEBUG)  # Ensure that root logger accepts all DEBUG messages.

    if not args.get('no_logfile'):
        if logfilepath is None:
            if logdir is None:
                logdir = default_logdir()
            if not os.path.exists(logdir):
                os.makedirs(logdir)
            logfilepath = os.path.join(logdir, APPNAME + ".log")
        if args.get('rotating', False):
            logfilehandler = logging.handlers.RotatingFileHandler(logfilepath, maxBytes=2*2**20, backupCount=2)
        else:
            logfilehandler = logging.FileHandler(logfilepath)
        logfilehandler.setFormatter(logging.Formatter(fmt=logfilefmt, datefmt=logdatefmt))
        logging.root.addHandler(logfilehandler)

    logstreamhandler = logging.StreamHandler()  # default stream is sys.stderr
    logstreamhandler.setFormatter(logging.Formatter(loguserfmt, logtimefmt))
    logging.root.addHandler(logstreamhandler)

    if args.get('debug_modules'):
        debug_modules = args['debug_modules']
        def module_debug_filter(record):
            """ Pass records from debug_modules at any level; everything else at loglevel or above. """
            return any(record.name.startswith(modstr) for modstr in debug_modules) \
                or record.levelno >= loglevel
        logstreamhandler.addFilter(module_debug_filter)
    else:
        # only set a min level if we are not using module_debug_filter. (Level is an additional filter.)
        logstreamhandler.setLevel(loglevel)
    logger.info("Logging system initialized (logfile: %s)", logfilepath)
