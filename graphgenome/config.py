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

Module for graphgenome configuration.

Configuration is a plain dict. Values are taken, in order of precedence, from
keyword overrides, an optional YAML config file, and DEFAULT_CONFIG. E.g.:

    # graphgenome.yaml
    block_size: 1000
    color_scheme: Viridis
    steps: 500

"""

import numbers
import logging
logger = logging.getLogger(__name__)

import yaml

from .constants import (
    DEFAULT_BLOCK_SIZE, DEFAULT_THICKNESS, DEFAULT_COLOR_SCHEME, DEFAULT_WIDTH, DEFAULT_HEIGHT,
    DEFAULT_STEPS, DEFAULT_CHARGE_STRENGTH, BACKBONE_LINK_DISTANCE, ADJACENCY_LINK_DISTANCE,
    DEFAULT_MIN_SCALE, DEFAULT_MAX_SCALE, DEFAULT_SEED, COLOR_SCHEMES)
from .errors import ConfigError


DEFAULT_CONFIG = {
    # Structural; changing these re-assembles and re-simulates:
    'block_size': DEFAULT_BLOCK_SIZE,
    'width': DEFAULT_WIDTH,
    'height': DEFAULT_HEIGHT,
    'steps': DEFAULT_STEPS,
    'charge_strength': DEFAULT_CHARGE_STRENGTH,
    'backbone_distance': BACKBONE_LINK_DISTANCE,
    'adjacency_distance': ADJACENCY_LINK_DISTANCE,
    'seed': DEFAULT_SEED,
    # Presentational; changing these only restyles:
    'thickness': DEFAULT_THICKNESS,
    'color_scheme': DEFAULT_COLOR_SCHEME,
    'min_scale': DEFAULT_MIN_SCALE,
    'max_scale': DEFAULT_MAX_SCALE,
}

STRUCTURAL_KEYS = ('block_size',)
LAYOUT_KEYS = ('width', 'height', 'steps', 'charge_strength', 'backbone_distance', 'adjacency_distance', 'seed')
STYLE_KEYS = ('thickness', 'color_scheme')


def _is_int(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate_config(config):
    """ Check config values, raising ConfigError for the first invalid one. Returns config. """
    unknown = set(config) - set(DEFAULT_CONFIG)
    if unknown:
        raise ConfigError("Unknown config key(s): %s" % ", ".join(sorted(unknown)))
    for key in ('block_size', 'width', 'height'):
        if not _is_int(config[key]) or config[key] < 1:
            raise ConfigError("%s must be a positive integer, got %r" % (key, config[key]))
    if not _is_int(config['steps']) or config['steps'] < 0:
        raise ConfigError("steps must be a non-negative integer, got %r" % (config['steps'],))
    if config['seed'] is not None and not _is_int(config['seed']):
        raise ConfigError("seed must be an integer or None, got %r" % (config['seed'],))
    if not _is_number(config['charge_strength']):
        raise ConfigError("charge_strength must be a number, got %r" % (config['charge_strength'],))
    if not _is_number(config['thickness']) or config['thickness'] <= 0:
        raise ConfigError("thickness must be a positive number, got %r" % (config['thickness'],))
    for key in ('backbone_distance', 'adjacency_distance'):
        if not _is_number(config[key]) or config[key] < 0:
            raise ConfigError("%s must be a non-negative number, got %r" % (key, config[key]))
    if config['color_scheme'] not in COLOR_SCHEMES:
        raise ConfigError("color_scheme must be one of %s, got %r" %
                          (", ".join(COLOR_SCHEMES), config['color_scheme']))
    if not (_is_number(config['min_scale']) and _is_number(config['max_scale'])
            and 0 < config['min_scale'] <= config['max_scale']):
        raise ConfigError("Invalid scale extent (%r, %r)" % (config['min_scale'], config['max_scale']))
    return config


def load_config(path=None, **overrides):
    """
    Return a validated config dict.
    :path:      Optional YAML config file.
    :overrides: Config values taking precedence over the file; None values are ignored
                (so unset command line options can be passed straight through).
    """
    config = dict(DEFAULT_CONFIG)
    if path is not None:
        with open(path) as fp:
            file_config = yaml.safe_load(fp) or {}
        if not isinstance(file_config, dict):
            raise ConfigError("Config file %s must contain a mapping." % (path,))
        config.update(file_config)
        logger.debug("Config loaded from %s: %s", path, file_config)
    config.update({k: v for k, v in overrides.items() if v is not None})
    return validate_config(config)
