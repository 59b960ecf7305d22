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

# pylint: disable=C0103,E1101

"""

Module with the force-directed layout of assembled genome graphs.

The layout is a classic node-link force simulation. Each segment node is a point mass,
and three forces act on every tick:

    (1) Link (spring) force: connected nodes are pulled toward a target separation,
        which is small for backbone links (keeping each sequence's segment chain tight)
        and larger for adjacency links (letting distinct sequences spread apart).
        Each link has strength 1/min(degree(source), degree(target)), and the correction
        is split between the two ends according to their degrees.
    (2) Many-body force: all node pairs repel each other with
            dv = k * alpha * r / |r|**2
        with k = charge_strength (negative = repulsion). Squared distances below 1 are
        softened to sqrt(|r|**2) to avoid excessive forces between near-coincident nodes.
        Large graphs use a Barnes-Hut style approximation on a uniform grid: nodes in
        nearby cells interact exactly, farther cells act through their center of mass.
    (3) Centering force: all nodes are translated so that their mean position is
        the center of the drawing area.

After applying forces, velocities are damped by (1 - velocity_decay) and added to the
positions. The force magnitude is scaled by alpha, which decays toward zero over the course
of the simulation.

Initial positions are laid out on a phyllotaxis spiral, so the layout is deterministic.
Exactly coincident points are separated by a tiny random jiggle, drawn from a seeded
numpy RandomState.

The simulation state lives in a ForceSimulation object, constructed fresh for each
layout pass and owned by the caller. Ticks must run sequentially; tick N+1 depends
on all positions from tick N.

"""

import math
import logging
logger = logging.getLogger(__name__)

import numpy as np

from ..constants import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_STEPS, DEFAULT_CHARGE_STRENGTH,
    BACKBONE_LINK_DISTANCE, ADJACENCY_LINK_DISTANCE,
    ALPHA_START, ALPHA_DECAY, VELOCITY_DECAY, CHARGE_DISTANCE_MIN2,
    CHARGE_EXACT_MAX_NODES, CHARGE_GRID_CELLS_FACTOR, CHARGE_NEAR_RANGE,
    INITIAL_RADIUS, DEFAULT_SEED)
from ..errors import LayoutDivergenceError


JIGGLE_SCALE = 1e-6


class LayoutNode():
    """ Simulation-private copy of a segment node with its final position and velocity. """

    def __init__(self, node, x, y, vx=0., vy=0.):
        self.node = node
        self.id = node.id
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy

    def __repr__(self):
        return "LayoutNode(%r, x=%.2f, y=%.2f)" % (self.id, self.x, self.y)


class LayoutLink():
    """
    A link with resolved endpoint coordinates.
    :link:      The (unmodified) BackboneLink or AdjacencyLink.
    :source:    LayoutNode at the source end.
    :target:    LayoutNode at the target end.
    """

    def __init__(self, link, source, target):
        self.link = link
        self.source = source
        self.target = target

    @property
    def x1(self):
        return self.source.x

    @property
    def y1(self):
        return self.source.y

    @property
    def x2(self):
        return self.target.x

    @property
    def y2(self):
        return self.target.y

    @property
    def segment(self):
        """ Endpoint coordinates as ((x1, y1), (x2, y2)). """
        return ((self.source.x, self.source.y), (self.target.x, self.target.y))

    def __repr__(self):
        return "LayoutLink(%r -> %r)" % (self.source.id, self.target.id)


class LayoutResult():
    """
    Output of one layout pass.
    :nodes:     List of LayoutNodes, in assembled node order.
    :links:     List of LayoutLinks, in assembled link order.
    :assembled: The AssembledGraph that was laid out.
    :n_ticks:   Number of simulation ticks run.
    """

    def __init__(self, nodes, links, assembled, n_ticks, alpha):
        self.nodes = nodes
        self.links = links
        self.assembled = assembled
        self.n_ticks = n_ticks
        self.alpha = alpha
        self.positions = {node.id: (node.x, node.y) for node in nodes}

    def coordinates(self):
        """ Return node positions as an N x 2 array, in node order. """
        return np.array([(node.x, node.y) for node in self.nodes], dtype=float)

    def __repr__(self):
        return "LayoutResult(%s nodes, %s links, %s ticks)" % (len(self.nodes), len(self.links), self.n_ticks)


def phyllotaxis_positions(n, radius=INITIAL_RADIUS):
    """ Return n x 2 array of initial positions arranged on a phyllotaxis (sunflower) spiral. """
    i = np.arange(n, dtype=float)
    r = radius * np.sqrt(0.5 + i)
    angle = i * math.pi * (3 - math.sqrt(5))
    return np.column_stack((r * np.cos(angle), r * np.sin(angle)))


class ForceSimulation():
    """
    Force simulation over the nodes and links of an AssembledGraph.

    Usage:
        sim = ForceSimulation(assembled, width=1000, height=1000)
        sim.run(2000)
        result = sim.result()

    :charge_strength:       Many-body strength; negative values repel.
    :backbone_distance:     Target length of links carrying a sequence payload.
    :adjacency_distance:    Target length of all other links.
    :seed:                  Seed for the jiggle separating coincident points.
    :chunk_size:            Number of nodes processed at once in the pairwise many-body
                            calculation; limits memory use to chunk_size x N x 2 floats.
    :exact_charge_max_nodes: Graphs with more nodes use the grid-approximated many-body force.
    """

    def __init__(self, assembled, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT,
                 charge_strength=DEFAULT_CHARGE_STRENGTH,
                 backbone_distance=BACKBONE_LINK_DISTANCE, adjacency_distance=ADJACENCY_LINK_DISTANCE,
                 seed=DEFAULT_SEED, velocity_decay=VELOCITY_DECAY,
                 alpha=ALPHA_START, alpha_decay=ALPHA_DECAY, alpha_target=0.0,
                 center_strength=1.0, chunk_size=1024, exact_charge_max_nodes=CHARGE_EXACT_MAX_NODES):
        self.assembled = assembled
        self.nodes = list(assembled.nodes)
        self.links = list(assembled.links)
        n_nodes = len(self.nodes)
        if n_nodes == 0:
            raise LayoutDivergenceError("Cannot lay out a graph with zero nodes.")
        self.index = {node.id: idx for idx, node in enumerate(self.nodes)}
        self.center = np.array([width / 2, height / 2], dtype=float)
        self.charge_strength = charge_strength
        self.velocity_decay = velocity_decay
        self.alpha = alpha
        self.alpha_decay = alpha_decay
        self.alpha_target = alpha_target
        self.center_strength = center_strength
        self.chunk_size = chunk_size
        self.exact_charge_max_nodes = exact_charge_max_nodes
        self.random = np.random.RandomState(seed)
        self.n_ticks = 0

        self.pos = phyllotaxis_positions(n_nodes)
        self.vel = np.zeros_like(self.pos)

        try:
            self.sources = np.array([self.index[link.source] for link in self.links], dtype=int)
            self.targets = np.array([self.index[link.target] for link in self.links], dtype=int)
        except KeyError as e:
            raise LayoutDivergenceError("Link references unknown node %s" % e) from None
        self.distances = np.array([backbone_distance if link.is_sequence_link else adjacency_distance
                                   for link in self.links], dtype=float)
        # Parallel links count separately towards a node's degree:
        count = (np.bincount(self.sources, minlength=n_nodes)
                 + np.bincount(self.targets, minlength=n_nodes)).astype(float)
        if self.links:
            count_s, count_t = count[self.sources], count[self.targets]
            self.link_strength = 1 / np.minimum(count_s, count_t)
            self.link_bias = count_s / (count_s + count_t)
        else:
            self.link_strength = self.link_bias = np.empty(0)

    def _jiggle(self, size):
        return (self.random.random_sample(size) - 0.5) * JIGGLE_SCALE

    def apply_link_force(self):
        """ Pull linked nodes toward their target distance. """
        if not self.links:
            return
        s, t = self.sources, self.targets
        delta = (self.pos[t] + self.vel[t]) - (self.pos[s] + self.vel[s])
        zero = delta == 0
        if zero.any():
            delta[zero] = self._jiggle(zero.sum())
        dist = np.sqrt((delta**2).sum(axis=1))
        scale = (dist - self.distances) / dist * self.alpha * self.link_strength
        delta *= scale[:, np.newaxis]
        np.add.at(self.vel, t, -delta * self.link_bias[:, np.newaxis])
        np.add.at(self.vel, s, delta * (1 - self.link_bias)[:, np.newaxis])

    @staticmethod
    def _soften(dist2):
        """ Soften squared distances below CHARGE_DISTANCE_MIN2 in place, as sqrt(min2 * dist2). """
        small = dist2 < CHARGE_DISTANCE_MIN2
        if small.any():
            dist2[small] = np.sqrt(CHARGE_DISTANCE_MIN2 * dist2[small])
        return dist2

    def _jiggle_zeros(self, d, exclude=None):
        """ Replace exactly-zero coordinate differences in d (in place) by a tiny random jiggle. """
        zero = d == 0
        if exclude is not None:
            zero[exclude] = False
        if zero.any():
            d[zero] = self._jiggle(int(zero.sum()))

    def apply_charge_force(self):
        """ Many-body force between all nodes; exact for small graphs, grid-approximated for large ones. """
        if self.pos.shape[0] <= self.exact_charge_max_nodes or not self.apply_grid_charge_force():
            self.apply_exact_charge_force()

    def apply_exact_charge_force(self):
        """ Exact pairwise many-body force, processed in row chunks of chunk_size nodes. """
        n_nodes = self.pos.shape[0]
        k_alpha = self.charge_strength * self.alpha
        x, y = self.pos[:, 0], self.pos[:, 1]
        for start in range(0, n_nodes, self.chunk_size):
            stop = min(start + self.chunk_size, n_nodes)
            diagonal = (np.arange(stop - start), np.arange(start, stop))
            # dx[i, j], dy[i, j] is the vector from node start+i to node j:
            dx = x[np.newaxis, :] - x[start:stop, np.newaxis]
            dy = y[np.newaxis, :] - y[start:stop, np.newaxis]
            self._jiggle_zeros(dx, diagonal)
            self._jiggle_zeros(dy, diagonal)
            w = dx * dx
            w += dy * dy
            self._soften(w)
            w[diagonal] = np.inf    # no self-interaction
            np.divide(k_alpha, w, out=w)
            self.vel[start:stop, 0] += (dx * w).sum(axis=1)
            self.vel[start:stop, 1] += (dy * w).sum(axis=1)

    def apply_grid_charge_force(self):
        """
        Approximate many-body force on a uniform grid over the node bounding box.
        Nodes in cells within CHARGE_NEAR_RANGE cells (Chebyshev distance) of a node's own
        cell act on it exactly; every farther cell acts through its center of mass, with
        a strength proportional to its node count.
        Returns False (and does nothing) if all nodes coincide.
        """
        pos = self.pos
        n_nodes = pos.shape[0]
        lo = pos.min(axis=0)
        extent = float((pos.max(axis=0) - lo).max())
        if extent <= 0:
            return False
        k_alpha = self.charge_strength * self.alpha
        n_side = max(1, int(round(math.sqrt(CHARGE_GRID_CELLS_FACTOR * math.sqrt(n_nodes)))))
        cell_size = extent / n_side * (1 + 1e-9)
        cell_xy = np.minimum(((pos - lo) / cell_size).astype(int), n_side - 1)
        cell = cell_xy[:, 0] * n_side + cell_xy[:, 1]
        counts = np.bincount(cell, minlength=n_side**2)
        occupied = np.flatnonzero(counts)
        occupied_xy = np.stack([occupied // n_side, occupied % n_side], axis=1)
        occupied_counts = counts[occupied].astype(float)
        com = np.stack([np.bincount(cell, weights=pos[:, 0], minlength=n_side**2)[occupied],
                        np.bincount(cell, weights=pos[:, 1], minlength=n_side**2)[occupied]],
                       axis=1) / occupied_counts[:, np.newaxis]

        # Far field, node -> cell center of mass:
        x, y = pos[:, 0], pos[:, 1]
        for start in range(0, n_nodes, self.chunk_size):
            stop = min(start + self.chunk_size, n_nodes)
            far = np.abs(cell_xy[start:stop, np.newaxis, :]
                         - occupied_xy[np.newaxis, :, :]).max(axis=2) > CHARGE_NEAR_RANGE
            dx = com[np.newaxis, :, 0] - x[start:stop, np.newaxis]
            dy = com[np.newaxis, :, 1] - y[start:stop, np.newaxis]
            dist2 = self._soften(dx * dx + dy * dy)
            w = np.zeros_like(dist2)
            np.divide(k_alpha * occupied_counts, dist2, out=w, where=far)
            w_sum = w.sum(axis=1)
            self.vel[start:stop, 0] += w @ com[:, 0] - x[start:stop] * w_sum
            self.vel[start:stop, 1] += w @ com[:, 1] - y[start:stop] * w_sum

        # Near field, exact node pairs:
        i, j = self._near_pairs(cell, counts, occupied, occupied_xy)
        dx = x[j] - x[i]
        dy = y[j] - y[i]
        self._jiggle_zeros(dx)
        self._jiggle_zeros(dy)
        w = k_alpha / self._soften(dx * dx + dy * dy)
        self.vel[:, 0] += np.bincount(i, weights=dx * w, minlength=n_nodes)
        self.vel[:, 1] += np.bincount(i, weights=dy * w, minlength=n_nodes)
        return True

    @staticmethod
    def _near_pairs(cell, counts, occupied, occupied_xy):
        """
        Return index arrays (i, j) of all ordered pairs of distinct nodes whose cells
        are within CHARGE_NEAR_RANGE of each other.
        """
        order = np.argsort(cell, kind='stable')
        starts = np.cumsum(counts) - counts
        a, b = np.nonzero(np.abs(occupied_xy[:, np.newaxis, :]
                                 - occupied_xy[np.newaxis, :, :]).max(axis=2) <= CHARGE_NEAR_RANGE)
        ca, cb = occupied[a], occupied[b]
        nb = counts[cb]
        n_pairs = counts[ca] * nb
        block = np.repeat(np.arange(len(n_pairs)), n_pairs)
        within = np.arange(n_pairs.sum()) - np.repeat(np.cumsum(n_pairs) - n_pairs, n_pairs)
        i = order[starts[ca][block] + within // nb[block]]
        j = order[starts[cb][block] + within % nb[block]]
        distinct = i != j
        return i[distinct], j[distinct]

    def apply_center_force(self):
        """ Translate all nodes so their mean position moves to the center. """
        self.pos -= (self.pos.mean(axis=0) - self.center) * self.center_strength

    def check_finite(self):
        if not np.isfinite(self.pos).all() or not np.isfinite(self.vel).all():
            raise LayoutDivergenceError("Non-finite node coordinates after %s ticks." % self.n_ticks)

    def tick(self, iterations=1):
        """ Advance the simulation by iterations ticks. """
        for _ in range(iterations):
            self.alpha += (self.alpha_target - self.alpha) * self.alpha_decay
            self.apply_link_force()
            self.apply_charge_force()
            self.apply_center_force()
            self.vel *= (1 - self.velocity_decay)
            self.pos += self.vel
            self.n_ticks += 1
            self.check_finite()

    def run(self, steps=DEFAULT_STEPS, log_interval=500):
        """ Run steps ticks, logging progress every log_interval ticks. """
        if steps < 0:
            raise ValueError("steps must be non-negative, got %r" % (steps,))
        logger.debug("Running force simulation: %s nodes, %s links, %s steps",
                     len(self.nodes), len(self.links), steps)
        remaining = steps
        while remaining > 0:
            n = min(remaining, log_interval) if log_interval else remaining
            self.tick(n)
            remaining -= n
            logger.debug("Tick %s: alpha=%.5f, mean speed=%.5f", self.n_ticks, self.alpha,
                         float(np.sqrt((self.vel**2).sum(axis=1)).mean()))
        return self

    def result(self):
        """ Return a LayoutResult with the current (frozen) positions. """
        layout_nodes = [LayoutNode(node, float(x), float(y), float(vx), float(vy))
                        for node, (x, y), (vx, vy) in zip(self.nodes, self.pos, self.vel)]
        layout_links = [LayoutLink(link, layout_nodes[s], layout_nodes[t])
                        for link, s, t in zip(self.links, self.sources, self.targets)]
        return LayoutResult(layout_nodes, layout_links, self.assembled, self.n_ticks, self.alpha)


def layout(assembled, config=None, **kwargs):
    """
    Lay out assembled and return a LayoutResult.
    :config:    dict with optional keys 'width', 'height', 'steps', 'charge_strength',
                'backbone_distance', 'adjacency_distance', 'seed'.
    :kwargs:    override config values.
    """
    if config is None:
        config = {}
    config = dict(config, **kwargs)
    sim = ForceSimulation(
        assembled,
        width=config.get('width', DEFAULT_WIDTH),
        height=config.get('height', DEFAULT_HEIGHT),
        charge_strength=config.get('charge_strength', DEFAULT_CHARGE_STRENGTH),
        backbone_distance=config.get('backbone_distance', BACKBONE_LINK_DISTANCE),
        adjacency_distance=config.get('adjacency_distance', ADJACENCY_LINK_DISTANCE),
        seed=config.get('seed', DEFAULT_SEED))
    sim.run(config.get('steps', DEFAULT_STEPS))
    result = sim.result()
    logger.info("Layout of %s done after %s ticks (alpha=%.4f)", assembled, result.n_ticks, result.alpha)
    return result
