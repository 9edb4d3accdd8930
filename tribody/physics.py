#!/usr/bin/env python3
"""
Core physics for the three-body simulator.

Responsibilities
- Compute the capped, damped pairwise attraction between two bodies.
- Run the force phase of a step: accumulate every pair's contribution from the
  positions at the start of the step, then apply the totals to velocities.

Units and conventions
- World units are arbitrary; "force" here is applied directly as a velocity change
  per step (there is no division by mass and no explicit dt).
- The gravitational constant is a tuning knob, not a physical constant.

Numerical notes
- Distance floor: the separation is clamped to at least min_distance before use, so
  two bodies at the same point produce a zero direction and no force rather than
  a division by zero.
- Force cap: the raw magnitude is limited to force_cap before the damping factor is
  applied, so no pair ever contributes more than force_cap * damping per step.
- The step is symplectic-Euler-like: forces from the old positions update
  velocities, then positions advance with the new velocities.

Threading
- Pure compute; it holds only its tuning parameters.
"""

from typing import List, Sequence

from .constants import FORCE_CAP, FORCE_DAMPING, G, MIN_DISTANCE
from .data_models import Body
from .vector_utils import Vec2, vec_add, vec_len, vec_scale, vec_sub


class PairwiseGravity:
    """
    Capped pairwise gravity between point masses.

    For bodies a and b with diff = a.position - b.position:

        dist  = max(|diff|, min_distance)
        f     = min(G * m_a * m_b / dist^2, force_cap) * damping
        a    += -f * diff / dist
        b    += +f * diff / dist
    """

    def __init__(self, gravity: float = G, min_distance: float = MIN_DISTANCE,
                 force_cap: float = FORCE_CAP, damping: float = FORCE_DAMPING):
        self.gravity = gravity
        self.min_distance = min_distance
        self.force_cap = force_cap
        self.damping = damping

    def force_magnitude(self, mass_a: float, mass_b: float, dist: float) -> float:
        dist = max(dist, self.min_distance)
        return min(self.gravity * mass_a * mass_b / (dist * dist), self.force_cap) * self.damping

    def pairwise_force(self, pos_a: Vec2, mass_a: float, pos_b: Vec2, mass_b: float) -> Vec2:
        """
        Return the force applied to b; a receives the exact negation.

        Args:
            pos_a, mass_a: first body
            pos_b, mass_b: second body

        Returns:
            (fx, fy) along a - b, so b is pulled towards a.
        """
        diff = vec_sub(pos_a, pos_b)
        dist = max(vec_len(diff), self.min_distance)
        direction = vec_scale(diff, 1.0 / dist)
        return vec_scale(direction, self.force_magnitude(mass_a, mass_b, dist))

    def compute_forces(self, bodies: Sequence[Body]) -> List[Vec2]:
        """
        Sum pairwise forces for each body over all unordered live pairs.

        Only positions are read, so the result depends solely on the state at the
        start of the step. Dead bodies get a zero total.
        """
        n = len(bodies)
        totals = [(0.0, 0.0) for _ in range(n)]
        for i in range(n):
            a = bodies[i]
            if a.dead:
                continue
            for j in range(i + 1, n):
                b = bodies[j]
                if b.dead:
                    continue
                f = self.pairwise_force(a.position, a.mass, b.position, b.mass)
                totals[i] = vec_sub(totals[i], f)
                totals[j] = vec_add(totals[j], f)
        return totals

    def apply_forces(self, bodies: Sequence[Body]) -> None:
        """Force phase of a step: compute all totals first, then apply them."""
        for body, force in zip(bodies, self.compute_forces(bodies)):
            if not body.dead:
                body.apply_force(force)
