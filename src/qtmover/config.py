from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

from qtmover.errors import InvalidInputError


ITERATIONS = 5
ANNEALING_ITERATIONS = 0
INITIAL_SUB_OPTIMAL_CHOICE_PROBABILITY = 0.1


@dataclass(frozen=True)
class QtmConfig:
    """
    Knobs of a Quasi-Threshold Mover run.

    iterations: number of refinement sweeps over all vertices.
    annealing_iterations: number of leading sweeps in which a random parent
        may replace the locally best one (0 disables annealing).
    initial_sub_optimal_choice_probability: probability of a random parent
        in sweep 0; decays linearly to 0 at sweep annealing_iterations.
    seed: seed for the shuffling/annealing generator (None = nondeterministic).
    """

    iterations: int = ITERATIONS
    annealing_iterations: int = ANNEALING_ITERATIONS
    initial_sub_optimal_choice_probability: float = INITIAL_SUB_OPTIMAL_CHOICE_PROBABILITY
    seed: Optional[int] = None

    def validate(self) -> "QtmConfig":
        if self.iterations < 0:
            raise InvalidInputError(f"iterations must be >= 0, got {self.iterations}")
        if self.annealing_iterations < 0:
            raise InvalidInputError(
                f"annealing_iterations must be >= 0, got {self.annealing_iterations}"
            )
        p = self.initial_sub_optimal_choice_probability
        if not 0.0 <= p <= 1.0:
            raise InvalidInputError(
                f"initial_sub_optimal_choice_probability must lie in [0, 1], got {p}"
            )
        return self

    def with_seed(self, seed: Optional[int]) -> "QtmConfig":
        return replace(self, seed=seed)

    @classmethod
    def from_env(cls) -> "QtmConfig":
        """Build a config from QTM_* environment variables, falling back to defaults."""
        seed = os.environ.get("QTM_SEED")
        try:
            cfg = cls(
                iterations=int(os.environ.get("QTM_ITERATIONS", ITERATIONS)),
                annealing_iterations=int(
                    os.environ.get("QTM_ANNEALING_ITERATIONS", ANNEALING_ITERATIONS)
                ),
                initial_sub_optimal_choice_probability=float(
                    os.environ.get(
                        "QTM_SUB_OPTIMAL_PROBABILITY", INITIAL_SUB_OPTIMAL_CHOICE_PROBABILITY
                    )
                ),
                seed=int(seed) if seed else None,
            )
        except ValueError as exc:
            raise InvalidInputError(f"malformed QTM_* environment variable: {exc}") from exc
        return cfg.validate()
