from __future__ import annotations


class InvalidInputError(ValueError):
    """The input graph or configuration cannot be used to start a run."""


class InternalConsistencyError(RuntimeError):
    """A tree or bookkeeping invariant was violated during a run.

    This always indicates a bug in the algorithm, never bad user input.
    """
