"""
Error types raised by evobrain.

All of them signal a programming or configuration mistake, so they are
raised immediately and never retried. Each one is also a ValueError.
"""


class EvoBrainError(Exception):
    """Base for all evobrain exceptions."""

    pass


class EmptyPopulationError(EvoBrainError, ValueError):
    """Selection, statistics or evolution invoked on zero individuals."""

    pass


class LengthMismatchError(EvoBrainError, ValueError):
    """Chromosome or weight vector length disagrees with what is required."""

    pass


class InvalidParameterError(EvoBrainError, ValueError):
    """Operator or network parameter outside its valid range."""

    pass
