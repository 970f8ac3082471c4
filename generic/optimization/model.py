from enum import IntEnum
from typing import Dict, Union

from pandas import Series


class OptimizationSense(IntEnum):
    MAX = 1
    MIN = -1


class SolverStatus(IntEnum):
    """
    Lifecycle state of a solver.

    INFEASIBLE, UNBOUNDED and INDETERMINATE are reserved for solving strategies that can actually end in those
    states. The binary knapsack always has a feasible, bounded optimum (the empty selection).
    """

    EMPTY = 0
    LINKED = 1
    INFEASIBLE = 2
    OPTIMAL = 3
    UNBOUNDED = 4
    INDETERMINATE = 5

    @property
    def reserved(self) -> bool:
        return self in (SolverStatus.INFEASIBLE, SolverStatus.UNBOUNDED, SolverStatus.INDETERMINATE)


Solution = Dict[str, Union[float, Series]]
