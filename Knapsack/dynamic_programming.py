import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from generic.optimization.model import OptimizationSense, SolverStatus
from Knapsack.errors import SolverStateError
from Knapsack.model import KnapsackProblem
from Knapsack.output import describe
from Knapsack.solver import KnapsackSolver

logger = logging.getLogger(__name__)


@dataclass
class DynamicProgrammingConfiguration:
    name: str = "DP"
    large_table_cells: int = 10**8
    """Table size (in cells) above which a warning is logged. Never enforced."""


@dataclass
class DynamicProgrammingTables:
    values: np.ndarray
    """`values[i, j]`: best value using the first `i` items within capacity `j`."""
    taken: np.ndarray
    """`taken[i, j]`: whether item `i - 1` is selected to reach `values[i, j]`."""


class DynamicProgrammingSolver(KnapsackSolver):
    """
    Exact solver for the binary knapsack based on the classical O(n * capacity) dynamic program.

    The whole table is kept in memory so that the optimal selection can be traced back. An item is only selected
    when it strictly improves the value, so ties are always resolved towards leaving the item out.

    Lifecycle: EMPTY -> LINKED -> OPTIMAL. Linking again, from any state, discards the previous solution.
    """

    sense = OptimizationSense.MAX

    configuration: DynamicProgrammingConfiguration
    _problem: Optional[KnapsackProblem]
    _status: SolverStatus
    _optimal_solution: Optional[Tuple[int, ...]]
    _optimal_value: int

    def __init__(
        self,
        problem: Optional[KnapsackProblem] = None,
        configuration: Optional[DynamicProgrammingConfiguration] = None,
    ):
        self.configuration = DynamicProgrammingConfiguration() if configuration is None else configuration
        self._reset()
        if problem is not None:
            self.link_problem(problem)

    @classmethod
    def from_standard(
        cls, kp_std: Sequence[int], configuration: Optional[DynamicProgrammingConfiguration] = None
    ) -> "DynamicProgrammingSolver":
        solver = cls(configuration=configuration)
        solver.link_standard(kp_std)
        return solver

    def _reset(self):
        self._problem = None
        self._status = SolverStatus.EMPTY
        self._optimal_solution = None
        self._optimal_value = 0

    def link_problem(self, problem: KnapsackProblem) -> bool:
        self._reset()
        self._problem = problem
        self._status = SolverStatus.LINKED
        logger.debug(f"{self.configuration.name}: linked {problem!r}")
        return True

    def optimize(self) -> bool:
        """
        Solves the linked problem.

        Returns:
            True if an optimal solution was computed, False (leaving the state untouched) if no problem is linked
            or the problem is already solved.
        """
        if self._status != SolverStatus.LINKED:
            logger.warning(f"{self.configuration.name}: cannot optimize in status {self._status.name}")
            return False

        weights, values = self._problem.weights, self._problem.values
        capacity = self._problem.capacity

        tables = self._fill_tables(weights, values, capacity)
        self._optimal_solution = self._trace_back(tables.taken, weights, capacity)
        self._optimal_value = int(tables.values[-1, capacity])
        self._status = SolverStatus.OPTIMAL

        logger.debug(
            f"{self.configuration.name}: optimal value {self._optimal_value} "
            + f"with {len(self._optimal_solution)} of {len(weights)} items"
        )
        return True

    def _fill_tables(self, weights: np.ndarray, values: np.ndarray, capacity: int) -> DynamicProgrammingTables:
        num_items = len(weights)
        cells = (num_items + 1) * (capacity + 1)
        if cells > self.configuration.large_table_cells:
            logger.warning(
                f"{self.configuration.name}: allocating a {num_items + 1}x{capacity + 1} table ({cells} cells)"
            )

        dp = np.zeros((num_items + 1, capacity + 1), dtype=np.int64)
        taken = np.zeros((num_items + 1, capacity + 1), dtype=bool)

        for i in range(1, num_items + 1):
            weight, value = weights[i - 1], values[i - 1]

            # without item i - 1
            dp[i] = dp[i - 1]
            if weight > capacity:
                continue

            # with item i - 1, for every capacity j >= weight
            candidate = dp[i - 1, : capacity + 1 - weight] + value
            improves = self.sense.value * (candidate - dp[i - 1, weight:]) > 0
            dp[i, weight:] = np.where(improves, candidate, dp[i - 1, weight:])
            taken[i, weight:] = improves

        return DynamicProgrammingTables(values=dp, taken=taken)

    @staticmethod
    def _trace_back(taken: np.ndarray, weights: np.ndarray, capacity: int) -> Tuple[int, ...]:
        selection = []
        remaining = capacity
        for i in range(len(weights), 0, -1):
            if taken[i, remaining]:
                selection.append(i - 1)
                remaining -= int(weights[i - 1])

        return tuple(reversed(selection))

    @property
    def problem(self) -> Optional[KnapsackProblem]:
        return self._problem

    @property
    def status(self) -> SolverStatus:
        return self._status

    @property
    def optimal_value(self) -> int:
        self._check_optimal()
        return self._optimal_value

    @property
    def optimal_solution(self) -> Tuple[int, ...]:
        self._check_optimal()
        return self._optimal_solution

    def _check_optimal(self):
        if self._status != SolverStatus.OPTIMAL:
            raise SolverStateError(f"No optimal solution available in status {self._status.name}")

    def get_status(self) -> str:
        if self._status == SolverStatus.EMPTY:
            return "EMPTY\n"
        # reserved statuses are never reached by this solver
        if self._status not in (SolverStatus.LINKED, SolverStatus.OPTIMAL):
            return "UNKNOWN\n"

        status = f"{self._status.name}\nThe linked knapsack is:\n{describe(self._problem)}"
        if self._status == SolverStatus.OPTIMAL:
            status += f"Optimal value: {self._optimal_value}\n"
            status += f"Optimal solution: {list(self._optimal_solution)}\n"
        return status

    def get_result_standard(self) -> List[int]:
        return [self.optimal_value]

    def get_result_strings(self) -> Tuple[str, str]:
        return str(self.optimal_value), " ".join(str(i) for i in self.optimal_solution)
