from abc import ABCMeta, abstractmethod
from typing import List, Sequence, Tuple

from generic.optimization.model import SolverStatus
from Knapsack.model import KnapsackProblem


class KnapsackSolver(metaclass=ABCMeta):
    """
    Operations every binary knapsack solving strategy exposes.

    A solver borrows the problem it is linked to: it never copies or modifies it, so the same problem can be linked
    to several solvers and inspected after solving. Malformed input raises at the point of the call, while
    `optimize` reports "not ready" through its boolean result.
    """

    @abstractmethod
    def link_problem(self, problem: KnapsackProblem) -> bool:
        """Discards any previous link and solution and links `problem`."""
        pass

    def link_standard(self, kp_std: Sequence[int]) -> bool:
        """Decodes a standard-format array into a new problem and links it."""
        return self.link_problem(KnapsackProblem.from_standard(kp_std))

    @abstractmethod
    def optimize(self) -> bool:
        pass

    @property
    @abstractmethod
    def status(self) -> SolverStatus:
        pass

    @abstractmethod
    def get_status(self) -> str:
        """Human-readable summary of the solver state."""
        pass

    @abstractmethod
    def get_result_standard(self) -> List[int]:
        pass

    @abstractmethod
    def get_result_strings(self) -> Tuple[str, str]:
        pass
