import itertools
from typing import Tuple

import numpy as np
import pytest

from Knapsack import KnapsackProblem


def _brute_force(problem: KnapsackProblem) -> Tuple[int, Tuple[int, ...]]:
    """Best value over every subset within capacity, and the first subset reaching it (fewest items, then lexicographic)."""
    weights, values = problem.weights.tolist(), problem.values.tolist()
    items = range(len(weights))

    best_value, best_selection = 0, ()
    for size in range(len(weights) + 1):
        for selection in itertools.combinations(items, size):
            if sum(weights[i] for i in selection) > problem.capacity:
                continue
            value = sum(values[i] for i in selection)
            if value > best_value:
                best_value, best_selection = value, selection

    return best_value, best_selection


def _brute_force_value(problem: KnapsackProblem) -> int:
    """Best value over every subset within capacity, enumerating subset sums with numpy."""
    total_weights, total_values = np.zeros(1, dtype=np.int64), np.zeros(1, dtype=np.int64)
    for weight, value in zip(problem.weights, problem.values):
        total_weights = np.concatenate([total_weights, total_weights + weight])
        total_values = np.concatenate([total_values, total_values + value])

    return int(total_values[total_weights <= problem.capacity].max())


@pytest.fixture
def brute_force():
    return _brute_force


@pytest.fixture
def brute_force_value():
    return _brute_force_value


@pytest.fixture
def stars_problem() -> KnapsackProblem:
    problem = KnapsackProblem(10)
    problem.add_item("Sun", 1, 2)
    problem.add_item("Star", 2, 1)
    problem.add_item("Shine", 1, 1)
    problem.add_items("Hello", [2, 3, 4], [3, 2, 1])
    return problem
