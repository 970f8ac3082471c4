from typing import Any, Sequence

import numpy as np
import pandas as pd

from generic.optimization.model import Solution


def extract_solution(solver: Any) -> Solution:
    """
    Extract solution from a solver that reached an optimal solution.
    Args:
        solver: a solved solver, exposing `problem` (with `weights` and `values` arrays), `optimal_solution` and
            `optimal_value`

    Returns: solution as a dict with the total `value` and `weight` of the selection and a boolean `selected`
        series indexed by item.

    """
    problem = solver.problem
    selection = list(solver.optimal_solution)

    value = int(problem.values[selection].sum())
    weight = int(problem.weights[selection].sum())
    assert value == solver.optimal_value, "Selected items do not add up to the optimal value"

    return {"value": value, "weight": weight, "selected": selection_to_series(selection, len(problem.weights))}


def selection_to_series(selection: Sequence[int], num_items: int, name: str = "selected") -> pd.Series:
    """
    Args:
        selection: indexes of the selected items
        num_items: total number of items
        name: name of the series

    Returns:
        boolean series indexed by item, True for the selected ones
    """
    mask = np.zeros(num_items, dtype=bool)
    mask[list(selection)] = True

    table = pd.Series(mask, name=name)
    table.index.name = "item"
    return table
