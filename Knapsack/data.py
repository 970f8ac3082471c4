from typing import Optional

import numpy as np
import pandas as pd

from Knapsack.model import KnapsackProblem


def make_items(size: int, max_weight: int = 10, max_value: int = 10, seed: Optional[int] = None) -> pd.DataFrame:
    """Random items with integer weights in [0, max_weight] and values in [0, max_value]."""
    rng = np.random.default_rng(seed)

    return pd.DataFrame(
        {
            "value": rng.integers(0, max_value, size, endpoint=True),
            "weight": rng.integers(0, max_weight, size, endpoint=True),
        }
    )


def make_problem(items_data: pd.DataFrame, capacity_ratio: float = 0.5) -> KnapsackProblem:
    """Knapsack with capacity equal to a fraction of the total weight of `items_data`."""
    capacity = int(capacity_ratio * items_data["weight"].sum())
    return KnapsackProblem.from_items_data(items_data, capacity)
