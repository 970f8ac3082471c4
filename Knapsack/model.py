import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from Knapsack.errors import (
    DuplicateItemError,
    InvalidCapacityError,
    InvalidFormatError,
    InvalidWeightError,
    ItemNotFoundError,
)

logger = logging.getLogger(__name__)

STANDARD_ITEMS_NAME = "*"
"""Name given to the single group of items decoded from a standard-format array."""


def _as_integers(numbers: Sequence, what: str) -> List[int]:
    integers = [int(x) for x in numbers]
    fractional = [x for x, i in zip(numbers, integers) if i != x]
    if fractional:
        raise InvalidFormatError(f"Non-integer {what}: {fractional}")
    return integers


class KnapsackProblem:
    """
    Binary (0/1) knapsack problem: a capacity and an ordered list of items, each either fully selected or not.

    Items are added in named groups. A group holds one or more items sharing a name, stored contiguously in the
    flat `weights`/`values` lists; `groups()` maps each name to the `(location, count)` of its slice. Groups can
    only be appended, never removed or modified.

    Weights and values must be integers. Weights must be non-negative, negative values are simply never worth
    selecting.
    """

    capacity: int
    _weights: List[int]
    _values: List[int]
    _locations: Dict[str, int]
    _counts: Dict[str, int]

    def __init__(self, capacity: int = 0):
        if capacity < 0:
            raise InvalidCapacityError(f"Invalid capacity: {capacity}")

        self._weights = []
        self._values = []
        self._locations = {}
        self._counts = {}
        self.capacity = _as_integers([capacity], "capacity")[0]

    @classmethod
    def from_standard(cls, kp_std: Sequence[int]) -> "KnapsackProblem":
        """
        Builds a problem from its standard-format array.

        Layout: `[n, capacity, w_0, ..., w_{n-1}, v_0, ..., v_{n-1}]`. All the items are stored in a single group
        named `STANDARD_ITEMS_NAME`.

        Args:
            kp_std: standard-format array of length `2 + 2 * n`

        Returns:
            the decoded problem
        """
        kp_std = _as_integers(kp_std, "entries in standard format")
        if len(kp_std) < 2 or len(kp_std) != 2 + 2 * kp_std[0]:
            raise InvalidFormatError(f"Invalid standard format: length {len(kp_std)} does not match its header")
        if kp_std[1] < 0:
            raise InvalidCapacityError(f"Invalid capacity: {kp_std[1]}")

        num_items, capacity = kp_std[0], kp_std[1]
        problem = cls(capacity)
        problem.add_items(
            STANDARD_ITEMS_NAME,
            kp_std[2 : 2 + num_items],
            kp_std[2 + num_items : 2 + 2 * num_items],
        )
        return problem

    @classmethod
    def from_items_data(
        cls, items_data: pd.DataFrame, capacity: int, name: str = STANDARD_ITEMS_NAME
    ) -> "KnapsackProblem":
        """
        Builds a problem whose items are the rows of `items_data`, stored as a single group.

        Args:
            items_data: table with integer `weight` and `value` columns
            capacity: knapsack capacity
            name: name of the group of items

        Returns:
            the new problem
        """
        missing = {"weight", "value"} - set(items_data.columns)
        if missing:
            raise InvalidFormatError(f"Items table is missing columns: {sorted(missing)}")

        problem = cls(capacity)
        problem.add_items(name, items_data["weight"].tolist(), items_data["value"].tolist())
        return problem

    def to_standard(self) -> List[int]:
        """
        Returns:
            `[n, capacity, v_0, w_0, v_1, w_1, ...]`. Value/weight pairs are interleaved, which is not the layout
            read by `from_standard`.
        """
        result = [len(self._weights), self.capacity]
        for value, weight in zip(self._values, self._weights):
            result.extend((value, weight))
        return result

    def add_item(self, name: str, weight: int, value: int):
        """Adds a single item as a group of its own."""
        self.add_items(name, [weight], [value])

    def add_items(self, name: str, weights: Sequence[int], values: Sequence[int]):
        """
        Adds a group of items sharing `name`, with individual weights and values.

        Args:
            name: group name, must not be in use
            weights: non-negative weights of the items
            values: values of the items, same length as `weights`
        """
        if name in self._locations:
            raise DuplicateItemError(f"Item already exists: {name}")
        if len(weights) != len(values):
            raise InvalidFormatError(
                f"Weights and values of '{name}' must have the same size: {len(weights)} != {len(values)}"
            )
        weights = _as_integers(weights, f"weights for item '{name}'")
        values = _as_integers(values, f"values for item '{name}'")
        negative = [w for w in weights if w < 0]
        if negative:
            raise InvalidWeightError(f"Negative weights for item '{name}': {negative}")

        self._locations[name] = len(self._weights)
        self._counts[name] = len(weights)
        self._weights.extend(weights)
        self._values.extend(values)
        logger.debug(f"Added {len(weights)} item(s) '{name}' at location {self._locations[name]}")

    def get_weight(self, name: str, index: int = 0) -> int:
        return self._weights[self._position(name, index)]

    def get_value(self, name: str, index: int = 0) -> int:
        return self._values[self._position(name, index)]

    def _position(self, name: str, index: int) -> int:
        if name not in self._locations:
            raise ItemNotFoundError(f"Item with name '{name}' not found")
        if not 0 <= index < self._counts[name]:
            raise IndexError(f"Index {index} out of range for item '{name}' with {self._counts[name]} instance(s)")
        return self._locations[name] + index

    def items_count(self, name: Optional[str] = None) -> int:
        """
        Args:
            name: group name. If None, count all the items.

        Returns:
            number of items in group `name`, 0 if there is no such group, or the total number of items.
        """
        if name is None:
            return len(self._weights)
        return self._counts.get(name, 0)

    @property
    def weights(self) -> np.ndarray:
        return np.array(self._weights, dtype=np.int64)

    @property
    def values(self) -> np.ndarray:
        return np.array(self._values, dtype=np.int64)

    def groups(self) -> Dict[str, Tuple[int, int]]:
        """Ordered mapping from group name to `(location, count)`."""
        return {name: (location, self._counts[name]) for name, location in self._locations.items()}

    @property
    def items_data(self) -> pd.DataFrame:
        rows = [
            (name, member, self._weights[location + member], self._values[location + member])
            for name, (location, count) in self.groups().items()
            for member in range(count)
        ]
        table = pd.DataFrame.from_records(rows, columns=["group", "member", "weight", "value"])
        table.index.name = "item"
        return table

    def check_consistency(self) -> bool:
        """
        Checks that weights and values are aligned and that every group slice lies within them.

        Returns:
            True if the internal state is consistent.
        """
        if len(self._weights) != len(self._values):
            return False
        if self._locations.keys() != self._counts.keys():
            return False

        for name, location in self._locations.items():
            count = self._counts[name]
            if location < 0 or count < 0 or location + count > len(self._weights):
                return False

        return True

    def __repr__(self) -> str:
        return f"KnapsackProblem(capacity={self.capacity}, items={len(self._weights)}, groups={len(self._locations)})"
