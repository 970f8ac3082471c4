class KnapsackError(ValueError):
    """Raised when a knapsack problem is built or queried with invalid arguments."""


class InvalidCapacityError(KnapsackError):
    """Raised when a knapsack is constructed with a negative capacity."""


class InvalidWeightError(KnapsackError):
    """Raised when an item with a negative weight is added."""


class DuplicateItemError(KnapsackError):
    """Raised when an item (or group of items) name is already in use."""


class ItemNotFoundError(KnapsackError):
    """Raised when looking up an item name that does not exist."""


class InvalidFormatError(KnapsackError):
    """Raised when a standard-format array or an items table is malformed."""


class SolverStateError(RuntimeError):
    """Raised when reading results from a solver that has not reached an optimal solution."""
