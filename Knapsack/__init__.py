from .errors import (
    KnapsackError,
    InvalidCapacityError,
    InvalidWeightError,
    DuplicateItemError,
    ItemNotFoundError,
    InvalidFormatError,
    SolverStateError,
)
from .model import KnapsackProblem, STANDARD_ITEMS_NAME
from .solver import KnapsackSolver
from .dynamic_programming import DynamicProgrammingSolver, DynamicProgrammingConfiguration
from . import output
