import pytest
from pulp import PULP_CBC_CMD, LpBinary, LpMaximize, LpProblem, LpStatusOptimal, LpVariable, lpSum, value

from Knapsack import DynamicProgrammingSolver, KnapsackProblem
from Knapsack.data import make_items, make_problem


def make_knapsack_model(problem: KnapsackProblem) -> LpProblem:
    I = list(range(problem.items_count()))
    weights, values = problem.weights.tolist(), problem.values.tolist()

    model = LpProblem("Knapsack", LpMaximize)

    x = [LpVariable(cat=LpBinary, name=f"x_{i}") for i in I]

    model.addConstraint(lpSum(weights[i] * x[i] for i in I) <= problem.capacity, "capacity_constraint")
    model.setObjective(lpSum(values[i] * x[i] for i in I))

    return model


@pytest.fixture(scope="module")
def cbc():
    solver = PULP_CBC_CMD(msg=False)
    if not solver.available():
        pytest.skip("CBC is not available")
    return solver


@pytest.mark.parametrize("seed", range(5))
def test_matches_mip(seed, cbc):
    problem = make_problem(make_items(60, max_weight=50, max_value=40, seed=seed))

    model = make_knapsack_model(problem)
    assert model.solve(cbc) == LpStatusOptimal

    solver = DynamicProgrammingSolver(problem)
    assert solver.optimize()
    assert solver.optimal_value == round(value(model.objective))
