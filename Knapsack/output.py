import collections
from typing import Iterable, Tuple

from Knapsack.model import KnapsackProblem

SHORT_DESCRIPTION_ITEMS = 10

columns_format = collections.OrderedDict(
    [
        ("label", ("Items[ID/CNT]", "<20", "<20")),
        ("weight", ("Weight", "<10d", "<10")),
        ("value", ("Value", "<10d", "<10")),
    ]
)


def knapsack_kpi(problem: KnapsackProblem, selection: Iterable[int]) -> Tuple[int, int]:
    """
    Args:
        problem: knapsack problem
        selection: indexes of the selected items

    Returns:
        total value and total weight of the selected items
    """
    selection = list(selection)
    value = int(problem.values[selection].sum())
    weight = int(problem.weights[selection].sum())

    return value, weight


def header():
    formats = " ".join(["{:" + fmt[2] + "}" for fmt in columns_format.values()])
    return formats.format(*[fmt[0] for fmt in columns_format.values()]).rstrip()


def row(label: str, weight: int, value: int):
    formats = " ".join(["{:" + fmt[1] + "}" for fmt in columns_format.values()])
    return formats.format(label, weight, value).rstrip()


def _item_label(name: str, member: int, count: int) -> str:
    return name if count == 1 else f"{name}[{member + 1}/{count}]"


def describe(problem: KnapsackProblem, verbose: bool = False) -> str:
    """
    Text table of the problem's capacity and items. Unless `verbose`, only the first `SHORT_DESCRIPTION_ITEMS`
    items are listed.
    """
    version = "Verbose" if verbose else "Standard"
    lines = [
        f"Knapsack Problem Data ({version}): capacity = {problem.capacity}, items count = {problem.items_count()}",
        header(),
    ]

    for shown, r in enumerate(problem.items_data.itertuples()):
        if not verbose and shown >= SHORT_DESCRIPTION_ITEMS:
            lines.append("... (use verbose=True to view all items)")
            break
        label = _item_label(r.group, r.member, problem.items_count(r.group))
        lines.append(row(label, r.weight, r.value))

    return "\n".join(lines) + "\n"
