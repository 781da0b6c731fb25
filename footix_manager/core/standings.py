# footix_manager/core/standings.py
"""
standings.py
------------
Orders competition standing rows for display.

Points always decide first. Ties fall through the competition's tie-break
order, one criterion at a time, until one of them separates the two rows.
Rows that nothing separates keep the order they came in with.
"""

from functools import cmp_to_key
from typing import Dict, Iterable, List, Sequence

from footix_manager.models.competition_model import StandingRow

# Criterion -> (row attribute, lower_is_better)
TIE_BREAK_CRITERIA = {
    "goal_difference": ("goal_difference", False),
    "goals_for": ("goals_for", False),
    "goals_against": ("goals_against", True),
    "wins": ("wins", False),
    "draws": ("draws", False),
    "losses": ("losses", True),
    # Accepted but not implemented: never separates two rows
    "head_to_head": (None, False),
}

DEFAULT_TIE_BREAK_ORDER = ["goal_difference", "goals_for", "wins"]


def _compare(a: StandingRow, b: StandingRow, tie_break_order: Sequence[str]) -> int:
    if a.points != b.points:
        return b.points - a.points

    for criterion in tie_break_order:
        attribute, lower_is_better = TIE_BREAK_CRITERIA.get(criterion, (None, False))
        if attribute is None:
            continue
        left, right = getattr(a, attribute), getattr(b, attribute)
        if left != right:
            return left - right if lower_is_better else right - left

    return 0


def rank_standings(rows: Iterable[StandingRow], tie_break_order: Sequence[str]) -> List[StandingRow]:
    """
    Return a new list of rows ordered by points, then by tie_break_order.
    Unknown criteria are skipped. sorted() is stable, so full ties keep input order.
    """
    order = list(tie_break_order or [])
    return sorted(rows, key=cmp_to_key(lambda a, b: _compare(a, b, order)))


def group_standings(rows: Iterable[StandingRow], tie_break_order: Sequence[str]) -> Dict[str, List[StandingRow]]:
    """
    Rank every group on its own. Groups appear in the order they are first seen;
    rows without a group label are collected under "".
    """
    groups: Dict[str, List[StandingRow]] = {}
    for row in rows:
        groups.setdefault(row.group or "", []).append(row)
    return {label: rank_standings(members, tie_break_order) for label, members in groups.items()}
