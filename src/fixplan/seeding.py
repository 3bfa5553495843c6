"""Seed distribution: spread ranked teams across balanced groups."""

from typing import Iterable

from fixplan.models import Group


def normalize_teams(names: Iterable[str]) -> list[str]:
    """Return team names stripped of whitespace, ignoring blank and repeated entries."""
    seen = set()
    result = []
    for name in names:
        if name is None:
            continue
        cleaned = str(name).strip()
        if not cleaned or cleaned in seen:
            continue
        seen.add(cleaned)
        result.append(cleaned)
    return result


def group_label(index: int) -> str:
    """Label for the group at `index`: A..Z, then AA, AB, ..."""
    label = ""
    n = index + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        label = chr(ord("A") + rem) + label
    return label


def distribute_seeds(teams: list[str], group_count: int) -> list[list[str]]:
    """Split seed-ordered teams into groups using a snake (serpentine) pass.

    Seeds 1..G go to groups 1..G, seed G+1 goes back into group G, seed G+2
    into G-1, and so on, reversing direction at either end. Top seeds are
    therefore spread across groups before any group gets a second one, and
    group sizes never differ by more than one.
    """
    if group_count < 1:
        raise ValueError(f"group_count must be >= 1 (got {group_count})")

    groups: list[list[str]] = [[] for _ in range(group_count)]

    for seed, team in enumerate(teams):
        pass_number, pos = divmod(seed, group_count)
        # Odd passes walk the groups backwards
        if pass_number % 2 == 1:
            pos = group_count - 1 - pos
        groups[pos].append(team)

    return groups


def build_groups(teams: list[str], group_count: int) -> list[Group]:
    """Distribute teams and wrap each bucket in a labelled Group."""
    return [
        Group(label=group_label(i), teams=tuple(members))
        for i, members in enumerate(distribute_seeds(teams, group_count))
    ]
