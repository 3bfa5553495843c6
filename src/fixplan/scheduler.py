"""Scheduling engine for fixplan.

Two phases:
1. Calendar — expand the tournament window into an ordered sequence of
   (day, slot, field) cells
2. Assignment — walk the cells once and greedily bind the first fixture
   whose teams have rested since their last match

The assignment is a first-fit heuristic without backtracking. When the
calendar runs out before the fixtures do, the remainder is returned as
unscheduled rather than treated as a failure; the operator can place those
by hand with move_match / reorder_matches.
"""

from dataclasses import replace
from datetime import datetime, timedelta

from fixplan.models import CalendarCell, Fixture, ScheduledMatch, TournamentConfig

# Last-used position for a team that has not played yet; far enough back that
# the rest check always passes for position 0.
NEVER_PLAYED = -2


def build_calendar(config: TournamentConfig) -> list[CalendarCell]:
    """Build the ordered cell sequence: day, then slot, then field.

    Only whole matches fit: a trailing partial slot is dropped. An empty list
    means the daily window is too short for a single match.
    """
    slots_per_day = config.slots_per_day
    if slots_per_day <= 0:
        return []

    duration = timedelta(minutes=config.match_duration)
    cells = []
    for day in config.days:
        day_start = datetime.combine(day, config.start_time)
        for slot in range(slots_per_day):
            start = day_start + slot * duration
            for field_number in range(1, config.field_count + 1):
                cells.append(CalendarCell(
                    day=day,
                    slot=slot,
                    field=field_number,
                    start=start,
                    end=start + duration,
                ))
    return cells


def _rotate(fixtures: list[Fixture], offset: int) -> list[Fixture]:
    if not fixtures or not offset:
        return list(fixtures)
    k = offset % len(fixtures)
    return fixtures[k:] + fixtures[:k]


def assign_schedule(
    fixtures: list[Fixture],
    cells: list[CalendarCell],
    offset: int = 0,
) -> tuple[list[ScheduledMatch], list[Fixture]]:
    """Greedily bind fixtures to cells under the rest rule.

    A team may not play at two adjacent positions of the cell sequence. For
    each cell in order, the first pending fixture whose two teams both last
    played at least two positions earlier is placed there; a cell with no
    eligible fixture stays empty.

    `offset` rotates the pending list before the walk so that proposal
    variants try fixtures in a different order. It never changes the rest
    rule. Same inputs always give the same output.

    Returns (scheduled, unscheduled), unscheduled in the original fixture
    order.
    """
    pending = _rotate(list(fixtures), offset)
    last_position: dict[str, int] = {}
    scheduled: list[ScheduledMatch] = []

    for position, cell in enumerate(cells):
        if not pending:
            break
        for i, fixture in enumerate(pending):
            if any(position - last_position.get(team, NEVER_PLAYED) <= 1
                   for team in fixture.teams):
                continue
            scheduled.append(ScheduledMatch(
                fixture=fixture, cell=cell, position=position,
            ))
            for team in fixture.teams:
                last_position[team] = position
            del pending[i]
            break

    placed = {m.id for m in scheduled}
    unscheduled = [f for f in fixtures if f.id not in placed]
    return scheduled, unscheduled


def move_match(match: ScheduledMatch, cell: CalendarCell,
               position: int | None = None) -> ScheduledMatch:
    """Return `match` rebound to `cell`; start/end come from the new cell.

    Without an explicit position the match keeps its old one.
    """
    if position is None:
        position = match.position
    return replace(match, cell=cell, position=position)


def reorder_matches(matches: list[ScheduledMatch], from_index: int,
                    to_index: int) -> list[ScheduledMatch]:
    """Move one match within the running order.

    The occupied cells stay where they are; matches are re-dealt onto them in
    their new order, so every match from the moved one onward takes the
    field and times of the slot it now sits in.
    """
    if not 0 <= from_index < len(matches):
        raise IndexError(f"from_index {from_index} out of range")
    if not 0 <= to_index < len(matches):
        raise IndexError(f"to_index {to_index} out of range")

    ordered = sorted(matches, key=lambda m: m.position)
    slots = [(m.cell, m.position) for m in ordered]

    reordered = list(ordered)
    moved = reordered.pop(from_index)
    reordered.insert(to_index, moved)

    return [
        move_match(m, cell, position)
        for m, (cell, position) in zip(reordered, slots)
    ]
