"""Constraint validation for fixplan schedule proposals.

Hard constraints (errors):
- rest: no team plays at two adjacent positions of the cell sequence
- a cell (day, slot, field) holds at most one match
- a fixture is scheduled at most once
- a team is not in two matches in the same day/slot

Soft constraints (warnings):
- every fixture is scheduled
"""

from collections import defaultdict

from fixplan.models import Fixture, ScheduleProposal


def validate_schedule(proposal: ScheduleProposal,
                      fixtures: list[Fixture] | None = None) -> dict:
    """Validate a proposal against all constraints.

    When `fixtures` is given, fixtures that appear neither in the matches nor
    in the proposal's unscheduled list are reported as errors too.

    Returns dict with:
    - valid: bool (True if no hard constraint violations)
    - errors: list of hard constraint violations
    - warnings: list of soft constraint issues
    """
    errors = []
    warnings = []

    for f in proposal.unscheduled:
        warnings.append(f"UNSCHEDULED: {f.id} {f.team_a} vs {f.team_b}")

    fixture_counts: dict[str, int] = defaultdict(int)
    cell_owner: dict[tuple, str] = {}
    team_positions: dict[str, list[int]] = defaultdict(list)
    team_times: dict[str, dict[tuple, str]] = defaultdict(dict)

    for m in proposal.matches:
        fixture_counts[m.id] += 1

        cell_key = (m.cell.day, m.cell.slot, m.cell.field)
        if cell_key in cell_owner:
            errors.append(
                f"Field {m.field} at {m.start:%Y-%m-%d %H:%M} booked by both "
                f"{cell_owner[cell_key]} and {m.id}"
            )
        else:
            cell_owner[cell_key] = m.id

        time_key = (m.cell.day, m.cell.slot)
        for team in m.fixture.teams:
            team_positions[team].append(m.position)
            other = team_times[team].get(time_key)
            if other is not None:
                errors.append(
                    f"{team} plays {other} and {m.id} at the same time "
                    f"({m.start:%Y-%m-%d %H:%M})"
                )
            else:
                team_times[team][time_key] = m.id

    for fixture_id, count in fixture_counts.items():
        if count > 1:
            errors.append(f"{fixture_id} scheduled {count} times")

    for team, positions in team_positions.items():
        positions.sort()
        for prev, cur in zip(positions, positions[1:]):
            if cur - prev <= 1:
                errors.append(
                    f"{team} has no rest between positions {prev} and {cur}"
                )

    if fixtures is not None:
        accounted = set(fixture_counts) | {f.id for f in proposal.unscheduled}
        for f in fixtures:
            if f.id not in accounted:
                errors.append(f"{f.id} {f.team_a} vs {f.team_b} missing from proposal")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }


def format_validation_report(result: dict, title: str = "") -> str:
    """Format validation results as text."""
    lines = []
    lines.append("=" * 60)
    lines.append(f"SCHEDULE VALIDATION{': ' + title if title else ''}")
    lines.append("=" * 60)

    if result["valid"]:
        lines.append("\nRESULT: VALID (no hard constraint violations)")
    else:
        lines.append(f"\nRESULT: INVALID ({len(result['errors'])} violations)")

    if result["errors"]:
        lines.append(f"\n--- ERRORS ({len(result['errors'])}) ---")
        for e in result["errors"]:
            lines.append(f"  ERROR: {e}")

    if result["warnings"]:
        lines.append(f"\n--- WARNINGS ({len(result['warnings'])}) ---")
        for w in result["warnings"]:
            lines.append(f"  WARN: {w}")

    return "\n".join(lines)
