"""Statistics for comparing schedule proposals side by side."""

from collections import defaultdict

from fixplan.models import ScheduleProposal


def compute_stats(proposal: ScheduleProposal) -> dict:
    """Compute balance statistics for one proposal.

    Returns dict with:
    - scheduled / unscheduled: match counts
    - last_end: datetime the last match finishes (None if nothing placed)
    - matches_per_team: team -> matches placed
    - min_rest_minutes: team -> shortest gap between two of its matches
      (only for teams with 2+ matches; 0 when two of them overlap)
    - matches_per_day: date -> match count
    - field_usage: field number -> match count
    """
    matches = sorted(proposal.matches, key=lambda m: m.position)

    matches_per_team: dict[str, int] = defaultdict(int)
    matches_per_day = defaultdict(int)
    field_usage: dict[int, int] = defaultdict(int)
    team_matches = defaultdict(list)

    for m in matches:
        matches_per_team[m.team_a] += 1
        matches_per_team[m.team_b] += 1
        matches_per_day[m.cell.day] += 1
        field_usage[m.field] += 1
        team_matches[m.team_a].append(m)
        team_matches[m.team_b].append(m)

    # Teams that only appear in unscheduled fixtures still get a 0 row
    for f in proposal.unscheduled:
        matches_per_team.setdefault(f.team_a, 0)
        matches_per_team.setdefault(f.team_b, 0)

    min_rest: dict[str, int] = {}
    for team, played in team_matches.items():
        played = sorted(played, key=lambda m: m.start)
        # Overlapping matches count as no rest at all
        gaps = [
            max(0, int((cur.start - prev.end).total_seconds() // 60))
            for prev, cur in zip(played, played[1:])
        ]
        if gaps:
            min_rest[team] = min(gaps)

    return {
        "scheduled": len(matches),
        "unscheduled": len(proposal.unscheduled),
        "last_end": max((m.end for m in matches), default=None),
        "matches_per_team": dict(matches_per_team),
        "min_rest_minutes": min_rest,
        "matches_per_day": dict(matches_per_day),
        "field_usage": dict(field_usage),
    }


def format_comparison(proposals: list[ScheduleProposal]) -> str:
    """Side-by-side summary of several proposals."""
    lines = []
    lines.append("=" * 72)
    lines.append("PROPOSAL COMPARISON")
    lines.append("=" * 72)
    lines.append(
        f"{'Proposal':<20} {'Placed':>6} {'Unsched':>7} {'Min rest':>9} "
        f"{'Last match ends':>17}"
    )
    lines.append("-" * 72)

    for p in proposals:
        s = compute_stats(p)
        rests = list(s["min_rest_minutes"].values())
        min_rest = f"{min(rests)}m" if rests else "-"
        last_end = s["last_end"].strftime("%m/%d %H:%M") if s["last_end"] else "-"
        lines.append(
            f"{p.label:<20} {s['scheduled']:>6} {s['unscheduled']:>7} "
            f"{min_rest:>9} {last_end:>17}"
        )

    lines.append("")
    for p in proposals:
        lines.append(f"  {p.label}: {p.rationale}")

    return "\n".join(lines)
