"""Output formatters for fixplan schedules and standings."""

import csv
from datetime import date
from io import StringIO
from pathlib import Path

from fixplan.models import ScheduleProposal, ScheduledMatch, StandingsRow


def format_schedule(proposal: ScheduleProposal, title: str = "") -> str:
    """Format a proposal as a human-readable timetable, organized by day."""
    lines = []
    lines.append("=" * 72)
    heading = title.upper() if title else "TOURNAMENT SCHEDULE"
    lines.append(f"{heading} - {proposal.label}")
    lines.append("=" * 72)
    lines.append(proposal.rationale)

    by_day: dict[date, list[ScheduledMatch]] = {}
    for m in proposal.matches:
        by_day.setdefault(m.cell.day, []).append(m)

    for d in sorted(by_day):
        lines.append(f"\n  {d.strftime('%A')} {d.strftime('%m/%d/%Y')}")
        for m in sorted(by_day[d], key=lambda x: (x.start, x.field)):
            lines.append(
                f"    {m.start:%H:%M}-{m.end:%H:%M}  Field {m.field:<2}  "
                f"[{m.group}] {m.team_a} vs {m.team_b}  ({m.id})"
            )

    if proposal.unscheduled:
        lines.append(f"\n{'=' * 72}")
        lines.append(f"UNSCHEDULED MATCHES ({len(proposal.unscheduled)})")
        lines.append("=" * 72)
        for f in proposal.unscheduled:
            lines.append(f"  [{f.group}] {f.team_a} vs {f.team_b}  ({f.id})")

    return "\n".join(lines)


def format_schedule_csv(proposal: ScheduleProposal) -> str:
    """Format a proposal as CSV, one row per scheduled match."""
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(["Match", "Group", "Date", "Start", "End", "Field",
                     "Team A", "Team B"])

    for m in sorted(proposal.matches, key=lambda x: (x.start, x.field)):
        writer.writerow([
            m.id, m.group, m.start.strftime("%Y-%m-%d"),
            m.start.strftime("%H:%M"), m.end.strftime("%H:%M"),
            m.field, m.team_a, m.team_b,
        ])

    return output.getvalue()


def format_standings(standings: dict[str, list[StandingsRow]]) -> str:
    """Format per-group standings tables."""
    lines = []
    lines.append("=" * 50)
    lines.append("STANDINGS")
    lines.append("=" * 50)

    if not any(standings.values()):
        lines.append("\nNo results entered yet.")
        return "\n".join(lines)

    for label in sorted(standings):
        lines.append(f"\nGroup {label}")
        lines.append(f"  {'#':>2}  {'Team':<20} {'P':>3} {'W':>3} {'L':>3} {'Pts':>4}")
        for i, row in enumerate(standings[label], 1):
            lines.append(
                f"  {i:>2}  {row.team:<20} {row.played:>3} {row.wins:>3} "
                f"{row.losses:>3} {row.points:>4}"
            )

    return "\n".join(lines)


def write_schedule(proposal: ScheduleProposal, output_prefix: str = "output",
                   title: str = ""):
    """Write schedule.txt and schedule.csv into {output_prefix}/ directory."""
    out_dir = Path(output_prefix)
    out_dir.mkdir(parents=True, exist_ok=True)

    schedule_path = out_dir / "schedule.txt"
    schedule_path.write_text(format_schedule(proposal, title=title))
    print(f"Written: {schedule_path}")

    csv_path = out_dir / "schedule.csv"
    csv_path.write_text(format_schedule_csv(proposal))
    print(f"Written: {csv_path}")
