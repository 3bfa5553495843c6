"""Tests for stats.py and output.py — proposal comparison and rendering."""

import csv
from dataclasses import replace
from datetime import date, datetime, time
from io import StringIO

from fixplan.models import (
    CalendarCell, Fixture, Group, ResultEntry, ScheduledMatch, ScheduleProposal,
    SurfaceType, TournamentConfig,
)
from fixplan.output import (
    format_schedule, format_schedule_csv, format_standings, write_schedule,
)
from fixplan.proposals import generate_proposals
from fixplan.roundrobin import generate_fixtures
from fixplan.scheduler import build_calendar
from fixplan.standings import compute_standings
from fixplan.stats import compute_stats, format_comparison


def _proposals(end_time=time(13, 0)):
    config = TournamentConfig(
        surface=SurfaceType.GRASS, team_count=4, field_count=1,
        start_date=date(2026, 7, 4), end_date=date(2026, 7, 4),
        start_time=time(9, 0), end_time=end_time, match_duration=60,
    )
    fixtures = generate_fixtures(Group("A", ("A", "B", "C", "D")))
    return generate_proposals(fixtures, build_calendar(config))


class TestComputeStats:
    def test_counts(self):
        stats = compute_stats(_proposals()[0])
        assert stats["scheduled"] == 3
        assert stats["unscheduled"] == 3
        assert stats["last_end"] == datetime(2026, 7, 4, 13, 0)
        assert stats["matches_per_team"] == {"A": 2, "B": 1, "C": 2, "D": 1}
        assert stats["matches_per_day"] == {date(2026, 7, 4): 3}
        assert stats["field_usage"] == {1: 3}

    def test_min_rest(self):
        # A plays 9:00-10:00 and 12:00-13:00; C plays 10:00-11:00 and 12:00-13:00
        stats = compute_stats(_proposals()[0])
        assert stats["min_rest_minutes"] == {"A": 120, "C": 60}

    def test_empty_proposal(self):
        proposal = _proposals()[0]
        empty = replace(proposal, matches=(), unscheduled=())
        stats = compute_stats(empty)
        assert stats["scheduled"] == 0
        assert stats["last_end"] is None
        assert stats["min_rest_minutes"] == {}

    def test_overlapping_matches_have_no_rest(self):
        start = datetime(2026, 7, 4, 9, 0)
        end = datetime(2026, 7, 4, 10, 0)
        matches = tuple(
            ScheduledMatch(
                Fixture("A", "A", other, 0, j),
                CalendarCell(date(2026, 7, 4), 0, field, start, end),
                position=field - 1,
            )
            for j, (other, field) in enumerate([("B", 1), ("C", 2)], 1)
        )
        proposal = ScheduleProposal("balanced", "Balanced", "", 0, matches)
        stats = compute_stats(proposal)
        assert stats["min_rest_minutes"] == {"A": 0}
        assert " 0m" in format_comparison([proposal])
        assert "-60m" not in format_comparison([proposal])


class TestFormatComparison:
    def test_lists_every_proposal(self):
        text = format_comparison(_proposals())
        assert "Balanced" in text
        assert "Long rests" in text
        assert "Compact mornings" in text
        assert "Prioritises extra rest" in text


class TestFormatSchedule:
    def test_text(self):
        text = format_schedule(_proposals()[0], title="Summer Cup")
        assert "SUMMER CUP - Balanced" in text
        assert "09:00-10:00  Field 1" in text
        assert "[A] A vs B  (A-0-1)" in text
        assert "UNSCHEDULED MATCHES (3)" in text

    def test_no_unscheduled_section_when_complete(self):
        text = format_schedule(_proposals(end_time=time(17, 0))[0])
        assert "UNSCHEDULED" not in text

    def test_csv(self):
        rows = list(csv.reader(StringIO(format_schedule_csv(_proposals()[0]))))
        assert rows[0] == ["Match", "Group", "Date", "Start", "End", "Field",
                           "Team A", "Team B"]
        assert rows[1] == ["A-0-1", "A", "2026-07-04", "09:00", "10:00", "1", "A", "B"]
        assert len(rows) == 4


class TestFormatStandings:
    def test_table(self):
        proposal = _proposals()[0]
        results = {"A-0-1": ResultEntry("A-0-1", 2, 1)}
        text = format_standings(compute_standings(list(proposal.matches), results))
        assert "Group A" in text
        lines = [line for line in text.splitlines() if line.strip().startswith("1 ")]
        assert "A" in lines[0]

    def test_no_results(self):
        proposal = _proposals()[0]
        text = format_standings(compute_standings(list(proposal.matches), {}))
        assert "No results entered yet." in text


class TestWriteSchedule:
    def test_writes_files(self, tmp_path):
        out = tmp_path / "out"
        write_schedule(_proposals()[0], output_prefix=str(out))
        assert (out / "schedule.txt").exists()
        assert (out / "schedule.csv").read_text().startswith("Match,Group")
