"""Tests for standings.py — points table from results."""

from datetime import date, datetime, timedelta

from fixplan.models import CalendarCell, Fixture, ResultEntry, ScheduledMatch
from fixplan.standings import compute_standings

_START = datetime(2026, 7, 4, 9, 0)


def _match(group, a, b, i, j, position=0):
    start = _START + timedelta(hours=position)
    cell = CalendarCell(day=date(2026, 7, 4), slot=position, field=1,
                        start=start, end=start + timedelta(hours=1))
    return ScheduledMatch(Fixture(group, a, b, i, j), cell, position)


def _result(match, score_a, score_b):
    return {match.id: ResultEntry(match.id, score_a, score_b)}


def _row(rows, team):
    return next(r for r in rows if r.team == team)


class TestComputeStandings:
    def test_win_and_draw(self):
        ab = _match("A", "A", "B", 0, 1, 0)
        ac = _match("A", "A", "C", 0, 2, 2)
        results = {**_result(ab, 3, 1), **_result(ac, 2, 2)}

        rows = compute_standings([ab, ac], results)["A"]
        a, b, c = _row(rows, "A"), _row(rows, "B"), _row(rows, "C")

        assert (a.played, a.wins, a.losses, a.points) == (2, 1, 0, 2)
        assert (b.played, b.wins, b.losses, b.points) == (1, 0, 1, 1)
        assert (c.played, c.wins, c.losses, c.points) == (1, 0, 0, 0)
        assert [r.team for r in rows] == ["A", "B", "C"]

    def test_away_side_win(self):
        ab = _match("A", "A", "B", 0, 1)
        rows = compute_standings([ab], _result(ab, 0, 4))["A"]
        assert rows[0].team == "B"
        assert (rows[0].wins, rows[0].points) == (1, 2)
        assert (rows[1].losses, rows[1].points) == (1, 1)

    def test_unplayed_teams_excluded(self):
        ab = _match("A", "A", "B", 0, 1, 0)
        cd = _match("A", "C", "D", 2, 3, 1)
        rows = compute_standings([ab, cd], _result(ab, 1, 0))["A"]
        assert [r.team for r in rows] == ["A", "B"]

    def test_no_results(self):
        ab = _match("A", "A", "B", 0, 1)
        assert compute_standings([ab], {}) == {"A": []}

    def test_no_matches(self):
        assert compute_standings([], {}) == {}

    def test_groups_kept_apart(self):
        a1 = _match("A", "A1", "A2", 0, 1, 0)
        b1 = _match("B", "B1", "B2", 0, 1, 1)
        results = {**_result(a1, 2, 0), **_result(b1, 0, 0)}
        standings = compute_standings([a1, b1], results)
        assert set(standings) == {"A", "B"}
        assert [r.team for r in standings["A"]] == ["A1", "A2"]
        assert [r.points for r in standings["B"]] == [0, 0]

    def test_wins_break_points_tie(self):
        # Y loses twice (2 pts, 0 wins); Z and W win once each (2 pts, 1 win)
        yz = _match("A", "Y", "Z", 0, 1, 0)
        yw = _match("A", "Y", "W", 0, 2, 2)
        results = {**_result(yz, 0, 1), **_result(yw, 1, 3)}
        rows = compute_standings([yz, yw], results)["A"]
        assert [r.team for r in rows] == ["Z", "W", "Y"]
        assert [r.points for r in rows] == [2, 2, 2]

    def test_ties_keep_encounter_order(self):
        # Every team draws: all on 0 points, 0 wins
        ab = _match("A", "B", "A", 0, 1, 0)
        cd = _match("A", "D", "C", 2, 3, 1)
        results = {**_result(ab, 1, 1), **_result(cd, 2, 2)}
        rows = compute_standings([ab, cd], results)["A"]
        assert [r.team for r in rows] == ["B", "A", "D", "C"]

    def test_points_then_wins(self):
        # T1 beats T2 and loses to T3: 2 + 1 = 3 points, 1 win
        # T4 loses twice and draws once: 2 points, 0 wins
        t12 = _match("A", "T1", "T2", 0, 1, 0)
        t13 = _match("A", "T1", "T3", 0, 2, 1)
        t42 = _match("A", "T4", "T2", 3, 1, 2)
        t43 = _match("A", "T4", "T3", 3, 2, 3)
        t41 = _match("A", "T4", "T1", 3, 0, 4)
        results = {
            **_result(t12, 2, 0),
            **_result(t13, 0, 1),
            **_result(t42, 0, 1),
            **_result(t43, 0, 1),
            **_result(t41, 0, 0),
        }
        rows = compute_standings([t12, t13, t42, t43, t41], results)["A"]
        points = {r.team: (r.points, r.wins) for r in rows}
        assert points["T1"] == (3, 1)
        assert points["T4"] == (2, 0)
        assert points["T3"] == (4, 2)
        assert points["T2"] == (3, 1)
        # T3 first; T1 and T2 tied on points and wins keep encounter order
        assert [r.team for r in rows][:3] == ["T3", "T1", "T2"]

    def test_recomputed_from_scratch(self):
        ab = _match("A", "A", "B", 0, 1)
        first = compute_standings([ab], _result(ab, 1, 0))
        second = compute_standings([ab], _result(ab, 0, 1))
        assert first["A"][0].team == "A"
        assert second["A"][0].team == "B"
        assert second["A"][0].played == 1
