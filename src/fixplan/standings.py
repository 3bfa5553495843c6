"""Group standings computed from entered results."""

from fixplan.models import ResultEntry, ScheduledMatch, StandingsRow

WIN_POINTS = 2
LOSS_POINTS = 1


def compute_standings(matches: list[ScheduledMatch],
                      results: dict[str, ResultEntry]) -> dict[str, list[StandingsRow]]:
    """Fold results into one ranked table per group.

    Win: 2 points, loss: 1 point. A draw counts as played for both teams but
    awards no points, win or loss. Teams that have not played are left out.
    Rows are ranked by points then wins; anything still tied keeps the order
    in which the team was first met in `matches`. Every group present in
    `matches` gets a key, with an empty list until one of its results is in.

    Always recomputed from the full match and result sets.
    """
    tables: dict[str, dict[str, StandingsRow]] = {}

    for match in matches:
        table = tables.setdefault(match.group, {})
        row_a = table.setdefault(match.team_a, StandingsRow(match.team_a))
        row_b = table.setdefault(match.team_b, StandingsRow(match.team_b))

        result = results.get(match.id)
        if result is None:
            continue

        row_a.played += 1
        row_b.played += 1

        if result.score_a > result.score_b:
            winner, loser = row_a, row_b
        elif result.score_b > result.score_a:
            winner, loser = row_b, row_a
        else:
            continue

        winner.wins += 1
        winner.points += WIN_POINTS
        loser.losses += 1
        loser.points += LOSS_POINTS

    standings: dict[str, list[StandingsRow]] = {}
    for label, table in tables.items():
        rows = [row for row in table.values() if row.played > 0]
        rows.sort(key=lambda r: (-r.points, -r.wins))
        standings[label] = rows
    return standings
