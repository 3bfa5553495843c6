"""Round-robin fixture generation for fixplan groups."""

from fixplan.models import Fixture, Group


def generate_fixtures(group: Group | list[str] | tuple[str, ...],
                      label: str | None = None) -> list[Fixture]:
    """Generate every pairing in a group exactly once.

    Pairs are emitted in nested order (0,1), (0,2), ..., (1,2), ... which is
    also the default priority the slot assigner tries them in.

    Accepts a Group (label taken from it unless overridden) or a plain team
    list plus a label. Groups of 0 or 1 teams have no fixtures.
    """
    if isinstance(group, Group):
        teams = list(group.teams)
        if label is None:
            label = group.label
    else:
        teams = list(group)
    if label is None:
        raise ValueError("label is required when passing a plain team list")

    fixtures = []
    for i in range(len(teams)):
        for j in range(i + 1, len(teams)):
            fixtures.append(Fixture(
                group=label,
                team_a=teams[i],
                team_b=teams[j],
                index_a=i,
                index_b=j,
            ))
    return fixtures


def generate_all_fixtures(groups: list[Group]) -> list[Fixture]:
    """Fixtures for every group, group by group in label order."""
    fixtures = []
    for group in groups:
        fixtures.extend(generate_fixtures(group))
    return fixtures


def verify_fixtures(fixtures: list[Fixture], groups: list[Group]) -> dict:
    """Verify a fixture list is a complete, duplicate-free round robin.

    Returns dict with:
    - valid: bool
    - errors: list of error strings
    - games_per_team: dict of team -> fixture count
    """
    errors = []
    pair_counts: dict[tuple[str, str, str], int] = {}
    games_per_team: dict[str, int] = {}
    ids = set()

    members = {g.label: set(g.teams) for g in groups}

    for f in fixtures:
        if f.id in ids:
            errors.append(f"Duplicate fixture id {f.id}")
        ids.add(f.id)

        if f.team_a == f.team_b:
            errors.append(f"{f.id}: {f.team_a} paired with itself")
        if f.group not in members:
            errors.append(f"{f.id}: unknown group {f.group}")
        elif not (f.team_a in members[f.group] and f.team_b in members[f.group]):
            errors.append(
                f"{f.id}: {f.team_a} vs {f.team_b} not both in group {f.group}"
            )

        key = (f.group, *sorted([f.team_a, f.team_b]))
        pair_counts[key] = pair_counts.get(key, 0) + 1
        games_per_team[f.team_a] = games_per_team.get(f.team_a, 0) + 1
        games_per_team[f.team_b] = games_per_team.get(f.team_b, 0) + 1

    for g in groups:
        for i, t1 in enumerate(g.teams):
            for t2 in g.teams[i + 1:]:
                key = (g.label, *sorted([t1, t2]))
                count = pair_counts.get(key, 0)
                if count != 1:
                    errors.append(
                        f"Group {g.label}: {t1} vs {t2} appears {count} times "
                        f"(expected 1)"
                    )

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "games_per_team": games_per_team,
    }
