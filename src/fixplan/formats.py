"""Competition format suggestions (how many groups, whether playoffs follow)."""

import math

from fixplan.models import FormatProposal, SurfaceType, TournamentConfig


def suggest_group_count(team_count: int) -> int:
    if team_count <= 6:
        return 1
    if team_count <= 8:
        return 2
    if team_count <= 12:
        return 3
    return 4


def suggest_formats(config: TournamentConfig) -> list[FormatProposal]:
    """Return the candidate formats for this tournament, recommended first.

    - balanced: always offered; playoffs unless the model is league-only
    - competitive: only from 10 teams; at least 3 groups, always playoffs
    - relaxed: spaced-out schedule; no group stage for knockout-only
    """
    n = config.team_count
    groups = suggest_group_count(n)
    per_group = math.ceil(n / groups) if n else 0
    base_id = f"{n}-{config.model.value}"

    beach = config.surface is SurfaceType.BEACH
    pace = "short, cool sessions" if beach else "a high competitive tempo"

    formats = [
        FormatProposal(
            id=f"{base_id}-balanced",
            title="Balanced format",
            description=(
                f"Opening group stage followed by balanced knockout rounds "
                f"for {n} teams."
            ),
            groups=groups,
            teams_per_group=per_group,
            has_playoffs=config.model.has_playoffs,
            highlights=[
                "At most 4 matches per team on the first day",
                f"Final day with up to {2 if beach else 3} matches",
                f"Pace tuned for {pace}",
            ],
        )
    ]

    if n >= 10:
        competitive_groups = max(groups, 3)
        formats.append(FormatProposal(
            id=f"{base_id}-competitive",
            title="Competitive format",
            description="More crossovers for a fair qualification and room for upsets.",
            groups=competitive_groups,
            teams_per_group=math.ceil(n / competitive_groups),
            has_playoffs=True,
            highlights=[
                "Repechage round before the quarter-finals",
                "At least 5 matches per team",
                "Best suited to venues with several fields",
            ],
        ))

    league = config.model.has_league
    formats.append(FormatProposal(
        id=f"{base_id}-relaxed",
        title="Relaxed format",
        description="Keeps back-to-back matches to a minimum and maximises rest.",
        groups=groups if league else 0,
        teams_per_group=per_group if league else 0,
        has_playoffs=True,
        highlights=[
            "At least one slot of rest between matches",
            "Early finish on the final day",
            "Friendly to teams travelling long distances",
        ],
    ))

    return formats
