"""Schedule proposals: several greedy passes over the same fixtures and calendar.

Pipeline used by plan_tournament():
1. Normalize and seed teams into groups (seeding.py)
2. Generate round-robin fixtures per group (roundrobin.py)
3. Build the calendar cell sequence (scheduler.py)
4. Run the slot assigner once per variant (scheduler.py)
"""

from dataclasses import dataclass, field, replace

from fixplan.config import ConfigurationError
from fixplan.formats import suggest_group_count
from fixplan.models import (
    CalendarCell, Fixture, Group, ScheduleProposal, TournamentConfig,
)
from fixplan.roundrobin import generate_all_fixtures
from fixplan.scheduler import assign_schedule, build_calendar, reorder_matches
from fixplan.seeding import build_groups, normalize_teams


@dataclass(frozen=True)
class ProposalVariant:
    key: str
    label: str
    offset: int
    rationale: str


# Offsets only change which fixture the assigner tries first (see variant_rotations).
PROPOSAL_VARIANTS = (
    ProposalVariant(
        key="balanced",
        label="Balanced",
        offset=0,
        rationale="Keeps regular slots for every team.",
    ),
    ProposalVariant(
        key="long-rests",
        label="Long rests",
        offset=5,
        rationale="Prioritises extra rest between matches.",
    ),
    ProposalVariant(
        key="compact-mornings",
        label="Compact mornings",
        offset=10,
        rationale="Packs matches into the first slots to free up the afternoons.",
    ),
)


@dataclass
class TournamentPlan:
    """Everything one planning run produced."""
    config: TournamentConfig
    teams: list[str]
    groups: list[Group]
    fixtures: list[Fixture]
    cells: list[CalendarCell]
    proposals: list[ScheduleProposal] = field(default_factory=list)


def variant_rotations(fixture_count: int) -> list[int]:
    """Rotation actually applied for each variant.

    Offsets are taken modulo the fixture count; a variant whose rotation is
    already used steps forward to the next free one, so variants stay
    distinct whenever there are at least as many fixtures as variants.
    """
    if fixture_count == 0:
        return [variant.offset for variant in PROPOSAL_VARIANTS]

    used: list[int] = []
    for variant in PROPOSAL_VARIANTS:
        k = variant.offset % fixture_count
        while k in used and len(used) < fixture_count:
            k = (k + 1) % fixture_count
        used.append(k)
    return used


def generate_proposals(fixtures: list[Fixture],
                       cells: list[CalendarCell]) -> list[ScheduleProposal]:
    """Run the assigner once per variant and wrap each result.

    Each proposal's `offset` is the rotation it was built with, so
    assign_schedule(fixtures, cells, proposal.offset) reproduces it.
    """
    proposals = []
    rotations = variant_rotations(len(fixtures))
    for variant, offset in zip(PROPOSAL_VARIANTS, rotations):
        scheduled, unscheduled = assign_schedule(fixtures, cells, offset)
        proposals.append(ScheduleProposal(
            key=variant.key,
            label=variant.label,
            rationale=variant.rationale,
            offset=offset,
            matches=tuple(scheduled),
            unscheduled=tuple(unscheduled),
        ))
    return proposals


def resolve_group_count(config: TournamentConfig, teams: list[str],
                        group_count: int | None = None) -> int:
    """Explicit argument, else the config's groups, else the suggested count."""
    if group_count is None:
        group_count = config.group_count
    if group_count is None:
        group_count = suggest_group_count(len(teams))
    return max(group_count, 1)


def plan_tournament(config: TournamentConfig, teams: list[str],
                    group_count: int | None = None) -> TournamentPlan:
    """Seed, generate fixtures, build the calendar and produce all proposals.

    Raises ConfigurationError when the daily window cannot hold one match.
    A team list with fewer than two usable names yields proposals with no
    matches ("nothing to schedule yet").
    """
    cleaned = normalize_teams(teams)
    groups = build_groups(cleaned, resolve_group_count(config, cleaned, group_count))
    fixtures = generate_all_fixtures(groups)

    cells = build_calendar(config)
    if not cells:
        raise ConfigurationError(
            f"Daily window {config.start_time:%H:%M}-{config.end_time:%H:%M} "
            f"cannot fit a single {config.match_duration}-minute match"
        )

    return TournamentPlan(
        config=config,
        teams=cleaned,
        groups=groups,
        fixtures=fixtures,
        cells=cells,
        proposals=generate_proposals(fixtures, cells),
    )


def select_proposal(proposals: list[ScheduleProposal], key: str) -> ScheduleProposal:
    for proposal in proposals:
        if proposal.key == key:
            return proposal
    raise KeyError(
        f"No proposal {key!r} (have: {', '.join(p.key for p in proposals)})"
    )


def reorder_proposal(proposal: ScheduleProposal, from_index: int,
                     to_index: int) -> ScheduleProposal:
    """Manual override: move one match in the running order of a proposal."""
    matches = reorder_matches(list(proposal.matches), from_index, to_index)
    return replace(proposal, matches=tuple(matches))
