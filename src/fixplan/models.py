"""Data models for the fixplan tournament scheduler."""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Optional


class SurfaceType(Enum):
    GRASS = "grass"
    BEACH = "beach"

    @classmethod
    def from_str(cls, s: str) -> "SurfaceType":
        return cls(s.strip().lower())


class CompetitionModel(Enum):
    LEAGUE_KNOCKOUT = "league_knockout"
    LEAGUE_ONLY = "league_only"
    KNOCKOUT_ONLY = "knockout_only"

    @classmethod
    def from_str(cls, s: str) -> "CompetitionModel":
        return cls(s.strip().lower().replace("-", "_").replace("+", "_"))

    @property
    def has_league(self) -> bool:
        return self is not CompetitionModel.KNOCKOUT_ONLY

    @property
    def has_playoffs(self) -> bool:
        return self is not CompetitionModel.LEAGUE_ONLY


@dataclass
class TournamentConfig:
    """Tournament parameters: calendar window, fields and competition format."""
    surface: SurfaceType
    team_count: int
    field_count: int
    start_date: date
    end_date: date
    start_time: time
    end_time: time
    match_duration: int  # minutes
    model: CompetitionModel = CompetitionModel.LEAGUE_KNOCKOUT
    venue: str = ""
    name: str = ""
    group_count: Optional[int] = None

    @property
    def start_minute(self) -> int:
        return self.start_time.hour * 60 + self.start_time.minute

    @property
    def end_minute(self) -> int:
        return self.end_time.hour * 60 + self.end_time.minute

    @property
    def slots_per_day(self) -> int:
        """Whole matches that fit in the daily window (partial slots dropped)."""
        if self.match_duration <= 0:
            return 0
        return max(0, (self.end_minute - self.start_minute) // self.match_duration)

    @property
    def days(self) -> list[date]:
        """Every calendar date from start to end, inclusive."""
        result = []
        current = self.start_date
        while current <= self.end_date:
            result.append(current)
            current += timedelta(days=1)
        return result


@dataclass(frozen=True)
class Group:
    """Seeded teams sharing a round-robin pool."""
    label: str
    teams: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.teams)


@dataclass(frozen=True)
class Fixture:
    """A pairing of two teams within a group (no time or field yet).

    The id is built from the teams' positions in the group, not their names,
    so renaming a team keeps its fixtures (and entered results) attached.
    """
    group: str
    team_a: str
    team_b: str
    index_a: int
    index_b: int

    @property
    def id(self) -> str:
        return f"{self.group}-{self.index_a}-{self.index_b}"

    @property
    def teams(self) -> tuple[str, str]:
        return (self.team_a, self.team_b)


@dataclass(frozen=True)
class CalendarCell:
    """One bookable (day, slot, field) unit."""
    day: date
    slot: int
    field: int  # 1-based
    start: datetime
    end: datetime


@dataclass(frozen=True)
class ScheduledMatch:
    """A fixture bound to a calendar cell.

    `position` is the cell's index in the calendar sequence it was assigned
    from; the rest rule is expressed in terms of it.
    """
    fixture: Fixture
    cell: CalendarCell
    position: int

    @property
    def id(self) -> str:
        return self.fixture.id

    @property
    def group(self) -> str:
        return self.fixture.group

    @property
    def team_a(self) -> str:
        return self.fixture.team_a

    @property
    def team_b(self) -> str:
        return self.fixture.team_b

    @property
    def field(self) -> int:
        return self.cell.field

    @property
    def start(self) -> datetime:
        return self.cell.start

    @property
    def end(self) -> datetime:
        return self.cell.end


@dataclass(frozen=True)
class ScheduleProposal:
    """A named candidate schedule plus the fixtures it could not place."""
    key: str
    label: str
    rationale: str
    offset: int
    matches: tuple[ScheduledMatch, ...]
    unscheduled: tuple[Fixture, ...] = ()

    @property
    def is_complete(self) -> bool:
        return not self.unscheduled

    def match(self, fixture_id: str) -> Optional[ScheduledMatch]:
        for m in self.matches:
            if m.id == fixture_id:
                return m
        return None


@dataclass(frozen=True)
class ResultEntry:
    """Final score of a played fixture. Absent entry = not played yet."""
    fixture_id: str
    score_a: int
    score_b: int

    def __post_init__(self):
        if self.score_a < 0 or self.score_b < 0:
            raise ValueError(
                f"Scores must be >= 0 (got {self.score_a}-{self.score_b} "
                f"for {self.fixture_id})"
            )


@dataclass
class StandingsRow:
    team: str
    played: int = 0
    wins: int = 0
    losses: int = 0
    points: int = 0


@dataclass
class FormatProposal:
    """A suggested competition format (group stage shape + playoffs)."""
    id: str
    title: str
    description: str
    groups: int
    teams_per_group: int
    has_playoffs: bool
    highlights: list[str] = field(default_factory=list)
