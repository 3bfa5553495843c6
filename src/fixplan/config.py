"""Config loading and validation for the fixplan scheduler."""

from datetime import date, time
from pathlib import Path

import yaml

from fixplan.models import (
    CompetitionModel, ResultEntry, SurfaceType, TournamentConfig,
)
from fixplan.seeding import normalize_teams


class ConfigurationError(ValueError):
    """Tournament parameters that cannot produce a schedule."""

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def parse_time(s: str) -> time:
    """Parse time strings like '5:30pm', '10am', '17:00'."""
    s = s.strip()
    s_lower = s.lower()

    is_pm = s_lower.endswith("pm")
    is_am = s_lower.endswith("am")

    s_clean = s_lower
    if is_pm or is_am:
        s_clean = s_clean[:-2].strip()

    if ":" in s_clean:
        parts = s_clean.split(":")
        h = int(parts[0])
        m = int(parts[1])
    else:
        h = int(s_clean)
        m = 0

    if is_pm and h < 12:
        h += 12
    elif is_am and h == 12:
        h = 0

    return time(h, m)


def parse_date(s: str) -> date:
    """Parse date string YYYY-MM-DD."""
    parts = s.strip().split("-")
    return date(int(parts[0]), int(parts[1]), int(parts[2]))


def _coerce_time(value) -> time:
    # YAML 1.1 reads an unquoted 9:00 as the sexagesimal int 540
    if isinstance(value, int):
        return time(value // 60, value % 60)
    if isinstance(value, time):
        return value
    return parse_time(str(value))


def validate_config(config: TournamentConfig) -> list[str]:
    """Return a list of problems that make the config unusable (empty = ok)."""
    errors = []
    if config.start_time >= config.end_time:
        errors.append(
            f"Daily start time {config.start_time:%H:%M} must be before "
            f"end time {config.end_time:%H:%M}"
        )
    if config.match_duration <= 0:
        errors.append(f"Match duration must be > 0 (got {config.match_duration})")
    if config.field_count < 1:
        errors.append(f"Field count must be >= 1 (got {config.field_count})")
    if config.start_date > config.end_date:
        errors.append(
            f"Start date {config.start_date} is after end date {config.end_date}"
        )
    if config.team_count < 0:
        errors.append(f"Team count must be >= 0 (got {config.team_count})")
    if config.group_count is not None and config.group_count < 1:
        errors.append(f"Group count must be >= 1 (got {config.group_count})")
    return errors


def parse_config(raw: dict) -> tuple[TournamentConfig, list[str]]:
    """Build (TournamentConfig, team names) from an already-parsed mapping.

    Raises ConfigurationError listing every missing or invalid field.
    """
    if not isinstance(raw, dict) or "tournament" not in raw:
        raise ConfigurationError("Config must have a 'tournament' section")

    t = raw["tournament"] or {}
    teams = [str(name) for name in (raw.get("teams") or []) if name is not None]

    missing = [k for k in ("start_date", "end_date", "start_time", "end_time",
                           "match_duration")
               if k not in t]
    if missing:
        raise ConfigurationError(
            [f"Missing tournament.{k}" for k in missing]
        )

    try:
        groups = t.get("groups")
        config = TournamentConfig(
            name=str(t.get("name", "")),
            surface=SurfaceType.from_str(str(t.get("surface", "grass"))),
            model=CompetitionModel.from_str(str(t.get("model", "league_knockout"))),
            venue=str(t.get("venue", "")),
            team_count=int(t.get("team_count", len(normalize_teams(teams)))),
            field_count=int(t.get("field_count", 1)),
            start_date=parse_date(str(t["start_date"])),
            end_date=parse_date(str(t["end_date"])),
            start_time=_coerce_time(t["start_time"]),
            end_time=_coerce_time(t["end_time"]),
            match_duration=int(t["match_duration"]),
            group_count=int(groups) if groups is not None else None,
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid tournament value: {e}") from e

    errors = validate_config(config)
    if errors:
        raise ConfigurationError(errors)

    return config, teams


def load_config(path: str | Path) -> tuple[TournamentConfig, list[str]]:
    """Load and validate a tournament YAML file.

    Returns (config, teams) where teams is the raw seed-ordered name list;
    blank and duplicate names are left for the seeding step to drop.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f)
    return parse_config(raw)


def load_results(path: str | Path) -> dict[str, ResultEntry]:
    """Load a results YAML file: ``results: {fixture_id: [score_a, score_b]}``."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    entries = raw.get("results") or {}
    if not isinstance(entries, dict):
        raise ConfigurationError("'results' must be a mapping of fixture id to score pair")

    results: dict[str, ResultEntry] = {}
    errors = []
    for fixture_id, score in entries.items():
        fixture_id = str(fixture_id)
        if not isinstance(score, (list, tuple)) or len(score) != 2:
            errors.append(f"{fixture_id}: expected [score_a, score_b], got {score!r}")
            continue
        try:
            results[fixture_id] = ResultEntry(fixture_id, int(score[0]), int(score[1]))
        except (TypeError, ValueError) as e:
            errors.append(f"{fixture_id}: {e}")

    if errors:
        raise ConfigurationError(errors)
    return results
