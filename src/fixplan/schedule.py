#!/usr/bin/env python3
"""fixplan tournament schedule builder.

Generate mode (default):
    fixplan [config.yaml] [--groups N] [--proposal KEY] [-o DIR]

    Seeds the teams into groups, generates every round-robin fixture and
    produces three candidate schedules. Prints a validation report for each
    and a side-by-side comparison, then writes the chosen proposal:
      {DIR}/schedule.txt   - Human-readable timetable by day
      {DIR}/schedule.csv   - One row per match

Standings:
    fixplan [config.yaml] --results results.yaml

    Also computes group standings for the chosen proposal from a results
    file and writes {DIR}/standings.txt.

Examples:
    fixplan                                  # default config.yaml
    fixplan cup.yaml --groups 3 -o cup2026   # override suggested group count
    fixplan --proposal long-rests --results results.yaml
"""

import argparse
import sys
from pathlib import Path

from fixplan.config import ConfigurationError, load_config, load_results
from fixplan.constraints import format_validation_report, validate_schedule
from fixplan.formats import suggest_formats
from fixplan.output import format_standings, write_schedule
from fixplan.proposals import PROPOSAL_VARIANTS, plan_tournament, select_proposal
from fixplan.standings import compute_standings
from fixplan.stats import format_comparison


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="fixplan tournament schedule builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Output files:
  {prefix}/schedule.txt     Human-readable timetable (selected proposal)
  {prefix}/schedule.csv     One row per scheduled match
  {prefix}/standings.txt    Group standings (only with --results)

Exit codes:
  0  Schedule generated (unscheduled matches are reported, not fatal)
  1  Invalid config, calendar too short for one match, or nothing to schedule
""",
    )
    parser.add_argument(
        "config", nargs="?", default="config.yaml",
        help="Path to config YAML file (default: config.yaml)"
    )
    parser.add_argument(
        "--groups", "-g", type=int, default=None,
        help="Number of groups (default: tournament.groups from the config, "
             "else a count suggested from the number of teams)"
    )
    parser.add_argument(
        "--proposal", "-p", default=PROPOSAL_VARIANTS[0].key,
        choices=[v.key for v in PROPOSAL_VARIANTS],
        help="Proposal to write out and use for standings (default: balanced)"
    )
    parser.add_argument(
        "--results", "-r", metavar="YAML",
        help="Results file to compute standings from"
    )
    parser.add_argument(
        "--output-prefix", "-o", default="output",
        help="Output directory for generated files (default: output/)"
    )
    args = parser.parse_args(argv)

    config_path = args.config
    if not Path(config_path).exists():
        print(f"Error: config file {config_path} not found")
        sys.exit(1)

    print(f"Loading config from {config_path}...")
    try:
        config, teams = load_config(config_path)
    except ConfigurationError as e:
        print("Config validation errors:")
        for err in e.errors:
            print(f"  {err}")
        sys.exit(1)

    formats = suggest_formats(config)
    print("\nSuggested formats:")
    for fmt in formats:
        playoffs = "with playoffs" if fmt.has_playoffs else "no playoffs"
        print(f"  {fmt.title}: {fmt.groups} group(s) of ~{fmt.teams_per_group}, "
              f"{playoffs}")

    print("\nGenerating schedule proposals...")
    try:
        plan = plan_tournament(config, teams, group_count=args.groups)
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    dropped = len(teams) - len(plan.teams)
    if dropped:
        print(f"  Ignored {dropped} blank or duplicate team name(s)")
    for group in plan.groups:
        print(f"  Group {group.label}: {', '.join(group.teams) or '(empty)'}")
    print(f"  {len(plan.fixtures)} fixtures, {len(plan.cells)} calendar cells")

    if not plan.fixtures:
        print("Error: nothing to schedule (need at least two teams in a group)")
        sys.exit(1)

    reports = {}
    for proposal in plan.proposals:
        reports[proposal.key] = validate_schedule(proposal, plan.fixtures)
        print("\n" + format_validation_report(reports[proposal.key],
                                               title=proposal.label))

    print("\n" + format_comparison(plan.proposals))

    selected = select_proposal(plan.proposals, args.proposal)
    if not reports[selected.key]["valid"]:
        print(f"\nWARNING: proposal '{selected.label}' is INVALID "
              f"({len(reports[selected.key]['errors'])} error(s), see report above)")
    print(f"\nWriting proposal '{selected.label}'...")
    write_schedule(selected, output_prefix=args.output_prefix, title=config.name)

    if args.results:
        try:
            results = load_results(args.results)
        except ConfigurationError as e:
            print(f"Error in results file {args.results}: {e}")
            sys.exit(1)
        known = {f.id for f in plan.fixtures}
        unknown = sorted(set(results) - known)
        if unknown:
            print(f"  Ignoring results for unknown fixtures: {', '.join(unknown)}")

        standings_text = format_standings(
            compute_standings(list(selected.matches), results)
        )
        print("\n" + standings_text)
        standings_path = Path(args.output_prefix) / "standings.txt"
        standings_path.write_text(standings_text)
        print(f"Written: {standings_path}")

    if selected.unscheduled:
        print(f"\n{len(selected.unscheduled)} matches could not be placed. "
              f"Extend the dates, add fields or shorten matches.")
    else:
        print("\nSchedule generated successfully!")


if __name__ == "__main__":
    main()
