"""Command line entry point for journey statistics reports."""

import argparse
import asyncio
import logging
import sys

from journey_stats.adapters.config import AppConfig
from journey_stats.adapters.persistence import (
    SqlAlchemyJourneyRepository,
    create_journey_engine,
)
from journey_stats.application.services import DistanceCalculator, JourneyStatisticsService
from journey_stats.domain.errors import JourneyStatsError
from journey_stats.domain.models import JourneyReport, Period, RequestContext, SummaryReport

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the journey-stats command."""
    parser = argparse.ArgumentParser(
        description="Journey statistics: distance, stops and duration of your journeys",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Statistics of a single journey
  journey-stats --user alice one 6f1c2a9e-0d1b-4c1e-9f7a-5b2f3e8d9a10

  # Totals over all journeys
  journey-stats --user alice all

  # Totals over the journeys of the last month, as JSON
  journey-stats --user alice --json period month
        """,
    )
    parser.add_argument("--user", required=True, help="Identity the report is scoped to")
    parser.add_argument("--database-url", help="SQLAlchemy URL (overrides DATABASE_URL)")
    parser.add_argument("--config-file", help="TOML configuration file")
    parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers = parser.add_subparsers(dest="command", help="Report to produce")

    one_parser = subparsers.add_parser("one", help="Statistics of a single journey")
    one_parser.add_argument("journey_id", help="Journey identifier")

    subparsers.add_parser("all", help="Totals over all journeys")

    period_parser = subparsers.add_parser("period", help="Totals over a time window")
    period_parser.add_argument(
        "period",
        metavar="{" + ",".join(p.value for p in Period) + "}",
        help="Time window counted back from the start of today",
    )

    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration, letting command line flags win over environment values."""
    overrides: dict[str, str] = {}
    if args.config_file:
        overrides["config_file"] = args.config_file
    config = AppConfig(**overrides)
    if args.database_url:
        config.database_url = args.database_url
    return config


def format_report(report: JourneyReport | SummaryReport) -> str:
    """Render a report as human readable text."""
    if isinstance(report, JourneyReport):
        return "\n".join(
            [
                f"Journey:  {report.journey_id}",
                f"Distance: {report.distance}",
                f"Stops:    {report.stop_count}",
                f"Duration: {report.duration} {report.duration_unit}",
            ]
        )
    return "\n".join(
        [
            f"Period:   {report.period}",
            f"Distance: {report.distance}",
            f"Journeys: {report.journey_count}",
            f"Duration: {report.duration} {report.duration_unit}",
        ]
    )


async def run_report(
    service: JourneyStatisticsService, context: RequestContext, args: argparse.Namespace
) -> JourneyReport | SummaryReport:
    """Dispatch the parsed command to the statistics service."""
    if args.command == "one":
        return await service.get_one(context, args.journey_id)
    if args.command == "all":
        return await service.get_all(context)
    return await service.get_period(context, args.period)


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    engine = create_journey_engine(config.database_url)
    service = JourneyStatisticsService(
        SqlAlchemyJourneyRepository(engine, timeout_seconds=config.query_timeout_seconds),
        distance_calculator=DistanceCalculator(config.distance_metric),
        timezone=config.timezone,
    )

    try:
        report = await run_report(service, RequestContext(user_id=args.user), args)
    except JourneyStatsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        engine.dispose()

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(format_report(report))


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
