#!/usr/bin/env python3
"""
Analytics View Runner

Computes one analytical view against the configured database and prints the
response envelope as JSON.

Usage:
    python scripts/run_view.py top-players --count 10
    python scripts/run_view.py weather-average --weather-condition Rainy
    python scripts/run_view.py team-comparison --teams KC,BUF
    python scripts/run_view.py performance-tiers --position QB
    python scripts/run_view.py injury-probability --window 2 --min-seasons 1
"""

import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import asyncio
import argparse

from core.dependencies import (
    get_injury_service,
    get_player_stats_service,
    get_weather_service,
)
from core.logging import setup_logging
from core.settings import settings
from db.base import init_db, close_db
from schemas.common import ApiStatus


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute an NFL analytics view")
    views = parser.add_subparsers(dest="view", required=True)

    p = views.add_parser("weather-average", help="Average QB passing yards by weather")
    p.add_argument("--weather-condition", default=None)
    p.add_argument("--season", type=int, default=None)

    p = views.add_parser("top-players", help="Top players by total fantasy points")
    p.add_argument("--count", type=int, default=10)

    p = views.add_parser("windy-delta", help="Players who improve in windy weeks")
    p.add_argument("--min-wind-speed", type=float, default=15)
    p.add_argument("--limit", type=int, default=10)

    p = views.add_parser("team-comparison", help="Team margins by weather condition")
    p.add_argument("--teams", required=True, help="Comma separated team codes")
    p.add_argument("--limit", type=int, default=5)

    p = views.add_parser("cold-quarterbacks", help="Quarterbacks in sub-freezing weeks")
    p.add_argument("--min-games", type=int, default=3)

    p = views.add_parser("goal-line-backs", help="Rushing TDs per 100 yards")
    p.add_argument("--min-tds", type=int, default=5)
    p.add_argument("--min-games", type=int, default=8)

    p = views.add_parser("consistent-scorers", help="Steadiest PPR scorers")
    p.add_argument("--position", required=True)

    p = views.add_parser("injury-resilience", help="Injuries per season played")
    p.add_argument("--position", default=None)

    p = views.add_parser("performance-tiers", help="Position performance tiers")
    p.add_argument("--position", required=True)
    p.add_argument("--season-floor", type=int, default=None)
    p.add_argument("--min-players", type=int, default=1)

    p = views.add_parser("injury-probability", help="Injury and re-injury probability")
    p.add_argument("--window", type=int, default=None)
    p.add_argument("--min-seasons", type=int, default=1)
    p.add_argument("--season", type=int, default=None)

    return parser


async def run(args: argparse.Namespace):
    weather = get_weather_service()
    players = get_player_stats_service()
    injuries = get_injury_service()

    if args.view == "weather-average":
        return await weather.get_weather_conditioned_average(args.weather_condition, args.season)
    if args.view == "top-players":
        return await players.get_ranked_fantasy_totals(args.count)
    if args.view == "windy-delta":
        return await weather.get_adverse_weather_delta(args.min_wind_speed, args.limit)
    if args.view == "team-comparison":
        return await weather.get_team_weather_comparison(args.teams.split(","), args.limit)
    if args.view == "cold-quarterbacks":
        return await weather.get_cold_weather_quarterbacks(args.min_games)
    if args.view == "goal-line-backs":
        return await players.get_goal_line_backs(args.min_tds, args.min_games)
    if args.view == "consistent-scorers":
        return await players.get_consistent_scorers(args.position)
    if args.view == "injury-resilience":
        return await injuries.get_injury_resilience(args.position)
    if args.view == "performance-tiers":
        return await players.get_performance_tiers(args.position, args.season_floor, args.min_players)
    if args.view == "injury-probability":
        return await injuries.get_injury_followup_probability(args.window, args.min_seasons, args.season)
    raise ValueError(f"Unknown view '{args.view}'")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(log_level=settings.log_level, json_format=True, service_name=settings.service_name)

    init_db()
    try:
        result = asyncio.run(run(args))
    finally:
        close_db()

    print(result.model_dump_json(indent=2))
    return 0 if result.status == ApiStatus.SUCCESS else 1


if __name__ == "__main__":
    sys.exit(main())
