#!/usr/bin/env python3
"""
Mission Match - Command line driver for the matching engine.

Subcommands print JSON to stdout:
  refresh <mission_id>        score, rank and store matches for a mission
  matches <mission_id>        stored matches (optionally time-decayed)
  recommend <contributor_id>  best-fit open missions for a contributor
  power <contributor_id>      recompute and store match power
  preview <mission_id> <contributor_id>
  gaps <mission_id> <contributor_id>
  stats <contributor_id>
  init-db                     create tables
"""
import sys
import json
import logging
import argparse
from dataclasses import asdict, is_dataclass

from core.config_loader import load_config, RankingOptions
from core.exceptions import MatchingServiceException, NotFoundException
from core.matching_service import MatchingService
from database.init_db import init_db
from database.repository import SqlMatchingRepository

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stderr
)
logger = logging.getLogger(__name__)


def _to_jsonable(value):
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if is_dataclass(value):
        return asdict(value)
    if isinstance(value, list):
        return [_to_jsonable(v) for v in value]
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mission Match Driver")
    parser.add_argument('--config', type=str, default='config.yaml', help='Path to config.yaml')
    sub = parser.add_subparsers(dest='command', required=True)

    refresh = sub.add_parser('refresh', help='Refresh stored matches for a mission')
    refresh.add_argument('mission_id')
    refresh.add_argument('--limit', type=int, default=None)
    refresh.add_argument('--min-score', type=float, default=None)
    refresh.add_argument('--strict-budget', action='store_true')
    refresh.add_argument('--diversity-boost', action='store_true',
                         help='Add small random jitter before sorting')
    refresh.add_argument('--diversify', action='store_true',
                         help='Cap timezone buckets and penalize recent hires')

    matches = sub.add_parser('matches', help='Show stored matches for a mission')
    matches.add_argument('mission_id')
    matches.add_argument('--decay', action='store_true', help='Apply time decay to scores')

    recommend = sub.add_parser('recommend', help='Recommend open missions to a contributor')
    recommend.add_argument('contributor_id')
    recommend.add_argument('--limit', type=int, default=None)

    power = sub.add_parser('power', help='Recompute match power for a contributor')
    power.add_argument('contributor_id')

    preview = sub.add_parser('preview', help='Preview a single mission/contributor match')
    preview.add_argument('mission_id')
    preview.add_argument('contributor_id')

    gaps = sub.add_parser('gaps', help='Skill gaps of a contributor for a mission')
    gaps.add_argument('mission_id')
    gaps.add_argument('contributor_id')

    stats = sub.add_parser('stats', help='Matching stats for a contributor')
    stats.add_argument('contributor_id')

    sub.add_parser('init-db', help='Create database tables')
    return parser


def run_command(args, service: MatchingService):
    if args.command == 'refresh':
        options = RankingOptions(
            limit=args.limit,
            minimum_score=args.min_score,
            strict_budget=args.strict_budget,
            diversity_boost=args.diversity_boost,
            diversity=service.config.diversity if args.diversify else None,
        )
        return service.refresh_matches(args.mission_id, options)
    if args.command == 'matches':
        return service.get_stored_matches(args.mission_id, apply_decay=args.decay)
    if args.command == 'recommend':
        return service.get_recommendations(args.contributor_id, args.limit)
    if args.command == 'power':
        return {'contributor_id': args.contributor_id, 'match_power': service.refresh_match_power(args.contributor_id)}
    if args.command == 'preview':
        return service.preview_match(args.mission_id, args.contributor_id)
    if args.command == 'gaps':
        return service.analyze_skill_gaps(args.mission_id, args.contributor_id)
    if args.command == 'stats':
        return service.get_contributor_stats(args.contributor_id)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    init_db(config.database.url, echo=config.database.echo)
    if args.command == 'init-db':
        logger.info("Database ready")
        return 0

    service = MatchingService(SqlMatchingRepository(), config=config.matching)

    try:
        result = run_command(args, service)
    except NotFoundException as e:
        logger.error(str(e))
        return 2
    except MatchingServiceException as e:
        logger.error(f"Matching failed: {e}")
        return 1

    print(json.dumps(_to_jsonable(result), indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
