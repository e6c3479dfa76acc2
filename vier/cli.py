"""
Command line access to the VIER catalog.

Usage:
    vier-catalog programs
    vier-catalog program /de-slimste-mens-ter-wereld
    vier-catalog episode --program /de-slimste-mens-ter-wereld --node-id 12345
    vier-catalog episode --url https://www.vier.be/video/... --node-id 12345
    vier-catalog episode --video-id 0a1b2c3d-...
    vier-catalog search "slimste mens"
    vier-catalog categories

Results are printed as JSON on stdout.
"""

import argparse
import asyncio
import json
import sys

from utils.logging_config import setup_logging, get_logger
from vier.catalog import VierCatalog, create_catalog_from_config
from vier.models import EpisodeByNodeIdKey, EpisodeKey, EpisodeUuid, ProgramKey
from vier.responses import Failure

logger = get_logger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='vier-catalog',
        description='Look up programs, episodes and search results in the VIER catalog',
    )
    parser.add_argument('--log-level', type=str, default=None,
                        help='Log level (default: LOG_LEVEL from config.py, else INFO)')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write logs to this file')

    commands = parser.add_subparsers(dest='command', required=True)

    commands.add_parser('programs', help='List every program (slow, one request per program)')

    program = commands.add_parser('program', help='Fetch a single program')
    program.add_argument('path', help='Program path, e.g. /de-slimste-mens-ter-wereld')

    episode = commands.add_parser('episode', help='Fetch a single episode')
    target = episode.add_mutually_exclusive_group(required=True)
    target.add_argument('--program', help='Path of the parent program')
    target.add_argument('--url', help='URL of the episode or clip page')
    target.add_argument('--video-id', help='Opaque video id')
    episode.add_argument('--node-id', help='Node id of the episode (with --program or --url)')

    search = commands.add_parser('search', help='Search the catalog')
    search.add_argument('query', help='Free-text query')

    commands.add_parser('categories', help='List the categories')

    args = parser.parse_args(argv)
    if args.command == 'episode' and not args.video_id and not args.node_id:
        parser.error('--node-id is required with --program or --url')
    if args.command == 'episode' and args.video_id and args.node_id:
        parser.error('--node-id cannot be combined with --video-id')
    return args


def episode_key(args):
    if args.video_id:
        return EpisodeUuid(args.video_id)
    if args.program:
        return EpisodeKey(program_path=args.program, node_id=args.node_id)
    return EpisodeByNodeIdKey(url=args.url, node_id=args.node_id)


async def run_command(catalog: VierCatalog, args):
    if args.command == 'programs':
        return await catalog.fetch_programs()
    if args.command == 'program':
        return await catalog.fetch_program(ProgramKey(args.path))
    if args.command == 'episode':
        return await catalog.fetch_episode(episode_key(args))
    if args.command == 'search':
        return await catalog.search(args.query)
    return await catalog.fetch_categories()


def main(argv=None, catalog=None):
    """Main entry point."""
    args = parse_arguments(argv)
    setup_logging(args.log_file, args.log_level)

    catalog = catalog or create_catalog_from_config()
    try:
        result = asyncio.run(run_command(catalog, args))
    finally:
        catalog.close()

    if isinstance(result, Failure):
        logger.error(result.describe())
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return 1

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
