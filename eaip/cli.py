#!/usr/bin/env python3
"""
Command line access to eAIP data.

Fetches one kind of record from a known eAIP service and prints it as JSON:

    eaip --country GB navaids
    eaip --country GB --airac 2025-10-02 airport EGBO
"""

import os
import sys
import json
import argparse
import logging
from typing import List, Optional

from .errors import EAIPError
from .sources.ais import ALL, get_service
from .utils.airac import Airac

logger = logging.getLogger(__name__)

RECORD_KINDS = ['navaids', 'intersections', 'airways', 'airports', 'airport']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Extract data from an online eAIP')

    parser.add_argument('kind', help='Kind of records to extract', choices=RECORD_KINDS)
    parser.add_argument('icao', help='ICAO code of the airport (for "airport")', nargs='?')

    parser.add_argument('--country', help='Country of the eAIP service', choices=sorted(ALL.keys()), default='GB')
    parser.add_argument('--airac', help='AIRAC effective date (YYYY-MM-DD), defaults to the current cycle')
    parser.add_argument('-c', '--cache-dir', help='Directory to cache pages',
                        default=os.environ.get('EAIP_CACHE_DIR', 'cache'))
    parser.add_argument('--no-cache', help='Do not cache pages', action='store_true')
    parser.add_argument('--force-refresh', help='Force refresh of cached pages', action='store_true')
    parser.add_argument('-o', '--output', help='JSON output file (default: stdout)')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.kind == 'airport' and not args.icao:
        parser.error('an ICAO code is required for "airport"')

    try:
        airac = Airac.from_date(args.airac) if args.airac else Airac.current()
    except ValueError as e:
        parser.error(str(e))

    source = get_service(args.country).source(cache_dir=None if args.no_cache else args.cache_dir)
    source.set_force_refresh(args.force_refresh)
    logger.info(f"Extracting {args.kind} from {args.country} eAIP for {airac}")

    try:
        if args.kind == 'airport':
            result = source.get_airport(args.icao, airac).to_dict()
        else:
            records = getattr(source, f"get_{args.kind}")(airac)
            result = [record.to_dict() for record in records]
    except EAIPError as e:
        logger.error(str(e))
        return 1

    text = json.dumps(result, indent=2, ensure_ascii=False)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(text)
        logger.info(f"Wrote {args.output}")
    else:
        print(text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
