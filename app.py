import sys
import logging
import argparse
from typing import List, Optional

from demog.broadband_api import BroadbandAPI
from demog.config import Config
from demog.normalize import normalize_states
from demog.report import OUTPUT_FORMATS, FORMAT_DIAGNOSTIC, write_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='demog',
        description='A CLI for retrieving demographic data for sets of US states'
    )
    parser.add_argument('-f', '--format', dest='output_format',
                        help=f"output format for demographic data [{','.join(OUTPUT_FORMATS)}]")
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')
    parser.add_argument('states', nargs='*',
                        help='state names or abbreviations, separately or comma-joined')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else config.log_level,
            format='%(asctime)s %(levelname)s %(name)s: %(message)s',
            stream=sys.stderr
        )
    except ValueError as e:
        parser.error(f"invalid configuration: {e}")

    states = normalize_states(args.states)
    if not states:
        parser.print_help()
        return 0

    # An unknown format renders nothing, so fail before any lookups
    if args.output_format not in OUTPUT_FORMATS:
        print(FORMAT_DIAGNOSTIC, file=sys.stderr)
        return 0

    api = BroadbandAPI.from_config(config)
    records = []
    failures = []
    for token in states:
        record, error = api.get_state_record(token)
        if error:
            logger.error(f"Skipping {token}: {error['error']}")
            failures.append((token, error['error']))
            continue
        records.append(record)

    write_report(records, args.output_format)

    if failures:
        print(f"Failed to fetch {len(failures)} state(s):", file=sys.stderr)
        for token, message in failures:
            print(f"  {token}: {message}", file=sys.stderr)

    return 0 if records else 1


if __name__ == '__main__':
    sys.exit(main())
