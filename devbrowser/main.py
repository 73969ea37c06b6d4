# main.py
import asyncio
import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .constants import logger, VerifyConfig, DEFAULT_SCREENSHOT_NAME
from .verify import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='verify',
        description='Open a local dev server in a browser, take a screenshot and report page details',
        epilog='Environment: HEADLESS, CI, SLOW_MO, TIMEOUT, SCREENSHOT_DIR',
    )
    parser.add_argument('url', nargs='?', help='Target URL (detected from common dev server ports if omitted)')
    parser.add_argument('--screenshot', nargs='?', const=DEFAULT_SCREENSHOT_NAME, default=DEFAULT_SCREENSHOT_NAME,
                        help='Screenshot base name')
    parser.add_argument('--report', nargs='?', const=None, help='Write a YAML report of the run to this path')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def parse_args(argv: Optional[List[str]] = None) -> Tuple[argparse.Namespace, List[str]]:
    """
    引数を解析する。未知のフラグは無視し、位置引数が複数あれば最後のものをURLとする。
    """
    args, extras = build_parser().parse_known_args(argv)
    positionals = [a for a in extras if not a.startswith('-')]
    if positionals:
        args.url = positionals[-1]
    ignored = [a for a in extras if a.startswith('-')]
    return args, ignored


async def main(argv: Optional[List[str]] = None) -> int:
    args, ignored = parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='%(asctime)s %(levelname)-5s %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
    if ignored:
        logger.warning(f"Ignoring unknown options: {' '.join(ignored)}")

    config = VerifyConfig.from_env()
    result = await run(args.url, config, screenshot_name=args.screenshot, report_path=args.report)
    return result.exit_code


def run_cli() -> None:
    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        code = 1
    sys.exit(code)


if __name__ == '__main__':
    run_cli()
