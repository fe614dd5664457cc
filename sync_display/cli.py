"""
Command-line entry point for Sync Display.

Each subcommand runs one formatter on its argument and prints the
result, which is handy for checking how a value will be shown:

    sync-display size 1048576
    sync-display mime image/png
    sync-display time 1700000000000 --now 1700000300000
    sync-display idn http://bücher.de/shop
    sync-display path /Photos/2024/
"""
from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from sync_display import __version__
from sync_display.config import load_display_strings
from sync_display.errors import InvalidHostLabel
from sync_display.idn import convert_idn
from sync_display.logging import logger, setup_logging
from sync_display.mime import mime_to_pretty_print
from sync_display.models import DEFAULT_STRINGS
from sync_display.paths import path_without_last_slash
from sync_display.sizes import bytes_to_human_readable
from sync_display.timestamps import relative_timestamp, unix_time_to_human_readable


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per formatter."""
    parser = argparse.ArgumentParser(
        prog='sync-display',
        description='Format raw sync client values for display.',
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    parser.add_argument(
        '--strings',
        type=Path,
        default=None,
        help='JSON file with localized marker strings.',
    )
    parser.add_argument(
        '--log-dir',
        type=Path,
        default=None,
        help='Write a debug log to this directory.',
    )

    sub = parser.add_subparsers(dest='command', required=True)

    size = sub.add_parser('size', help='Humanize a byte count.')
    size.add_argument('bytes', type=int)

    mime = sub.add_parser('mime', help='Prettify a MIME type.')
    mime.add_argument('mimetype')

    when = sub.add_parser('time', help='Format a timestamp in milliseconds.')
    when.add_argument('millis', type=int)
    when.add_argument('--now', type=int, default=None, help='Reference time in milliseconds.')
    when.add_argument('--absolute', action='store_true', help='Always show the full date and time.')

    idn = sub.add_parser('idn', help='Convert the domain name of a URL.')
    idn.add_argument('url')
    idn.add_argument('--to-unicode', action='store_true', help='Convert from ASCII to Unicode.')

    path = sub.add_parser('path', help='Strip a trailing path separator.')
    path.add_argument('path')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)

    if args.log_dir is not None:
        setup_logging(args.log_dir)

    strings = load_display_strings(args.strings) if args.strings else DEFAULT_STRINGS
    logger.debug(f'Running command {args.command!r}')

    if args.command == 'size':
        output = bytes_to_human_readable(args.bytes, strings)
    elif args.command == 'mime':
        output = mime_to_pretty_print(args.mimetype)
    elif args.command == 'time':
        if args.absolute:
            output = unix_time_to_human_readable(args.millis)
        else:
            now = args.now if args.now is not None else int(time.time() * 1000)
            output = relative_timestamp(args.millis, now, strings)
    elif args.command == 'idn':
        try:
            output = convert_idn(args.url, to_ascii=not args.to_unicode)
        except InvalidHostLabel as e:
            print(f'error: {e}', file=sys.stderr)
            return 1
    else:
        output = path_without_last_slash(args.path)

    print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
