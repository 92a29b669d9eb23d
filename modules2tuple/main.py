from pathlib import Path
from typing import List, NamedTuple, Optional

import argparse
import logging
import sys

from . import __version__
from .errors import PackageSpecError
from .tuples import DEFAULT_PREFIX, TupleGenerator
from .vendor import ModulesTxtProvider

HELP_TEXT = """
Vendor package dependencies and then run %(prog)s on vendor/modules.txt:

    $ go mod vendor
    $ %(prog)s vendor/modules.txt

By default, generated GH_TUPLE entries will place packages under "vendor".
This can be changed by passing a different prefix using the --prefix option
(e.g. --prefix src).
"""


class Options(NamedTuple):
    modules_txt: Path
    prefix: str
    output: str


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate GH_TUPLE entries from a Go modules.txt file',
        usage='%(prog)s [options] modules.txt',
        epilog=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('modules_txt', nargs='?', type=Path,
                        help='The vendor/modules.txt file')
    parser.add_argument('--prefix', '-prefix', default=DEFAULT_PREFIX,
                        help='Package prefix (default: %(default)s)')
    parser.add_argument('-o', '--output', default='-',
                        help='Where to write the GH_TUPLE block (default: stdout)')
    parser.add_argument('-v', '--version', action='store_true',
                        help='Show version and exit')
    parser.add_argument('-d', '--debug', action='store_true',
                        help='Enable debug logging')
    return parser


def generate(options: Options) -> str:
    provider = ModulesTxtProvider()
    gen = TupleGenerator(options.prefix)
    gen.add_packages(provider.process_modules_txt(options.modules_txt))

    logging.info(
        'Read %d packages, %d unresolved',
        gen.package_count,
        len(gen.unresolved_packages),
    )
    return gen.render()


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(levelname)s: %(message)s',
        force=True,
    )

    if args.version:
        print(__version__, file=sys.stderr)
        sys.exit(0)

    if args.modules_txt is None:
        parser.print_help(sys.stderr)
        sys.exit(1)

    options = Options(args.modules_txt, args.prefix, args.output)
    try:
        block = generate(options)
        if options.output == '-':
            sys.stdout.write(block)
        else:
            with open(options.output, 'w', encoding='utf-8', errors='surrogateescape') as fp:
                fp.write(block)
    except (OSError, UnicodeError, PackageSpecError) as ex:
        sys.exit(str(ex))


if __name__ == '__main__':
    main()
