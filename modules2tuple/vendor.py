import logging
from pathlib import Path
from typing import Iterable, Iterator

from .errors import PackageSpecError
from .package import Package

# Module lines in vendor/modules.txt look like "# github.com/foo/bar v1.0.0";
# package and "## explicit" lines are skipped.
SPEC_PREFIX = '# '


class ModulesTxtProvider:
    """Reads the packages listed in a ``go mod vendor`` modules.txt file."""

    def process_lines(self, lines: Iterable[str], source: str = '<input>') -> Iterator[Package]:
        for lineno, line in enumerate(lines, start=1):
            line = line.rstrip('\r\n')
            if not line.startswith(SPEC_PREFIX):
                continue

            spec = line[len(SPEC_PREFIX):]
            try:
                package = Package.parse(spec)
            except PackageSpecError as ex:
                raise PackageSpecError(f'{source}:{lineno}: {ex}') from ex

            logging.debug('Parsed %r as %s', spec, package)
            yield package

    def process_modules_txt(self, modules_txt: Path) -> Iterator[Package]:
        # Lines end at \n only. Undecodable bytes are kept as surrogates so
        # they only matter on module lines.
        with open(
            modules_txt, 'r', encoding='utf-8', errors='surrogateescape', newline='\n'
        ) as fp:
            yield from self.process_lines(fp, str(modules_txt))
