import logging
from typing import Iterable, Iterator, List

from .package import Package

DEFAULT_PREFIX = 'vendor'


class TupleGenerator:
    """Collects packages and renders them as a ports ``GH_TUPLE`` block."""

    VARIABLE = 'GH_TUPLE'

    def __init__(self, prefix: str = DEFAULT_PREFIX) -> None:
        self.prefix = prefix
        self._packages: List[Package] = []
        self._unresolved: List[Package] = []

    @property
    def package_count(self) -> int:
        return len(self._packages) + len(self._unresolved)

    @property
    def unresolved_packages(self) -> List[Package]:
        return list(self._unresolved)

    def add_package(self, package: Package) -> None:
        if package.resolved:
            self._packages.append(package)
        else:
            logging.warning(
                '%s has no known GitHub mirror, it needs to be added by hand',
                package.name,
            )
            self._unresolved.append(package)

    def add_packages(self, packages: Iterable[Package]) -> None:
        for package in packages:
            self.add_package(package)

    def ordered_packages(self) -> List[Package]:
        return sorted(self._packages, key=lambda package: package.render(self.prefix))

    def lines(self) -> Iterator[str]:
        yield f'{self.VARIABLE}=\t\\'

        packages = self.ordered_packages()
        for i, package in enumerate(packages):
            continuation = ' \\' if i < len(packages) - 1 else ''
            yield f'\t\t{package.render(self.prefix)}{continuation}'

        for package in self._unresolved:
            yield f'#\t\t{package.render(self.prefix)}'

    def render(self) -> str:
        return ''.join(f'{line}\n' for line in self.lines())
