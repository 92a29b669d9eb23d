import dataclasses
import re
from dataclasses import dataclass

from .errors import PackageSpecError
from .mirrors import resolve

REPLACE_OPERATOR = ' => '


@dataclass(frozen=True, eq=True)
class Package:
    name: str
    account: str
    project: str
    tag: str

    # v0.0.0-20181001143604-e0a95dfd547c
    # v1.2.3-3.20181001143604-e0a95dfd547c
    # Only the first 7 characters of the commit are kept.
    _PSEUDO_VERSION_RE = re.compile(
        r'v[0-9]+\.[0-9]+\.[0-9]+-(?:[0-9]+\.)?[0-9]{14}-(?P<commit>[0-9a-f]{7})[0-9a-f]*'
    )
    # v1.0.0
    # v1.2.3-pre-release-suffix+incompatible
    _VERSION_RE = re.compile(
        r'(?P<version>v[0-9]+\.[0-9]+\.[0-9]+(?:-[0-9A-Za-z][0-9A-Za-z.-]*)?)'
        r'(?:\+incompatible)?'
    )
    _GROUP_RE = re.compile(r'[^0-9A-Za-z_]+')

    @property
    def resolved(self) -> bool:
        return bool(self.account and self.project)

    @property
    def group(self) -> str:
        group = f'{self.account}_{self.project}'
        return Package._GROUP_RE.sub('_', group).lower()

    def render(self, prefix: str) -> str:
        return (
            f'{self.account}:{self.project}:{self.tag}:'
            f'{self.group}/{prefix}/{self.name}'
        )

    @staticmethod
    def parse_tag(version: str) -> str:
        match = Package._PSEUDO_VERSION_RE.fullmatch(version)
        if match is not None:
            return match.group('commit')

        match = Package._VERSION_RE.fullmatch(version)
        if match is not None:
            return match.group('version')

        raise PackageSpecError(f'unexpected version string: {version!r}')

    @staticmethod
    def parse(spec: str) -> 'Package':
        if REPLACE_OPERATOR in spec:
            sides = spec.split(REPLACE_OPERATOR)
            if len(sides) != 2 or not all(side.strip() for side in sides):
                raise PackageSpecError(
                    f'unexpected number of packages in replace spec: {spec!r}'
                )
            old, new = map(Package.parse, sides)
            # The replaced module keeps its own path but is fetched from the
            # replacement's upstream.
            return dataclasses.replace(new, name=old.name)

        fields = spec.split()
        if len(fields) != 2:
            raise PackageSpecError(f'unexpected number of fields: {spec!r}')

        name, version = fields
        account, project = resolve(name)
        return Package(name, account, project, Package.parse_tag(version))
