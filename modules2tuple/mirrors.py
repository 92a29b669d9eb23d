import logging
import re
import types
from typing import Mapping, NamedTuple, Tuple

from .errors import PackageSpecError


class Mirror(NamedTuple):
    account: str
    project: str


# Modules whose GitHub repository can't be derived from the module path.
WELL_KNOWN_MIRRORS: Mapping[str, Mirror] = types.MappingProxyType(
    {
        'cloud.google.com/go': Mirror('googleapis', 'google-cloud-go'),
        'contrib.go.opencensus.io/exporter/ocagent': Mirror(
            'census-ecosystem', 'opencensus-go-exporter-ocagent'
        ),
        'docker.io/go-docker': Mirror('docker', 'go-docker'),
        'git.apache.org/thrift.git': Mirror('apache', 'thrift'),
        'go.opencensus.io': Mirror('census-instrumentation', 'opencensus-go'),
        'go.uber.org/atomic': Mirror('uber-go', 'atomic'),
        'google.golang.org/api': Mirror('googleapis', 'google-api-go-client'),
        'google.golang.org/appengine': Mirror('golang', 'appengine'),
        'google.golang.org/genproto': Mirror('google', 'go-genproto'),
        'google.golang.org/grpc': Mirror('grpc', 'grpc-go'),
        'gopkg.in/fsnotify.v1': Mirror('fsnotify', 'fsnotify'),
    }
)

UNRESOLVED = Mirror('', '')

# gopkg.in/pkg.v3 -> github.com/go-pkg/pkg
# gopkg.in/user/pkg.v3 -> github.com/user/pkg
_GOPKG_IN_RE = re.compile(
    r'gopkg\.in/(?P<first>[0-9A-Za-z][-0-9A-Za-z]+)(?:\.v.+)?'
    r'(?:/(?P<second>[0-9A-Za-z][-0-9A-Za-z]+)(?:\.v.+))?'
)

# golang.org/x/pkg -> github.com/golang/pkg
_GOLANG_ORG_RE = re.compile(r'golang\.org/x/(?P<project>[0-9A-Za-z][-0-9A-Za-z]+)')
GOLANG_ORG_ACCOUNT = 'golang'


def parse_github_name(name: str) -> Mirror:
    parts = name.split('/')
    if len(parts) < 3:
        raise PackageSpecError(f'unexpected GitHub package name: {name!r}')
    return Mirror(parts[1], parts[2])


def parse_gopkg_in_name(name: str) -> Mirror:
    match = _GOPKG_IN_RE.fullmatch(name)
    if match is None:
        return UNRESOLVED

    first, second = match.group('first', 'second')
    if second is None:
        return Mirror(f'go-{first}', first)
    return Mirror(first, second)


def parse_golang_org_name(name: str) -> Mirror:
    match = _GOLANG_ORG_RE.fullmatch(name)
    if match is None:
        return UNRESOLVED
    return Mirror(GOLANG_ORG_ACCOUNT, match.group('project'))


def resolve(name: str) -> Tuple[str, str]:
    """Map a Go module path onto the GitHub account and project hosting it.

    Returns ``('', '')`` when the hosting convention isn't recognized; raises
    PackageSpecError when a github.com path is too short to name a repository.
    """
    if name in WELL_KNOWN_MIRRORS:
        mirror = WELL_KNOWN_MIRRORS[name]
    elif name.startswith('github.com'):
        mirror = parse_github_name(name)
    elif name.startswith('gopkg.in'):
        mirror = parse_gopkg_in_name(name)
    elif name.startswith('golang.org'):
        mirror = parse_golang_org_name(name)
    else:
        mirror = UNRESOLVED

    logging.debug('Resolved %s to %r', name, mirror)
    return mirror
