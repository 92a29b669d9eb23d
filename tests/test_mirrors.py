import pytest

from modules2tuple.errors import PackageSpecError
from modules2tuple.mirrors import WELL_KNOWN_MIRRORS, Mirror, resolve


@pytest.mark.parametrize(
    'name,expected',
    [
        ('github.com/foo/bar', ('foo', 'bar')),
        ('github.com/foo/bar/baz/qux', ('foo', 'bar')),
        ('gopkg.in/yaml.v2', ('go-yaml', 'yaml')),
        ('gopkg.in/go-check/check.v1', ('go-check', 'check')),
        ('gopkg.in/src-d/go-git.v4', ('src-d', 'go-git')),
        ('gopkg.in/fsnotify.v1', ('fsnotify', 'fsnotify')),
        ('golang.org/x/sys', ('golang', 'sys')),
        ('golang.org/x/crypto', ('golang', 'crypto')),
        ('cloud.google.com/go', ('googleapis', 'google-cloud-go')),
        ('google.golang.org/grpc', ('grpc', 'grpc-go')),
        ('git.apache.org/thrift.git', ('apache', 'thrift')),
    ],
)
def test_resolve(name: str, expected: tuple) -> None:
    assert resolve(name) == expected


@pytest.mark.parametrize(
    'name',
    [
        'example.org/private/thing',
        'gopkg.in/x',
        'gopkg.in/',
        'golang.org/x/sys/unix',
        'golang.org/y/other',
        'golang.org/x/',
        'google.golang.org/protobuf',
        'bitbucket.org/foo/bar',
    ],
)
def test_resolve_unknown(name: str) -> None:
    assert resolve(name) == ('', '')


@pytest.mark.parametrize('name', ['github.com', 'github.com/foo'])
def test_resolve_short_github_name(name: str) -> None:
    with pytest.raises(PackageSpecError):
        resolve(name)


def test_well_known_mirrors_take_precedence() -> None:
    # Would otherwise resolve to go-fsnotify/fsnotify.
    assert WELL_KNOWN_MIRRORS['gopkg.in/fsnotify.v1'] == Mirror('fsnotify', 'fsnotify')
    assert resolve('gopkg.in/fsnotify.v1') == ('fsnotify', 'fsnotify')


def test_well_known_mirrors_are_read_only() -> None:
    with pytest.raises(TypeError):
        WELL_KNOWN_MIRRORS['example.com/x'] = Mirror('x', 'y')  # type: ignore
