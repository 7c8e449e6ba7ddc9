# tests/test_cli.py
import pytest
from click.testing import CliRunner

from oreapi import http
from oreapi.cli import cli

from conftest import FakeOre, session_response

NUCLEUS = [
    {'name': '2.0', 'created_at': '2021-01-09T00:00:00Z',
     'dependencies': [{'plugin_id': 'spongeapi', 'version': '8.0.0'}]},
    {'name': '1.9', 'created_at': '2021-01-08T00:00:00Z',
     'dependencies': [{'plugin_id': 'spongeapi', 'version': '7.3.0'}]},
    {'name': '1.0', 'created_at': '2021-01-01T00:00:00Z', 'dependencies': []},
]


@pytest.fixture
def ore(monkeypatch):
    fake = FakeOre([session_response('tok')], {'nucleus': NUCLEUS})
    monkeypatch.setattr(http, 'client', fake.client)
    return fake


def run(*args):
    return CliRunner().invoke(cli, ['--url', 'https://ore.test/api/v2/', *args])


def test_versions(ore):
    result = run('versions', 'nucleus', '--limit', '2')
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        '2.0\t2021-01-09T00:00:00+00:00\t8.0.0',
        '1.9\t2021-01-08T00:00:00+00:00\t7.3.0',
    ]


def test_versions_without_api_dependency(ore):
    result = run('versions', 'nucleus', '--offset', '2')
    assert result.exit_code == 0, result.output
    assert result.output == '1.0\t2021-01-01T00:00:00+00:00\t-\n'


def test_latest(ore):
    result = run('latest', 'nucleus')
    assert result.exit_code == 0, result.output
    assert result.output == '2.0\n'


def test_latest_for_api_version_with_page(ore):
    result = run('latest', 'nucleus', '--api-version', '7', '--owner', 'Nucleus', '--name', 'Nucleus')
    assert result.exit_code == 0, result.output
    name, page = result.output.splitlines()
    assert name == '1.9'
    assert page.endswith('/Nucleus/Nucleus/versions/1.9')


def test_latest_nothing_found(ore):
    result = run('latest', 'nucleus', '--api-version', '6')
    assert result.exit_code == 1
    assert 'Nothing found' in result.output


def test_authenticate(ore):
    result = run('--api-key', 'k', 'authenticate')
    assert result.exit_code == 0, result.output
    assert ore.auth_requests[0].headers['Authorization'] == 'OreApi apikey="k"'
    assert 'tok' not in result.output
