"""Tests for the eaip command line."""

import json
from unittest.mock import MagicMock

import pytest

from eaip import cli
from eaip.sources.eaip_web import EAIPWebSource


class MockResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.content = text.encode('utf-8')
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            from requests.exceptions import HTTPError
            raise HTTPError(f"HTTP {self.status_code}")


class FakeService:
    """Stands in for a known eAIP service, serving pages from a mocked session."""

    def __init__(self, session):
        self.session = session
        self.cache_dir = 'unset'

    def source(self, cache_dir=None):
        self.cache_dir = cache_dir
        return EAIPWebSource('https://example.com/eaip', 'EG', 'en-GB', cache_dir=cache_dir, session=self.session)


@pytest.fixture
def service(monkeypatch, test_assets_dir):
    html_dir = test_assets_dir / 'html'
    session = MagicMock()
    session.headers = {}

    def get(url, **kwargs):
        path = html_dir / url.rsplit('/', 1)[-1]
        if path.exists():
            return MockResponse(path.read_text(encoding='utf-8'))
        return MockResponse("Not Found", 404)

    session.get.side_effect = get
    fake = FakeService(session)
    monkeypatch.setattr(cli, 'get_service', lambda country: fake)
    return fake


def test_navaids(service, capsys):
    assert cli.main(['--airac', '2025-10-02', '--no-cache', 'navaids']) == 0

    records = json.loads(capsys.readouterr().out)
    assert [r['ident'] for r in records] == ['ADN', 'BCN', 'BRR', 'LAM']
    assert records[0]['kind'] == 'VOR/DME'
    assert service.cache_dir is None


def test_airport(service, capsys):
    assert cli.main(['--airac', '2025-10-02', '--no-cache', 'airport', 'EGBO']) == 0

    airport = json.loads(capsys.readouterr().out)
    assert airport['icao'] == 'EGBO'
    assert airport['charts'][0]['url'].startswith('https://example.com/eaip/2025-10-02-AIRAC/pdf/')


def test_output_file(service, tmp_path):
    output = tmp_path / 'airways.json'
    assert cli.main(['--airac', '2025-10-02', '-c', str(tmp_path / 'cache'), '-o', str(output), 'airways']) == 0

    records = json.loads(output.read_text(encoding='utf-8'))
    assert [r['designator'] for r in records] == ['L9', 'UN601']
    assert service.cache_dir == str(tmp_path / 'cache')


def test_fetch_failure(service):
    assert cli.main(['--airac', '2025-10-02', '--no-cache', 'airport', 'EGXX']) == 1


def test_airport_requires_icao(service):
    with pytest.raises(SystemExit):
        cli.main(['--no-cache', 'airport'])


def test_invalid_airac(service):
    with pytest.raises(SystemExit):
        cli.main(['--airac', 'next week', '--no-cache', 'navaids'])
