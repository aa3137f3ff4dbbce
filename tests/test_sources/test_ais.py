from datetime import date
from unittest.mock import MagicMock

import pytest

from eaip.parts import NAVAIDS
from eaip.sources.ais import ALL, GB, NL, get_service
from eaip.sources.eaip_web import EAIPWebSource
from eaip.utils.airac import Airac


def test_get_service():
    assert get_service('GB') is GB
    assert get_service('nl') is NL
    assert set(ALL) == {'GB', 'NL'}


def test_unknown_service():
    with pytest.raises(ValueError, match='XX'):
        get_service('XX')


def test_source_uses_service_settings():
    session = MagicMock()
    session.headers = {}
    source = GB.source(session=session)

    assert isinstance(source, EAIPWebSource)
    assert source.cache_path is None
    assert (source.generate_url(Airac(date(2025, 10, 2)), NAVAIDS)
            == 'https://www.aurora.nats.co.uk/htmlAIP/Publications/2025-10-02-AIRAC/html/eAIP/EG-ENR-4.1-en-GB.html')


def test_date_offset():
    session = MagicMock()
    session.headers = {}
    source = NL.source(session=session)
    assert (source.generate_url(Airac(date(2025, 10, 2)), NAVAIDS)
            == 'https://eaip.lvnl.nl/2025-09-18-AIRAC/html/eAIP/EH-ENR-4.1-en-GB.html')
