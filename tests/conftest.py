import pytest

from server.models import Participant
from tests.helpers import make_participant


@pytest.fixture
def mixed_field() -> list[Participant]:
    return [
        make_participant("A", team="t1", win_rate=90),
        make_participant("B", team="t1", win_rate=80),
        make_participant("C", team="t2", win_rate=70),
        make_participant("D", win_rate=60),
    ]


@pytest.fixture(autouse=True)
def _no_provider_keys(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
