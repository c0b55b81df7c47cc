"""Shared stand-ins and builders for the test suites."""

from server.ai.clients.base import CompletionOptions
from server.ai.errors import ProviderCallError
from server.models import Participant, ParticipantStats


class FakeProvider:
    """Canned-text stand-in for a vendor client."""

    def __init__(self, reply: str = "", name: str = "openai"):
        self.name = name
        self.reply = reply
        self.calls: list[tuple[str, CompletionOptions]] = []

    def complete(self, prompt: str, options: CompletionOptions) -> str:
        self.calls.append((prompt, options))
        return self.reply


class FailingProvider(FakeProvider):
    def complete(self, prompt: str, options: CompletionOptions) -> str:
        self.calls.append((prompt, options))
        raise ProviderCallError(self.name, "connection reset")


def make_participant(pid: str, team: str | None = None, win_rate: float | None = None) -> Participant:
    stats = ParticipantStats(winRate=win_rate) if win_rate is not None else None
    return Participant(
        id=pid,
        name=f"Player {pid}",
        teamId=team,
        teamName=f"Team {team}" if team else None,
        stats=stats,
    )
