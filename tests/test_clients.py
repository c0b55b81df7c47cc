"""
Tests for the vendor adapters, with the SDK object swapped for a recorder.
"""

from types import SimpleNamespace

import pytest

from server.ai.clients import CompletionOptions, GeminiClient, OpenAIClient
from server.ai.errors import ProviderCallError, ProviderResponseError


class Recorder:
    """Callable that records keyword arguments and returns (or raises) a preset value."""

    def __init__(self, result=None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.kwargs: dict = {}

    def __call__(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        return self.result


def openai_reply(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def openai_client(create: Recorder) -> OpenAIClient:
    client = OpenAIClient("test-key", model="gpt-test")
    client.client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    return client


def gemini_client(generate: Recorder) -> GeminiClient:
    client = GeminiClient("test-key", model="gemini-test")
    client.client = SimpleNamespace(models=SimpleNamespace(generate_content=generate))
    return client


OPTIONS = CompletionOptions(temperature=0.2, max_tokens=256, system_prompt="Be terse.")


# -----------------------------------------------------------------------------
# OpenAI
# -----------------------------------------------------------------------------

class TestOpenAIClient:
    def test_forwards_options(self):
        create = Recorder(openai_reply('  {"order": []}  '))
        text = openai_client(create).complete("seed these", OPTIONS)

        assert text == '{"order": []}'
        assert create.kwargs["model"] == "gpt-test"
        assert create.kwargs["temperature"] == 0.2
        assert create.kwargs["max_tokens"] == 256
        assert create.kwargs["messages"] == [
            {"role": "system", "content": "Be terse."},
            {"role": "user", "content": "seed these"},
        ]

    def test_no_system_message_without_prompt(self):
        create = Recorder(openai_reply("ok"))
        openai_client(create).complete("hi", CompletionOptions())
        assert create.kwargs["messages"] == [{"role": "user", "content": "hi"}]

    def test_sdk_error_becomes_call_error(self):
        create = Recorder(error=RuntimeError("rate limited"))
        with pytest.raises(ProviderCallError) as exc_info:
            openai_client(create).complete("hi", OPTIONS)
        assert exc_info.value.provider == "openai"
        assert "rate limited" in str(exc_info.value)

    @pytest.mark.parametrize("reply", [openai_reply(None), openai_reply("   "), SimpleNamespace(choices=[])])
    def test_empty_completion_is_response_error(self, reply):
        with pytest.raises(ProviderResponseError):
            openai_client(Recorder(reply)).complete("hi", OPTIONS)


# -----------------------------------------------------------------------------
# Gemini
# -----------------------------------------------------------------------------

class TestGeminiClient:
    def test_forwards_options(self):
        generate = Recorder(SimpleNamespace(text="answer\n"))
        text = gemini_client(generate).complete("seed these", OPTIONS)

        assert text == "answer"
        assert generate.kwargs["model"] == "gemini-test"
        assert generate.kwargs["contents"] == "seed these"
        assert generate.kwargs["config"] == {
            "temperature": 0.2,
            "max_output_tokens": 256,
            "system_instruction": "Be terse.",
        }

    def test_no_system_instruction_without_prompt(self):
        generate = Recorder(SimpleNamespace(text="ok"))
        gemini_client(generate).complete("hi", CompletionOptions())
        assert "system_instruction" not in generate.kwargs["config"]

    def test_sdk_error_becomes_call_error(self):
        generate = Recorder(error=ConnectionError("reset by peer"))
        with pytest.raises(ProviderCallError) as exc_info:
            gemini_client(generate).complete("hi", OPTIONS)
        assert exc_info.value.provider == "gemini"

    @pytest.mark.parametrize("text", [None, "", "  \n"])
    def test_empty_completion_is_response_error(self, text):
        with pytest.raises(ProviderResponseError):
            gemini_client(Recorder(SimpleNamespace(text=text))).complete("hi", OPTIONS)
