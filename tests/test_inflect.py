"""Tests for indicator gloss inflection."""

import json
import os
from types import SimpleNamespace

import pytest

from blissword.core.inflect import (
    OpenAIInflector, SuffixInflector,
    describe_form, indicator_suffix, strip_indicator_suffix,
)


def test_suffixes():
    assert indicator_suffix(9011) == " (plural)"
    assert indicator_suffix(9004) == " (past action)"
    assert indicator_suffix(17720) is None


def test_strip_suffix():
    assert strip_indicator_suffix("cat (plural)") == "cat"
    assert strip_indicator_suffix("walk (past action)") == "walk"
    assert strip_indicator_suffix("cat") is None
    assert strip_indicator_suffix("big (red) cat") is None


def test_suffix_inflector():
    inflector = SuffixInflector()
    assert inflector.inflect("cat", 9011) == "cat (plural)"
    assert inflector.inflect("cat (plural)", 9011) == "cat (plural)"
    assert inflector.inflect("cat (plural)", 9011, added=False) == "cat"
    assert inflector.inflect("cat", 9011, added=False) == "cat"
    # indicator with no phrase
    assert inflector.inflect("cat", 24665) == "cat"


def test_describe_form():
    assert describe_form(9011, True) == "plural"
    assert describe_form(9011, False) == "singular"
    assert describe_form(9004, True) == "past tense"
    assert describe_form(9004, False) == "gerund"
    assert describe_form(8998, True) is None


class FakeCompletions:
    def __init__(self, reply):
        self.reply = reply
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        message = SimpleNamespace(content=json.dumps(self.reply))
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(reply):
    completions = FakeCompletions(reply)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


def test_openai_inflector_uses_model_reply():
    client, completions = fake_client({"word": "cats"})
    inflector = OpenAIInflector(client, model="test-model")
    assert inflector.inflect("cat", 9011) == "cats"

    call = completions.calls[0]
    assert call["model"] == "test-model"
    assert json.loads(call["messages"][1]["content"]) == {"word": "cat", "form": "plural"}


def test_openai_inflector_falls_back_to_word():
    client, _ = fake_client({})
    assert OpenAIInflector(client).inflect("cat", 9011) == "cat"


def test_openai_inflector_skips_other_indicators():
    client, completions = fake_client({"word": "nope"})
    assert OpenAIInflector(client).inflect("cat", 8998) == "cat"
    assert completions.calls == []


@pytest.mark.skipif(not os.environ.get("OPENAI_API_KEY"), reason="OPENAI_API_KEY not set")
def test_openai_inflector_live():
    inflector = OpenAIInflector()
    assert inflector.inflect("cat", 9011).lower() == "cats"
