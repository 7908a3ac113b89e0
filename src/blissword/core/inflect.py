"""
Gloss inflection for indicators.

Adding a plural indicator turns "cat" into a plural gloss, removing it turns
it back. Two inflectors:

  SuffixInflector   deterministic, appends " (plural)" style phrases
  OpenAIInflector   grammatical forms via LLM ("cat" -> "cats")
"""

import json
import re
from abc import ABC, abstractmethod

from openai import OpenAI


PLURAL_INDICATORS = [9011, 28044, 28046]

# action/infinitive, future, past, present, command
VERB_INDICATORS = [8993, 8999, 9004, 24670, 24807]

INDICATOR_SUFFIXES = {
    8993: "action",
    8998: "description",
    8999: "future action",
    9004: "past action",
    9011: "plural",
    24670: "present action",
    24807: "command",
    28044: "plural",
    28046: "plural",
}

_SUFFIX_PATTERN = re.compile(
    r"\s*\((?:" + "|".join(re.escape(s) for s in sorted(set(INDICATOR_SUFFIXES.values()), key=len, reverse=True)) + r")\)\s*$"
)


def indicator_suffix(indicator_id: int) -> str | None:
    phrase = INDICATOR_SUFFIXES.get(indicator_id)
    return f" ({phrase})" if phrase else None


def strip_indicator_suffix(gloss: str) -> str | None:
    """Gloss without a trailing indicator phrase, or None if there is none."""
    match = _SUFFIX_PATTERN.search(gloss)
    if not match:
        return None
    return gloss[:match.start()]


class Inflector(ABC):
    @abstractmethod
    def inflect(self, word: str, indicator_id: int, added: bool = True) -> str:
        """
        Return word in the form the indicator calls for.

        Args:
            word: the gloss to change
            indicator_id: BCI-AV ID of the indicator being added or removed
            added: False when the indicator is being removed

        Returns the word unchanged when no change applies.
        """
        pass


class SuffixInflector(Inflector):
    def inflect(self, word: str, indicator_id: int, added: bool = True) -> str:
        if added:
            suffix = indicator_suffix(indicator_id)
            if suffix is None or word.endswith(suffix):
                return word
            return word + suffix
        stripped = strip_indicator_suffix(word)
        return word if stripped is None else stripped


INFLECT_SYSTEM_PROMPT = """You change English words to a grammatical form.

You are given a word or short phrase and the form wanted.
Return only the changed word or phrase, keep anything you do not need to change.
If you cannot change it, return it unchanged.

Respond with JSON: {"word": "<changed>"}

Example:
Input: {"word": "cat", "form": "plural"}
Output: {"word": "cats"}
"""

_FORMS_ADDED = {
    8993: "infinitive, starting with 'to'",
    8999: "future tense",
    9004: "past tense",
    24670: "present tense",
    24807: "present tense",
}


def describe_form(indicator_id: int, added: bool) -> str | None:
    if indicator_id in PLURAL_INDICATORS:
        return "plural" if added else "singular"
    if indicator_id in VERB_INDICATORS:
        # without its verb indicator a word reads as a gerund: "walk" -> "walking"
        return _FORMS_ADDED[indicator_id] if added else "gerund"
    return None


class OpenAIInflector(Inflector):
    def __init__(self, openai_client: OpenAI | None = None, model: str = "gpt-4o-mini"):
        self.client = openai_client or OpenAI()
        self.model = model

    def inflect(self, word: str, indicator_id: int, added: bool = True) -> str:
        form = describe_form(indicator_id, added)
        if form is None or not word.strip():
            return word

        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": INFLECT_SYSTEM_PROMPT},
                {"role": "user", "content": json.dumps({"word": word, "form": form})},
            ],
            response_format={"type": "json_object"},
        )

        result = json.loads(response.choices[0].message.content)
        changed = str(result.get("word", "")).strip()
        # fall back to the input when the model has nothing
        return changed or word
