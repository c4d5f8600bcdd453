"""Tests for word and sentence translation.

Tests cover:
- Vowel-first, xr and consonant-sound words
- The q/qu edge cases
- Skipped words and their failure kinds
- Sentence tokenization and punctuation handling
- Background recording into the history
"""

from __future__ import annotations

import pytest

from gophertalk.history import TranslationHistory
from gophertalk.translation import (
    DEFAULT_CONTEXT,
    Context,
    FailureKind,
    InvalidWordError,
    NoRuleMatchedError,
    SentenceTranslationError,
    ShortFormError,
    VowelFirstRule,
    translate_sentence,
    translate_word,
)


class TestTranslateWord:
    """Tests for translate_word()."""

    @pytest.mark.parametrize(
        "word,expected",
        [
            ("apple", "gapple"),
            ("ear", "gear"),
            ("Orange", "gorange"),
            ("xriphone", "gexriphone"),
            ("XRay", "gexray"),
            ("context", "ontextcogo"),
            ("chewbacca", "ewbaccachogo"),
            ("chair", "airchogo"),
            ("square", "aresquogo"),
        ],
    )
    def test_rules(self, history, word, expected):
        assert translate_word(DEFAULT_CONTEXT, word, history=history) == expected

    def test_surrounding_whitespace_ignored(self, history):
        result = translate_word(DEFAULT_CONTEXT, "     squared     ", history=history)
        assert result == "aredsquogo"

    @pytest.mark.parametrize(
        "word,expected",
        [
            ("q", "qogo"),
            ("quake", "uakeqogo"),
            ("qu", "uqogo"),
            ("qqu", "qquogo"),
            ("sssqqquuu", "uusssqqquogo"),
            ("sqquare", "aresqquogo"),
        ],
    )
    def test_q_cases(self, history, word, expected):
        assert translate_word(DEFAULT_CONTEXT, word, history=history) == expected

    def test_empty_word_is_invalid(self, history):
        with pytest.raises(InvalidWordError) as exc_info:
            translate_word(DEFAULT_CONTEXT, "", history=history)
        assert exc_info.value.kind == FailureKind.INVALID_WORD

    def test_whitespace_only_is_invalid(self, history):
        with pytest.raises(InvalidWordError):
            translate_word(DEFAULT_CONTEXT, "   ", history=history)

    def test_short_form(self, history):
        with pytest.raises(ShortFormError) as exc_info:
            translate_word(DEFAULT_CONTEXT, "I'm", history=history)
        assert str(exc_info.value) == "I'm: is in short form"

    @pytest.mark.parametrize("word", ["woo   oord", "google.com"])
    def test_invalid_words(self, history, word):
        with pytest.raises(InvalidWordError) as exc_info:
            translate_word(DEFAULT_CONTEXT, word, history=history)
        assert exc_info.value.word == word
        assert str(exc_info.value) == f"{word}: must contain only letters a-z or A-Z"

    def test_no_rule_matched(self, history):
        """A context whose rules never match fails instead of returning ''."""
        context = Context(skip_rules=(), transform_rules=(VowelFirstRule(),))
        with pytest.raises(NoRuleMatchedError) as exc_info:
            translate_word(context, "chair", history=history)
        assert exc_info.value.kind == FailureKind.NO_RULE_MATCHED
        assert str(exc_info.value) == "chair: was not matched by any of the translators"

    def test_no_skip_rules(self, history):
        """Without skip rules, anything a transform rule accepts goes through."""
        context = Context(skip_rules=(), transform_rules=(VowelFirstRule(),))
        assert translate_word(context, "a.b", history=history) == "ga.b"

    def test_success_recorded_with_trimmed_key(self, history):
        translate_word(DEFAULT_CONTEXT, "  Apple ", history=history)
        history.drain()
        assert history.words.export() == [("Apple", "gapple")]
        assert len(history.sentences) == 0

    def test_failure_not_recorded(self, history):
        with pytest.raises(ShortFormError):
            translate_word(DEFAULT_CONTEXT, "don't", history=history)
        history.drain()
        assert len(history.words) == 0

    def test_default_history_is_process_wide(self):
        translate_word(DEFAULT_CONTEXT, "ear")
        shared = TranslationHistory.get_instance()
        shared.drain()
        assert shared.words.get("ear") == "gear"


class TestTranslateSentence:
    """Tests for translate_sentence()."""

    def test_simple_sentence(self, history):
        result = translate_sentence(DEFAULT_CONTEXT, "Hello world.", history=history)
        assert result == "ellohogo orldwogo."

    def test_punctuation_preserved(self, history):
        result = translate_sentence(
            DEFAULT_CONTEXT, "The apple is red!", history=history
        )
        assert result == "ethogo gapple gis edrogo!"

    def test_extra_spaces_collapsed(self, history):
        result = translate_sentence(
            DEFAULT_CONTEXT, "  Square   xray.  ", history=history
        )
        assert result == "aresquogo gexray."

    def test_single_word_sentence(self, history):
        result = translate_sentence(DEFAULT_CONTEXT, "quake?", history=history)
        assert result == "uakeqogo?"

    @pytest.mark.parametrize(
        "sentence",
        ["The quick brown fox jumps.", "Apple chair square xray!", "Is it?"],
    )
    def test_word_count_and_punctuation_kept(self, history, sentence):
        result = translate_sentence(DEFAULT_CONTEXT, sentence, history=history)
        assert len(result.split(" ")) == len(sentence.split())
        assert result[-1] == sentence[-1]

    def test_failing_word_aborts(self, history):
        with pytest.raises(SentenceTranslationError) as exc_info:
            translate_sentence(DEFAULT_CONTEXT, "I don't know.", history=history)

        error = exc_info.value
        assert error.kind == FailureKind.SENTENCE_FAILURE
        assert error.position == 1
        assert error.word == "don't"
        assert isinstance(error.cause, ShortFormError)
        assert str(error) == "Could not translate sentence: don't: is in short form"

    def test_last_word_checked_without_punctuation(self, history):
        with pytest.raises(SentenceTranslationError) as exc_info:
            translate_sentence(DEFAULT_CONTEXT, "Call 911.", history=history)
        assert exc_info.value.word == "911"
        assert isinstance(exc_info.value.cause, InvalidWordError)

    def test_empty_sentence(self, history):
        with pytest.raises(SentenceTranslationError) as exc_info:
            translate_sentence(DEFAULT_CONTEXT, "   ", history=history)
        assert isinstance(exc_info.value.cause, InvalidWordError)

    def test_sentence_recorded_not_words(self, history):
        translate_sentence(DEFAULT_CONTEXT, "Hello world.", history=history)
        history.drain()
        assert history.sentences.export() == [("Hello world.", "ellohogo orldwogo.")]
        assert len(history.words) == 0

    def test_failed_sentence_not_recorded(self, history):
        with pytest.raises(SentenceTranslationError):
            translate_sentence(DEFAULT_CONTEXT, "I'm here.", history=history)
        history.drain()
        assert len(history.sentences) == 0


class TestSentenceTranslationError:
    """Tests for SentenceTranslationError construction."""

    def test_wraps_word_failure(self):
        cause = InvalidWordError("911")
        error = SentenceTranslationError("Call 911.", 1, cause)

        assert str(error) == (
            "Could not translate sentence: 911: must contain only letters a-z or A-Z"
        )
        assert error.word == "911"
        assert error.reason == str(cause)
        assert error.sentence == "Call 911."
        assert error.position == 1
        assert error.cause is cause
        assert error.kind == FailureKind.SENTENCE_FAILURE
