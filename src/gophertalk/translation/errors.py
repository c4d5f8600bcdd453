"""Translation failures.

Every failure is a ValueError subclass carrying the offending word and a
``kind`` so callers can branch on the failure without string matching.
"""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Kinds of translation failure."""

    SHORT_FORM = "short_form"
    INVALID_WORD = "invalid_word"
    NO_RULE_MATCHED = "no_rule_matched"
    SENTENCE_FAILURE = "sentence_failure"


class TranslationError(ValueError):
    """Base class for all translation failures."""

    kind: FailureKind

    def __init__(self, word: str, reason: str, message: str | None = None):
        self.word = word
        self.reason = reason
        super().__init__(message or f"{word}: {reason}")


class ShortFormError(TranslationError):
    """Word is a contraction such as ``don't`` or ``I'm``."""

    kind = FailureKind.SHORT_FORM

    def __init__(self, word: str):
        super().__init__(word, "is in short form")


class InvalidWordError(TranslationError):
    """Word is empty or contains anything besides ASCII letters."""

    kind = FailureKind.INVALID_WORD

    def __init__(self, word: str):
        super().__init__(word, "must contain only letters a-z or A-Z")


class NoRuleMatchedError(TranslationError):
    """No transform rule produced a translation."""

    kind = FailureKind.NO_RULE_MATCHED

    def __init__(self, word: str):
        super().__init__(word, "was not matched by any of the translators")


class SentenceTranslationError(TranslationError):
    """A word inside a sentence could not be translated.

    Attributes:
        sentence: The sentence as given by the caller
        position: Zero-based index of the failing token
        cause: The word-level failure
    """

    kind = FailureKind.SENTENCE_FAILURE

    def __init__(self, sentence: str, position: int, cause: TranslationError):
        self.sentence = sentence
        self.position = position
        self.cause = cause
        super().__init__(
            cause.word,
            str(cause),
            message=f"Could not translate sentence: {cause}",
        )
