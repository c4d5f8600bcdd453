"""Word and sentence translation pipeline.

``translate_word`` runs the skip rules, then the transform rules, of the
given context. ``translate_sentence`` translates every word of a sentence
and keeps its trailing punctuation mark. Successful translations are
handed to the history in the background; the caller never waits for it.
"""

from __future__ import annotations

import logging
from typing import Optional

from gophertalk.history.recorder import TranslationHistory
from gophertalk.translation.errors import (
    InvalidWordError,
    NoRuleMatchedError,
    SentenceTranslationError,
    TranslationError,
)
from gophertalk.translation.rules import Context

logger = logging.getLogger(__name__)


def translate_word(
    context: Context,
    word: str,
    history: Optional[TranslationHistory] = None,
) -> str:
    """Translate a single English word to gopher.

    Surrounding whitespace is ignored.

    Args:
        context: Rule sets to apply
        word: English word
        history: History to record into (default: process-wide history)

    Returns:
        The gopher word

    Raises:
        TranslationError: If the word was skipped or no rule matched
    """
    word = word.strip()
    try:
        gopher_word = _translate(context, word)
    except TranslationError as e:
        logger.info(f"Word not translated ({e.kind.value}): {e}")
        raise

    logger.debug(f"Translated word: {word!r} -> {gopher_word!r}")
    (history or TranslationHistory.get_instance()).record_word(word, gopher_word)
    return gopher_word


def translate_sentence(
    context: Context,
    sentence: str,
    history: Optional[TranslationHistory] = None,
) -> str:
    """Translate a sentence word by word.

    Words are separated by single spaces; runs of spaces are collapsed. The
    last character of the final word is taken as the sentence's punctuation
    mark and is carried over unchanged after the last translated word.

    Raises:
        SentenceTranslationError: On the first word that fails; no partial
            translation is returned
    """
    words = [w for w in sentence.split(" ") if w]

    if not words:
        error = SentenceTranslationError(sentence, 0, InvalidWordError(""))
        logger.info(f"Sentence not translated: {error}")
        raise error

    # Trailing punctuation mark travels with the sentence, not the last word
    last = words[-1]
    punctuation = last[-1]
    words[-1] = last[:-1]

    translated: list[str] = []
    for position, word in enumerate(words):
        try:
            translated.append(_translate(context, word))
        except TranslationError as e:
            error = SentenceTranslationError(sentence, position, e)
            logger.info(f"Sentence not translated at word {position}: {error}")
            raise error from e

    gopher_sentence = " ".join(translated) + punctuation

    logger.debug(f"Translated sentence: {sentence!r} -> {gopher_sentence!r}")
    (history or TranslationHistory.get_instance()).record_sentence(
        sentence, gopher_sentence
    )
    return gopher_sentence


def _translate(context: Context, word: str) -> str:
    for rule in context.skip_rules:
        failure = rule.evaluate(word)
        if failure is not None:
            raise failure

    for rule in context.transform_rules:
        gopher_word = rule.attempt(word)
        if gopher_word:
            return gopher_word

    raise NoRuleMatchedError(word)
