"""Skip and transform rules for gopher translation.

Skip rules reject words that cannot be translated. Transform rules turn an
accepted word into its gopher form. Both are plain capabilities with a
single method so alternate rule sets can be assembled into a ``Context``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from gophertalk.translation.errors import (
    InvalidWordError,
    ShortFormError,
    TranslationError,
)

VOWELS = "aeiou"
CONSONANTS = "bcdfghjklmnpqrstvwxzy"

GOPHER_SUFFIX = "ogo"

_SHORT_FORM_PATTERN = re.compile(r"[a-zA-Z]'[a-z]")
_LETTERS_ONLY_PATTERN = re.compile(r"[a-zA-Z]+")


@runtime_checkable
class SkipRule(Protocol):
    """Rejects words before any transformation is attempted."""

    def evaluate(self, word: str) -> Optional[TranslationError]:
        """Return a failure if the word must be skipped, else None."""
        ...


@runtime_checkable
class TransformRule(Protocol):
    """Produces the gopher form of a word, if the rule applies."""

    def attempt(self, word: str) -> Optional[str]:
        """Return the translated word, or None if the rule does not apply."""
        ...


# --- Skip rules ---


class ShortFormSkipRule:
    """Skip words in short form, e.g. don't, I'm."""

    def evaluate(self, word: str) -> Optional[TranslationError]:
        if _SHORT_FORM_PATTERN.search(word):
            return ShortFormError(word)
        return None


class InvalidWordSkipRule:
    """Skip words which are not made of letters only."""

    def evaluate(self, word: str) -> Optional[TranslationError]:
        if _LETTERS_ONLY_PATTERN.fullmatch(word) is None:
            return InvalidWordError(word)
        return None


# --- Transform rules ---


class VowelFirstRule:
    """Words starting with a vowel get a "g" prefix: apple => gapple."""

    def attempt(self, word: str) -> Optional[str]:
        lowered = word.lower()
        if lowered and lowered[0] in VOWELS:
            return "g" + lowered
        return None


class XRFirstRule:
    """Words starting with "xr" get a "ge" prefix: xray => gexray."""

    def attempt(self, word: str) -> Optional[str]:
        lowered = word.lower()
        if lowered.startswith("xr"):
            return "ge" + lowered
        return None


class ConsonantSoundRule:
    """Move the leading consonant sound to the end and add "ogo".

    chair => airchogo. When the consonant sound is followed by "qu" the
    "qu" moves with it: square => aresquogo.
    """

    def attempt(self, word: str) -> Optional[str]:
        lowered = word.lower()
        prefix = extract_consonant_prefix(lowered)
        if not prefix:
            return None

        prefix_qu = prefix + "qu"
        if lowered.startswith(prefix_qu):
            prefix = prefix_qu

        return lowered[len(prefix) :] + prefix + GOPHER_SUFFIX


def extract_consonant_prefix(word: str) -> str:
    """Extract the leading consonant sound of a lower-cased word.

    A "q" followed by "u" ends the prefix so the "qu" can travel as a unit,
    except when nothing has been collected yet (quake => q). Any other "q"
    is taken and the character after it is examined again, which walks runs
    like "qqu" one "q" at a time.

    Args:
        word: Lower-cased word

    Returns:
        The consonant prefix, possibly empty
    """
    prefix: list[str] = []
    i = 0
    length = len(word)

    while i < length:
        ch = word[i]

        if ch == "q":
            nxt = word[i + 1] if i + 1 < length else None
            if nxt is None or (nxt == "u" and not prefix):
                prefix.append("q")
                break
            if nxt == "u":
                break
            prefix.append("q")
            i += 1
            continue

        if ch not in CONSONANTS:
            break
        prefix.append(ch)
        i += 1

    return "".join(prefix)


@dataclass(frozen=True)
class Context:
    """Ordered rule sets used by the translation pipeline.

    Skip rules run first and the first failure aborts. Transform rules run
    in order and the first non-empty result wins.
    """

    skip_rules: tuple[SkipRule, ...]
    transform_rules: tuple[TransformRule, ...]


DEFAULT_CONTEXT = Context(
    skip_rules=(
        ShortFormSkipRule(),
        InvalidWordSkipRule(),
    ),
    transform_rules=(
        VowelFirstRule(),
        XRFirstRule(),
        ConsonantSoundRule(),
    ),
)
