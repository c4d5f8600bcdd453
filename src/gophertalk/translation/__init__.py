"""English to gopher translation rules and pipeline."""

from gophertalk.translation.errors import (
    FailureKind,
    TranslationError,
    ShortFormError,
    InvalidWordError,
    NoRuleMatchedError,
    SentenceTranslationError,
)
from gophertalk.translation.rules import (
    Context,
    DEFAULT_CONTEXT,
    SkipRule,
    TransformRule,
    ShortFormSkipRule,
    InvalidWordSkipRule,
    VowelFirstRule,
    XRFirstRule,
    ConsonantSoundRule,
    extract_consonant_prefix,
)
from gophertalk.translation.pipeline import translate_word, translate_sentence

__all__ = [
    "FailureKind",
    "TranslationError",
    "ShortFormError",
    "InvalidWordError",
    "NoRuleMatchedError",
    "SentenceTranslationError",
    "Context",
    "DEFAULT_CONTEXT",
    "SkipRule",
    "TransformRule",
    "ShortFormSkipRule",
    "InvalidWordSkipRule",
    "VowelFirstRule",
    "XRFirstRule",
    "ConsonantSoundRule",
    "extract_consonant_prefix",
    "translate_word",
    "translate_sentence",
]
