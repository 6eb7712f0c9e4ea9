# text_analyzer/services/analyzer.py
"""
Core text statistics. Everything here is a pure computation over one string:
no I/O, no shared mutable state, safe to call from any worker thread.
"""
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from text_analyzer.services.reading_time import (
    READING_MODELS,
    format_reading_time,
    get_labels,
)

# A maximal run of terminators counts as a single boundary.
_SENTENCE_BOUNDARY_RE = re.compile(r"[.!?]+")

# Trimmed from both ends of a word before frequency counting.
WORD_TRIM_CHARS = ".,!?;:\"'()[]{}"

DEFAULT_TOP_N = 2


@dataclass(frozen=True)
class WordFrequency:
    word: str
    count: int


@dataclass(frozen=True)
class AnalysisResult:
    char_count: int = 0
    word_count: int = 0
    sentence_count: int = 0
    frequent_words: Tuple[WordFrequency, ...] = field(default_factory=tuple)
    reading_time: str = ""


@dataclass(frozen=True)
class AnalyzerConfig:
    top_n: int = DEFAULT_TOP_N
    reading_model: str = "adaptive"
    locale: str = "ru"

    def __post_init__(self):
        if self.top_n < 0:
            raise ValueError("top_n must be >= 0")
        if self.reading_model not in READING_MODELS:
            raise ValueError(
                f"Unsupported reading model '{self.reading_model}'. "
                f"Expected one of: {', '.join(READING_MODELS)}"
            )
        # raises ValueError for unknown locales
        get_labels(self.locale)


# ----------------------------
# Sub-routines
# ----------------------------
def extract_words(text: str) -> List[str]:
    return text.split()


def count_sentences(text: str, delimiter: str = "") -> int:
    """
    Count non-blank segments between sentence boundaries.

    With an empty delimiter, boundaries are runs of '.', '!' and '?'.
    Otherwise the text is split on literal occurrences of the delimiter.
    """
    if delimiter:
        segments = text.split(delimiter)
    else:
        segments = _SENTENCE_BOUNDARY_RE.split(text)
    return sum(1 for segment in segments if segment.strip())


def clean_word(word: str) -> str:
    """Lower-case and trim punctuation from the ends only ("don't" keeps its apostrophe)."""
    return word.lower().strip(WORD_TRIM_CHARS)


def count_word_frequencies(words: Iterable[str]) -> Counter:
    frequencies: Counter = Counter()
    for word in words:
        cleaned = clean_word(word)
        if cleaned:
            frequencies[cleaned] += 1
    return frequencies


def top_words(frequencies: Counter, n: int = DEFAULT_TOP_N) -> Tuple[WordFrequency, ...]:
    """Most frequent words first; ties go to the lexicographically smaller word."""
    ranked = sorted(frequencies.items(), key=lambda item: (-item[1], item[0]))
    return tuple(WordFrequency(word=word, count=count) for word, count in ranked[:n])


# ----------------------------
# Analyzer
# ----------------------------
class TextAnalyzer:
    """Computes AnalysisResult values using a fixed AnalyzerConfig."""

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()

    def analyze(self, text: Optional[str], delimiter: Optional[str] = "") -> AnalysisResult:
        text = text or ""
        delimiter = delimiter or ""

        words = extract_words(text)
        char_count = len(text)
        word_count = len(words)

        return AnalysisResult(
            char_count=char_count,
            word_count=word_count,
            sentence_count=count_sentences(text, delimiter),
            frequent_words=top_words(count_word_frequencies(words), self.config.top_n),
            reading_time=format_reading_time(
                char_count,
                word_count,
                model=self.config.reading_model,
                locale=self.config.locale,
            ),
        )


_default_analyzer = TextAnalyzer()


def analyze(text: Optional[str], delimiter: Optional[str] = "") -> AnalysisResult:
    """Analyze text with the default configuration (adaptive speed, Russian labels, top 2)."""
    return _default_analyzer.analyze(text, delimiter)
