# text_analyzer/services/reading_time.py
"""
Reading-time estimation and the human-readable labels it produces.

Two speed models are available:
- "adaptive": base speed of 200 wpm scaled by 5 / average word length,
  clamped to [100, 300] wpm.
- "fixed": a flat 200 wpm.

Labels are locale data. Each locale maps a rounded minute count to one of
three plural forms ("one", "few", "many").
"""
import math
from dataclasses import dataclass
from typing import Callable, Dict

BASE_WORDS_PER_MINUTE = 200.0
BASELINE_WORD_LENGTH = 5.0
MIN_WORDS_PER_MINUTE = 100.0
MAX_WORDS_PER_MINUTE = 300.0

READING_MODELS = ("adaptive", "fixed")


# ----------------------------
# Plural rules
# ----------------------------
def russian_plural_form(n: int) -> str:
    """Slavic plural class for n: 1, 21, 101 -> one; 2-4, 22-24 -> few; rest -> many."""
    n = abs(n)
    if 11 <= n % 100 <= 19:
        return "many"
    last_digit = n % 10
    if last_digit == 1:
        return "one"
    if 2 <= last_digit <= 4:
        return "few"
    return "many"


def english_plural_form(n: int) -> str:
    return "one" if abs(n) == 1 else "many"


@dataclass(frozen=True)
class MinuteLabels:
    plural_rule: Callable[[int], str]
    forms: Dict[str, str]
    zero: str
    under_one: str

    def format(self, minutes: int) -> str:
        if minutes == 0:
            return self.zero
        return f"{minutes} {self.forms[self.plural_rule(minutes)]}"


LOCALES: Dict[str, MinuteLabels] = {
    "ru": MinuteLabels(
        plural_rule=russian_plural_form,
        forms={"one": "минута", "few": "минуты", "many": "минут"},
        zero="0 минут",
        under_one="меньше минуты",
    ),
    "en": MinuteLabels(
        plural_rule=english_plural_form,
        # English has no "few" class; keep the key so every rule resolves
        forms={"one": "minute", "few": "minutes", "many": "minutes"},
        zero="0 minutes",
        under_one="less than a minute",
    ),
}


def get_labels(locale: str) -> MinuteLabels:
    try:
        return LOCALES[locale]
    except KeyError:
        raise ValueError(
            f"Unsupported locale '{locale}'. Expected one of: {', '.join(sorted(LOCALES))}"
        ) from None


# ----------------------------
# Speed models
# ----------------------------
def adaptive_words_per_minute(char_count: int, word_count: int) -> float:
    """Scale the base speed inversely with average word length, clamped to [100, 300]."""
    average_word_length = char_count / word_count
    speed = BASE_WORDS_PER_MINUTE * (BASELINE_WORD_LENGTH / average_word_length)
    return min(max(speed, MIN_WORDS_PER_MINUTE), MAX_WORDS_PER_MINUTE)


def fixed_words_per_minute(char_count: int, word_count: int) -> float:
    return BASE_WORDS_PER_MINUTE


_SPEED_MODELS: Dict[str, Callable[[int, int], float]] = {
    "adaptive": adaptive_words_per_minute,
    "fixed": fixed_words_per_minute,
}


def get_speed_model(name: str) -> Callable[[int, int], float]:
    try:
        return _SPEED_MODELS[name]
    except KeyError:
        raise ValueError(
            f"Unsupported reading model '{name}'. Expected one of: {', '.join(READING_MODELS)}"
        ) from None


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_minutes(char_count: int, word_count: int, model: str = "adaptive") -> float:
    """Return the raw (unrounded) reading time in minutes. Zero words read in zero minutes."""
    if word_count <= 0:
        return 0.0
    speed = get_speed_model(model)(char_count, word_count)
    return word_count / speed


def format_reading_time(
    char_count: int,
    word_count: int,
    model: str = "adaptive",
    locale: str = "ru",
) -> str:
    labels = get_labels(locale)
    if word_count <= 0:
        return labels.zero

    minutes = estimate_minutes(char_count, word_count, model)
    if minutes < 1:
        return labels.under_one
    return labels.format(round_half_up(minutes))
