# text_analyzer/messages.py
# Client-facing error texts, keyed by the same locale setting as the reading-time labels.

ERROR_MESSAGES = {
    "ru": {
        "empty_text": "Текст не может быть пустым",
        "text_too_long": "Текст слишком длинный (максимум {limit} символов)",
        "invalid_json": "Неверный JSON формат",
        "invalid_body": "Неверное тело запроса",
    },
    "en": {
        "empty_text": "Text must not be empty",
        "text_too_long": "Text is too long (limit is {limit} characters)",
        "invalid_json": "Invalid JSON format",
        "invalid_body": "Invalid request body",
    },
}


def error_message(key: str, locale: str = "ru", **params) -> str:
    """Look up an error text; unknown locales fall back to English."""
    messages = ERROR_MESSAGES.get(locale, ERROR_MESSAGES["en"])
    return messages[key].format(**params)
