from text_analyzer import __version__


def test_analyze_basic(client):
    res = client.post("/api/analyze", json={"text": "Hello. World! How are you?"})
    assert res.status_code == 200
    data = res.json()
    assert data["charCount"] == 26
    assert data["wordCount"] == 5
    assert data["sentenceCount"] == 3
    assert data["readingTime"] == "меньше минуты"
    assert data["frequentWords"] == [
        {"word": "are", "count": 1},
        {"word": "hello", "count": 1},
    ]


def test_analyze_with_custom_delimiter(client):
    res = client.post(
        "/api/analyze",
        json={"text": "Hello. World! How are you?", "delimiter": ","},
    )
    assert res.status_code == 200
    assert res.json()["sentenceCount"] == 1


def test_analyze_mapping_shape(make_client):
    client = make_client(frequent_words_shape="mapping")
    res = client.post("/api/analyze", json={"text": "the cat the dog the cat"})
    assert res.status_code == 200
    assert res.json()["frequentWords"] == [{"the": 3}, {"cat": 2}]


def test_analyze_english_locale(make_client):
    client = make_client(locale="en")
    res = client.post("/api/analyze", json={"text": "short text"})
    assert res.json()["readingTime"] == "less than a minute"


def test_blank_text_is_rejected(client):
    res = client.post("/api/analyze", json={"text": "   \n "})
    assert res.status_code == 400
    assert res.json() == {"error": "Текст не может быть пустым"}


def test_error_messages_follow_locale(make_client):
    client = make_client(locale="en")
    res = client.post("/api/analyze", json={"text": ""})
    assert res.status_code == 400
    assert res.json() == {"error": "Text must not be empty"}

    res = client.post(
        "/api/analyze",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.json() == {"error": "Invalid JSON format"}


def test_invalid_json_is_rejected(client):
    res = client.post(
        "/api/analyze",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Неверный JSON формат"}


def test_non_json_content_type_is_rejected(client):
    res = client.post(
        "/api/analyze",
        content='{"text":"hi"}',
        headers={"Content-Type": "text/plain"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Неверное тело запроса"}


def test_missing_text_field_is_rejected(client):
    res = client.post("/api/analyze", json={"delimiter": "."})
    assert res.status_code == 400
    assert "text" in res.json()["error"]


def test_text_over_limit_is_rejected(make_client):
    client = make_client(max_text_length=10)
    res = client.post("/api/analyze", json={"text": "this text is too long"})
    assert res.status_code == 413
    assert "10" in res.json()["error"]


def test_get_is_not_allowed(client):
    res = client.get("/api/analyze")
    assert res.status_code == 405
    assert "error" in res.json()


def test_cors_preflight(client):
    res = client.options(
        "/api/analyze",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"
    assert "POST" in res.headers["access-control-allow-methods"]


def test_cors_header_on_post(client):
    res = client.post(
        "/api/analyze",
        json={"text": "hi"},
        headers={"Origin": "http://localhost:3000"},
    )
    assert res.headers["access-control-allow-origin"] == "*"


def test_usage_page(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "POST /api/analyze" in res.text
    assert "8082" in res.text


def test_health(client):
    res = client.get("/health/")
    assert res.status_code == 200
    data = res.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__


def test_error_message_unknown_locale_falls_back_to_english():
    from text_analyzer.messages import error_message

    assert error_message("empty_text", "de") == "Text must not be empty"
    assert error_message("text_too_long", "ru", limit=5) == "Текст слишком длинный (максимум 5 символов)"
