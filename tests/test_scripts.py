from script.fetch_wordlist import extract_words, fetch_words


def test_extract_words_plain_text():
    body = "Crane\nslate\nCRANE\ncranes\nabc\n"
    assert extract_words(body) == ["crane", "slate"]


def test_extract_words_html():
    body = "<html><body><p>Crane SLATE</p><p>crane words abc</p></body></html>"
    assert extract_words(body, "text/html; charset=utf-8") == ["crane", "slate", "words"]


def test_fetch_words(monkeypatch):
    class FakeResponse:
        text = "canoe\ncrane\n"
        headers = {"Content-Type": "text/plain"}

        def raise_for_status(self):
            pass

    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return FakeResponse()

    monkeypatch.setattr("script.fetch_wordlist.requests.get", fake_get)
    assert fetch_words("https://example.org/words.txt") == ["canoe", "crane"]
    assert calls == ["https://example.org/words.txt"]
