from __future__ import annotations

import pytest
import requests
from fastapi.testclient import TestClient

from media_scraper.main import app

MEDIA_PAGE = """
<html>
  <head><title>Episodes</title></head>
  <body>
    <video src="intro.mp4"></video>
    <a href="intro.mp4">Download intro</a>
    <a href="readme.txt">Read me</a>
    <audio controls>
      <source src="/audio/ep1.mp3?token=abc">
      <source src="//cdn.s.test/ep1.ogg">
      <track src="captions.vtt" kind="subtitles">
    </audio>
    <a href="https://other.test/ep2.flac">Episode 2</a>
    <a>no href</a>
    <img src="cover.mp4">
  </body>
</html>
"""


class FakeResponse:
    """Stand-in for requests.Response with only what the fetcher reads."""

    def __init__(self, status_code: int = 200, content: bytes = b"", charset: str | None = "utf-8"):
        self.status_code = status_code
        self.content = content
        content_type = f"text/html; charset={charset}" if charset else "text/html"
        self.headers = {"Content-Type": content_type}


@pytest.fixture()
def media_page() -> str:
    return MEDIA_PAGE


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


class PageServer:
    """Answers requests.get from an in-memory url -> FakeResponse table."""

    def __init__(self):
        self.pages: dict[str, FakeResponse] = {}
        self.calls: list[str] = []

    def add(self, url: str, body: str | bytes, status: int = 200, charset: str | None = "utf-8") -> None:
        content = body.encode(charset or "utf-8") if isinstance(body, str) else body
        self.pages[url] = FakeResponse(status, content, charset)

    def get(self, url, headers=None, timeout=None, allow_redirects=True):
        self.calls.append(url)
        if url not in self.pages:
            raise requests.ConnectionError(f"no route to {url}")
        return self.pages[url]


@pytest.fixture()
def page_server(monkeypatch) -> PageServer:
    server = PageServer()
    monkeypatch.setattr("media_scraper.crawler.fetcher.requests.get", server.get)
    return server
