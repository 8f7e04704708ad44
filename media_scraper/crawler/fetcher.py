import codecs
import logging

import requests

from ..config import settings
from ..error_policy import DecodeFailure, FetchFailure, describe_status, is_success

logger = logging.getLogger(__name__)


def fetch_page(url: str, timeout: int | None = None) -> str:
    """
    Return the decoded body of ``url``.

    Raises FetchFailure on network errors or a non-2xx status and
    DecodeFailure when the body is not valid text in its declared charset.
    """
    timeout = timeout if timeout is not None else settings.FETCH_TIMEOUT
    try:
        resp = requests.get(
            url,
            headers={"User-Agent": settings.USER_AGENT},
            timeout=timeout,
            allow_redirects=True,
        )
    except requests.RequestException as exc:
        logger.warning("[FETCH] error fetching %s: %s", url, exc)
        raise FetchFailure(url, str(exc)) from exc

    if not is_success(resp.status_code):
        note = describe_status(resp.status_code)
        logger.warning("[FETCH] %s returned %s (%s)", url, resp.status_code, note)
        raise FetchFailure(url, f"HTTP {resp.status_code} {note}", status=resp.status_code)

    charset = declared_charset(resp.headers.get("Content-Type"))
    return decode_body(url, resp.content, charset)


def declared_charset(content_type: str | None) -> str | None:
    """The ``charset`` parameter of a Content-Type header, if any."""
    for param in (content_type or "").split(";")[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset":
            return value.strip().strip("\"'") or None
    return None


def decode_body(url: str, body: bytes, encoding: str | None) -> str:
    """Strict decode; an undeclared charset means UTF-8."""
    charset = encoding or "utf-8"
    try:
        codecs.lookup(charset)
    except LookupError:
        logger.debug("[FETCH] unknown charset %r for %s, using utf-8", charset, url)
        charset = "utf-8"
    try:
        return body.decode(charset)
    except UnicodeDecodeError as exc:
        logger.warning("[FETCH] cannot decode %s as %s: %s", url, charset, exc)
        raise DecodeFailure(url, f"body is not valid {charset}") from exc
