"""
Turn a raw ``src``/``href`` value into a MediaLink or drop it.

Classification is by file extension only and URL resolution is plain string
prefixing, not RFC 3986 joining: a site-root-relative link is appended to the
page URL as given, slashes and all.
"""
import mimetypes
from typing import Dict, Optional

from ..models import MediaLink

DEFAULT_MIME = "text/plain"
PLAYABLE_CATEGORIES = ("audio", "video")

# Media extensions the interpreter tables lack or map outside audio/video.
EXTRA_MEDIA_TYPES: Dict[str, str] = {
    "aac": "audio/aac",
    "flac": "audio/flac",
    "m4a": "audio/mp4",
    "mid": "audio/midi",
    "midi": "audio/midi",
    "m3u": "audio/x-mpegurl",
    "mka": "audio/x-matroska",
    "mpga": "audio/mpeg",
    "oga": "audio/ogg",
    "ogg": "audio/ogg",
    "opus": "audio/ogg",
    "weba": "audio/webm",
    "wma": "audio/x-ms-wma",
    "3gp": "video/3gpp",
    "3g2": "video/3gpp2",
    "avi": "video/x-msvideo",
    "f4v": "video/mp4",
    "flv": "video/x-flv",
    "m4v": "video/x-m4v",
    "mkv": "video/x-matroska",
    "m2ts": "video/mp2t",
    "ogv": "video/ogg",
    "ts": "video/mp2t",
    "webm": "video/webm",
    "wmv": "video/x-ms-wmv",
}


def _build_mime_table() -> Dict[str, str]:
    # A bare MimeTypes() holds only the interpreter's built-in defaults,
    # never the host's /etc/mime.types, so lookups are the same everywhere.
    builtin = mimetypes.MimeTypes()
    table: Dict[str, str] = {}
    for types_map in (builtin.types_map[False], builtin.types_map[True]):
        for suffix, mime in types_map.items():
            table[suffix.lstrip(".").lower()] = mime
    table.update(EXTRA_MEDIA_TYPES)
    return table


MIME_TABLE = _build_mime_table()


def strip_query(raw: str) -> str:
    """Trim whitespace and cut everything from the first ``?``."""
    return raw.strip().split("?", 1)[0]


def file_name_of(url: str) -> str:
    return url.rsplit("/", 1)[-1]


def extension_of(file_name: str) -> str:
    if "." not in file_name:
        return ""
    return file_name.rsplit(".", 1)[-1]


def extension_to_mime(extension: str) -> str:
    return MIME_TABLE.get(extension.lower(), DEFAULT_MIME)


def is_playable(mime: str) -> bool:
    return mime.split("/", 1)[0] in PLAYABLE_CATEGORIES


def resolve_url(url: str, base_url: str) -> str:
    """Make ``url`` absolute against ``base_url`` by prefixing."""
    if url.startswith("http"):
        return url
    if url.startswith("//"):
        return "https:" + url
    if url.startswith("/"):
        return base_url + url
    return f"{base_url}/{url}"


def classify_candidate(raw: str, base_url: str) -> Optional[MediaLink]:
    """Return the MediaLink for an audio/video candidate, None otherwise."""
    url = strip_query(raw)
    file_name = file_name_of(url)
    mime = extension_to_mime(extension_of(file_name))
    if not is_playable(mime):
        return None
    return MediaLink(file_name=file_name, url=resolve_url(url, base_url))
