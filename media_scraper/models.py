from typing import List, NamedTuple

from pydantic import BaseModel


class MediaLink(NamedTuple):
    """An audio/video link found on a page, resolved to an absolute URL."""
    file_name: str
    url: str


class ScrapeMediaRequest(BaseModel):
    """Payload for POST /api/scrape/media."""
    url: str = ""           # fetched and used as base for relative links


class MediaLinkOut(BaseModel):
    file_name: str
    url: str


class ScrapeMediaResponse(BaseModel):
    """Returned by POST /api/scrape/media."""
    website_url: str
    links: List[MediaLinkOut]
