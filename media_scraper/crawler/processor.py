import logging
from typing import Iterable, List, Set

from ..models import MediaLink
from .classifier import classify_candidate
from .fetcher import fetch_page
from .parser import parse_document, select_candidates

logger = logging.getLogger(__name__)


def dedupe_links(links: Iterable[MediaLink]) -> List[MediaLink]:
    """Keep the first occurrence of each (file name, url) pair, in order."""
    seen: Set[MediaLink] = set()
    unique: List[MediaLink] = []
    for link in links:
        if link in seen:
            continue
        seen.add(link)
        unique.append(link)
    return unique


def extract_media_links(html: str, base_url: str) -> List[MediaLink]:
    """
    Parse → select candidates → classify/resolve → dedupe.
    Missing or non-media attributes are filtered, never raised.
    """
    document = parse_document(html)
    classified = (
        classify_candidate(raw, base_url)
        for _tag, raw in select_candidates(document)
    )
    return dedupe_links(link for link in classified if link is not None)


def scrape_media(url: str) -> List[MediaLink]:
    """
    Fetch ``url`` and return the media links on it.
    Raises ScrapeError when no usable document was obtained.
    """
    html = fetch_page(url)
    links = extract_media_links(html, url)
    logger.info("[SCRAPE] %s -> %d media link(s)", url, len(links))
    return links
