from typing import Iterator, Tuple

from bs4 import BeautifulSoup

# Tag name -> attribute holding the link. Nothing else is ever inspected.
LINK_ATTRIBUTES = {
    "audio": "src",
    "video": "src",
    "source": "src",
    "track": "src",
    "a": "href",
}

CANDIDATE_SELECTOR = ", ".join(LINK_ATTRIBUTES)


def parse_document(html: str) -> BeautifulSoup:
    # Repeated attributes keep their first value
    return BeautifulSoup(html, "html.parser", on_duplicate_attribute="ignore")


def select_candidates(document: BeautifulSoup) -> Iterator[Tuple[str, str]]:
    """Yield (tag name, raw attribute value) in document order."""
    for element in document.select(CANDIDATE_SELECTOR):
        value = element.get(LINK_ATTRIBUTES[element.name])
        if value is None:
            continue
        yield element.name, value
