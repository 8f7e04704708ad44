from media_scraper.models import MediaLink
from media_scraper.rendering import render_error_card, render_index, render_media_panel


def test_media_panel_lists_links_in_order():
    html = render_media_panel(
        "https://s.test/p",
        [
            MediaLink("b.mp4", "https://s.test/p/b.mp4"),
            MediaLink("a.mp3", "https://s.test/p/a.mp3"),
        ],
    )
    assert "https://s.test/p" in html
    assert 'href="https://s.test/p/b.mp4"' in html
    assert 'download="a.mp3"' in html
    assert html.index("b.mp4") < html.index("a.mp3")
    assert html.count('class="panel-block"') == 2


def test_media_panel_with_no_links():
    html = render_media_panel("https://s.test/p", [])
    assert "panel-heading" in html
    assert "panel-block" not in html


def test_values_are_escaped():
    html = render_media_panel(
        "https://s.test/<script>",
        [MediaLink('a".mp3', 'https://s.test/a".mp3')],
    )
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert 'a".mp3' not in html


def test_error_card():
    html = render_error_card("Cannot scrape media from this website")
    assert 'class="card"' in html
    assert "Cannot scrape media from this website" in html


def test_index_posts_to_scrape_path():
    html = render_index("/scrape/media")
    assert 'hx-post="/scrape/media"' in html
    assert 'name="url"' in html
    assert 'id="media-container"' in html
