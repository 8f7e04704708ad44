from typing import Sequence

from jinja2 import DictLoader, Environment, select_autoescape

from .models import MediaLink

MEDIA_PANEL = "bulma-panel.html"
ERROR_CARD = "bulma-error-card.html"
INDEX_PAGE = "index.html"

TEMPLATES = {
    MEDIA_PANEL: """
<article class="panel is-info">
    <p class="panel-heading">
        {{ website_url }}
    </p>
    {% for link in links %}
        <a class="panel-block" href="{{ link.url }}" target="_blank" download="{{ link.file_name }}">
            {{ link.file_name }}
        </a>
    {% endfor %}
</article>
""",
    ERROR_CARD: """
<div class="card">
    <div class="card-content">
        <div class="content">
            {{ error }}
        </div>
    </div>
</div>
""",
    INDEX_PAGE: """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>Media Scraper</title>
    <link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/bulma@0.9.4/css/bulma.min.css">
    <script src="https://unpkg.com/htmx.org@1.9.10"></script>
</head>
<body>
<section class="section">
    <div class="container">
        <form id="website-url-form" hx-post="{{ scrape_path }}" hx-target="#media-container"
              hx-swap="innerHTML"
              hx-disabled-elt="#website-url-input, #scrape-submit-button">
            <div class="field has-addons">
                <div class="control is-expanded">
                    <input id="website-url-input" class="input" type="url" name="url"
                           placeholder="https://example.com/page" required>
                </div>
                <div class="control">
                    <button id="scrape-submit-button" class="button is-info" type="submit">Scrape</button>
                </div>
            </div>
        </form>
        <div id="media-container" class="mt-5"></div>
    </div>
</section>
</body>
</html>
""",
}

# Read-only after import, shared by every request.
environment = Environment(
    loader=DictLoader(TEMPLATES),
    autoescape=select_autoescape(default=True, default_for_string=True),
)


def render_media_panel(website_url: str, links: Sequence[MediaLink]) -> str:
    return environment.get_template(MEDIA_PANEL).render(
        website_url=website_url, links=links
    )


def render_error_card(error: str) -> str:
    return environment.get_template(ERROR_CARD).render(error=error)


def render_index(scrape_path: str = "/scrape/media") -> str:
    return environment.get_template(INDEX_PAGE).render(scrape_path=scrape_path)
