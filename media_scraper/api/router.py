import logging

from fastapi import APIRouter, Form, HTTPException
from fastapi.responses import HTMLResponse, Response

from media_scraper.config import settings
from media_scraper.crawler.processor import scrape_media
from media_scraper.error_policy import GENERIC_ERROR_MESSAGE, ScrapeError
from media_scraper.models import MediaLinkOut, ScrapeMediaRequest, ScrapeMediaResponse
from media_scraper.rendering import render_error_card, render_index, render_media_panel

logger = logging.getLogger(__name__)

router = APIRouter()

SCRAPE_PATH = "/scrape/media"


def _cors_headers() -> dict[str, str]:
    return {"Access-Control-Allow-Origin": settings.ACCESS_CONTROL_ALLOW_ORIGIN}


@router.options(SCRAPE_PATH)
async def scrape_media_options():
    headers = _cors_headers()
    headers["Access-Control-Allow-Methods"] = "POST, OPTIONS"
    headers["Access-Control-Allow-Headers"] = "Content-Type"
    return Response(content="", status_code=200, headers=headers)


@router.post(SCRAPE_PATH, response_class=HTMLResponse)
def scrape_media_html(url: str = Form("")):
    """Render the media links of ``url`` as a Bulma panel."""
    try:
        links = scrape_media(url)
    except ScrapeError as exc:
        logger.info("[SCRAPE] failed for %s: %s", url, exc.reason)
        return HTMLResponse(
            render_error_card(GENERIC_ERROR_MESSAGE),
            status_code=502,
            headers=_cors_headers(),
        )
    return HTMLResponse(render_media_panel(url, links), headers=_cors_headers())


@router.post("/api" + SCRAPE_PATH, response_model=ScrapeMediaResponse)
def scrape_media_json(req: ScrapeMediaRequest):
    try:
        links = scrape_media(req.url)
    except ScrapeError as exc:
        logger.info("[SCRAPE] failed for %s: %s", req.url, exc.reason)
        raise HTTPException(status_code=502, detail=GENERIC_ERROR_MESSAGE)
    return ScrapeMediaResponse(
        website_url=req.url,
        links=[MediaLinkOut(file_name=link.file_name, url=link.url) for link in links],
    )


@router.get("/", response_class=HTMLResponse)
async def index():
    return render_index(SCRAPE_PATH)


@router.get("/health")
async def health():
    return {"status": "ok"}
