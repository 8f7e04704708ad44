import uvicorn
from fastapi import FastAPI

# Absolute import – works both as a script and as a module.
from media_scraper.api.router import router
from media_scraper.config import settings
from media_scraper.logging_config import setup_logging

setup_logging(settings.LOG_LEVEL)

app = FastAPI(title="Media Scraper API")
app.include_router(router)


if __name__ == "__main__":
    uvicorn.run(
        "media_scraper.main:app",
        host=settings.HOST,
        port=settings.PORT,
    )
