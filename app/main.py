import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.routes import post, views
from app.config import settings  # <- import settings
import app.models  # <- ensure all model modules are imported and mappers registered

logger = logging.getLogger(__name__)

STATIC_DIRECTORY = Path(__file__).resolve().parent / "static"

app = FastAPI(title=settings.APP_NAME)

# Use configured origins (reads from app.config.settings)
origins = settings.ALLOWED_ORIGINS

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info("%s %s %s", request.method, request.url.path, response.status_code)
    return response


def is_api_path(path: str) -> bool:
    return path == "/api" or path.startswith("/api/")


@app.exception_handler(StarletteHTTPException)
async def not_found_page(request: Request, exc: StarletteHTTPException):
    # JSON API keeps FastAPI's error body; unmatched pages and methods get the 404 template
    if exc.status_code not in (404, 405) or is_api_path(request.url.path):
        return await http_exception_handler(request, exc)
    logger.debug("not found: %s", request.url.path)
    return views.templates.TemplateResponse(
        request, "error/404.html", {"uri": request.url.path}, status_code=404)


app.mount("/static", StaticFiles(directory=str(STATIC_DIRECTORY)), name="static")

# JSON API first so /api paths never reach the page routes
app.include_router(post.router)
app.include_router(views.router)


def run():
    import uvicorn

    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info("start server at %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
