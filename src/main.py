from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.routes.activities import router as activities_router
from src.api.routes.pages import router as pages_router
from src.api.routes.sitemap import router as sitemap_router
from src.api.templating import templates
from src.core.config import settings
from src.core.logging import get_logger

logger = get_logger(__name__)

app = FastAPI(title=settings.app_name)
app.include_router(activities_router, prefix="/api")
app.include_router(sitemap_router)
app.include_router(pages_router)


@app.exception_handler(StarletteHTTPException)
async def not_found_page(request: Request, exc: StarletteHTTPException):
    path = request.url.path
    if exc.status_code != 404 or path == "/api" or path.startswith("/api/"):
        return await http_exception_handler(request, exc)
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"metadata": None, "json_ld": None, "detail": exc.detail},
        status_code=404,
    )


@app.exception_handler(SQLAlchemyError)
async def record_source_unavailable(request: Request, exc: SQLAlchemyError):
    logger.error("record source failure on %s: %s", request.url.path, exc)
    return PlainTextResponse("Service temporairement indisponible", status_code=503)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
