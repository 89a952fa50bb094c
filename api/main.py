from __future__ import annotations
import logging
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional
from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from shared.config import settings
from shared.errors import ApiError
from shared.log import configure_logging
from shared.s3 import ImageStore, store_from_settings
from agents.catalog import health, time_periods
from agents.image_edit import make_image_editor
from agents.media import fetch_image, image_headers, list_images
from agents.time_travel import Editor, time_travel

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Time Travel Photo API", version="1.0.0")


# Dependencias sobreescribibles en tests vía app.dependency_overrides
@lru_cache(maxsize=1)
def get_store() -> Optional[ImageStore]:
    return store_from_settings(settings)

def get_api_key() -> str:
    return settings.openai_api_key

def get_editor_factory() -> Callable[[str], Editor]:
    return lambda api_key: make_image_editor(api_key, settings)


@app.exception_handler(ApiError)
async def api_error_handler(_request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())

@app.exception_handler(Exception)
async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Error processing request", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Failed to process request"})


@app.get("/api/health")
def health_check():
    return health()

@app.get("/api/time-periods")
def get_time_periods() -> List[Dict[str, str]]:
    return time_periods()

@app.post("/api/time-travel")
async def create_time_travel(
    request: Request,
    api_key: str = Depends(get_api_key),
    store: Optional[ImageStore] = Depends(get_store),
    make_editor: Callable[[str], Editor] = Depends(get_editor_factory),
) -> Dict[str, Any]:
    # cuerpo sin tipar: la validación (y el 500 por falta de credencial) la hace time_travel
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    return await run_in_threadpool(
        time_travel,
        payload,
        api_key=api_key,
        store=store,
        make_editor=make_editor,
    )

@app.get("/api/images")
def get_images(store: Optional[ImageStore] = Depends(get_store)):
    return list_images(store)

@app.get("/api/images/{filename}")
def get_image(filename: str, store: Optional[ImageStore] = Depends(get_store)):
    obj = fetch_image(filename, store)
    headers = image_headers(obj, settings.image_cache_max_age)
    media_type = headers.pop("Content-Type")
    return Response(content=obj.body, media_type=media_type, headers=headers)
