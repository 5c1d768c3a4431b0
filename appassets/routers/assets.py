import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse, Response, StreamingResponse

from ..clock import Clock, SystemClock
from ..config import CSS_CONTENT_TYPE, JS_CONTENT_TYPE, get_appdata_root
from ..resolver import AssetResponse, resolve_asset
from ..storage import AppData, InvalidNameError, LocalAppData, LocalFile, validate_name

logger = logging.getLogger(__name__)

router = APIRouter()


def get_app_data() -> AppData:
    return LocalAppData(get_appdata_root())


def get_clock() -> Clock:
    return SystemClock()


def to_response(asset: AssetResponse) -> Response:
    """Turn a resolved asset into the HTTP response sent to the client."""
    if not asset.found:
        raise HTTPException(status_code=404)

    headers = dict(asset.headers)
    headers["Vary"] = "Accept-Encoding"
    if asset.cache_seconds is not None:
        headers["Cache-Control"] = f"max-age={asset.cache_seconds}, must-revalidate"
    media_type = asset.headers["Content-Type"]

    if isinstance(asset.file, LocalFile):
        # FileResponse adds Content-Length, Last-Modified and ETag from stat.
        return FileResponse(asset.file.path, headers=headers, media_type=media_type)

    headers["Content-Length"] = str(asset.file.size)
    return StreamingResponse(asset.file.open(), headers=headers, media_type=media_type)


def _serve(
    request: Request,
    app_data: AppData,
    clock: Clock,
    app_id: str,
    file_name: str,
    content_type: str,
) -> Response:
    try:
        validate_name(app_id)
        validate_name(file_name)
        asset = resolve_asset(
            app_data,
            app_id,
            file_name,
            request.headers.get("accept-encoding"),
            clock.now(),
            content_type,
        )
    except InvalidNameError:
        raise HTTPException(status_code=400, detail="Invalid asset path")

    if not asset.found:
        logger.info(f"Asset not found: {app_id}/{file_name}")
    else:
        logger.debug(f"Serving {app_id}/{asset.file.name} for {file_name}")
    return to_response(asset)


@router.get("/js/{app_id}/{file_name}")
def get_js(
    request: Request,
    app_id: str,
    file_name: str,
    app_data: AppData = Depends(get_app_data),
    clock: Clock = Depends(get_clock),
):
    return _serve(request, app_data, clock, app_id, file_name, JS_CONTENT_TYPE)


@router.get("/css/{app_id}/{file_name}")
def get_css(
    request: Request,
    app_id: str,
    file_name: str,
    app_data: AppData = Depends(get_app_data),
    clock: Clock = Depends(get_clock),
):
    return _serve(request, app_data, clock, app_id, file_name, CSS_CONTENT_TYPE)
