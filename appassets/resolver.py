"""Pick the stored file to serve for an asset request and its cache headers."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from email.utils import formatdate
from types import MappingProxyType
from typing import Mapping

from .clock import Clock
from .config import CACHE_SECONDS, CSS_CONTENT_TYPE, JS_CONTENT_TYPE
from .storage import AppData, File

logger = logging.getLogger(__name__)

GZIP_SUFFIX = ".gz"


@dataclass(frozen=True)
class AssetResponse:
    status: int
    file: File | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    cache_seconds: int | None = None

    # Not hashable; headers is a read-only mapping.
    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def not_found(cls) -> "AssetResponse":
        return cls(status=404)

    @property
    def found(self) -> bool:
        return self.status == 200


def accepts_gzip(accept_encoding: str | None) -> bool:
    # Substring match on the raw header, so "gzip;q=0" also counts.
    return "gzip" in (accept_encoding or "").lower()


def http_date(timestamp: int) -> str:
    """Format a unix timestamp as an RFC 1123 date, e.g. ``Thu, 01 Jan 1970 00:22:17 GMT``."""
    return formatdate(timestamp, usegmt=True)


def resolve_asset(
    app_data: AppData,
    app_id: str,
    file_name: str,
    accept_encoding: str | None,
    now: int,
    content_type: str = JS_CONTENT_TYPE,
) -> AssetResponse:
    folder = app_data.get_folder(app_id)
    if folder is None:
        logger.debug(f"No asset folder for app {app_id!r}")
        return AssetResponse.not_found()

    candidates = [file_name]
    if accepts_gzip(accept_encoding):
        candidates.insert(0, file_name + GZIP_SUFFIX)

    for candidate in candidates:
        file = folder.get_file(candidate)
        if file is not None:
            break
    else:
        logger.debug(f"No file {file_name!r} in asset folder {app_id!r}")
        return AssetResponse.not_found()

    headers = {"Content-Type": content_type}
    if candidate != file_name:
        headers["Content-Encoding"] = "gzip"
    headers["Expires"] = http_date(now + CACHE_SECONDS)
    headers["Pragma"] = "cache"

    return AssetResponse(
        status=200, file=file, headers=headers, cache_seconds=CACHE_SECONDS
    )


class AssetResolver:
    """Resolves JS and CSS assets against one app data store and clock."""

    def __init__(self, app_data: AppData, clock: Clock):
        self.app_data = app_data
        self.clock = clock

    def get_js(
        self, file_name: str, app_id: str, accept_encoding: str | None = None
    ) -> AssetResponse:
        return resolve_asset(
            self.app_data,
            app_id,
            file_name,
            accept_encoding,
            self.clock.now(),
            JS_CONTENT_TYPE,
        )

    def get_css(
        self, file_name: str, app_id: str, accept_encoding: str | None = None
    ) -> AssetResponse:
        return resolve_asset(
            self.app_data,
            app_id,
            file_name,
            accept_encoding,
            self.clock.now(),
            CSS_CONTENT_TYPE,
        )
