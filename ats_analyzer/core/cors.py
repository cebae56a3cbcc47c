from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ats_analyzer.core.config import Settings, settings

# The analyzer only serves JSON and multipart POSTs plus the health GET.
ANALYZER_METHODS = ("GET", "POST")
ANALYZER_HEADERS = ("Content-Type", "X-API-Key")


def cors_options(config: Settings | None = None) -> dict[str, Any]:
    """Keyword arguments for ``CORSMiddleware`` built from the settings."""
    config = config or settings
    regex = (config.cors_allow_origin_regex or "").strip()
    return {
        "allow_origins": list(config.cors_allowed_origins),
        "allow_origin_regex": regex or None,
        "allow_credentials": config.cors_allow_credentials,
        "allow_methods": list(ANALYZER_METHODS),
        "allow_headers": list(ANALYZER_HEADERS),
    }


def install_cors(app: FastAPI, config: Settings | None = None) -> None:
    app.add_middleware(CORSMiddleware, **cors_options(config))
