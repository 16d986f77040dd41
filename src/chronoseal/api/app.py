"""
HTTP surface for the store-message action.

One path, three methods: GET publishes the manifest, POST compiles an
execution request into an unsigned transaction, OPTIONS answers CORS
preflight.  Every failure is converted to a JSON error body at this
boundary, with CORS headers attached so browsers can read it.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from loguru import logger

from ..compiler import ExecutionRequest, TransactionCompiler
from ..config import Settings
from ..errors import ActionError
from ..logs import log_event
from ..pneuma.tx import get_serializer
from ..spec.manifest import describe
from ..spec.schemas import SchemaRegistry
from ..utils import base_url_from_headers
from .cors import BASE_HEADERS, EXECUTE_HEADERS, PREFLIGHT_HEADERS


def _error_response(exc: ActionError, headers: dict[str, str]) -> JSONResponse:
    return JSONResponse({"error": exc.public_message}, status_code=exc.status_code, headers=headers)


def create_app(
    settings: Optional[Settings] = None,
    compiler: Optional[TransactionCompiler] = None,
    registry: Optional[SchemaRegistry] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Deployment settings (default: read from the environment)
        compiler: Pre-built compiler (default: built from settings)
        registry: Schema registry used to validate manifests
    """
    settings = settings or Settings.from_env()
    compiler = compiler or TransactionCompiler(
        settings.compiler_config(),
        serializer=get_serializer(settings.tx_format),
    )
    registry = registry or SchemaRegistry.default()

    app = FastAPI(title="Chronoseal", docs_url=None, redoc_url=None)
    app.state.settings = settings
    app.state.compiler = compiler

    path = settings.action_path

    @app.get(path)
    async def get_manifest(request: Request) -> Response:
        base_url = base_url_from_headers(request.headers)
        try:
            manifest = describe(base_url, settings, registry=registry)
        except ActionError as exc:
            logger.error(log_event("request.failed", method="GET", error=str(exc)))
            return _error_response(exc, BASE_HEADERS)
        except Exception as exc:
            logger.exception(log_event("request.failed", method="GET", error=str(exc)))
            return JSONResponse({"error": "Failed to create metadata"}, status_code=500, headers=BASE_HEADERS)

        logger.info(log_event("manifest.served", base_url=base_url))
        return JSONResponse(manifest.to_dict(), headers=BASE_HEADERS)

    @app.post(path)
    async def execute(request: Request) -> Response:
        params = ExecutionRequest.from_params(request.query_params)
        try:
            result = compiler.compile(params)
        except ActionError as exc:
            if exc.status_code >= 500:
                logger.opt(exception=exc).error(log_event("tx.encoding_failed", error=str(exc)))
            else:
                logger.info(log_event("tx.missing_param", error=str(exc)))
            return _error_response(exc, EXECUTE_HEADERS)
        except Exception as exc:
            logger.exception(log_event("request.failed", method="POST", error=str(exc)))
            return JSONResponse({"error": "Internal Server Error"}, status_code=500, headers=EXECUTE_HEADERS)

        return JSONResponse(result.to_dict(), headers=EXECUTE_HEADERS)

    @app.options(path)
    async def preflight() -> Response:
        return Response(status_code=204, headers=PREFLIGHT_HEADERS)

    return app
