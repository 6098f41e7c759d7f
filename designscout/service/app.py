"""FastAPI application entrypoint for designscout service mode."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

try:  # pragma: no cover - optional dependency
    from fastapi import Body, Depends, FastAPI
    from fastapi.responses import JSONResponse

    _FASTAPI_AVAILABLE = True
except ModuleNotFoundError:  # pragma: no cover - service mode optional
    FastAPI = None  # type: ignore[assignment]
    Body = None  # type: ignore[assignment]
    Depends = None  # type: ignore[assignment]
    JSONResponse = None  # type: ignore[assignment]
    _FASTAPI_AVAILABLE = False

from ..config import DesignScoutConfig, load_config
from ..errors import InvalidInputError, OperationNotFoundError
from ..operations import invoke, list_operations


class HealthResponse(BaseModel):
    status: str


class OperationDescription(BaseModel):
    name: str
    description: str
    inputSchema: Dict[str, Any]


def _default_config() -> DesignScoutConfig:
    return load_config(Path.cwd())


def create_app(
    config_factory: Callable[[], DesignScoutConfig] = _default_config,
) -> FastAPI:
    """Create the FastAPI application exposing the operation registry."""

    if not _FASTAPI_AVAILABLE:  # pragma: no cover - validated via unit tests
        raise RuntimeError(
            "FastAPI is required for service mode. Install it with `pip install designscout[service]`."
        )

    app = FastAPI(title="DesignScout Service", version="1.0.0")

    async def get_config() -> DesignScoutConfig:
        # Reload per request so edits to .designscout.yml apply without a restart.
        return config_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/operations", response_model=List[OperationDescription])
    async def operations() -> List[Dict[str, Any]]:
        return list_operations()

    @app.post("/operations/{name}")
    async def run_operation(
        name: str,
        payload: Optional[Dict[str, Any]] = Body(default=None),
        config: DesignScoutConfig = Depends(get_config),
    ) -> Dict[str, Any]:
        def _run() -> Dict[str, Any]:
            return invoke(name, payload or {}, config=config)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:  # pragma: no cover
            return _run()
        return await loop.run_in_executor(None, _run)

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(_: Any, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc), "errors": exc.errors})

    @app.exception_handler(OperationNotFoundError)
    async def operation_not_found_handler(_: Any, exc: OperationNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(_: Any, exc: RuntimeError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    if not _FASTAPI_AVAILABLE:
        raise RuntimeError(
            "FastAPI is required for service mode. Install it with `pip install designscout[service]`."
        )

    try:
        import uvicorn
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install uvicorn`."
        ) from exc

    app = create_app()
    uvicorn.run(app, host=host, port=port)
