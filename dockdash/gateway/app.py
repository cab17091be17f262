"""HTTP-шлюз: маршруты /api поверх DockerDataProvider."""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from dockdash import __version__
from dockdash.docker_api.data_provider import DockerDataProvider
from dockdash.docker_api.exceptions import DockerAPIError

MAX_TAIL_LINES = 10000

router = APIRouter(prefix="/api", tags=["containers"])


def get_provider(request: Request) -> DockerDataProvider:
    """Достаёт провайдер, созданный при старте процесса."""

    return request.app.state.provider


def error_response(exc: DockerAPIError) -> JSONResponse:
    """Любая ошибка Docker отдаётся как 500 с текстом исходной ошибки."""

    return JSONResponse(status_code=500, content={"error": exc.message, "kind": exc.kind})


@router.get("/containers")
def list_containers(provider: DockerDataProvider = Depends(get_provider)) -> Response:
    try:
        summaries = provider.fetch_containers()
    except DockerAPIError as exc:
        return error_response(exc)
    return JSONResponse(content=[summary.to_dict() for summary in summaries])


@router.get("/containers/{container_id}/logs")
def container_logs(
    container_id: str,
    tail: Optional[int] = Query(default=None, ge=1, le=MAX_TAIL_LINES),
    provider: DockerDataProvider = Depends(get_provider),
) -> Response:
    try:
        text = provider.fetch_container_logs(container_id, tail=tail)
    except DockerAPIError as exc:
        return error_response(exc)
    return PlainTextResponse(text)


@router.get("/health")
def health(provider: DockerDataProvider = Depends(get_provider)) -> Dict[str, str]:
    """Сообщает, доступен ли Docker Engine через сокет."""

    status = "ok" if provider.is_runtime_available() else "unavailable"
    return {"status": status, "version": __version__}


def create_app(provider: DockerDataProvider, *, cors_origins: Sequence[str] = ("*",)) -> FastAPI:
    """Фабрика FastAPI приложения с внедрённым провайдером."""

    app = FastAPI(title="Docker Dashboard Gateway", version=__version__)
    app.state.provider = provider
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(router)
    return app
