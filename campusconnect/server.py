"""
Campus Connect HTTP API
=======================

FastAPI service exposing the colleges, scholarships and universities
datasets, deterministic college search, admin replacement of the colleges
and scholarships datasets, and the ``/campus-connect`` question endpoint.

The :class:`DatasetStore` is created once in :func:`main` (or passed to
:func:`create_app` by tests) and kept on ``app.state``; handlers never touch
module-level dataset state.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import Body, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from .assistant.agent import CampusConnectAgent
from .assistant.client import has_api_key
from .config import ServerConfig
from .datasets.errors import DatasetValidationError, PersistenceFailure
from .datasets.query import search_colleges
from .datasets.schemas import Dataset
from .datasets.storage import DatasetStore

logger = logging.getLogger(__name__)

STATIC_MAX_AGE_S = 3600

# --------------------------------------------------------------------------- #
# Response models
# --------------------------------------------------------------------------- #

class ListResponse(BaseModel):
    count: int
    results: List[Any]


class ReplaceResponse(BaseModel):
    ok: bool
    count: int


class StatsResponse(BaseModel):
    colleges: int
    scholarships: int
    universities: int


class CountResponse(BaseModel):
    count: int


class AnswerResponse(BaseModel):
    text: str


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# --------------------------------------------------------------------------- #
# Static files
# --------------------------------------------------------------------------- #

class CachedStaticFiles(StaticFiles):
    """Static files with an hour of browser caching, except ``index.html``."""

    def file_response(self, full_path, *args, **kwargs):
        response = super().file_response(full_path, *args, **kwargs)
        if str(full_path).endswith("index.html"):
            response.headers["Cache-Control"] = "no-cache"
        else:
            response.headers["Cache-Control"] = f"public, max-age={STATIC_MAX_AGE_S}"
        return response


# --------------------------------------------------------------------------- #
# App factory
# --------------------------------------------------------------------------- #

def create_app(
    store: DatasetStore,
    agent: Optional[CampusConnectAgent] = None,
    public_dir: Optional[Path] = None,
) -> FastAPI:
    app = FastAPI(
        title="Campus Connect API",
        version="1.0",
        description="College, scholarship and university datasets with search and a Q&A assistant.",
    )
    app.state.store = store
    app.state.agent = agent
    app.add_middleware(GZipMiddleware, minimum_size=500)

    @app.exception_handler(DatasetValidationError)
    async def _validation_error(_request: Request, exc: DatasetValidationError) -> JSONResponse:
        return _error(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("%s rejected request: %s", request.url.path, exc.errors())
        return _error(400, "Request body must be valid JSON")

    @app.exception_handler(PersistenceFailure)
    async def _persistence_failure(request: Request, exc: PersistenceFailure) -> JSONResponse:
        logger.error("%s error: %s", request.url.path, exc, exc_info=exc)
        return _error(500, "Failed to save dataset")

    def _agent() -> CampusConnectAgent:
        if app.state.agent is None:
            app.state.agent = CampusConnectAgent(store)
        return app.state.agent

    # -- colleges ----------------------------------------------------------- #

    @app.get("/colleges", response_model=ListResponse)
    def list_colleges() -> Dict[str, Any]:
        colleges = store.get(Dataset.COLLEGES)
        return {"count": len(colleges), "results": colleges}

    @app.get("/colleges/search", response_model=ListResponse)
    def search(
        location: Optional[str] = None,
        branch: Optional[str] = None,
        hostel: Optional[str] = None,
        max_fee: Optional[str] = Query(None, alias="maxFee"),
    ) -> Dict[str, Any]:
        found = search_colleges(
            store.get(Dataset.COLLEGES),
            location=location,
            branch=branch,
            hostel=hostel,
            max_fee=max_fee,
        )
        return {"count": found.count, "results": found.results}

    @app.post("/admin/colleges", response_model=ReplaceResponse)
    def replace_colleges(payload: Any = Body(None)) -> Dict[str, Any]:
        return {"ok": True, "count": store.replace(Dataset.COLLEGES, payload)}

    # -- scholarships ------------------------------------------------------- #

    @app.get("/scholarships", response_model=ListResponse)
    def list_scholarships() -> Dict[str, Any]:
        scholarships = store.get(Dataset.SCHOLARSHIPS)
        return {"count": len(scholarships), "results": scholarships}

    @app.post("/admin/scholarships", response_model=ReplaceResponse)
    def replace_scholarships(payload: Any = Body(None)) -> Dict[str, Any]:
        return {"ok": True, "count": store.replace(Dataset.SCHOLARSHIPS, payload)}

    # -- universities & stats ----------------------------------------------- #

    @app.get("/universities", response_model=CountResponse)
    def universities_count() -> Dict[str, int]:
        return {"count": len(store.get(Dataset.UNIVERSITIES))}

    @app.get("/stats", response_model=StatsResponse)
    def stats() -> Dict[str, int]:
        return store.stats()

    # -- assistant ---------------------------------------------------------- #

    @app.post("/campus-connect", response_model=AnswerResponse)
    def campus_connect(body: Any = Body(None)):
        prompts = body.get("prompts") if isinstance(body, dict) else None
        if not isinstance(prompts, str) or not prompts.strip():
            return _error(400, "Invalid 'prompts': expected non-empty string")

        try:
            text = _agent().ask(prompts)
        except Exception:  # noqa: BLE001 - any model/client failure is a 500
            logger.exception("/campus-connect error")
            return _error(500, "Internal server error")
        return {"text": text}

    # -- static UI ---------------------------------------------------------- #

    if public_dir is not None and public_dir.is_dir():
        index_html = public_dir / "index.html"

        @app.get("/", include_in_schema=False)
        def index():
            return FileResponse(index_html, headers={"Cache-Control": "no-cache"})

        app.mount("/", CachedStaticFiles(directory=str(public_dir)), name="public")
    else:
        logger.info("No public directory at %s; static UI disabled", public_dir)

    return app


# --------------------------------------------------------------------------- #
# Entrypoint
# --------------------------------------------------------------------------- #

def main() -> None:
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not has_api_key():
        logger.error("OPENAI_API_KEY is not set. Add it to a .env file.")
        raise SystemExit(1)

    config = ServerConfig.from_env()
    store = DatasetStore.load(config.data_dir, policy=config.merge_policy)
    app = create_app(store, agent=CampusConnectAgent(store), public_dir=config.public_dir)

    logger.info("Starting server on port %d", config.port)
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
