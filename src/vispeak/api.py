"""HTTP API for vispeak."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException

from vispeak import __version__
from vispeak.config import load_config
from vispeak.core import NormalizationPipeline, build_table_store, run_normalization
from vispeak.logging_setup import configure_logging
from vispeak.models import HealthResponse, NormalizeRequest, NormalizeResponse, TablesResponse


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="vispeak",
        version=__version__,
        description="Vietnamese text normalization service API.",
    )
    config = load_config()
    configure_logging(config.log_level, config.log_format)
    store = build_table_store(config)
    options = config.pipeline_options()

    def current_pipeline() -> NormalizationPipeline:
        return NormalizationPipeline(tables=store.get(), options=options)

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.post("/v1/normalize", response_model=NormalizeResponse, tags=["normalization"])
    def normalize(request: NormalizeRequest) -> NormalizeResponse:
        try:
            return run_normalization(request, current_pipeline())
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    @app.post("/v1/tables/reload", response_model=TablesResponse, tags=["tables"])
    def reload_tables() -> TablesResponse:
        tables = store.reload()
        return TablesResponse(replacements=len(tables.replacements), acronyms=len(tables.acronyms))

    return app


app = create_app()
