import logging
import time
from typing import Any, Dict, List

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pricetag.analysis import errors
from pricetag.analysis.amounts import sum_totals
from pricetag.app.aws_settings import load_secrets
from pricetag.app.logging import configure_logging, event
from pricetag.app.schemas import AnalyzeRequest, ErrorResponse, TotalsRequest, TotalsResponse
from pricetag.app.settings import Settings
from pricetag.inference.factory import build_model_client
from pricetag.inference.model_client import ModelClient
from pricetag.observability.langsmith import configure_tracing
from pricetag.orchestration.graph import build_workflow

logger = logging.getLogger(__name__)

ERROR_RESPONSES: Dict[int | str, Dict[str, Any]] = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_workflow(request: Request):
    return request.app.state.workflow


def require_credential(settings: Settings) -> None:
    if settings.active_api_key:
        return
    if settings.model_provider == "openai":
        raise errors.ConfigurationError("OpenAI API key not found")
    raise errors.ConfigurationError()


def require_inputs(payload: AnalyzeRequest) -> None:
    missing: List[str] = [name for name in ("image", "currency", "region") if not getattr(payload, name)]
    if missing:
        logger.warning("Analyze request missing: %s", ", ".join(missing))
        raise errors.ValidationError()


def analysis_error_handler(request: Request, exc: errors.AnalysisError) -> JSONResponse:
    logger.info("path=%s status=error code=%s error=%s", request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Unreadable request body: %s", exc.errors())
    if request.url.path != request.app.url_path_for("analyze"):
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})
    # A missing credential wins over anything wrong with the body
    try:
        require_credential(request.app.state.settings)
    except errors.ConfigurationError as exc_config:
        return analysis_error_handler(request, exc_config)
    return analysis_error_handler(request, errors.AnalysisError())


def create_app(settings: Settings | None = None, model_client: ModelClient | None = None) -> FastAPI:
    """Build the API with an explicitly constructed configuration."""
    settings = load_secrets(settings or Settings())
    configure_tracing(settings)
    client = model_client or build_model_client(settings)

    app = FastAPI(title="PriceTag Lens")
    app.state.settings = settings
    app.state.workflow = build_workflow(client, settings.generation_config())
    app.add_exception_handler(errors.AnalysisError, analysis_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    event("analyze workflow ready", {"provider": settings.model_provider, "model": settings.active_model})

    @app.post("/analyze", name="analyze", responses=ERROR_RESPONSES)
    def analyze(
        payload: AnalyzeRequest,
        settings: Settings = Depends(get_settings),
        wf=Depends(get_workflow),
    ):
        require_credential(settings)
        require_inputs(payload)
        state = {
            "request": payload,
            "meta": {
                "start_time_ms": int(time.time() * 1000),
                "provider": settings.model_provider,
                "model": settings.active_model,
            },
        }
        result = wf.invoke(state)
        return JSONResponse(content=result["result"])

    @app.post("/totals", response_model=TotalsResponse)
    def totals(payload: TotalsRequest):
        total, counted, unparsed = sum_totals(payload.items, field=payload.field)
        if unparsed:
            logger.info("Skipped %d unparseable %s value(s)", len(unparsed), payload.field)
        return TotalsResponse(total=str(total), counted=counted, unparsed=unparsed)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


settings = load_secrets(Settings())
configure_logging(settings)
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
