"""Analysis endpoint: runs the trend engine over posted records."""

import structlog
from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from api.dependencies import get_log, get_settings
from api.schemas import AnalysisRequest
from analysis.engine import TrendEngine
from analysis.errors import ConfigurationError, EmptyDatasetError
from analysis.render import result_to_dict
from config import Settings

router = APIRouter(prefix="/api/v1")


def _request_settings(base: Settings, body: AnalysisRequest) -> Settings:
    overrides = {
        "delimiter": body.delimiter,
        "time_column": body.time_column,
        "data_column": body.data_column,
        **body.options.model_dump(exclude_none=True),
    }
    return Settings(**{**base.model_dump(), **overrides})


@router.post("/analyze")
def analyze(
    body: AnalysisRequest,
    settings: Settings = Depends(get_settings),
    log: structlog.BoundLogger = Depends(get_log),
):
    """Run the requested reports; an empty list runs the overview only."""
    try:
        engine = TrendEngine(_request_settings(settings, body), log=log)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors(include_url=False, include_context=False))

    try:
        result = engine.run(
            body.records,
            body.reports,
            correlation_records=body.correlation_records,
        )
    except EmptyDatasetError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return result_to_dict(result)
