import logging
from fastapi import APIRouter, HTTPException

from api.models import (
    HealthResponse,
    PropertyResponse,
    SplitRequest,
    TrySplitRequest,
    TrySplitResponse,
)
from core.errors import InvalidPropertyLine
from parsers.line_parser import LineParser


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.post("/split", response_model=PropertyResponse)
async def split_line(request: SplitRequest):
    """
    Split a line that must hold exactly one separator
    """
    parser = LineParser(separator=request.separator)

    try:
        prop = parser.split(request.line)
    except InvalidPropertyLine as e:
        logger.warning("Rejected line %r: %s", request.line, e)
        raise HTTPException(status_code=422, detail=str(e))

    return PropertyResponse(key=prop.key, value=prop.value)


@router.post("/try-split", response_model=TrySplitResponse)
async def try_split_line(request: TrySplitRequest):
    """
    Split a line, reporting blank, comment and malformed lines as skipped
    """
    parser = LineParser(separator=request.separator, comment=request.comment)
    prop = parser.try_split(request.line)

    if prop is None:
        return TrySplitResponse(skipped=True)

    return TrySplitResponse(
        skipped=False,
        property=PropertyResponse(key=prop.key, value=prop.value)
    )


@router.get("/health", response_model=HealthResponse)
async def health():
    """
    Liveness check
    """
    return HealthResponse()
