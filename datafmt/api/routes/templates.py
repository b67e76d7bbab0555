"""Template formatting API endpoints."""

import logging

from fastapi import APIRouter

from datafmt.api.models import (
    FormatRequest,
    FormatResponse,
    TransformInfo,
    TutorialResponse,
)
from datafmt.templates import TUTORIAL, format_string_with_data, get_registry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/format", response_model=FormatResponse)
def format_template(request: FormatRequest):
    """Format a template against a data document."""
    result = format_string_with_data(request.template, request.data)
    logger.debug(f"Formatted template ({len(request.template or '')} chars -> {len(result)} chars)")
    return FormatResponse(result=result)


@router.get("/transforms", response_model=list[TransformInfo])
def list_transforms():
    """List the transformations available inside placeholders."""
    return [
        TransformInfo(name=d.name, description=d.description, usage=d.usage)
        for d in get_registry().list_all()
    ]


@router.get("/tutorial", response_model=TutorialResponse)
def get_tutorial():
    """Template syntax guide for end users."""
    return TutorialResponse(tutorial=TUTORIAL)
