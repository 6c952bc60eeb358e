"""
RouteDemo Backend — File Upload Routes
=======================================

What:  POST /upload (multipart form) and POST /push (raw request body).
Why:   The two common ways of sending a file to a server.

Request Flow:
    /upload
        1. Client sends multipart/form-data with an `upload` file field
        2. form_context parses the form; the file lands in context.files
        3. FileService streams it into storage under its original filename
    /push
        1. Client sends the file as the request body, name in the `name` header
           curl --data-binary @./images/sample.gif --header "name: sample.gif" \
                http://localhost:8000/push
        2. body_context reads the body without interpreting it
        3. FileService writes it, refusing to replace an existing file
"""

import logging

from fastapi import APIRouter, Depends
from starlette.responses import Response

from routedemo.config import Settings
from routedemo.context import (
    RequestContext,
    body_context,
    form_context,
    get_file_service,
    get_settings,
)
from routedemo.rendering import render_outcome
from routedemo.schemas.responses import PushResponse, UploadResponse
from routedemo.services.file_service import FileService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Files"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={500: {"description": "No file posted, or the file could not be written"}},
    summary="Upload a file through a multipart form",
)
async def upload_file(
    context: RequestContext = Depends(form_context),
    file_service: FileService = Depends(get_file_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    upload = context.files.get("upload")
    logger.info(
        "Received upload request: filename=%s",
        upload.filename if upload is not None else "none",
    )

    try:
        outcome = await file_service.store_upload(upload)
    finally:
        # Always close the uploaded files to free their spooled temp files
        for posted in context.files.values():
            await posted.close()

    return render_outcome(outcome, debug=settings.debug)


@router.post(
    "/push",
    response_model=PushResponse,
    responses={500: {"description": "Missing name header, or the file already exists"}},
    summary="Upload a file as the raw request body",
)
async def push_file(
    context: RequestContext = Depends(body_context),
    file_service: FileService = Depends(get_file_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    outcome = await file_service.push(context.header("name"), context.body)
    return render_outcome(outcome, debug=settings.debug)
