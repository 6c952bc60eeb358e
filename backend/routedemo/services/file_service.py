"""
RouteDemo Backend — File Storage Service
=========================================

What:  Writes uploaded files into the storage directory.
Why:   Centralizes all file system operations used by POST /upload and POST /push.
How:   Multipart uploads are streamed to disk in chunks; pushed bodies are
       written in one go. Both use async file I/O (aiofiles) so a slow disk
       does not block the event loop.
Who:   Called by the files routes with the FileService built by create_app().
When:  Once per upload request.

Naming Model:
    Files keep the name the client chose: the multipart filename for /upload,
    the `name` header for /push. Names are NOT sanitized, so a client can
    overwrite existing uploads or write outside the storage directory with
    "../" segments. This mirrors the behavior of the tutorial being
    demonstrated; do not expose this service to untrusted clients.

    Symfony's UploadedFile::getClientOriginalName() and move() keep only the
    basename of the client name, and move() creates the target directory.
    Neither happens here: the name is joined as sent, and a name whose parent
    directory does not exist fails with an OSError.

    /upload  → overwrites an existing file of the same name
    /push    → refuses to replace an existing file (exclusive create)
"""

import logging
import os
from pathlib import Path
from typing import Optional

import aiofiles
from starlette.datastructures import UploadFile

from routedemo.outcomes import Failure, Outcome, Reply
from routedemo.schemas.responses import PushResponse, UploadResponse
from routedemo.services import is_blank

logger = logging.getLogger(__name__)

# What: Default chunk size for streaming uploads to disk
DEFAULT_CHUNK_SIZE = 64 * 1024


class FileService:
    """
    Manages the storage directory shared by both upload endpoints.

    Directory Structure:
        files/
        ├── sample.gif      ← POST /push  (name: sample.gif)
        └── report.pdf      ← POST /upload (filename="report.pdf")
    """

    def __init__(self, storage_root: str, chunk_size: int = DEFAULT_CHUNK_SIZE):
        """
        Args:
            storage_root: Destination directory (created if missing).
            chunk_size:   Bytes read per iteration when copying an upload.
        """
        self.storage_root = Path(storage_root).resolve()
        self.chunk_size = chunk_size
        # Several apps may share one directory (tests build many)
        self.storage_root.mkdir(parents=True, exist_ok=True)
        logger.info("FileService initialized with storage_root=%s", self.storage_root)

    def target_path(self, name: str) -> Path:
        """Destination for a client-supplied name (joined as-is, see module notes)."""
        return self.storage_root / name

    def is_writable(self) -> bool:
        return self.storage_root.is_dir() and os.access(self.storage_root, os.W_OK)

    async def store_upload(self, upload: Optional[UploadFile]) -> Outcome:
        """
        Move a multipart upload into storage under its original filename.

        Returns:
            Reply.json({"response": "OK"}) on success, overwriting any file
            of the same name.
            Failure (internal error) when no file was posted or the write failed.
        """
        if upload is None:
            return Failure.internal_error("No file was posted in the 'upload' field.")
        if not upload.filename:
            return Failure.internal_error("The uploaded file has no name.")

        destination = self.target_path(upload.filename)
        written = 0
        try:
            await upload.seek(0)
            async with aiofiles.open(destination, "wb") as f:
                while True:
                    chunk = await upload.read(self.chunk_size)
                    if not chunk:
                        break
                    await f.write(chunk)
                    written += len(chunk)
        except OSError as e:
            logger.error("Failed to store upload at %s: %s", destination, str(e))
            return Failure.internal_error(
                f"Cannot upload {upload.filename}",
                path=str(destination),
                os_error=str(e),
            )

        logger.info("File uploaded: %s (%d bytes)", upload.filename, written)
        return Reply.json(UploadResponse().model_dump())

    async def push(self, name: Optional[str], content: bytes) -> Outcome:
        """
        Write a raw request body to storage under `name`.

        Returns:
            Reply.json({"response": "OK", "name": name}) on success.
            Failure (internal error) when the name is missing or "0", a file
            with that name already exists, or the write failed.
        """
        if is_blank(name):
            return Failure.internal_error("Cannot push file without specifying its name")

        destination = self.target_path(name)
        if destination.exists():
            return Failure.internal_error(f"File {name} already exists", path=str(destination))

        try:
            # "xb": a file created after the exists() check still counts as existing
            async with aiofiles.open(destination, "xb") as f:
                await f.write(content)
        except FileExistsError:
            return Failure.internal_error(f"File {name} already exists", path=str(destination))
        except OSError as e:
            logger.error("Failed to push file to %s: %s", destination, str(e))
            return Failure.internal_error(
                f"Cannot push file {name}",
                path=str(destination),
                os_error=str(e),
            )

        logger.info("File pushed: %s (%d bytes)", name, len(content))
        return Reply.json(PushResponse(name=name).model_dump())
