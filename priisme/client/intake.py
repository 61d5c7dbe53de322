"""
Photo intake for the style analysis flow.

Accepts a photo from a drop or a file selection, keeps the preview and the
drag-over flag, and hands the encoded image to the analysis trigger.
"""

import asyncio
import base64
import logging
import mimetypes
from pathlib import Path
from typing import Awaitable, Callable, Optional, Sequence, Union

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class PhotoFile(BaseModel):
    filename: str
    content_type: str
    data: bytes

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "PhotoFile":
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            content_type=content_type or "application/octet-stream",
            data=path.read_bytes()
        )

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/")

    def to_data_uri(self) -> str:
        """Whole file as a data URI; no resizing, compression or EXIF stripping"""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"


class PhotoIntake:
    def __init__(
        self,
        on_photo_select: Callable[[str], Awaitable[None]],
        is_locked: Callable[[], bool] = lambda: False
    ):
        self.on_photo_select = on_photo_select
        self.is_locked = is_locked
        self.preview: Optional[str] = None
        self.is_dragging = False
        # Name of the photo currently shown
        self.selected_filename: Optional[str] = None

    def drag_enter(self):
        self.is_dragging = True

    def drag_over(self):
        self.is_dragging = True

    def drag_leave(self):
        self.is_dragging = False

    async def drop(self, files: Sequence[PhotoFile]) -> bool:
        self.is_dragging = False
        if not files:
            return False
        return await self.process_file(files[0])

    async def select_file(self, file: Optional[PhotoFile]) -> bool:
        if file is None:
            return False
        return await self.process_file(file)

    async def process_file(self, file: PhotoFile) -> bool:
        """Encode an image file, show it and trigger analysis.

        Non-image files and files arriving while an analysis is running are
        ignored without touching any state. Returns whether the file was used.
        """
        if self.is_locked():
            logger.info(f"Ignoring {file.filename}: analysis in progress")
            return False

        if not file.is_image:
            return False

        encoded = await asyncio.to_thread(file.to_data_uri)
        self.selected_filename = file.filename
        self.preview = encoded

        await self.on_photo_select(encoded)
        return True

    def clear(self) -> bool:
        if self.is_locked():
            return False
        self.preview = None
        self.selected_filename = None
        return True
