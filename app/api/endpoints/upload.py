import logging
from typing import Optional

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from app.core.config import settings
from app.schemas.upload import VideoUploadResponse
from app.services.storage import StorageError, VideoStorageService
from app.utils.constant import ALLOWED_VIDEO_MIME_TYPES, ERROR_MESSAGES
from app.utils.helper import unique_filename

logger = logging.getLogger(__name__)

router = APIRouter()


def get_storage_service() -> VideoStorageService:
    return VideoStorageService()


@router.post("/video", response_model=VideoUploadResponse)
def upload_video(video: Optional[UploadFile] = File(None)):
    """
    Upload an exercise video to the object store.

    The stored object gets a unique name derived from the original filename;
    the response carries its public URL.
    """
    if video is None or not video.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERROR_MESSAGES["VIDEO_REQUIRED"])
    if video.content_type not in ALLOWED_VIDEO_MIME_TYPES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERROR_MESSAGES["VIDEO_INVALID_TYPE"])

    # Read one byte past the limit to detect oversized files without loading more
    content = video.file.read(settings.MAX_VIDEO_UPLOAD_BYTES + 1)
    if len(content) > settings.MAX_VIDEO_UPLOAD_BYTES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERROR_MESSAGES["VIDEO_TOO_LARGE"])

    filename = unique_filename(video.filename)
    try:
        video_url = get_storage_service().upload(filename, content, video.content_type)
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    logger.info("Uploaded video %s as %s", video.filename, filename)
    return VideoUploadResponse(
        success=True,
        video_url=video_url,
        filename=filename,
        original_name=video.filename,
        size=len(content),
    )
