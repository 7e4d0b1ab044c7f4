from app.schemas.base import CamelModel

class VideoUploadResponse(CamelModel):
    success: bool = True
    video_url: str
    filename: str
    original_name: str
    size: int
