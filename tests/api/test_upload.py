from unittest.mock import MagicMock, patch
from urllib.parse import quote

from app.core.config import settings

API = settings.API_PREFIX


def _storage_ok():
    response = MagicMock()
    response.ok = True
    response.status_code = 200
    return response


@patch("app.services.storage.requests.post")
def test_upload_video_stores_file(mock_post, client):
    mock_post.return_value = _storage_ok()

    response = client.post(
        f"{API}/upload/video",
        files={"video": ("squat demo.mp4", b"fake-video-bytes", "video/mp4")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["originalName"] == "squat demo.mp4"
    assert body["size"] == len(b"fake-video-bytes")
    assert body["filename"].startswith("squat demo-")
    assert body["filename"].endswith(".mp4")
    assert body["videoUrl"].endswith(f"/storage/v1/object/public/{settings.VIDEO_BUCKET}/{quote(body['filename'])}")

    mock_post.assert_called_once()
    url = mock_post.call_args.args[0]
    assert url.endswith(f"/storage/v1/object/{settings.VIDEO_BUCKET}/{quote(body['filename'])}")
    assert mock_post.call_args.kwargs["headers"]["Content-Type"] == "video/mp4"
    assert mock_post.call_args.kwargs["data"] == b"fake-video-bytes"


@patch("app.services.storage.requests.post")
def test_upload_rejects_non_video(mock_post, client):
    response = client.post(
        f"{API}/upload/video",
        files={"video": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid file type. Only video files are allowed."}
    mock_post.assert_not_called()


def test_upload_without_file(client):
    response = client.post(f"{API}/upload/video")

    assert response.status_code == 400
    assert response.json() == {"error": "No video file uploaded"}


@patch("app.services.storage.requests.post")
def test_upload_rejects_oversized_file(mock_post, client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_VIDEO_UPLOAD_BYTES", 4)

    response = client.post(
        f"{API}/upload/video",
        files={"video": ("clip.mov", b"12345", "video/quicktime")},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Video file is too large"}
    mock_post.assert_not_called()


@patch("app.services.storage.requests.post")
def test_upload_storage_failure_is_server_error(mock_post, client):
    failed = MagicMock()
    failed.ok = False
    failed.status_code = 403
    failed.text = "bucket not found"
    mock_post.return_value = failed

    response = client.post(
        f"{API}/upload/video",
        files={"video": ("clip.webm", b"data", "video/webm")},
    )

    assert response.status_code == 500
    assert "bucket not found" in response.json()["error"]
