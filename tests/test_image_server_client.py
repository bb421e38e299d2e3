from unittest.mock import Mock

import pytest
import requests

from imageserver.adapters.image_server_client import ImageServerClient
from imageserver.domain.models import ChangeRecord, ImageEntry


def _response(status_code: int, payload: dict) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


def test_list_images_parses_payload(monkeypatch) -> None:
    get = Mock(
        return_value=_response(
            200, {"total": 1, "images": [{"filename": "a.png", "url": "http://x/images/a.png"}]}
        )
    )
    monkeypatch.setattr(requests, "get", get)

    images = ImageServerClient("http://x/").list_images()

    assert images == [ImageEntry(filename="a.png", url="http://x/images/a.png")]
    assert get.call_args.args[0] == "http://x/api/images"


def test_reorder_images_handles_nothing_to_do(monkeypatch) -> None:
    monkeypatch.setattr(
        requests, "get", Mock(return_value=_response(200, {"message": "No images found to reorder"}))
    )

    result = ImageServerClient("http://x").reorder_images()

    assert result.count == 0
    assert result.changes == []
    assert result.message == "No images found to reorder"


def test_reorder_images_parses_changes(monkeypatch) -> None:
    payload = {"message": "ok", "count": 1, "changes": [{"old": "1_a.png", "new": "001.png"}]}
    monkeypatch.setattr(requests, "get", Mock(return_value=_response(200, payload)))

    result = ImageServerClient("http://x").reorder_images()

    assert result.changes == [ChangeRecord(old="1_a.png", new="001.png")]


def test_upload_image_posts_multipart(monkeypatch) -> None:
    post = Mock(
        return_value=_response(
            200, {"message": "Image uploaded successfully", "filename": "a.png", "url": "u"}
        )
    )
    monkeypatch.setattr(requests, "post", post)

    result = ImageServerClient("http://x").upload_image("a", "photo.png", b"data")

    assert result.filename == "a.png"
    assert post.call_args.kwargs["data"] == {"name": "a"}
    assert post.call_args.kwargs["files"] == {"image": ("photo.png", b"data")}


def test_error_response_raises_with_details(monkeypatch) -> None:
    monkeypatch.setattr(
        requests,
        "get",
        Mock(return_value=_response(500, {"error": "Unable to read directory", "details": "ENOENT"})),
    )

    with pytest.raises(RuntimeError, match="Unable to read directory"):
        ImageServerClient("http://x").list_images()
