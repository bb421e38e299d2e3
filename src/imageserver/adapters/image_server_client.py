from __future__ import annotations

import requests

from imageserver.domain.models import ChangeRecord, ImageEntry, ReorderResult, UploadResult


class ImageServerClient:
    """HTTP client for a running image server."""

    def __init__(self, base_url: str, timeout: float = 20) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def list_images(self) -> list[ImageEntry]:
        response = requests.get(f"{self._base_url}/api/images", timeout=self._timeout)
        self._raise_for_status(response, context="list images")
        payload = response.json()
        return [
            ImageEntry(filename=item.get("filename", ""), url=item.get("url", ""))
            for item in payload.get("images", [])
        ]

    def reorder_images(self) -> ReorderResult:
        response = requests.get(f"{self._base_url}/api/reorder-images", timeout=self._timeout)
        self._raise_for_status(response, context="reorder images")
        payload = response.json()
        changes = [
            ChangeRecord(old=item.get("old", ""), new=item.get("new", ""))
            for item in payload.get("changes", [])
        ]
        return ReorderResult(
            message=payload.get("message", ""),
            count=int(payload.get("count", 0)),
            changes=changes,
        )

    def upload_image(self, name: str, filename: str, data: bytes) -> UploadResult:
        response = requests.post(
            f"{self._base_url}/api/upload-image",
            data={"name": name},
            files={"image": (filename, data)},
            timeout=self._timeout,
        )
        self._raise_for_status(response, context="upload image")
        payload = response.json()
        return UploadResult(
            message=payload.get("message", ""),
            filename=payload.get("filename", ""),
            url=payload.get("url", ""),
        )

    @staticmethod
    def _raise_for_status(response: requests.Response, context: str) -> None:
        if response.status_code < 400:
            return
        try:
            payload = response.json()
        except ValueError:
            payload = {}
        error = payload.get("error") or f"HTTP {response.status_code}"
        details = payload.get("details")
        message = f"Image server error while attempting to {context}: {error}"
        if details:
            message = f"{message} ({details})"
        raise RuntimeError(message)
