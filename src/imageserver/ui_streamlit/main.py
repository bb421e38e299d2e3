from __future__ import annotations

import os
import sys
from pathlib import Path

import streamlit as st

_SRC_ROOT = Path(__file__).resolve().parents[2]
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

from imageserver.adapters.image_server_client import ImageServerClient

_DEFAULT_SERVER_URL = "http://localhost:6969"
_COLUMNS = 4


def _init_state() -> None:
    st.session_state.setdefault("server_url", os.getenv("IMAGE_SERVER_URL", _DEFAULT_SERVER_URL))
    st.session_state.setdefault("last_changes", [])


def _client() -> ImageServerClient:
    return ImageServerClient(st.session_state["server_url"])


def _render_gallery(client: ImageServerClient) -> None:
    st.subheader("Images")
    try:
        images = client.list_images()
    except RuntimeError as exc:
        st.error(str(exc))
        return
    st.caption(f"{len(images)} images")
    if not images:
        st.info("No images in the served folder yet.")
        return
    columns = st.columns(_COLUMNS)
    for index, image in enumerate(images):
        with columns[index % _COLUMNS]:
            st.image(image.url, caption=image.filename, use_container_width=True)


def _render_upload(client: ImageServerClient) -> None:
    st.subheader("Upload")
    with st.form("upload_form", clear_on_submit=True):
        uploaded = st.file_uploader(
            "Image", type=["jpg", "jpeg", "png", "gif", "webp", "svg", "bmp"]
        )
        name = st.text_input("Name", help="Prefix with a number and underscore, e.g. 4_sunset")
        submitted = st.form_submit_button("Upload")
    if not submitted:
        return
    if uploaded is None or not name.strip():
        st.warning("Pick an image and enter a name.")
        return
    try:
        result = client.upload_image(name, uploaded.name, uploaded.getvalue())
    except RuntimeError as exc:
        st.error(str(exc))
        return
    st.success(f"{result.message}: {result.filename}")


def _render_reorder(client: ImageServerClient) -> None:
    st.subheader("Reorder")
    if st.button("Rename into sequence"):
        try:
            result = client.reorder_images()
        except RuntimeError as exc:
            st.error(str(exc))
            return
        st.session_state["last_changes"] = [
            {"old": change.old, "new": change.new} for change in result.changes
        ]
        st.success(result.message)
    if st.session_state["last_changes"]:
        st.dataframe(st.session_state["last_changes"], use_container_width=True)


def main() -> None:
    st.set_page_config(page_title="Image Server", layout="wide")
    _init_state()
    st.title("Image Server")
    st.session_state["server_url"] = st.sidebar.text_input(
        "Server URL", value=st.session_state["server_url"]
    )
    client = _client()
    _render_upload(client)
    _render_reorder(client)
    _render_gallery(client)


main()
