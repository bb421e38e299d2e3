from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[1]
_SRC_ROOT = _REPO_ROOT / "src"
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

load_dotenv(_REPO_ROOT / ".env", override=False)

from imageserver.adapters.image_server_client import ImageServerClient


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Talk to a running image server.")
    parser.add_argument(
        "--server",
        default=os.getenv("IMAGE_SERVER_URL", "http://localhost:6969"),
        help="Base URL of the image server.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="List served images.")
    subparsers.add_parser("reorder", help="Rename images into sequential order.")
    upload = subparsers.add_parser("upload", help="Upload an image.")
    upload.add_argument("path", help="Local image file to upload.")
    upload.add_argument("--name", required=True, help="Target name, e.g. 4_sunset")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    client = ImageServerClient(args.server)

    if args.command == "list":
        images = client.list_images()
        print(f"{len(images)} images")
        for image in images:
            print(f"- {image.filename}  {image.url}")
    elif args.command == "reorder":
        result = client.reorder_images()
        print(result.message)
        for change in result.changes:
            print(f"{change.old} -> {change.new}")
    elif args.command == "upload":
        path = Path(args.path)
        result = client.upload_image(args.name, path.name, path.read_bytes())
        print(f"{result.message}: {result.url}")


if __name__ == "__main__":
    main()
