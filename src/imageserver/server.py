from __future__ import annotations

import argparse
import dataclasses
import logging

from imageserver.api.app import create_app
from imageserver.logging_util import configure_logging
from imageserver.settings import ServerConfig

logger = logging.getLogger("imageserver.server")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve a directory of images over HTTP.")
    parser.add_argument("--host", help="Bind address (IMAGE_SERVER_HOST)")
    parser.add_argument("--port", type=int, help="Listen port (IMAGE_SERVER_PORT)")
    parser.add_argument("--image-root", help="Directory to serve (IMAGE_ROOT)")
    parser.add_argument("--env-file", help="Path to a .env file")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> ServerConfig:
    config = ServerConfig.from_env(args.env_file)
    overrides = {
        "host": args.host,
        "port": args.port,
        "image_root": args.image_root,
    }
    return dataclasses.replace(config, **{key: value for key, value in overrides.items() if value is not None})


def main(argv: list[str] | None = None) -> None:
    config = load_config(_parse_args(argv))
    configure_logging(config.log_level)

    image_root = config.image_root_path
    if not image_root.exists():
        image_root.mkdir(parents=True)
        logger.info("Created image folder %s", image_root)

    app = create_app(config)
    logger.info("Image Server is running on %s:%d", config.host, config.port)
    logger.info("Serving images from %s", image_root)
    logger.info("Access images at: %s/images/<filename>", config.base_url)
    logger.info("List all images: %s/api/images", config.base_url)
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
