from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _REPO_ROOT / ".env"


@dataclass(frozen=True)
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 6969
    image_root: str = "./public"
    reorder_subdir: str = ""
    public_base_url: str = ""
    max_upload_mb: int = 20
    log_level: str = "INFO"

    @property
    def base_url(self) -> str:
        if self.public_base_url:
            return self.public_base_url.rstrip("/")
        return f"http://localhost:{self.port}"

    @property
    def image_root_path(self) -> Path:
        return Path(self.image_root).expanduser().resolve()

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> ServerConfig:
        load_dotenv(env_file or _ENV_FILE, override=False)
        return cls(
            host=os.getenv("IMAGE_SERVER_HOST", cls.host).strip() or cls.host,
            port=int(os.getenv("IMAGE_SERVER_PORT", str(cls.port))),
            image_root=os.getenv("IMAGE_ROOT", cls.image_root).strip() or cls.image_root,
            reorder_subdir=os.getenv("REORDER_SUBDIR", "").strip().strip("/"),
            public_base_url=os.getenv("PUBLIC_BASE_URL", "").strip(),
            max_upload_mb=int(os.getenv("MAX_UPLOAD_MB", str(cls.max_upload_mb))),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).strip().upper() or cls.log_level,
        )
