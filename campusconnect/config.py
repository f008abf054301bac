"""Process configuration read from the environment (and ``.env``)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .datasets.merge import MergePolicy


load_dotenv()


@dataclass(frozen=True)
class ServerConfig:
    data_dir: Path = Path("data")
    public_dir: Path = Path("public")
    host: str = "0.0.0.0"
    port: int = 3000
    merge_policy: MergePolicy = MergePolicy.PRIMARY_WINS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        env = os.environ if environ is None else environ
        port = env.get("PORT")
        return cls(
            data_dir=Path(env.get("CAMPUSCONNECT_DATA_DIR", "data")),
            public_dir=Path(env.get("CAMPUSCONNECT_PUBLIC_DIR", "public")),
            host=env.get("HOST", "0.0.0.0"),
            port=int(port) if port else 3000,
            merge_policy=MergePolicy(env.get("CAMPUSCONNECT_MERGE_POLICY", MergePolicy.PRIMARY_WINS.value)),
        )
