"""
Runtime settings from env / .env.

.env is looked up in cwd, then next to the package (repo root). Existing env
vars always win.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

_env_loaded = False
for _dir in [Path.cwd(), Path(__file__).parent.parent]:
    _env_file = _dir / ".env"
    if _env_file.exists():
        load_dotenv(_env_file, override=False)
        _env_loaded = True
        break
if not _env_loaded:
    load_dotenv(override=False)

ENV_WS_URL = "TANGLE_WS_URL"
ENV_SS58_FORMAT = "TANGLE_SS58_FORMAT"
ENV_DEBUG = "TANGLE_DEBUG"

# Local standalone node (./scripts/run-standalone-local.sh)
DEFAULT_WS_URL = "ws://127.0.0.1:9944"
DEFAULT_SS58_FORMAT = 42


def ws_url() -> str:
    return os.getenv(ENV_WS_URL, "").strip() or DEFAULT_WS_URL


def ss58_format() -> int:
    raw = os.getenv(ENV_SS58_FORMAT, "").strip()
    if raw.isdigit():
        return int(raw)
    return DEFAULT_SS58_FORMAT


def debug_enabled() -> bool:
    return bool(os.getenv(ENV_DEBUG))
