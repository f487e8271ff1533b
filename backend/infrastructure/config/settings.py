import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# 统一加载环境变量，确保配置来源一致。
# 项目根目录的 .env 优先级高于外部 shell 环境变量，避免“改了 .env 但运行仍读到旧值”。
load_dotenv(override=True)


def _get_env_float(key: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"环境变量 {key} 需要浮点值，但当前为 {raw}") from exc


# ===== 基础路径设置 =====
#
# NOTE:
# - All backend code lives under `<repo>/backend/`.
# - Runtime artifacts (the local journal store) live under `<repo>/files/`,
#   NOT under `<repo>/backend/`.

INFRASTRUCTURE_DIR = Path(__file__).resolve().parent.parent  # backend/infrastructure/
_BACKEND_DIR = INFRASTRUCTURE_DIR.parent  # backend/

# Prefer repo root when the monorepo layout is detected; otherwise fall back to cwd
# (installed packages / container deployments).
if _BACKEND_DIR.name == "backend":
    PROJECT_ROOT = _BACKEND_DIR.parent
else:
    PROJECT_ROOT = Path.cwd()

RUNTIME_ROOT = Path(os.getenv("RUNTIME_ROOT", PROJECT_ROOT / "files")).expanduser()


# ===== 本地存储（电影日志）=====

CINELOG_STORE_PATH = Path(
    os.getenv("CINELOG_STORE_PATH", RUNTIME_ROOT / "cinelog_store.json")
).expanduser()


# ===== 云端同步（表格 Web App 端点）=====

# Only bound on a sync request; there is no retry.
CLOUD_SYNC_TIMEOUT_S = _get_env_float("CLOUD_SYNC_TIMEOUT_S", 30.0) or 30.0
CLOUD_SYNC_USER_AGENT = os.getenv("CLOUD_SYNC_USER_AGENT", "cinelog-sync/0.1").strip() or "cinelog-sync/0.1"
