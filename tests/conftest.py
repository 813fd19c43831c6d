import os
import sys
from pathlib import Path

import pytest

# Ensure the src directory is on the path for imports
root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root / "src"))

log_dir = root / "logs"
log_dir.mkdir(parents=True, exist_ok=True)
os.environ.setdefault("LLAMA_COMMON_LOG_DIR", str(log_dir))


@pytest.fixture(autouse=True)
def _isolated_config_dir(tmp_path, monkeypatch):
    """Keep persisted settings out of the real home directory."""

    monkeypatch.setenv("LLAMA_COMMON_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.delenv("LLAMA_COMMON_LOG_CONFIG", raising=False)
