from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = ROOT / "src"
for entry in (SRC_ROOT, ROOT):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

import pytest  # noqa: E402

from alphaoverlap import config as run_config  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_run_config(monkeypatch, tmp_path) -> None:
    """Prevent local run configs from bleeding into tests."""
    monkeypatch.setenv(run_config.ENV_CONFIG, str(tmp_path / "missing_config.json"))
