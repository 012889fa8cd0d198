from __future__ import annotations

from pathlib import Path

import pytest

_ENV_VARS = (
    "COMPUTEENGINE_CONFIG",
    "COMPUTEENGINE_CONFIG_FILE",
    "COMPUTEENGINE_PROFILE",
    "COMPUTEENGINE_PROJECT_ID",
    "COMPUTEENGINE_PROJECT",
    "GOOGLE_CLOUD_PROJECT",
    "CLOUDSDK_CORE_PROJECT",
    "COMPUTEENGINE_ACCESS_TOKEN",
    "CLOUDSDK_AUTH_ACCESS_TOKEN",
    "COMPUTEENGINE_REFRESH_TOKEN",
    "COMPUTEENGINE_CLIENT_ID",
    "COMPUTEENGINE_CLIENT_SECRET",
    "COMPUTEENGINE_BASE_URL",
    "COMPUTEENGINE_TOKEN_URL",
    "COMPUTEENGINE_REQUEST_TIMEOUT_SECONDS",
    "COMPUTEENGINE_VERIFY_SSL",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
