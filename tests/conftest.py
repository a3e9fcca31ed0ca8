"""Root pytest configuration for all tests.

Keeps EngineSettings hermetic: any SITE_SELECTOR_* variables from the
developer's shell are removed, and tests run from a temporary directory so a
stray .env in the checkout is never read.
"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_settings_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Strip SITE_SELECTOR_* env vars and chdir to an empty directory."""
    for key in list(os.environ):
        if key.upper().startswith("SITE_SELECTOR_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
