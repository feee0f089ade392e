"""Shared pytest fixtures for deepnav examples.

Every example's ``app.py`` builds a module-level ``navigator`` (usually
with a ``RecordingPresenter`` attached). ``app_namespace`` re-runs the
sibling ``app.py`` for each test, so mappings and the presenter stack
start fresh; ``navigator`` and ``presenter`` pull the two objects most
tests need out of it.
"""

import runpy
from pathlib import Path
from typing import Any

import pytest

from deepnav import Navigator, RecordingPresenter


@pytest.fixture
def app_namespace(request: pytest.FixtureRequest) -> dict[str, Any]:
    """Globals of the sibling app.py, executed fresh for this test."""
    app_path = Path(request.path).parent / "app.py"
    return runpy.run_path(str(app_path), run_name=f"example_{app_path.parent.name}")


@pytest.fixture
def navigator(app_namespace: dict[str, Any]) -> Navigator:
    navigator = app_namespace["navigator"]
    assert isinstance(navigator, Navigator)
    return navigator


@pytest.fixture
def presenter(navigator: Navigator) -> RecordingPresenter:
    assert isinstance(navigator.presenter, RecordingPresenter)
    return navigator.presenter
