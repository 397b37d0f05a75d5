import os
from datetime import datetime, timedelta, timezone

import pytest

from stalebot import util

INPUTS = {
    "INPUT_ACTION": "close",
    "INPUT_REPO-TOKEN": "ghs_secret",
    "INPUT_ISSUE-LABEL": "stale",
    "INPUT_CLOSE-MESSAGE": "Closing due to inactivity.",
    "INPUT_OPERATIONS-PER-RUN": "30",
    "INPUT_DAYS-BEFORE-CLOSE": "30",
}


def ago(days):
    """Timestamp, in the API's format, for *days* before now."""
    when = datetime.now(timezone.utc) - timedelta(days=days)
    return when.strftime(util.TIMESTAMP_FORMAT)


@pytest.fixture
def tmp_inputs(monkeypatch):
    for name, value in INPUTS.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo/widgets")


@pytest.fixture
def no_inputs(monkeypatch):
    for name in list(os.environ):
        if name.startswith("INPUT_") or name == "GITHUB_REPOSITORY":
            monkeypatch.delenv(name)


@pytest.fixture
def tmp_event_name(request, monkeypatch):
    monkeypatch.setenv("GITHUB_EVENT_NAME", request.param)


@pytest.fixture
def tmp_webhook(tmp_path, monkeypatch):
    """Create a temporary file for an actions webhook event."""
    tmp_file_path = tmp_path / "event.json"
    monkeypatch.setenv("GITHUB_EVENT_PATH", os.fspath(tmp_file_path))
    return tmp_file_path
