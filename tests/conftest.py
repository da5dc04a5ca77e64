import pytest

from loghelper.helper import reset_default

_ENV_VARS = [
    "APP_ENV",
    "APP_NAME",
    "DEBUG",
    "DOCUMENT_ROOT",
    "LOG_TOPIC",
    "LOG_MODULE",
    "LOG_DIRECTORY",
    "LOG_RENDER_MODE",
    "LOG_BACKEND",
    "LOG_STRUCTLOG_CHANNEL",
    "LOG_HOST_LOGGER",
]


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Settings are read from the environment; keep tests independent of it
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def fresh_default_helper():
    reset_default()
    yield
    reset_default()


@pytest.fixture
def log_dir(tmp_path):
    """A log directory that does not exist yet."""
    return tmp_path / "logs"
