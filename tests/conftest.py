# Pytest fixtures for env file loading tests.
import pytest

from envfile.store import MappingStore


# Provide an empty in-memory store so tests never touch os.environ.
@pytest.fixture()
def store():
    return MappingStore()


# Write an env file under tmp_path and return its path.
@pytest.fixture()
def write_env(tmp_path):
    def _write(content: str, name: str = ".env"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# Remove a process environment variable and restore it after the test.
# delenv on an absent variable records no undo, so set it first.
@pytest.fixture()
def unset_env(monkeypatch):
    def _unset(*names: str):
        for name in names:
            monkeypatch.setenv(name, "placeholder")
            monkeypatch.delenv(name)

    return _unset
