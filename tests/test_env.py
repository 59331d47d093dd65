# Environment loading tests against the real process environment.
import os

import pytest

from envfile import DEFAULT_FILENAME, EnvFileIOError, Override, Skip, init, load_from


# Ensure missing env vars are populated from the .env file.
def test_load_from_sets_missing_values(write_env, unset_env):
    env_file = write_env('ENVFILE_TEST_KEY="test_key"\n')
    unset_env("ENVFILE_TEST_KEY")

    load_from(env_file, Skip)

    assert os.environ["ENVFILE_TEST_KEY"] == '"test_key"'


# Ensure existing env vars are not overridden by the .env file under Skip.
def test_load_from_does_not_override_existing(write_env, monkeypatch):
    env_file = write_env("ENVFILE_TEST_KEY=ignored\n")
    monkeypatch.setenv("ENVFILE_TEST_KEY", "from_env")

    load_from(env_file, Skip)

    assert os.environ["ENVFILE_TEST_KEY"] == "from_env"


# Ensure Override replaces existing env vars and deletes emptied ones.
def test_load_from_override_replaces_and_deletes(write_env, monkeypatch):
    env_file = write_env("ENVFILE_TEST_KEY=from_file\nENVFILE_TEST_EMPTY=\n")
    monkeypatch.setenv("ENVFILE_TEST_KEY", "from_env")
    monkeypatch.setenv("ENVFILE_TEST_EMPTY", "from_env")

    load_from(env_file, Override)

    assert os.environ["ENVFILE_TEST_KEY"] == "from_file"
    assert "ENVFILE_TEST_EMPTY" not in os.environ


# Ensure init reads .env from the current working directory.
def test_init_loads_default_file_from_cwd(write_env, tmp_path, monkeypatch, unset_env):
    write_env("ENVFILE_TEST_KEY=from_default\n", name=DEFAULT_FILENAME)
    unset_env("ENVFILE_TEST_KEY")
    monkeypatch.chdir(tmp_path)

    init(Override)

    assert os.environ["ENVFILE_TEST_KEY"] == "from_default"


# Ensure a missing default file surfaces as an I/O error without side effects.
def test_init_without_default_file_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    before = dict(os.environ)

    with pytest.raises(EnvFileIOError):
        init(Skip)

    assert dict(os.environ) == before
