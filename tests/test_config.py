from __future__ import annotations

import pytest

from tsbind.config import FILE_NAME, PROJECT_DIR_VAR, Config, get_config, load_config


@pytest.fixture(autouse=True)
def _fresh_cache():
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def test_defaults_when_file_absent(tmp_path):
    config = load_config(tmp_path)
    assert config == Config()
    assert config.out_dir == "typescript"
    assert config.ambient_declarations is False


def test_reads_file(tmp_path):
    (tmp_path / FILE_NAME).write_text('ambient_declarations = true\nout_dir = "gen"\n')
    assert load_config(tmp_path) == Config(ambient_declarations=True, out_dir="gen")


def test_missing_field_is_error(tmp_path):
    (tmp_path / FILE_NAME).write_text('out_dir = "gen"\n')
    with pytest.raises(ValueError, match="ambient_declarations"):
        load_config(tmp_path)


def test_wrong_type_is_error(tmp_path):
    (tmp_path / FILE_NAME).write_text('ambient_declarations = "yes"\nout_dir = "gen"\n')
    with pytest.raises(ValueError, match="ambient_declarations"):
        load_config(tmp_path)


def test_invalid_toml_is_error(tmp_path):
    (tmp_path / FILE_NAME).write_text("out_dir = \n")
    with pytest.raises(ValueError):
        load_config(tmp_path)


def test_directory_named_like_file_is_ignored(tmp_path):
    (tmp_path / FILE_NAME).mkdir()
    assert load_config(tmp_path) == Config()


def test_get_config_uses_project_dir(tmp_path, monkeypatch):
    (tmp_path / FILE_NAME).write_text('ambient_declarations = true\nout_dir = "out"\n')
    monkeypatch.setenv(PROJECT_DIR_VAR, str(tmp_path))
    config = get_config()
    assert config == Config(ambient_declarations=True, out_dir="out")
    assert get_config() is config


def test_get_config_without_project_dir_fails(monkeypatch):
    monkeypatch.delenv(PROJECT_DIR_VAR, raising=False)
    with pytest.raises(KeyError, match=PROJECT_DIR_VAR):
        get_config()


def test_get_config_retries_after_failure(tmp_path, monkeypatch):
    monkeypatch.delenv(PROJECT_DIR_VAR, raising=False)
    with pytest.raises(KeyError):
        get_config()
    monkeypatch.setenv(PROJECT_DIR_VAR, str(tmp_path))
    assert get_config() == Config()