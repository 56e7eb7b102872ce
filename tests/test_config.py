import os

import pytest

from totpwatch import ConfigError, MissingSecret, config


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    monkeypatch.delenv("TOTP_SECRET", raising=False)
    monkeypatch.delenv("WORK_SECRET", raising=False)
    monkeypatch.chdir(tmp_path)


def test_explicit_secret_wins(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("TOTP_SECRET", "FROMENV")
    (tmp_path / ".env").write_text("TOTP_SECRET=FROMFILE\n", encoding="utf-8")
    assert config.load_secret("FROMARG") == "FROMARG"


def test_environment_beats_env_file(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("TOTP_SECRET", "FROMENV")
    (tmp_path / ".env").write_text("TOTP_SECRET=FROMFILE\n", encoding="utf-8")
    assert config.load_secret() == "FROMENV"


def test_env_file_found_from_working_directory(tmp_path) -> None:
    (tmp_path / ".env").write_text("TOTP_SECRET=JBSW Y3DP EHPK 3PXP\n", encoding="utf-8")
    assert config.load_secret() == "JBSW Y3DP EHPK 3PXP"
    assert "TOTP_SECRET" not in os.environ


def test_explicit_env_file_and_var(tmp_path) -> None:
    env_file = tmp_path / "accounts.env"
    env_file.write_text("WORK_SECRET=MZXW6\n", encoding="utf-8")
    assert config.load_secret(env_file=str(env_file), var="WORK_SECRET") == "MZXW6"


def test_missing_env_file_is_an_error(tmp_path) -> None:
    with pytest.raises(ConfigError):
        config.load_secret(env_file=str(tmp_path / "nope.env"))


def test_blank_values_are_missing(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("TOTP_SECRET", "  ")
    (tmp_path / ".env").write_text("TOTP_SECRET=\n", encoding="utf-8")
    with pytest.raises(MissingSecret) as excinfo:
        config.load_secret("")
    assert "TOTP_SECRET" in str(excinfo.value)


def test_no_sources_at_all() -> None:
    with pytest.raises(MissingSecret):
        config.load_secret()
