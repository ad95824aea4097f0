from pathlib import Path

import pytest

from edtoken.config import DEFAULT_CONFIG, load_config


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


def test_defaults_without_files() -> None:
    config = load_config(environ={})
    assert config == DEFAULT_CONFIG
    assert config.keys.private_key is None
    assert config.logging.normalized_level() == "INFO"


def test_load_from_project_directory(tmp_path: Path) -> None:
    target = tmp_path / ".edtoken" / "config.yaml"
    target.parent.mkdir()
    target.write_text(
        "keys:\n  private_key: keys/private.pem\n  public_key: keys/public.pem\nlogging:\n  level: debug\n",
        encoding="utf-8",
    )
    config = load_config(environ={})
    assert config.keys.private_key == Path("keys/private.pem")
    assert config.keys.public_key == Path("keys/public.pem")
    assert config.logging.normalized_level() == "DEBUG"


def test_environment_overrides_file(tmp_path: Path) -> None:
    explicit = tmp_path / "custom.yaml"
    explicit.write_text("keys:\n  private_key: from-file.pem\n", encoding="utf-8")
    config = load_config(
        explicit,
        environ={"EDTOKEN_PRIVATE_KEY": "~/from-env.pem", "EDTOKEN_LOG_LEVEL": "warning"},
    )
    assert config.keys.private_key == tmp_path / "home" / "from-env.pem"
    assert config.logging.level == "warning"


def test_invalid_config_raises(tmp_path: Path) -> None:
    explicit = tmp_path / "bad.yaml"
    explicit.write_text("keys:\n  private_key: [1, 2]\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(explicit, environ={})
