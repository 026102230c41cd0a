"""Unit tests for settings and config file loading."""

from pathlib import Path

import pydantic
import pytest

from aed_ecg import ConfigLoader, Settings


def test_defaults():
    settings = Settings()
    assert settings.sentinel_mode == "legacy"
    assert settings.loader.on_malformed == "truncate"
    assert settings.visualization.enabled
    assert settings.visualization.output_path == Path("ecg.png")
    assert settings.quality.max_abs_amplitude is None


def test_from_toml(tmp_path: Path):
    path = tmp_path / "aed.toml"
    path.write_text(
        'sentinel_mode = "strict"\n'
        "\n"
        "[thresholds]\n"
        "min_bpm_slow = 160.0\n"
        "\n"
        "[loader]\n"
        'on_malformed = "raise"\n'
        "\n"
        "[visualization]\n"
        "enabled = false\n",
        encoding="utf-8",
    )
    settings = ConfigLoader.from_file(path)
    assert settings.sentinel_mode == "strict"
    assert settings.thresholds.min_bpm_slow == 160.0
    assert settings.thresholds.min_bpm_fast == 200.0
    assert settings.loader.on_malformed == "raise"
    assert not settings.visualization.enabled


def test_from_json(tmp_path: Path):
    path = tmp_path / "aed.json"
    path.write_text('{"quality": {"max_abs_amplitude": 5.0}, "visualization": {"dpi": 72}}', encoding="utf-8")
    settings = ConfigLoader.from_file(path)
    assert settings.quality.max_abs_amplitude == 5.0
    assert settings.visualization.dpi == 72


def test_to_json_and_back(tmp_path: Path):
    settings = Settings(sentinel_mode="strict", thresholds={"min_amplitude": 0.2})
    path = ConfigLoader.to_json(settings, tmp_path / "out" / "aed.json")
    assert ConfigLoader.from_file(path) == settings


def test_unsupported_format(tmp_path: Path):
    with pytest.raises(ValueError, match="Unsupported config file format"):
        ConfigLoader.from_file(tmp_path / "aed.yaml")


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader.from_file(tmp_path / "absent.toml")


def test_invalid_values(tmp_path: Path):
    path = tmp_path / "aed.json"
    path.write_text('{"loader": {"on_malformed": "skip"}}', encoding="utf-8")
    with pytest.raises(pydantic.ValidationError):
        ConfigLoader.from_file(path)
