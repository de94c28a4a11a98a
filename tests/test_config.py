"""Tests for responsiveviews.core.config – YAML configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from responsiveviews.core.config import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    DeviceProfile,
    load_config,
)
from responsiveviews.core.layout import DeviceContext, LayoutVariant, classify


def _write_yaml(path: Path, data) -> Path:
    path.write_text(yaml.dump(data, allow_unicode=True, default_flow_style=False), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Bundled config
# ---------------------------------------------------------------------------

class TestBundledConfig:
    def test_file_exists(self):
        assert DEFAULT_CONFIG_PATH.exists()

    def test_loads(self):
        cfg = load_config()
        assert cfg.title == "Responsive Views"
        assert cfg.wide_threshold == 600
        assert cfg.round_aware is True

    def test_preview_devices(self):
        cfg = load_config()
        assert cfg.device("phone") == DeviceProfile(name="phone", width=411, height=891)
        assert cfg.device("tablet-landscape").width == 1280

    def test_phone_landscape_is_narrow(self):
        profile = load_config().device("phone-landscape")
        ctx = DeviceContext.from_size(profile.width, profile.height)
        assert classify(ctx) is LayoutVariant.PHONE_LANDSCAPE

    def test_watch_is_round(self):
        watch = load_config().device("watch")
        assert watch.is_round is True
        assert watch.width == watch.height


# ---------------------------------------------------------------------------
# Custom files
# ---------------------------------------------------------------------------

class TestLoadConfig:
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == AppConfig()

    def test_defaults_for_missing_keys(self, tmp_path: Path):
        cfg = load_config(_write_yaml(tmp_path / "config.yaml", {"title": "Demo"}))
        assert cfg.title == "Demo"
        assert cfg.wide_threshold == 600
        assert cfg.round_aware is True
        assert cfg.devices == {}

    def test_title_stripped(self, tmp_path: Path):
        cfg = load_config(_write_yaml(tmp_path / "config.yaml", {"title": "  Demo  "}))
        assert cfg.title == "Demo"

    def test_custom_threshold(self, tmp_path: Path):
        cfg = load_config(_write_yaml(tmp_path / "config.yaml", {"wide_threshold_dp": 720}))
        assert cfg.wide_threshold == 720

    def test_round_aware_off(self, tmp_path: Path):
        cfg = load_config(_write_yaml(tmp_path / "config.yaml", {"round_aware": False}))
        assert cfg.round_aware is False

    def test_device_round_defaults_false(self, tmp_path: Path):
        data = {"devices": {"small": {"width": 320, "height": 480}}}
        cfg = load_config(_write_yaml(tmp_path / "config.yaml", data))
        assert cfg.device("small") == DeviceProfile(name="small", width=320, height=480)

    def test_unknown_device(self):
        with pytest.raises(KeyError):
            AppConfig().device("phone")


class TestInvalidConfig:
    def test_not_a_mapping(self, tmp_path: Path):
        with pytest.raises(ValueError, match="expected a YAML mapping"):
            load_config(_write_yaml(tmp_path / "config.yaml", ["a", "b"]))

    def test_invalid_title(self, tmp_path: Path):
        with pytest.raises(ValueError, match="title"):
            load_config(_write_yaml(tmp_path / "config.yaml", {"title": 42}))

    @pytest.mark.parametrize("value", [0, -5, "wide", True])
    def test_invalid_threshold(self, tmp_path: Path, value):
        with pytest.raises(ValueError, match="wide_threshold_dp"):
            load_config(_write_yaml(tmp_path / "config.yaml", {"wide_threshold_dp": value}))

    def test_invalid_round_aware(self, tmp_path: Path):
        with pytest.raises(ValueError, match="round_aware"):
            load_config(_write_yaml(tmp_path / "config.yaml", {"round_aware": "yes please"}))

    def test_devices_not_mapping(self, tmp_path: Path):
        with pytest.raises(ValueError, match="devices"):
            load_config(_write_yaml(tmp_path / "config.yaml", {"devices": ["phone"]}))

    def test_device_entry_not_mapping(self, tmp_path: Path):
        with pytest.raises(ValueError, match="phone"):
            load_config(_write_yaml(tmp_path / "config.yaml", {"devices": {"phone": 411}}))

    def test_device_missing_height(self, tmp_path: Path):
        data = {"devices": {"phone": {"width": 411}}}
        with pytest.raises(ValueError, match="width.*height"):
            load_config(_write_yaml(tmp_path / "config.yaml", data))

    @pytest.mark.parametrize("value", ["no", 1, "true"])
    def test_device_round_not_bool(self, tmp_path: Path, value):
        data = {"devices": {"watch": {"width": 227, "height": 227, "round": value}}}
        with pytest.raises(ValueError, match="round"):
            load_config(_write_yaml(tmp_path / "config.yaml", data))

    def test_error_names_the_file(self, tmp_path: Path):
        with pytest.raises(ValueError, match="custom.yaml"):
            load_config(_write_yaml(tmp_path / "custom.yaml", {"wide_threshold_dp": -1}))
