"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from herefornow.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    layout = s.layout()
    assert layout.solid_threshold == 420
    assert layout.interpolation == "ease_out"
    config = s.renderer_config()
    assert config.name == "Here, For Now"
    assert config.author == "ripe0x.eth"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("HFN_SOLID_THRESHOLD", "599")
    monkeypatch.setenv("HFN_INTERPOLATION", "linear")
    monkeypatch.setenv("HFN_AUTHOR", "")
    monkeypatch.setenv("HFN_URLS", '["https://a.example", "https://b.example"]')
    s = Settings(_env_file=None)
    assert s.layout().solid_threshold == 599
    assert s.layout().interpolation == "linear"
    config = s.renderer_config()
    assert config.author is None
    assert config.urls == ["https://a.example", "https://b.example"]


def test_unknown_interpolation_rejected(monkeypatch):
    monkeypatch.setenv("HFN_INTERPOLATION", "bogus")
    with pytest.raises(ValidationError, match="Unknown interpolation law"):
        Settings(_env_file=None)
