from __future__ import annotations

import pytest

from receiver.core import icons
from receiver.core.icons import icon_geometry, icon_source


def test_known_icon_geometry_scales_and_offsets() -> None:
    size, (dx, dy) = icon_geometry("snail").place(56)
    assert size == pytest.approx(57)
    assert dx == pytest.approx(2)
    assert dy == pytest.approx(-3)


def test_unknown_icon_uses_default_ratio() -> None:
    size, offsets = icon_geometry("teapot").place(112)
    assert size == pytest.approx(88)
    assert offsets == (0.0, 0.0)


def test_icon_source_falls_back_and_reports_once(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(icons, "_reported_missing", set())
    (tmp_path / "ufo.png").write_bytes(b"png")
    fallback = tmp_path / "unknown.png"

    assert icon_source("ufo", icons_dir=tmp_path, fallback=fallback) == str(tmp_path / "ufo.png")
    assert icon_source("teapot", icons_dir=tmp_path, fallback=fallback) == str(fallback)
    assert icon_source("teapot", icons_dir=tmp_path, fallback=fallback) == str(fallback)
    assert icon_source("", icons_dir=tmp_path, fallback=fallback) == str(fallback)
    assert icons._reported_missing == {"teapot", ""}
