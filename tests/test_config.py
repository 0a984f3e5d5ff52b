"""Tests for view configuration loading."""

import pytest

from mathcanvas.boundary import Rule
from mathcanvas.config import (
    MATHCANVAS_CONFIG,
    ViewConfig,
    clear_cache,
    config_paths,
    load_config,
)
from mathcanvas.errors import ConfigError
from mathcanvas.geom import ScreenPoint


@pytest.fixture(autouse=True)
def fresh_cache():
    clear_cache()
    yield
    clear_cache()


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


class TestViewConfig:
    def test_defaults(self):
        c = ViewConfig()
        assert (c.width, c.height, c.scale) == (640, 480, 20.0)
        f = c.make_frame()
        assert f.origin == ScreenPoint(320, 240)
        assert f.tick_distance == 20.0
        assert c.boundary_policy().top is Rule.NONE

    def test_from_mapping(self):
        c = ViewConfig.from_mapping({"width": 800, "height": 600, "origin": [100, 500],
                                     "scale": 40, "boundary": ["bounce", "wrap"]})
        f = c.make_frame()
        assert f.origin == ScreenPoint(100, 500)
        assert f.scale == 40
        assert c.boundary_policy().left is Rule.WRAP
        assert c.as_dict()["width"] == 800

    def test_empty(self):
        assert ViewConfig.from_mapping(None) == ViewConfig()

    @pytest.mark.parametrize("data", [
        {"colour": "red"},
        {"scale": -1},
        {"width": 0},
        {"fps": "fast"},
        {"pixel_step": True},
        {"origin": [1, 2, 3]},
        {"origin": "center"},
        {"boundary": "teleport"},
        {"boundary": ["wrap", "wrap", "wrap"]},
    ])
    def test_invalid(self, data):
        with pytest.raises(ConfigError):
            ViewConfig.from_mapping(data)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError):
            ViewConfig.from_mapping([1, 2])


class TestLoadConfig:
    def test_explicit(self, tmp_path):
        p = write(tmp_path / "view.yaml", "width: 320\nheight: 200\nboundary: fence\n")
        c = load_config(p)
        assert (c.width, c.height) == (320, 200)
        assert c.boundary_policy().right is Rule.FENCE

    def test_missing_explicit(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.yaml")

    def test_directory_explicit(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_bad_yaml(self, tmp_path):
        p = write(tmp_path / "view.yaml", "width: [1, 2\n")
        with pytest.raises(ConfigError):
            load_config(p)

    def test_config_error_is_value_error(self, tmp_path):
        p = write(tmp_path / "view.yaml", "zoom: 3\n")
        with pytest.raises(ValueError):
            load_config(p)

    def test_env_file(self, tmp_path, monkeypatch):
        p = write(tmp_path / "env.yaml", "scale: 50\n")
        monkeypatch.setenv(MATHCANVAS_CONFIG, str(p))
        clear_cache()
        assert config_paths()[0] == p.resolve()
        assert load_config().scale == 50

    def test_env_directory(self, tmp_path, monkeypatch):
        write(tmp_path / "config.yaml", "fps: 30\n")
        monkeypatch.setenv(MATHCANVAS_CONFIG, str(tmp_path))
        clear_cache()
        assert load_config().fps == 30

    def test_first_match_wins(self, tmp_path, monkeypatch):
        a = write(tmp_path / "a.yaml", "scale: 11\n")
        b = write(tmp_path / "b.yaml", "scale: 22\n")
        missing = tmp_path / "missing.yaml"
        monkeypatch.setenv(MATHCANVAS_CONFIG, ":".join([str(missing), str(a), str(b)]))
        clear_cache()
        assert load_config().scale == 11

    def test_user_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv(MATHCANVAS_CONFIG, raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        user = tmp_path / ".config" / "mathcanvas"
        user.mkdir(parents=True)
        write(user / "config.yaml", "height: 240\n")
        clear_cache()
        assert load_config().height == 240

    def test_defaults_when_nothing_found(self, tmp_path, monkeypatch):
        monkeypatch.setenv(MATHCANVAS_CONFIG, str(tmp_path / "missing.yaml"))
        monkeypatch.setenv("HOME", str(tmp_path))
        clear_cache()
        assert load_config() == ViewConfig()

    def test_cached(self, tmp_path):
        p = write(tmp_path / "view.yaml", "scale: 5\n")
        assert load_config(p) is load_config(str(p))
        write(p, "scale: 6\n")
        assert load_config(p).scale == 5
        clear_cache()
        assert load_config(p).scale == 6
