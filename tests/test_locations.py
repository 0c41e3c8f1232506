"""Tests for settings file location resolution."""

from pathlib import Path

import pytest
from prefstore import INI
from prefstore import JSON
from prefstore import TOML
from prefstore import YAML
from prefstore import Auto
from prefstore import DirectoryUnavailableError
from prefstore import ExplicitDir
from prefstore import ExplicitFile
from prefstore import ExplicitPath
from prefstore import Format
from prefstore import Location
from prefstore import StoreDescriptor
from prefstore import resolve
from prefstore import user_config_root

ROOT = Path("/home/user/.config")


def fixed_root():
    return ROOT


def no_root():
    return None


class TestResolve:
    """Test resolve function."""

    def test_auto(self):
        """Test Auto combines root, app and default name."""
        descriptor = StoreDescriptor(app="MyApp", location=Auto(), format=JSON)
        assert resolve(descriptor, fixed_root) == ROOT / "MyApp" / "config.json"

    def test_auto_uses_format_default_name(self):
        """Test Auto picks the file name from the format."""
        descriptor = StoreDescriptor(app="MyApp", location=Auto(), format=YAML)
        assert resolve(descriptor, fixed_root).name == "config.yaml"

    def test_explicit_path_verbatim(self):
        """Test ExplicitPath ignores app and format."""
        descriptor = StoreDescriptor(app="MyApp", location=ExplicitPath("/etc/odd/place.cfg"), format=TOML)
        assert resolve(descriptor, fixed_root) == Path("/etc/odd/place.cfg")

    def test_explicit_path_not_normalized(self):
        """Test ExplicitPath keeps relative components."""
        descriptor = StoreDescriptor(app="MyApp", location=ExplicitPath("a/../b/settings.ini"), format=INI)
        assert str(resolve(descriptor, fixed_root)) == str(Path("a/../b/settings.ini"))

    def test_explicit_file(self):
        """Test ExplicitFile uses the given file name under the app directory."""
        descriptor = StoreDescriptor(app="MyApp", location=ExplicitFile("custom_file.json"), format=JSON)
        assert resolve(descriptor, fixed_root) == ROOT / "MyApp" / "custom_file.json"

    def test_explicit_dir(self):
        """Test ExplicitDir uses the format default name in the given directory."""
        descriptor = StoreDescriptor(app="MyApp", location=ExplicitDir("/tmp/t"), format=TOML)
        assert resolve(descriptor, fixed_root) == Path("/tmp/t/config.toml")

    def test_explicit_dir_ignores_app(self):
        """Test ExplicitDir path does not depend on the app name."""
        first = StoreDescriptor(app="One", location=ExplicitDir("/tmp/t"), format=TOML)
        second = StoreDescriptor(app="Two", location=ExplicitDir("/tmp/t"), format=TOML)
        assert resolve(first, fixed_root) == resolve(second, fixed_root)

    def test_pretty_json_same_default_name(self):
        """Test pretty JSON resolves to the same file as compact JSON."""
        compact = StoreDescriptor(app="MyApp", location=Auto(), format=JSON)
        pretty = StoreDescriptor(app="MyApp", location=Auto(), format=Format.pretty_json(4))
        assert resolve(compact, fixed_root) == resolve(pretty, fixed_root)

    @pytest.mark.parametrize(
        "location",
        [Auto(), ExplicitFile("prefs.json"), ExplicitDir("/srv/app"), ExplicitPath("/srv/app/prefs.json")],
    )
    def test_deterministic(self, location):
        """Test identical inputs resolve to identical paths."""
        descriptor = StoreDescriptor(app="MyApp", location=location, format=JSON)
        assert resolve(descriptor, fixed_root) == resolve(descriptor, fixed_root)

    @pytest.mark.parametrize("location", [Auto(), ExplicitFile("prefs.json")])
    def test_root_unavailable(self, location):
        """Test root-dependent strategies fail without a config root."""
        descriptor = StoreDescriptor(app="MyApp", location=location, format=JSON)
        with pytest.raises(DirectoryUnavailableError):
            resolve(descriptor, no_root)

    @pytest.mark.parametrize("location", [ExplicitDir("/srv/app"), ExplicitPath("/srv/app/prefs.json")])
    def test_root_not_needed(self, location):
        """Test explicit directory and path strategies never consult the root."""
        descriptor = StoreDescriptor(app="MyApp", location=location, format=JSON)
        assert resolve(descriptor, no_root).parent == Path("/srv/app")

    def test_does_not_touch_filesystem(self, tmp_path):
        """Test resolution creates nothing."""
        descriptor = StoreDescriptor(app="MyApp", location=Auto(), format=JSON)
        path = resolve(descriptor, lambda: tmp_path)
        assert not path.parent.exists()
        assert list(tmp_path.iterdir()) == []

    def test_unknown_location(self):
        """Test unknown strategies are rejected."""

        class Elsewhere(Location):
            pass

        descriptor = StoreDescriptor(app="MyApp", location=Elsewhere(), format=JSON)
        with pytest.raises(TypeError):
            resolve(descriptor, fixed_root)


class TestUserConfigRoot:
    """Test user_config_root function."""

    def test_returns_absolute_path(self):
        """Test the platform root is absolute when available."""
        root = user_config_root()
        assert root is None or root.is_absolute()

    def test_default_provider(self, monkeypatch, tmp_path):
        """Test resolve defaults to the platform config root."""
        monkeypatch.setattr("prefstore.locations.user_config_path", lambda: tmp_path)
        descriptor = StoreDescriptor(app="MyApp", location=Auto(), format=JSON)
        assert resolve(descriptor) == tmp_path / "MyApp" / "config.json"

    def test_relative_root_is_unavailable(self, monkeypatch):
        """Test an unexpanded home directory counts as unavailable."""
        monkeypatch.setattr("prefstore.locations.user_config_path", lambda: Path("~/.config"))
        assert user_config_root() is None
