"""Shared fixtures for the pref-overrides test suite."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def overrides_path() -> Path:
    """Return the path of the sample user-overrides.js."""
    return FIXTURES / "user-overrides.js"


@pytest.fixture
def sample_source() -> str:
    """Return a small override source with comments and every value type."""
    return (
        "// DoH Quad9\n"
        'user_pref("network.trr.mode", 3);\n'
        'user_pref("network.trr.uri", "https://dns.quad9.net/dns-query");\n'
        "\n"
        "// Do not ask to save passwords\n"
        'user_pref("signon.rememberSignons", false);\n'
    )


@pytest.fixture
def profile_dir(tmp_path) -> Path:
    """Return an empty browser profile directory."""
    directory = tmp_path / "abcd.default-release"
    directory.mkdir()
    return directory


@pytest.fixture
def home_with_profile(tmp_path, profile_dir) -> Path:
    """Return a fake home directory whose Firefox profiles.ini points at profile_dir."""
    home = tmp_path / "home"
    base_dir = home / ".mozilla" / "firefox"
    base_dir.mkdir(parents=True)
    (base_dir / "profiles.ini").write_text(
        "[General]\n"
        "StartWithLastProfile=1\n"
        "\n"
        "[Profile0]\n"
        "Name=default-release\n"
        "IsRelative=0\n"
        f"Path={profile_dir}\n"
        "Default=1\n",
        encoding="utf-8",
    )
    return home
