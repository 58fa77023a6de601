"""
Unit tests for home directory resolution.
"""

import pytest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

from cricut_finder.domain.errors import HomeDirUnresolved
from cricut_finder.infrastructure.filesystem import home
from cricut_finder.infrastructure.filesystem.home import resolve_home_dir


@pytest.mark.unit
def test_user_lookup_wins_over_environment(monkeypatch):
    """Test that the user database is consulted before the environment."""
    monkeypatch.setenv("HOME", "/from/env")
    monkeypatch.setenv("USERPROFILE", "/from/env")

    with patch.object(home, "_lookup_user_home", return_value="/from/passwd"):
        assert resolve_home_dir() == Path("/from/passwd")


@pytest.mark.unit
def test_falls_back_to_environment(monkeypatch):
    """Test that the platform environment variable is used when lookup fails."""
    monkeypatch.setattr(home, "_lookup_user_home", lambda: None)
    monkeypatch.setattr(home, "_home_env_var", lambda: "HOME")
    monkeypatch.setenv("HOME", "/from/env")

    assert resolve_home_dir() == Path("/from/env")


@pytest.mark.unit
def test_windows_uses_userprofile(monkeypatch):
    monkeypatch.setattr(home, "sys", SimpleNamespace(platform="win32"))

    assert home._home_env_var() == "USERPROFILE"


@pytest.mark.unit
def test_windows_lookup_uses_profile_location(monkeypatch):
    """Test that Windows consults the profile lookup before the environment."""
    monkeypatch.setattr(home, "sys", SimpleNamespace(platform="win32"))
    monkeypatch.setattr(home.os.path, "expanduser", lambda p: "C:\\Users\\maker")

    assert home._lookup_user_home() == "C:\\Users\\maker"


@pytest.mark.unit
def test_windows_lookup_fails_when_unexpanded(monkeypatch):
    monkeypatch.setattr(home, "sys", SimpleNamespace(platform="win32"))
    monkeypatch.setattr(home.os.path, "expanduser", lambda p: p)

    assert home._lookup_user_home() is None


@pytest.mark.unit
def test_posix_uses_home(monkeypatch):
    monkeypatch.setattr(home, "sys", SimpleNamespace(platform="linux"))

    assert home._home_env_var() == "HOME"


@pytest.mark.unit
def test_unresolved_when_everything_fails(monkeypatch):
    """Test that HomeDirUnresolved is raised when nothing yields a home."""
    monkeypatch.setattr(home, "_lookup_user_home", lambda: None)
    monkeypatch.setattr(home, "_home_env_var", lambda: "HOME")
    monkeypatch.delenv("HOME", raising=False)

    with pytest.raises(HomeDirUnresolved, match="home directory"):
        resolve_home_dir()
