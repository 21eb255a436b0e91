from __future__ import annotations

from pathlib import Path

from posh_setup.lib.env import UserPaths


def test_from_environ_prefers_windows_variables():
    paths = UserPaths.from_environ(
        {"USERPROFILE": "C:/Users/ada", "HOME": "/home/ada", "LOCALAPPDATA": "C:/Users/ada/AppData/Local", "WINDIR": "C:/Windows"}
    )

    assert paths.home == Path("C:/Users/ada")
    assert paths.pwsh_profile == Path("C:/Users/ada/Documents/PowerShell/Microsoft.PowerShell_profile.ps1")
    assert paths.font_dirs[0] == Path("C:/Windows/Fonts")


def test_from_environ_derives_missing_roots_from_home():
    paths = UserPaths.from_environ({"HOME": "/home/ada"})

    assert paths.local_appdata == Path("/home/ada/AppData/Local")
    assert paths.theme_dir == Path("/home/ada/.config/oh-my-posh")


def test_two_terminal_settings_candidates(user_paths):
    candidates = user_paths.terminal_settings_candidates

    assert len(candidates) == 2
    assert all(c.name == "settings.json" and c.parent.name == "LocalState" for c in candidates)
    assert "WindowsTerminalPreview" in str(candidates[1])
