from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

TERMINAL_PACKAGES = (
    "Microsoft.WindowsTerminal_8wekyb3d8bbwe",
    "Microsoft.WindowsTerminalPreview_8wekyb3d8bbwe",
)


@dataclass(frozen=True)
class UserPaths:
    """Per-user locations the setup steps read and write.

    Everything derives from three roots so tests can point the whole run at a
    temporary directory.
    """

    home: Path
    local_appdata: Path
    windir: Path

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "UserPaths":
        env = os.environ if environ is None else environ
        home = Path(env.get("USERPROFILE") or env.get("HOME") or Path.home())
        local_appdata = Path(env.get("LOCALAPPDATA") or home / "AppData" / "Local")
        windir = Path(env.get("WINDIR") or env.get("SystemRoot") or "C:/Windows")
        return cls(home=home, local_appdata=local_appdata, windir=windir)

    @property
    def pwsh_profile(self) -> Path:
        return self.home / "Documents" / "PowerShell" / "Microsoft.PowerShell_profile.ps1"

    @property
    def theme_dir(self) -> Path:
        return self.home / ".config" / "oh-my-posh"

    @property
    def log_path(self) -> Path:
        return self.home / ".posh-setup" / "posh-setup.log"

    @property
    def terminal_settings_candidates(self) -> list[Path]:
        return [
            self.local_appdata / "Packages" / pkg / "LocalState" / "settings.json"
            for pkg in TERMINAL_PACKAGES
        ]

    @property
    def font_dirs(self) -> list[Path]:
        return [
            self.windir / "Fonts",
            self.local_appdata / "Microsoft" / "Windows" / "Fonts",
        ]

    @property
    def omp_candidates(self) -> list[Path]:
        # winget installs per-user; scoop exposes a shim.
        return [
            self.local_appdata / "Programs" / "oh-my-posh" / "bin" / "oh-my-posh.exe",
            self.home / "scoop" / "shims" / "oh-my-posh.exe",
        ]
