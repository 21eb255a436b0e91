from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .lib.pkg import OMP_SCOOP_MANIFEST

DEFAULT_THEME = "posh-setup.omp.json"


@dataclass(frozen=True)
class SetupConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    def _section(self, name: str) -> Dict[str, Any]:
        sec = self.raw.get(name) or {}
        if not isinstance(sec, dict):
            raise ValueError(f"config.{name} must be a mapping/object")
        return sec

    @property
    def font_family(self) -> str:
        return str(self._section("font").get("family") or "Meslo")

    @property
    def font_face(self) -> str:
        return str(self._section("font").get("face") or "MesloLGM Nerd Font Mono")

    @property
    def font_size(self) -> int:
        size = self._section("font").get("size", 12)
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"config.font.size must be a positive integer, got {size!r}")
        return size

    @property
    def color_scheme(self) -> str:
        return str(self.raw.get("color_scheme") or "Campbell")

    @property
    def theme(self) -> str:
        return str(self.raw.get("theme") or DEFAULT_THEME)

    @property
    def winget_id(self) -> str:
        return str(self._section("tool").get("winget_id") or "JanDeDobbeleer.OhMyPosh")

    @property
    def scoop_manifest(self) -> str:
        return str(self._section("tool").get("scoop_manifest") or OMP_SCOOP_MANIFEST)

    @property
    def tool_required(self) -> bool:
        return bool(self._section("tool").get("required", False))

    @property
    def profile_path(self) -> Optional[str]:
        v = self._section("paths").get("profile")
        return str(v) if v else None

    @property
    def theme_dir(self) -> Optional[str]:
        v = self._section("paths").get("theme_dir")
        return str(v) if v else None

    @property
    def dry_run(self) -> bool:
        return bool(self.raw.get("dry_run", False))


def load_setup_config(path: Optional[str]) -> SetupConfig:
    """Load a YAML or JSON config file; ``None`` means all defaults."""

    if not path:
        return SetupConfig()

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except Exception as e:
            raise RuntimeError("PyYAML is required to read YAML config files") from e
        try:
            raw = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: invalid YAML ({e})") from e
    else:
        try:
            raw = json.loads(text) if text.strip() else {}
        except json.JSONDecodeError as e:
            raise ValueError(f"{path}: invalid JSON ({e})") from e

    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping/object")

    return SetupConfig(raw=raw)
