from .step_10_install_tool import InstallToolStep
from .step_20_install_font import InstallFontStep
from .step_30_resolve_asset import ResolveAssetStep
from .step_40_copy_asset import CopyAssetStep
from .step_50_patch_profile import PatchProfileStep
from .step_60_patch_settings import PatchTerminalSettingsStep

__all__ = [
    "InstallToolStep",
    "InstallFontStep",
    "ResolveAssetStep",
    "CopyAssetStep",
    "PatchProfileStep",
    "PatchTerminalSettingsStep",
]
