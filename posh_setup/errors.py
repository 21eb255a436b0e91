from __future__ import annotations


class SetupError(RuntimeError):
    """Base class for failures that abort (or degrade) a setup run."""


class ToolInstallError(SetupError):
    pass


class FontInstallError(SetupError):
    pass


class AssetNotFoundError(SetupError):
    pass


class SettingsParseError(SetupError, ValueError):
    """A settings document is not valid JSON or its root is not an object."""


class KeyPathConflictError(SetupError):
    """An intermediate key-path segment holds a non-mapping value."""
