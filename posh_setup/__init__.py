"""posh-setup: PowerShell prompt environment provisioning.

Core design goals:
- Idempotent steps (re-running converges to the same files)
- Timestamped backup before every in-place modification
- Presence is probed, never assumed from a package manager exit code
- Centralized logging
"""

__all__ = []
