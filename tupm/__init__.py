"""tupm: a minimal cross-platform package installer.

Core design goals:
- One file per package, placed in a privileged bin directory
- Ordered source manifests, first match wins
- Permission preflight before any destructive action
- Centralized logging
"""

__all__ = []
