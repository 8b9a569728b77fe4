"""Loading and validation of ``badges.yaml`` files."""

from __future__ import annotations

from projectbadges.config.loader import load_config
from projectbadges.config.model import BadgesConfig

__all__ = ["BadgesConfig", "load_config"]
