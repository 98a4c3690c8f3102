"""
Core utilities module.

Provides shared utility functions used across all layers.
"""

from localmemory.core.utils.paths import get_project_root
from localmemory.core.utils.time import utc_now, utc_now_iso

__all__ = ["get_project_root", "utc_now", "utc_now_iso"]
