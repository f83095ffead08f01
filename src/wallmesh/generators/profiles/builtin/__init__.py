"""
Built-in wall profiles.

- DEFAULT_PROFILE: 16px cells, 8px bevel
- LARGE_PROFILE: 32px cells, 16px bevel
"""

from .default import DEFAULT_PROFILE
from .large import LARGE_PROFILE

__all__ = ['DEFAULT_PROFILE', 'LARGE_PROFILE']
