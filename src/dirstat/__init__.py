from __future__ import annotations

"""
dirstat: quickly gather and report directory entry statistics.
"""

from dirstat.domain.constants import VERSION as __version__

__all__ = ["__version__"]
