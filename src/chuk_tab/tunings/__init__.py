"""
Tuning presets - the open-string notes a Section is built against.
"""

from chuk_tab.tunings.loader import TuningLoader
from chuk_tab.tunings.presets import BUILTIN_TUNINGS

__all__ = [
    "BUILTIN_TUNINGS",
    "TuningLoader",
]
