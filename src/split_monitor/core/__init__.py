"""Core package for Split Monitor.

This module provides the read-only timing model, colors and gradients, and the
generic settings description shared by display components.
"""

from typing import List

__all__: List[str] = []
