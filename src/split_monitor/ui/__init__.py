"""UI package for Split Monitor."""

from typing import List

__all__: List[str] = []
