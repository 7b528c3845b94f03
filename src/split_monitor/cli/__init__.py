"""Bootstrap helpers for applications embedding Split Monitor."""

from typing import List

__all__: List[str] = []
