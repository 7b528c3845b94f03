"""Analysis package for Split Monitor.

Pure functions computing statistics over a timer snapshot.
"""

from typing import List

# Import what you need explicitly, e.g.
#   from split_monitor.analysis.reset_chance import calculate
__all__: List[str] = []
