"""Generic key/value component state and its rich rendering.

Every component that shows a single label next to a single value produces a
``KeyValueState``. Renderers only depend on this record, which lets such
components be composed into any layout.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from rich.console import RenderableType
from rich.style import Style
from rich.table import Table
from rich.text import Text

from split_monitor.core.styles import DEFAULT_GRADIENT, Color, Gradient


@dataclass
class KeyValueState:
    """The state object describing a key/value component to visualize."""

    background: Gradient = DEFAULT_GRADIENT
    key_color: Optional[Color] = None
    value_color: Optional[Color] = None
    key: str = ""
    value: str = ""
    key_abbreviations: List[str] = field(default_factory=list)
    display_two_rows: bool = False
    updates_frequently: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Encode the state as plain JSON-compatible data."""
        return {
            "background": self.background.model_dump(mode="json"),
            "key_color": _color_to_json(self.key_color),
            "value_color": _color_to_json(self.value_color),
            "key": self.key,
            "value": self.value,
            "key_abbreviations": list(self.key_abbreviations),
            "display_two_rows": self.display_two_rows,
            "updates_frequently": self.updates_frequently,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


def _color_to_json(color: Optional[Color]) -> Optional[Dict[str, Any]]:
    if color is None:
        return None
    return color.model_dump(mode="json")


class KeyValueRenderer:
    """Renders ``KeyValueState`` records with Rich.

    Colors that are not overridden by the component fall back to the layout's
    text colors given here.
    """

    MIN_BACKGROUND_ALPHA = 0.5

    def __init__(
        self,
        default_key_color: Optional[Color] = None,
        default_value_color: Optional[Color] = None,
    ):
        self.default_key_color = default_key_color
        self.default_value_color = default_value_color

    def render(self, state: KeyValueState) -> RenderableType:
        """Render one component as a single or two row grid."""
        background = state.background.primary_color()
        # Terminals cannot blend; mostly translucent backgrounds are left out.
        if background is not None and background.alpha < self.MIN_BACKGROUND_ALPHA:
            background = None
        key_text = Text(
            state.key,
            style=self._style(state.key_color or self.default_key_color, background),
        )
        value_text = Text(
            state.value,
            style=self._style(
                state.value_color or self.default_value_color, background
            ),
        )

        grid = Table.grid(expand=True)
        if state.display_two_rows:
            grid.add_column(justify="left")
            grid.add_row(key_text)
            value_text.justify = "right"
            grid.add_row(value_text)
        else:
            grid.add_column(justify="left", ratio=1)
            grid.add_column(justify="right", no_wrap=True)
            grid.add_row(key_text, value_text)

        if background is not None:
            grid.style = Style(bgcolor=background.to_rich())
        return grid

    @staticmethod
    def _style(color: Optional[Color], background: Optional[Color]) -> Style:
        return Style(
            color=color.to_rich() if color is not None else None,
            bgcolor=background.to_rich() if background is not None else None,
        )
