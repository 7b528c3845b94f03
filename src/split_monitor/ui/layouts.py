"""Layout composition for key/value components.

A layout holds components of any concrete type behind ``LayoutComponent``
and renders their states as a vertical stack.
"""

from typing import Any, Iterable, List, Optional, Protocol, runtime_checkable

from rich.console import Group, RenderableType

from split_monitor.core.settings import SettingsDescription
from split_monitor.core.styles import Color
from split_monitor.core.timing import TimerSnapshot
from split_monitor.ui.key_value import KeyValueRenderer, KeyValueState


@runtime_checkable
class KeyValueComponent(Protocol):
    """Protocol for components producing a ``KeyValueState``."""

    @property
    def name(self) -> str:
        ...

    def refresh(self, timer: TimerSnapshot) -> KeyValueState:
        ...

    def describe_settings(self) -> SettingsDescription:
        ...

    def set_setting_by_index(self, index: int, value: Any) -> None:
        ...


class LayoutComponent:
    """Type-erased handle to a key/value component placed in a layout."""

    def __init__(self, component: KeyValueComponent):
        self._component = component

    @property
    def inner(self) -> KeyValueComponent:
        return self._component

    @property
    def name(self) -> str:
        return self._component.name

    def state(self, timer: TimerSnapshot) -> KeyValueState:
        return self._component.refresh(timer)

    def settings_description(self) -> SettingsDescription:
        return self._component.describe_settings()

    def set_value(self, index: int, value: Any) -> None:
        self._component.set_setting_by_index(index, value)

    def __repr__(self) -> str:
        return f"LayoutComponent({self.name!r})"


def render_layout(
    components: Iterable[LayoutComponent],
    timer: TimerSnapshot,
    text_color: Optional[Color] = None,
) -> RenderableType:
    """Refresh every component once and stack their renderings.

    Parameters:
        components: Components in display order.
        timer: Snapshot shared by all components for this frame.
        text_color: Layout text color used where a component has no override.
    """
    renderer = KeyValueRenderer(
        default_key_color=text_color, default_value_color=text_color
    )
    rows: List[RenderableType] = [
        renderer.render(component.state(timer)) for component in components
    ]
    return Group(*rows)
