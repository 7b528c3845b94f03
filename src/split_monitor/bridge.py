"""Entry points for hosts embedding the Reset Chance component.

Each read operation takes a fresh snapshot from the timer and refreshes the
component exactly once.
"""

from split_monitor.core.timing import SnapshotSource
from split_monitor.ui.key_value import KeyValueState
from split_monitor.ui.layouts import LayoutComponent
from split_monitor.ui.reset_chance import ResetChanceComponent


def new_component() -> ResetChanceComponent:
    """Create a new Reset Chance component with default settings."""
    return ResetChanceComponent()


def drop_component(component: ResetChanceComponent) -> None:
    """Release a component.

    Components hold no external resources, so there is nothing to free. This
    exists only so hosts can pair every ``new_component`` with a release call.
    """


def into_generic(component: ResetChanceComponent) -> LayoutComponent:
    """Convert the component into a generic component usable in a layout."""
    return LayoutComponent(component)


def component_state(
    component: ResetChanceComponent, timer: SnapshotSource
) -> KeyValueState:
    """Calculate the component's state based on the timer provided."""
    return component.refresh(timer.snapshot())


def component_state_as_json(
    component: ResetChanceComponent, timer: SnapshotSource
) -> str:
    """Encode the component's state information as JSON."""
    return component_state(component, timer).to_json()
