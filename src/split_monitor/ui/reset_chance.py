"""Reset Chance component.

Shows the probability of failing to complete the current split, or of
completing it when showing successes. Without an active attempt it shows the
chance for the run as a whole. During an attempt it changes with the current
split.
"""

import logging
from typing import Any, Callable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField

from split_monitor.analysis import reset_chance
from split_monitor.analysis.reset_chance import SuccessCounts
from split_monitor.core.settings import (
    Field,
    SettingIndexError,
    SettingsDescription,
    SettingTypeError,
)
from split_monitor.core.styles import DEFAULT_GRADIENT, Color, Gradient
from split_monitor.core.timing import TimerPhase, TimerSnapshot
from split_monitor.ui.key_value import KeyValueState

logger = logging.getLogger(__name__)


class ResetChanceSettings(BaseModel):
    """Settings of the Reset Chance component.

    ``label_color`` and ``value_color`` fall back to the layout's colors when
    ``None``.
    """

    model_config = ConfigDict(validate_assignment=True)

    background: Gradient = DEFAULT_GRADIENT
    display_two_rows: bool = PydanticField(default=False, strict=True)
    label_color: Optional[Color] = None
    value_color: Optional[Color] = None
    show_successes: bool = PydanticField(default=False, strict=True)
    show_attempt_details: bool = PydanticField(default=False, strict=True)


def _is_gradient(value: Any) -> bool:
    return isinstance(value, Gradient)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_optional_color(value: Any) -> bool:
    return value is None or isinstance(value, Color)


# Position -> (display name, settings attribute, expected type, type check)
_SETTING_FIELDS: List[Tuple[str, str, str, Callable[[Any], bool]]] = [
    ("Background", "background", "a Gradient", _is_gradient),
    ("Display in Two Rows", "display_two_rows", "a bool", _is_bool),
    ("Label Color", "label_color", "a Color or None", _is_optional_color),
    ("Value Color", "value_color", "a Color or None", _is_optional_color),
    ("Show Successes", "show_successes", "a bool", _is_bool),
    ("Show Attempt Details", "show_attempt_details", "a bool", _is_bool),
]

_SETTING_DESCRIPTIONS = {
    "background": "The background shown behind the component.",
    "display_two_rows": (
        "Specifies whether to display the name of the component and the reset "
        "chance in two separate rows."
    ),
    "label_color": (
        "The color of the component's name. If not specified, the color is "
        "taken from the layout."
    ),
    "value_color": (
        "The color of the chance. If not specified, the color is taken from "
        "the layout."
    ),
    "show_successes": (
        "Instead of showing the reset chance, show the success chance for the "
        "current split."
    ),
    "show_attempt_details": (
        "In addition to showing the reset chance, show the attempt counts used "
        "for the calculation."
    ),
}


class ResetChanceComponent:
    """Displays the reset or success chance of the current split.

    Success counts are cached until the timer phase or the current split
    changes. While the timer is not running they are recalculated on every
    refresh, since attempts can be added to the run while idle.
    """

    NAME = "Reset Chance"

    def __init__(self, settings: Optional[ResetChanceSettings] = None):
        self._settings = settings if settings is not None else ResetChanceSettings()
        self._timer_phase: Optional[TimerPhase] = None
        self._split_index: Optional[int] = None
        self._success_counts: Optional[SuccessCounts] = None

    @classmethod
    def with_settings(cls, settings: ResetChanceSettings) -> "ResetChanceComponent":
        return cls(settings)

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def settings(self) -> ResetChanceSettings:
        """The live settings object, mutable in place."""
        return self._settings

    def get_settings(self) -> ResetChanceSettings:
        return self._settings

    def set_settings(self, settings: ResetChanceSettings) -> None:
        self._settings = settings

    @property
    def cached_counts(self) -> Optional[SuccessCounts]:
        return self._success_counts

    def _refresh_counts(self, timer: TimerSnapshot) -> SuccessCounts:
        phase = timer.current_phase()
        if phase != self._timer_phase or phase == TimerPhase.NOT_RUNNING:
            self._timer_phase = phase
            self._success_counts = None
        if timer.current_split_index != self._split_index:
            self._split_index = timer.current_split_index
            self._success_counts = None
        if self._success_counts is None:
            self._success_counts = reset_chance.calculate(timer)
            logger.debug(
                f"Recalculated success counts for phase {phase.value}, "
                f"split {self._split_index}: "
                f"{self._success_counts.successful_attempts}/"
                f"{self._success_counts.total_attempts}"
            )
        return self._success_counts

    def update_state(self, state: KeyValueState, timer: TimerSnapshot) -> None:
        """Update an existing key/value state based on the timer snapshot."""
        settings = self._settings
        state.background = settings.background
        state.key_color = settings.label_color
        state.value_color = settings.value_color
        state.key = "Success Chance" if settings.show_successes else "Reset Chance"

        cached = self._refresh_counts(timer)
        successful = cached.successful_attempts
        total = cached.total_attempts
        if not settings.show_successes:
            successful = total - successful

        if total == 0:
            chance = 1.0 if settings.show_successes else 0.0
        else:
            chance = successful / total

        if settings.show_attempt_details:
            state.value = f"{successful}/{total} ({100.0 * chance:.1f}%)"
        else:
            state.value = f"{100.0 * chance:.1f}%"

        state.key_abbreviations.clear()
        state.display_two_rows = settings.display_two_rows
        state.updates_frequently = False

    def refresh(self, timer: TimerSnapshot) -> KeyValueState:
        """Calculate the component's state based on the timer snapshot."""
        state = KeyValueState()
        self.update_state(state, timer)
        return state

    state = refresh

    def describe_settings(self) -> SettingsDescription:
        """Describe the settings of this component and their current values."""
        return SettingsDescription.with_fields(
            [
                Field(
                    name=name,
                    description=_SETTING_DESCRIPTIONS[attribute],
                    value=getattr(self._settings, attribute),
                )
                for name, attribute, _, _ in _SETTING_FIELDS
            ]
        )

    def set_setting_by_index(self, index: int, value: Any) -> None:
        """
        Set a setting by its position in ``describe_settings``.

        Raises:
            SettingIndexError: If ``index`` does not name a setting.
            SettingTypeError: If ``value`` does not fit the setting's type.
        """
        if not 0 <= index < len(_SETTING_FIELDS):
            raise SettingIndexError(index, len(_SETTING_FIELDS))
        name, attribute, expected, type_check = _SETTING_FIELDS[index]
        if not type_check(value):
            raise SettingTypeError(name, expected, value)
        setattr(self._settings, attribute, value)

    set_value = set_setting_by_index
