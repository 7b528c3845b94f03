"""Generic description of a component's settings.

Components expose their settings as an ordered list of fields so that a
settings editor can show and change them by position without knowing the
component's concrete type.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, List


class SettingsError(Exception):
    """Base class for errors raised when changing a component setting."""


class SettingIndexError(SettingsError, IndexError):
    """Raised when a setting index does not name any setting."""

    def __init__(self, index: int, setting_count: int):
        self.index = index
        self.setting_count = setting_count
        super().__init__(
            f"Unsupported setting index {index}, component has {setting_count} settings"
        )


class SettingTypeError(SettingsError, TypeError):
    """Raised when a value does not match the type of the targeted setting."""

    def __init__(self, name: str, expected: str, value: Any):
        self.name = name
        self.expected = expected
        self.value = value
        super().__init__(
            f"Setting '{name}' expects {expected}, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class Field:
    """A single setting: its display name, help text and current value."""

    name: str
    description: str
    value: Any


@dataclass(frozen=True)
class SettingsDescription:
    """Ordered fields describing all settings of a component."""

    fields: List[Field] = field(default_factory=list)

    @classmethod
    def with_fields(cls, fields: List[Field]) -> "SettingsDescription":
        return cls(fields=list(fields))

    def names(self) -> List[str]:
        return [f.name for f in self.fields]

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __getitem__(self, index: int) -> Field:
        return self.fields[index]
