"""Parser for component settings stored in XML layout files.

Layout files store each component's settings as child tags of a ``<Settings>``
element. Colors are ``AARRGGBB`` hex strings and booleans are ``True`` or
``False``.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Optional, Union

from split_monitor.core.styles import Color, Gradient
from split_monitor.error_handling import report_parse_error
from split_monitor.ui.reset_chance import ResetChanceComponent, ResetChanceSettings

logger = logging.getLogger(__name__)

SettingsSource = Union[str, bytes, ET.Element]


class LayoutParseError(ValueError):
    """Raised when a settings tag holds a value that cannot be parsed."""

    def __init__(self, message: str, tag: Optional[str] = None, text: Optional[str] = None):
        self.tag = tag
        self.text = text
        super().__init__(message)


def _text(element: ET.Element) -> str:
    return (element.text or "").strip()


def parse_bool(element: ET.Element) -> bool:
    """Parse a ``True``/``False`` tag, ignoring case."""
    text = _text(element)
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise LayoutParseError(f"Invalid boolean in <{element.tag}>: {text!r}", element.tag, text)


def parse_color(element: ET.Element) -> Color:
    """Parse an ``AARRGGBB`` color tag."""
    text = _text(element)
    try:
        return Color.from_argb_hex(text)
    except ValueError as e:
        raise LayoutParseError(
            f"Invalid color in <{element.tag}>: {text!r}", element.tag, text
        ) from e


class GradientBuilder:
    """Collects the background tags of a component and builds its gradient."""

    GRADIENT_KINDS = ("Plain", "Vertical", "Horizontal")

    def __init__(
        self,
        tag_color1: str = "BackgroundColor",
        tag_color2: str = "BackgroundColor2",
        tag_kind: str = "BackgroundGradient",
    ):
        self.tag_color1 = tag_color1
        self.tag_color2 = tag_color2
        self.tag_kind = tag_kind
        self.kind = "Plain"
        self.first = Color.transparent()
        self.second = Color.transparent()

    def parse_background(self, element: ET.Element) -> bool:
        """Consume ``element`` if it is a background tag.

        Returns:
            True if the tag belonged to the background, False otherwise.
        """
        if element.tag == self.tag_color1:
            self.first = parse_color(element)
        elif element.tag == self.tag_color2:
            self.second = parse_color(element)
        elif element.tag == self.tag_kind:
            text = _text(element)
            if text not in self.GRADIENT_KINDS:
                raise LayoutParseError(
                    f"Invalid gradient type in <{element.tag}>: {text!r}",
                    element.tag,
                    text,
                )
            self.kind = text
        else:
            return False
        return True

    def build(self) -> Gradient:
        if self.kind == "Vertical":
            return Gradient.vertical(self.first, self.second)
        if self.kind == "Horizontal":
            return Gradient.horizontal(self.first, self.second)
        if self.first.is_transparent:
            return Gradient.transparent()
        return Gradient.plain(self.first)


def _settings_element(source: SettingsSource) -> ET.Element:
    if isinstance(source, ET.Element):
        return source
    try:
        return ET.fromstring(source)
    except ET.ParseError as e:
        raise LayoutParseError(f"Malformed settings document: {e}") from e


def parse_reset_chance_settings(
    source: SettingsSource, base: Optional[ResetChanceSettings] = None
) -> ResetChanceSettings:
    """
    Parse the ``<Settings>`` element of a Reset Chance component.

    Label and value colors only take effect when their ``OverrideTextColor`` /
    ``OverrideChanceColor`` tag is present and true; otherwise they are reset to
    ``None`` so the layout's colors apply. Tags this component does not
    interpret (``ChanceMode``, ``Accuracy``, ``Basis`` ...) are skipped.

    Parameters:
        source: The settings element, or its XML text.
        base: Settings to start from. Defaults are used when omitted. The
            object itself is not modified.

    Returns:
        ResetChanceSettings: The parsed settings.

    Raises:
        LayoutParseError: If the document or one of the interpreted tags is
            malformed.
    """
    settings = (base or ResetChanceSettings()).model_copy()
    background_builder = GradientBuilder()
    override_label = False
    override_value = False
    tag: Optional[str] = None

    try:
        root = _settings_element(source)
        for child in root:
            tag = child.tag
            if background_builder.parse_background(child):
                continue
            if tag == "TextColor":
                settings.label_color = parse_color(child)
            elif tag == "OverrideTextColor":
                override_label = parse_bool(child)
            elif tag == "ChanceColor":
                settings.value_color = parse_color(child)
            elif tag == "OverrideChanceColor":
                override_value = parse_bool(child)
            elif tag == "Display2Rows":
                settings.display_two_rows = parse_bool(child)
            else:
                logger.debug(f"Skipping unsupported Reset Chance setting <{tag}>")
    except LayoutParseError as e:
        report_parse_error(
            e, e.tag or tag, ResetChanceComponent.NAME, {"text": e.text}
        )
        raise

    if not override_label:
        settings.label_color = None
    if not override_value:
        settings.value_color = None
    settings.background = background_builder.build()

    return settings


def load_reset_chance_component(source: SettingsSource) -> ResetChanceComponent:
    """Create a Reset Chance component from its layout settings."""
    return ResetChanceComponent.with_settings(parse_reset_chance_settings(source))
