"""Tests for the layout settings parser."""

import xml.etree.ElementTree as ET
from unittest.mock import patch

import pytest

from split_monitor.core.styles import Color, Gradient, GradientKind
from split_monitor.layout.parser import (
    GradientBuilder,
    LayoutParseError,
    load_reset_chance_component,
    parse_bool,
    parse_color,
    parse_reset_chance_settings,
)
from split_monitor.ui.reset_chance import ResetChanceComponent, ResetChanceSettings

FULL_SETTINGS = """
<Settings>
  <Version>1.5</Version>
  <TextColor>FFFF0000</TextColor>
  <OverrideTextColor>True</OverrideTextColor>
  <ChanceColor>FF00FF00</ChanceColor>
  <OverrideChanceColor>True</OverrideChanceColor>
  <BackgroundColor>FF0000FF</BackgroundColor>
  <BackgroundColor2>80FFFFFF</BackgroundColor2>
  <BackgroundGradient>Vertical</BackgroundGradient>
  <Display2Rows>True</Display2Rows>
  <ChanceMode>Reset</ChanceMode>
  <Accuracy>1</Accuracy>
  <Basis>All</Basis>
  <BasisSubset>10</BasisSubset>
  <BasisSubsetSplits>False</BasisSubsetSplits>
</Settings>
"""


def _element(tag: str, text: str) -> ET.Element:
    element = ET.Element(tag)
    element.text = text
    return element


class TestPrimitives:
    """Test cases for boolean and color tags."""

    @pytest.mark.parametrize("text, expected", [("True", True), ("false", False), (" TRUE ", True)])
    def test_parse_bool(self, text, expected):
        assert parse_bool(_element("Display2Rows", text)) is expected

    @pytest.mark.parametrize("text", ["", "yes", "1"])
    def test_parse_bool_invalid(self, text):
        with pytest.raises(LayoutParseError) as exc_info:
            parse_bool(_element("Display2Rows", text))
        assert exc_info.value.tag == "Display2Rows"

    def test_parse_color_argb(self):
        color = parse_color(_element("TextColor", "80FF0000"))
        assert color.red == 1.0
        assert color.green == 0.0
        assert color.blue == 0.0
        assert color.alpha == pytest.approx(128 / 255)

    @pytest.mark.parametrize("text", ["", "GGGGGG", "1FFFFFFFF"])
    def test_parse_color_invalid(self, text):
        with pytest.raises(LayoutParseError):
            parse_color(_element("TextColor", text))


class TestGradientBuilder:
    """Test cases for GradientBuilder."""

    def test_defaults_to_transparent(self):
        assert GradientBuilder().build() == Gradient.transparent()

    def test_plain(self):
        builder = GradientBuilder()
        assert builder.parse_background(_element("BackgroundColor", "FF112233"))
        assert builder.build().kind == GradientKind.PLAIN

    def test_plain_with_transparent_color(self):
        builder = GradientBuilder()
        builder.parse_background(_element("BackgroundColor", "00112233"))
        builder.parse_background(_element("BackgroundGradient", "Plain"))
        assert builder.build() == Gradient.transparent()

    def test_horizontal(self):
        builder = GradientBuilder()
        builder.parse_background(_element("BackgroundColor", "FFFFFFFF"))
        builder.parse_background(_element("BackgroundGradient", "Horizontal"))
        gradient = builder.build()
        assert gradient.kind == GradientKind.HORIZONTAL
        assert gradient.first == Color.rgba(1.0, 1.0, 1.0, 1.0)
        assert gradient.second == Color.transparent()

    def test_ignores_other_tags(self):
        assert GradientBuilder().parse_background(_element("TextColor", "FFFFFFFF")) is False

    def test_invalid_kind(self):
        with pytest.raises(LayoutParseError):
            GradientBuilder().parse_background(_element("BackgroundGradient", "Diagonal"))


class TestParseResetChanceSettings:
    """Test cases for parse_reset_chance_settings."""

    def test_full_settings(self):
        settings = parse_reset_chance_settings(FULL_SETTINGS)

        assert settings.label_color == Color.rgba(1.0, 0.0, 0.0, 1.0)
        assert settings.value_color == Color.rgba(0.0, 1.0, 0.0, 1.0)
        assert settings.display_two_rows is True
        assert settings.background.kind == GradientKind.VERTICAL
        assert settings.background.first == Color.rgba(0.0, 0.0, 1.0, 1.0)
        assert settings.background.second.alpha == pytest.approx(128 / 255)
        assert settings.show_successes is False
        assert settings.show_attempt_details is False

    def test_label_color_without_override_is_inherited(self):
        settings = parse_reset_chance_settings(
            "<Settings><TextColor>FFFF0000</TextColor></Settings>"
        )
        assert settings.label_color is None

    def test_colors_with_disabled_override_are_inherited(self):
        settings = parse_reset_chance_settings(
            "<Settings>"
            "<TextColor>FFFF0000</TextColor><OverrideTextColor>False</OverrideTextColor>"
            "<ChanceColor>FF00FF00</ChanceColor><OverrideChanceColor>False</OverrideChanceColor>"
            "</Settings>"
        )
        assert settings.label_color is None
        assert settings.value_color is None

    def test_override_order_does_not_matter(self):
        settings = parse_reset_chance_settings(
            "<Settings><OverrideChanceColor>True</OverrideChanceColor>"
            "<ChanceColor>FF00FF00</ChanceColor></Settings>"
        )
        assert settings.value_color == Color.rgba(0.0, 1.0, 0.0, 1.0)
        assert settings.label_color is None

    def test_empty_settings(self):
        settings = parse_reset_chance_settings("<Settings/>")
        assert settings.background == Gradient.transparent()
        assert settings.display_two_rows is False

    def test_accepts_element(self):
        settings = parse_reset_chance_settings(ET.fromstring(FULL_SETTINGS))
        assert settings.display_two_rows is True

    def test_base_settings_are_kept_and_not_modified(self):
        base = ResetChanceSettings(show_successes=True, show_attempt_details=True)
        settings = parse_reset_chance_settings(
            "<Settings><Display2Rows>True</Display2Rows></Settings>", base
        )
        assert settings.show_successes is True
        assert settings.show_attempt_details is True
        assert base.display_two_rows is False

    def test_invalid_value_is_reported_and_raised(self):
        with patch("split_monitor.layout.parser.report_parse_error") as mock_report:
            with pytest.raises(LayoutParseError):
                parse_reset_chance_settings(
                    "<Settings><Display2Rows>maybe</Display2Rows></Settings>"
                )

        mock_report.assert_called_once()
        args = mock_report.call_args[0]
        assert args[1] == "Display2Rows"
        assert args[2] == "Reset Chance"

    def test_malformed_document(self):
        with patch("split_monitor.layout.parser.report_parse_error"):
            with pytest.raises(LayoutParseError, match="Malformed"):
                parse_reset_chance_settings("<Settings><TextColor>")

    def test_load_component(self):
        component = load_reset_chance_component(FULL_SETTINGS)
        assert isinstance(component, ResetChanceComponent)
        assert component.settings.display_two_rows is True
