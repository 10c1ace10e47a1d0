#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_render_options.py
"""Unit tests for RenderOptions construction, validation and merging."""

import dataclasses

import pytest

from mdoverlay.constants import DEFAULT_BULLETS, DEFAULT_CALLOUTS, DEFAULT_HEADINGS
from mdoverlay.exceptions import ConfigurationError, ValidationError
from mdoverlay.options import CheckboxGlyphs, HeadingHighlights, HighlightOptions, RenderOptions


@pytest.mark.unit
class TestRenderOptionsDefaults:
    """Test default configuration values."""

    def test_defaults(self) -> None:
        """Test the default glyphs and table style."""
        options = RenderOptions()
        assert options.headings == DEFAULT_HEADINGS
        assert options.bullets == DEFAULT_BULLETS
        assert options.dash == "─"
        assert options.quote == "┃"
        assert options.table_style == "full"
        assert options.checkbox == CheckboxGlyphs("☐ ", "☑ ")
        assert options.callouts == DEFAULT_CALLOUTS

    def test_every_callout_has_a_style(self) -> None:
        """Test that default callouts all map to a highlight."""
        options = RenderOptions()
        assert set(options.callouts) <= set(options.highlights.callout)

    def test_frozen(self) -> None:
        """Test that options cannot be mutated in place."""
        options = RenderOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.table_style = "off"  # type: ignore[misc]

    def test_lists_become_tuples(self) -> None:
        """Test that list arguments are stored as tuples."""
        options = RenderOptions(bullets=["•", "◦"])  # type: ignore[arg-type]
        assert options.bullets == ("•", "◦")


@pytest.mark.unit
class TestRenderOptionsValidation:
    """Test that invalid configurations are rejected at construction."""

    @pytest.mark.parametrize("field_name", ["headings", "bullets"])
    def test_empty_glyph_list(self, field_name: str) -> None:
        """Test that empty glyph lists are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            RenderOptions(**{field_name: ()})
        assert exc_info.value.parameter_name == field_name

    def test_glyph_list_of_non_strings(self) -> None:
        """Test that glyph lists must contain strings."""
        with pytest.raises(ConfigurationError):
            RenderOptions(bullets=("•", 3))  # type: ignore[arg-type]

    def test_string_is_not_a_glyph_list(self) -> None:
        """Test that a bare string is not accepted as a list."""
        with pytest.raises(ConfigurationError):
            RenderOptions(bullets="•◦")  # type: ignore[arg-type]

    def test_unknown_table_style(self) -> None:
        """Test that the table style must be off, normal or full."""
        with pytest.raises(ConfigurationError, match="table_style"):
            RenderOptions(table_style="fancy")  # type: ignore[arg-type]

    def test_wide_dash(self) -> None:
        """Test that the dash must be exactly one cell wide."""
        with pytest.raises(ConfigurationError, match="dash"):
            RenderOptions(dash="==")

    def test_empty_quote(self) -> None:
        """Test that the quote glyph cannot be empty."""
        with pytest.raises(ConfigurationError):
            RenderOptions(quote="")

    def test_empty_heading_ramp(self) -> None:
        """Test that heading style ramps cannot be empty."""
        with pytest.raises(ConfigurationError) as exc_info:
            HeadingHighlights(backgrounds=())
        assert exc_info.value.parameter_name == "highlights.heading.backgrounds"

    def test_callout_without_style(self) -> None:
        """Test that every callout key needs a highlight."""
        with pytest.raises(ConfigurationError, match="bug"):
            RenderOptions(callouts={**DEFAULT_CALLOUTS, "bug": "[!BUG]"})

    def test_configuration_error_is_validation_error(self) -> None:
        """Test the exception hierarchy used by the CLI exit codes."""
        with pytest.raises(ValidationError):
            RenderOptions(bullets=())


@pytest.mark.unit
class TestRenderOptionsFromDict:
    """Test building options from plain configuration data."""

    def test_empty(self) -> None:
        """Test that empty data yields the defaults."""
        assert RenderOptions.from_dict({}) == RenderOptions()
        assert RenderOptions.from_dict(None) == RenderOptions()

    def test_scalar_and_list_override(self) -> None:
        """Test that scalars and lists replace their defaults."""
        options = RenderOptions.from_dict({"table_style": "normal", "bullets": ["•", "◦", "▪"]})
        assert options.table_style == "normal"
        assert options.bullets == ("•", "◦", "▪")

    def test_nested_sections_merge(self) -> None:
        """Test that nested sections keep their unspecified defaults."""
        options = RenderOptions.from_dict({"highlights": {"heading": {"backgrounds": ["H1bg", "H2bg"]}}})
        assert options.highlights.heading.backgrounds == ("H1bg", "H2bg")
        assert options.highlights.heading.foregrounds == HeadingHighlights().foregrounds
        assert options.highlights.dash == HighlightOptions().dash

    def test_mapping_fields_merge(self) -> None:
        """Test that callout maps are merged key by key."""
        options = RenderOptions.from_dict(
            {
                "callouts": {"bug": "[!BUG]"},
                "highlights": {"callout": {"bug": "DiagnosticError"}},
            }
        )
        assert options.callouts["bug"] == "[!BUG]"
        assert options.callouts["note"] == "[!NOTE]"
        assert options.highlights.callout["bug"] == "DiagnosticError"

    def test_unknown_key(self) -> None:
        """Test that unknown keys are reported with their dotted path."""
        with pytest.raises(ConfigurationError) as exc_info:
            RenderOptions.from_dict({"highlights": {"heading": {"colour": "red"}}})
        assert exc_info.value.parameter_name == "highlights.heading.colour"

    def test_section_must_be_mapping(self) -> None:
        """Test that a nested section given as a scalar is rejected."""
        with pytest.raises(ConfigurationError, match="highlights"):
            RenderOptions.from_dict({"highlights": "bright"})

    def test_round_trip_through_dict(self) -> None:
        """Test that to_dict output rebuilds equal options."""
        options = RenderOptions(bullets=("•",), table_style="normal")
        assert RenderOptions.from_dict(options.to_dict()) == options

    def test_to_dict_is_plain(self) -> None:
        """Test that to_dict produces lists and dicts only."""
        data = RenderOptions().to_dict()
        assert isinstance(data["headings"], list)
        assert isinstance(data["highlights"]["heading"], dict)


@pytest.mark.unit
class TestCreateUpdated:
    """Test cloning with changes."""

    def test_create_updated(self) -> None:
        """Test that create_updated returns a modified copy."""
        options = RenderOptions()
        updated = options.create_updated(table_style="off")
        assert updated.table_style == "off"
        assert options.table_style == "full"

    def test_create_updated_validates(self) -> None:
        """Test that updated copies are validated too."""
        with pytest.raises(ConfigurationError):
            RenderOptions().create_updated(bullets=())


@pytest.mark.unit
class TestCalloutMapsAreReadOnly:
    """Test that callout maps cannot be changed after construction."""

    def test_callouts_reject_assignment(self) -> None:
        """Test that adding a callout marker to built options fails."""
        options = RenderOptions()
        with pytest.raises(TypeError):
            options.callouts["bug"] = "[!BUG]"  # type: ignore[index]
        assert "bug" not in options.callouts

    def test_callout_styles_reject_assignment(self) -> None:
        """Test that callout styles cannot be replaced in place."""
        highlights = HighlightOptions()
        with pytest.raises(TypeError):
            highlights.callout["note"] = "Error"  # type: ignore[index]
        assert highlights.callout["note"] == "DiagnosticInfo"

    def test_source_dict_is_copied(self) -> None:
        """Test that mutating the dict passed in does not reach the options."""
        markers = dict(DEFAULT_CALLOUTS)
        options = RenderOptions(callouts=markers)
        markers["note"] = "[!CHANGED]"
        assert options.callouts["note"] == "[!NOTE]"

    def test_read_only_maps_survive_cloning(self) -> None:
        """Test that create_updated and to_dict work with read-only maps."""
        options = RenderOptions().create_updated(table_style="normal")
        assert options.callouts == DEFAULT_CALLOUTS
        assert isinstance(options.to_dict()["callouts"], dict)
