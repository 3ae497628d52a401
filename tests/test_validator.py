"""Tests for palette loading and structural validation."""

import json

import pytest
import yaml

from veneer.palette import (
    HexLiteral,
    PathReference,
    load_palette,
    parse_palette,
)
from veneer.palette.errors import InvalidHexColor, MalformedPath, PaletteLoadError


class TestValidation:
    """Test the structural pre-pass."""

    def test_parses_valid_palette(self, palette_data):
        palette = parse_palette(palette_data)
        assert palette.meta.name == "Test"
        assert palette.meta.version == "0.1.0"
        assert palette.meta.slug is None

    def test_classifies_values_by_prefix(self, palette_data):
        palette = parse_palette(palette_data)
        assert palette.accents["info"] == HexLiteral(hex="#123456")
        assert palette.accents["warning"] == PathReference(path="colors.light.primary")

    def test_rejects_bad_hex(self, base_toml, write_palette):
        path = write_palette(base_toml.replace("#AA0000", "#GGGGGG"))
        with pytest.raises(InvalidHexColor) as exc_info:
            load_palette(path)
        err = exc_info.value
        assert err.label == "ansi.light.normal.red"
        assert err.value == "#GGGGGG"
        assert "invalid hex color" in str(err)

    def test_rejects_path_without_dot(self, base_toml, write_palette):
        path = write_palette(base_toml.replace("colors.light.primary", "colors_light_primary"))
        with pytest.raises(MalformedPath) as exc_info:
            load_palette(path)
        err = exc_info.value
        # accents are checked before the ansi rows
        assert err.label == "accents.warning"
        assert err.value == "colors_light_primary"
        assert "must contain at least one '.' segment" in str(err)

    def test_last_slot_is_checked(self, palette_data):
        """The final ansi slot is visited too."""
        palette_data["ansi"]["dark"]["bright"]["white"] = "#FFF"
        with pytest.raises(InvalidHexColor) as exc_info:
            parse_palette(palette_data)
        assert exc_info.value.label == "ansi.dark.bright.white"

    def test_user_defined_key_is_checked(self, palette_data):
        palette_data["colors"]["dark"]["zz_custom"] = "#12"
        with pytest.raises(InvalidHexColor) as exc_info:
            parse_palette(palette_data)
        assert exc_info.value.label == "colors.dark.zz_custom"

    def test_unresolvable_reference_passes_validation(self, palette_data):
        """Validation is syntax only; targets are not looked up."""
        palette_data["accents"]["warning"] = "colors.light.nonexistent"
        palette = parse_palette(palette_data)
        assert palette.accents["warning"].path == "colors.light.nonexistent"


class TestLoading:
    """Test decoding palette files."""

    def test_loads_toml(self, write_palette):
        palette = load_palette(write_palette())
        assert palette.colors.light["primary"].hex == "#111111"

    def test_loads_yaml(self, palette_data, write_palette):
        path = write_palette(yaml.safe_dump(palette_data), name="palette.yaml")
        palette = load_palette(path)
        assert palette.accents["warning"].path == "colors.light.primary"

    def test_loads_json(self, palette_data, write_palette):
        path = write_palette(json.dumps(palette_data), name="palette.json")
        palette = load_palette(path)
        assert palette.ansi.dark.normal.white.path == "colors.dark.text_primary"

    def test_meta_passthrough(self, palette_data):
        palette_data["meta"]["author"] = "someone"
        palette = parse_palette(palette_data)
        assert palette.meta.model_dump()["author"] == "someone"

    def test_unsupported_suffix(self, write_palette):
        with pytest.raises(PaletteLoadError, match="unsupported file format"):
            load_palette(write_palette(name="palette.ini"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(PaletteLoadError, match="cannot read file"):
            load_palette(tmp_path / "nope.toml")

    def test_invalid_toml(self, write_palette):
        with pytest.raises(PaletteLoadError, match="invalid TOML"):
            load_palette(write_palette("[meta\nname = "))

    def test_invalid_yaml(self, write_palette):
        with pytest.raises(PaletteLoadError, match="invalid YAML"):
            load_palette(write_palette("meta: [unclosed", name="palette.yaml"))

    def test_non_mapping_root(self, write_palette):
        with pytest.raises(PaletteLoadError, match="document root"):
            load_palette(write_palette("[1, 2, 3]", name="palette.json"))

    def test_missing_ansi_row(self, palette_data):
        del palette_data["ansi"]["light"]["bright"]
        with pytest.raises(PaletteLoadError, match="invalid palette document"):
            parse_palette(palette_data)

    def test_missing_ansi_slot(self, palette_data):
        del palette_data["ansi"]["dark"]["normal"]["cyan"]
        with pytest.raises(PaletteLoadError):
            parse_palette(palette_data)

    def test_missing_meta_name(self, palette_data):
        del palette_data["meta"]["name"]
        with pytest.raises(PaletteLoadError):
            parse_palette(palette_data)

    def test_non_string_leaf(self, palette_data):
        palette_data["accents"]["info"] = 123456
        with pytest.raises(PaletteLoadError, match="must be a string"):
            parse_palette(palette_data)

    def test_load_error_is_value_error(self, write_palette):
        """Callers may catch the whole taxonomy as ValueError."""
        with pytest.raises(ValueError):
            load_palette(write_palette(name="palette.txt"))
