"""
tests/test_config.py
====================
Settings validation: types are checked before lengths, in a fixed order.
"""
import dataclasses

import pytest

from password_toolkit import (
    DEFAULT_QUALITIES,
    DEFAULT_SUGGESTIONS,
    PasswordToolKit,
    PasswordToolkitError,
    SettingsRangeError,
    SettingsTypeError,
    ToolkitSettings,
)


class TestDefaults:

    def test_default_instance(self):
        tk = PasswordToolKit()
        assert tk.maximum == 30
        assert tk.suggestions == list(DEFAULT_SUGGESTIONS)
        assert tk.qualities == ["insecure", "low", "medium", "high", "perfect"]

    def test_default_suggestions_text(self):
        assert DEFAULT_SUGGESTIONS[0] == "The password must have at least 8 characters."
        assert DEFAULT_SUGGESTIONS[6] == "Excellent! The password is secure."
        assert len(DEFAULT_SUGGESTIONS) == 7
        assert len(DEFAULT_QUALITIES) == 5

    def test_custom_settings_from_dict(self, spanish_toolkit, spanish_settings):
        assert spanish_toolkit.maximum == 30
        assert spanish_toolkit.suggestions == spanish_settings["suggestions"]
        assert spanish_toolkit.qualities == ["Inseguro", "Bajo", "Medio", "Alto", "Perfecto"]

    def test_settings_instance_is_used_as_is(self):
        settings = ToolkitSettings(maximum=12)
        tk = PasswordToolKit(settings)
        assert tk.settings is settings
        assert tk.maximum == 12

    def test_unknown_keys_are_ignored(self):
        tk = PasswordToolKit({"maximum": 20, "colour": "blue"})
        assert tk.maximum == 20

    def test_empty_dict_gives_defaults(self):
        tk = PasswordToolKit({})
        assert tk.settings == ToolkitSettings()


class TestImmutability:

    def test_settings_are_frozen(self):
        settings = ToolkitSettings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.maximum = 50

    def test_toolkit_properties_are_read_only(self, toolkit):
        with pytest.raises(AttributeError):
            toolkit.maximum = 50
        with pytest.raises(AttributeError):
            toolkit.qualities = ["a", "b", "c", "d", "e"]

    def test_caller_list_is_copied(self):
        qualities = ["a", "b", "c", "d", "e"]
        tk = PasswordToolKit({"qualities": qualities})
        qualities[0] = "changed"
        assert tk.qualities[0] == "a"

    def test_returned_lists_are_copies(self, toolkit):
        toolkit.suggestions.append("extra")
        assert len(toolkit.suggestions) == 7


class TestTypeErrors:

    @pytest.mark.parametrize("settings", [True, False, "settings", 42, ["maximum"]])
    def test_settings_must_be_mapping(self, settings):
        with pytest.raises(SettingsTypeError, match='The "options" must be an object.'):
            PasswordToolKit(settings)

    def test_suggestions_must_be_sequence(self):
        with pytest.raises(SettingsTypeError, match='"suggestions" value must be an array'):
            PasswordToolKit({"suggestions": True})

    def test_suggestions_string_is_not_a_sequence(self):
        with pytest.raises(SettingsTypeError):
            PasswordToolKit({"suggestions": "abcdefg"})

    def test_qualities_must_be_sequence(self):
        with pytest.raises(SettingsTypeError, match='"qualities" value must be an array'):
            PasswordToolKit({"qualities": True})

    def test_qualities_none_is_a_type_error(self):
        with pytest.raises(SettingsTypeError):
            PasswordToolKit({"qualities": None})

    @pytest.mark.parametrize("maximum", [True, "30", None])
    def test_maximum_must_be_number(self, maximum):
        with pytest.raises(SettingsTypeError, match='"maximum" value must be a number'):
            PasswordToolKit({"maximum": maximum})

    def test_suggestions_non_string_element(self, spanish_settings):
        suggestions = spanish_settings["suggestions"][:6] + [2]
        with pytest.raises(SettingsTypeError, match='All "suggestions" values'):
            PasswordToolKit({"suggestions": suggestions})

    def test_qualities_non_string_element(self):
        with pytest.raises(SettingsTypeError, match='All "qualities" values'):
            PasswordToolKit({"qualities": ["Inseguro", "Bajo", "Medio", "Alto", True]})

    def test_type_checked_before_length(self):
        # 6 elements, one of them not a string: the type error wins.
        with pytest.raises(SettingsTypeError):
            PasswordToolKit({"suggestions": ["a", "b", "c", "d", "e", 6]})

    def test_rng_must_be_random_instance(self):
        with pytest.raises(SettingsTypeError):
            PasswordToolKit(rng=42)


class TestRangeErrors:

    @pytest.mark.parametrize("count", [0, 6, 8])
    def test_suggestions_length(self, count):
        with pytest.raises(
            SettingsRangeError,
            match='The "suggestions" elements number must be equal to 7.',
        ):
            PasswordToolKit({"suggestions": ["tip"] * count})

    @pytest.mark.parametrize("count", [4, 6])
    def test_qualities_length(self, count):
        with pytest.raises(
            SettingsRangeError,
            match='The "qualities" elements number must be equal to 5.',
        ):
            PasswordToolKit({"qualities": ["label"] * count})

    @pytest.mark.parametrize("maximum", [0, -5])
    def test_maximum_must_be_positive(self, maximum):
        with pytest.raises(SettingsRangeError):
            ToolkitSettings(maximum=maximum)

    @pytest.mark.parametrize("maximum", [float("nan"), float("inf"), float("-inf"), 12.5])
    def test_maximum_must_be_whole_and_finite(self, maximum):
        with pytest.raises(SettingsRangeError, match='"maximum" value must be a whole number'):
            PasswordToolKit({"maximum": maximum})

    def test_whole_float_maximum_is_stored_as_int(self):
        tk = PasswordToolKit({"maximum": 16.0})
        assert tk.maximum == 16
        assert isinstance(tk.maximum, int)
        result = tk.check_options({"size": 10**6, "numbers": True})
        assert result.reason == "The password length must be less than specified maximum."


class TestHierarchy:

    def test_errors_share_a_root(self):
        for err_cls in (SettingsTypeError, SettingsRangeError):
            assert issubclass(err_cls, PasswordToolkitError)

    def test_errors_are_builtin_kinds(self):
        assert issubclass(SettingsTypeError, TypeError)
        assert issubclass(SettingsRangeError, ValueError)

    def test_field_is_recorded(self):
        with pytest.raises(SettingsRangeError) as exc_info:
            PasswordToolKit({"qualities": ["x"]})
        assert exc_info.value.field == "qualities"
