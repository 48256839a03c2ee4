import pytest
from pydantic import ValidationError

from artifacts_api.errors import InvalidInput
from artifacts_api.schemas import SkillSchema
from artifacts_api.values import (
    BearerToken,
    Code,
    Coordinate,
    Email,
    Level,
    LoginName,
    LoginPassword,
    Name,
    Page,
    Password,
    Size,
    Username,
    enum_value,
    optional,
)


class TestUsername:
    @pytest.mark.parametrize("raw", ["abcdef", "Player_01", "a-b-c-d-e-f", "x" * 32])
    def test_accepts_valid(self, raw):
        assert Username.of(raw).value == raw

    @pytest.mark.parametrize("raw, constraint", [
        ("", "string_too_short"),
        ("abcde", "string_too_short"),
        ("x" * 33, "string_too_long"),
        ("bad name", "string_pattern_mismatch"),
        ("émilie1", "string_pattern_mismatch"),
        ("player\n", "string_pattern_mismatch"),
    ])
    def test_rejects_invalid(self, raw, constraint):
        with pytest.raises(InvalidInput) as exc_info:
            Username.of(raw)
        assert exc_info.value.field == "Username"
        assert exc_info.value.constraint == constraint
        assert exc_info.value.value == raw

    def test_rejects_non_string(self):
        with pytest.raises(InvalidInput) as exc_info:
            Username.of(123456)
        assert exc_info.value.constraint == "string_type"

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            Username.of("")

    def test_value_is_frozen(self):
        username = Username.of("abcdef")
        with pytest.raises(ValidationError):
            username.value = "x"


class TestPassword:
    @pytest.mark.parametrize("raw", ["hunter", "ééééé", "日本語パス", "p@$$w0rd!", "x" * 50])
    def test_counts_code_points(self, raw):
        assert Password.of(raw).value == raw

    @pytest.mark.parametrize("raw", ["", "abcd", "😀😀😀😀", "pass word", "tab\there", "x" * 51])
    def test_rejects_invalid(self, raw):
        with pytest.raises(InvalidInput):
            Password.of(raw)


class TestLoginCredentials:
    @pytest.mark.parametrize("raw", ["bob", "user.name", "ユーザー", "with space", "a"])
    def test_login_name_accepts_any_text_without_colon(self, raw):
        assert LoginName.of(raw).value == raw

    @pytest.mark.parametrize("raw", ["", "a:b", ":", 42])
    def test_login_name_rejects(self, raw):
        with pytest.raises(InvalidInput):
            LoginName.of(raw)

    @pytest.mark.parametrize("raw", ["pw", "secret pass", "a:b:c", " ", "日本語"])
    def test_login_password_accepts_any_non_empty_text(self, raw):
        assert LoginPassword.of(raw).value == raw

    @pytest.mark.parametrize("raw", ["", None, b"bytes"])
    def test_login_password_rejects(self, raw):
        with pytest.raises(InvalidInput):
            LoginPassword.of(raw)


class TestEmail:
    @pytest.mark.parametrize("raw", ["player@example.com", "user_1@mail.fr", "a@b.c"])
    def test_accepts_valid(self, raw):
        assert Email.of(raw).value == raw

    @pytest.mark.parametrize("raw", ["", "playerexample.com", "a@b", "a@b.c.d", "a b@c.d"])
    def test_rejects_invalid(self, raw):
        with pytest.raises(InvalidInput):
            Email.of(raw)


class TestCodes:
    @pytest.mark.parametrize("value_type", [Code, Name])
    def test_accepts_code_charset(self, value_type):
        assert value_type.of("copper_ore-2").value == "copper_ore-2"

    @pytest.mark.parametrize("value_type", [Code, Name])
    @pytest.mark.parametrize("raw", ["", "../etc", "a/b", "a?b=c", "copper ore"])
    def test_rejects_anything_else(self, value_type, raw):
        with pytest.raises(InvalidInput):
            value_type.of(raw)


class TestBearerToken:
    def test_accepts_visible_ascii(self):
        assert BearerToken.of("eyJhbGciOi.J9-x_y").value == "eyJhbGciOi.J9-x_y"

    @pytest.mark.parametrize("raw", ["", "two words", "tok\r\nX-Evil: 1", "tøken"])
    def test_rejects_untransmittable(self, raw):
        with pytest.raises(InvalidInput):
            BearerToken.of(raw)


class TestNumbers:
    @pytest.mark.parametrize("raw", [1, 2, 10**12])
    def test_page_unbounded_above(self, raw):
        assert Page.of(raw).value == raw

    @pytest.mark.parametrize("raw, constraint", [
        (0, "greater_than_equal"),
        (-1, "greater_than_equal"),
        ("3", "int_type"),
        (True, "int_type"),
        (1.5, "int_type"),
        (None, "int_type"),
    ])
    def test_page_rejects(self, raw, constraint):
        with pytest.raises(InvalidInput) as exc_info:
            Page.of(raw)
        assert exc_info.value.constraint == constraint

    @pytest.mark.parametrize("raw", [1, 50, 100])
    def test_size_bounds_inclusive(self, raw):
        assert Size.of(raw).value == raw

    @pytest.mark.parametrize("raw, constraint", [(0, "greater_than_equal"), (101, "less_than_equal")])
    def test_size_out_of_bounds(self, raw, constraint):
        with pytest.raises(InvalidInput) as exc_info:
            Size.of(raw)
        assert exc_info.value.constraint == constraint

    def test_level_starts_at_one(self):
        assert Level.of(1).value == 1
        with pytest.raises(InvalidInput):
            Level.of(0)

    @pytest.mark.parametrize("raw", [-5, 0, 12])
    def test_coordinate_allows_negative(self, raw):
        assert Coordinate.of(raw).value == raw

    def test_str_renders_primitive(self):
        assert str(Coordinate.of(-3)) == "-3"


class TestHelpers:
    def test_enum_value_by_value(self):
        assert enum_value(SkillSchema, "mining") is SkillSchema.MINING

    def test_enum_value_passes_members_through(self):
        assert enum_value(SkillSchema, SkillSchema.FISHING) is SkillSchema.FISHING

    def test_enum_value_rejects_unknown(self):
        with pytest.raises(InvalidInput) as exc_info:
            enum_value(SkillSchema, "cooking")
        assert exc_info.value.constraint == "enum"
        assert "mining" in str(exc_info.value)

    def test_optional_skips_none(self):
        assert optional(Level, None) is None

    def test_optional_validates_values(self):
        assert optional(Level, 3) == Level.of(3)
        with pytest.raises(InvalidInput):
            optional(Level, 0)
