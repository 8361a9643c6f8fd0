"""Test suite for RequestParameter."""

import logging

import pytest

from restfilter.common.json_node import JsonNode
from restfilter.constants import INT_MAX, INT_MIN, TYPES
from restfilter.parameters import ParameterDescription, RequestParameter


class TestConstruction:
    """Test RequestParameter construction and fallbacks."""

    def test_defaults(self):
        """Test construction with only a name."""
        param = RequestParameter("user-id")
        assert param.get_name() == "user-id"
        assert param.get_type() == "string"
        assert param.is_optional() is False
        assert param.get_default() is None
        assert param.get_min_val() is None
        assert param.get_max_val() is None

    def test_invalid_name_falls_back(self):
        """Test that an invalid name is replaced by the sentinel name."""
        param = RequestParameter("bad name!")
        assert param.get_name() == "a-parameter"

    def test_invalid_name_optional_kept(self):
        """Test name fallback with an optional parameter."""
        param = RequestParameter("x y", "string", True)
        assert param.get_name() == "a-parameter"
        assert param.is_optional() is True

    def test_empty_name_falls_back(self):
        """Test that an empty name is replaced by the sentinel name."""
        assert RequestParameter("").get_name() == "a-parameter"
        assert RequestParameter(None).get_name() == "a-parameter"

    def test_invalid_type_falls_back(self):
        """Test that an invalid type becomes 'string' with no range."""
        param = RequestParameter("count", "not-a-type")
        assert param.get_type() == "string"
        assert param.get_min_val() is None
        assert param.get_max_val() is None

    def test_integer_type_installs_bounds(self):
        """Test that an integer parameter starts with the native bounds."""
        param = RequestParameter("age", "integer", False)
        assert param.get_type() == "integer"
        assert param.get_min_val() == INT_MIN
        assert param.get_max_val() == INT_MAX
        assert param.get_min_val() < param.get_max_val()

    def test_fallback_is_logged_at_debug(self, caplog):
        """Test that constructor fallbacks are logged at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="restfilter"):
            RequestParameter("bad name", "bogus")
        messages = [record.getMessage() for record in caplog.records]
        assert any("a-parameter" in message for message in messages)
        assert any("bogus" in message for message in messages)
        assert all(record.levelno == logging.DEBUG for record in caplog.records)

    def test_repr(self):
        """Test the debugging representation."""
        param = RequestParameter("email", "email", True)
        assert repr(param) == (
            "RequestParameter(name='email', type='email', is_optional=True)"
        )


class TestSetName:
    """Test RequestParameter.set_name."""

    @pytest.mark.parametrize(
        "name", ["user", "user_id", "user-id", "User2", "_", "-", "123"]
    )
    def test_valid_names(self, name):
        """Test that valid names are accepted."""
        param = RequestParameter("initial")
        assert param.set_name(name) is True
        assert param.get_name() == name

    @pytest.mark.parametrize(
        "name", ["", " ", "user id", "user.id", "user@id", "naïve", "a/b", "x\ty"]
    )
    def test_invalid_names_keep_previous(self, name):
        """Test that invalid names are rejected and the name is unchanged."""
        param = RequestParameter("initial")
        assert param.set_name(name) is False
        assert param.get_name() == "initial"

    def test_name_is_coerced_to_string(self):
        """Test that non-string names are converted before validation."""
        param = RequestParameter("initial")
        assert param.set_name(42) is True
        assert param.get_name() == "42"

    def test_none_is_rejected(self):
        """Test that None is treated as an empty name."""
        param = RequestParameter("initial")
        assert param.set_name(None) is False
        assert param.get_name() == "initial"


class TestSetType:
    """Test RequestParameter.set_type."""

    @pytest.mark.parametrize("param_type", sorted(TYPES))
    def test_supported_types(self, param_type):
        """Test that every catalog type is accepted."""
        param = RequestParameter("field")
        assert param.set_type(param_type) is True
        assert param.get_type() == param_type

    def test_unsupported_type_is_rejected(self):
        """Test that an unknown type leaves the parameter unchanged."""
        param = RequestParameter("field", "integer")
        param.set_min_val(1)
        assert param.set_type("decimal") is False
        assert param.get_type() == "integer"
        assert param.get_min_val() == 1
        assert param.get_max_val() == INT_MAX

    def test_case_insensitive_membership_keeps_casing(self):
        """Test that the given casing is stored after a case-insensitive check."""
        param = RequestParameter("field")
        assert param.set_type("EMAIL") is True
        assert param.get_type() == "EMAIL"

    def test_switch_away_from_integer_clears_bounds(self):
        """Test that leaving the integer type clears both bounds."""
        param = RequestParameter("field", "integer")
        assert param.set_type("string") is True
        assert param.get_min_val() is None
        assert param.get_max_val() is None

    def test_switch_to_integer_resets_bounds(self):
        """Test that setting integer again restores the native bounds."""
        param = RequestParameter("field", "integer")
        param.set_min_val(0)
        param.set_max_val(10)
        assert param.set_type("integer") is True
        assert param.get_min_val() == INT_MIN
        assert param.get_max_val() == INT_MAX

    def test_mixed_case_integer_installs_bounds(self):
        """Test that 'Integer' installs bounds but keeps its casing."""
        param = RequestParameter("field", "Integer")
        assert param.get_type() == "Integer"
        assert param.get_min_val() == INT_MIN
        assert param.get_max_val() == INT_MAX

    def test_mixed_case_integer_bounds_are_read_only(self):
        """Test that range setters require the exact 'integer' tag."""
        param = RequestParameter("field", "Integer")
        assert param.set_min_val(0) is False
        assert param.set_max_val(10) is False


class TestRange:
    """Test RequestParameter.set_min_val and set_max_val."""

    def test_min_val_requires_integer(self):
        """Test that non-integer parameters reject a minimum."""
        param = RequestParameter("field", "float")
        assert param.set_min_val(0) is False
        assert param.get_min_val() is None

    def test_max_val_requires_integer(self):
        """Test that non-integer parameters reject a maximum."""
        param = RequestParameter("field", "string")
        assert param.set_max_val(10) is False
        assert param.get_max_val() is None

    def test_min_val_below_max(self):
        """Test that a minimum below the maximum is accepted."""
        param = RequestParameter("field", "integer")
        assert param.set_min_val(-5) is True
        assert param.get_min_val() == -5

    def test_min_val_not_below_max(self):
        """Test that a minimum equal to or above the maximum is rejected."""
        param = RequestParameter("field", "integer")
        param.set_max_val(10)
        assert param.set_min_val(10) is False
        assert param.set_min_val(11) is False
        assert param.get_min_val() == INT_MIN

    def test_max_val_above_min(self):
        """Test that a maximum above the minimum is accepted."""
        param = RequestParameter("field", "integer")
        assert param.set_max_val(100) is True
        assert param.get_max_val() == 100

    def test_max_val_not_above_min(self):
        """Test that a maximum equal to or below the minimum is rejected."""
        param = RequestParameter("field", "integer")
        param.set_min_val(10)
        assert param.set_max_val(10) is False
        assert param.set_max_val(9) is False
        assert param.get_max_val() == INT_MAX

    def test_zero_bounds_are_set(self):
        """Test that zero counts as a set bound."""
        param = RequestParameter("field", "integer")
        assert param.set_min_val(0) is True
        assert param.set_max_val(1) is True
        assert param.set_min_val(-1) is True
        assert param.get_min_val() == -1
        assert param.get_max_val() == 1

    def test_non_numeric_bounds_are_rejected(self):
        """Test that values that cannot be compared are rejected."""
        param = RequestParameter("field", "integer")
        assert param.set_min_val("0") is False
        assert param.set_max_val(None) is False
        assert param.set_max_val(True) is False
        assert param.get_min_val() == INT_MIN
        assert param.get_max_val() == INT_MAX

    def test_nan_is_rejected(self):
        """Test that NaN never satisfies the ordering checks."""
        param = RequestParameter("field", "integer")
        assert param.set_min_val(float("nan")) is False
        assert param.set_max_val(float("nan")) is False

    def test_tighten_lower_bound_past_upper_fails(self):
        """Test the order dependency between the two range setters.

        Raising the minimum above the current maximum is rejected even when
        the maximum is about to be raised too; the maximum must move first.
        """
        param = RequestParameter("field", "integer")
        param.set_max_val(10)
        assert param.set_min_val(20) is False
        assert param.set_max_val(30) is True
        assert param.set_min_val(20) is True
        assert (param.get_min_val(), param.get_max_val()) == (20, 30)

    def test_bounds_unavailable_after_type_fallback(self):
        """Test that a parameter that fell back to 'string' has no range."""
        param = RequestParameter("field", "bogus")
        param._type = "integer"
        # Bounds were never installed, so neither setter can succeed
        assert param.set_min_val(0) is False
        assert param.set_max_val(10) is False


class TestDefault:
    """Test default value handling."""

    def test_set_default_any_type(self):
        """Test that defaults are stored without type checking."""
        param = RequestParameter("field", "integer")
        param.set_default("not a number")
        assert param.get_default() == "not a number"

    def test_set_default_none_clears(self):
        """Test that a None default is treated as unset."""
        param = RequestParameter("field")
        param.set_default("x")
        param.set_default(None)
        assert param.get_default() is None


class TestSerialize:
    """Test RequestParameter.serialize."""

    def test_minimal(self):
        """Test that only the mandatory keys are present by default."""
        node = RequestParameter("name").serialize()
        assert isinstance(node, JsonNode)
        assert list(node.keys()) == ["name", "type", "is-optional"]
        assert node.to_dict() == {
            "name": "name",
            "type": "string",
            "is-optional": False,
        }

    def test_default_included_when_set(self):
        """Test that the default key appears once a default is set."""
        param = RequestParameter("lang", "string", True)
        param.set_default("en")
        assert node_keys(param) == ["name", "type", "is-optional", "default"]
        assert param.serialize().get("default") == "en"

    def test_falsy_default_included(self):
        """Test that falsy but non-None defaults are serialized."""
        param = RequestParameter("flag", "boolean", True)
        param.set_default(False)
        assert param.serialize().get("default") is False

    def test_integer_range_included(self):
        """Test the full key order for an integer parameter."""
        param = RequestParameter("page", "integer", True)
        param.set_default(1)
        assert node_keys(param) == [
            "name",
            "type",
            "is-optional",
            "default",
            "min-val",
            "max-val",
        ]

    def test_age_end_to_end(self):
        """Test building and serializing a bounded integer parameter."""
        param = RequestParameter("age", "integer", False)
        assert param.get_min_val() == INT_MIN
        assert param.get_max_val() == INT_MAX
        assert param.set_min_val(0) is True
        assert param.set_max_val(150) is True
        assert param.serialize().to_dict() == {
            "name": "age",
            "type": "integer",
            "is-optional": False,
            "min-val": 0,
            "max-val": 150,
        }
        assert param.serialize().to_json() == (
            '{"name": "age", "type": "integer", "is-optional": false, '
            '"min-val": 0, "max-val": 150}'
        )

    def test_to_model(self):
        """Test conversion to a ParameterDescription."""
        param = RequestParameter("age", "integer")
        param.set_min_val(18)
        model = param.to_model()
        assert isinstance(model, ParameterDescription)
        assert model.name == "age"
        assert model.min_val == 18
        assert model.max_val == INT_MAX
        assert model.is_optional is False


def node_keys(param):
    return list(param.serialize().keys())
