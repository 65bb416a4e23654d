"""Unit tests for CrossFieldValidator and boundary validator composition"""

from types import SimpleNamespace

import pytest

from domain.errors import ConflictError, ValidationError
from domain.validation import CrossFieldValidator, FieldViolation, password_match, run_validators
from domain.validation.cross_field import DEFAULT_MESSAGE


def passwords(password, confirm_password):
    return SimpleNamespace(password=password, confirm_password=confirm_password)


class TestCrossFieldValidator:
    """Test two-field equality checks"""

    def test_equal_values_pass(self):
        assert password_match.is_valid(passwords("secret123", "secret123"))
        assert password_match.validate(passwords("secret123", "secret123")) is None

    def test_mismatch_reported_on_secondary_field(self):
        violation = password_match.validate(passwords("secret123", "secret124"))

        assert violation == FieldViolation(field="confirm_password", message="Passwords do not match")
        assert violation.to_dict() == {"confirm_password": "Passwords do not match"}

    @pytest.mark.parametrize("password,confirm", [(None, "x"), ("x", None), (None, None)])
    def test_missing_value_passes(self, password, confirm):
        assert password_match.is_valid(passwords(password, confirm))

    def test_none_object_passes(self):
        assert password_match.is_valid(None)

    def test_check_raises_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            password_match(passwords("a", "b"))

        assert exc_info.value.field == "confirm_password"
        assert exc_info.value.message == "Passwords do not match"

    def test_same_field_is_always_valid(self):
        same = CrossFieldValidator("email", "email", lambda r: r.email, lambda r: r.email)

        assert same.is_valid(SimpleNamespace(email="a@test.com"))

    def test_default_message(self):
        validator = CrossFieldValidator("a", "b", lambda r: r.a, lambda r: r.b)

        assert validator.validate(SimpleNamespace(a=1, b=2)).message == DEFAULT_MESSAGE


class TestRunValidators:
    """Test ordered, short-circuit composition"""

    def test_stops_at_first_failure(self):
        calls = []

        def first(obj):
            calls.append("first")
            raise ValidationError("first failed", field="a")

        def second(obj):
            calls.append("second")
            raise ConflictError("second failed")

        with pytest.raises(ValidationError, match="first failed"):
            run_validators(object(), [first, second])

        assert calls == ["first"]

    def test_all_pass(self):
        run_validators(passwords("x", "x"), [password_match])
