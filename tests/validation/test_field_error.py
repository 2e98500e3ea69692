import pickle

import pytest

from errorset.validation import FieldError


def test_message_without_params_is_returned_verbatim():
    error = FieldError("required", "cannot be blank")
    assert str(error) == "cannot be blank"


def test_params_are_substituted():
    error = FieldError("length_out_of_range", "the length must be between {min} and {max}", {"min": 2, "max": 10})
    assert str(error) == "the length must be between 2 and 10"


def test_bad_template_falls_back_to_raw_message():
    error = FieldError("custom", "needs {missing}", {"other": 1})
    assert str(error) == "needs {missing}"


def test_modifiers_return_copies():
    error = FieldError("required", "cannot be blank")
    recoded = error.with_code("not_nil")
    assert recoded.code == "not_nil"
    assert error.code == "required"

    reworded = error.with_message("must be at least {min}")
    with_min = reworded.add_param("min", 3)
    assert str(with_min) == "must be at least 3"
    assert dict(reworded.params) == {}

    replaced = with_min.with_params({"min": 5})
    assert str(replaced) == "must be at least 5"
    assert dict(with_min.params) == {"min": 3}


def test_field_error_is_read_only():
    error = FieldError("required", "cannot be blank")
    with pytest.raises(AttributeError):
        error.code = "other"


def test_params_are_read_only():
    source = {"min": 1}
    error = FieldError("too_small", "at least {min}", source)
    source["min"] = 99
    assert str(error) == "at least 1"
    with pytest.raises(TypeError):
        error.params["min"] = 2


def test_value_equality():
    assert FieldError("a", "b", {"x": 1}) == FieldError("a", "b", {"x": 1})
    assert FieldError("a", "b") != FieldError("a", "c")
    assert hash(FieldError("a", "b", {"x": 1})) == hash(FieldError("a", "b", {"x": 2}))


def test_field_error_can_be_raised():
    with pytest.raises(FieldError) as excinfo:
        raise FieldError("required", "cannot be blank")
    assert excinfo.value.code == "required"


def test_template_type_error_falls_back_to_raw_message():
    error = FieldError("bad_item", "first item {value[0]}", {"value": 5})
    assert str(error) == "first item {value[0]}"


def test_pickle_round_trip():
    error = FieldError("too_small", "at least {min}", {"min": 3})
    restored = pickle.loads(pickle.dumps(error))
    assert restored == error
    assert str(restored) == "at least 3"
    assert dict(restored.params) == {"min": 3}
