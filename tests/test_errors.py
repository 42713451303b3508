import pytest

from speciesnet.errors import (
    CategoryIndexOutOfRangeError,
    CategoryParseError,
    ImageLoadError,
    InvalidTensorSizeError,
    NegativeCoordinateError,
    SpeciesNetError,
)


def test_invalid_tensor_size_message():
    error = InvalidTensorSizeError(3)
    assert error.size == 3
    assert str(error) == "Invalid tensor size, expected 4, found 3."


def test_negative_coordinate_message():
    assert (
        str(NegativeCoordinateError())
        == "Negative coordinates, width, and height are not allowed."
    )


def test_category_index_out_of_range_message_integral_value():
    error = CategoryIndexOutOfRangeError(4.0)
    assert error.value == 4.0
    assert str(error).endswith("received 4")
    assert str(error).startswith(
        "Category index out of range, expected passed category to be `1`, `2`, or `3`"
    )


def test_category_index_out_of_range_message_fractional_value():
    error = CategoryIndexOutOfRangeError(2.5)
    assert str(error).endswith("received 2.5")


def test_category_parse_error_message():
    error = CategoryParseError("cat")
    assert error.value == "cat"
    assert str(error) == "Failed to parse value cat to Category."


def test_image_load_error_keeps_message():
    error = ImageLoadError("File extension not found")
    assert error.message == "File extension not found"
    assert "File extension not found" in str(error)


@pytest.mark.parametrize(
    "error",
    [
        InvalidTensorSizeError(1),
        NegativeCoordinateError(),
        CategoryIndexOutOfRangeError(0),
        CategoryParseError("x"),
        ImageLoadError("broken"),
    ],
)
def test_errors_are_caught_by_base_class(error):
    with pytest.raises(SpeciesNetError) as info:
        raise error
    assert info.value is error


@pytest.mark.parametrize(
    "error",
    [InvalidTensorSizeError(2), CategoryIndexOutOfRangeError(7), CategoryParseError("y")],
)
def test_value_errors_are_caught_as_value_error(error):
    with pytest.raises(ValueError) as info:
        raise error
    assert info.value is error