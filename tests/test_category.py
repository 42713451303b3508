import numpy as np
import pytest

from speciesnet.category import Category
from speciesnet.errors import CategoryIndexOutOfRangeError, CategoryParseError


@pytest.mark.parametrize(
    "text, expected",
    [("1", Category.ANIMAL), ("2", Category.HUMAN), ("3", Category.VEHICLE)],
)
def test_parse(text, expected):
    assert Category.parse(text) is expected


def test_parse_unknown_lowercases_in_error():
    with pytest.raises(CategoryParseError) as info:
        Category.parse("ANIMAL")
    assert info.value.value == "animal"


@pytest.mark.parametrize(
    "number, expected",
    [
        (1, Category.ANIMAL),
        (2, Category.HUMAN),
        (3, Category.VEHICLE),
        (1.0, Category.ANIMAL),
        (np.float32(3.0), Category.VEHICLE),
        (np.int64(2), Category.HUMAN),
    ],
)
def test_from_number(number, expected):
    assert Category.from_number(number) is expected


@pytest.mark.parametrize("number", [0, 4, 2.5, -1])
def test_from_number_out_of_range(number):
    with pytest.raises(CategoryIndexOutOfRangeError) as info:
        Category.from_number(number)
    assert info.value.value == float(number)


def test_from_number_rejects_text():
    with pytest.raises(TypeError):
        Category.from_number("1")


def test_from_json():
    assert Category.from_json("2") is Category.HUMAN


def test_from_json_unknown_variant():
    with pytest.raises(CategoryParseError):
        Category.from_json("animal")


def test_from_json_rejects_numbers():
    with pytest.raises(TypeError):
        Category.from_json(1)


def test_to_json_is_label():
    assert Category.ANIMAL.to_json() == "animal"
    assert Category.VEHICLE.to_json() == str(Category.VEHICLE)


@pytest.mark.parametrize("category", list(Category))
def test_index_round_trip(category):
    assert Category.parse(category.index()) is category
    assert Category.from_json(category.index()) is category
    assert Category.from_number(int(category.index())) is category