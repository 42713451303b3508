import pytest

from speciesnet.bounding_box import BoundingBox
from speciesnet.category import Category
from speciesnet.detection import Detection
from speciesnet.errors import CategoryParseError


def _human_detection():
    return Detection(Category.HUMAN, 0.93, BoundingBox(0.1, 0.2, 0.3, 0.3))


def test_label():
    assert _human_detection().label() == "human"


def test_to_json():
    detection = _human_detection()
    assert detection.to_json() == {
        "category": "2",
        "label": "human",
        "conf": 0.93,
        "bbox": detection.bounding_box.to_json(),
    }


def test_json_round_trip():
    detection = _human_detection()
    restored = Detection.from_json(detection.to_json())
    assert restored.category is Category.HUMAN
    assert restored.confidence == 0.93
    assert restored.bounding_box.as_xyxy() == pytest.approx(detection.bounding_box.as_xyxy())


def test_from_json_ignores_label():
    detection = Detection.from_json(
        {"category": "1", "label": "whatever", "conf": 0.5, "bbox": [0.1, 0.1, 0.2, 0.2]}
    )
    assert detection.category is Category.ANIMAL
    assert detection.label() == "animal"


def test_from_json_missing_field():
    with pytest.raises(ValueError):
        Detection.from_json({"category": "1", "conf": 0.5})


def test_from_json_bad_category():
    with pytest.raises(CategoryParseError):
        Detection.from_json({"category": "9", "conf": 0.5, "bbox": [0, 0, 1, 1]})


def test_from_json_bad_confidence():
    with pytest.raises(TypeError):
        Detection.from_json({"category": "1", "conf": "high", "bbox": [0, 0, 1, 1]})


def test_display():
    detection = _human_detection()
    assert str(detection) == (
        f"Category: human, Confidence: 0.93, Bounding box: {detection.bounding_box}"
    )