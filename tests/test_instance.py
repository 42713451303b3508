import json
from pathlib import Path

import pytest

from speciesnet.instance import Instance, Instances


def test_from_path_has_no_location():
    instance = Instance.from_path("images/a.jpg")
    assert instance.file_path == Path("images/a.jpg")
    assert instance.country is None
    assert instance.admin1_region is None


def test_from_json_reads_all_fields():
    instance = Instance.from_json(
        {"filepath": "images/a.jpg", "country": "THA", "admin1_region": "TH-10"}
    )
    assert instance == Instance(Path("images/a.jpg"), "THA", "TH-10")


def test_from_json_optional_fields_default_to_none():
    instance = Instance.from_json({"filepath": "b.png", "country": None})
    assert instance == Instance.from_path("b.png")


def test_from_json_requires_filepath():
    with pytest.raises(ValueError, match="filepath"):
        Instance.from_json({"country": "THA"})


def test_from_json_rejects_non_string_country():
    with pytest.raises(TypeError):
        Instance.from_json({"filepath": "a.jpg", "country": 12})


def test_instances_load(tmp_path):
    document = {
        "instances": [
            {"filepath": "one.jpg", "country": "THA"},
            {"filepath": "two.jpg"},
        ]
    }
    path = tmp_path / "instances.json"
    path.write_text(json.dumps(document), encoding="utf-8")

    instances = Instances.load(path)

    assert len(instances) == 2
    assert [i.file_path for i in instances] == [Path("one.jpg"), Path("two.jpg")]
    assert [i.country for i in instances] == ["THA", None]


def test_instances_requires_key():
    with pytest.raises(ValueError, match="instances"):
        Instances.from_json({"predictions": []})


def test_instances_must_be_array():
    with pytest.raises(TypeError):
        Instances.from_json({"instances": {"filepath": "a.jpg"}})