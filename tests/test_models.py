import uuid

import pytest

from webporto.models import (
    Article,
    ArticleImage,
    ArticleVideo,
    Experience,
    ExperienceImage,
    Post,
    PostImage,
    PostVideo,
    Project,
    ProjectImage,
    ProjectVideo,
    decode_string_array,
    encode_string_array,
)


def _fresh_records():
    return [
        Article(),
        ArticleImage(),
        ArticleVideo(),
        ExperienceImage(),
        Post(),
        PostImage(),
        PostVideo(),
        Project(),
        ProjectImage(),
        ProjectVideo(),
    ]


def _records_with_id(existing):
    return [
        Article(id=existing),
        ArticleImage(id=existing),
        ArticleVideo(id=existing),
        ExperienceImage(id=existing),
        Post(id=existing),
        PostImage(id=existing),
        PostVideo(id=existing),
        Project(id=existing),
        ProjectImage(id=existing),
        ProjectVideo(id=existing),
    ]


def test_ensure_id_generates_uuid():
    for record in _fresh_records():
        new_id = record.ensure_id()
        assert record.id == new_id
        assert str(uuid.UUID(new_id)) == new_id


def test_ensure_id_keeps_existing():
    for record in _records_with_id("existing-id"):
        assert record.ensure_id() == "existing-id"
        assert record.id == "existing-id"


def test_ensure_id_distinct_per_record():
    ids = {Post().ensure_id() for _ in range(5)}
    assert len(ids) == 5


def test_string_array_round_trip():
    values = ["Led team", "Wrote code", "Ünïcode"]
    assert decode_string_array(encode_string_array(values)) == values


def test_encode_empty_is_none():
    assert encode_string_array([]) is None
    assert encode_string_array(None) is None


def test_encode_format():
    assert encode_string_array(["a", "b"]) == '["a","b"]'


def test_decode_bytes_and_null():
    assert decode_string_array(b'["x"]') == ["x"]
    assert decode_string_array(None) is None
    assert decode_string_array("null") is None


def test_decode_unknown_type_gives_none():
    assert decode_string_array(42) is None


def test_decode_invalid_json_raises():
    with pytest.raises(ValueError):
        decode_string_array("not json")


def test_decode_non_list_raises():
    with pytest.raises(ValueError):
        decode_string_array('{"a": 1}')


def test_column_defaults():
    assert Article().status == "draft"
    assert Post().status == "draft"
    assert Project().status == "published"
    assert Experience().metadata == "{}"
    assert Experience().current is False


def test_list_fields_not_shared():
    a, b = Article(), Article()
    a.tags.append("x")
    assert b.tags == []
    assert a.tags == ["x"]