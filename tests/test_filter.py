import pytest

from abikit.filter import RawTopicFilter, Topic, TopicFilter, TopicKind


def _hash(text: str) -> bytes:
    return bytes.fromhex(text)


def test_topic_filter_serialization():
    expected = (
        '["0x000000000000000000000000a94f5374fce5edbc8e2a8697c15331677e6ebf0b",null,'
        '["0x000000000000000000000000a94f5374fce5edbc8e2a8697c15331677e6ebf0b",'
        '"0x0000000000000000000000000aff3454fce5edbc8cca8697c15331677e6ebccc"],null]'
    )
    topic = TopicFilter(
        topic0=Topic.this(_hash("000000000000000000000000a94f5374fce5edbc8e2a8697c15331677e6ebf0b")),
        topic1=Topic.any(),
        topic2=Topic.one_of(
            [
                _hash("000000000000000000000000a94f5374fce5edbc8e2a8697c15331677e6ebf0b"),
                _hash("0000000000000000000000000aff3454fce5edbc8cca8697c15331677e6ebccc"),
            ]
        ),
        topic3=Topic.any(),
    )
    assert topic.to_json() == expected


def test_topic_filter_default_is_all_any():
    assert TopicFilter().to_json() == "[null,null,null,null]"


def test_single_topic_json():
    h = _hash("000000000000000000000000a94f5374fce5edbc8e2a8697c15331677e6ebf0b")
    assert Topic.this(h).to_json() == '"0x000000000000000000000000a94f5374fce5edbc8e2a8697c15331677e6ebf0b"'
    assert Topic.any().to_json() == "null"


def test_topic_json_rejects_non_hash():
    with pytest.raises(TypeError):
        Topic.this(10).to_json()


def test_topic_from():
    assert Topic.from_value(None) == Topic.any()
    assert Topic.from_value(10) == Topic.this(10)
    assert Topic.from_value([10, 20]) == Topic.one_of([10, 20])


def test_topic_into_vec():
    assert Topic.any().to_list() == []
    assert Topic.this(10).to_list() == [10]
    assert Topic.one_of([10, 20]).to_list() == [10, 20]


def test_topic_is_any():
    assert Topic.any().is_any()
    assert not Topic.one_of([10, 20]).is_any()
    assert not Topic.this(10).is_any()


def test_topic_index():
    assert Topic.one_of([10, 20])[0] == 10
    assert Topic.one_of([10, 20])[1] == 20
    assert Topic.this(10)[0] == 10


def test_topic_index_any_fails():
    with pytest.raises(IndexError, match="Topic unavailable"):
        Topic.any()[0]


def test_topic_index_this_out_of_range_fails():
    with pytest.raises(IndexError, match="Topic unavailable"):
        Topic.this(10)[1]


def test_topic_map():
    assert Topic.any().map(lambda v: v * 2) == Topic.any()
    assert Topic.this(3).map(lambda v: v * 2) == Topic.this(6)
    assert Topic.one_of([1, 2]).map(lambda v: v * 2) == Topic.one_of([2, 4])


def test_topic_default_kind():
    topic = Topic()
    assert topic == Topic.any()
    assert topic.kind == TopicKind.ANY
    assert topic.is_any() is True
    assert topic.to_list() == []
    assert topic.to_json() == "null"


def test_raw_topic_filter_default():
    raw = RawTopicFilter()
    assert all(t.is_any() for t in (raw.topic0, raw.topic1, raw.topic2))