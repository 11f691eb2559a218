import json

import pytest

from genasset.core import ArtifactInconsistentError, AssetTuple, CacheEntryDecodeError


def test_cache_value_is_versioned_json():
    value = AssetTuple("css/site.css", "abc123", "min").to_cache_value()
    assert json.loads(value) == {
        "v": 1,
        "filename": "css/site.css",
        "hash": "abc123",
        "variant": "min",
    }
    assert AssetTuple.from_cache_value(value) == AssetTuple("css/site.css", "abc123", "min")


def test_missing_variant_defaults_to_empty():
    data = b'{"v": 1, "filename": "a.png", "hash": "ff"}'
    assert AssetTuple.from_cache_value(data) == AssetTuple("a.png", "ff", "")


@pytest.mark.parametrize(
    "data",
    [
        b"not json",
        b"\xff\xfe",
        b'{"v": 2, "filename": "a.png", "hash": "ff"}',
        b'["a.png", "ff", ""]',
        b'{"v": 1, "filename": "a.png"}',
    ],
)
def test_bad_cache_values_raise(data):
    with pytest.raises(CacheEntryDecodeError) as exc:
        AssetTuple.from_cache_value(data, "a.png")
    assert exc.value.filename == "a.png"
    assert isinstance(exc.value, ArtifactInconsistentError)


def test_to_dict_uses_tuple_field_names():
    assert AssetTuple("a.png", "ff").to_dict() == {"Filename": "a.png", "Hash": "ff", "Variant": ""}
