import io

import pytest
from botocore.exceptions import ClientError

from genasset.adapters import FsAssetStore, MemoryAssetStore, Sha1Adapter
from genasset.adapters.store_paths import asset_path
from genasset.adapters.store_s3 import S3AssetStore
from genasset.core import AssetTuple, NotFoundError

HASH = "0123456789abcdef0123456789abcdef01234567"


def test_asset_path_layout():
    assert asset_path("logo.png", HASH) == "0123456789/logo.png"
    assert asset_path("css/site.css", HASH) == "css/0123456789/site.css"
    assert asset_path("/css/site.css", HASH, "min") == "css/0123456789/site__min.css"


@pytest.mark.parametrize("filename", ["", "../etc/passwd", "a/../../b"])
def test_asset_path_rejects_escaping_names(filename):
    with pytest.raises(ValueError):
        asset_path(filename, HASH)


def test_memory_store_roundtrip():
    store = MemoryAssetStore(Sha1Adapter(), base_url="https://cdn.example.com/")
    result = store.set_from_string(b"data", "img/a.png")

    assert result.filename == "img/a.png"
    assert store.exists(result.filename, result.hash)
    assert store.get_as_string(result.filename, result.hash) == b"data"
    assert store.get_as_url(result.filename, result.hash) == (
        f"https://cdn.example.com/img/{result.hash[:10]}/a.png"
    )

    store.delete(result.filename, result.hash)
    assert not store.exists(result.filename, result.hash)
    with pytest.raises(NotFoundError):
        store.get_as_string(result.filename, result.hash)


def test_fs_store_roundtrip(tmp_path):
    store = FsAssetStore(tmp_path, Sha1Adapter())
    result = store.set_from_string(b"body{}", "css/site.css")

    assert (tmp_path / "css" / result.hash[:10] / "site.css").read_bytes() == b"body{}"
    assert store.exists(result.filename, result.hash, result.variant)
    assert store.get_as_string(result.filename, result.hash) == b"body{}"
    assert store.get_as_url(result.filename, result.hash) == f"/assets/css/{result.hash[:10]}/site.css"

    store.delete(result.filename, result.hash)
    assert not store.exists(result.filename, result.hash)
    with pytest.raises(NotFoundError):
        store.get_as_string(result.filename, result.hash)


def test_fs_store_same_content_same_tuple(tmp_path):
    store = FsAssetStore(tmp_path, Sha1Adapter())
    assert store.set_from_string(b"x", "a.txt") == store.set_from_string(b"x", "a.txt")


class FakeS3Client:
    def __init__(self):
        self.objects = {}

    def _missing(self, op):
        return ClientError({"Error": {"Code": "404", "Message": "Not Found"}}, op)

    def put_object(self, Bucket, Key, Body, Metadata):
        self.objects[(Bucket, Key)] = (Body, Metadata)

    def head_object(self, Bucket, Key):
        if (Bucket, Key) not in self.objects:
            raise self._missing("HeadObject")
        return {"Metadata": self.objects[(Bucket, Key)][1]}

    def get_object(self, Bucket, Key):
        if (Bucket, Key) not in self.objects:
            raise ClientError({"Error": {"Code": "NoSuchKey"}}, "GetObject")
        return {"Body": io.BytesIO(self.objects[(Bucket, Key)][0])}

    def delete_object(self, Bucket, Key):
        self.objects.pop((Bucket, Key), None)

    def generate_presigned_url(self, ClientMethod, Params, ExpiresIn):
        return f"https://s3.test/{Params['Bucket']}/{Params['Key']}?expires={ExpiresIn}"


def test_s3_store_roundtrip():
    client = FakeS3Client()
    store = S3AssetStore("bucket", Sha1Adapter(), prefix="/generated/", client=client)
    result = store.set_from_string(b"data", "a.png")
    key = f"generated/{result.hash[:10]}/a.png"

    assert result == AssetTuple("a.png", result.hash, "")
    assert client.objects[("bucket", key)] == (b"data", {"ga-filename": "a.png", "ga-sha1": result.hash})
    assert store.exists("a.png", result.hash)
    assert store.get_as_string("a.png", result.hash) == b"data"
    assert store.get_as_url("a.png", result.hash) == f"https://s3.test/bucket/{key}?expires=3600"

    store.delete("a.png", result.hash)
    assert not store.exists("a.png", result.hash)
    with pytest.raises(NotFoundError):
        store.get_as_string("a.png", result.hash)


def test_s3_store_public_url():
    store = S3AssetStore("bucket", Sha1Adapter(), base_url="https://cdn.example.com", client=FakeS3Client())
    assert store.get_as_url("a.png", HASH) == "https://cdn.example.com/0123456789/a.png"


def test_s3_store_propagates_other_errors():
    client = FakeS3Client()

    def denied(Bucket, Key):
        raise ClientError({"Error": {"Code": "AccessDenied"}}, "HeadObject")

    client.head_object = denied
    store = S3AssetStore("bucket", Sha1Adapter(), client=client)
    with pytest.raises(ClientError):
        store.exists("a.png", HASH)
