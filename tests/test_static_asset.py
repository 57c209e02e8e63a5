import pytest

from vroom.static_asset import AssetInstance, StaticAsset, get_extension


class DummyAsset(StaticAsset):
    def __init__(self):
        super().__init__()
        self.loaded_paths = []

    def load_impl(self, file_path):
        self.loaded_paths.append(file_path)
        return file_path.endswith(".ok")


def test_get_file_extension():
    assert get_extension("C:/Users/username/Documents/Project/Assets/Model/Model.obj") == "obj"


def test_get_file_extension_no_extension():
    assert get_extension("C:/Users/username/Documents/Project/Assets/Model/Model") == ""


def test_get_file_extension_empty():
    assert get_extension("") == ""


def test_get_file_extension_dot():
    assert get_extension(".") == ""


def test_get_file_extension_multiple_dots():
    assert get_extension("C:/Users/username/Documents/Project/Assets/Model/Model.obj.blend") == "blend"


def test_get_file_extension_is_lower_case():
    assert get_extension("Model.OBJ") == "obj"


def test_load_returns_result_of_load_impl():
    asset = DummyAsset()
    assert StaticAsset.load(asset, "file.ok") is True
    assert StaticAsset.load(asset, "file.bad") is False
    assert asset.loaded_paths == ["file.ok", "file.bad"]


def test_create_instance_counts():
    asset = DummyAsset()
    assert asset.instance_count == 0
    first = StaticAsset.create_instance(asset)
    second = StaticAsset.create_instance(asset)
    assert first.static_asset is asset
    assert asset.instance_count == 2
    AssetInstance.release(first)
    assert asset.instance_count == 1
    AssetInstance.release(second)
    assert asset.instance_count == 0


def test_copy_shares_asset_and_counts():
    asset = DummyAsset()
    original = StaticAsset.create_instance(asset)
    duplicate = AssetInstance.copy(original)
    assert duplicate.static_asset is asset
    assert asset.instance_count == 2


def test_release_twice_counts_once():
    asset = DummyAsset()
    instance = StaticAsset.create_instance(asset)
    AssetInstance.release(instance)
    AssetInstance.release(instance)
    assert asset.instance_count == 0
    assert instance.static_asset is None


def test_empty_instance():
    instance = AssetInstance()
    assert instance.static_asset is None
    copy = instance.copy()
    assert copy.static_asset is None


def test_context_manager_releases():
    asset = DummyAsset()
    with StaticAsset.create_instance(asset) as instance:
        assert asset.instance_count == 1
        assert instance.static_asset is asset
    assert asset.instance_count == 0


def test_delete_without_instance_raises():
    asset = DummyAsset()
    with pytest.raises(RuntimeError):
        StaticAsset.notify_delete_instance(asset)
    assert asset.instance_count == 0