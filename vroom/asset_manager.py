"""Process-wide registry of loaded static assets."""

from __future__ import annotations

from typing import TypeVar

from vroom.static_asset import AssetInstance, StaticAsset

AssetT = TypeVar("AssetT", bound=StaticAsset)


class AssetLoadError(RuntimeError):
    """An asset could not be loaded from its file."""


class AssetManager:
    """Loads each asset once, keyed by its ID, and hands out instances of it."""

    def __init__(self) -> None:
        self._assets: dict[str, StaticAsset] = {}

    def load_asset(self, asset_type: type[AssetT], asset_id: str) -> None:
        """Load the asset with ``asset_type`` unless that ID is already loaded."""
        if asset_id in self._assets:
            return
        asset = asset_type()
        if not asset.load(asset_id):
            raise AssetLoadError(f"Failed to load asset: {asset_id}")
        self._assets[asset_id] = asset

    def get_asset(self, asset_type: type[AssetT], asset_id: str) -> AssetInstance:
        """Return a new instance of the asset, loading it first if needed.

        Raises TypeError if the ID was loaded as a different asset type.
        """
        self.load_asset(asset_type, asset_id)
        asset = self._assets[asset_id]
        if not isinstance(asset, asset_type):
            raise TypeError(
                f"asset {asset_id!r} is a {type(asset).__name__}, not a {asset_type.__name__}"
            )
        return asset.create_instance()

    def is_asset_loaded(self, asset_id: str) -> bool:
        return asset_id in self._assets

    def _unload_all(self) -> int:
        """Forget every loaded asset and return how many there were."""
        count = len(self._assets)
        self._assets.clear()
        return count


_manager: AssetManager | None = None


def init() -> AssetManager:
    """Create the shared asset manager. Raises if it already exists."""
    global _manager
    if _manager is not None:
        raise RuntimeError("AssetManager already initialized.")
    _manager = AssetManager()
    return _manager


def shutdown() -> None:
    """Unload every asset held by the shared manager and drop the manager."""
    global _manager
    if _manager is not None:
        _manager._unload_all()
    _manager = None


def get_manager() -> AssetManager:
    """Return the shared asset manager. Raises if it was not initialized."""
    if _manager is None:
        raise RuntimeError("AssetManager not initialized.")
    return _manager