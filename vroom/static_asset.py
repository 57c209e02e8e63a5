"""Shared assets and the counted instances that refer to them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType


def get_extension(file_path: str) -> str:
    """Return the lower-case text after the last dot, or "" if there is no dot."""
    dot = file_path.rfind(".")
    if dot == -1:
        return ""
    return file_path[dot + 1 :].lower()


class AssetInstance:
    """A handle on a static asset; the asset counts its live handles."""

    def __init__(self, static_asset: StaticAsset | None = None) -> None:
        self._static_asset = static_asset
        if static_asset is not None:
            static_asset.notify_new_instance()

    @property
    def static_asset(self) -> StaticAsset | None:
        return self._static_asset

    def copy(self) -> AssetInstance:
        """Return a new handle on the same asset."""
        return type(self)(self._static_asset)

    def release(self) -> None:
        """Drop the reference to the asset. Releasing twice has no effect."""
        if self._static_asset is not None:
            self._static_asset.notify_delete_instance()
            self._static_asset = None

    def __enter__(self) -> AssetInstance:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


class StaticAsset(ABC):
    """An asset loaded once from a file and shared by its instances."""

    def __init__(self) -> None:
        self._instance_count = 0

    @property
    def instance_count(self) -> int:
        return self._instance_count

    def notify_new_instance(self) -> None:
        self._instance_count += 1

    def notify_delete_instance(self) -> None:
        if self._instance_count == 0:
            raise RuntimeError("asset has no live instance to release")
        self._instance_count -= 1

    def load(self, file_path: str) -> bool:
        """Load the asset from a file; return whether it succeeded."""
        return bool(self.load_impl(file_path))

    @abstractmethod
    def load_impl(self, file_path: str) -> bool:
        """Do the actual loading; return whether it succeeded."""

    def create_instance(self) -> AssetInstance:
        """Return a new counted handle on this asset."""
        return AssetInstance(self)