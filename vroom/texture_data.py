"""Raw texture pixels with their dimensions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TextureData:
    """Pixel bytes plus width, height and channel count."""

    data: bytes = b""
    width: int = 0
    height: int = 0
    channels: int = 0

    def __post_init__(self) -> None:
        self.data = bytes(self.data)

    def reset(self) -> None:
        """Drop the pixels and zero the dimensions."""
        self.data = b""
        self.width = 0
        self.height = 0
        self.channels = 0

    def set_data(self, data: bytes, width: int, height: int, channels: int) -> None:
        """Replace the pixels and dimensions."""
        self.data = bytes(data)
        self.width = width
        self.height = height
        self.channels = channels