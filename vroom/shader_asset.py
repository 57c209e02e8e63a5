"""Shader assets described by a file naming a vertex and a fragment shader."""

from __future__ import annotations

import logging
from pathlib import Path

from vroom.static_asset import StaticAsset

logger = logging.getLogger(__name__)


def _reject(message: str, *args: object) -> bool:
    logger.error(message, *args)
    return False


class ShaderAsset(StaticAsset):
    """Loads a pair of shader sources named by a description file."""

    def __init__(self) -> None:
        super().__init__()
        self.vertex_path: str | None = None
        self.fragment_path: str | None = None
        self.vertex_source: str | None = None
        self.fragment_source: str | None = None

    def load_impl(self, file_path: str) -> bool:
        """Read the description and both shader sources; False on any error."""
        try:
            text = Path(file_path).read_text()
        except OSError:
            return _reject("Failed to open file: %s", file_path)

        paths: dict[str, str] = {}
        for line_num, line in enumerate(text.splitlines()):
            tokens = line.split()
            if not tokens or tokens[0].startswith("#"):
                continue
            key, *rest = tokens

            if key == "vertex":
                if not rest:
                    return _reject(
                        "Invalid RenderShader asset %s at line %d : "
                        "Couldn't find vertex shader file path.", file_path, line_num
                    )
                if len(rest) > 1:
                    return _reject(
                        'Invalid RenderShader asset %s at line %d : unexpected token "%s".',
                        file_path, line_num, rest[1],
                    )
                paths["vertex"] = rest[0]
            elif key == "fragment":
                if not rest:
                    return _reject(
                        "Invalid RenderShader asset %s at line %d : "
                        "Couldn't find fragment shader file path.", file_path, line_num
                    )
                # A second word after "fragment" replaces the first one.
                if len(rest) > 2:
                    return _reject(
                        'Invalid RenderShader asset %s at line %d : unexpected token "%s".',
                        file_path, line_num, rest[2],
                    )
                paths["fragment"] = rest[-1]
            else:
                return _reject(
                    'Invalid RenderShader asset %s at line %d : unexpected token "%s".',
                    file_path, line_num, key,
                )

        for stage in ("vertex", "fragment"):
            if stage not in paths:
                return _reject(
                    "Invalid RenderShader asset %s : Couldn't find %s shader file path.",
                    file_path, stage,
                )

        try:
            vertex_source = Path(paths["vertex"]).read_text()
            fragment_source = Path(paths["fragment"]).read_text()
        except OSError as exc:
            return _reject("Failed to read shader source: %s", exc)

        self.vertex_path = paths["vertex"]
        self.fragment_path = paths["fragment"]
        self.vertex_source = vertex_source
        self.fragment_source = fragment_source
        return True