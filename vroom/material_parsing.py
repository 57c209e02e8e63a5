"""Reading material descriptions and assembling their fragment shaders."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

DEFAULT_ASSEMBLER_PATH = "Resources/Engine/Shader/FragmentShader/FragmentShaderAssembler.glsl"

ALLOWED_PARAMETERS = frozenset(
    {"vertex", "shading-model", "prefrag", "postfrag"}
    | {f"frag-texture-slot-{slot}" for slot in range(8)}
)

DEFAULT_PARAMETERS = {
    "vertex": "Resources/Engine/Shader/VertexShader/Vertex_Default.glsl",
    "prefrag": "Resources/Engine/Shader/FragmentShader/PreFrag/PreFrag_Phong_Default.glsl",
    "postfrag": "Resources/Engine/Shader/FragmentShader/PostFrag/PostFrag_Default.glsl",
}

REQUIRED_PARAMETERS = frozenset({"shading-model"})

SHADING_MODELS = {
    "Phong": "Resources/Engine/Shader/FragmentShader/ShadingModel/ShadingModelFrag_Phong.glsl",
}

_TEXTURE_SLOT_PREFIX = "frag-texture-slot"


class MaterialParseError(ValueError):
    """A material description or one of the files it names is invalid."""


@dataclass
class MaterialParameters:
    vertex: str
    shading_model: str
    prefrag: str
    postfrag: str
    textures: list[str] = field(default_factory=list)


@dataclass
class ParsingResults:
    vertex: str
    fragment: str
    texture_paths: list[str] = field(default_factory=list)


def read_material_parameters(lines: Iterable[str]) -> MaterialParameters:
    """Parse "key value" lines into material parameters, applying defaults."""
    parameters: dict[str, str] = {}
    textures: list[str] = []

    for line in lines:
        tokens = line.split()
        if not tokens or tokens[0].startswith("#"):
            continue
        key, *rest = tokens

        if key not in ALLOWED_PARAMETERS:
            raise MaterialParseError(f"Invalid material parameter: {key}")
        if key in parameters:
            raise MaterialParseError(f"Duplicate material parameter: {key}")
        if not rest:
            raise MaterialParseError(f"Missing value for parameter: {key}")
        value = rest[0]

        if key.startswith(_TEXTURE_SLOT_PREFIX):
            slot = int(key.rsplit("-", 1)[1])
            if slot != len(textures):
                raise MaterialParseError(
                    f"Invalid texture slot: {slot}. "
                    "You need to specify texture slots from 0 to 7, one by one."
                )
            textures.append(value)
            logger.debug("Texture slot %d: %s", slot, value)

        parameters[key] = value

        if len(rest) > 1:
            raise MaterialParseError(f"Unexpected token: {rest[1]}")

    for key, value in DEFAULT_PARAMETERS.items():
        parameters.setdefault(key, value)

    for key in REQUIRED_PARAMETERS:
        if key not in parameters:
            raise MaterialParseError(f"Missing required parameter: {key}")

    model = parameters["shading-model"]
    if model not in SHADING_MODELS:
        raise MaterialParseError(f"Invalid shading model: {model}")

    return MaterialParameters(
        vertex=parameters["vertex"],
        shading_model=SHADING_MODELS[model],
        prefrag=parameters["prefrag"],
        postfrag=parameters["postfrag"],
        textures=textures,
    )


def _read_text(path: str, what: str) -> str:
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise MaterialParseError(f"Failed to open {what} file: {path}") from exc


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_material(file_path: str, assembler_path: str = DEFAULT_ASSEMBLER_PATH) -> ParsingResults:
    """Read a material file and build its vertex and fragment shader sources."""
    parameters = read_material_parameters(_lines(_read_text(file_path, "material")))

    vertex = _read_text(parameters.vertex, "vertex shader")
    assembler = _read_text(assembler_path, "fragment shader assembler")

    includes = {
        "#include PreFragShader": (parameters.prefrag, "prefrag shader"),
        "#include ShadingModelShader": (parameters.shading_model, "shading model shader"),
        "#include PostFragShader": (parameters.postfrag, "postfrag shader"),
    }

    parts: list[str] = []
    for line in _lines(assembler):
        if line in includes:
            path, what = includes[line]
            parts.append(_read_text(path, what) + "\n")
        elif line == "#include Sampler2DUniform":
            if parameters.textures:
                parts.append(f"uniform sampler2D u_Texture[{len(parameters.textures)}];\n")
        else:
            parts.append(line + "\n")

    return ParsingResults(
        vertex=vertex,
        fragment="".join(parts),
        texture_paths=list(parameters.textures),
    )