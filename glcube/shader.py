"""Shader programs: their GLSL sources and the uniforms they receive."""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Optional, Union

from .linalg import Mat4

DEFAULT_VERTEX_PATH = "src/render/shader/GLSL/square.vs"
DEFAULT_FRAGMENT_PATH = "src/render/shader/GLSL/square.fs"

_UNIFORM_RE = re.compile(r"\buniform\s+(?:\w+\s+)*?\w+\s+(\w+)\s*(?:\[[^\]]*\])?\s*;")
_program_ids = itertools.count(1)

PathLike = Union[str, Path]


class ShaderError(Exception):
    """A shader source could not be read, compiled or used."""


def read_file(path: PathLike) -> str:
    """Whole text of the file at ``path``; raises ShaderError if it cannot be opened."""
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise ShaderError(f"file couldn't be opened: {path}") from exc


@dataclass(frozen=True)
class ShaderCode:
    """One shader stage: its file name and its source text."""

    name: str
    source: str

    @property
    def uniforms(self) -> FrozenSet[str]:
        """Names of the uniforms the source declares."""
        return frozenset(_UNIFORM_RE.findall(self.source))

    def check(self) -> None:
        """Raise ShaderError when the stage has nothing to compile."""
        if not self.source.strip():
            raise ShaderError(f"shader {self.name} has an empty source")


@dataclass
class Shader:
    """A linked program made of a vertex and a fragment stage."""

    vertex: ShaderCode
    fragment: ShaderCode
    tesselation: Optional[ShaderCode] = None
    geometry: Optional[ShaderCode] = None
    program: int = field(default_factory=lambda: next(_program_ids))
    _values: Dict[str, Mat4] = field(default_factory=dict, repr=False)

    @classmethod
    def load(
        cls,
        vertex_path: PathLike = DEFAULT_VERTEX_PATH,
        fragment_path: PathLike = DEFAULT_FRAGMENT_PATH,
    ) -> "Shader":
        """Read both stages from disk and build the program."""
        stages = []
        for path in (vertex_path, fragment_path):
            code = ShaderCode(Path(path).name, read_file(path))
            code.check()
            stages.append(code)
        return cls(*stages)

    @property
    def declared_uniforms(self) -> FrozenSet[str]:
        """Uniform names declared by any stage of the program."""
        names: FrozenSet[str] = frozenset()
        for stage in (self.vertex, self.fragment, self.tesselation, self.geometry):
            if stage is not None:
                names |= stage.uniforms
        return names

    def _require_live(self) -> None:
        if not self.program:
            raise ShaderError("shader program has been deleted")

    def set_matrix4_uniform(self, name: str, mat: Mat4) -> bool:
        """Send ``mat`` to uniform ``name``; False when no stage declares it."""
        self._require_live()
        if name not in self.declared_uniforms:
            return False
        self._values[name] = mat
        return True

    def uniform(self, name: str) -> Mat4:
        """The matrix last sent to ``name``; raises KeyError if none was."""
        self._require_live()
        try:
            return self._values[name]
        except KeyError:
            raise KeyError(f"uniform {name!r} has no value") from None

    def clear(self) -> None:
        """Delete the program and forget every uniform value."""
        self.program = 0
        self._values.clear()