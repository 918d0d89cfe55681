"""
Run configuration

Config files are whitespace-separated ``.key value`` pairs, e.g.

    .alg_type dijkstra_list
    .num_v 100
    .density 0.3
    .start_vertex 0
    .out_matrix false
    .out_list true

``.file_name graph.txt`` loads the graph from a file instead of generating it.
"""

import logging
import os
from pathlib import Path
from typing import Annotated, Any, Dict, Iterable, Optional

import pydantic

from .algorithms.dispatch import AlgorithmKind
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

_KEYS = ("alg_type", "num_v", "density", "start_vertex", "out_matrix", "out_list", "file_name", "seed")


class RunConfig(pydantic.BaseModel):
    """One benchmark run: which algorithm, on which graph"""

    model_config = pydantic.ConfigDict(frozen=True)

    alg_type: AlgorithmKind = AlgorithmKind.DIJKSTRA_LIST
    num_v: Annotated[int, pydantic.Field(ge=0)] = 0
    density: Annotated[float, pydantic.Field(ge=0.0, le=1.0)] = 0.0
    start_vertex: Annotated[int, pydantic.Field(ge=0)] = 0
    out_matrix: bool = False
    out_list: bool = False
    file_name: Optional[str] = None
    seed: Optional[int] = None

    @pydantic.field_validator("alg_type", mode="before")
    @classmethod
    def parse_alg_type(cls, v: Any) -> Any:
        """accept the historical belman_* spelling and mixed case"""
        if isinstance(v, str):
            try:
                return AlgorithmKind(v)
            except ValueError:
                raise ValueError(f"Unknown algorithm type: {v}") from None
        return v

    @pydantic.field_validator("out_matrix", "out_list", mode="before")
    @classmethod
    def parse_flag(cls, v: Any) -> Any:
        """only the literal words true/false are accepted"""
        if isinstance(v, str):
            if v == "true":
                return True
            if v == "false":
                return False
            raise ValueError(f"Invalid flag value: {v}")
        return v

    @pydantic.field_validator("file_name")
    @classmethod
    def non_empty_file_name(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Invalid file name")
        return v

    @property
    def loads_file(self) -> bool:
        return self.file_name is not None

    def check_runnable(self) -> None:
        """ConfigError unless there is enough to either load or generate a graph"""
        if self.loads_file:
            return
        if self.num_v > 0 and self.density > 0:
            if self.start_vertex >= self.num_v:
                raise ConfigError("Start vertex must be less than vertex count")
            return
        raise ConfigError("insufficient configuration parameters: "
                          "either specify file_name or both num_v and density")


def parse_config_text(text: str) -> Dict[str, str]:
    """raw ``.key value`` pairs; tokens not starting with '.' are skipped"""
    tokens = text.split()
    values: Dict[str, str] = {}
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.startswith(".") and i + 1 < len(tokens):
            key = token[1:]
            if key in _KEYS:
                values[key] = tokens[i + 1]
            else:
                logger.warning(f"Ignoring unknown config key: {token}")
            i += 2
        else:
            i += 1
    return values


def load_config(values: Dict[str, Any]) -> RunConfig:
    try:
        return RunConfig(**values)
    except pydantic.ValidationError as e:
        raise ConfigError(f"Invalid configuration:\n{e}") from e


def read_config_file(path) -> RunConfig:
    try:
        text = Path(path).read_text()
    except OSError as e:
        raise ConfigError(f"Cannot open config file: {path}") from e
    return load_config(parse_config_text(text))


def resolve_path(path, search_dirs: Iterable = ()) -> str:
    """
    Locate a config/graph file
    Absolute paths are returned as is; otherwise the working directory, then
    each search dir, its parent and the parent's config/ directory are tried.
    Falls back to the path unchanged.
    """
    path = str(path)
    if not path or os.path.isabs(path):
        return path
    if os.path.exists(path):
        return path
    for base in search_dirs:
        base = Path(base)
        for candidate in (base / path, base.parent / path, base.parent / "config" / path):
            if candidate.exists():
                return str(candidate)
    return path
