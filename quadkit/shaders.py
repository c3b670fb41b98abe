"""Shader source preprocessing: expansion of #include directives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

_DIRECTIVE = "#include"


@dataclass
class PreprocessorConfig:
    """Include files available to the preprocessor, as (filename, content) pairs."""

    includes: List[Tuple[str, str]] = field(default_factory=list)


def _lookup(config: PreprocessorConfig, filename: str) -> str:
    for name, content in config.includes:
        if name == filename:
            return content
    raise ValueError(f'Include file {filename} in not on "includes" list')


def preprocess_shader(source: str, config: PreprocessorConfig) -> str:
    """Replace every `#include "name"` directive with the named include's content.

    Raises ValueError for a malformed directive or an unknown include file.
    """
    result = source
    position = 0
    while (start := result.find(_DIRECTIVE, position)) != -1:
        cursor = start + len(_DIRECTIVE)
        while cursor < len(result) and result[cursor] == " ":
            cursor += 1
        if cursor >= len(result) or result[cursor] != '"':
            raise ValueError(f"expected '\"' after {_DIRECTIVE} at offset {start}")
        name_start = cursor + 1
        name_end = result.find('"', name_start)
        if name_end == -1:
            raise ValueError(f"unterminated include filename at offset {name_start}")
        filename = result[name_start:name_end]
        content = _lookup(config, filename)
        result = result[:start] + content + result[name_end + 1 :]
        position = name_end
    return result