import pytest

from quadkit.shaders import PreprocessorConfig, preprocess_shader


def test_preprocessor_expands_include():
    shader_string = """
#version blah blah

asd
asd

#include "hello.glsl"

qwe
"""
    preprocessed = """
#version blah blah

asd
asd

iii
jjj

qwe
"""
    config = PreprocessorConfig(includes=[("hello.glsl", "iii\njjj")])
    assert preprocess_shader(shader_string, config) == preprocessed


def test_source_without_includes_is_unchanged():
    source = "void main() {}\n"
    assert preprocess_shader(source, PreprocessorConfig()) == source


def test_spaces_before_filename_are_skipped():
    config = PreprocessorConfig(includes=[("x.glsl", "X")])
    assert preprocess_shader('pre #include    "x.glsl" post', config) == "pre X post"


def test_unknown_include_raises():
    with pytest.raises(ValueError, match="missing.glsl"):
        preprocess_shader('#include "missing.glsl"', PreprocessorConfig())


def test_missing_quote_raises():
    config = PreprocessorConfig(includes=[("a", "A")])
    with pytest.raises(ValueError):
        preprocess_shader("#include a", config)


def test_unterminated_filename_raises():
    config = PreprocessorConfig(includes=[("a", "A")])
    with pytest.raises(ValueError):
        preprocess_shader('#include "a', config)


def test_default_config_has_no_includes():
    assert PreprocessorConfig().includes == []