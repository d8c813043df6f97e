import pytest

from shaderflat.resolver import resolve_include, split_operand


def test_quoted_is_relative_to_working_directory():
    assert resolve_include('"lib/noise.glsl"') == "lib/noise.glsl"
    # The includer's directory is ignored unless asked for.
    assert resolve_include('"noise.glsl"', includer="lib/a.glsl") == "noise.glsl"


def test_bracketed_is_rooted():
    assert resolve_include("<a/b>") == "/a/b"
    assert resolve_include("<common.glsl>") == "/common.glsl"
    assert resolve_include("<../x>") == "/x"
    assert resolve_include("<a/../../../x>") == "/x"


def test_quoted_paths_are_lexically_normalized():
    assert resolve_include('"./a//b.glsl"') == "a/b.glsl"


def test_relative_to_includer():
    assert resolve_include('"noise.glsl"', "lib/a.glsl", relative_to_includer=True) == "lib/noise.glsl"
    assert resolve_include('"../b.glsl"', "lib/a.glsl", relative_to_includer=True) == "b.glsl"
    assert resolve_include('"b.glsl"', "a.glsl", relative_to_includer=True) == "b.glsl"
    # Bracketed operands are unaffected.
    assert resolve_include("<x/y>", "lib/a.glsl", relative_to_includer=True) == "/x/y"


@pytest.mark.parametrize("operand", ['""', "<>", '"abc', "<abc", '"abc>', "abc"])
def test_malformed_operands(operand):
    with pytest.raises(ValueError):
        split_operand(operand)
