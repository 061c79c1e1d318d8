from . import __version__, get_tool_info, parse_cpuinfo
from .conftest import make_listing


def test_get_tool_info():
    """Test the tool discovery metadata."""
    info = get_tool_info()
    assert info["name"] == "cpuinfo_parser"
    assert info["version"] == __version__
    assert "parse_cpuinfo" in info["functions"]
    assert "loguru" in info["requirements"]


def test_public_entry_point():
    """Test the package-level entry point."""
    assert len(parse_cpuinfo(make_listing(3))) == 3
