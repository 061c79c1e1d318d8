import pytest

from . import primitives
from .exceptions import ParseFailure, ParseKind
from .fields import FIELDS, FIELDS_BY_NAME, field_parser
from .models import AddressSizes, Cpu


def parse_field(name, text):
    """Run the parser for ``name`` over ``text`` from the start."""
    return FIELDS_BY_NAME[name].parse(text, 0)


# --- Tests for the generic field parser ---

@pytest.mark.parametrize(
    "line",
    [
        "processor\t: 7\n",
        "processor: 7\n",
        "processor :7\n",
        "processor \t : \t7\n",
        "processor\t: 7\r\n",
    ],
)
def test_field_parser_separator_padding(line):
    """Test that the separator may be padded with spaces or tabs."""
    value, pos = parse_field("processor", line)
    assert value == 7
    assert pos == len(line)


def test_field_parser_wrong_name():
    """Test that an unexpected field name is a malformed field."""
    with pytest.raises(ParseFailure) as excinfo:
        parse_field("vendor_id", "cpu family\t: 6\n")
    assert excinfo.value.kind is ParseKind.FIELD
    assert excinfo.value.field == "vendor_id"
    assert excinfo.value.position == 0


def test_field_parser_missing_separator():
    """Test that a missing colon is a malformed separator."""
    with pytest.raises(ParseFailure) as excinfo:
        parse_field("processor", "processor\t 0\n")
    assert excinfo.value.kind is ParseKind.SEPARATOR
    assert excinfo.value.field == "processor"
    assert excinfo.value.position == len("processor\t ")


def test_field_parser_prefix_of_longer_name():
    """Test that 'model' does not accept a 'model name' line."""
    with pytest.raises(ParseFailure) as excinfo:
        parse_field("model", "model name\t: Intel\n")
    assert excinfo.value.kind is ParseKind.SEPARATOR
    assert excinfo.value.field == "model"


def test_field_parser_bad_value_reports_field():
    """Test that a value failure carries the field name."""
    with pytest.raises(ParseFailure) as excinfo:
        parse_field("fpu", "fpu\t\t: maybe\n")
    assert excinfo.value.kind is ParseKind.VALUE
    assert excinfo.value.field == "fpu"
    assert excinfo.value.position == len("fpu\t\t: ")


def test_field_parser_requires_line_terminator():
    """Test that a truncated line fails."""
    with pytest.raises(ParseFailure) as excinfo:
        parse_field("stepping", "stepping\t: 11")
    assert excinfo.value.kind is ParseKind.VALUE
    assert excinfo.value.field == "stepping"


def test_field_parser_rejects_trailing_text():
    """Test that text after the value and before the terminator fails."""
    with pytest.raises(ParseFailure):
        parse_field("siblings", "siblings\t: 8 threads\n")


def test_field_parser_custom_decoder():
    """Test that field_parser works with any decoder."""
    parser = field_parser("vendor", primitives.alpha)
    assert parser("xxvendor : AuthenticAMD\nrest", 2) == ("AuthenticAMD", 24)


# --- Tests for individual fields ---

@pytest.mark.parametrize(
    "name, line, expected",
    [
        ("processor", "processor\t: 0\n", 0),
        ("vendor_id", "vendor_id\t: GenuineIntel\n", "GenuineIntel"),
        ("cpu family", "cpu family\t: 6\n", 6),
        ("model", "model\t\t: 142\n", 142),
        (
            "model name",
            "model name\t: Intel(R) Core(TM) i7-8565U CPU @ 1.80GHz\n",
            "Intel(R) Core(TM) i7-8565U CPU @ 1.80GHz",
        ),
        ("stepping", "stepping\t: 11\n", 11),
        ("microcode", "microcode\t: 0xf0\n", 240),
        ("microcode", "microcode\t: 0XAB\n", 171),
        ("cpu MHz", "cpu MHz\t\t: 2000.000\n", 2000.0),
        ("cache size", "cache size\t: 8192 KB\n", 8388608),
        ("physical id", "physical id\t: 0\n", 0),
        ("siblings", "siblings\t: 8\n", 8),
        ("core id", "core id\t\t: 3\n", 3),
        ("cpu cores", "cpu cores\t: 4\n", 4),
        ("apicid", "apicid\t\t: 6\n", 6),
        ("initial apicid", "initial apicid\t: 6\n", 6),
        ("fpu", "fpu\t\t: yes\n", True),
        ("fpu_exception", "fpu_exception\t: no\n", False),
        ("cpuid level", "cpuid level\t: 22\n", 22),
        ("wp", "wp\t\t: yes\n", True),
        ("flags", "flags\t\t: fpu vme de\n", ("fpu", "vme", "de")),
        ("flags", "flags\t\t:\n", ()),
        ("vmx flags", "vmx flags\t: vnmi ept_ad\n", ("vnmi", "ept_ad")),
        ("bugs", "bugs\t\t: spectre_v1 swapgs\n", ("spectre_v1", "swapgs")),
        ("bogomips", "bogomips\t: 3999.93\n", 3999.93),
        ("clflush size", "clflush size\t: 64\n", 64),
        ("cache_alignment", "cache_alignment\t: 64\n", 64),
        (
            "address sizes",
            "address sizes\t: 39 bits physical, 48 bits virtual\n",
            AddressSizes(physical=39, virtual=48),
        ),
        ("power management", "power management:\n", None),
        ("power management", "power management: performance\n", "performance"),
    ],
)
def test_individual_fields(name, line, expected):
    """Test that each field decodes its value and consumes the whole line."""
    value, pos = parse_field(name, line)
    assert value == expected
    assert pos == len(line)


def test_empty_list_with_trailing_space_after_colon():
    """Test that padding after the colon still yields an empty list."""
    assert parse_field("bugs", "bugs\t\t: \n") == ((), len("bugs\t\t: \n"))


def test_list_rejects_invalid_token():
    """Test that tokens outside [a-z0-9_] fail the field."""
    with pytest.raises(ParseFailure) as excinfo:
        parse_field("flags", "flags\t\t: fpu VME\n")
    assert excinfo.value.kind is ParseKind.VALUE
    assert excinfo.value.field == "flags"


def test_cache_size_requires_kb():
    """Test that a cache size without the KB suffix fails."""
    with pytest.raises(ParseFailure) as excinfo:
        parse_field("cache size", "cache size\t: 8192\n")
    assert excinfo.value.field == "cache size"


def test_power_management_rejects_multiple_tokens():
    """Test that power management holds at most one alphanumeric token."""
    with pytest.raises(ParseFailure):
        parse_field("power management", "power management: ts ttp\n")


# --- Tests for the field table ---

def test_field_table_covers_every_cpu_attribute_in_order():
    """Test that FIELDS maps one-to-one, in order, onto Cpu attributes."""
    assert [spec.attribute for spec in FIELDS] == Cpu.attribute_names()


def test_field_table_names():
    """Test the literal field names of the first and last fields."""
    assert FIELDS[0].name == "processor"
    assert FIELDS[-1].name == "power management"
    assert len(FIELDS) == 27
