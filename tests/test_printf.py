import pytest

from pushswap.fmtspec import FormatError, Spec
from pushswap.printf import (
    apply_padding_width,
    apply_precision,
    apply_precision_nbr,
    handle_null_string,
    handle_options,
    printf,
    render,
    sprintf,
)


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%i", (-42,)),
        ("%5d", (42,)),
        ("%-5d|", (42,)),
        ("%05d", (-42,)),
        ("%+d", (42,)),
        ("%+d", (-42,)),
        ("% d", (42,)),
        ("%.5d", (42,)),
        ("%8.5d", (-42,)),
        ("%+05d", (42,)),
        ("%x", (255,)),
        ("%X", (255,)),
        ("%#x", (255,)),
        ("%#X", (255,)),
        ("%#08x", (255,)),
        ("%x", (0xFFFFFFFF,)),
        ("%u", (3000000000,)),
        ("%s", ("hello",)),
        ("%.3s", ("hello",)),
        ("%10s|", ("hello",)),
        ("%-10s|", ("hello",)),
        ("%7.2s|", ("hello",)),
        ("%c", ("A",)),
        ("%5c|", ("A",)),
        ("%-5c|", ("A",)),
        ("%%", ()),
        ("a%db%sc", (1, "x")),
        ("%d %d", (2147483647, -2147483648)),
    ],
)
def test_matches_standard_formatting(fmt, args):
    assert sprintf(fmt, *args) == fmt % args


def test_signed_values_wrap_to_32_bits():
    assert sprintf("%d", 2**32 + 5) == sprintf("%d", 5)


def test_negative_hex_is_unsigned():
    assert sprintf("%x", -1) == sprintf("%x", 0xFFFFFFFF)


def test_char_code_keeps_low_byte():
    assert sprintf("%c", 65 + 256) == sprintf("%c", 65)


def test_percent_ignores_width():
    assert sprintf("%5%") == "%"


def test_zero_with_zero_precision_is_empty():
    assert sprintf("%.0d", 0) == ""
    assert sprintf("%5.0d", 0) == " " * 5


def test_hash_on_zero_adds_no_prefix():
    assert sprintf("%#x", 0) == "%x" % 0


def test_null_string():
    assert sprintf("%s", None) == "(null)"
    assert sprintf("%.3s", None) == ""
    assert sprintf("%5.3s", None) == " " * 5
    padded = sprintf("%10s", None)
    assert len(padded) == 10 and padded.endswith("(null)")


def test_pointer():
    assert sprintf("%p", 0) == "(nil)"
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%p", 255) == "%#x" % 255
    wide = sprintf("%20p", 255)
    assert len(wide) == 20 and wide.endswith("%#x" % 255)


def test_null_char_is_written():
    assert sprintf("%c", 0) == "\0"
    right = sprintf("%3c", 0)
    left = sprintf("%-3c", 0)
    assert len(right) == 3 and right.endswith("\0") and right.strip("\0") == right[:2]
    assert len(left) == 3 and left.startswith("\0") and left[1:] == right[:2]


@pytest.mark.parametrize("fmt", ["%k", "abc%", "%5.2q"])
def test_invalid_format_raises(fmt):
    with pytest.raises(FormatError):
        sprintf(fmt, 1)


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        sprintf("%d %d", 1)


def test_missing_format_raises():
    with pytest.raises(FormatError):
        sprintf(None)


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%05d\n", "value", 42)
    out = capsys.readouterr().out
    assert out == sprintf("%s=%05d\n", "value", 42)
    assert count == len(out)


def test_printf_invalid_raises():
    with pytest.raises(FormatError):
        printf("%")


def test_render_without_specifier_is_empty():
    assert render(Spec()) == ""


def test_render_percent_drops_width():
    assert render(Spec(specifier="%", content=ord("%"), width=5)) == "%"


def test_render_literal_text():
    assert render(Spec(specifier="s", content="plain text")) == "plain text"


def test_apply_padding_width_left_and_right():
    spec = Spec(specifier="s", width=6)
    assert apply_padding_width(spec, "ab", "*") == "ab".rjust(6, "*")
    spec_left = Spec(specifier="s", width=6, has_minus=True)
    assert apply_padding_width(spec_left, "ab", "*") == "ab".ljust(6, "*")


def test_apply_padding_width_too_narrow_is_unchanged():
    spec = Spec(specifier="s", width=2)
    assert apply_padding_width(spec, "abcd", " ") == "abcd"


def test_apply_precision_nbr():
    assert apply_precision_nbr(Spec(specifier="d", precision=0), "0") == ""
    assert apply_precision_nbr(Spec(specifier="x", precision=6), "0xff") == "%#.6x" % 255
    assert apply_precision_nbr(Spec(specifier="d", precision=1), "-42") == "-42"


def test_apply_precision_strings():
    assert apply_precision(Spec(specifier="s", precision=2), "hello") == "hello"[:2]
    assert apply_precision(Spec(specifier="s", precision=0), "hello") == ""
    assert apply_precision(Spec(specifier="c", precision=0), "A") == "A"


def test_apply_precision_numbers_delegates():
    spec = Spec(specifier="d", precision=4)
    assert apply_precision(spec, "7") == apply_precision_nbr(spec, "7")


def test_handle_null_string():
    assert handle_null_string(Spec(specifier="s", precision=3), "(null)") == ""
    assert handle_null_string(Spec(specifier="s"), "(null)") == "(null)"
    assert handle_null_string(Spec(specifier="s", precision=10), "(null)") == "(null)"


def test_handle_options():
    assert handle_options(Spec(specifier="d", has_plus=True), "7") == "%+d" % 7
    assert handle_options(Spec(specifier="d", has_zero=True, width=4), "-7") == "%04d" % -7
    assert handle_options(Spec(specifier="s", precision=2), "(null)") == ""
    assert handle_options(Spec(specifier="x", has_hash=True), "ff") == "%#x" % 255