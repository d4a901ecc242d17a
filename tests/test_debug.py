import io

import pytest

from portkit.debug import TraceLevel, display_array, format_array


def test_format_array_empty():
    assert format_array("> ", b"") == ""


def test_format_array_short_line():
    assert format_array("", b"\x01\xab") == "01 AB \r\n"


@pytest.mark.parametrize("length", [1, 15, 16, 17, 32, 33, 100])
def test_format_array_line_structure(length):
    data = bytes(i % 256 for i in range(length))
    text = format_array("pre: ", data)
    lines = text.split("\r\n")
    assert lines[-1] == ""
    body = lines[:-1]
    assert len(body) == (length + 15) // 16
    assert all(line.startswith("pre: ") for line in body)
    assert all(len(line[len("pre: "):].split()) <= 16 for line in body)


@pytest.mark.parametrize("length", [1, 16, 40, 256])
def test_format_array_round_trip(length):
    data = bytes((i * 37 + 11) % 256 for i in range(length))
    text = format_array("# ", data)
    hex_text = "".join(line[2:] for line in text.split("\r\n") if line)
    assert bytes.fromhex(hex_text) == data


def test_format_array_uses_uppercase():
    text = format_array("", bytes(range(0xA0, 0xB0)))
    assert text == text.upper()


def test_format_array_accepts_bytearray_and_memoryview():
    data = b"\x10\x20\x30"
    assert format_array("x", bytearray(data)) == format_array("x", data)
    assert format_array("x", memoryview(data)) == format_array("x", data)


def test_display_array_writes_to_stream():
    stream = io.StringIO()
    data = bytes(range(20))
    display_array(stream, "> ", data)
    assert stream.getvalue() == format_array("> ", data)


def test_display_array_defaults_to_stderr(capsys):
    display_array(None, "", b"\xff")
    assert capsys.readouterr().err == format_array("", b"\xff")


def test_trace_levels_are_ordered():
    levels = list(TraceLevel)
    assert levels == sorted(levels)
    assert TraceLevel.OFF < TraceLevel.FATAL < TraceLevel.VERBOSE
    assert TraceLevel(5) is TraceLevel.DEBUG