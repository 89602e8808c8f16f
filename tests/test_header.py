from datetime import datetime, timedelta, timezone
from tracelog.core.flags import LogFlag
from tracelog.core.header import format_header, itoa

WHEN = datetime(2024, 1, 5, 7, 8, 9, 42)

def _render(flags, file="/a/b/c/d.py", line=23, prefix="", when=WHEN):
    buf = bytearray()
    format_header(buf, when, file, line, flags, prefix)
    return buf.decode()

def test_date_only():
    assert _render(LogFlag.DATE) == "2024/01/05 "

def test_date_only_utc():
    when = datetime(2024, 1, 5, tzinfo=timezone.utc)
    assert _render(LogFlag.DATE | LogFlag.UTC, when=when) == "2024/01/05 "

def test_utc_converts_aware_timestamp():
    when = datetime(2024, 1, 5, 1, 30, tzinfo=timezone(timedelta(hours=3)))
    assert _render(LogFlag.STD | LogFlag.UTC, when=when) == "2024/01/04 22:30:00 "

def test_time_with_microseconds():
    assert _render(LogFlag.TIME | LogFlag.MICROSECONDS) == "07:08:09.000042 "

def test_microseconds_imply_time():
    assert _render(LogFlag.MICROSECONDS) == "07:08:09.000042 "

def test_std_flags():
    assert _render(LogFlag.STD) == "2024/01/05 07:08:09 "

def test_short_file_strips_directories():
    assert _render(LogFlag.SHORT_FILE) == "d.py:23: "

def test_long_file_keeps_path():
    assert _render(LogFlag.LONG_FILE) == "/a/b/c/d.py:23: "

def test_short_file_overrides_long():
    assert _render(LogFlag.SHORT_FILE | LogFlag.LONG_FILE) == "d.py:23: "

def test_line_number_not_padded():
    assert _render(LogFlag.SHORT_FILE, line=7) == "d.py:7: "

def test_prefix_placement():
    flags = LogFlag.DATE | LogFlag.SHORT_FILE
    assert _render(flags, prefix="app ") == "app 2024/01/05 d.py:23: "
    assert _render(flags | LogFlag.MSG_PREFIX, prefix="app ") == "2024/01/05 d.py:23: app "

def test_no_flags_only_prefix():
    assert _render(LogFlag(0), prefix="[x] ") == "[x] "

def test_itoa_padding():
    buf = bytearray()
    itoa(buf, 5, 2)
    itoa(buf, 123, 2)
    itoa(buf, 9, -1)
    assert buf == b"051239"

def test_short_file_windows_path():
    assert _render(LogFlag.SHORT_FILE, file="C:\\proj\\app\\main.py") == "main.py:23: "
