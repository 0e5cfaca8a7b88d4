from minisnake.display import RecordingDisplay


def test_starts_empty():
    display = RecordingDisplay()
    assert display.calls == []
    assert display.font is None
    assert display.bitmap_transparent is False


def test_records_calls_in_order():
    display = RecordingDisplay()
    display.draw_box(1, 2, 3, 4)
    display.draw_frame(5, 6, 7, 8)
    display.draw_rframe(9, 10, 11, 12, 13)
    display.draw_str(14, 15, "hello")
    assert display.calls == [
        ("draw_box", 1, 2, 3, 4),
        ("draw_frame", 5, 6, 7, 8),
        ("draw_rframe", 9, 10, 11, 12, 13),
        ("draw_str", 14, 15, "hello"),
    ]


def test_records_button():
    display = RecordingDisplay()
    display.draw_button(10, 50, 0x22, 0, 2, 2, "PLAY")
    assert display.calls == [("draw_button", 10, 50, 0x22, 0, 2, 2, "PLAY")]


def test_set_font_is_remembered():
    display = RecordingDisplay()
    display.set_font("first")
    display.set_font("second")
    assert display.font == "second"
    assert display.calls == [("set_font", "first"), ("set_font", "second")]


def test_set_bitmap_mode_is_remembered():
    display = RecordingDisplay()
    display.set_bitmap_mode(1)
    assert display.bitmap_transparent is True
    display.set_bitmap_mode(False)
    assert display.bitmap_transparent is False


def test_draw_xbm_keeps_a_copy_of_the_bitmap():
    display = RecordingDisplay()
    data = bytearray(b"\x01\x02")
    display.draw_xbm(0, 0, 8, 2, data)
    data[0] = 0xFF
    assert display.calls == [("draw_xbm", 0, 0, 8, 2, b"\x01\x02")]