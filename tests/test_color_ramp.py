from layers.color_ramp import color_for


def test_color_channels_stay_in_range_for_ratios_within_max():
    for value in range(0, 101):
        r, g, b, a = color_for(value, 100)
        assert a == 200
        for channel in (r, g, b):
            assert 0 <= channel <= 255


def test_zero_max_does_not_raise_and_uses_ratio_zero():
    assert color_for(7, 0) == color_for(0, 1) == (0, 0, 255, 200)
    assert color_for(7, -3) == (0, 0, 255, 200)


def test_segment_boundaries():
    # cyan at the first break, orange at the second, red at the top
    assert color_for(33, 100) == (255, 255, 0, 200)
    assert color_for(66, 100) == (255, 128, 0, 200)
    assert color_for(100, 100) == (255, 0, 0, 200)


def test_low_segment_ramps_green_up():
    _, g_low, _, _ = color_for(5, 100)
    _, g_high, _, _ = color_for(30, 100)
    assert 0 < g_low < g_high < 255


def test_out_of_range_values_extrapolate_instead_of_clamping():
    assert color_for(-33, 100) == (0, -255, 255, 200)
    r, g, b, a = color_for(200, 100)
    assert (r, b, a) == (255, 0, 200)
    assert g < 0
