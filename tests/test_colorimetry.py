"""Tests for the perceived color pipeline."""
import warnings

import pytest

import numpy as np

from polyspec import colorimetry
from polyspec.conf import config
from polyspec.spectrum import AbsorptionBand, Spectrum

# a red-absorbing dye, seen as blue-green
RED_ABSORBER = Spectrum(AbsorptionBand(650, 40, 1.3))


@pytest.fixture
def restore_config():
    saved = config.saturation_lift, config.integration_step, config.visible_range
    yield config
    config.saturation_lift, config.integration_step, config.visible_range = saved


def hue_distance(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)


@pytest.mark.parametrize('band', [
    AbsorptionBand(450, 30, 0), AbsorptionBand(650, 80, 0), AbsorptionBand(550, 0, 0)])
def test_nonabsorbing_spectrum_has_unit_Y(band):
    XYZ = colorimetry.spectrum_to_XYZ(Spectrum(band))
    assert XYZ.Y == pytest.approx(1.0)
    assert not XYZ.degenerate


@pytest.mark.parametrize('touch_up', [True, False])
def test_nonabsorbing_spectrum_is_near_white(touch_up):
    color = colorimetry.perceived_color(Spectrum(AbsorptionBand(550, 30, 0)), touch_up=touch_up)
    assert min(color) >= 240


def test_white_is_the_d65_white_point():
    x, y = colorimetry.white_point_xy()
    assert x == pytest.approx(0.3127, abs=5e-3)
    assert y == pytest.approx(0.3290, abs=5e-3)


def test_linear_white_is_unity():
    XYZ = colorimetry.spectrum_to_XYZ(Spectrum())
    rgb = colorimetry.XYZ_to_linear_sRGB(XYZ)
    assert np.allclose(rgb, 1, atol=0.05)


def test_d65_reference_white_maps_to_unity():
    rgb = colorimetry.XYZ_to_linear_sRGB((0.9505, 1.0, 1.0890))
    assert np.allclose(rgb, 1, atol=1e-3)


def test_opaque_spectrum_is_black():
    color = colorimetry.perceived_color(Spectrum(AbsorptionBand(550, 10000, 50)))
    assert color == (0, 0, 0)


def test_red_absorber_is_seen_as_cyan():
    hexcolor = colorimetry.perceived_hex(RED_ABSORBER)
    hue = colorimetry.hex_to_hue(hexcolor)
    assert 150 <= hue <= 210
    assert hue_distance(hue, colorimetry.hex_to_hue('#00aacc')) < hue_distance(hue, 0)
    r, g, b = colorimetry.DisplayColor.from_hex(hexcolor)
    assert r < g
    assert r < b


def test_red_absorber_without_touch_up_is_cyan():
    color = colorimetry.perceived_color(RED_ABSORBER, touch_up=False)
    hue = colorimetry.hex_to_hue(color.hex)
    assert 150 <= hue <= 210


@pytest.mark.parametrize('band, expected', [
    ((650, 40, 1.3), '#c7fffc'),
    ((550, 30, 0.8), '#fbc7ff'),
    ((450, 30, 0.3), '#faffd7'),
])
def test_perceived_hex_of_single_bands(band, expected):
    assert colorimetry.perceived_hex(Spectrum(AbsorptionBand(*band))) == expected


def test_two_band_spectrum_ignores_band_order_and_leaves_blue():
    green_and_red = [(550, 30, 0.8), (650, 40, 1.3)]
    hexcolor = colorimetry.perceived_hex(green_and_red)
    assert hexcolor == colorimetry.perceived_hex(green_and_red[::-1])
    assert hexcolor != colorimetry.perceived_hex(RED_ABSORBER)
    assert hexcolor != colorimetry.perceived_hex([(550, 30, 0.8)])
    r, g, b = colorimetry.DisplayColor.from_hex(hexcolor)
    assert b > r
    assert b > g


def test_pipeline_is_repeatable():
    a = colorimetry.perceived_color(RED_ABSORBER)
    b = colorimetry.perceived_color(RED_ABSORBER)
    assert a == b
    assert a.hex == b.hex


def test_chromaticity_rotates_monotonically_with_band_center():
    xw, yw = colorimetry.white_point_xy()
    angles = []
    for center in (440, 480, 520, 560, 600):
        XYZ = colorimetry.spectrum_to_XYZ(Spectrum(AbsorptionBand(center, 40, 1.0)))
        x, y = colorimetry.XYZ_to_xy(XYZ)
        angles.append(np.arctan2(y - yw, x - xw))

    angles = np.unwrap(angles)
    assert np.all(np.diff(angles) < 0)


def test_halving_the_step_barely_changes_Y():
    s = Spectrum(AbsorptionBand(550, 40, 1.0))
    coarse = colorimetry.spectrum_to_XYZ(s, step=5)
    fine = colorimetry.spectrum_to_XYZ(s, step=2.5)
    assert fine.Y == pytest.approx(coarse.Y, rel=0.01)


def test_range_is_clamped_to_observer_domain():
    wide = colorimetry.spectrum_to_XYZ(RED_ABSORBER, wvl_range=(300, 900))
    visible = colorimetry.spectrum_to_XYZ(RED_ABSORBER, wvl_range=(400, 700))
    assert wide == visible


@pytest.mark.parametrize('wvl_range', [(500, 500), (720, 800), (300, 350), (600, 500)])
def test_zero_area_range_is_degenerate(wvl_range):
    with pytest.warns(colorimetry.DegenerateSpectrumWarning):
        XYZ = colorimetry.integrate_XYZ(*wvl_range, RED_ABSORBER)

    assert XYZ.degenerate
    assert tuple(XYZ) == (0, 0, 0)


def test_degenerate_result_renders_black():
    with pytest.warns(colorimetry.DegenerateSpectrumWarning):
        color = colorimetry.perceived_color(RED_ABSORBER, wvl_range=(720, 800))

    assert color.hex == '#000000'


def test_regular_range_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        colorimetry.integrate_XYZ(400, 700, RED_ABSORBER)


def test_coarse_step_warns():
    with pytest.warns(UserWarning):
        colorimetry.integrate_XYZ(400, 700, RED_ABSORBER, step=20)


@pytest.mark.parametrize('step', [0, -1])
def test_nonpositive_step_raises(step):
    with pytest.raises(ValueError):
        colorimetry.integrate_XYZ(400, 700, RED_ABSORBER, step=step)


def test_scalar_transmittance_functions_are_broadcast():
    XYZ = colorimetry.integrate_XYZ(400, 700, lambda nm: 0.5)
    assert XYZ.Y == pytest.approx(0.5)


def test_tristimulus_unpacks_to_three_values():
    X, Y, Z = colorimetry.Tristimulus(1, 2, 3)
    assert (X, Y, Z) == (1, 2, 3)
    assert not colorimetry.Tristimulus(1, 2, 3).degenerate


def test_tristimulus_replace_keeps_degenerate_flag():
    XYZ = colorimetry.Tristimulus(0., 0., 0., degenerate=True)
    replaced = XYZ._replace(Y=0.5)
    assert replaced.degenerate
    assert tuple(replaced) == (0., 0.5, 0.)
    assert not XYZ._replace(degenerate=False).degenerate


def test_tristimulus_repr_shows_degenerate_flag():
    assert 'degenerate=True' in repr(colorimetry.Tristimulus(0., 0., 0., degenerate=True))
    assert 'degenerate=False' in repr(colorimetry.Tristimulus(1., 1., 1.))


def test_bands_and_spectra_give_the_same_color():
    assert colorimetry.perceived_hex([(650, 40, 1.3)]) == colorimetry.perceived_hex(RED_ABSORBER)


@pytest.mark.parametrize('v', [0, 0.0031308, 0.04045, 0.1, 0.5, 1.0])
def test_sRGB_oetf_and_reverse_oetf_cancel(v):
    assert float(colorimetry.sRGB_oetf(colorimetry.sRGB_reverse_oetf(v))) == pytest.approx(v, abs=1e-6)
    assert float(colorimetry.sRGB_reverse_oetf(colorimetry.sRGB_oetf(v))) == pytest.approx(v, abs=1e-6)


def test_sRGB_oetf_is_continuous_at_the_break():
    brk = colorimetry.SRGB_LINEAR_BREAK
    linear = brk * 12.92
    power = 1.055 * brk ** (1 / 2.4) - 0.055
    assert linear == pytest.approx(power, abs=1e-6)
    eps = 1e-12
    assert float(colorimetry.sRGB_oetf(brk + eps)) == pytest.approx(float(colorimetry.sRGB_oetf(brk - eps)), abs=1e-6)


def test_sRGB_oetf_clamps_negative_values():
    assert colorimetry.sRGB_oetf(-0.5) == 0


def test_linear_to_display_clamps_out_of_gamut_values():
    r, g, b = colorimetry.linear_to_display((-0.5, 2.0, 0.5))
    assert r == 0
    assert g == 255
    assert 0 < b < 255


def test_linear_to_display_white_and_black():
    assert colorimetry.linear_to_display((1, 1, 1)).hex == '#ffffff'
    assert colorimetry.linear_to_display((0, 0, 0)).hex == '#000000'


@pytest.mark.parametrize('v, expected', [(0, 0), (1, 255), (2, 255), (-1, 0), (0.5, 128)])
def test_encode_channel(v, expected):
    assert colorimetry.encode_channel(v) == expected


def test_hex_is_lowercase_and_zero_padded():
    assert colorimetry.DisplayColor(0, 170, 204).hex == '#00aacc'
    assert colorimetry.DisplayColor(1, 2, 3).hex == '#010203'


def test_display_color_parses_hex():
    assert colorimetry.DisplayColor.from_hex('#00AACC') == (0, 170, 204)
    assert colorimetry.DisplayColor.from_hex('0a0b0c') == (10, 11, 12)


def test_display_color_rejects_bad_hex():
    with pytest.raises(ValueError):
        colorimetry.DisplayColor.from_hex('#abc')


@pytest.mark.parametrize('rgb, hsl', [
    ((1, 0, 0), (0, 1, 0.5)),
    ((0, 1, 0), (1 / 3, 1, 0.5)),
    ((0, 0, 1), (2 / 3, 1, 0.5)),
    ((0.5, 0.5, 0.5), (0, 0, 0.5)),
    ((1, 1, 1), (0, 0, 1)),
])
def test_rgb_hsl_conversions(rgb, hsl):
    assert colorimetry.rgb_to_hsl(*rgb) == pytest.approx(hsl)
    assert colorimetry.hsl_to_rgb(*hsl) == pytest.approx(rgb)


def test_saturation_lift_leaves_grays_alone():
    assert colorimetry.saturation_lift((0.5, 0.5, 0.5)) == pytest.approx((0.5, 0.5, 0.5))


def test_saturation_lift_boosts_saturation_and_dims_lightness():
    h, s, l = colorimetry.rgb_to_hsl(0.2, 0.4, 0.6)
    lifted = colorimetry.saturation_lift((0.2, 0.4, 0.6))
    h2, s2, l2 = colorimetry.rgb_to_hsl(*lifted)
    assert h2 == pytest.approx(h)
    assert s2 == pytest.approx(s * 1.25)
    assert l2 == pytest.approx(l * 0.98)


def test_saturation_lift_caps_saturation():
    lifted = colorimetry.saturation_lift((1.0, 0.0, 0.0))
    _, s, _ = colorimetry.rgb_to_hsl(*lifted)
    assert s == pytest.approx(1)


def test_saturation_lift_keeps_over_range_channels():
    over = (0.57, 1.03, 1.0)
    h, s, l = colorimetry.rgb_to_hsl(*over)
    expected = colorimetry.hsl_to_rgb(h, min(1., s * 1.25), l * 0.98)
    lifted = colorimetry.saturation_lift(over)
    assert lifted == pytest.approx(expected)
    assert lifted != pytest.approx(colorimetry.saturation_lift((0.57, 1.0, 1.0)))


def test_saturation_lift_clamps_negative_channels():
    assert colorimetry.saturation_lift((-0.2, 0.5, 0.5)) == pytest.approx(colorimetry.saturation_lift((0., 0.5, 0.5)))


def test_rgb_to_hsl_of_over_range_white_has_infinite_saturation():
    _, s, l = colorimetry.rgb_to_hsl(1.5, 0.5, 1.0)
    assert l == pytest.approx(1.0)
    assert s == float('inf')


def test_touch_up_follows_config(restore_config):
    restore_config.saturation_lift = False
    assert colorimetry.perceived_color(RED_ABSORBER) == colorimetry.perceived_color(RED_ABSORBER, touch_up=False)
    restore_config.saturation_lift = True
    assert colorimetry.perceived_color(RED_ABSORBER) == colorimetry.perceived_color(RED_ABSORBER, touch_up=True)


def test_integration_step_follows_config(restore_config):
    restore_config.integration_step = 2.5
    assert colorimetry.spectrum_to_XYZ(RED_ABSORBER) == colorimetry.spectrum_to_XYZ(RED_ABSORBER, step=2.5)


def test_xy_of_black_is_the_white_point():
    assert colorimetry.XYZ_to_xy((0, 0, 0)) == colorimetry.white_point_xy()


@pytest.mark.parametrize('hexcolor, hue', [('#ff0000', 0), ('#00ffff', 180), ('#0000ff', 240)])
def test_hex_to_hue(hexcolor, hue):
    assert colorimetry.hex_to_hue(hexcolor) == pytest.approx(hue)
