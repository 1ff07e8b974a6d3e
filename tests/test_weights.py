import numpy as np
import pytest

from melbank import InvalidParameterError, bin_frequency_table, bin_to_freq, freq_to_bin
from melbank.spectral import fill_triangular_weights, plan_edges, triangle_heights


def test_bin_frequency_table_uses_bin_count_as_transform_size() -> None:
    freqs = bin_frequency_table(16000, 512)
    assert freqs.shape == (512,)
    assert freqs[0] == 0.0
    assert freqs[1] == pytest.approx(31.25)
    assert freqs[-1] == pytest.approx(511 * 31.25)
    assert np.all(np.diff(freqs) > 0)


def test_bin_freq_conversions() -> None:
    assert bin_to_freq(10, 44100, 1024) == pytest.approx(430.6640625)
    assert freq_to_bin(430.6640625, 44100, 1024) == pytest.approx(10.0)
    assert bin_to_freq(-3, 44100, 1024) == 0.0
    assert freq_to_bin(-50.0, 44100, 1024) == 0.0
    np.testing.assert_allclose(
        bin_to_freq(np.array([0, 1, 2]), 8000, 8), [0.0, 1000.0, 2000.0]
    )


@pytest.mark.parametrize("sample_rate", [0, -16000, float("nan"), float("inf")])
def test_bin_frequency_table_rejects_bad_sample_rate(sample_rate: float) -> None:
    with pytest.raises(InvalidParameterError, match="sample_rate"):
        bin_frequency_table(sample_rate, 512)


def test_bin_frequency_table_rejects_single_bin() -> None:
    with pytest.raises(InvalidParameterError, match="n_bins"):
        bin_frequency_table(16000, 1)


def test_first_filter_matches_hand_computed_scan() -> None:
    edges = plan_edges()
    freqs = bin_frequency_table(16000, 512)
    weights = np.zeros((1, 512))
    assert fill_triangular_weights(weights, edges, freqs) == 1

    lower, center, upper = edges.lower[0], edges.center[0], edges.upper[0]
    height = triangle_heights(edges)[0]
    expected = np.zeros(512)
    # bins 5, 6 rise (156.25, 187.5 Hz); bins 7, 8 fall (218.75, 250 Hz)
    for col in (5, 6):
        expected[col] = (freqs[col] - lower) * (height / (center - lower))
    for col in (7, 8):
        expected[col] = (upper - freqs[col]) * (height / (upper - center))

    np.testing.assert_array_equal(np.flatnonzero(weights[0]), [5, 6, 7, 8])
    np.testing.assert_array_equal(weights[0], expected)


def test_coarse_grid_keeps_negative_first_falling_bin() -> None:
    # 172 Hz bins are wider than the 66.7 Hz half triangles of the first band
    edges = plan_edges()
    freqs = bin_frequency_table(44100, 256)
    weights = np.zeros((40, 256))
    fill_triangular_weights(weights, edges, freqs)

    height = triangle_heights(edges)[0]
    down = height / (edges.upper[0] - edges.center[0])
    assert weights[0, 1] > 0.0
    assert weights[0, 2] == pytest.approx((edges.upper[0] - freqs[2]) * down)
    assert weights[0, 2] < 0.0


def test_last_bin_is_never_written() -> None:
    edges = plan_edges()
    freqs = bin_frequency_table(2000, 64)
    weights = np.zeros((40, 64))
    fill_triangular_weights(weights, edges, freqs)
    assert np.all(weights[:, -1] == 0.0)


def test_fill_rejects_mismatched_bin_table() -> None:
    edges = plan_edges()
    with pytest.raises(InvalidParameterError, match="bin_freqs length"):
        fill_triangular_weights(np.zeros((40, 16)), edges, np.arange(8.0))
    with pytest.raises(InvalidParameterError, match="2-D"):
        fill_triangular_weights(np.zeros(16), edges, np.arange(16.0))
