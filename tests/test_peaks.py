import numpy as np
import pytest

from ecgview.analysis.peaks import THRESHOLD_FACTOR, calculate_threshold, detect_peaks


@pytest.mark.parametrize("samples", [[], [3.0], [1.0, 2.0]])
def test_detect_peaks_without_interior_points_is_empty(samples) -> None:
    assert detect_peaks(samples) == []


def test_detect_peaks_reports_values_above_threshold() -> None:
    samples = [0, 1, 5, 1, 0, 1, 6, 1, 0]
    assert calculate_threshold(samples) == pytest.approx(3.6)
    assert detect_peaks(samples) == [2, 6]


def test_detect_peaks_ignores_local_maxima_below_threshold() -> None:
    samples = [0, 2, 0, 10, 0, 5, 0]
    # threshold = 6.0 -> only the 10 qualifies
    assert detect_peaks(samples) == [3]


def test_detect_peaks_never_reports_plateaus() -> None:
    assert detect_peaks([0, 5, 5, 0, 1, 6, 0]) == [5]
    assert detect_peaks([1, 1, 1, 1]) == []


def test_detect_peaks_excludes_endpoints() -> None:
    assert detect_peaks([9, 1, 2, 1, 9]) == []


def test_detect_peaks_accepts_numpy_and_leaves_input_untouched() -> None:
    arr = np.array([0.0, 1.0, 0.0, 1.0, 0.0])
    before = arr.copy()
    peaks = detect_peaks(arr)
    assert peaks == [1, 3]
    assert all(isinstance(i, int) for i in peaks)
    np.testing.assert_array_equal(arr, before)


def test_negative_series_uses_scaled_maximum() -> None:
    # max = -1 -> threshold = -0.6; -1 is below it, so no peaks.
    samples = [-5, -1, -5, -1, -5]
    assert calculate_threshold(samples) == pytest.approx(-1 * THRESHOLD_FACTOR)
    assert detect_peaks(samples) == []


def test_calculate_threshold_rejects_empty_input() -> None:
    with pytest.raises(ValueError):
        calculate_threshold([])


def test_detect_peaks_rejects_multidimensional_input() -> None:
    with pytest.raises(ValueError):
        detect_peaks([[1, 2, 3], [4, 5, 6]])
