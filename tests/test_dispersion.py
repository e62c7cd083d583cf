import math
import statistics

import pytest

from py_sharpshooter.dispersion import (
    DispersionSample,
    dispersion_std_dev,
    group_size,
    moa_to_meters,
    sample_group,
    sample_offset,
    sample_radial_offset,
)


class TestConversions:

    def test_moa_to_meters(self):
        assert moa_to_meters(1, 91.44) == pytest.approx(0.0266, abs=1e-4)
        assert moa_to_meters(0, 100) == 0
        assert moa_to_meters(1, 0) == 0

    def test_std_dev_formula(self):
        # 1 MOA at 100 yards: sigma is a quarter of the group diameter
        sigma = dispersion_std_dev(1.0, 91.44)
        assert sigma == pytest.approx(moa_to_meters(1.0, 91.44) / 2, rel=1e-12)

    def test_std_dev_grows(self):
        assert dispersion_std_dev(2.0, 100) > dispersion_std_dev(1.0, 100)
        assert dispersion_std_dev(1.0, 300) > dispersion_std_dev(1.0, 100)
        assert dispersion_std_dev(0.0, 300) == 0
        assert dispersion_std_dev(1.0, 0) == 0


class TestSampleOffset:

    def test_zero_precision_is_exact_zero(self):
        assert sample_offset(300, 0.0, 12345) == DispersionSample(0.0, 0.0)
        assert sample_offset(300, -1.0, 12345) == (0.0, 0.0)

    def test_zero_distance_is_zero(self):
        offset = sample_offset(0, 2.0, 7)
        assert offset.d_y == 0 and offset.d_z == 0

    def test_deterministic(self):
        assert sample_offset(200, 1.5, 42) == sample_offset(200, 1.5, 42)
        assert sample_offset(200, 1.5, "daily") == sample_offset(200, 1.5, "daily")

    def test_different_seeds(self):
        assert sample_offset(200, 1.5, 1) != sample_offset(200, 1.5, 2)

    def test_finite(self):
        for seed in range(200):
            offset = sample_offset(500, 3.0, seed)
            assert math.isfinite(offset.d_y) and math.isfinite(offset.d_z)

    def test_sample_statistics(self):
        sigma = dispersion_std_dev(2.0, 300)
        group = sample_group(300, 2.0, 2024, 2000)
        ys = [s.d_y for s in group]
        zs = [s.d_z for s in group]
        assert statistics.mean(ys) == pytest.approx(0, abs=0.15 * sigma)
        assert statistics.mean(zs) == pytest.approx(0, abs=0.15 * sigma)
        assert statistics.pstdev(ys) == pytest.approx(sigma, rel=0.1)
        assert statistics.pstdev(zs) == pytest.approx(sigma, rel=0.1)

    def test_deprecated_alias(self):
        with pytest.warns(DeprecationWarning):
            offset = sample_radial_offset(100, 1.0, 3)
        assert offset == sample_offset(100, 1.0, 3)


class TestGroups:

    def test_group_seeds(self):
        group = sample_group(100, 1.0, 10, 5)
        assert len(group) == 5
        assert len(set(group)) == 5
        assert sample_group(100, 1.0, 10, 5) == group
        assert sample_group(100, 1.0, 10, 0) == []
        assert sample_group(100, 1.0, 10, -3) == []

    def test_group_size(self):
        assert group_size([]) == 0
        assert group_size([(1.0, 1.0)]) == 0
        assert group_size([(0.0, 0.0), (0.3, 0.4), (0.1, 0.1)]) == pytest.approx(0.5)
        assert group_size([DispersionSample(0.0, -1.0), DispersionSample(0.0, 1.0)]) == pytest.approx(2.0)

    def test_group_size_grows_with_precision_and_distance(self):
        tight = group_size(sample_group(100, 0.5, 77, 20))
        loose = group_size(sample_group(100, 2.0, 77, 20))
        far = group_size(sample_group(400, 0.5, 77, 20))
        assert loose > tight
        assert far > tight
