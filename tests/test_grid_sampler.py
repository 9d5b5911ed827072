"""Tests for grid sampling over parameter ranges."""

import pytest

from learning_networks.errors import ConfigurationError
from learning_networks.ranges import NominalRange, NumericRange, make_range
from learning_networks.sampling import GridSampler, SamplingStrategy, apply_sample


@pytest.fixture
def knn_config():
    return {"K": 5, "metric": "euclidean"}


@pytest.fixture
def knn_ranges(knn_config):
    return [
        make_range(knn_config, "K", lower=1, upper=5),
        make_range(knn_config, "metric", values=["euclidean", "manhattan"]),
    ]


class TestGridSampler:
    """Tests for GridSampler."""

    def test_is_sampling_strategy(self, knn_ranges):
        """Test GridSampler implements the strategy interface."""
        sampler = GridSampler(knn_ranges, resolution=3)
        assert isinstance(sampler, SamplingStrategy)
        assert sampler.method_name() == "grid"
        assert sampler.fields == ["K", "metric"]

    def test_grid_size(self, knn_ranges):
        """Test grid size is the product of iterator lengths."""
        sampler = GridSampler(knn_ranges, resolution=3)
        assert sampler.grid_size() == 6

    def test_samples_first_field_fastest(self, knn_ranges):
        """Test samples follow unwind ordering."""
        samples = GridSampler(knn_ranges, resolution=3).sample()

        assert samples == [
            {"K": 1, "metric": "euclidean"},
            {"K": 3, "metric": "euclidean"},
            {"K": 5, "metric": "euclidean"},
            {"K": 1, "metric": "manhattan"},
            {"K": 3, "metric": "manhattan"},
            {"K": 5, "metric": "manhattan"},
        ]

    def test_table(self, knn_ranges):
        """Test the raw table has one column per range."""
        table = GridSampler(knn_ranges, resolution=3).table()
        assert table.shape == (6, 2)

    def test_per_field_resolution(self, knn_ranges):
        """Test resolution can be given per field."""
        sampler = GridSampler(knn_ranges, resolution={"K": 2})
        assert [s["K"] for s in sampler.sample()] == [1, 5, 1, 5]

    def test_default_resolution(self):
        """Test fields missing from a resolution mapping use the default."""
        sampler = GridSampler([NumericRange("alpha", 0.0, 1.0)], resolution={})
        assert sampler.grid_size() == 10

    def test_integer_dedup_shrinks_grid(self):
        """Test rounded duplicates do not enlarge the grid."""
        sampler = GridSampler([NumericRange("depth", 1, 3, kind="int")], resolution=10)
        assert sampler.grid_size() == 3

    def test_subsample(self, knn_ranges):
        """Test n_samples takes evenly spaced grid rows."""
        sampler = GridSampler(knn_ranges, resolution=3)
        full = sampler.sample()
        subset = sampler.sample(n_samples=3)

        assert subset == [full[0], full[2], full[5]]

    def test_subsample_larger_than_grid(self, knn_ranges):
        """Test asking for more samples than grid points returns the full grid."""
        sampler = GridSampler(knn_ranges, resolution=3)
        assert len(sampler.sample(n_samples=100)) == 6

    def test_requires_ranges(self):
        """Test an empty range list is rejected."""
        with pytest.raises(ValueError, match="at least one parameter range"):
            GridSampler([])

    def test_duplicate_fields_rejected(self):
        """Test two ranges for the same field are rejected."""
        ranges = [NominalRange("metric", ["a"]), NominalRange("metric", ["b"])]
        with pytest.raises(ValueError, match="Duplicate range fields"):
            GridSampler(ranges)


class TestApplySample:
    """Tests for applying a sample to a configuration."""

    def test_returns_modified_copy(self, ensemble):
        """Test the configuration is copied, not mutated."""
        new = apply_sample(ensemble, {"n_estimators": 10, "atom.max_depth": 7})

        assert new.n_estimators == 10
        assert new.atom.max_depth == 7
        assert ensemble.n_estimators == 100
        assert ensemble.atom.max_depth == 3

    def test_mapping_config(self, knn_config):
        """Test samples apply to mapping configurations."""
        new = apply_sample(knn_config, {"K": 3})
        assert new == {"K": 3, "metric": "euclidean"}
        assert knn_config["K"] == 5

    def test_unknown_field_raises(self, ensemble):
        """Test new fields are never created."""
        with pytest.raises(ConfigurationError, match="Unknown field"):
            apply_sample(ensemble, {"depth": 3})

    def test_grid_round_trip(self, ensemble):
        """Test every grid sample can be applied to its configuration."""
        ranges = [
            make_range(ensemble, "learning_rate", lower=0.01, upper=1, scale="log10"),
            make_range(ensemble, "atom.criterion", values=["gini", "entropy"]),
        ]
        configs = [apply_sample(ensemble, s) for s in GridSampler(ranges, resolution=3).sample()]

        assert len(configs) == 6
        assert configs[0].learning_rate == pytest.approx(0.01)
        assert configs[-1].atom.criterion == "entropy"
        assert configs[-1].learning_rate == pytest.approx(1.0)
