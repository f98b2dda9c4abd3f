"""Tests for the SVD based decorrelation."""

import logging

import numpy as np
import pytest
from _pytest.logging import LogCaptureFixture

from eds_sampling import Decorrelator, InvalidInputError, Normalizer, NumericalError


@pytest.fixture()
def normalized_data(correlated_data: np.ndarray) -> np.ndarray:
    """Return the normalized version of the correlated dataset."""
    return Normalizer().fit_transform(correlated_data)


def test_basis_is_orthonormal(normalized_data: np.ndarray) -> None:
    """The basis columns should form an orthonormal set."""
    decorrelator = Decorrelator().fit(normalized_data)
    d = normalized_data.shape[1]
    assert decorrelator.basis.shape == (d, d)
    np.testing.assert_allclose(decorrelator.basis.T @ decorrelator.basis, np.eye(d), atol=1e-12)


def test_components_are_uncorrelated_with_unit_variance(normalized_data: np.ndarray) -> None:
    """Rescaled principal components should have identity sample covariance."""
    pcn = Decorrelator().fit_transform(normalized_data)
    np.testing.assert_allclose(np.cov(pcn, rowvar=False), np.eye(pcn.shape[1]), atol=1e-10)


def test_singular_values_are_descending(normalized_data: np.ndarray) -> None:
    """Principal directions are ordered by decreasing singular value."""
    singular_values = Decorrelator().fit(normalized_data).singular_values
    assert np.all(np.diff(singular_values) <= 0)


def test_inverse_restores_normalized_data(normalized_data: np.ndarray) -> None:
    """Forward then inverse transform should reproduce the input."""
    decorrelator = Decorrelator().fit(normalized_data)
    restored = decorrelator.inverse_transform(decorrelator.transform(normalized_data))
    np.testing.assert_allclose(restored, normalized_data, atol=1e-10)


def test_basis_is_deterministic(normalized_data: np.ndarray) -> None:
    """Fitting twice on the same data gives the same basis."""
    first = Decorrelator().fit(normalized_data)
    second = Decorrelator().fit(normalized_data.copy())
    np.testing.assert_array_equal(first.basis, second.basis)
    np.testing.assert_array_equal(first.pc_std, second.pc_std)


def test_collinear_columns_raise(rng: np.random.Generator) -> None:
    """A column that is a linear combination of the others makes the basis rank deficient."""
    data = rng.standard_normal((200, 2))
    data = np.column_stack([data, data[:, 0] + data[:, 1]])
    datan = Normalizer().fit_transform(data)
    with pytest.raises(NumericalError, match="Rank deficient"):
        Decorrelator().fit(datan)


def test_too_few_samples_raise(rng: np.random.Generator) -> None:
    """Fewer samples than dimensions plus one cannot span the space."""
    with pytest.raises(NumericalError):
        Decorrelator().fit(rng.standard_normal((3, 3)))


def test_warns_on_ill_conditioned_basis(normalized_data: np.ndarray, caplog: LogCaptureFixture) -> None:
    """A condition number above the threshold is reported but accepted."""
    with caplog.at_level(logging.WARNING, logger="eds_sampling"):
        Decorrelator(cond_warning=1.0).fit(normalized_data)
    assert any(record.levelno == logging.WARNING for record in caplog.records)


@pytest.mark.parametrize("rank_tol", [0.0, -1.0, np.nan, np.inf])
def test_non_positive_rank_tolerance_raises(normalized_data: np.ndarray, rank_tol: float) -> None:
    """A rank cutoff that is not positive and finite would accept singular bases."""
    with pytest.raises(InvalidInputError):
        Decorrelator(rank_tol=rank_tol).fit(normalized_data)
