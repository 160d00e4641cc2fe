"""Shared fixtures for evaluation tests."""

import pytest
import numpy as np

from src.evaluation.instances import ScoredInstance, instances_from_arrays


@pytest.fixture
def imbalanced_instances():
    """Imbalanced set where fraud scores skew high."""
    np.random.seed(42)
    n_samples = 2000

    labels = np.random.choice([0, 1], n_samples, p=[0.95, 0.05])
    scores = np.where(
        labels == 1,
        np.random.beta(5, 2, n_samples),
        np.random.beta(2, 5, n_samples)
    )

    return instances_from_arrays(labels, scores)


@pytest.fixture
def perfect_instances():
    """Every fraud scored 1, every legitimate transaction scored 0."""
    return (
        [ScoredInstance(True, 1.0) for _ in range(10)]
        + [ScoredInstance(False, 0.0) for _ in range(90)]
    )


@pytest.fixture
def four_instances():
    """Two fraud and two legitimate instances with interleaved scores."""
    return [
        ScoredInstance(True, 0.9),
        ScoredInstance(True, 0.3),
        ScoredInstance(False, 0.2),
        ScoredInstance(False, 0.7),
    ]
