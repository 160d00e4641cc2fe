"""Tests for area-under-curve integration."""

import pytest
import numpy as np
from sklearn.metrics import roc_auc_score

from src.evaluation.auc import (
    area_under_curve,
    precision_recall_auc,
    sensitivity_specificity_auc
)
from src.evaluation.curves import precision_recall_curve
from src.evaluation.errors import InsufficientDataError, InvalidArgumentError
from src.evaluation.instances import instances_from_arrays


def test_trapezoid_simple():
    """Test area of a known piecewise-linear curve."""
    assert area_under_curve([0.0, 0.5, 1.0], [0.0, 1.0, 1.0]) == pytest.approx(0.75)


def test_area_invariant_under_reversal():
    """Test that reversing point order keeps the area."""
    x = [0.0, 0.1, 0.4, 0.4, 0.9, 1.0]
    y = [0.0, 0.6, 0.7, 0.8, 0.95, 1.0]

    assert area_under_curve(x, y) == pytest.approx(area_under_curve(x[::-1], y[::-1]))


def test_area_of_curve_object(four_instances):
    """Test integrating a Curve directly."""
    curve = precision_recall_curve(four_instances)

    assert area_under_curve(curve) == pytest.approx(0.5 + 0.5 * (0.5 + 2 / 3) / 2)


def test_single_point_raises():
    """Test that one point has no area."""
    with pytest.raises(InsufficientDataError, match="at least 2 points"):
        area_under_curve([0.5], [0.5])


def test_mismatched_lengths_raise():
    """Test that x and y must align."""
    with pytest.raises(InvalidArgumentError, match="differ in shape"):
        area_under_curve([0.0, 1.0], [0.0, 0.5, 1.0])


def test_missing_y_raises():
    """Test that raw x values need y values."""
    with pytest.raises(InvalidArgumentError, match="y values are required"):
        area_under_curve([0.0, 1.0])


def test_perfect_classifier(perfect_instances):
    """Test that a perfect classifier scores 1 on both curves."""
    assert precision_recall_auc(perfect_instances) == pytest.approx(1.0)
    assert sensitivity_specificity_auc(perfect_instances) == pytest.approx(1.0)


def test_interleaved_roc_auc(four_instances):
    """Test ROC-AUC equals the fraction of correctly ordered pairs."""
    assert sensitivity_specificity_auc(four_instances) == pytest.approx(0.75)


def test_roc_auc_in_unit_interval(imbalanced_instances):
    """Test that ROC-AUC lies in [0, 1]."""
    roc_auc = sensitivity_specificity_auc(imbalanced_instances)

    assert 0.0 <= roc_auc <= 1.0
    assert roc_auc > 0.8


def test_inverted_classifier_roc_auc():
    """Test that scoring fraud lowest gives ROC-AUC of 0."""
    instances = instances_from_arrays([1, 1, 0, 0], [0.1, 0.2, 0.8, 0.9])

    assert sensitivity_specificity_auc(instances) == pytest.approx(0.0)


def test_random_classifier_roc_auc():
    """Test that label-independent scores give ROC-AUC near 0.5."""
    np.random.seed(42)
    n_samples = 10000

    labels = np.random.choice([0, 1], n_samples, p=[0.9, 0.1])
    scores = np.random.uniform(0, 1, n_samples)

    roc_auc = sensitivity_specificity_auc(instances_from_arrays(labels, scores))

    assert abs(roc_auc - 0.5) <= 0.05


def test_roc_auc_matches_sklearn():
    """Test agreement with scikit-learn on data with ties."""
    np.random.seed(42)
    n_samples = 1000

    labels = np.random.choice([0, 1], n_samples, p=[0.8, 0.2])
    scores = np.round(np.clip(np.random.normal(0.4 + 0.2 * labels, 0.15), 0, 1), 2)

    ours = sensitivity_specificity_auc(instances_from_arrays(labels, scores))

    assert ours == pytest.approx(roc_auc_score(labels, scores))
