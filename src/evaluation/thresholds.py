"""Confusion-matrix sweep over caller-chosen decision thresholds."""

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Dict, Iterable

import numpy as np
import pandas as pd
from sklearn.metrics import confusion_matrix

from .errors import InvalidArgumentError
from .instances import ScoredInstance, as_arrays

logger = logging.getLogger(__name__)

BASELINE_THRESHOLD = 0.5
DEFAULT_THRESHOLDS = tuple(float(t) for t in np.round(np.arange(0.1, 1.0, 0.1), 1))

LABEL_NAMES = ('fraud', 'legitimate')


def _is_real(value) -> bool:
    return isinstance(value, (numbers.Real, np.integer, np.floating)) and not isinstance(value, (bool, np.bool_))


def _ratio(numerator: int, denominator: int) -> float:
    """numerator / denominator, with 0/0 resolved to 0."""
    return numerator / denominator if denominator > 0 else 0.0


@dataclass(frozen=True)
class ThresholdReport:
    """
    2x2 contingency table {true label x predicted-at-threshold}.
    
    An instance is predicted positive when score > threshold. Frequencies
    are normalized within each true-label row; an empty row reports 0.
    """
    
    threshold: float
    true_positives: int
    false_negatives: int
    false_positives: int
    true_negatives: int
    
    @property
    def n_positive(self) -> int:
        return self.true_positives + self.false_negatives
    
    @property
    def n_negative(self) -> int:
        return self.false_positives + self.true_negatives
    
    @property
    def true_positive_rate(self) -> float:
        return _ratio(self.true_positives, self.n_positive)
    
    @property
    def false_negative_rate(self) -> float:
        return _ratio(self.false_negatives, self.n_positive)
    
    @property
    def false_positive_rate(self) -> float:
        return _ratio(self.false_positives, self.n_negative)
    
    @property
    def true_negative_rate(self) -> float:
        return _ratio(self.true_negatives, self.n_negative)
    
    @property
    def precision(self) -> float:
        return _ratio(self.true_positives, self.true_positives + self.false_positives)
    
    def to_frame(self, normalize: bool = False) -> pd.DataFrame:
        """
        Contingency table as a DataFrame (rows: actual, columns: predicted).
        
        Args:
            normalize: Return row frequencies instead of counts
        """
        if normalize:
            values = [
                [self.true_positive_rate, self.false_negative_rate],
                [self.false_positive_rate, self.true_negative_rate],
            ]
        else:
            values = [
                [self.true_positives, self.false_negatives],
                [self.false_positives, self.true_negatives],
            ]
        
        return pd.DataFrame(
            values,
            index=pd.Index(LABEL_NAMES, name='actual'),
            columns=pd.Index(LABEL_NAMES, name='predicted'),
        )
    
    def to_dict(self) -> Dict[str, float]:
        return {
            'threshold': self.threshold,
            'true_positives': self.true_positives,
            'false_negatives': self.false_negatives,
            'false_positives': self.false_positives,
            'true_negatives': self.true_negatives,
            'true_positive_rate': self.true_positive_rate,
            'false_negative_rate': self.false_negative_rate,
            'false_positive_rate': self.false_positive_rate,
            'true_negative_rate': self.true_negative_rate,
            'precision': self.precision,
        }


def validate_thresholds(thresholds: Iterable[float]) -> list[float]:
    """
    Check thresholds before sweeping.
    
    Returns:
        Distinct thresholds in ascending order
    
    Raises:
        InvalidArgumentError: If empty, non-numeric, NaN or outside [0, 1]
    """
    if _is_real(thresholds):
        thresholds = [thresholds]
    
    try:
        thresholds = list(thresholds)
    except TypeError as e:
        raise InvalidArgumentError(
            f"Thresholds must be a number or a collection of numbers, got {thresholds!r}"
        ) from e
    
    checked = []
    for t in thresholds:
        if not _is_real(t):
            raise InvalidArgumentError(f"Threshold must be a real number, got {t!r}")
        if math.isnan(t) or not 0.0 <= t <= 1.0:
            raise InvalidArgumentError(f"Threshold must lie in [0, 1], got {t}")
        checked.append(float(t))
    
    if not checked:
        raise InvalidArgumentError("At least one threshold is required")
    
    return sorted(set(checked))


def report_at_threshold(
    labels: np.ndarray,
    scores: np.ndarray,
    threshold: float
) -> ThresholdReport:
    """Cross-tabulate true labels against (score > threshold)."""
    predicted = scores > threshold
    
    # Fixed labels keep the 2x2 shape when a class is absent.
    tn, fp, fn, tp = confusion_matrix(labels, predicted, labels=[False, True]).ravel()
    
    return ThresholdReport(
        threshold=threshold,
        true_positives=int(tp),
        false_negatives=int(fn),
        false_positives=int(fp),
        true_negatives=int(tn),
    )


def sweep_thresholds(
    instances: Iterable[ScoredInstance],
    thresholds: Iterable[float] = DEFAULT_THRESHOLDS
) -> Dict[float, ThresholdReport]:
    """
    Build a ThresholdReport for every requested threshold.
    
    Unsorted and duplicate thresholds are accepted; the result is keyed by
    threshold in ascending order, with duplicates collapsed.
    
    Args:
        instances: Scored instances (either class may be absent)
        thresholds: Candidate thresholds in [0, 1]
    
    Returns:
        Mapping from threshold to its ThresholdReport
    """
    cuts = validate_thresholds(thresholds)
    labels, scores = as_arrays(list(instances))
    
    n_pos = int(labels.sum())
    n_neg = len(labels) - n_pos
    if n_pos == 0 or n_neg == 0:
        logger.warning(
            f"Sweeping {len(labels)} instances with {n_pos} positive and {n_neg} negative; "
            "empty label rows report zero frequencies"
        )
    
    reports = {t: report_at_threshold(labels, scores, t) for t in cuts}
    logger.debug(f"Swept {len(cuts)} thresholds over {len(labels)} instances")
    return reports


def select_operating_threshold(
    instances: Iterable[ScoredInstance],
    thresholds: Iterable[float] = DEFAULT_THRESHOLDS,
    baseline: float = BASELINE_THRESHOLD
) -> ThresholdReport:
    """
    Pick the threshold with the best true-negative rate that keeps recall.
    
    Candidates are the given thresholds plus the baseline; only those whose
    true-positive rate is not below the baseline's are eligible. Ties go to
    the lowest threshold.
    
    Returns:
        ThresholdReport of the selected threshold
    """
    cuts = validate_thresholds(thresholds) + validate_thresholds([baseline])
    reports = sweep_thresholds(instances, cuts)
    baseline_tpr = reports[float(baseline)].true_positive_rate
    
    eligible = [r for r in reports.values() if r.true_positive_rate >= baseline_tpr]
    best = max(eligible, key=lambda r: (r.true_negative_rate, -r.threshold))
    
    logger.debug(
        f"Selected threshold {best.threshold:.2f} "
        f"(TPR {best.true_positive_rate:.4f}, TNR {best.true_negative_rate:.4f})"
    )
    return best
