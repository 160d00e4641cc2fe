"""Precision-recall and sensitivity-specificity curves over a score sweep."""

import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np
import pandas as pd

from .errors import InsufficientDataError, InvalidArgumentError
from .instances import ScoredInstance, as_arrays

logger = logging.getLogger(__name__)

PRECISION_RECALL = 'precision_recall'
SENSITIVITY_SPECIFICITY = 'sensitivity_specificity'

CURVE_KINDS = (PRECISION_RECALL, SENSITIVITY_SPECIFICITY)

_AXIS_NAMES = {
    PRECISION_RECALL: ('recall', 'precision'),
    SENSITIVITY_SPECIFICITY: ('false_positive_rate', 'sensitivity'),
}


@dataclass(frozen=True, eq=False)
class Curve:
    """
    Operating points of a classifier, ordered by increasing x.
    
    `thresholds[i]` is the lowest score predicted positive at point i;
    the leading boundary point (nothing predicted positive) carries +inf.
    """
    
    kind: str
    x: np.ndarray
    y: np.ndarray
    thresholds: np.ndarray
    
    def __post_init__(self):
        for name in ('x', 'y', 'thresholds'):
            arr = np.array(getattr(self, name), dtype=float)
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)
        
        if not (len(self.x) == len(self.y) == len(self.thresholds)):
            raise InvalidArgumentError("Curve arrays must have equal length")
    
    def __len__(self):
        return len(self.x)
    
    @property
    def points(self) -> list[tuple[float, float]]:
        return list(zip(self.x.tolist(), self.y.tolist()))
    
    def to_frame(self) -> pd.DataFrame:
        """Curve as a DataFrame with named axes, for plotting."""
        x_name, y_name = _AXIS_NAMES.get(self.kind, ('x', 'y'))
        return pd.DataFrame({
            'threshold': self.thresholds,
            x_name: self.x,
            y_name: self.y,
        })


def _cumulative_counts(
    labels: np.ndarray,
    scores: np.ndarray
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    True/false positive counts at each distinct score, highest score first.
    
    A point at score s predicts positive every instance with score >= s.
    """
    order = np.argsort(-scores, kind='mergesort')
    sorted_scores = scores[order]
    sorted_labels = labels[order]
    
    distinct_idx = np.where(np.diff(sorted_scores))[0]
    threshold_idx = np.r_[distinct_idx, len(sorted_scores) - 1]
    
    tps = np.cumsum(sorted_labels)[threshold_idx]
    fps = (threshold_idx + 1) - tps
    
    return tps.astype(float), fps.astype(float), sorted_scores[threshold_idx]


def build_curve(instances: Iterable[ScoredInstance], kind: str) -> Curve:
    """
    Sweep the decision threshold from +inf down through every distinct score.
    
    Args:
        instances: Scored instances containing both labels
        kind: 'precision_recall' or 'sensitivity_specificity'
    
    Returns:
        Curve ordered by increasing recall (or 1 - specificity)
    
    Raises:
        InvalidArgumentError: If kind is unknown
        InsufficientDataError: If a class has no instances
    """
    if kind not in CURVE_KINDS:
        raise InvalidArgumentError(f"Unknown curve kind: {kind!r}, expected one of {CURVE_KINDS}")
    
    labels, scores = as_arrays(list(instances))
    n_pos = int(labels.sum())
    n_neg = len(labels) - n_pos
    
    if n_pos == 0 or n_neg == 0:
        raise InsufficientDataError(
            f"Curve needs both classes, got {n_pos} positive and {n_neg} negative instances"
        )
    
    tps, fps, thresholds = _cumulative_counts(labels, scores)
    sensitivity = tps / n_pos
    
    # Boundary point: nothing predicted positive, y clamped to 0.
    x = [0.0]
    y = [0.0]
    cuts = [np.inf]
    
    if kind == SENSITIVITY_SPECIFICITY:
        x.extend(fps / n_neg)
        y.extend(sensitivity)
        cuts.extend(thresholds)
    else:
        precision = tps / (tps + fps)
        if sensitivity[0] > 0:
            # Zero-width step so tied top scores keep their full precision.
            x.append(0.0)
            y.append(precision[0])
            cuts.append(thresholds[0])
        x.extend(sensitivity)
        y.extend(precision)
        cuts.extend(thresholds)
    
    curve = Curve(kind=kind, x=x, y=y, thresholds=cuts)
    logger.debug(f"Built {kind} curve: {len(curve)} points from {len(labels)} instances")
    return curve


def precision_recall_curve(instances: Iterable[ScoredInstance]) -> Curve:
    """Precision (y) against recall (x)."""
    return build_curve(instances, PRECISION_RECALL)


def sensitivity_specificity_curve(instances: Iterable[ScoredInstance]) -> Curve:
    """Sensitivity (y) against 1 - specificity (x)."""
    return build_curve(instances, SENSITIVITY_SPECIFICITY)
