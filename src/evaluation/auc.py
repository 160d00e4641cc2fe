"""Trapezoidal area under a curve."""

import logging
from typing import Iterable, Optional, Sequence, Union

import numpy as np

from .curves import Curve, precision_recall_curve, sensitivity_specificity_curve
from .errors import InsufficientDataError, InvalidArgumentError
from .instances import ScoredInstance

logger = logging.getLogger(__name__)


def area_under_curve(
    curve_or_x: Union[Curve, Sequence[float]],
    y: Optional[Sequence[float]] = None
) -> float:
    """
    Area under a piecewise-linear curve using the trapezoidal rule.
    
    Accepts either a Curve or parallel x and y sequences. x need not be
    monotonic; the absolute value of the signed area is returned, so a curve
    traversed in decreasing-x order has the same area.
    
    Raises:
        InvalidArgumentError: If x and y differ in length or y is missing
        InsufficientDataError: If there are fewer than 2 points
    """
    if isinstance(curve_or_x, Curve):
        x, y = curve_or_x.x, curve_or_x.y
    else:
        if y is None:
            raise InvalidArgumentError("y values are required when x is not a Curve")
        x = curve_or_x
    
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    
    if x.shape != y.shape:
        raise InvalidArgumentError(f"x and y differ in shape: {x.shape} != {y.shape}")
    if len(x) < 2:
        raise InsufficientDataError(f"Area needs at least 2 points, got {len(x)}")
    
    area = np.sum(np.diff(x) * (y[:-1] + y[1:]) / 2)
    return float(abs(area))


def precision_recall_auc(instances: Iterable[ScoredInstance]) -> float:
    """Area under the precision-recall curve."""
    pr_auc = area_under_curve(precision_recall_curve(instances))
    logger.debug(f"PR-AUC: {pr_auc:.4f}")
    return pr_auc


def sensitivity_specificity_auc(instances: Iterable[ScoredInstance]) -> float:
    """Area under the sensitivity vs. 1 - specificity (ROC) curve."""
    roc_auc = area_under_curve(sensitivity_specificity_curve(instances))
    logger.debug(f"ROC-AUC: {roc_auc:.4f}")
    return roc_auc
