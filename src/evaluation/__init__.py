"""Evaluation of binary fraud classifiers under class imbalance."""

from .auc import area_under_curve, precision_recall_auc, sensitivity_specificity_auc
from .curves import (
    PRECISION_RECALL,
    SENSITIVITY_SPECIFICITY,
    Curve,
    build_curve,
    precision_recall_curve,
    sensitivity_specificity_curve,
)
from .errors import EvaluationError, InsufficientDataError, InvalidArgumentError
from .instances import ScoredInstance, instances_from_arrays, instances_from_frame
from .report import EvaluationSummary, evaluate_classifier, print_evaluation_report
from .thresholds import (
    BASELINE_THRESHOLD,
    DEFAULT_THRESHOLDS,
    ThresholdReport,
    select_operating_threshold,
    sweep_thresholds,
)
