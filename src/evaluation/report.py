"""End-to-end evaluation of a scored instance set."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable

from .auc import area_under_curve
from .curves import Curve, precision_recall_curve, sensitivity_specificity_curve
from .instances import ScoredInstance
from .thresholds import (
    BASELINE_THRESHOLD,
    DEFAULT_THRESHOLDS,
    ThresholdReport,
    select_operating_threshold,
    sweep_thresholds,
    validate_thresholds,
)


@dataclass(frozen=True)
class EvaluationSummary:
    """Curves, areas and threshold reports for one evaluation set."""
    
    n_positive: int
    n_negative: int
    pr_curve: Curve
    roc_curve: Curve
    pr_auc: float
    roc_auc: float
    threshold_reports: Dict[float, ThresholdReport]
    operating_point: ThresholdReport
    
    def to_dict(self) -> Dict[str, Any]:
        """JSON-serialisable view without the curve points."""
        return {
            'n_positive': self.n_positive,
            'n_negative': self.n_negative,
            'pr_auc': self.pr_auc,
            'roc_auc': self.roc_auc,
            'thresholds': [r.to_dict() for r in self.threshold_reports.values()],
            'operating_threshold': self.operating_point.threshold,
        }


def evaluate_classifier(
    instances: Iterable[ScoredInstance],
    thresholds: Iterable[float] = DEFAULT_THRESHOLDS,
    baseline: float = BASELINE_THRESHOLD
) -> EvaluationSummary:
    """
    Evaluate classifier scores under class imbalance.
    
    Args:
        instances: Scored instances with both classes present
        thresholds: Thresholds for the confusion-matrix sweep
        baseline: Threshold whose recall the operating point must keep
    
    Returns:
        EvaluationSummary
    """
    instances = list(instances)
    thresholds = validate_thresholds(thresholds)
    
    pr_curve = precision_recall_curve(instances)
    roc_curve = sensitivity_specificity_curve(instances)
    n_positive = sum(1 for inst in instances if inst.label)
    
    return EvaluationSummary(
        n_positive=n_positive,
        n_negative=len(instances) - n_positive,
        pr_curve=pr_curve,
        roc_curve=roc_curve,
        pr_auc=area_under_curve(pr_curve),
        roc_auc=area_under_curve(roc_curve),
        threshold_reports=sweep_thresholds(instances, thresholds),
        operating_point=select_operating_threshold(instances, thresholds, baseline),
    )


def print_evaluation_report(summary: EvaluationSummary, name: str = "Model") -> None:
    """Print AUCs and the per-threshold confusion table."""
    print(f"\n{name} Evaluation:")
    print(f"  Instances:   {summary.n_positive + summary.n_negative:,} "
          f"({summary.n_positive:,} fraud, {summary.n_negative:,} legitimate)")
    print(f"  PR-AUC:      {summary.pr_auc:.4f}")
    print(f"  ROC-AUC:     {summary.roc_auc:.4f}")
    
    print("\n  Threshold     TP     FN     FP     TN    TPR     TNR")
    for t, r in summary.threshold_reports.items():
        print(f"    {t:7.3f} {r.true_positives:6d} {r.false_negatives:6d} "
              f"{r.false_positives:6d} {r.true_negatives:6d} "
              f"{r.true_positive_rate:6.4f}  {r.true_negative_rate:6.4f}")
    
    op = summary.operating_point
    print(f"\n  Operating threshold: {op.threshold:.3f} "
          f"(TPR {op.true_positive_rate:.4f}, TNR {op.true_negative_rate:.4f})")
