"""Prometheus metrics exporter for fraud classifier evaluation results."""

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge, Info, start_http_server
import time
from typing import Optional

from ..evaluation.report import EvaluationSummary


class EvaluationMetrics:
    """
    Prometheus metrics for classifier evaluation runs.
    
    Use the module-level `metrics` instance for the default registry; any
    further instance needs its own CollectorRegistry.
    """
    
    def __init__(self, registry: Optional[CollectorRegistry] = None):
        registry = registry or REGISTRY
        
        # Curve areas
        self.pr_auc = Gauge(
            'fraud_eval_pr_auc',
            'Area under the precision-recall curve',
            registry=registry
        )
        
        self.roc_auc = Gauge(
            'fraud_eval_roc_auc',
            'Area under the sensitivity vs. 1 - specificity curve',
            registry=registry
        )
        
        # Per-threshold rates
        self.true_positive_rate = Gauge(
            'fraud_eval_true_positive_rate',
            'True-positive rate at a decision threshold',
            ['threshold'],
            registry=registry
        )
        
        self.true_negative_rate = Gauge(
            'fraud_eval_true_negative_rate',
            'True-negative rate at a decision threshold',
            ['threshold'],
            registry=registry
        )
        
        self.operating_threshold = Gauge(
            'fraud_eval_operating_threshold',
            'Selected operating threshold',
            registry=registry
        )
        
        # Evaluation set size
        self.instances_total = Counter(
            'fraud_eval_instances_total',
            'Number of evaluated instances',
            ['label'],
            registry=registry
        )
        
        self.last_evaluation_time = Gauge(
            'fraud_eval_last_timestamp',
            'Timestamp of last evaluation',
            registry=registry
        )
        
        self.evaluation_info = Info(
            'fraud_eval',
            'Information about the evaluated model',
            registry=registry
        )
    
    def record_summary(self, summary: EvaluationSummary) -> None:
        """Record the results of one evaluation run."""
        self.pr_auc.set(summary.pr_auc)
        self.roc_auc.set(summary.roc_auc)
        
        for threshold, report in summary.threshold_reports.items():
            label = f'{threshold:g}'
            self.true_positive_rate.labels(threshold=label).set(report.true_positive_rate)
            self.true_negative_rate.labels(threshold=label).set(report.true_negative_rate)
        
        self.operating_threshold.set(summary.operating_point.threshold)
        self.instances_total.labels(label='fraud').inc(summary.n_positive)
        self.instances_total.labels(label='legitimate').inc(summary.n_negative)
        self.last_evaluation_time.set(time.time())
    
    def set_model_info(self, model_type: str, version: str) -> None:
        """Set information about the evaluated model."""
        self.evaluation_info.info({
            'model_type': model_type,
            'version': version
        })


# Global metrics instance on the default registry
metrics = EvaluationMetrics()


def start_metrics_server(port: int = 8000, registry: Optional[CollectorRegistry] = None) -> None:
    """Start Prometheus metrics HTTP server."""
    start_http_server(port, registry=registry or REGISTRY)
    print(f"Metrics server started on port {port}")
    print(f"Metrics available at http://localhost:{port}/metrics")
