"""Scored instances produced by a fraud classifier."""

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from .errors import InvalidArgumentError


DEFAULT_LABEL_COL = 'Class'
DEFAULT_SCORE_COL = 'fraud_probability'


@dataclass(frozen=True)
class ScoredInstance:
    """True label (True = fraud) and predicted score in [0, 1]."""
    
    label: bool
    score: float
    
    def __post_init__(self):
        if not isinstance(self.label, (bool, np.bool_)) and not (
            isinstance(self.label, (int, np.integer)) and self.label in (0, 1)
        ):
            raise InvalidArgumentError(f"Label must be a boolean or 0/1, got {self.label!r}")
        if isinstance(self.score, bool) or not isinstance(self.score, (int, float, np.number)):
            raise InvalidArgumentError(f"Score must be a real number, got {self.score!r}")
        if math.isnan(self.score) or not 0.0 <= self.score <= 1.0:
            raise InvalidArgumentError(f"Score must lie in [0, 1], got {self.score}")
        object.__setattr__(self, 'label', bool(self.label))
        object.__setattr__(self, 'score', float(self.score))


def instances_from_arrays(labels, scores) -> list[ScoredInstance]:
    """
    Build scored instances from parallel label and score arrays.
    
    Args:
        labels: Binary labels (1/True = fraud)
        scores: Predicted scores in [0, 1]
    
    Returns:
        List of ScoredInstance
    
    Raises:
        InvalidArgumentError: If lengths differ or a score is out of range
    """
    labels = np.asarray(labels).ravel()
    scores = np.asarray(scores, dtype=float).ravel()
    
    if len(labels) != len(scores):
        raise InvalidArgumentError(
            f"Labels and scores differ in length: {len(labels)} != {len(scores)}"
        )
    
    return [ScoredInstance(bool(l), float(s)) for l, s in zip(labels, scores)]


def instances_from_frame(
    df: pd.DataFrame,
    label_col: str = DEFAULT_LABEL_COL,
    score_col: str = DEFAULT_SCORE_COL
) -> list[ScoredInstance]:
    """
    Build scored instances from a predictions DataFrame.
    
    Defaults match the columns written by batch inference joined with the
    ground-truth `Class` column.
    """
    missing_cols = {label_col, score_col} - set(df.columns)
    if missing_cols:
        raise InvalidArgumentError(f"Missing required columns: {missing_cols}")
    
    return instances_from_arrays(df[label_col].values, df[score_col].values)


def as_arrays(instances: Sequence[ScoredInstance]) -> tuple[np.ndarray, np.ndarray]:
    """Split instances into (labels, scores) numpy arrays."""
    labels = np.fromiter((inst.label for inst in instances), dtype=bool, count=len(instances))
    scores = np.fromiter((inst.score for inst in instances), dtype=float, count=len(instances))
    return labels, scores
