"""Computation of fuzzy system performance metrics from predictions."""

from __future__ import annotations

import math

from .fuzzy_system_metrics import FuzzySystemMetrics
from .types import INFINITY_DOUBLE, MISSING_DATA_DOUBLE, is_na

EPSILON = 1e-9
_MAX_ADM = 0.71428


def fix_denum(denum):
    """Shift a denominator too close to zero by EPSILON."""
    if abs(denum) < EPSILON:
        denum += EPSILON
    return denum


def error(predicted, actual):
    return predicted - actual


def average_error(predicted, actual):
    return abs((predicted + actual) / 2.0)


def relative_error(predicted, actual):
    return error(predicted, actual) / fix_denum(average_error(predicted, actual))


def rrse(predicted, actual):
    re = relative_error(predicted, actual)
    return re * re


def rae(predicted, actual):
    return abs(relative_error(predicted, actual))


def mse(predicted, actual):
    err = error(predicted, actual)
    return err * err


def distance_to_threshold(predicted, actual, threshold):
    """Positive iff ``predicted`` lies above the threshold (relative to ``actual``)."""
    return (predicted - threshold) / fix_denum(actual - threshold)


def distance_to_threshold_aggregate(sum_dist_above, sum_dist_below, tp, tn, fp, fn):
    denum_below = tn + fp
    if denum_below == 0:
        return MISSING_DATA_DOUBLE
    denum_above = tp + fn
    if denum_above == 0:
        return MISSING_DATA_DOUBLE
    return ((sum_dist_below / denum_below) + (sum_dist_above / denum_above)) / 2.0


def is_positive(value, threshold):
    if is_na(value):
        raise ValueError("cannot classify a missing value")
    return value >= threshold


def distance_min(dist):
    if dist >= _MAX_ADM:
        return 1.0
    return dist * (2.8 - (1.96 * dist))


def sensitivity(tp, fn):
    denum = tp + fn
    return MISSING_DATA_DOUBLE if denum == 0 else tp / denum


def specificity(tn, fp):
    denum = tn + fp
    return MISSING_DATA_DOUBLE if denum == 0 else tn / denum


def accuracy(tp, tn, fp, fn):
    denum = tp + tn + fp + fn
    return MISSING_DATA_DOUBLE if denum == 0 else (tp + tn) / denum


def ppv(tp, fp):
    denum = tp + fp
    return MISSING_DATA_DOUBLE if denum == 0 else tp / denum


class FuzzySystemMetricsComputer:
    """Computes classification and regression metrics of predicted vs actual values."""

    def compute(self, predicted, actual, thresholds):
        """Mean metrics over output variables.

        ``predicted`` and ``actual`` are sequences of columns, one per output
        variable; ``thresholds`` holds one threshold per variable.
        """
        predicted = list(predicted)
        actual = list(actual)
        thresholds = list(thresholds)
        nb_vars = len(actual)
        if nb_vars == 0:
            raise ValueError("no output variables")
        if len(predicted) != nb_vars or len(thresholds) != nb_vars:
            raise ValueError("predicted, actual and thresholds must have one entry per variable")

        metrics = FuzzySystemMetrics()
        for pred_col, actual_col, threshold in zip(predicted, actual, thresholds):
            metrics += self.compute_for_one_variable(pred_col, actual_col, threshold)

        for name in (
            "sensitivity", "specificity", "accuracy", "ppv", "rmse", "rrse",
            "rae", "mse", "distanceThreshold", "distanceMinThreshold",
        ):
            setattr(metrics, name, getattr(metrics, name) / nb_vars)
        return metrics

    def compute_for_one_value(self, predicted, actual, threshold):
        """Unnormalised metrics for a single prediction; missing values give empty metrics."""
        metrics = FuzzySystemMetrics()
        if is_na(predicted) or is_na(actual):
            return metrics

        if error(predicted, actual) != 0.0:
            metrics.rrse = rrse(predicted, actual)
            metrics.rae = rae(predicted, actual)
            metrics.mse = mse(predicted, actual)

        predicted_positive = is_positive(predicted, threshold)
        actual_positive = is_positive(actual, threshold)
        if predicted_positive == actual_positive:
            if actual_positive:
                metrics.true_positives = 1.0
            else:
                metrics.true_negatives = 1.0
            # distance only set when well classified
            metrics.distanceThreshold = distance_to_threshold(predicted, actual, threshold)
        elif actual_positive:
            metrics.false_negatives = 1.0
        else:
            metrics.false_positives = 1.0
        return metrics

    def compute_for_one_variable(self, predicted, actual, threshold):
        """Aggregated metrics for one output variable; pairs with a missing value are ignored."""
        predicted = list(predicted)
        actual = list(actual)
        if len(predicted) != len(actual):
            raise ValueError("predicted and actual values must have the same length")

        metrics = FuzzySystemMetrics()
        sum_dist_below = 0.0
        sum_dist_above = 0.0
        dist_min_below = INFINITY_DOUBLE
        dist_min_above = INFINITY_DOUBLE
        actual_nb = 0

        for pred, act in zip(predicted, actual):
            if is_na(pred) or is_na(act):
                continue
            m = self.compute_for_one_value(pred, act, threshold)
            actual_nb += 1
            metrics += m
            dist = m.distanceThreshold
            if dist >= 0:
                sum_dist_above += distance_min(dist)
                dist_min_above = min(dist_min_above, dist)
            else:
                sum_dist_below += distance_min(-dist)
                dist_min_below = min(dist_min_below, -dist)

        if actual_nb == 0:
            return metrics

        tp = int(metrics.true_positives)
        tn = int(metrics.true_negatives)
        fp = int(metrics.false_positives)
        fn = int(metrics.false_negatives)
        metrics.sensitivity = sensitivity(tp, fn)
        metrics.specificity = specificity(tn, fp)
        metrics.accuracy = accuracy(tp, tn, fp, fn)
        metrics.ppv = ppv(tp, fp)

        metrics.mse = metrics.mse / actual_nb
        metrics.rmse = math.sqrt(metrics.mse)
        metrics.rrse = math.sqrt(metrics.rrse / actual_nb)
        metrics.rae = metrics.rae / actual_nb

        metrics.distanceThreshold = distance_to_threshold_aggregate(
            sum_dist_above, sum_dist_below, tp, tn, fp, fn
        )
        if dist_min_above == INFINITY_DOUBLE:
            dist_min_above = 0.0
        if dist_min_below == INFINITY_DOUBLE:
            dist_min_below = 0.0
        metrics.distanceMinThreshold = (dist_min_above + dist_min_below) / 2
        return metrics