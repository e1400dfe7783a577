"""
Fuzzy Inference System Library
------------------------------

A small library for rule based decisions using fuzzy
sets, weighted fuzzy rules and an inference engine
with several defuzzification methods

"""

__version__ = '0.1.0'
__all__ = ['FuzzySet', 'triangular', 'trapezoidal', 'gaussian', 'FuzzyRule', 'RuleEvaluation', 'InferenceEngine',
           'Priority', 'PRIORITY_SCORES', 'PRIORITY_THRESHOLDS', 'DEFAULT_PRIORITY', 'DEFAULT_STEP',
           'sample_points', 'check_folder']

from .fuzzyLib import FuzzySet, triangular, trapezoidal, gaussian
from .ruleLib import FuzzyRule, RuleEvaluation
from .inferenceLib import InferenceEngine, Priority, PRIORITY_SCORES, PRIORITY_THRESHOLDS, DEFAULT_PRIORITY
from .utilities import DEFAULT_STEP, sample_points, check_folder
