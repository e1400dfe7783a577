import logging
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .fuzzyLib import FuzzySet
from .ruleLib import FuzzyRule, RuleEvaluation
from .utilities import DEFAULT_STEP, check_folder, sample_points

"""
Inference Library for aggregating fuzzy rules into a decision or a crisp value
"""

logger = logging.getLogger(__name__)


class Priority(str, Enum):
    URGENT = 'Urgent'
    HIGH = 'High Priority'
    MEDIUM = 'Medium Priority'
    LOW = 'Low Priority'


# anything missing from this table scores 0
PRIORITY_SCORES: Dict[Priority, int] = {
    Priority.URGENT: 3,
    Priority.HIGH: 2,
    Priority.MEDIUM: 1,
    Priority.LOW: 0,
}

# checked in order, first threshold reached wins
PRIORITY_THRESHOLDS: List[Tuple[float, Priority]] = [
    (2.5, Priority.URGENT),
    (1.5, Priority.HIGH),
    (0.5, Priority.MEDIUM),
]

DEFAULT_PRIORITY = Priority.LOW


class InferenceEngine:

    def __init__(self, rules: Sequence[FuzzyRule]):
        """
        Contains all fuzzy rules and the interpreter
        combining their outcomes

        Parameters
        ----------
        rules : Sequence[FuzzyRule]
            ordered FuzzyRule objects
        """

        self.rules = rules

    def evaluate_rules(self, inputs: Any) -> List[RuleEvaluation]:
        """
        Evaluate every rule against the inputs

        Parameters
        ----------
        inputs : Any
            input record handed to each rule

        Returns
        -------
        List[RuleEvaluation]
            evaluations of the matched rules in rule order
        """
        results = []
        for rule in self.rules:
            evaluation = rule.evaluate(inputs)
            if evaluation is not None:
                results.append(evaluation)

        return results

    def infer(self, inputs: Any) -> str:
        """
        Infer a qualitative priority from the rules

        Only rules resolving to a priority label contribute to the score,
        FuzzySet consequences score 0 and belong to the defuzzify methods.

        Parameters
        ----------
        inputs : Any
            input record handed to each rule

        Returns
        -------
        str
            one of 'Urgent', 'High Priority', 'Medium Priority', 'Low Priority'
        """
        return self.aggregate_results(self.evaluate_rules(inputs))

    def aggregate_results(self, results: Sequence[RuleEvaluation]) -> str:
        """
        Weighted mean of the priority scores of matched rules

        Parameters
        ----------
        results : Sequence[RuleEvaluation]
            evaluations of matched rules

        Returns
        -------
        str
            priority label of the weighted mean score,
            'Low Priority' if nothing matched or the total weight is not positive
        """
        if len(results) == 0:
            logger.debug('no rule matched, defaulting to %s', DEFAULT_PRIORITY.value)
            return DEFAULT_PRIORITY.value

        total_weight = 0
        weighted_sum = 0
        for result, weight in results:
            weighted_sum += self.priority_mapping(result) * weight
            total_weight += weight

        if not total_weight > 0:
            logger.debug('total weight %s of matched rules is not positive', total_weight)
            return DEFAULT_PRIORITY.value

        score = weighted_sum / total_weight
        label = self.reverse_priority_mapping(score)
        logger.debug('weighted priority score %.3f -> %s', score, label)

        return label

    @staticmethod
    def priority_mapping(priority: Any) -> int:
        """
        Score a rule result, unknown values score 0

        Parameters
        ----------
        priority : Any
            result of a matched rule

        Returns
        -------
        int
            ordinal score of the priority
        """
        if isinstance(priority, str):
            try:
                return PRIORITY_SCORES[Priority(priority)]
            except ValueError:
                pass

        logger.debug('unrecognised priority %r scored as 0', priority)
        return 0

    @staticmethod
    def reverse_priority_mapping(score: float) -> str:
        """
        Map a priority score back to its label

        Parameters
        ----------
        score : float
            weighted mean score

        Returns
        -------
        str
            priority label
        """
        for threshold, priority in PRIORITY_THRESHOLDS:
            if score >= threshold:
                return priority.value

        return DEFAULT_PRIORITY.value

    def get_fuzzy_set_consequences(self) -> List[FuzzySet]:
        """
        Consequences of the rules that are FuzzySet objects

        Rules whose consequence is a function are left out,
        whatever that function would return.

        Returns
        -------
        List[FuzzySet]
            fuzzy sets in rule order
        """
        return [rule.consequence for rule in self.rules if isinstance(rule.consequence, FuzzySet)]

    def aggregate(self, lb: float, ub: float, step: float = DEFAULT_STEP) -> Tuple[List[float], List[float]]:
        """
        Aggregate membership of all FuzzySet consequences

        Takes the maximum membership across all sets at every
        sample of the domain (Mamdani aggregation).

        Parameters
        ----------
        lb : float
            lower bound of the domain
        ub : float
            upper bound of the domain
        step : float, optional
            sampling step, by default 0.01

        Returns
        -------
        xs : List[float]
            samples of the domain
        mus : List[float]
            aggregate membership at each sample
        """
        fuzzy_sets = self.get_fuzzy_set_consequences()

        xs = []
        mus = []
        for x in sample_points(lb, ub, step):
            mu = 0
            for fuzzy_set in fuzzy_sets:
                mu = max(mu, fuzzy_set.membership_function(x))
            xs.append(x)
            mus.append(mu)

        return xs, mus

    def defuzzify_centroid(self, lb: float, ub: float, step: float = DEFAULT_STEP) -> float:
        """
        Defuzzify the aggregate membership using the centroid method

        Parameters
        ----------
        lb : float
            lower bound of the domain
        ub : float
            upper bound of the domain
        step : float, optional
            sampling step, by default 0.01

        Returns
        -------
        float
            center of mass of the aggregate, 0 if it has no mass
        """
        num = 0.0
        den = 0.0
        for x, mu in zip(*self.aggregate(lb, ub, step)):
            num += x * mu
            den += mu

        if den == 0:
            logger.debug('aggregate membership over [%s, %s] has no mass', lb, ub)
            return 0

        output = num / den
        logger.debug('centroid over [%s, %s]: %s', lb, ub, output)

        return output

    def defuzzify_mom(self, lb: float, ub: float, step: float = DEFAULT_STEP) -> float:
        """
        Defuzzify the aggregate membership using the mean of maxima

        Single pass over the domain: a strictly greater membership restarts
        the mean at that sample, a membership exactly equal to the running
        maximum joins the mean. The running maximum starts at 0.

        Parameters
        ----------
        lb : float
            lower bound of the domain
        ub : float
            upper bound of the domain
        step : float, optional
            sampling step, by default 0.01

        Returns
        -------
        float
            mean of the samples at the running maximum, 0 if the domain is empty
        """
        max_mu = 0
        sum_x = 0.0
        count = 0
        for x, mu in zip(*self.aggregate(lb, ub, step)):
            if mu > max_mu:
                max_mu = mu
                sum_x = x
                count = 1
            elif mu == max_mu:
                sum_x += x
                count += 1

        if count == 0:
            return 0

        output = sum_x / count
        logger.debug('mean of maxima over [%s, %s]: %s (max %s)', lb, ub, output, max_mu)

        return output

    def defuzzify_bisector(self, lb: float, ub: float, step: float = DEFAULT_STEP) -> float:
        """
        Defuzzify the aggregate membership using the bisector method

        Parameters
        ----------
        lb : float
            lower bound of the domain
        ub : float
            upper bound of the domain
        step : float, optional
            sampling step, by default 0.01

        Returns
        -------
        float
            first sample at which the area to its left reaches half
            of the total area, `lb` if it is never reached
        """
        xs, mus = self.aggregate(lb, ub, step)

        total_area = 0.0
        for mu in mus:
            total_area += mu * step

        bisector = lb
        left_area = 0.0
        for x, mu in zip(xs, mus):
            left_area += mu * step
            if left_area >= total_area / 2:
                bisector = x
                break

        logger.debug('bisector over [%s, %s]: %s', lb, ub, bisector)

        return bisector

    def view(self, lb: float, ub: float, step: float = DEFAULT_STEP, folder: str = '',
             file: str = None, img_format: str = 'pdf'):
        """
        View the aggregate membership function and its defuzzified values

        Parameters
        ----------
        lb : float
            lower bound of the domain
        ub : float
            upper bound of the domain
        step : float, optional
            sampling step, by default 0.01
        folder : str, optional
            folder in which to store image, by default ''
        file : str, optional
            name of image file, if not provided then an image is not saved, by default None
        img_format : str, optional
            format of the image to be stored, by default 'pdf'
        """

        xs, mus = self.aggregate(lb, ub, step)
        universe = np.array(xs)
        aggregate = np.array(mus, dtype=float)

        fig, ax = plt.subplots(figsize=(8, 3))

        ax.fill_between(universe, np.zeros_like(aggregate), aggregate, facecolor='Orange', alpha=0.7)

        outputs = [
            ('centroid', self.defuzzify_centroid(lb, ub, step), 'k'),
            ('mom', self.defuzzify_mom(lb, ub, step), 'b'),
            ('bisector', self.defuzzify_bisector(lb, ub, step), 'g'),
        ]
        for name, value, color in outputs:
            ax.axvline(value, color=color, linewidth=1.5, alpha=0.9, label=name)

        ax.set_title('Aggregated membership and defuzzified values (lines)')
        ax.set_ylabel('membership')
        ax.legend()

        if file is not None:
            check_folder('images/%s' % folder)
            fig.savefig('images/%s/%s.%s' % (folder, file, img_format),
                        format=img_format, dpi=200, bbox_inches='tight')

        plt.show()
