import logging
from typing import Any, Callable, NamedTuple, Optional, Union

from .fuzzyLib import FuzzySet

"""
Rule Library for weighted conditional fuzzy rules
"""

logger = logging.getLogger(__name__)

Condition = Callable[[Any], bool]
Consequence = Union[FuzzySet, Callable[[Any], Any]]


class RuleEvaluation(NamedTuple):
    """Outcome of a matched rule"""
    result: Any
    weight: float


class FuzzyRule:
    def __init__(self, condition: Condition, consequence: Consequence,
                 weight: float = 1, label: str = ''):
        """
        Connects a condition on the inputs to a consequence

        Parameters
        ----------
        condition : Callable[[Any], bool]
            predicate over the input record
        consequence : Union[FuzzySet, Callable[[Any], Any]]
            either a fixed FuzzySet, or a function of the input record
            returning a FuzzySet, a priority label or any other value
        weight : float, optional
            weight of the rule when aggregating, by default 1
        label : str, optional
            string to tag instance with
        """

        self.condition = condition
        self.consequence = consequence
        self.weight = weight
        self.label = label

    def evaluate(self, inputs: Any) -> Optional[RuleEvaluation]:
        """
        Apply rule on the inputs

        Exceptions raised by the condition or the consequence
        propagate to the caller.

        Parameters
        ----------
        inputs : Any
            input record handed to the condition and the consequence

        Returns
        -------
        Optional[RuleEvaluation]
            resolved consequence paired with the rule weight,
            None if the condition does not hold
        """

        if not self.condition(inputs):
            return None

        if isinstance(self.consequence, FuzzySet):
            result = self.consequence
        else:
            result = self.consequence(inputs)

        logger.debug('rule %r matched with weight %s', self.label, self.weight)

        return RuleEvaluation(result, self.weight)
