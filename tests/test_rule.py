import pytest

from fisLib import FuzzySet, FuzzyRule, RuleEvaluation, triangular

# Fuzzy set used as a fixed consequence
@pytest.fixture
def urgent_set():
    return FuzzySet('Urgent', triangular(7.0, 10.0, 13.0))

# Ticket with high urgency
@pytest.fixture
def ticket():
    return {'urgency': 8, 'complexity': 6}


def test_rule_no_match(urgent_set, ticket):
    """ a false condition yields no evaluation """

    rule = FuzzyRule(lambda d: d['urgency'] > 9, urgent_set)
    assert rule.evaluate(ticket) is None

    # falsy values count as no match
    rule = FuzzyRule(lambda d: 0, lambda d: 'Urgent')
    assert rule.evaluate(ticket) is None

def test_rule_fuzzy_set_consequence(urgent_set, ticket):
    """ a FuzzySet consequence is returned as is """

    rule = FuzzyRule(lambda d: d['urgency'] > 5, urgent_set, weight=2.5)
    evaluation = rule.evaluate(ticket)

    assert isinstance(evaluation, RuleEvaluation)
    assert evaluation.result is urgent_set
    assert evaluation.weight == 2.5

def test_rule_function_consequence(urgent_set, ticket):
    """ a function consequence is called with the inputs """

    seen = []

    def consequence(inputs):
        seen.append(inputs)
        return 'High Priority' if inputs['complexity'] > 5 else 'Low Priority'

    rule = FuzzyRule(lambda d: True, consequence)
    result, weight = rule.evaluate(ticket)

    assert result == 'High Priority'
    assert weight == 1
    assert seen == [ticket]

    # dynamic consequences may return any value
    rule = FuzzyRule(lambda d: True, lambda d: urgent_set)
    assert rule.evaluate(ticket).result is urgent_set

    rule = FuzzyRule(lambda d: True, lambda d: 42)
    assert rule.evaluate(ticket).result == 42

def test_rule_weight_not_validated(ticket):
    """ weights are stored as given """

    rule = FuzzyRule(lambda d: True, lambda d: 'Urgent', weight=-1)
    assert rule.evaluate(ticket).weight == -1

def test_rule_errors_propagate(urgent_set, ticket):
    """ failures in condition or consequence reach the caller """

    rule = FuzzyRule(lambda d: d['missing'] > 0, urgent_set)
    with pytest.raises(KeyError):
        rule.evaluate(ticket)

    def consequence(inputs):
        raise RuntimeError('no label')

    rule = FuzzyRule(lambda d: True, consequence)
    with pytest.raises(RuntimeError):
        rule.evaluate(ticket)

def test_rule_is_stateless(urgent_set, ticket):
    """ evaluating a rule does not change it """

    rule = FuzzyRule(lambda d: d['urgency'] > 5, urgent_set, weight=3, label='urgent')

    first = rule.evaluate(ticket)
    second = rule.evaluate(ticket)

    assert first == second
    assert rule.consequence is urgent_set
    assert rule.weight == 3
    assert rule.label == 'urgent'
