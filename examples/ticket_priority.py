import logging

from fisLib import FuzzySet, FuzzyRule, InferenceEngine, triangular, trapezoidal

logging.basicConfig(level=logging.DEBUG, format='%(name)s - %(levelname)s - %(message)s')

# Generate fuzzy sets on a 0 - 10 severity universe
lb = 0.0
ub = 10.0

low = FuzzySet('Low', trapezoidal(0.0, 0.0, 2.0, 4.0))
medium = FuzzySet('Medium', triangular(2.0, 5.0, 8.0))
high = FuzzySet('High', trapezoidal(6.0, 8.0, 10.0, 10.0))

# Define fuzzy rules on tickets of structure {'urgency': float, 'complexity': float}
rules = [
    FuzzyRule(lambda d: d['urgency'] > 7 and d['complexity'] > 7, high, weight=2, label='severe'),
    FuzzyRule(lambda d: d['urgency'] > 4, medium, label='pressing'),
    FuzzyRule(lambda d: d['urgency'] <= 4, low, label='calm'),
    FuzzyRule(lambda d: d['urgency'] > 7, lambda d: 'Urgent', weight=2, label='deadline'),
    FuzzyRule(lambda d: d['urgency'] > 5, lambda d: 'High Priority', label='soon'),
    FuzzyRule(lambda d: d['complexity'] > 5,
              lambda d: 'High Priority' if d['urgency'] > 5 else 'Medium Priority', label='hard'),
]

engine = InferenceEngine(rules)

tickets = [
    {'urgency': 9, 'complexity': 8},
    {'urgency': 8, 'complexity': 6},
    {'urgency': 3, 'complexity': 7},
    {'urgency': 1, 'complexity': 1},
]

for ticket in tickets:
    print('%s -> %s' % (ticket, engine.infer(ticket)))

# Defuzzify the aggregate of all fuzzy set consequences
print('centroid: %.3f' % engine.defuzzify_centroid(lb, ub))
print('mean of maxima: %.3f' % engine.defuzzify_mom(lb, ub))
print('bisector: %.3f' % engine.defuzzify_bisector(lb, ub))

# Combine fuzzy sets
not_low = low.complement()
moderate = medium.intersection(not_low)
print('%s centroid: %.3f' % (moderate.name, moderate.centroid(lb, ub)))

medium.union(high).view(lb, ub)
engine.view(lb, ub, file='ticket_priority')
