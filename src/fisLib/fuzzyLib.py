from typing import Callable, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np
import skfuzzy as fuzz

from .utilities import DEFAULT_STEP, check_folder, sample_points

"""
Fuzzy Library for describing fuzzy sets through their membership functions
"""

MembershipFunction = Callable[[float], float]


def triangular(a: float, b: float, c: float) -> MembershipFunction:
    """
    Create a triangular membership function

    Parameters
    ----------
    a : float
        left foot of triangle
    b : float
        peak of triangle
    c : float
        right foot of triangle

    Returns
    -------
    Callable[[float], float]
        membership function of a single value
    """

    def func(x: float) -> float:
        return float(fuzz.trimf(np.atleast_1d(np.asarray(x, dtype=float)), [a, b, c])[0])

    return func


def trapezoidal(a: float, b: float, c: float, d: float) -> MembershipFunction:
    """
    Create a trapezoidal membership function

    Parameters
    ----------
    a : float
        left foot of trapezoid
    b : float
        left shoulder of trapezoid
    c : float
        right shoulder of trapezoid
    d : float
        right foot of trapezoid

    Returns
    -------
    Callable[[float], float]
        membership function of a single value
    """

    def func(x: float) -> float:
        return float(fuzz.trapmf(np.atleast_1d(np.asarray(x, dtype=float)), [a, b, c, d])[0])

    return func


def gaussian(mean: float, sigma: float) -> MembershipFunction:
    """Create a gaussian membership function centred on `mean`"""

    def func(x: float) -> float:
        return float(fuzz.gaussmf(np.atleast_1d(np.asarray(x, dtype=float)), mean, sigma)[0])

    return func


class FuzzySet:

    def __init__(self, name: str, membership_function: MembershipFunction):
        """
        A named fuzzy set described by a membership function

        Parameters
        ----------
        name : str
            descriptive label of the set, need not be unique
        membership_function : Callable[[float], float]
            pure function mapping a value to its degree of membership,
            expected in [0, 1] but not enforced

        Raises
        ------
        TypeError
            if `membership_function` is not callable
        """

        if not callable(membership_function):
            raise TypeError('membership function of %s must be callable, got %s'
                            % (name, type(membership_function).__name__))

        self.name = name
        self.membership_function = membership_function

    def membership_degree(self, x: float) -> float:
        """
        Interpret membership of input

        Parameters
        ----------
        x : float
            value at which membership is to be interpreted

        Returns
        -------
        float
            degree of membership of `x`
        """
        return self.membership_function(x)

    def union(self, other: 'FuzzySet') -> 'FuzzySet':
        """Fuzzy OR: pointwise maximum of both membership functions"""
        f, g = self.membership_function, other.membership_function
        return FuzzySet('Union(%s, %s)' % (self.name, other.name), lambda x: max(f(x), g(x)))

    def intersection(self, other: 'FuzzySet') -> 'FuzzySet':
        """Fuzzy AND: pointwise minimum of both membership functions"""
        f, g = self.membership_function, other.membership_function
        return FuzzySet('Intersection(%s, %s)' % (self.name, other.name), lambda x: min(f(x), g(x)))

    def complement(self) -> 'FuzzySet':
        """Fuzzy NOT: 1 - mu(x), no clamping is applied"""
        f = self.membership_function
        return FuzzySet('Complement(%s)' % self.name, lambda x: 1 - f(x))

    def normalize(self) -> 'FuzzySet':
        """
        Cap membership at 1

        Computes mu(x) / max(1, mu(x)). Degrees above 1 become exactly 1,
        the curve is not rescaled against its peak.

        Returns
        -------
        FuzzySet
            new set with the capped membership function
        """
        f = self.membership_function
        return FuzzySet('Normalized(%s)' % self.name, lambda x: f(x) / max(1, f(x)))

    def centroid(self, lb: float, ub: float, step: float = DEFAULT_STEP) -> float:
        """
        Defuzzify the set using the centroid method

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
            center of mass of the membership function,
            0 if the membership is zero over the whole domain
        """
        num = 0.0
        den = 0.0
        for x in sample_points(lb, ub, step):
            mu = self.membership_function(x)
            num += x * mu
            den += mu

        return 0 if den == 0 else num / den

    def sample(self, universe: Union[Sequence[float], np.ndarray]) -> np.ndarray:
        """
        Sample an array of values from membership function

        Parameters
        ----------
        universe : Union[Sequence[float], np.ndarray]
            1d array of values to interpret

        Returns
        -------
        np.ndarray
            1d array of length universe
        """
        universe = np.asarray(universe, dtype=float)
        return np.array([self.membership_function(x) for x in universe], dtype=float)

    def view(self, lb: float, ub: float, step: float = DEFAULT_STEP, folder: str = '',
             file: str = None, img_format: str = 'pdf'):
        """
        Used to view the membership function over a domain

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

        universe = np.array(list(sample_points(lb, ub, step)))

        fig, ax = plt.subplots(nrows=1, figsize=(8, 3))

        ax.plot(universe, self.sample(universe), 'b', linewidth=1.5, label=self.name)
        ax.set_title(self.name)
        ax.set_ylabel('membership')
        ax.legend()

        ax.spines['top'].set_visible(False)
        ax.spines['right'].set_visible(False)
        ax.get_xaxis().tick_bottom()
        ax.get_yaxis().tick_left()

        plt.tight_layout()

        if file is not None:
            check_folder('images/%s' % folder)
            fig.savefig('images/%s/%s.%s' % (folder, file, img_format),
                        format=img_format, dpi=200, bbox_inches='tight')

        plt.show()
