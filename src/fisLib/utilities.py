""" Useful utility functions """

import os
from typing import Iterator

DEFAULT_STEP = 0.01


def check_folder(folder='images/'):
    """
    check if folder exists, make if not present

    Parameters
    ----------
    folder : str, optional
        name of directory to check, by default 'images/'
    """
    if not os.path.exists(folder):
        os.makedirs(folder)


def sample_points(lb: float, ub: float, step: float = DEFAULT_STEP) -> Iterator[float]:
    """
    Walk the sampling grid used by every defuzzifier

    The grid is built by repeated addition of `step` starting from `lb`,
    so floating point error accumulates and the last sample may fall
    short of `ub` by a fraction of a step.

    Parameters
    ----------
    lb : float
        first sample of the grid
    ub : float
        inclusive upper limit of the grid
    step : float, optional
        spacing between samples, by default 0.01

    Yields
    ------
    float
        the next sample of the grid

    Raises
    ------
    ValueError
        if `step` is not strictly positive
    """
    if not step > 0:
        raise ValueError('step must be strictly positive, got %s' % str(step))

    x = lb
    while x <= ub:
        yield x
        x += step
