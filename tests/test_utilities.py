import os

import pytest

from fisLib import sample_points, check_folder


def test_sample_points():
    """ samples accumulate the step from the lower bound """

    points = list(sample_points(0.0, 1.0, 0.25))
    assert points == [0.0, 0.25, 0.5, 0.75, 1.0]

    # accumulated error drops the last sample (0.1 * 3 > 0.3)
    assert list(sample_points(0.0, 0.3, 0.1)) == [0.0, 0.1, 0.2]

    points = list(sample_points(0, 10, 0.01))
    assert points[0] == 0
    assert all(x <= 10 for x in points)
    assert len(points) in (1000, 1001)

def test_sample_points_empty():
    """ inverted domain yields nothing """

    assert list(sample_points(1.0, 0.0, 0.1)) == []
    assert list(sample_points(2.0, 2.0, 0.1)) == [2.0]

def test_sample_points_invalid_step():
    """ a non positive step would never terminate """

    with pytest.raises(ValueError):
        list(sample_points(0.0, 1.0, 0.0))

def test_check_folder(tmp_path):
    """ missing folders are created """

    folder = os.path.join(str(tmp_path), 'images', 'nested')
    check_folder(folder)
    assert os.path.isdir(folder)

    # existing folder is left alone
    check_folder(folder)
    assert os.path.isdir(folder)
