import pytest
import numpy as np
import matplotlib.pyplot as plt

from hyperbolic_numbers import drawtools
from hyperbolic_numbers.drawtools import DrawingError
from hyperbolic_numbers.split_complex import HyperbolicNumber, hy


@pytest.fixture
def figure():
    drawing = drawtools.HyperbolicNumberDrawing()
    yield drawing
    plt.close(drawing.fig)

@pytest.fixture
def numbers():
    return [HyperbolicNumber(2.0, 1.0), 3 - hy, HyperbolicNumber(1, 1)]

def test_axis_labels(figure):
    assert figure.ax.get_xlabel() == drawtools.REAL_LABEL
    assert figure.ax.get_ylabel() == drawtools.HYPERBOLIC_LABEL
    assert figure.ax.get_xlim() == drawtools.DEFAULT_LIMITS

def test_draw_number(figure):
    z = HyperbolicNumber(2.0, 1.0)
    points = figure.draw_number(z, color="royalblue")

    assert np.allclose(points.get_offsets(), [z.visualize()])

def test_draw_numbers(figure, numbers):
    points = figure.draw_numbers(numbers)

    assert np.allclose(points.get_offsets(),
                       [z.visualize() for z in numbers])

def test_draw_light_cone(figure):
    lines = figure.draw_light_cone(color="red")
    segments = lines.get_segments()

    assert len(segments) == 2
    for segment in segments:
        a, b = segment[1]
        assert HyperbolicNumber(a, b).is_lightlike()

def test_wrong_type(figure):
    with pytest.raises(DrawingError):
        figure.draw_number((2.0, 1.0))

    with pytest.raises(DrawingError):
        figure.draw_numbers([hy, 3.0])

def test_existing_axes():
    fig, ax = plt.subplots()
    drawing = drawtools.HyperbolicNumberDrawing(ax=ax, fig=fig,
                                                xlim=(-1., 1.),
                                                ylim=(-2., 2.))
    assert drawing.ax is ax
    assert drawing.width == 2.
    assert drawing.height == 4.
    plt.close(fig)
