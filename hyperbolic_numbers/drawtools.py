"""This submodule provides an interface between
`hyperbolic_numbers.split_complex` and [matplotlib](https://matplotlib.org/).

To create a matplotlib figure, instantiate `HyperbolicNumberDrawing`
and use the provided methods to add hyperbolic numbers to the
drawing. Numbers are drawn as points in the Minkowski plane, with the
real part on the horizontal axis and the hyperbolic part on the
vertical axis.

```python
from hyperbolic_numbers import drawtools
from hyperbolic_numbers.split_complex import HyperbolicNumber, hy

drawing = drawtools.HyperbolicNumberDrawing()
drawing.draw_light_cone()
drawing.draw_number(HyperbolicNumber(2.0, 1.0), color="royalblue")
drawing.draw_numbers([3 + hy, 1 + 3 * hy])

drawing.show()
```

    """

import numpy as np

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from hyperbolic_numbers.split_complex import HyperbolicNumber

REAL_LABEL = "a (real part)"
HYPERBOLIC_LABEL = "b (hyperbolic part)"

DEFAULT_LIMITS = (-5., 5.)

#when drawing the light cone, how far offscreen we draw it (as a % of
#the width/height)
OFFSCREEN_FACTOR = 0.1

class DrawingError(Exception):
    """Thrown if we try and draw an object which isn't a hyperbolic
    number.

    """
    pass

class HyperbolicNumberDrawing:
    def __init__(self, figsize=8,
                 ax=None,
                 fig=None,
                 xlim=DEFAULT_LIMITS,
                 ylim=DEFAULT_LIMITS):

        if ax is None or fig is None:
            fig, ax = plt.subplots(figsize=(figsize, figsize))

        self.xlim, self.ylim = xlim, ylim

        self.width = self.xlim[1] - self.xlim[0]
        self.height = self.ylim[1] - self.ylim[0]

        self.ax, self.fig = ax, fig

        self.ax.set_aspect("equal")
        self.ax.set_xlim(self.xlim)
        self.ax.set_ylim(self.ylim)
        self.ax.set_xlabel(REAL_LABEL)
        self.ax.set_ylabel(HYPERBOLIC_LABEL)

    def draw_number(self, number, **kwargs):
        return self.draw_numbers([number], **kwargs)

    def draw_numbers(self, numbers, **kwargs):
        """Draw a scatter plot of some hyperbolic numbers.

        Keyword arguments are passed on to matplotlib's `scatter`,
        overriding the default style.

        """
        coords = []
        for number in numbers:
            if not isinstance(number, HyperbolicNumber):
                raise DrawingError(
                    "Cannot draw an object of type {}".format(
                        type(number).__name__)
                )
            coords.append(number.visualize())

        default_kwargs = {
            "color": "black",
            "marker": "o"
        }
        for key, value in kwargs.items():
            default_kwargs[key] = value

        x, y = np.array(coords, dtype=float).reshape(-1, 2).T
        return self.ax.scatter(x, y, **default_kwargs)

    def draw_light_cone(self, **kwargs):
        """Draw the lightlike lines `b = a` and `b = -a`, which separate
        the timelike and spacelike numbers.

        """
        default_kwargs = {
            "color": "lightgray",
            "linewidth": 1,
            "linestyle": "dashed",
            "zorder": 0
        }
        for key, value in kwargs.items():
            default_kwargs[key] = value

        reach = (1 + OFFSCREEN_FACTOR) * max(
            np.abs(self.xlim).max(), np.abs(self.ylim).max()
        )
        lines = LineCollection([[(-reach, -reach), (reach, reach)],
                                [(-reach, reach), (reach, -reach)]],
                               **default_kwargs)
        self.ax.add_collection(lines)
        return lines

    def show(self):
        plt.show()
