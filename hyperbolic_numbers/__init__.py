r"""
hyperbolic_numbers
==================

`hyperbolic_numbers` is a small Python package for computing with *hyperbolic numbers* (also known as split-complex, perplex or double numbers): numbers of the form `a + b*h`, where the hyperbolic unit `h` satisfies `h^2 = 1`.

The package is built on top of [numpy](https://numpy.org) and [matplotlib](https://matplotlib.org), and provides modules to:

- do exact or floating-point arithmetic with hyperbolic numbers, including inverses and division (away from the zero divisors)

- classify hyperbolic numbers as timelike, spacelike or lightlike vectors in the Minkowski plane, and compute their Lorentzian inner products and hyperbolic angles

- evaluate the exponential and hyperbolic trigonometric functions

- draw hyperbolic numbers in the Minkowski plane

## Example usage

```python
from hyperbolic_numbers import HyperbolicNumber, hy, drawtools

z = HyperbolicNumber(3.0, 1.0)
w = 2.0 - hy

print(z * w)                  # 5.0 - 1.0h
print(z.is_timelike())        # True
print(z.hyperbolic_angle())   # 0.34657...

figure = drawtools.HyperbolicNumberDrawing()
figure.draw_light_cone()
figure.draw_numbers([z, w, z * w])

figure.show()
```
"""

from .base import InvertibilityError, DomainError
from .split_complex import HyperbolicNumber, hy
