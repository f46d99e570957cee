from hyperbolic_numbers import drawtools
from hyperbolic_numbers.split_complex import HyperbolicNumber, hy

# a few numbers on the unit hyperbola a^2 - b^2 = 1
rapidities = [-1.5, -0.75, 0., 0.75, 1.5]
hyperbola = [HyperbolicNumber.from_rapidity(theta) for theta in rapidities]

# multiplying by a timelike number rotates (boosts) and scales
boost = 2 * HyperbolicNumber.from_rapidity(0.5)
boosted = [boost * z for z in hyperbola]

fig = drawtools.HyperbolicNumberDrawing()
fig.draw_light_cone()
fig.draw_numbers(hyperbola, color="royalblue")
fig.draw_numbers(boosted, color="firebrick")
fig.draw_number(1 + 3 * hy, color="seagreen", marker="s")

fig.show()
