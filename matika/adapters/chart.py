"""
Geometry the plot renderers share: the window of data-space that holds
the points, and where a point of that window lands on a grid of cells
or pixels. Row zero is at the top, as both terminals and pygame have it.
"""
import math
from typing import NamedTuple, Sequence

POINTS = Sequence[tuple[float, float]]

class Window(NamedTuple):
	x_min: float
	x_max: float
	y_min: float
	y_max: float

	def to_grid(self, x:float, y:float, width:int, height:int) -> tuple[int, int]:
		col = round((x - self.x_min) / (self.x_max - self.x_min) * (width - 1))
		row = round((self.y_max - y) / (self.y_max - self.y_min) * (height - 1))
		return col, row

	def column_x(self, col:int, width:int) -> float:
		return self.x_min + (self.x_max - self.x_min) * col / (width - 1)

	def contains_y(self, y:float) -> bool:
		return self.y_min <= y <= self.y_max

	def contains_x(self, x:float) -> bool:
		return self.x_min <= x <= self.x_max

def _spread(lo:float, hi:float) -> tuple[float, float]:
	return (lo - 1, hi + 1) if lo == hi else (lo, hi)

def window_of(points:POINTS) -> Window:
	""" Non-finite ordinates are left out of the window; they cannot be drawn anyway. """
	if not points:
		raise ValueError("Nothing to plot.")
	xs = [x for x, _ in points]
	ys = [y for _, y in points if math.isfinite(y)]
	x_min, x_max = _spread(min(xs), max(xs))
	y_min, y_max = _spread(min(ys), max(ys)) if ys else (-1.0, 1.0)
	return Window(x_min, x_max, y_min, y_max)

def interpolate(points:POINTS, x:float) -> float:
	""" Linear interpolation between the points, which must ascend in x. NaN outside them. """
	for (x0, y0), (x1, y1) in zip(points, points[1:]):
		if x0 <= x <= x1:
			if x1 == x0: return y0
			return y0 + (y1 - y0) * (x - x0) / (x1 - x0)
	if len(points) == 1 and points[0][0] == x:
		return points[0][1]
	return math.nan

def finite_runs(points:POINTS) -> list[list[tuple[float, float]]]:
	""" Split the points wherever an ordinate is NaN or infinite. """
	runs, run = [], []
	for x, y in points:
		if math.isfinite(y):
			run.append((x, y))
		elif run:
			runs.append(run)
			run = []
	if run:
		runs.append(run)
	return runs
