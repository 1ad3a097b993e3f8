"""
The console as collaborator: an output sink for print statements,
and a plot renderer that draws with characters.
"""
import sys
import math
from typing import Optional, TextIO
from ..tree_walker.runtime import render_number
from .chart import POINTS, window_of, interpolate

def console_output(text:str):
	sys.stdout.write(text + "\n")
	sys.stdout.flush()

class TextPlotter:
	""" Draws the sampled curve as a grid of characters, with axes where zero is in view. """
	def __init__(self, stream:Optional[TextIO]=None, width:int=60, height:int=20):
		assert width > 1 and height > 1
		self._stream = stream
		self.width, self.height = width, height

	def __call__(self, points:POINTS):
		stream = self._stream or sys.stdout
		for line in draw_chart(points, self.width, self.height):
			stream.write(line + "\n")
		stream.flush()

def draw_chart(points:POINTS, width:int, height:int) -> list[str]:
	window = window_of(points)
	grid = [[" "] * width for _ in range(height)]
	if window.contains_y(0.0):
		_, row = window.to_grid(window.x_min, 0.0, width, height)
		grid[row] = ["-"] * width
	if window.contains_x(0.0):
		col, _ = window.to_grid(0.0, window.y_min, width, height)
		for cells in grid:
			cells[col] = "+" if cells[col] == "-" else "|"
	for col in range(width):
		x = window.column_x(col, width)
		y = interpolate(points, x)
		if math.isfinite(y):
			_, row = window.to_grid(x, y, width, height)
			grid[row][col] = "*"
	lines = ["".join(cells).rstrip() for cells in grid]
	lines.append("x: %s .. %s   y: %s .. %s" % tuple(map(render_number, window)))
	return lines
