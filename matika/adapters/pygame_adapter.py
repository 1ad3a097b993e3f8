"""
Plot renderer that draws the sampled curve in a pygame window.

The window blocks until dismissed by a key, a click, or closing it,
since the interpreter has nothing else to do in the meantime.
"""
import os
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"
import pygame
from pygame import draw

from .chart import POINTS, Window, window_of, finite_runs

BACKGROUND = (255, 255, 255)
AXIS = (160, 160, 160)
CURVE = (30, 60, 200)
DISMISS = (pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONUP)

class WindowPlotter:
	def __init__(self, size=(640, 480), margin=30, fps=30):
		self.size = size
		self.margin = margin
		self.fps = fps

	def __call__(self, points:POINTS):
		window = window_of(points)
		pygame.init()
		try:
			display = pygame.display.set_mode(self.size)
			pygame.display.set_caption("Matika: plot")
			display.fill(BACKGROUND)
			self._axes(display, window)
			self._curve(display, window, points)
			pygame.display.flip()
			self._wait()
		finally:
			pygame.quit()

	def _to_screen(self, window:Window, x:float, y:float) -> tuple[int, int]:
		width, height = self.size
		col, row = window.to_grid(x, y, width - 2*self.margin, height - 2*self.margin)
		return col + self.margin, row + self.margin

	def _axes(self, display, window:Window):
		if window.contains_y(0.0):
			draw.line(display, AXIS, self._to_screen(window, window.x_min, 0.0), self._to_screen(window, window.x_max, 0.0))
		if window.contains_x(0.0):
			draw.line(display, AXIS, self._to_screen(window, 0.0, window.y_min), self._to_screen(window, 0.0, window.y_max))

	def _curve(self, display, window:Window, points:POINTS):
		for run in finite_runs(points):
			pixels = [self._to_screen(window, x, y) for x, y in run]
			if len(pixels) > 1:
				draw.lines(display, CURVE, False, pixels, width=2)
			for xy in pixels:
				draw.circle(display, CURVE, xy, 3)

	def _wait(self):
		clock = pygame.time.Clock()
		while True:
			for event in pygame.event.get():
				if event.type in DISMISS:
					return
			clock.tick(self.fps)
