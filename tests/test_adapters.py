import io
import math
import unittest
from types import SimpleNamespace
from unittest import mock

from matika import Session
from matika.adapters.chart import Window, window_of, interpolate, finite_runs
from matika.adapters.teletype_adapter import TextPlotter, draw_chart, console_output

IDENTITY = [(float(x), float(x)) for x in range(-10, 10)]

class ChartTests(unittest.TestCase):

	def test_window_holds_the_points(self):
		self.assertEqual(Window(-10, 9, -10, 9), window_of(IDENTITY))

	def test_flat_data_gets_some_room(self):
		window = window_of([(0.0, 5.0), (1.0, 5.0)])
		self.assertEqual((4.0, 6.0), (window.y_min, window.y_max))

	def test_non_finite_ordinates_stay_out_of_the_window(self):
		window = window_of([(0.0, 1.0), (1.0, math.inf), (2.0, 3.0)])
		self.assertEqual((1.0, 3.0), (window.y_min, window.y_max))

	def test_nothing_to_plot(self):
		with self.assertRaises(ValueError):
			window_of([])

	def test_grid_corners(self):
		window = Window(0, 10, 0, 10)
		self.assertEqual((0, 4), window.to_grid(0, 0, 11, 5))
		self.assertEqual((10, 0), window.to_grid(10, 10, 11, 5))

	def test_interpolate(self):
		points = [(0.0, 0.0), (2.0, 4.0)]
		self.assertEqual(2.0, interpolate(points, 1.0))
		self.assertTrue(math.isnan(interpolate(points, 3.0)))

	def test_finite_runs(self):
		points = [(0.0, 1.0), (1.0, math.nan), (2.0, 2.0), (3.0, 3.0)]
		self.assertEqual([[(0.0, 1.0)], [(2.0, 2.0), (3.0, 3.0)]], finite_runs(points))

class TextPlotterTests(unittest.TestCase):

	def test_chart_of_a_diagonal(self):
		lines = draw_chart(IDENTITY, 20, 20)
		self.assertEqual(21, len(lines))
		for line in lines[:-1]:
			self.assertEqual(1, line.count("*"))
		self.assertEqual("x: -10 .. 9   y: -10 .. 9", lines[-1])

	def test_axes_cross_at_origin(self):
		lines = draw_chart([(-1.0, -1.0), (1.0, 1.0)], 3, 3)
		self.assertEqual([" |*", "-*-", "*|"], lines[:3])

	def test_no_axes_out_of_view(self):
		lines = draw_chart([(1.0, 5.0), (3.0, 5.0)], 3, 3)
		self.assertEqual(["", "***", ""], lines[:3])

	def test_plot_through_a_session(self):
		stream = io.StringIO()
		session = Session(plotter=TextPlotter(stream, width=40, height=10))
		self.assertEqual(0.0, session.evaluate("f(x) = x^2 plot(f)"))
		text = stream.getvalue()
		self.assertEqual(11, len(text.splitlines()))
		self.assertIn("*", text)

	def test_console_output(self):
		with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
			console_output("42")
		self.assertEqual("42\n", out.getvalue())

class WindowPlotterTests(unittest.TestCase):

	def test_draws_and_waits_for_dismissal(self):
		from matika.adapters import pygame_adapter
		quit_event = SimpleNamespace(type=pygame_adapter.pygame.QUIT)
		with mock.patch.object(pygame_adapter, "pygame") as fake, mock.patch.object(pygame_adapter, "draw") as draw:
			fake.event.get.return_value = [quit_event]
			plotter = pygame_adapter.WindowPlotter(size=(200, 100), margin=10)
			plotter(IDENTITY)
		fake.init.assert_called_once_with()
		fake.display.set_mode.assert_called_once_with((200, 100))
		fake.display.flip.assert_called_once_with()
		fake.quit.assert_called_once_with()
		self.assertEqual(2, draw.line.call_count)
		draw.lines.assert_called_once()
		pixels = draw.lines.call_args.args[3]
		self.assertEqual(20, len(pixels))
		self.assertEqual((10, 89), pixels[0])
		self.assertEqual((189, 10), pixels[-1])

if __name__ == '__main__':
	unittest.main()
