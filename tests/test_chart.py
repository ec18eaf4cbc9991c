from __future__ import annotations

import math
import unittest

from brailleplot import (
    Bars,
    Chart,
    ChartSizeError,
    Continuous,
    Lines,
    PixelColor,
    Points,
    RangeMode,
    Steps,
)


def _set_dots(chart: Chart) -> set[tuple[int, int]]:
    return {
        (x, y)
        for x in range(chart.width + 1)
        for y in range(chart.height + 1)
        if chart.canvas.get(x, y)
    }


class ChartConstructionTests(unittest.TestCase):
    def test_size_floor_is_enforced(self) -> None:
        with self.assertRaises(ChartSizeError):
            Chart(31, 64, 0.0, 1.0)
        with self.assertRaises(ValueError):
            Chart(64, 31, 0.0, 1.0)
        Chart(32, 32, 0.0, 1.0)

    def test_auto_range_starts_empty(self) -> None:
        chart = Chart(64, 32, 0.0, 10.0)
        self.assertIs(chart.range_mode, RangeMode.AUTO)
        self.assertEqual(chart.ymin, math.inf)
        self.assertEqual(chart.ymax, -math.inf)

    def test_default_chart(self) -> None:
        chart = Chart.default()
        self.assertEqual((chart.width, chart.height, chart.xmin, chart.xmax), (120, 60, -10.0, 10.0))

    def test_fixed_range_is_never_recomputed(self) -> None:
        chart = Chart.with_y_range(64, 32, 0.0, 10.0, -1.0, 1.0)
        chart.lineplot(Lines([(0.0, 50.0), (5.0, -50.0)]))
        self.assertIs(chart.range_mode, RangeMode.FIXED)
        self.assertEqual((chart.ymin, chart.ymax), (-1.0, 1.0))


class ChartRangingTests(unittest.TestCase):
    def test_discrete_extent_ignores_samples_outside_x_domain(self) -> None:
        chart = Chart(64, 32, 0.0, 10.0)
        chart.lineplot(Lines([(0.0, 1.0), (5.0, -2.0), (20.0, 100.0), (3.0, math.nan)]))
        self.assertEqual((chart.ymin, chart.ymax), (-2.0, 1.0))

    def test_registration_only_widens(self) -> None:
        chart = Chart(64, 32, 0.0, 10.0)
        chart.lineplot(Points([(1.0, -2.0), (2.0, 4.0)]))
        chart.lineplot(Points([(1.0, 0.0), (2.0, 1.0)]))
        self.assertEqual((chart.ymin, chart.ymax), (-2.0, 4.0))
        chart.lineplot(Points([(1.0, 9.0)]))
        self.assertEqual((chart.ymin, chart.ymax), (-2.0, 9.0))

    def test_registration_order_does_not_matter(self) -> None:
        a = Lines([(0.0, 3.0), (1.0, 7.0)])
        b = Steps([(0.0, -4.0), (1.0, 2.0)])
        first = Chart(64, 32, 0.0, 1.0).lineplot(a).lineplot(b)
        second = Chart(64, 32, 0.0, 1.0).lineplot(b).lineplot(a)
        self.assertEqual((first.ymin, first.ymax), (second.ymin, second.ymax))
        self.assertEqual((first.ymin, first.ymax), (-4.0, 7.0))

    def test_shape_without_samples_in_domain_contributes_zero(self) -> None:
        chart = Chart(64, 32, 0.0, 1.0).lineplot(Lines([(5.0, 3.0)]))
        self.assertEqual((chart.ymin, chart.ymax), (0.0, 0.0))

    def test_continuous_extent_skips_zero_and_non_finite_values(self) -> None:
        chart = Chart(64, 32, -1.0, 1.0).lineplot(Continuous(lambda x: 1.0 / x if x > 0 else 0.0))
        self.assertGreater(chart.ymin, 0.0)
        self.assertEqual(chart.ymax, 32.0)

    def test_continuous_function_raising_arithmetic_error_is_skipped(self) -> None:
        chart = Chart(120, 60, -10.0, 10.0).lineplot(Continuous(lambda x: math.sin(x) / x))
        self.assertLess(chart.ymax, 1.0)
        self.assertGreater(chart.ymax, 0.99)
        self.assertAlmostEqual(chart.ymin, math.sin(4.5) / 4.5, places=9)


class ChartRenderTests(unittest.TestCase):
    def test_sinc_chart_renders_sixteen_canvas_rows(self) -> None:
        chart = Chart(120, 60, -10.0, 10.0)
        chart.lineplot(Continuous(lambda x: math.sin(x) / x))
        text = chart.to_string()

        self.assertEqual(len(chart.frame().split("\n")), 16)
        lines = text.split("\n")
        self.assertEqual(len(lines), 18)
        self.assertEqual(lines[-1], "")
        self.assertTrue(lines[0].endswith(" 1.0"))
        self.assertTrue(lines[15].endswith(" -0.2"))
        self.assertEqual(lines[16], f"{'-10.0':<57}10.0")

    def test_repeated_render_is_idempotent(self) -> None:
        chart = Chart(64, 32, 0.0, 4.0).lineplot(Lines([(0.0, 1.0), (2.0, 3.0), (4.0, 0.5)]))
        self.assertEqual(chart.to_string(), chart.to_string())

    def test_unregistered_chart_renders_empty_range_labels(self) -> None:
        text = Chart(32, 32, -1.0, 1.0).to_string()
        self.assertIn(" inf", text)
        self.assertIn(" -inf", text)

    def test_degenerate_x_domain_does_not_raise(self) -> None:
        chart = Chart(32, 32, 0.0, 0.0).lineplot(Lines([(0.0, 1.0), (0.0, 2.0)]))
        text = chart.to_string()
        self.assertIn("\n", text)

    def test_lines_join_consecutive_points(self) -> None:
        chart = Chart.with_y_range(40, 40, 0.0, 4.0, 0.0, 4.0)
        chart.lineplot(Lines([(0.0, 1.0), (2.0, 1.0)])).figures()
        self.assertEqual(_set_dots(chart), {(x, 30) for x in range(21)})

    def test_out_of_range_points_are_bridged(self) -> None:
        chart = Chart.with_y_range(40, 40, 0.0, 4.0, 0.0, 4.0)
        chart.lineplot(Lines([(0.0, 1.0), (1.0, 100.0), (2.0, 1.0)])).figures()
        self.assertTrue(chart.canvas.get(10, 30))
        self.assertFalse(chart.canvas.get(10, 0))

    def test_continuous_join_bridges_dropped_sample(self) -> None:
        def diagonal_with_hole(x: float) -> float:
            return 0.0 if abs(x - 20.0) < 0.5 else x

        chart = Chart.with_y_range(40, 40, 0.0, 40.0, 0.0, 40.0)
        chart.lineplot(Continuous(diagonal_with_hole)).figures()
        # neighbours of the dropped i = 20 sample are joined straight across it
        self.assertTrue(chart.canvas.get(19, 21))
        self.assertTrue(chart.canvas.get(21, 19))
        self.assertTrue(chart.canvas.get(20, 20))
        self.assertFalse(chart.canvas.get(20, 40))

    def test_points_are_not_joined(self) -> None:
        chart = Chart.with_y_range(40, 40, 0.0, 4.0, 0.0, 4.0)
        chart.lineplot(Points([(0.0, 1.0), (2.0, 1.0)])).figures()
        self.assertEqual(_set_dots(chart), {(0, 30), (20, 30)})

    def test_colored_points_use_series_color(self) -> None:
        chart = Chart.with_y_range(40, 40, 0.0, 4.0, 0.0, 4.0)
        chart.linecolorplot(Points([(2.0, 1.0)]), PixelColor.CYAN).figures()
        self.assertEqual(chart.canvas.cell(20, 30).color, PixelColor.CYAN)

    def test_steps_draw_horizontal_then_vertical(self) -> None:
        chart = Chart.with_y_range(40, 40, 0.0, 4.0, 0.0, 4.0)
        chart.lineplot(Steps([(0.0, 1.0), (1.0, 3.0)])).figures()
        expected = {(x, 10) for x in range(11)} | {(0, y) for y in range(10, 31)}
        self.assertEqual(_set_dots(chart), expected)

    def test_bars_outline_each_interval(self) -> None:
        chart = Chart.with_y_range(40, 40, 0.0, 4.0, 0.0, 4.0)
        chart.lineplot(Bars([(0.0, 1.0), (1.0, 3.0), (2.0, 2.0)])).figures()

        expected = (
            {(x, 10) for x in range(0, 11)}
            | {(x, 20) for x in range(10, 21)}
            | {(0, y) for y in range(10, 41)}
            | {(10, y) for y in range(10, 41)}
            | {(20, y) for y in range(20, 41)}
        )
        self.assertEqual(_set_dots(chart), expected)
        self.assertFalse(chart.canvas.get(5, 20))
        self.assertFalse(chart.canvas.get(15, 30))

    def test_colored_shape_colors_its_cells(self) -> None:
        chart = Chart.with_y_range(40, 40, 0.0, 4.0, 0.0, 4.0)
        chart.linecolorplot(Lines([(0.0, 1.0), (2.0, 1.0)]), PixelColor.BRIGHT_RED).figures()
        self.assertEqual(chart.canvas.cell(4, 30).color, PixelColor.BRIGHT_RED)
        self.assertIn("\x1b[91m", chart.frame())

    def test_axis_draws_dashed_zero_lines(self) -> None:
        chart = Chart.with_y_range(40, 40, -1.0, 1.0, -1.0, 1.0)
        chart.axis()
        self.assertTrue(chart.canvas.get(20, 0))
        self.assertTrue(chart.canvas.get(20, 3))
        self.assertFalse(chart.canvas.get(20, 1))
        self.assertTrue(chart.canvas.get(0, 20))
        self.assertTrue(chart.canvas.get(3, 20))
        self.assertFalse(chart.canvas.get(4, 20))

    def test_axis_skipped_when_zero_outside_bounds(self) -> None:
        chart = Chart.with_y_range(40, 40, 1.0, 2.0, 1.0, 2.0)
        chart.axis()
        self.assertEqual(_set_dots(chart), set())

    def test_borders_frame_the_canvas(self) -> None:
        chart = Chart.with_y_range(40, 40, 1.0, 2.0, 1.0, 2.0)
        chart.borders()
        dots = _set_dots(chart)
        for dot in ((0, 0), (39, 0), (0, 39), (40, 39), (39, 40), (40, 3), (3, 40)):
            self.assertIn(dot, dots)
        self.assertNotIn((20, 20), dots)


if __name__ == "__main__":
    unittest.main()
