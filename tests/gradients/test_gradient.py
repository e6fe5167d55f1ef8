import numpy as np
import pytest

from colorstops import (
    Color,
    EmptyGradientError,
    Gradient,
    InvalidStopOperation,
    Stop,
    lerp,
    step,
)


class TestGetColor:
    def test_interpolates_between_stops(self, black_to_white):
        assert black_to_white.get_color(0.25) == Color(127.5, 127.5, 127.5, 1)

    def test_exact_hit(self, black_to_white):
        assert black_to_white.get_color(0.5) == Color(255, 255, 255, 1)
        assert black_to_white.get_color(0) == Color(0, 0, 0, 1)

    def test_after_last_stop_does_not_extrapolate(self, black_to_white):
        assert black_to_white.get_color(0.9) == Color(255, 255, 255, 1)
        assert black_to_white.get_color(1) == Color(255, 255, 255, 1)

    def test_single_stop_fills_the_axis(self):
        gradient = Gradient()
        gradient.add_stop(0.3, {"r": 10, "g": 20, "b": 30, "a": 1})
        assert gradient.get_color(0) == Color(10, 20, 30, 1)
        assert gradient.get_color(1) == Color(10, 20, 30, 1)

    def test_before_first_stop(self):
        gradient = Gradient(stops=[(0.4, (1, 2, 3)), (0.6, (4, 5, 6))])
        assert gradient.get_color(0.1) == Color(1, 2, 3)

    def test_uneven_spacing(self):
        gradient = Gradient(stops=[(0.2, (0, 0, 0, 0)), (0.6, (100, 200, 40, 1))])
        color = gradient.get_color(0.3)
        assert np.allclose(color.as_array(), [25, 50, 10, 0.25])

    @pytest.mark.parametrize("position", [0, 0.3, 1, -2, 5])
    def test_empty_gradient(self, position):
        with pytest.raises(EmptyGradientError, match="empty gradient"):
            Gradient().get_color(position)

    def test_empty_gradient_error_is_invalid_operation(self):
        with pytest.raises(InvalidStopOperation):
            Gradient().get_color(0.5)

    def test_outside_unit_range_warns_and_uses_edge_stop(self, black_to_white):
        with pytest.warns(UserWarning, match="outside"):
            assert black_to_white.get_color(-1) == Color(0, 0, 0, 1)
        with pytest.warns(UserWarning, match="outside"):
            assert black_to_white.get_color(1.5) == Color(255, 255, 255, 1)

    def test_nan_position(self, black_to_white):
        with pytest.raises(InvalidStopOperation, match="NaN"):
            black_to_white.get_color(float("nan"))

    def test_indexing_alias(self, black_to_white):
        assert black_to_white[0.25] == black_to_white.get_color(0.25)


class TestStopEditing:
    def test_edits_flow_through_to_queries(self, black_to_white):
        black_to_white.replace_stop(0.5, (255, 0, 0, 1))
        assert black_to_white.get_color(0.25) == Color(127.5, 0, 0, 1)

        black_to_white.move(0.5, 1)
        assert black_to_white.get_color(0.5) == Color(127.5, 0, 0, 1)

        black_to_white.remove(0)
        assert black_to_white.get_color(0.5) == Color(255, 0, 0, 1)
        assert len(black_to_white) == 1

    def test_failures_propagate_unchanged(self, black_to_white):
        before = black_to_white.stops
        with pytest.raises(InvalidStopOperation, match="already exists"):
            black_to_white.add_stop(0.5, (0, 0, 0))
        with pytest.raises(InvalidStopOperation, match="No stop"):
            black_to_white.replace_stop(0.7, (0, 0, 0))
        with pytest.raises(InvalidStopOperation, match="not moved"):
            black_to_white.move(0, 0.5)
        with pytest.raises(InvalidStopOperation, match="No stop"):
            black_to_white.remove(0.7)
        with pytest.raises(InvalidStopOperation, match="between 0 and 1"):
            black_to_white.add_stop(1.5, (0, 0, 0))
        assert black_to_white.stops == before

    def test_stops_snapshot(self, black_to_white):
        assert black_to_white.stops == (
            Stop(0, Color(0, 0, 0, 1)),
            Stop(0.5, Color(255, 255, 255, 1)),
        )


class TestReturnedColorsAreCopies:
    def test_exact_hit_returns_a_new_object(self, black_to_white):
        stored = black_to_white.stops[1].color
        returned = black_to_white.get_color(0.5)
        assert returned == stored
        assert returned is not stored

    def test_interpolator_output_is_coerced(self):
        def tuple_blend(color1, color2, factor):
            return (1, 2, 3)

        gradient = Gradient(interpolator=tuple_blend, stops=[(0, (0, 0, 0)), (1, (9, 9, 9))])
        assert gradient.get_color(0.5) == Color(1, 2, 3, 1.0)


class TestInterpolator:
    def test_default_is_lerp(self):
        assert Gradient().interpolator is lerp

    def test_swap_after_construction(self, black_to_white):
        black_to_white.interpolator = step
        assert black_to_white.get_color(0.25) == Color(0, 0, 0, 1)
        black_to_white.interpolator = lerp
        assert black_to_white.get_color(0.25) == Color(127.5, 127.5, 127.5, 1)

    def test_custom_interpolator_receives_factor(self, black_to_white):
        seen = []

        def record(color1, color2, factor):
            seen.append((color1, color2, factor))
            return color1

        black_to_white.interpolator = record
        black_to_white.get_color(0.125)
        assert seen == [(Color(0, 0, 0, 1), Color(255, 255, 255, 1), 0.25)]

    def test_exact_and_edge_hits_skip_the_interpolator(self, black_to_white):
        def fail(color1, color2, factor):
            raise AssertionError("interpolator should not be called")

        black_to_white.interpolator = fail
        black_to_white.get_color(0)
        black_to_white.get_color(0.5)
        black_to_white.get_color(0.75)

    def test_non_callable_rejected(self, black_to_white):
        with pytest.raises(TypeError, match="callable"):
            black_to_white.interpolator = "linear"
        assert black_to_white.interpolator is lerp


class TestConstructors:
    def test_initial_stops_are_validated(self):
        with pytest.raises(InvalidStopOperation):
            Gradient(stops=[(0.5, (0, 0, 0)), (0.5, (1, 1, 1))])

    def test_from_colors_spreads_evenly(self):
        gradient = Gradient.from_colors([(0, 0, 0), (100, 100, 100), (200, 200, 200)])
        assert [stop.position for stop in gradient.stops] == [0.0, 0.5, 1.0]
        assert gradient.get_color(0.75) == Color(150, 150, 150, 1)

    def test_from_single_color(self):
        gradient = Gradient.from_colors([(5, 5, 5)])
        assert [stop.position for stop in gradient.stops] == [0.0]

    def test_from_no_colors(self):
        assert len(Gradient.from_colors([])) == 0


class TestSample:
    def test_sample_shape_and_values(self, black_to_white):
        samples = black_to_white.sample(5)
        assert samples.shape == (5, 4)
        assert samples.dtype == np.float64
        expected = np.array([
            (0, 0, 0, 1),
            (127.5, 127.5, 127.5, 1),
            (255, 255, 255, 1),
            (255, 255, 255, 1),
            (255, 255, 255, 1),
        ])
        assert np.allclose(samples, expected)

    def test_single_sample(self, black_to_white):
        assert np.allclose(black_to_white.sample(1), [[0, 0, 0, 1]])

    def test_invalid_steps(self, black_to_white):
        with pytest.raises(ValueError, match="steps"):
            black_to_white.sample(0)

    def test_sample_empty_gradient(self):
        with pytest.raises(EmptyGradientError):
            Gradient().sample(3)
