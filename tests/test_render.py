"""
Unit tests for the display renderer
"""

from motion_view import (
    Acceleration,
    Color,
    DisplayRenderer,
    MagneticField,
    MotionSample,
    MotionState,
    Quaternion,
    RotationRate,
)
from motion_view.render import SIMULATOR_LINES, format_quaternion, format_vector


class TestFormatting:
    def test_acceleration_line_is_fixed_width(self):
        sample = MotionSample(acceleration=Acceleration(0.001, -0.002, 0.9994))

        lines = DisplayRenderer().render(sample)

        assert lines[0].text == "Accel[g]: [ 0.001, -0.002,  0.999]"

    def test_quaternion_line_is_w_first(self):
        text = format_quaternion(Quaternion(1.0, 0.0, -0.5, 0.25))

        assert text == "Q[w,x,y,z]: [ 1.000,  0.000, -0.500,  0.250]"

    def test_wide_values_are_not_truncated(self):
        text = format_vector("Mag[uT]", MagneticField(-123.4567, 45.0, 0.0))

        assert text == "Mag[uT]: [-123.457, 45.000,  0.000]"

    def test_lines_in_order_with_distinct_colors(self, sample):
        lines = DisplayRenderer().render(sample)

        assert [line.text.split(":")[0] for line in lines] == [
            "Accel[g]",
            "Gyro[rps]",
            "Mag[uT]",
            "Q[w,x,y,z]",
        ]
        assert [line.color for line in lines] == [
            Color.RED,
            Color.GREEN,
            Color.BLUE,
            Color.CYAN,
        ]

    def test_rotation_rate_line(self):
        sample = MotionSample(rotation_rate=RotationRate(1.5, -0.75, 0.0))

        assert DisplayRenderer().render(sample)[1].text == "Gyro[rps]: [ 1.500, -0.750,  0.000]"

    def test_zero_defaults(self):
        lines = DisplayRenderer().render(MotionSample())

        assert lines[0].text == "Accel[g]: [ 0.000,  0.000,  0.000]"
        assert lines[3].text == "Q[w,x,y,z]: [ 0.000,  0.000,  0.000,  0.000]"


class TestRenderer:
    def test_same_sample_renders_identically(self, sample):
        renderer = DisplayRenderer()

        assert renderer.render(sample) == renderer.render(sample)

    def test_simulator_shows_placeholders(self, sample):
        renderer = DisplayRenderer(simulator=True)

        lines = renderer.render(sample)

        assert lines == SIMULATOR_LINES
        assert [line.text for line in lines] == [
            "Accel: [0.0, 0.0, 1.0] g",
            "Gyro: [0, 0, 0] rads/sec",
            "Mag: [0, 0, 0] uT",
            "Q: [1, 0, 0, 0]",
        ]

    def test_render_does_not_touch_state(self, sample):
        state = MotionState()
        state.publish(sample)

        DisplayRenderer().render(state.snapshot())

        assert state.snapshot() is sample
