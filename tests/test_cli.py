"""
Tests for the command line interface.
"""

import unittest
from unittest import mock

import click
from click.testing import CliRunner

from dragonsim import config
from dragonsim.cli import main
from dragonsim.curve import segment_count
from dragonsim.pen import Command, RecordingCanvas, Speed
from dragonsim.unit import Degree, Radian


class TestPhraseMode(unittest.TestCase):
    """Test the phrase transformations from the command line."""

    def setUp(self):
        self.runner = CliRunner()

    def test_text_option(self):
        """Test a phrase given on the command line."""
        result = self.runner.invoke(main, ["-t", "hello world"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("hElLo WoRlD\n", result.output)
        self.assertIn("HELLO WORLD!\n", result.output)

    def test_text_option_prompts(self):
        """Test a bare -t prompts for the phrase."""
        result = self.runner.invoke(main, ["-t"], input="hello world\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Enter a phrase:", result.output)
        self.assertIn("HELLO WORLD!", result.output)

    def test_no_arguments_prompts_for_phrase(self):
        """Test running without options falls back to phrase mode."""
        result = self.runner.invoke(main, [], input="abc\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("aBc\n", result.output)
        self.assertIn("ABC!\n", result.output)

    def test_unreadable_phrase_uses_default(self):
        """Test the default phrase is used when input cannot be read."""
        with mock.patch("dragonsim.cli.click.prompt", side_effect=click.Abort):
            result = self.runner.invoke(main, [])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(config.DEFAULT_PHRASE.upper() + "!", result.output)


class TestAngleMode(unittest.TestCase):
    """Test angle conversion from the command line."""

    def setUp(self):
        self.runner = CliRunner()

    def test_degrees_to_radians(self):
        """Test a degree angle is shown in radians."""
        result = self.runner.invoke(main, ["-a", "45º"])
        self.assertEqual(result.exit_code, 0, result.output)
        expected = Degree(45).to_radians()
        self.assertIn(f"The angle you entered is {expected}.", result.output)
        self.assertIn(" rad.", result.output)

    def test_radians_to_degrees(self):
        """Test a radian angle is shown in degrees."""
        result = self.runner.invoke(main, ["-a", "1.5 rad."])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(f"The angle you entered is {Radian(1.5).to_degrees()}.", result.output)

    def test_dms(self):
        """Test the optional degrees, minutes and seconds line."""
        result = self.runner.invoke(main, ["-a", "10.5°", "--dms"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("That is 10° 30' 0\".", result.output)

    def test_bad_angle_falls_back_to_prompt(self):
        """Test an unreadable angle argument explains why and prompts."""
        result = self.runner.invoke(main, ["-a", "45"], input="90°\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(
            "Could not read angle :(. Here's why: "
            "Could not determine if the angle is in degrees or radians.",
            result.output,
        )
        self.assertIn(f"The angle you entered is {Degree(90).to_radians()}.", result.output)

    def test_prompt_retries_until_valid(self):
        """Test the prompt repeats after a malformed angle."""
        result = self.runner.invoke(main, ["-a"], input="abc°\nhalf rad.\n2 rad.\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.count("Try again."), 2)
        self.assertIn(f"The angle you entered is {Radian(2).to_degrees()}.", result.output)

    def test_dms_without_angle(self):
        """Test --dms alone is a usage error instead of being ignored."""
        result = self.runner.invoke(main, ["--dms"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("--dms needs an angle", result.output)

    def test_dms_with_angle_prompt(self):
        """Test --dms combines with a prompted angle."""
        result = self.runner.invoke(main, ["-a", "--dms"], input="-10.5°\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("That is -10° 30' 0\".", result.output)

    def test_unreadable_angle_uses_default(self):
        """Test the default angle is used when input cannot be read."""
        with mock.patch("dragonsim.cli.click.prompt", side_effect=click.Abort):
            result = self.runner.invoke(main, ["-a"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(f"Using the angle {config.DEFAULT_ANGLE}", result.output)
        self.assertIn(f"The angle you entered is {config.DEFAULT_ANGLE.to_radians()}.", result.output)


class TestDragonMode(unittest.TestCase):
    """Test drawing the dragon from the command line."""

    def setUp(self):
        self.runner = CliRunner()
        self.canvas = RecordingCanvas()

    def test_dragon_session(self):
        """Test the window is configured, the curve replayed and the canvas released."""
        with mock.patch("dragonsim.cli.make_canvas", return_value=self.canvas) as make_canvas:
            result = self.runner.invoke(main, ["-d", "--order", "3", "--backend", "plot"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Ooh, a dragon!", result.output)
        make_canvas.assert_called_once_with("plot")

        names = self.canvas.names()
        self.assertEqual(names[:3], ["set_background_color", "set_title", "enter_fullscreen"])
        self.assertEqual(names[3], "pen_up")
        self.assertEqual(names[-2:], ["hide", "done"])
        self.assertEqual(names.count("set_pen_color"), segment_count(3))
        self.assertIn("set_speed", names)
        self.assertIn("Segments", result.output)
        self.assertIn("Strokes", result.output)
        self.assertIn("Gradient", result.output)
        self.assertIn(config.DRAGON_START_COLOR.to_hex(), result.output)
        self.assertIn(Command("set_speed", (config.DRAWING_SPEED,)), self.canvas.commands)

    def test_speed_option(self):
        """Test the drawing speed is chosen by name."""
        with mock.patch("dragonsim.cli.make_canvas", return_value=self.canvas):
            result = self.runner.invoke(main, ["-d", "--order", "2", "--speed", "slowest"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(Command("set_speed", (Speed.SLOWEST,)), self.canvas.commands)

    def test_unknown_speed_rejected(self):
        """Test only known speed names are accepted."""
        result = self.runner.invoke(main, ["-d", "--speed", "ludicrous"])
        self.assertEqual(result.exit_code, 2)

    def test_modes_combine(self):
        """Test several modes run in one invocation."""
        with mock.patch("dragonsim.cli.make_canvas", return_value=self.canvas):
            result = self.runner.invoke(main, ["-t", "hi", "-a", "0°", "-d", "--order", "0"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("HI!", result.output)
        self.assertIn("The angle you entered is 0.0 rad.", result.output)
        self.assertEqual(self.canvas.names()[-1], "done")

    def test_negative_order_rejected(self):
        """Test the order must not be negative."""
        result = self.runner.invoke(main, ["-d", "--order", "-1"])
        self.assertEqual(result.exit_code, 2)

    def test_unknown_backend_rejected(self):
        """Test only known backends are accepted."""
        result = self.runner.invoke(main, ["-d", "--backend", "svg"])
        self.assertEqual(result.exit_code, 2)


if __name__ == "__main__":
    unittest.main()
