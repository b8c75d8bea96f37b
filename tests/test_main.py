import io
import unittest
from contextlib import redirect_stdout

from connect_four_arcade import errors
from connect_four_arcade.main import main, parse_args


class TestCommandLine(unittest.TestCase):
    def test_defaults(self):
        args = parse_args([])
        self.assertEqual(args.log_level, "NONE")
        self.assertIsNone(args.seed)
        self.assertEqual(args.fps, 60)
        self.assertEqual(args.delay, 1000)
        self.assertFalse(args.mute)

    def test_options(self):
        args = parse_args(["--log-level", "debug", "--seed", "7", "--fps", "30", "--delay", "250", "--mute"])
        self.assertEqual(args.log_level, "DEBUG")
        self.assertEqual(args.seed, 7)
        self.assertEqual(args.fps, 30)
        self.assertEqual(args.delay, 250)
        self.assertTrue(args.mute)

    def test_out_of_range_values_are_rejected(self):
        with self.assertRaises(errors.ConfigurationError):
            parse_args(["--fps", "0"])
        with self.assertRaises(errors.ConfigurationError):
            parse_args(["--delay", "-5"])

    def test_main_reports_bad_configuration(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["--fps", "0"])
        self.assertEqual(code, 2)
        self.assertIn("--fps must be at least 1", out.getvalue())


if __name__ == "__main__":
    unittest.main()
