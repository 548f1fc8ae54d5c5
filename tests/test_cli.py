import io
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from roblocks_core.cli import main


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp(prefix="roblocks_test_")

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def _write(self, name, text):
        path = os.path.join(self.tmpdir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_given_script_file_when_running_then_final_table_on_stdout(self):
        path = self._write("script.txt", "4\nmove 3 onto 0\npile 0 over 1\nquit\n")
        with patch('sys.stdout', new_callable=io.StringIO) as out:
            rc = main([path])
        self.assertEqual(rc, 0)
        self.assertEqual(out.getvalue(), "0:\n1: 1 0 3\n2: 2\n3:\n")

    def test_given_stdin_and_size_flag_when_running_then_header_not_needed(self):
        with patch('sys.stdin', io.StringIO("move 0 over 2\n")), \
             patch('sys.stdout', new_callable=io.StringIO) as out:
            rc = main(["--size", "3"])
        self.assertEqual(rc, 0)
        self.assertEqual(out.getvalue(), "0:\n1: 1\n2: 2 0\n")

    def test_given_bad_commands_in_script_when_running_then_errors_on_stderr_and_exit_zero(self):
        path = self._write("bad.txt", "3\nfly 1 over 2\nmove 7 over 2\nquit\n")
        with patch('sys.stdout', new_callable=io.StringIO), \
             patch('sys.stderr', new_callable=io.StringIO) as err:
            rc = main([path])
        self.assertEqual(rc, 0)
        self.assertIn("Invalid command: fly 1 over 2", err.getvalue())
        self.assertIn("Block not found: 7", err.getvalue())

    def test_given_undecodable_line_when_running_then_reported_and_session_continues(self):
        path = os.path.join(self.tmpdir, "binary.txt")
        with open(path, "wb") as f:
            f.write(b"3\nmove 1 onto 0\n\xff\xfe\nprint\nquit\n")
        with patch('sys.stdout', new_callable=io.StringIO) as out, \
             patch('sys.stderr', new_callable=io.StringIO) as err:
            rc = main([path])
        self.assertEqual(rc, 0)
        self.assertIn("Invalid command:", err.getvalue())
        self.assertEqual(out.getvalue(), "0: 0 1\n1:\n2: 2\n" * 2)

    def test_given_bad_header_or_missing_file_when_running_then_exit_two(self):
        path = self._write("zero.txt", "0\nquit\n")
        with patch('sys.stderr', new_callable=io.StringIO) as err:
            self.assertEqual(main([path]), 2)
        self.assertIn("Invalid table size", err.getvalue())
        with patch('sys.stderr', new_callable=io.StringIO) as err:
            self.assertEqual(main([os.path.join(self.tmpdir, "missing.txt")]), 2)
        self.assertIn("error: cannot read", err.getvalue())

    def test_given_generate_flag_when_running_then_reproducible_script_printed(self):
        with patch('sys.stdout', new_callable=io.StringIO) as out1:
            self.assertEqual(main(["--generate", "5", "--size", "4", "--seed", "3"]), 0)
        with patch('sys.stdout', new_callable=io.StringIO) as out2:
            main(["--generate", "5", "--size", "4", "--seed", "3"])
        lines = out1.getvalue().splitlines()
        self.assertEqual(out1.getvalue(), out2.getvalue())
        self.assertEqual(lines[0], "4")
        self.assertEqual(lines[-1], "quit")
        self.assertEqual(len(lines), 7)

    def test_given_seed_env_when_generating_then_used_as_default(self):
        with patch.dict(os.environ, {"ROBLOCKS_SEED": "11"}), \
             patch('sys.stdout', new_callable=io.StringIO) as out1:
            main(["--generate", "6"])
        with patch('sys.stdout', new_callable=io.StringIO) as out2:
            main(["--generate", "6", "--seed", "11"])
        self.assertEqual(out1.getvalue(), out2.getvalue())

    def test_given_debug_flag_when_running_then_trace_on_stderr(self):
        path = self._write("dbg.txt", "2\nmove 1 onto 0\nquit\n")
        with patch.dict(os.environ, {}), \
             patch('sys.stdout', new_callable=io.StringIO), \
             patch('sys.stderr', new_callable=io.StringIO) as err:
            main(["--debug", path])
        self.assertIn("[move]", err.getvalue())


if __name__ == '__main__':
    unittest.main(verbosity=2)
