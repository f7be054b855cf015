import unittest

import parser as parser_mod
from command import OperatorToken, ParsedCommand, RedirectTarget


class TestParser(unittest.TestCase):
    # Tests for parse - stdout redirection
    def test_stdout_redirect_overwrite(self):
        cmd = parser_mod.parse("echo hi > out.txt")
        self.assertEqual(["echo", "hi"], cmd.argv)
        self.assertEqual(("out.txt", False), cmd.redirection.stdout)
        self.assertIsNone(cmd.redirection.stderr)

    def test_stdout_redirect_append(self):
        cmd = parser_mod.parse("echo hi >> out.txt")
        self.assertEqual(RedirectTarget("out.txt", append=True), cmd.redirection.stdout)

    def test_explicit_fd_one(self):
        cmd = parser_mod.parse("echo hi 1> out.txt")
        self.assertEqual(("out.txt", False), cmd.redirection.stdout)
        cmd = parser_mod.parse("echo hi 1>> out.txt")
        self.assertEqual(("out.txt", True), cmd.redirection.stdout)

    # Tests for parse - stderr redirection
    def test_stderr_redirect_overwrite(self):
        cmd = parser_mod.parse("ls missing 2> err.txt")
        self.assertEqual(["ls", "missing"], cmd.argv)
        self.assertEqual(("err.txt", False), cmd.redirection.stderr)
        self.assertIsNone(cmd.redirection.stdout)

    def test_stderr_redirect_append(self):
        cmd = parser_mod.parse("cmd 2>> err.log")
        self.assertEqual(("err.log", True), cmd.redirection.stderr)

    def test_both_streams_independent(self):
        cmd = parser_mod.parse("cmd a 1>> o.txt b 2> e.txt")
        self.assertEqual(["cmd", "a", "b"], cmd.argv)
        self.assertEqual(("o.txt", True), cmd.redirection.stdout)
        self.assertEqual(("e.txt", False), cmd.redirection.stderr)

    def test_last_redirect_for_a_stream_wins(self):
        cmd = parser_mod.parse("echo hi > a.txt > b.txt")
        self.assertEqual(["echo", "hi"], cmd.argv)
        self.assertEqual(("b.txt", False), cmd.redirection.stdout)

    def test_last_redirect_wins_across_modes(self):
        cmd = parser_mod.parse("echo hi >> a.txt 1> b.txt")
        self.assertEqual(("b.txt", False), cmd.redirection.stdout)

    def test_dangling_operator_is_dropped(self):
        cmd = parser_mod.parse("echo hi >")
        self.assertEqual(["echo", "hi"], cmd.argv)
        self.assertIsNone(cmd.redirection.stdout)
        self.assertFalse(cmd.redirection)

    def test_quoted_target_with_spaces(self):
        cmd = parser_mod.parse("echo hi > 'my file.txt'")
        self.assertEqual(("my file.txt", False), cmd.redirection.stdout)

    def test_quoted_operator_stays_an_argument(self):
        cmd = parser_mod.parse("echo '>' x")
        self.assertEqual(["echo", ">", "x"], cmd.argv)
        self.assertFalse(cmd.redirection)

    # Tests for parse - empty results
    def test_blank_line_returns_none(self):
        self.assertIsNone(parser_mod.parse(""))
        self.assertIsNone(parser_mod.parse("   "))

    def test_only_redirection_returns_none(self):
        self.assertIsNone(parser_mod.parse("> out.txt"))

    # Tests for parse_simple_command
    def test_plain_string_angle_is_not_an_operator(self):
        cmd = parser_mod.parse_simple_command(["echo", ">", "x"])
        self.assertEqual(["echo", ">", "x"], cmd.argv)

    def test_operator_token_consumes_target(self):
        cmd = parser_mod.parse_simple_command(["echo", "hi", OperatorToken("2>>"), "e.log"])
        self.assertEqual(["echo", "hi"], cmd.argv)
        self.assertEqual(("e.log", True), cmd.redirection.stderr)

    def test_name_and_args(self):
        cmd = parser_mod.parse("grep -n foo file.txt")
        self.assertIsInstance(cmd, ParsedCommand)
        self.assertEqual("grep", cmd.name)
        self.assertEqual(["-n", "foo", "file.txt"], cmd.args)


if __name__ == "__main__":
    unittest.main()
