"""Unit tests for the linux and windows command line profiles."""

import unittest
from shelltoken import (
    LINUX,
    PROFILES,
    WHITESPACE,
    WINDOWS,
    Options,
    ShellCharacterPolicy,
    ShellCharactersFound,
    UnbalancedQuotes,
    parse,
    split_linux,
    split_windows,
)


class TestProfileOptions(unittest.TestCase):
    """Test the option bundles behind each profile."""

    def test_linux_options(self):
        """Test linux profile options."""
        self.assertEqual(
            Options(shell_characters=ShellCharacterPolicy.STOP_ON_FIRST), LINUX
        )

    def test_windows_options(self):
        """Test windows profile options."""
        self.assertTrue(WINDOWS.keep_backslashes)
        self.assertTrue(WINDOWS.ignore_backslash_escaping)
        self.assertFalse(WINDOWS.keep_quotes)
        self.assertFalse(WINDOWS.keep_separators)
        self.assertEqual(ShellCharacterPolicy.STOP_ON_FIRST, WINDOWS.shell_characters)

    def test_profiles_by_name(self):
        """Test profile lookup table."""
        self.assertIs(LINUX, PROFILES["linux"])
        self.assertIs(WINDOWS, PROFILES["windows"])
        self.assertEqual(" \t\n\r", WHITESPACE)


class TestSplitLinux(unittest.TestCase):
    """Test splitting with linux shell rules."""

    def test_argv(self):
        """Test argv of lines without environment."""
        tests = [
            ("", [""]),
            (" a", ["a"]),
            (" a ", ["a"]),
            ("a bc d", ["a", "bc", "d"]),
            ("a 'bc' d", ["a", "bc", "d"]),
            ("a 'b c' d", ["a", "b c", "d"]),
            ("a \"b'c\" d", ["a", "b'c", "d"]),
            ("\\\\ a", ["\\", "a"]),
            ("/bin/sh -c 'echo a b c '", ["/bin/sh", "-c", "echo a b c "]),
            ("cmd.exe /c '`foo`'", ["cmd.exe", "/c", "`foo`"]),
        ]
        for line, expected in tests:
            with self.subTest(line=line):
                env, argv = split_linux(line)
                self.assertEqual(expected, argv)
                self.assertEqual([], env)

    def test_env(self):
        """Test lines with leading environment assignments."""
        tests = [
            ("test", [], ["test"]),
            ("./test arg1 arg2", [], ["./test", "arg1", "arg2"]),
            ("ENV1=1 ENV2=2 /blah/test", ["ENV1=1", "ENV2=2"], ["/blah/test"]),
            (
                "ENV1=1 ENV2=2 ./test arg1 arg2",
                ["ENV1=1", "ENV2=2"],
                ["./test", "arg1", "arg2"],
            ),
            (
                "ENV1=\"1 2 3\" ENV2='2' ./test arg1 arg2",
                ["ENV1=1 2 3", "ENV2=2"],
                ["./test", "arg1", "arg2"],
            ),
            (
                "PATH=test:PATH LD_LIB=... pwd/test",
                ["PATH=test:PATH", "LD_LIB=..."],
                ["pwd/test"],
            ),
        ]
        for line, expected_env, expected_argv in tests:
            with self.subTest(line=line):
                env, argv = split_linux(line)
                self.assertEqual(expected_env, env)
                self.assertEqual(expected_argv, argv)

    def test_env_without_command(self):
        """Test that argv is padded when there is no command."""
        env, argv = split_linux("A=1 B=2")
        self.assertEqual(["A=1", "B=2"], env)
        self.assertEqual([""], argv)

    def test_unbalanced_quotes(self):
        """Test unterminated quotes."""
        with self.assertRaises(UnbalancedQuotes):
            split_linux("test 'arg1 arg2")
        with self.assertRaises(UnbalancedQuotes):
            split_linux('test "arg1 arg2')

    def test_shell_characters(self):
        """Test that shell constructs are rejected."""
        with self.assertRaises(ShellCharactersFound):
            split_linux('test "$(ls)"')
        with self.assertRaises(ShellCharactersFound):
            split_linux("ENV='test' test 2>&1")
        env, argv = split_linux("test '$(ls)'")
        self.assertEqual(["test", "$(ls)"], argv)

    def test_rejoin(self):
        """Test that joining argv and splitting again is stable."""
        _, argv = split_linux("ENV=1 /usr/bin/prog  --opt=value \t 'file' x")
        _, again = split_linux(" ".join(argv))
        self.assertEqual(argv, again)


class TestSplitWindows(unittest.TestCase):
    """Test splitting with windows rules."""

    def test_backslashes_kept(self):
        """Test that backslashes are kept verbatim and quotes stripped."""
        env, argv = split_windows('c:\\"Program Files"\\/crap\\bs.exe')
        self.assertEqual(["c:\\Program Files\\/crap\\bs.exe"], argv)
        self.assertEqual([], env)

    def test_arguments(self):
        """Test a windows command with arguments."""
        env, argv = split_windows('  SET=1 "C:\\Tools\\x.exe" /q C:\\tmp\\  ')
        self.assertEqual(["SET=1"], env)
        self.assertEqual(["C:\\Tools\\x.exe", "/q", "C:\\tmp\\"], argv)

    def test_empty(self):
        """Test empty windows command line."""
        self.assertEqual(([], [""]), split_windows("   "))

    def test_shell_characters(self):
        """Test that shell constructs are rejected."""
        with self.assertRaises(ShellCharactersFound):
            split_windows("dir | more")


class TestParse(unittest.TestCase):
    """Test the general parse entry point."""

    def test_example(self):
        """Test splitting env and argv with default options."""
        env, argv = parse("PATH=/bin ls -l")
        self.assertEqual(["PATH=/bin"], env)
        self.assertEqual(["ls", "-l"], argv)

    def test_ignore_shell(self):
        """Test linux rules without shell character detection."""
        env, argv = parse("PATH=test:$PATH LD_LIB=... $(pwd)/test", WHITESPACE)
        self.assertEqual(["PATH=test:$PATH", "LD_LIB=..."], env)
        self.assertEqual(["$(pwd)/test"], argv)

    def test_keep_everything(self):
        """Test keeping quotes, backslashes and separators."""
        options = Options(keep_backslashes=True, keep_quotes=True, keep_separators=True)
        self.assertEqual(([], [""]), parse("", WHITESPACE, options))
        self.assertEqual(([], [" ", "a"]), parse(" a", WHITESPACE, options))
        self.assertEqual(([], ["'te'", " ", "'st'"]), parse("'te' 'st'", options=options))


if __name__ == "__main__":
    unittest.main()
