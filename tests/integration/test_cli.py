"""
Integration tests for the command-line workflow.
"""

import subprocess
import sys

import pytest
from fqdncheck.cli import EXIT_INVALID, EXIT_VALID, UsageError, build_parser, main, parse_arguments


class TestMain:
    """End-to-end tests through main()."""

    def test_valid_domain_quiet(self, capsys):
        """Test that a valid name exits 0 without output."""
        assert main(['example.com']) == EXIT_VALID
        assert capsys.readouterr().out == ''

    def test_invalid_domain_quiet(self, capsys):
        """Test that an invalid name exits 1 without output."""
        assert main(['example.c0m']) == EXIT_INVALID
        assert capsys.readouterr().out == ''

    def test_valid_domain_verbose(self, capsys):
        """Test verbose confirmation for a valid name."""
        assert main(['-v', 'sub.example2.org']) == EXIT_VALID
        assert capsys.readouterr().out == "The string is a valid FQDN.\n"

    def test_invalid_domain_verbose(self, capsys):
        """Test verbose diagnostics for a rejected name."""
        assert main(['-v', 'a..com']) == EXIT_INVALID

        lines = capsys.readouterr().out.splitlines()
        assert lines == ["Invalid characters found in string", "The string is not a valid FQDN."]

    @pytest.mark.parametrize('target', ['192.168.1.1', '::1', '2001:db8::1'])
    def test_ip_literals_accepted(self, target, capsys):
        """Test that IP literals bypass the label rules."""
        assert main(['-v', target]) == EXIT_VALID
        assert capsys.readouterr().out == "The string is a valid FQDN.\n"

    def test_leading_hyphen_target(self, capsys):
        """Test that a single token starting with '-' is validated, not parsed as a flag."""
        assert main(['-abc.com']) == EXIT_INVALID
        assert capsys.readouterr().out == ''

        assert main(['-v', '-abc.com']) == EXIT_INVALID
        assert "Invalid first character" in capsys.readouterr().out

    def test_lone_verbose_flag_is_a_target(self, capsys):
        """Test that '-v' alone is treated as the string to validate."""
        assert main(['-v']) == EXIT_INVALID
        assert capsys.readouterr().out == ''

    @pytest.mark.parametrize('argv', [[], ['-v', 'a.com', 'b.com'], ['a', 'b', 'c', 'd']])
    def test_wrong_argument_count(self, argv, capsys):
        """Test usage error on wrong argument count."""
        assert main(argv) == EXIT_INVALID

        out = capsys.readouterr().out
        assert "Error: Wrong number of arguments" in out
        assert "[-v] <string-to-validate>" in out

    @pytest.mark.parametrize('flag', ['-x', '--verbose', '-vv', 'example.com'])
    def test_invalid_first_argument(self, flag, capsys):
        """Test usage error on an unrecognized first argument."""
        assert main([flag, 'example.com']) == EXIT_INVALID

        out = capsys.readouterr().out
        assert f"Error: Invalid first argument '{flag}'" in out
        assert out.rstrip().splitlines()[-1].startswith("Usage: ")


class TestParseArguments:
    """Tests for argument parsing."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = build_parser('fqdncheck')

    def test_single_argument(self):
        """Test a bare target."""
        config, target = parse_arguments(['example.com'], self.parser)

        assert target == 'example.com'
        assert not config.is_verbose()

    def test_verbose_argument(self):
        """Test -v followed by a target."""
        config, target = parse_arguments(['-v', 'example.com'], self.parser)

        assert target == 'example.com'
        assert config.is_verbose()

    def test_empty_target(self):
        """Test that an empty string is passed through for validation."""
        _, target = parse_arguments([''], self.parser)
        assert target == ''

    def test_errors(self):
        """Test that malformed command lines raise UsageError."""
        with pytest.raises(UsageError):
            parse_arguments([], self.parser)
        with pytest.raises(UsageError):
            parse_arguments(['-q', 'example.com'], self.parser)


class TestModuleEntryPoint:
    """Tests running the package as a module."""

    def test_python_m_exit_codes(self):
        """Test exit codes from python -m fqdncheck."""
        valid = subprocess.run([sys.executable, '-m', 'fqdncheck', 'example.com'],
                               capture_output=True, text=True)
        invalid = subprocess.run([sys.executable, '-m', 'fqdncheck', '-v', 'example.'],
                                 capture_output=True, text=True)

        assert valid.returncode == 0
        assert valid.stdout == ''
        assert invalid.returncode == 1
        assert "The string is not a valid FQDN." in invalid.stdout
