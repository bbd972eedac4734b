"""
Unit tests for the argument classifier.
"""

import pytest
from pydantic import ValidationError

from drako.classifier import classify, parse_permission_mode, wants_help, wants_version


class TestParsePermissionMode:
    """Test octal permission token parsing."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("-0", 0o0),
            ("-7", 0o7),
            ("-000", 0o000),
            ("-644", 0o644),
            ("-700", 0o700),
            ("-755", 0o755),
            ("-777", 0o777),
            ("-12", 0o12),
        ],
    )
    def test_valid_tokens(self, token, expected):
        """Test one to three octal digits parse as base 8."""
        assert parse_permission_mode(token) == expected

    @pytest.mark.parametrize(
        "token",
        ["-999", "-8", "-78", "-7777", "-", "-g", "-go", "--755", "755", "-7a"],
    )
    def test_invalid_tokens(self, token):
        """Test tokens that are not 1-3 octal digits after a single dash."""
        assert parse_permission_mode(token) is None

    def test_every_three_digit_mode_round_trips(self):
        """Test every mode from 000 to 777 parses back to itself."""
        for mode in range(0o1000):
            assert parse_permission_mode(f"-{mode:03o}") == mode


class TestClassify:
    """Test token classification."""

    def test_directories_keep_order_and_duplicates(self):
        """Test positional tokens become directories in encounter order."""
        parsed = classify(["b", "a", "b"])
        assert parsed.directories == ("b", "a", "b")
        assert parsed.flags == ()
        assert parsed.permission_mode is None
        assert parsed.verbose is False

    def test_flags_interspersed_with_directories(self):
        """Test flags and directories may appear in any order."""
        parsed = classify(["--git", "one", "-r", "two", "--docker"])
        assert parsed.directories == ("one", "two")
        assert parsed.flags == ("--git", "-r", "--docker")

    @pytest.mark.parametrize("token", ["--verbose", "-v"])
    def test_verbose_is_not_a_flag(self, token):
        """Test verbose switches are consumed, not passed on as flags."""
        parsed = classify(["proj", token])
        assert parsed.verbose is True
        assert parsed.flags == ()

    def test_permission_mode(self):
        """Test a -NNN token sets the permission mode and is not a flag."""
        parsed = classify(["newproj", "--readme", "-755"])
        assert parsed.directories == ("newproj",)
        assert parsed.flags == ("--readme",)
        assert parsed.permission_mode == 0o755

    def test_last_permission_mode_wins(self):
        """Test a later permission token overrides an earlier one."""
        parsed = classify(["proj", "-755", "-700"])
        assert parsed.permission_mode == 0o700
        assert parsed.flags == ()

    def test_invalid_permission_becomes_flag(self):
        """Test -999 is kept as a flag so it can be reported."""
        parsed = classify(["proj", "-999", "--readme"])
        assert parsed.permission_mode is None
        assert parsed.flags == ("-999", "--readme")

    def test_invalid_permission_does_not_clear_valid_one(self):
        """Test an invalid permission token leaves an earlier valid mode alone."""
        parsed = classify(["proj", "-750", "-7777"])
        assert parsed.permission_mode == 0o750
        assert parsed.flags == ("-7777",)

    def test_short_action_flags(self):
        """Test single-dash action aliases are flags."""
        parsed = classify(["proj", "-g", "-go", "-do"])
        assert parsed.flags == ("-g", "-go", "-do")

    def test_bare_dashes_are_flags(self):
        """Test '-' and '--' are opaque flags, not directories."""
        parsed = classify(["proj", "-", "--"])
        assert parsed.directories == ("proj",)
        assert parsed.flags == ("-", "--")
        assert parsed.verbose is False

    def test_no_directories(self):
        """Test flag-only input yields no directories."""
        parsed = classify(["--git", "-755"])
        assert parsed.directories == ()

    def test_parsed_args_are_immutable(self):
        """Test ParsedArgs cannot be modified after classification."""
        parsed = classify(["proj"])
        with pytest.raises(ValidationError):
            parsed.verbose = True


class TestShortCircuitTokens:
    """Test help and version detection."""

    @pytest.mark.parametrize("token", ["--help", "-h"])
    def test_help_anywhere(self, token):
        """Test help is detected regardless of position."""
        assert wants_help(["proj", "--git", token])

    def test_version(self):
        """Test --version is detected."""
        assert wants_version(["proj", "--version"])
        assert not wants_version(["proj", "-V"])

    def test_no_short_circuit(self):
        """Test ordinary tokens trigger neither."""
        tokens = ["proj", "--readme", "-755"]
        assert not wants_help(tokens)
        assert not wants_version(tokens)
