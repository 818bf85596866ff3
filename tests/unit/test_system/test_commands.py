"""
Unit tests for command line tokenizing and launch planning.
"""

import pytest

from proclaunch.system.commands import (
    QuoteState,
    build_launch_plan,
    prepare_command_with_setup,
    split_command,
    tokenize,
)
from proclaunch.validation import ValidationError


@pytest.mark.unit
class TestSplitCommand:
    """Test cases for split_command."""

    def test_simple_command(self):
        assert split_command("echo hello") == ["echo", "hello"]

    def test_empty_string(self):
        assert split_command("") == []

    def test_none(self):
        assert split_command(None) == []

    def test_whitespace_only(self):
        assert split_command("   \t  ") == []

    def test_multiple_spaces(self):
        assert split_command("echo    hello     world") == ["echo", "hello", "world"]

    def test_leading_and_trailing_space(self):
        assert split_command(" echo hello") == ["echo", "hello"]
        assert split_command("echo hello ") == ["echo", "hello"]
        assert split_command(" echo hello") == split_command("echo hello")

    def test_tabs_and_newlines_separate(self):
        assert split_command("echo\thello\nworld") == ["echo", "hello", "world"]

    def test_double_quotes_are_kept(self):
        assert split_command('echo "hello world"') == ["echo", '"hello world"']

    def test_single_quotes_are_kept(self):
        assert split_command("echo 'hello world'") == ["echo", "'hello world'"]

    def test_quoted_path_with_spaces(self):
        result = split_command('run "/usr/local/bin/app name"')
        assert result == ["run", '"/usr/local/bin/app name"']

    def test_mixed_quotes(self):
        result = split_command("echo \"test1\" 'test2' test3")
        assert result == ["echo", '"test1"', "'test2'", "test3"]

    def test_other_quote_kind_is_content(self):
        assert split_command("say \"it's fine\" ok") == ["say", "\"it's fine\"", "ok"]
        assert split_command("say 'a \"b\" c'") == ["say", "'a \"b\" c'"]

    def test_quote_inside_token(self):
        assert split_command('--name="a b" x') == ['--name="a b"', "x"]

    def test_escaped_spaces(self):
        assert split_command("cd /path\\ with\\ spaces") == ["cd", "/path with spaces"]

    def test_escaped_space_at_token_start(self):
        assert split_command("a \\ b") == ["a", " b"]

    def test_backslash_before_other_characters_is_literal(self):
        assert split_command("echo a\\nb c\\\\d") == ["echo", "a\\nb", "c\\\\d"]

    def test_trailing_backslash_is_literal(self):
        assert split_command("echo a\\") == ["echo", "a\\"]

    def test_backslash_inside_quotes_is_literal(self):
        assert split_command('echo "a\\ b"') == ["echo", '"a\\ b"']

    def test_complex_command(self):
        result = split_command(
            'wine "C:\\\\Program Files\\\\app.exe" --arg1 "value with spaces"'
        )
        assert len(result) == 4
        assert result[0] == "wine"
        assert result[1] == '"C:\\\\Program Files\\\\app.exe"'
        assert result[2] == "--arg1"
        assert result[3] == '"value with spaces"'

    def test_unclosed_quote_does_not_fail(self):
        result = split_command('echo "unclosed')
        assert result == ["echo", '"unclosed']

    def test_unclosed_quote_keeps_whitespace(self):
        assert split_command("echo 'a b  ") == ["echo", "'a b  "]

    def test_lone_quote(self):
        assert split_command('"') == ['"']

    def test_consecutive_quotes(self):
        assert split_command('echo ""') == ["echo", '""']

    def test_quotes_only(self):
        assert split_command('""') == ['""']
        assert split_command("''") == ["''"]

    def test_plain_words_match_str_split(self):
        for command in ["a b c", "  one   two ", "x", "ls -la /tmp   /var"]:
            assert split_command(command) == command.split()

    def test_is_idempotent(self):
        command = "cd /a\\ b 'c d' \"e"
        assert split_command(command) == split_command(command)

    def test_tokenize_alias(self):
        assert tokenize is split_command

    def test_returns_fresh_list(self):
        first = split_command("a b")
        first.append("c")
        assert split_command("a b") == ["a", "b"]


@pytest.mark.unit
def test_quote_state_values():
    assert QuoteState.SINGLE.value == "'"
    assert QuoteState.DOUBLE.value == '"'
    assert QuoteState.NONE.value == "none"


@pytest.mark.unit
class TestPrepareCommandWithSetup:
    """Test cases for prepare_command_with_setup."""

    def test_without_setup(self):
        assert prepare_command_with_setup("wine app.exe", None) == ("wine app.exe", None)
        assert prepare_command_with_setup("wine app.exe", "") == ("wine app.exe", None)

    def test_with_setup(self):
        command, shell = prepare_command_with_setup("wine app.exe", "source env.sh")
        assert command == "source env.sh && wine app.exe"
        assert shell is None

    def test_with_bash_setup(self):
        command, shell = prepare_command_with_setup("make", "/bin/bash -c 'source env.sh'")
        assert command == "/bin/bash -c 'source env.sh' && make"
        assert shell == "/bin/bash"


@pytest.mark.unit
class TestBuildLaunchPlan:
    """Test cases for build_launch_plan."""

    def test_plan_without_affinity(self):
        plan = build_launch_plan('wine "C:\\app.exe" --fullscreen')

        assert plan.argv == ["wine", '"C:\\app.exe"', "--fullscreen"]
        assert plan.executable == "wine"
        assert plan.affinity_mask == 0
        assert plan.affinity_hex == "0"
        assert plan.cpus == []
        assert plan.has_affinity is False
        assert plan.taskset_prefix == ""
        assert plan.shell_command is None
        assert plan.shell_executable is None

    def test_plan_with_affinity(self):
        plan = build_launch_plan("wine app.exe", cpu_list="0,2,3")

        assert plan.affinity_mask == 13
        assert plan.affinity_hex == "d"
        assert plan.cpus == [0, 2, 3]
        assert plan.has_affinity is True
        assert plan.taskset_prefix == ""

    def test_plan_with_taskset(self):
        plan = build_launch_plan("wine app.exe", cpu_list="3,0,2", use_taskset=True)
        assert plan.taskset_prefix == "taskset -c 0,2-3 "

    def test_taskset_needs_cpus(self):
        plan = build_launch_plan("wine app.exe", cpu_list="", use_taskset=True)
        assert plan.taskset_prefix == ""

    def test_plan_with_setup_command(self):
        plan = build_launch_plan(
            "wine app.exe",
            cpu_list="1",
            setup_command="source env.sh",
            use_taskset=True,
        )
        assert plan.shell_command == "source env.sh && taskset -c 1 wine app.exe"
        assert plan.shell_executable is None
        assert plan.argv == ["wine", "app.exe"]

    def test_empty_command_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            build_launch_plan("   ")

        assert exc_info.value.field_name == "command"
