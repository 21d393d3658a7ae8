"""Tests for SkillExecutor."""

import os
import sys

import pytest

from skills_router.skills.executor import (
    FAILED_PREFIX,
    NO_OUTPUT,
    ExecutionStatus,
    SkillExecutor,
    args_to_env,
    resolve_command,
)

posix_only = pytest.mark.skipif(sys.platform.startswith("win"), reason="uses sh")


class TestArgsToEnv:
    """Test argument binding."""
    
    def test_prefix_and_uppercase(self):
        assert args_to_env({"who": "Ada", "count": 5}) == {
            "SKILL_ARG_WHO": "Ada",
            "SKILL_ARG_COUNT": "5",
        }
    
    def test_empty(self):
        assert args_to_env({}) == {}
    
    def test_non_string_values_are_json(self):
        assert args_to_env({"flag": True, "none": None, "items": [1, 2], "n": 5}) == {
            "SKILL_ARG_FLAG": "true",
            "SKILL_ARG_NONE": "null",
            "SKILL_ARG_ITEMS": "[1, 2]",
            "SKILL_ARG_N": "5",
        }
    
    def test_strings_are_not_quoted(self):
        assert args_to_env({"who": "Ada"}) == {"SKILL_ARG_WHO": "Ada"}


class TestResolveCommand:
    """Test script resolution."""
    
    def test_plain_command_passes_through(self, tmp_path):
        assert resolve_command(tmp_path, "echo hi") == "echo hi"
    
    def test_python_script(self, tmp_path):
        (tmp_path / "tool.py").write_text("print('x')")
        
        argv = resolve_command(tmp_path, "tool.py --flag")
        
        assert argv[0] == sys.executable
        assert argv[1].endswith("tool.py")
        assert argv[2:] == ["--flag"]
    
    def test_script_in_scripts_folder(self, tmp_path):
        (tmp_path / "scripts").mkdir()
        (tmp_path / "scripts" / "run.sh").write_text("echo hi")
        
        assert resolve_command(tmp_path, "run.sh") == ["sh", str((tmp_path / "scripts" / "run.sh").resolve())]
    
    @posix_only
    def test_executable_script_runs_directly(self, tmp_path):
        script = tmp_path / "run"
        script.write_text("#!/bin/sh\necho hi\n")
        script.chmod(0o755)
        
        assert resolve_command(tmp_path, "run") == [str(script.resolve())]


@posix_only
class TestSkillExecutor:
    """Test SkillExecutor."""
    
    def test_stdout_returned_verbatim(self, tmp_path):
        (tmp_path / "run.sh").write_text('echo "$SKILL_ARG_WHO"\n')
        
        output = SkillExecutor().execute(tmp_path, "run.sh", {"who": "Ada"})
        
        assert output == "Ada\n"
    
    def test_numeric_argument_stringified(self, tmp_path):
        (tmp_path / "run.sh").write_text('printf "%s" "$SKILL_ARG_X"\n')
        
        assert SkillExecutor().execute(tmp_path, "run.sh", {"x": 5}) == "5"
    
    def test_non_utf8_output_is_replaced(self, tmp_path):
        """Invalid UTF-8 from the script is replaced, not raised."""
        (tmp_path / "run.sh").write_text("printf 'caf\\351\\n'\n")
        
        result = SkillExecutor().run(tmp_path, "run.sh", {})
        
        assert result.status == ExecutionStatus.SUCCESS
        assert result.text.startswith("caf")
        assert "\ufffd" in result.text
    
    def test_runs_in_skill_directory(self, tmp_path):
        output = SkillExecutor().execute(tmp_path, "pwd", {})
        
        assert os.path.realpath(output.strip()) == os.path.realpath(tmp_path)
    
    def test_environment_extends_parent(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SKILLS_ROUTER_TEST_VAR", "inherited")
        
        output = SkillExecutor().execute(tmp_path, 'echo "$SKILLS_ROUTER_TEST_VAR"', {})
        
        assert output == "inherited\n"
    
    def test_stderr_only_is_prefixed_error(self, tmp_path):
        result = SkillExecutor().run(tmp_path, "echo oops 1>&2", {})
        
        assert result.status == ExecutionStatus.ERROR_OUTPUT
        assert result.text == "Error: oops\n"
        assert not result.ok
    
    def test_stdout_wins_over_stderr(self, tmp_path):
        output = SkillExecutor().execute(tmp_path, "echo out; echo err 1>&2", {})
        
        assert output == "out\n"
    
    def test_no_output_sentinel(self, tmp_path):
        result = SkillExecutor().run(tmp_path, "true", {})
        
        assert result.status == ExecutionStatus.NO_OUTPUT
        assert result.text == NO_OUTPUT
        assert result.ok
    
    def test_non_zero_exit_is_text_not_exception(self, tmp_path):
        result = SkillExecutor().run(tmp_path, "echo broken 1>&2; exit 3", {})
        
        assert result.status == ExecutionStatus.FAILED
        assert result.exit_code == 3
        assert result.text.startswith(FAILED_PREFIX)
        assert "broken" in result.text
    
    def test_missing_working_directory(self, tmp_path):
        output = SkillExecutor().execute(tmp_path / "gone", "echo hi", {})
        
        assert output.startswith(FAILED_PREFIX)
    
    def test_timeout(self, tmp_path):
        (tmp_path / "slow.py").write_text("import time\ntime.sleep(10)\n")
        
        result = SkillExecutor(timeout=0.5).run(tmp_path, "slow.py", {})
        
        assert result.status == ExecutionStatus.TIMEOUT
        assert result.text.startswith(FAILED_PREFIX)
    
    def test_per_call_timeout_overrides_default(self, tmp_path):
        (tmp_path / "slow.py").write_text("import time\ntime.sleep(10)\n")
        
        result = SkillExecutor(timeout=None).run(tmp_path, "slow.py", {}, timeout=0.5)
        
        assert result.status == ExecutionStatus.TIMEOUT
