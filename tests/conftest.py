"""
Pytest configuration and shared fixtures for myshell tests.

This module provides reusable test fixtures for:
- Temporary PATH directories with fake executables
- Session contexts rooted in a temporary directory
- Captured output streams and shells fed from in-memory input
"""

import io

import pytest


# ============================================================================
# Helper Functions
# ============================================================================

def make_script(directory, name: str, body: str, executable: bool = True):
    """
    Create a /bin/sh script in ``directory``.

    Args:
        directory: pathlib.Path to create the script in
        name: File name
        body: Script body (without the shebang)
        executable: Set the executable bits

    Returns:
        pathlib.Path of the script
    """
    script = directory / name
    script.write_text("#!/bin/sh\n" + body)
    mode = 0o755 if executable else 0o644
    script.chmod(mode)
    return script


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def bin_dir(tmp_path):
    """
    Provides a directory of fake executables.

    Contents:
        hello     prints "hello from script"
        showargs  prints "args:" followed by its arguments
        showcwd   prints its working directory
        fail      prints "partial" and exits with status 3
        notexec   exists but is not executable
    """
    directory = tmp_path / "bin"
    directory.mkdir()
    make_script(directory, "hello", 'echo "hello from script"\n')
    make_script(directory, "showargs", 'echo "args:$*"\n')
    make_script(directory, "showcwd", 'pwd -P\n')
    make_script(directory, "fail", 'echo partial\nexit 3\n')
    make_script(directory, "notexec", 'echo never\n', executable=False)
    return directory


@pytest.fixture
def home_dir(tmp_path):
    """Provides a directory used as $HOME."""
    directory = tmp_path / "home"
    directory.mkdir()
    return directory


@pytest.fixture
def work_dir(tmp_path):
    """Provides a working directory with one subdirectory and one file."""
    directory = tmp_path / "work"
    directory.mkdir()
    (directory / "subdir").mkdir()
    (directory / "file.txt").write_text("File content")
    return directory


@pytest.fixture
def test_env(bin_dir, home_dir):
    """Environment with PATH pointing at bin_dir and HOME at home_dir."""
    return {
        'PATH': str(bin_dir),
        'HOME': str(home_dir),
    }


@pytest.fixture
def context(test_env, work_dir):
    """
    Provides a CommandContext rooted in work_dir.

    Example:
        def test_pwd(context):
            assert context.cwd.endswith('work')
    """
    from myshell.context import CommandContext
    from myshell.path_manager import PathManager

    return CommandContext(env=test_env, path_manager=PathManager(str(work_dir)))


@pytest.fixture
def output():
    """Provides an in-memory OutputStream."""
    from myshell.streams import OutputStream

    return OutputStream.to_buffer()


@pytest.fixture
def run_builtin(context, output):
    """
    Runs a builtin by token list and returns (exit_code, output_text).

    Example:
        def test_echo(run_builtin):
            code, text = run_builtin(['echo', 'hi'])
            assert text == 'hi\\n'
    """
    from myshell.builtins import get_builtin
    from myshell.process import Process

    def run(tokens):
        process = Process(
            command=tokens[0],
            args=tokens[1:],
            stdout=output,
            executor=get_builtin(tokens[0]),
            context=context,
        )
        code = process.execute()
        return code, output.getvalue()

    return run


@pytest.fixture
def make_shell(test_env, work_dir):
    """
    Builds a Shell reading from the given input text.

    Example:
        def test_loop(make_shell):
            shell = make_shell("echo hi\\n")
    """
    from myshell.config import ShellConfig
    from myshell.shell import Shell
    from myshell.streams import OutputStream

    def build(input_text: str = "", env=None):
        return Shell(
            config=ShellConfig(),
            initial_env=test_env if env is None else env,
            initial_cwd=str(work_dir),
            stdin=io.StringIO(input_text),
            stdout=OutputStream.to_buffer(),
        )

    return build


# Make helper functions available as pytest helpers
pytest.make_script = make_script
