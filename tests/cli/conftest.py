"""Fixtures and helpers for CLI tests."""

import os
from pathlib import Path
import subprocess
import sys
from typing import List, Optional, Tuple

import pytest


class CLIRunner:
    """Helper class for running CLI commands and capturing output."""

    def __init__(self, timeout: int = 60):
        """Initialize CLI runner with timeout."""
        self.timeout = timeout
        # Wide terminal so rich output is not wrapped mid-message
        self.env = {**os.environ, 'COLUMNS': '200'}

    def run_command(
        self,
        cmd: List[str],
        cwd: Optional[Path] = None,
        input_data: Optional[str] = None,
    ) -> Tuple[int, str, str]:
        """
        Run a command and return (exit_code, stdout, stderr).

        Args:
            cmd: Command and arguments to run
            cwd: Working directory for command
            input_data: Data to pass to stdin

        Returns:
            Tuple of (exit_code, stdout, stderr)
        """
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                cwd=cwd,
                input=input_data,
                env=self.env,
            )
            return result.returncode, result.stdout, result.stderr
        except subprocess.TimeoutExpired:
            return -1, '', f'Command timed out after {self.timeout} seconds'

    def run_fastacheck(
        self,
        args: List[str],
        cwd: Optional[Path] = None,
        input_data: Optional[str] = None,
    ) -> Tuple[int, str, str]:
        """
        Run fastacheck with the current interpreter.

        Args:
            args: Arguments to pass to fastacheck
            cwd: Working directory
            input_data: Data to pass to stdin

        Returns:
            Tuple of (exit_code, stdout, stderr)
        """
        cmd = [sys.executable, '-m', 'fastacheck'] + args
        return self.run_command(cmd, cwd=cwd, input_data=input_data)


@pytest.fixture
def cli_runner():
    """Provide CLI runner instance."""
    return CLIRunner()


@pytest.fixture
def assert_exit_code():
    """Assert exit code matches expected, with helpful error message."""

    def _assert(exit_code: int, expected: int, stdout: str, stderr: str):
        if exit_code != expected:
            msg = f'Expected exit code {expected}, got {exit_code}'
            if stdout:
                msg += f'\nSTDOUT:\n{stdout}'
            if stderr:
                msg += f'\nSTDERR:\n{stderr}'
            pytest.fail(msg)

    return _assert
