"""Root pytest configuration.

Besides the Python suites under tests/, any ``*_test.sh`` file is collected
and run as a test item.  Scripts run from the repository root with
``$PYTHON`` pointing at the interpreter running pytest, so they can call
``"$PYTHON" -m sge_acct.cli`` without an installed console script.
"""

import os
import subprocess
import sys

import pytest


class ShellScriptError(Exception):
    def __init__(self, result):
        self.result = result


class ShellScriptItem(pytest.Item):
    def runtest(self):
        env = {**os.environ, "PYTHON": sys.executable}
        result = subprocess.run(
            ["bash", str(self.path)],
            capture_output=True,
            text=True,
            cwd=self.config.rootpath,
            env=env,
        )
        if result.stdout.strip():
            self.add_report_section("call", "stdout", result.stdout.rstrip())
        if result.stderr.strip():
            self.add_report_section("call", "stderr", result.stderr.rstrip())
        if result.returncode != 0:
            raise ShellScriptError(result)

    def repr_failure(self, excinfo):
        r = excinfo.value.result
        lines = [f"Shell script failed (exit {r.returncode}): {self.path.name}"]
        if r.stdout.strip():
            lines += ["--- stdout ---", r.stdout.rstrip()]
        if r.stderr.strip():
            lines += ["--- stderr ---", r.stderr.rstrip()]
        return "\n".join(lines)

    def reportinfo(self):
        return self.path, None, f"shell: {self.path.name}"


class ShellScriptFile(pytest.File):
    def collect(self):
        yield ShellScriptItem.from_parent(self, name=self.path.name)


def pytest_collect_file(parent, file_path):
    """Collect *_test.sh files as shell-script test items."""
    if file_path.suffix == ".sh" and file_path.name.endswith("_test.sh"):
        return ShellScriptFile.from_parent(parent, path=file_path)
