"""Simple launcher for the City Metro console.

Runs ``python -m city_metro.cli`` with the project's virtualenv
interpreter when one exists, otherwise with the current interpreter.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path


def main() -> int:
    project_root = Path(__file__).resolve().parent

    venv_python = project_root / ".venv" / "bin" / "python"
    if not venv_python.exists():
        venv_python = project_root / ".venv" / "Scripts" / "python.exe"

    python_exe = str(venv_python) if venv_python.exists() else sys.executable
    cmd = [python_exe, "-m", "city_metro.cli"]
    completed = subprocess.run(cmd, cwd=project_root, check=False)
    return completed.returncode


if __name__ == "__main__":
    sys.exit(main())
