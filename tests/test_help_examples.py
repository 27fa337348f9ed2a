from __future__ import annotations

import subprocess
import sys


def test_help_example_validator_passes() -> None:
    proc = subprocess.run(
        [sys.executable, "scripts/validate_help_examples.py"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert proc.returncode == 0, proc.stdout + proc.stderr
    assert "help example validation passed" in proc.stdout
