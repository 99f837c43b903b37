"""Tests that the instruction domain layer stays free of configuration I/O."""

import os
import subprocess
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[3] / "src"

_CHECK = """
import sys
import turncue.features.instructions.domain.component
print("turncue.config.config" in sys.modules)
"""


def test_importing_component_does_not_load_config(tmp_path: Path) -> None:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_ROOT), env.get("PYTHONPATH")]))
    env["TURNCUE_CONFIG_PATH"] = str(tmp_path / "config" / "config.toml")

    result = subprocess.run(
        [sys.executable, "-c", _CHECK],
        capture_output=True,
        text=True,
        env=env,
        cwd=tmp_path,
        check=True,
    )

    assert result.stdout.strip() == "False"
    assert not (tmp_path / "config").exists()
