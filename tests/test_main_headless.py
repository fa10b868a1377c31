from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from falling.__main__ import main

SRC = Path(__file__).resolve().parents[1] / "src"


def test_headless_entrypoint_exits_successfully():
    env = os.environ.copy()
    env["FALLING_HEADLESS"] = "1"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))
    cmd = [sys.executable, "-m", "falling", "--max-steps", "3", "--tick-rate", "0", "--seed", "1"]
    proc = subprocess.run(cmd, capture_output=True, text=True, env=env, timeout=20)

    assert proc.returncode == 0, proc.stderr
    assert "Loop complete (steps=3" in proc.stdout


def test_main_headless_stochastic(capsys):
    code = main(["--headless", "--mode", "stochastic", "--seed", "9", "--max-steps", "30", "--tick-rate", "0"])
    assert code == 0
    assert "Loop complete" in capsys.readouterr().out


def test_main_reports_invalid_config(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("playfield:\n  width: 20\n", encoding="utf-8")
    assert main(["--headless", "--config", str(path), "--max-steps", "1"]) == 2


def test_main_reports_mistyped_config_values(tmp_path):
    path = tmp_path / "typo.yaml"
    path.write_text("seed: abc\nauto_reset: no\n", encoding="utf-8")
    assert main(["--headless", "--config", str(path), "--max-steps", "1"]) == 2
