import os
import subprocess
import sys
from pathlib import Path

import pytest

torch = pytest.importorskip("torch")

REPO_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = REPO_ROOT / "src"


def _env_with_src() -> dict[str, str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_PATH)
    env["MPLBACKEND"] = "Agg"
    return env


def _run(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, *args],
        cwd=REPO_ROOT,
        env=_env_with_src(),
        check=True,
        capture_output=True,
        text=True,
    )


def test_swedish_auto_insurance_script(tmp_path) -> None:
    save_path = tmp_path / "nn1.nnet"
    result = _run(
        [
            "scripts/swedish_auto_insurance.py",
            "--seed",
            "0",
            "--max-iterations",
            "10",
            "--device",
            "cpu",
            "--save-path",
            str(save_path),
        ]
    )
    assert save_path.exists()
    assert "Training completed." in result.stdout
    assert "Mean absolute error is: " in result.stdout
    assert "Network outputs for test set" in result.stdout


def test_prepare_and_train_wine_workflow(tmp_path) -> None:
    header = ";".join(f'"feature {i}"' for i in range(11)) + ';"quality"'
    rows = [";".join(f"{(i + 1) * (j + 1) * 0.1:.3f}" for j in range(11)) + f";{3 + i % 5}" for i in range(20)]
    raw = tmp_path / "winequality-white.csv"
    raw.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")

    prepared = _run(
        ["scripts/prepare_datasets.py", "--source", str(raw), "--out-dir", str(tmp_path)]
    )
    assert "Wrote 20 rows" in prepared.stdout
    wine_path = tmp_path / "wine.txt"
    assert wine_path.exists()

    save_path = tmp_path / "wine.nnet"
    result = _run(
        [
            "scripts/wine_quality_classification.py",
            "--data-path",
            str(wine_path),
            "--hidden-layers",
            "6",
            "--max-iterations",
            "2",
            "--device",
            "cpu",
            "--progress",
            "none",
            "--no-outputs",
            "--save-path",
            str(save_path),
        ]
    )
    assert save_path.exists()
    assert "Confusion matrix:" in result.stdout
    assert result.stdout.strip().endswith("Done.")
