import importlib

import pandas as pd


def test_main_writes_summary_csv(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main = importlib.import_module("main")

    csv_path = tmp_path / "replicates.csv"
    pd.DataFrame(
        {
            "length_cm": [12.31, 12.28, 12.35, 12.30],
            "offset_mV": [-0.5, 0.1, 0.4, -0.1],
            "note": ["a", "b", "c", "d"],
        }
    ).to_csv(csv_path, index=False)
    outdir = tmp_path / "out"

    code = main.main(["--input", str(csv_path), "--outdir", str(outdir), "--norm", "l1"])

    assert code == 0
    summary = pd.read_csv(outdir / "summary.csv", index_col="quantity")
    assert list(summary.index) == ["length_cm", "offset_mV"]
    assert summary.loc["length_cm", "n"] == 4
    assert pd.isna(summary.loc["offset_mV", "geometric_mean"])


def test_main_missing_input(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main = importlib.import_module("main")
    assert main.main(["--input", str(tmp_path / "missing.csv")]) == 1
