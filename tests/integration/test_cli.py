"""
Integration tests of `smallboats.cli`
"""

from __future__ import annotations

import logging

from smallboats.cli import main
from smallboats.io import OUTPUT_FILENAMES

SOURCE_CSV = """Date,Migrants arrived,Boats arrived
30/12/2025,5,1
31/12/2025,0,0
01/01/2026,10,1
"""


def test_main(tmp_path):
    input_dir = tmp_path / "input_data"
    input_dir.mkdir()
    (input_dir / "source.csv").write_text(SOURCE_CSV)
    output_dir = tmp_path / "output_data"

    res = main(
        [
            "--input-dir",
            str(input_dir),
            "--output-dir",
            str(output_dir),
            "--pattern",
            "*.csv",
            "-q",
        ]
    )

    assert res == 0
    assert sorted(p.name for p in output_dir.iterdir()) == sorted(
        OUTPUT_FILENAMES.values()
    )


def test_main_no_source(tmp_path, caplog):
    caplog.set_level(logging.ERROR)

    res = main(["--input-dir", str(tmp_path), "--output-dir", str(tmp_path / "out")])

    assert res == 1
    assert "Expected exactly one file matching '*.ods'" in caplog.text
    assert not (tmp_path / "out").exists()


def test_main_invalid_counts(tmp_path, caplog):
    caplog.set_level(logging.ERROR)
    (tmp_path / "source.csv").write_text(
        "Date,Migrants arrived,Boats arrived\n01/01/2026,1.5,1\n"
    )

    res = main(
        [
            "--input-dir",
            str(tmp_path),
            "--output-dir",
            str(tmp_path / "out"),
            "--pattern",
            "*.csv",
        ]
    )

    assert res == 1
    assert "migrants_arrived must only contain non-negative integers" in caplog.text
