import csv
import os

from tools.run_extraction import collect_transcripts, evaluate


def test_evaluate_writes_csv_and_report(tmp_path, licence_transcript):
    src = tmp_path / "in"
    src.mkdir()
    (src / "b.txt").write_text(licence_transcript, encoding="utf-8")
    (src / "a.txt").write_text("", encoding="utf-8")
    (src / "notes.md").write_text("ignored", encoding="utf-8")

    paths = collect_transcripts(str(src))
    assert [os.path.basename(p) for p in paths] == ["a.txt", "b.txt"]

    out_csv = tmp_path / "out" / "fields.csv"
    report = evaluate(paths, str(out_csv), 60.0)
    assert [e["file"] for e in report] == ["a.txt", "b.txt"]
    assert report[1]["fields"]["id_number"] == "CT801898"

    with open(out_csv, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["file", "field", "value", "confidence", "meets_threshold"]
    assert len(rows) == 1 + 2 * 8
    assert ["b.txt", "licence_number", "06/269094", "100", "true"] in rows


def test_collect_single_file(tmp_path):
    p = tmp_path / "one.txt"
    p.write_text("x", encoding="utf-8")
    assert collect_transcripts(str(p)) == [str(p)]
