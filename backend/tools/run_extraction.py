from __future__ import annotations

import argparse
import csv
import json
import os
from glob import glob
from typing import Any, Dict, List

from licence_ocr.ocr.labels import CANONICAL_FIELDS
from licence_ocr.ocr.text_utils import fix_arabic_text
from licence_ocr.services.extraction import extract_fields_from_ocr


def collect_transcripts(source: str) -> List[str]:
    if os.path.isfile(source):
        return [source]
    paths = glob(os.path.join(source, "*.txt"))
    paths.sort()
    return paths


def evaluate(paths: List[str], out_csv: str, min_conf: float, display: bool = False) -> List[Dict[str, Any]]:
    out_dir = os.path.dirname(out_csv)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    report: List[Dict[str, Any]] = []
    with open(out_csv, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["file", "field", "value", "confidence", "meets_threshold"])
        for path in paths:
            name = os.path.basename(path)
            try:
                with open(path, "r", encoding="utf-8") as tf:
                    text = tf.read()
            except (OSError, UnicodeDecodeError) as e:
                w.writerow([name, "<error>", str(e), "", ""])
                continue
            result = extract_fields_from_ocr(text, min_conf)
            for field in CANONICAL_FIELDS:
                value = result.fields[field]
                conf = result.confidences[field]
                w.writerow([name, field, value, conf, str(conf >= min_conf).lower()])
            entry = result.to_dict()
            entry["file"] = name
            if display:
                entry["fields"] = {k: fix_arabic_text(v) for k, v in entry["fields"].items()}
            report.append(entry)
    return report


def main() -> int:
    ap = argparse.ArgumentParser(description="Extract licence fields from OCR transcripts (.txt)")
    ap.add_argument("source", help="Transcript file or folder of .txt transcripts")
    ap.add_argument("--out", default=os.path.join("backend", "reports", "extraction", "fields.csv"))
    ap.add_argument("--min-conf", type=float, default=60.0)
    ap.add_argument("--json", action="store_true", help="Also print the per-file results as JSON")
    ap.add_argument("--display", action="store_true", help="Reshape Arabic values for terminal display")
    args = ap.parse_args()

    paths = collect_transcripts(args.source)
    report = evaluate(paths, args.out, args.min_conf, display=args.display)
    if args.json:
        print(json.dumps(report, ensure_ascii=False, indent=2))
    print(f"Wrote {args.out} ({len(paths)} transcripts)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
