#!/usr/bin/env python3
"""Run the normalization benchmark and write release-gate artifacts.

Manifest format (JSONL):
{"id": "case-001", "text": "Giá 50.000đ", "expected": "giá năm mươi nghìn đồng"}
"""

from __future__ import annotations

import argparse
import csv
import json
import subprocess
import sys
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from vispeak.config import load_config
from vispeak.core import NormalizationPipeline, build_pipeline
from vispeak.eval import character_error_rate, summarize_metrics


@dataclass(frozen=True)
class BenchmarkCase:
    case_id: str
    text: str
    expected: str


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run vispeak benchmark and save artifacts.")
    parser.add_argument("--manifest", required=True, help="Path to benchmark JSONL manifest")
    parser.add_argument("--output-root", default="eval/runs", help="Artifact root directory")
    parser.add_argument(
        "--env",
        default=None,
        help="Configuration profile to load (default: VISPEAK_ENV or dev)",
    )
    return parser.parse_args()


def load_manifest(path: Path) -> list[BenchmarkCase]:
    cases: list[BenchmarkCase] = []
    for line_num, raw_line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        payload = json.loads(line)
        cases.append(
            BenchmarkCase(
                case_id=str(payload.get("id") or f"line-{line_num}"),
                text=str(payload["text"]),
                expected=str(payload["expected"]),
            )
        )
    return cases


def run_benchmark(cases: list[BenchmarkCase], pipeline: NormalizationPipeline) -> dict[str, Any]:
    error_rates: list[float] = []
    chunk_lengths: list[int] = []
    rows: list[dict[str, Any]] = []
    exact_matches = 0
    total_runtime_sec = 0.0
    total_input_chars = 0

    for case in cases:
        started = time.perf_counter()
        result = pipeline.run(case.text)
        elapsed = time.perf_counter() - started

        cer = character_error_rate(result.normalized, case.expected)
        exact = result.normalized == case.expected
        error_rates.append(cer)
        chunk_lengths.extend(len(chunk) for chunk in result.chunks)
        exact_matches += int(exact)
        total_runtime_sec += elapsed
        total_input_chars += len(case.text)

        rows.append(
            {
                "case_id": case.case_id,
                "runtime_sec": round(elapsed, 6),
                "input_chars": len(case.text),
                "output_chars": len(result.normalized),
                "chunks": len(result.chunks),
                "cer": round(cer, 4),
                "exact_match": exact,
                "normalized": result.normalized,
                "expected": case.expected,
            }
        )

    summary = summarize_metrics(
        error_rates,
        exact_matches=exact_matches,
        chunk_lengths=chunk_lengths,
        total_runtime_sec=total_runtime_sec,
        total_input_chars=total_input_chars,
    )
    return {"summary": summary, "rows": rows}


def write_artifacts(output_root: Path, *, manifest: Path, result: dict[str, Any]) -> Path:
    timestamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%SZ")
    git_sha = _git_sha()
    out_dir = output_root / f"{timestamp}_{git_sha[:8]}"
    out_dir.mkdir(parents=True, exist_ok=True)

    metrics_payload = {
        "generated_at": datetime.now(UTC).isoformat(),
        "git_sha": git_sha,
        "manifest_path": str(manifest),
        "summary": result["summary"],
    }
    (out_dir / "metrics.json").write_text(
        json.dumps(metrics_payload, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )

    with (out_dir / "per_case.csv").open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(
            handle, fieldnames=list(result["rows"][0].keys()) if result["rows"] else []
        )
        if result["rows"]:
            writer.writeheader()
            writer.writerows(result["rows"])

    command_payload = {"command": " ".join([sys.executable, *sys.argv])}
    (out_dir / "run.json").write_text(
        json.dumps(command_payload, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return out_dir


def _git_sha() -> str:
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            check=True,
            text=True,
            capture_output=True,
        )
        return proc.stdout.strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"


def main() -> int:
    args = parse_args()
    manifest = Path(args.manifest)
    cases = load_manifest(manifest)
    pipeline = build_pipeline(load_config(args.env))
    result = run_benchmark(cases, pipeline)
    out_dir = write_artifacts(Path(args.output_root), manifest=manifest, result=result)
    print(json.dumps(result["summary"], indent=2))
    print(f"Artifacts written to: {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
