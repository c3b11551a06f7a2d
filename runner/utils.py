from __future__ import annotations

from pathlib import Path

from runner.types import Probe, SmokeError


def percentile(values: list[float], p: float) -> float:
    """Compute the p-th percentile using linear interpolation."""
    if not values:
        return 0.0
    s = sorted(values)
    k = (len(s) - 1) * p
    f = int(k)
    c = min(f + 1, len(s) - 1)
    if f == c:
        return s[f]
    d0 = s[f] * (c - k)
    d1 = s[c] * (k - f)
    return d0 + d1


def collect_public(public_dir: Path) -> tuple[list[str], list[str]]:
    """Return (files, directories) under the public dir as sorted POSIX relative paths."""
    if not public_dir.is_dir():
        raise SmokeError(f"public directory not found: {public_dir}")
    files: list[str] = []
    dirs: list[str] = []
    for p in sorted(public_dir.rglob("*")):
        rel = p.relative_to(public_dir).as_posix()
        if p.is_file():
            files.append(rel)
        elif p.is_dir():
            dirs.append(rel)
    return files, dirs


def summarize(probes: list[Probe]) -> tuple[dict, int]:
    """Compute summary dict and an exit code from the probe results."""
    durations_ms = [pr.elapsed_ms for pr in probes]
    passed = [pr for pr in probes if pr.passed]
    failures_detail: list[dict] = []
    per_status: dict[int, int] = {}

    for pr in probes:
        per_status[pr.status] = per_status.get(pr.status, 0) + 1
        if pr.passed:
            continue
        failures_detail.append(
            {
                "path": pr.path,
                "expected_status": pr.expected_status,
                "status": pr.status,
                "body_matches": pr.expected_body is None or pr.body == pr.expected_body,
            }
        )

    avg_ms = (sum(durations_ms) / len(durations_ms)) if durations_ms else 0.0
    summary = {
        "component": "runner",
        "event": "summary",
        "requests": len(probes),
        "passed_count": len(passed),
        "failed_count": len(probes) - len(passed),
        "timings": {
            "avg_ms": round(avg_ms, 2),
            "p95_ms": round(percentile(durations_ms, 0.95), 2),
            "max_ms": round(max(durations_ms) if durations_ms else 0.0, 2),
        },
        "per_status": per_status,
        "failures": failures_detail,
    }
    exit_code = 0 if (probes and not failures_detail) else 1
    return summary, exit_code
