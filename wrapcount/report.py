from __future__ import annotations

from typing import Any

from .check import VerificationReport


def format_report(report: VerificationReport) -> str:
    """Human-readable report for terminal output."""
    lines = []
    status = "PASS" if report.passed else "FAIL"
    lines.append(f"{report.spec_name} — {status}")

    errors = report.check.errors
    if errors:
        lines.append(f"  × {len(errors)} axiom error{'s' if len(errors) > 1 else ''}")
        for diag in errors:
            axiom_str = f" axiom '{diag.axiom}':" if diag.axiom else ""
            lines.append(f"    - [{diag.check}]{axiom_str} {diag.message}")
    else:
        lines.append(f"  ✓ {report.axiom_count} axioms hold")

    if report.violations:
        lines.append(
            f"  × {len(report.violations)} contract violation"
            f"{'s' if len(report.violations) > 1 else ''}"
        )
        for v in report.violations:
            lines.append(f"    - {v}")
    else:
        lines.append(f"  ✓ {report.contract_count} contracts hold")

    warnings = report.check.warnings
    if warnings:
        lines.append(f"  ⚠ {len(warnings)} warning{'s' if len(warnings) > 1 else ''}")
        for diag in warnings:
            axiom_str = f" axiom '{diag.axiom}':" if diag.axiom else ""
            lines.append(f"    - [{diag.check}]{axiom_str} {diag.message}")

    return "\n".join(lines)


def report_json(report: VerificationReport) -> dict[str, Any]:
    """Machine-readable report for pipeline integration."""
    return {
        "spec_name": report.spec_name,
        "passed": report.passed,
        "axiom_count": report.axiom_count,
        "contract_count": report.contract_count,
        "error_count": len(report.check.errors),
        "warning_count": len(report.check.warnings),
        "diagnostics": [
            {
                "check": d.check,
                "severity": d.severity.value,
                "axiom": d.axiom,
                "message": d.message,
                "path": d.path,
            }
            for d in report.check.diagnostics
        ],
        "violations": [
            {
                "operation": v.operation,
                "args": list(v.call_args),
                "result": v.result,
                "clause": v.clause,
                "error": v.error,
            }
            for v in report.violations
        ],
    }
