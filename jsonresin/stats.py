"""Repair statistics.

Aggregates the patches applied over a batch of documents and renders
them as a report, so recurring truncation patterns in a stream of
responses are easy to spot.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable

from jsonresin.repair import RepairResult


@dataclass
class RepairStats:
    """Statistics for a batch of repair operations."""

    total_documents: int = 0
    repaired_documents: int = 0
    empty_documents: int = 0
    repair_rate: float = 0.0
    repairs: dict[str, int] = field(default_factory=lambda: defaultdict(int))


def collect_stats(results: Iterable[RepairResult]) -> RepairStats:
    """Aggregate repair results into statistics."""
    stats = RepairStats()

    for result in results:
        stats.total_documents += 1
        if not result.text:
            stats.empty_documents += 1
        if result.was_repaired:
            stats.repaired_documents += 1
        for kind in result.repairs:
            stats.repairs[kind.value] += 1

    stats.repairs = dict(stats.repairs)
    if stats.total_documents > 0:
        stats.repair_rate = stats.repaired_documents / stats.total_documents * 100

    return stats


def format_repair_report(stats: RepairStats) -> str:
    """Format repair statistics as a human-readable report.

    Args:
        stats: RepairStats object

    Returns:
        Formatted report string
    """
    lines = []

    lines.append("=" * 70)
    lines.append("JSON REPAIR REPORT")
    lines.append("=" * 70)
    lines.append("")

    lines.append(f"Documents:           {stats.total_documents:,}")
    lines.append(f"Repaired:            {stats.repaired_documents:,}")
    lines.append(f"Empty Results:       {stats.empty_documents:,}")
    lines.append(f"Repair Rate:         {stats.repair_rate:.1f}%")
    lines.append("")

    if stats.repairs:
        total = sum(stats.repairs.values())
        lines.append("REPAIRS APPLIED")
        lines.append("-" * 70)
        sorted_repairs = sorted(stats.repairs.items(), key=lambda x: x[1], reverse=True)
        for kind, count in sorted_repairs:
            pct = count / total * 100
            lines.append(f"  {kind:30s}  {count:4d}  ({pct:5.1f}%)")
        lines.append("")
    else:
        lines.append("No repairs applied.")
        lines.append("")

    lines.append("=" * 70)
    return "\n".join(lines)
