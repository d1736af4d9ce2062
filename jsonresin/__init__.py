"""jsonresin - repair truncated or malformed JSON from interrupted streams."""

from .loads import repair_json, repair_loads, safe_repair_json, validate_json
from .repair import (
    ContainerKind,
    RepairingParser,
    RepairKind,
    RepairResult,
    repair,
    repair_with_report,
)

__all__ = [
    "repair",
    "repair_with_report",
    "RepairResult",
    "RepairKind",
    "RepairingParser",
    "ContainerKind",
    "repair_json",
    "safe_repair_json",
    "repair_loads",
    "validate_json",
]
