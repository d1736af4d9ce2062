"""
Decode helpers built on the repairing parser.

Wraps repair() with validation against the standard json module so
callers can ask for a usable document in one step, either raising on
failure or getting an error string back.
"""

import json
from typing import Any, List, Tuple

from jsonresin.logger import get_logger
from jsonresin.repair import RepairKind, repair_with_report

logger = get_logger("loads")


def _reject_constant(name: str):
    raise ValueError(f"Invalid constant: {name}")


def validate_json(content: str) -> Tuple[bool, str]:
    """
    Validate JSON syntax.

    NaN, Infinity and -Infinity are not JSON and fail validation, as does
    nesting deeper than the decoder can follow.

    Args:
        content: JSON string to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        json.loads(content, parse_constant=_reject_constant)
        return True, ""
    except json.JSONDecodeError as e:
        return False, f"Line {e.lineno}: {e.msg}"
    except ValueError as e:
        return False, str(e)
    except RecursionError:
        return False, "Maximum nesting depth exceeded"


def repair_json(text: str) -> Tuple[str, bool, List[RepairKind]]:
    """
    Return a decodable JSON document for text, repairing it if needed.

    Args:
        text: Potentially truncated or malformed JSON string

    Returns:
        Tuple of (json_str, was_repaired, repairs)
        - json_str: Valid JSON string
        - was_repaired: True if the repairing parser had to be used
        - repairs: RepairKind values applied, in order

    Raises:
        ValueError: If no object or array could be recovered
    """
    is_valid, _ = validate_json(text)
    if is_valid:
        return text, False, []

    result = repair_with_report(text)
    if not result.text:
        raise ValueError("No JSON object or array found in input")

    is_valid, error = validate_json(result.text)
    if not is_valid:
        raise ValueError(f"Repaired JSON is still invalid: {error}")

    logger.debug(
        "repair.applied",
        input_length=len(text),
        output_length=len(result.text),
        repairs=[kind.value for kind in result.repairs],
    )
    return result.text, True, result.repairs


def safe_repair_json(text: str) -> Tuple[str, str, bool, List[RepairKind]]:
    """
    Safe wrapper around repair_json that never raises.

    Returns:
        Tuple of (json_str, error, was_repaired, repairs)
        - json_str: Repaired JSON or empty string on failure
        - error: Error message or empty string on success
    """
    try:
        repaired, was_repaired, repairs = repair_json(text)
        return repaired, "", was_repaired, repairs
    except ValueError as e:
        return "", str(e), False, []


def repair_loads(text: str) -> Any:
    """
    Repair text and decode it.

    Raises:
        ValueError: If no object or array could be recovered
    """
    repaired, _, _ = repair_json(text)
    return json.loads(repaired)
