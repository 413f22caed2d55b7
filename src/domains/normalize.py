from __future__ import annotations
from typing import Any, Optional, Tuple

def _lc(x: Any) -> str:
    return str(x).strip().lower()

def normalize_bool(value: Any) -> Tuple[bool, Any, Optional[str]]:
    if value is None or value == "":
        return False, None, "Value is required."
    if isinstance(value, bool):
        return True, value, None
    s = _lc(value)
    if s in {"y", "yes", "true", "on", "1"}:
        return True, True, None
    if s in {"n", "no", "false", "off", "0"}:
        return True, False, None
    return False, None, f"Invalid boolean: {value}"

def normalize_int(value: Any, min_val: Optional[int] = None, max_val: Optional[int] = None) -> Tuple[bool, Any, Optional[str]]:
    if value is None or value == "":
        return False, None, "Value is required."
    if isinstance(value, bool):
        return False, None, f"Expected integer, got: {value}"
    try:
        iv = int(str(value).strip())
    except ValueError:
        return False, None, f"Expected integer, got: {value}"
    if min_val is not None and iv < min_val:
        return False, None, f"Minimum is {min_val}"
    if max_val is not None and iv > max_val:
        return False, None, f"Maximum is {max_val}"
    return True, iv, None
