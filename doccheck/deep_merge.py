"""Logic for overlaying user configuration onto defaults."""

import copy
from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return a new dictionary with update merged over base.

    Nested dictionaries merge recursively; scalars and lists in update
    replace the value in base. Neither input is modified.
    """
    result = copy.deepcopy(base)
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result
