"""Deep merging of JSON trees with pluggable conflict strategies.

:func:`merge_with` walks the incoming tree and, for every key, asks a
*customizer* how to combine the existing value with the incoming one.  A
customizer returning ``None`` defers to the standard recursive merge:

* dict into dict merges key by key,
* list into list merges index by index,
* anything else is replaced by a copy of the incoming value.

Three customizers ship with the package: :func:`concat_arrays` (the default
for the JSON helpers on :class:`~scaffoldkit.scaffolder.generator.Generator`),
:func:`append_scripts` and :func:`prepend_scripts`.
"""

from __future__ import annotations

import copy
from typing import Any, Protocol

SCRIPT_SEPARATOR = " && "


class MergeCustomizer(Protocol):
    """Strategy deciding how two values at the same path are combined."""

    def __call__(self, existing: Any, incoming: Any) -> Any:
        """Return the merged value, or ``None`` to use the standard merge."""
        ...


def merge_with(
    obj: dict[str, Any],
    src: dict[str, Any],
    customizer: MergeCustomizer | None = None,
) -> dict[str, Any]:
    """Deep-merge *src* into *obj* in place and return *obj*.

    Args:
        obj: Destination tree.  Mutated.
        src: Tree with the values to merge in.  Never mutated; values taken
            from it are copied.
        customizer: Optional strategy consulted for every key of *src*.

    Returns:
        The mutated *obj*.
    """
    for key, incoming in src.items():
        existing = obj.get(key)
        obj[key] = _merge_value(existing, incoming, customizer)
    return obj


def _merge_value(existing: Any, incoming: Any, customizer: MergeCustomizer | None) -> Any:
    if customizer is not None:
        result = customizer(existing, incoming)
        if result is not None:
            return result

    if isinstance(existing, dict) and isinstance(incoming, dict):
        return merge_with(existing, incoming, customizer)

    if isinstance(existing, list) and isinstance(incoming, list):
        merged = list(existing)
        for index, item in enumerate(incoming):
            if index < len(merged):
                merged[index] = _merge_value(merged[index], item, customizer)
            else:
                merged.append(_merge_value(None, item, customizer))
        return merged

    if isinstance(incoming, dict):
        # Fresh container so nested customizers still get a say.
        return merge_with({}, incoming, customizer)

    return copy.deepcopy(incoming)


# ---------------------------------------------------------------------------
# Customizers
# ---------------------------------------------------------------------------


def concat_arrays(existing: Any, incoming: Any) -> list[Any] | None:
    """Concatenate lists found at the same path instead of merging by index."""
    if isinstance(existing, list) and isinstance(incoming, list):
        return existing + copy.deepcopy(incoming)
    return None


def append_scripts(existing: Any, incoming: Any) -> str | None:
    """Join two script commands, running the existing one first."""
    if isinstance(existing, str) and isinstance(incoming, str):
        return f"{existing}{SCRIPT_SEPARATOR}{incoming}"
    return None


def prepend_scripts(existing: Any, incoming: Any) -> str | None:
    """Join two script commands, running the incoming one first."""
    if isinstance(existing, str) and isinstance(incoming, str):
        return f"{incoming}{SCRIPT_SEPARATOR}{existing}"
    return None
