"""Property reconciliation — descriptor properties to server configuration.

Resolution order per property:

1. an override supplied by the caller for this run,
2. the descriptor's literal value,
3. an interactive prompt (offering the descriptor default),
4. otherwise the property is skipped.

Skipping is best effort, not an error: a property with no source of truth
simply does not appear in the result.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from distrosync.core.ports import PromptService
from distrosync.models.descriptor import DistroDescriptor

logger = logging.getLogger(__name__)


def reconcile_properties(
    descriptor: DistroDescriptor | None,
    overrides: Mapping[str, str] | None = None,
    prompt: PromptService | None = None,
) -> dict[str, str]:
    """Return the property values to store on the server."""
    resolved: dict[str, str] = {}
    if descriptor is None:
        return resolved
    overrides = overrides or {}

    for name, prop in descriptor.properties.items():
        if name in overrides:
            resolved[name] = overrides[name]
        elif prop.value is not None:
            resolved[name] = prop.value
        elif prop.prompt is not None and prompt is not None:
            resolved[name] = prompt.prompt(prop.prompt, prop.default)
        else:
            logger.debug("Skipping property %s: no override, value or prompt", name)

    return resolved
