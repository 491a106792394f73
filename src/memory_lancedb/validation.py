from __future__ import annotations

import os
import re
from collections.abc import Iterable, Mapping

from .exceptions import EnvironmentResolutionError, StructuralError

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


def assert_allowed_keys(value: Mapping[str, object], allowed: Iterable[str], label: str) -> None:
    """Reject ``value`` when it carries keys outside ``allowed``; every offender is named."""
    allowed_set = set(allowed)
    unknown = [str(key) for key in value if key not in allowed_set]
    if not unknown:
        return
    raise StructuralError(f"{label} has unknown keys: {', '.join(unknown)}")


def resolve_env_vars(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Expand every ``${NAME}`` in ``value`` from the environment.

    An unset or empty variable fails immediately with
    ``EnvironmentResolutionError`` naming it, as does a value that still holds
    a reference once expansion is done.
    """
    env = os.environ if environ is None else environ

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        resolved = env.get(name)
        if not resolved:
            raise EnvironmentResolutionError(name)
        return resolved

    expanded = _ENV_PATTERN.sub(replace, value)
    # A variable whose value is itself a reference is not expanded again
    leftover = _ENV_PATTERN.search(expanded)
    if leftover:
        name = leftover.group(1)
        raise EnvironmentResolutionError(
            name, f"Unresolved reference ${{{name}}} remains after environment expansion"
        )
    return expanded
