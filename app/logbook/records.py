"""Field access on log records: ORM rows, plain objects or mappings."""

from typing import Any, Mapping


def field(log: Any, name: str, default: Any = None) -> Any:
    if isinstance(log, Mapping):
        return log.get(name, default)
    return getattr(log, name, default)
