from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class InvocationEvent(Mapping[str, Any]):
    """
    Read-only view over the event supplied by the runtime.

    The handler has no schema to enforce, so any content is accepted.
    Payloads that are not JSON objects are exposed under the ``payload`` key.
    """

    data: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_raw(cls, raw: Any) -> "InvocationEvent":
        if isinstance(raw, InvocationEvent):
            return raw
        if raw is None:
            return cls()
        if isinstance(raw, Mapping):
            return cls(data=MappingProxyType(raw))
        return cls(data=MappingProxyType({"payload": raw}))

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return repr(dict(self.data))
