from __future__ import annotations

from typing import Mapping, Protocol


class NavigatorPort(Protocol):
    def read_query(self) -> Mapping[str, str]: ...

    def replace(self, query: Mapping[str, str]) -> None: ...

    def push(self, query: Mapping[str, str]) -> None: ...
