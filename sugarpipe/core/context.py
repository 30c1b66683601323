from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from ..config import Config
from .log import get_logger

if TYPE_CHECKING:
    from .log import StructlogLogger


class Context:
    """
    A dict-like scratchpad shared by the stages of one materialization.

    A fresh Context is built every time a query is materialized, so counters
    never leak from one evaluation into the next.
    """

    def __init__(
        self,
        initial_data: Optional[Dict[str, Any]] = None,
        *,
        config: Optional[Config] = None,
        query_name: str = "Query",
    ):
        self._data: Dict[str, Any] = {}
        self.config = config or Config({})
        self.query_name = query_name
        self.logger: "StructlogLogger" = get_logger(f"sugarpipe.query.{query_name}")

        if initial_data:
            self.update(initial_data)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def update(self, other: Dict[str, Any]) -> None:
        for k, v in other.items():
            self._data[k] = v

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def inc(self, key: str, amount: int = 1) -> int:
        new_value = int(self._data.get(key, 0)) + amount
        self._data[key] = new_value
        return new_value

    def __repr__(self) -> str:
        return f"Context(query_name='{self.query_name}', data={self.to_dict()})"
