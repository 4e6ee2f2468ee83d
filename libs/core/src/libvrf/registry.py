from __future__ import annotations
"""Family → engine lookup.

Engine packages (``libvrf_rsa``, ``libvrf_ec``) register a class for their
family at import time. The dispatcher only talks to whatever is registered
here, never to an engine module directly.
"""
from typing import Any, Callable, Dict, Optional


class _Registry:
    def __init__(self) -> None:
        self._items: Dict[str, Any] = {}

    def register(self, family: str) -> Callable[[Any], Any]:
        def _inner(engine: Any) -> Any:
            self._items[family] = engine
            return engine
        return _inner

    def get(self, family: str) -> Any:
        return self._items[family]

    def find(self, family: Optional[str]) -> Optional[Any]:
        if not family:
            return None
        return self._items.get(family)

    def list(self) -> Dict[str, Any]:
        return dict(self._items)


registry = _Registry()
