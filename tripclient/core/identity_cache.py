from typing import Dict, Optional


class IdentityCache:
    """Session scoped map from external auth ids to backend user ids."""

    def __init__(self):
        self._store: Dict[str, str] = {}

    def get(self, external_id: str) -> Optional[str]:
        return self._store.get(external_id)

    def set(self, external_id: str, backend_user_id: str) -> None:
        self._store[external_id] = backend_user_id

    def delete(self, external_id: str) -> None:
        self._store.pop(external_id, None)

    def clear(self) -> None:
        """Drop every mapping, called on sign-out"""
        self._store.clear()

    def __contains__(self, external_id: str) -> bool:
        return external_id in self._store

    def __len__(self) -> int:
        return len(self._store)
