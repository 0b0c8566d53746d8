"""
Session store: the current bearer credential and the admin it belongs to.

One instance per application, handed to the RequestExecutor. Persistence goes
through a small key/value storage backend holding two keys, written together
and cleared together.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Union

from pydantic import ValidationError

from schemas.auth import Principal

logger = logging.getLogger(__name__)

TOKEN_KEY = "adminToken"
PRINCIPAL_KEY = "adminUser"


class KeyValueStorage(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    """Process-local storage; nothing survives a restart."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class FileStorage:
    """Storage backed by a small JSON object on disk."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable session file %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict[str, str]) -> None:
        if not data:
            self.path.unlink(missing_ok=True)
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # the file holds a bearer token: owner read/write only
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(json.dumps(data))
        os.chmod(self.path, 0o600)

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


@dataclass(frozen=True)
class Session:
    credential: Optional[str] = None
    principal: Optional[Principal] = None


class SessionStore:
    def __init__(self, storage: Optional[KeyValueStorage] = None):
        self.storage: KeyValueStorage = storage if storage is not None else MemoryStorage()
        self._credential: Optional[str] = None
        self._principal: Optional[Principal] = None
        # True until restore() has run; protected views wait on it
        self.loading = True

    @property
    def credential(self) -> Optional[str]:
        return self._credential

    @property
    def principal(self) -> Optional[Principal]:
        return self._principal

    @property
    def is_authenticated(self) -> bool:
        return self._credential is not None

    @property
    def session(self) -> Session:
        return Session(credential=self._credential, principal=self._principal)

    def restore(self) -> Session:
        """Rehydrate from storage. Only a complete (credential, principal) pair is accepted."""
        try:
            token = self.storage.get(TOKEN_KEY)
            raw_principal = self.storage.get(PRINCIPAL_KEY)
            if token and raw_principal:
                try:
                    principal = Principal.model_validate_json(raw_principal)
                except ValidationError:
                    logger.warning("Stored principal is malformed; starting without a session")
                else:
                    self._credential = token
                    self._principal = principal
                    logger.info("Restored session for %s", principal.email)
        finally:
            self.loading = False
        return self.session

    def set(self, credential: str, principal: Principal) -> None:
        if not credential:
            raise ValueError("credential must be a non-empty token")
        self.storage.set(TOKEN_KEY, credential)
        self.storage.set(PRINCIPAL_KEY, principal.model_dump_json(by_alias=True))
        self._credential = credential
        self._principal = principal
        logger.info("Session started for %s", principal.email)

    def clear(self) -> None:
        self.storage.remove(TOKEN_KEY)
        self.storage.remove(PRINCIPAL_KEY)
        self._credential = None
        self._principal = None
        logger.info("Session cleared")
