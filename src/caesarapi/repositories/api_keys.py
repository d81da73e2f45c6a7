from __future__ import annotations

import hashlib
import secrets
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from caesarapi.db import ApiKey


def hash_token(token: str) -> str:
    """SHA-256 hex digest of a bearer token, as stored in api_keys.key_hash."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def generate_token() -> str:
    return secrets.token_hex(32)


def find_by_key_hash(session: Session, key_hash: str) -> Optional[ApiKey]:
    stmt = select(ApiKey).where(ApiKey.key_hash == key_hash, ApiKey.active.is_(True)).limit(1)
    return session.scalars(stmt).first()


def find_by_name(session: Session, name: str) -> Optional[ApiKey]:
    stmt = select(ApiKey).where(ApiKey.name == name).limit(1)
    return session.scalars(stmt).first()


def create_api_key(session: Session, key_hash: str, name: str) -> ApiKey:
    api_key = ApiKey(key_hash=key_hash, name=name, active=True)
    session.add(api_key)
    session.flush()
    return api_key


def deactivate_api_key(session: Session, key_hash: str) -> bool:
    """Mark a key inactive. Returns False when no active key has that hash."""
    api_key = find_by_key_hash(session, key_hash)
    if api_key is None:
        return False
    api_key.active = False
    session.flush()
    return True
