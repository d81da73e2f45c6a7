"""Tests for the API-key store."""

import pytest
from sqlalchemy.exc import IntegrityError

from caesarapi.repositories import api_keys


class TestApiKeyRepository:
    def test_hash_token_is_sha256_hex(self):
        assert api_keys.hash_token("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_generate_token_is_random(self):
        a, b = api_keys.generate_token(), api_keys.generate_token()
        assert a != b
        assert len(a) == 64

    def test_create(self, database):
        with database.session() as session:
            key = api_keys.create_api_key(session, "hash-create", "test-key-create")
            assert key.id is not None
        assert key.key_hash == "hash-create"
        assert key.name == "test-key-create"
        assert key.active is True
        assert key.created_at is not None

    def test_find_by_key_hash(self, database):
        with database.session() as session:
            api_keys.create_api_key(session, "hash-find", "test-key-find")
        with database.session() as session:
            found = api_keys.find_by_key_hash(session, "hash-find")
            assert found is not None
            assert found.name == "test-key-find"

    def test_find_missing(self, database):
        with database.session() as session:
            assert api_keys.find_by_key_hash(session, "non-existent") is None

    def test_inactive_keys_are_not_found(self, database):
        with database.session() as session:
            api_keys.create_api_key(session, "hash-inactive", "test-key-inactive")
        with database.session() as session:
            assert api_keys.deactivate_api_key(session, "hash-inactive") is True
        with database.session() as session:
            assert api_keys.find_by_key_hash(session, "hash-inactive") is None
            assert api_keys.deactivate_api_key(session, "hash-inactive") is False
            assert api_keys.find_by_name(session, "test-key-inactive") is not None

    def test_key_hash_is_unique(self, database):
        with database.session() as session:
            api_keys.create_api_key(session, "hash-dup", "first")
        with pytest.raises(IntegrityError):
            with database.session() as session:
                api_keys.create_api_key(session, "hash-dup", "second")
