"""Tests for the typer command line."""

import json

import pytest
from typer.testing import CliRunner

from caesarapi import cli
from caesarapi.db import Database
from caesarapi.repositories import api_keys

runner = CliRunner()


@pytest.fixture
def db_env(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    # Keep the JSON handler off the package logger so other tests can still capture records.
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    return url


class TestCipherCommands:
    def test_encrypt(self):
        result = runner.invoke(cli.app, ["encrypt", "Hello, World!", "--shift", "5"])
        assert result.exit_code == 0
        assert result.output.strip() == "Mjqqt, Btwqi!"

    def test_decrypt(self):
        result = runner.invoke(cli.app, ["decrypt", "Mjqqt, Btwqi!", "-s", "5"])
        assert result.exit_code == 0
        assert result.output.strip() == "Hello, World!"

    def test_shift_out_of_range(self):
        result = runner.invoke(cli.app, ["encrypt", "Hello", "--shift", "26"])
        assert result.exit_code != 0

    def test_encode_default_shift(self):
        result = runner.invoke(cli.app, ["encode", "Hello"])
        assert result.output.strip() == "Khoor"

    def test_rot13(self):
        result = runner.invoke(cli.app, ["rot13", "Hello"])
        assert result.output.strip() == "Uryyb"

    def test_bruteforce(self):
        result = runner.invoke(cli.app, ["bruteforce", "Khoor"])
        lines = result.output.splitlines()
        assert len(lines) == 26
        assert lines[0].split() == ["0", "Khoor"]
        assert lines[3].split() == ["3", "Hello"]

    def test_auto_decrypt_json(self):
        result = runner.invoke(cli.app, ["auto-decrypt", "--json", "Wkh txlfn eurzq ira mxpsv ryhu wkh odcb grj"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"decrypted": "The quick brown fox jumps over the lazy dog", "shift": 3}

    def test_auto_decrypt_lists_candidates_when_ambiguous(self):
        result = runner.invoke(cli.app, ["auto-decrypt", "abc"])
        assert result.exit_code == 0
        assert "shift=9" in result.output
        assert "top candidates" in result.output


class TestKeyCommands:
    def test_migrate_then_create_key(self, db_env):
        assert runner.invoke(cli.app, ["migrate"]).exit_code == 0

        result = runner.invoke(cli.app, ["create-key", "ci"])
        assert result.exit_code == 0
        token = result.output.strip()

        db = Database(db_env)
        try:
            with db.session() as session:
                found = api_keys.find_by_key_hash(session, api_keys.hash_token(token))
                assert found is not None
                assert found.name == "ci"
        finally:
            db.dispose()

    def test_seed_is_idempotent(self, db_env):
        runner.invoke(cli.app, ["migrate"])
        first = runner.invoke(cli.app, ["seed"])
        assert first.exit_code == 0
        assert "Token:" in first.output
        second = runner.invoke(cli.app, ["seed"])
        assert second.exit_code == 0
        assert "already exists" in second.output

    def test_revoke_key(self, db_env):
        runner.invoke(cli.app, ["migrate"])
        token = runner.invoke(cli.app, ["create-key", "temp"]).output.strip()
        assert runner.invoke(cli.app, ["revoke-key", token]).exit_code == 0
        assert runner.invoke(cli.app, ["revoke-key", token]).exit_code == 1

    def test_missing_config(self, monkeypatch, tmp_path):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli.app, ["migrate"])
        assert result.exit_code == 1


class TestOpenApiCommand:
    def test_writes_document(self, tmp_path):
        out = tmp_path / "openapi.json"
        result = runner.invoke(cli.app, ["openapi", "--output", str(out)])
        assert result.exit_code == 0
        doc = json.loads(out.read_text(encoding="utf-8"))
        assert doc["info"]["title"] == "caesar-cipher-api"
        assert {"/encrypt", "/decrypt", "/encode", "/rot13", "/bruteforce", "/auto-decrypt"} <= set(doc["paths"])
