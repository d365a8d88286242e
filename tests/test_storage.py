import pytest
from keystash_core.storage import InMemoryStorage, SQLiteStorage, load_storage_provider


@pytest.mark.asyncio
async def test_memory_storage_roundtrip():
    s = InMemoryStorage()
    assert await s.get("missing") is None

    await s.set({"a": {"x": 1}, "b": "two"})
    assert await s.get("a") == {"x": 1}
    assert await s.get("b") == "two"

    await s.remove("a")
    assert await s.get("a") is None
    await s.remove("a")  # no-op


@pytest.mark.asyncio
async def test_memory_storage_copies_values():
    s = InMemoryStorage()
    value = {"permissions": {}}
    await s.set({"pk": value})
    value["permissions"]["evil.example"] = {"level": 20}

    got = await s.get("pk")
    assert got == {"permissions": {}}
    got["permissions"]["other"] = {}
    assert await s.get("pk") == {"permissions": {}}


@pytest.mark.asyncio
async def test_sqlite_storage_roundtrip(tmp_path):
    db_path = tmp_path / "state.db"
    s = SQLiteStorage(str(db_path))
    await s.set({"pk": {"relays": {"wss://relay.example": {"read": True}}}})
    assert await s.get("pk") == {"relays": {"wss://relay.example": {"read": True}}}

    await s.set({"pk": {"relays": {}}})
    assert await s.get("pk") == {"relays": {}}

    await s.remove("pk")
    assert await s.get("pk") is None
    await s.close()


@pytest.mark.asyncio
async def test_sqlite_storage_survives_reopen(tmp_path):
    db_path = str(tmp_path / "nested" / "state.db")
    s = SQLiteStorage(db_path)
    await s.set({"current_pubkey": "abcd"})
    await s.close()

    reopened = SQLiteStorage(db_path)
    assert await reopened.get("current_pubkey") == "abcd"
    await reopened.close()


def test_load_storage_provider_modes(monkeypatch, tmp_path):
    monkeypatch.setenv("KEYSTASH_STORAGE_PROVIDER", "memory")
    assert isinstance(load_storage_provider(), InMemoryStorage)

    monkeypatch.setenv("KEYSTASH_STORAGE_PROVIDER", "sqlite")
    monkeypatch.setenv("KEYSTASH_DB_PATH", str(tmp_path / "env.db"))
    s = load_storage_provider()
    assert isinstance(s, SQLiteStorage)
    assert s.path == str(tmp_path / "env.db")
    s.db.close()

    s = load_storage_provider({"provider": "sqlite", "sqlite_path": str(tmp_path / "cfg.db")})
    assert s.path == str(tmp_path / "cfg.db")
    s.db.close()

    with pytest.raises(ValueError):
        load_storage_provider({"provider": "redis"})
