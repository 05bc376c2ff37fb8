import pytest

from recency.cache.lru import RecencyCache


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user-level config files and RECENCY_* variables out of tests."""
    monkeypatch.setattr(
        "recency.config.hierarchy._GLOBAL_CONFIG_PATH", tmp_path / "home" / "config.yaml"
    )
    for name in ("RECENCY_CAPACITY", "RECENCY_HASHER", "RECENCY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def pair_cache():
    """Capacity-2 cache, the smallest allowed."""
    return RecencyCache(2)


@pytest.fixture
def abc_cache():
    """Capacity-5 cache holding 1..3 → 'a'..'c'; key 3 is most recent."""
    cache = RecencyCache(5)
    cache.put(1, "a")
    cache.put(2, "b")
    cache.put(3, "c")
    return cache
