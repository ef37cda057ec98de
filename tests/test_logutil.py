import logging

from merkle_engine.logutil import DigestAbbreviatingFilter, abbreviate, setup_logging
from merkle_engine.settings import Settings


def test_abbreviate():
    d = "a" * 6 + "0" * 54 + "b" * 4
    assert abbreviate(d) == "aaaaaa...bbbb"
    assert abbreviate("short") == "short"


def test_filter_shortens_digests():
    digest = "0123456789abcdef" * 4
    record = logging.LogRecord("merkle_engine", logging.INFO, __file__, 1, "root=%s", (digest,), None)
    assert DigestAbbreviatingFilter().filter(record)
    assert record.getMessage() == "root=012345...cdef"


def test_filter_leaves_other_messages():
    record = logging.LogRecord("merkle_engine", logging.INFO, __file__, 1, "leaves=%d", (4,), None)
    assert DigestAbbreviatingFilter().filter(record)
    assert record.getMessage() == "leaves=4"


def test_setup_logging_levels():
    setup_logging("debug", loggers=("merkle_test_a",))
    assert logging.getLogger("merkle_test_a").level == logging.DEBUG
    setup_logging("bogus", loggers=("merkle_test_b",))
    assert logging.getLogger("merkle_test_b").level == logging.INFO


def test_build_logs_at_debug(caplog, basic_data):
    from merkle_engine.merkle import MerkleTree

    with caplog.at_level(logging.DEBUG, logger="merkle_engine.merkle"):
        MerkleTree.build(basic_data)
    assert "built merkle tree: leaves=4 depth=2" in caplog.text


def test_settings_env(monkeypatch):
    monkeypatch.setenv("MERKLE_HASH_ALGORITHM", "sha512")
    monkeypatch.setenv("MERKLE_LOG_LEVEL", "DEBUG")
    s = Settings()
    assert s.hash_algorithm == "sha512"
    assert s.log_level == "DEBUG"


def test_setup_logging_adds_filter_once():
    for _ in range(3):
        setup_logging(logging.INFO, loggers=("merkle_test_c",))
    filters = logging.getLogger("merkle_test_c").filters
    assert sum(isinstance(f, DigestAbbreviatingFilter) for f in filters) == 1
