"""
Tests for the package logger
"""
import logging

from bitcoin_network import Network, get_logger, from_hrp


def test_logger_defaults():
    logger = get_logger("bitcoin_network.tests.defaults")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_no_duplicate_handlers():
    first = get_logger("bitcoin_network.tests.dupes", log_level="debug")
    second = get_logger("bitcoin_network.tests.dupes", log_level="error")
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG


def test_log_file(tmp_path):
    log_file = tmp_path / "logs" / "network.log"
    logger = get_logger("bitcoin_network.tests.file", log_file=log_file)
    assert log_file.parent.exists()
    assert len(logger.handlers) == 2


def test_lookup_miss_is_logged(caplog):
    for name in ("bitcoin_network.registry", "bitcoin_network.networks.lookup"):
        logging.getLogger(name).setLevel(logging.DEBUG)
    with caplog.at_level(logging.DEBUG):
        assert Network.from_hrp("xyz") is None
        assert from_hrp("xyz") is None
    assert sum("No known network with hrp 'xyz'" in r.getMessage() for r in caplog.records) == 2
