import logging

from polycross.core.logging_utils import configure_logging, get_logger
from polycross.core.scanner import find_all_intersections


def test_get_logger_is_namespaced():
    assert get_logger('scanner').name == 'polycross.scanner'
    assert get_logger('polycross.layers').name == 'polycross.layers'


def test_get_logger_inherits_by_default():
    assert get_logger('polycross.anything').level == logging.NOTSET


def test_configure_logging_leaves_root_alone():
    root = logging.getLogger()
    before = list(root.handlers), root.level
    configure_logging('DEBUG')
    try:
        assert (list(root.handlers), root.level) == before
        pkg = logging.getLogger('polycross')
        assert pkg.level == logging.DEBUG
        assert pkg.propagate is False
    finally:
        configure_logging('WARNING')


def test_unknown_level_falls_back_to_info():
    configure_logging('LOUD')
    try:
        assert logging.getLogger('polycross').level == logging.INFO
    finally:
        configure_logging('WARNING')


def test_scan_logs_summary_at_debug(caplog):
    logger = logging.getLogger('polycross')
    logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.DEBUG, logger='polycross'):
            find_all_intersections([0, 0, 1, 0, 1, 1, 0, 1], [0.5, 0.5, 1.5, 0.5, 1.5, 1.5, 0.5, 1.5])
    finally:
        logger.removeHandler(caplog.handler)
    assert any("2 intersection(s)" in r.getMessage() for r in caplog.records)
