import io
import logging
import datetime
import pathlib

import pytest


LOG_DIR = pathlib.Path(__file__).parent / "test-logs"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the TestReport to the item so the fixture below can see the
    # outcome during teardown.
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def capture_test_logs(request):
    """Capture polycross logging for each test into an in-memory buffer and
    write it to test-logs/ only when the test fails.
    """
    pkg_logger = logging.getLogger("polycross")
    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    pkg_logger.addHandler(handler)
    prev_level = pkg_logger.level
    pkg_logger.setLevel(logging.DEBUG)

    try:
        yield
    finally:
        pkg_logger.removeHandler(handler)
        pkg_logger.setLevel(prev_level)

        rep = getattr(request.node, "rep_call", None)
        if rep is not None and rep.outcome == "failed":
            LOG_DIR.mkdir(exist_ok=True)
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            fname = LOG_DIR / "{}__{}.log".format(nodeid, ts)
            with open(fname, "w", encoding="utf-8") as f:
                f.write("=== Test: {}\n".format(request.node.nodeid))
                f.write("=== Timestamp: {}\n\n".format(ts))
                f.write(buf.getvalue())
