import logging
import threading

import pytest

import tcpaste


def _start(server):
    server.bind()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    assert server.ready.wait(5)
    return thread


@pytest.fixture
def store(tmp_path):
    store = tcpaste.PasteStore(str(tmp_path / "files"))
    store.ensure_root()
    return store


@pytest.fixture
def ingest_server(store):
    server = tcpaste.IngestServer(store, "127.0.0.1", 0, timeout=1.0)
    thread = _start(server)
    yield server
    server.stop()
    thread.join(5)


@pytest.fixture
def http_server(store):
    server = tcpaste.RetrievalServer(store, "127.0.0.1", 0, hidden_path="secret", timeout=1.0)
    thread = _start(server)
    yield server
    server.stop()
    thread.join(5)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("tcpaste")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
