import os
import threading

import pytest

import tcpaste


def test_random_filename_is_alphanumeric_and_fixed_length():
    for _ in range(100):
        name = tcpaste.random_filename()
        assert len(name) == 10
        assert set(name) <= set(tcpaste.FILENAME_ALPHABET)


def test_random_filename_custom_length():
    assert len(tcpaste.random_filename(32)) == 32


def test_filename_alphabet_has_62_symbols():
    assert len(set(tcpaste.FILENAME_ALPHABET)) == 62


def test_random_filenames_differ():
    names = {tcpaste.random_filename() for _ in range(1000)}
    assert len(names) == 1000


@pytest.mark.parametrize("root, candidate, expected", [
    ("files", "files/abc", True),
    ("files", "files", True),
    ("files", "files/sub/abc", True),
    ("files", "files2/abc", False),
    ("files", "other/abc", False),
    ("/srv/files", "/srv/files/abc", True),
    ("/srv/files", "/srv/filesystem", False),
    ("/srv/files", "/etc/passwd", False),
    ("/srv/files", "/srv", False),
])
def test_is_within(root, candidate, expected):
    assert tcpaste.is_within(root, candidate) is expected


def test_is_within_does_not_resolve_dot_dot():
    # Textual only; ".." is caught separately by the pre-filter
    assert tcpaste.is_within("/srv/files", "/srv/files/../secret")


def test_store_root_is_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    store = tcpaste.PasteStore("files")
    assert store.root == os.path.join(os.getcwd(), "files")


def test_ensure_root_creates_directory(tmp_path):
    store = tcpaste.PasteStore(str(tmp_path / "nested" / "files"))
    store.ensure_root()
    store.ensure_root()
    assert os.path.isdir(store.root)


def test_create_makes_empty_file(store):
    name = store.create()
    assert len(name) == 10
    path = os.path.join(store.root, name)
    assert os.path.isfile(path)
    assert os.path.getsize(path) == 0


def test_create_fails_without_directory(tmp_path):
    store = tcpaste.PasteStore(str(tmp_path / "missing"))
    with pytest.raises(OSError):
        store.create()


def test_append_accumulates(store):
    name = store.create()
    assert store.append(name, b"hello ") == 6
    assert store.append(name, b"world") == 5
    with open(store.path_for(name), 'rb') as f:
        assert f.read() == b"hello world"


def test_list_names(store):
    created = {store.create() for _ in range(3)}
    assert set(store.list_names()) == created


def test_list_names_missing_directory(tmp_path):
    store = tcpaste.PasteStore(str(tmp_path / "missing"))
    with pytest.raises(OSError):
        store.list_names()


def test_canonical_root_follows_symlink(tmp_path):
    real = tmp_path / "real"
    real.mkdir()
    link = tmp_path / "link"
    os.symlink(str(real), str(link))
    store = tcpaste.PasteStore(str(link))
    assert store.canonical_root() == real.resolve()


def test_concurrent_appends_are_not_interleaved(store):
    names = [store.create() for _ in range(4)]
    chunk_size = 4096

    def writer(index, name):
        payload = bytes([ord('A') + index]) * chunk_size
        for _ in range(50):
            store.append(name, payload)

    threads = [threading.Thread(target=writer, args=(i, name)) for i, name in enumerate(names)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    for index, name in enumerate(names):
        with open(store.path_for(name), 'rb') as f:
            assert f.read() == bytes([ord('A') + index]) * chunk_size * 50


def test_append_holds_write_lock(store):
    name = store.create()
    handle = store.open_files[name]
    seen = []

    class RecordingFile:
        def write(self, data):
            seen.append(store.write_lock.locked())
            return handle.write(data)

        def flush(self):
            handle.flush()

        def close(self):
            handle.close()

    store.open_files[name] = RecordingFile()
    store.append(name, b"data")
    store.close(name)
    assert seen == [True]


def test_append_uses_session_handle(store):
    name = store.create()
    path = store.path_for(name)
    store.append(name, b"before")
    os.remove(path)
    store.append(name, b"after")
    assert not os.path.exists(path)
    store.close(name)


def test_appended_bytes_visible_before_close(store):
    name = store.create()
    store.append(name, b"live")
    with open(store.path_for(name), 'rb') as f:
        assert f.read() == b"live"
    store.close(name)


def test_close_releases_handle(store):
    name = store.create()
    handle = store.open_files[name]
    store.close(name)
    assert name not in store.open_files
    assert handle.closed
    store.close(name)
    with pytest.raises(KeyError):
        store.append(name, b"late")
