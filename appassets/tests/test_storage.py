import pytest

from appassets.storage import (
    InvalidNameError,
    LocalAppData,
    LocalFile,
    MemoryAppData,
    validate_name,
)


@pytest.fixture
def local(tmp_path):
    folder = tmp_path / "myapp"
    folder.mkdir()
    (folder / "file.js").write_bytes(b"console.log(1);")
    (folder / "nested").mkdir()
    return LocalAppData(tmp_path)


def test_local_missing_folder(local):
    assert local.get_folder("other") is None


def test_local_folder_must_be_directory(tmp_path):
    (tmp_path / "notadir").write_text("x")
    assert LocalAppData(tmp_path).get_folder("notadir") is None


def test_local_get_file(local, tmp_path):
    file = local.get_folder("myapp").get_file("file.js")
    assert file == LocalFile(tmp_path / "myapp" / "file.js")
    assert file.name == "file.js"
    assert file.size == len(b"console.log(1);")
    with file.open() as stream:
        assert stream.read() == b"console.log(1);"


def test_local_missing_file(local):
    folder = local.get_folder("myapp")
    assert folder.get_file("file.js.gz") is None
    assert folder.get_file("nested") is None


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "..\\x", "a\0b"])
def test_invalid_names(name):
    with pytest.raises(InvalidNameError):
        validate_name(name)


def test_local_rejects_traversal(local):
    with pytest.raises(InvalidNameError):
        local.get_folder("..")
    with pytest.raises(InvalidNameError):
        local.get_folder("myapp").get_file("../myapp")


def test_memory_app_data():
    store = MemoryAppData()
    assert store.get_folder("myapp") is None
    file = store.add_file("myapp", "file.js", b"abc")
    folder = store.get_folder("myapp")
    assert folder.get_file("file.js") is file
    assert folder.get_file("missing.js") is None
    assert file.size == 3
    assert file.open().read() == b"abc"


def test_memory_empty_folder():
    store = MemoryAppData()
    store.add_folder("myapp")
    assert store.get_folder("myapp").files == {}
