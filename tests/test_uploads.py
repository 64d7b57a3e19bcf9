import pytest

from app.core.errors import StorageError
from app.services.uploads import build_stored_name, safe_original_name, write_upload


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("a.png", "a.png"),
        ("../../etc/passwd", "passwd"),
        ("C:\\photos\\me.jpg", "me.jpg"),
        ("my photo (1).png", "my_photo__1_.png"),
        ("...", "upload"),
    ],
)
def test_safe_original_name(filename, expected):
    assert safe_original_name(filename) == expected


def test_same_name_never_collides():
    names = {build_stored_name("a.png") for _ in range(50)}
    assert len(names) == 50
    assert all(name.endswith("_a.png") for name in names)


def test_write_upload_creates_directory(tmp_path):
    target = tmp_path / "nested" / "assets"
    stored = write_upload(b"data", "x.png", upload_dir=target)
    assert (target / stored).read_bytes() == b"data"


def test_write_upload_failure_is_storage_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a dir")
    with pytest.raises(StorageError):
        write_upload(b"data", "x.png", upload_dir=blocker)
