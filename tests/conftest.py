import base64

import pytest

from base64_kit import KitConfig, cleanup_temp_files

PNG_BYTES = bytes.fromhex("89504e470d0a1a0a0000000d4948445200000001")


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "source.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def png_data_uri():
    return "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii")


@pytest.fixture
def temp_config(tmp_path):
    folder = tmp_path / "temp"
    folder.mkdir()
    return KitConfig(temp_dir=str(folder))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("BASE64_KIT_DEFAULT_EXTENSION", "BASE64_KIT_TEMP_DIR", "BASE64_KIT_KEEP_TEMP"):
        monkeypatch.delenv(name, raising=False)
    yield
    cleanup_temp_files()
