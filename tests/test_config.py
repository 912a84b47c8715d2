from base64_kit import KitConfig, load_config
from base64_kit.config import resolve_config


def test_defaults():
    config = load_config()
    assert config == KitConfig(default_extension="png", temp_dir=None, keep_temp_files=False)


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("BASE64_KIT_DEFAULT_EXTENSION", "jpg")
    monkeypatch.setenv("BASE64_KIT_TEMP_DIR", str(tmp_path))
    monkeypatch.setenv("BASE64_KIT_KEEP_TEMP", "yes")
    config = load_config()
    assert config.default_extension == "jpg"
    assert config.temp_dir == str(tmp_path)
    assert config.keep_temp_files is True


def test_keep_temp_falsy_values(monkeypatch):
    monkeypatch.setenv("BASE64_KIT_KEEP_TEMP", "off")
    assert load_config().keep_temp_files is False


def test_resolve_config_prefers_explicit(monkeypatch):
    monkeypatch.setenv("BASE64_KIT_DEFAULT_EXTENSION", "jpg")
    explicit = KitConfig(default_extension="gif")
    assert resolve_config(explicit) is explicit
    assert resolve_config(None).default_extension == "jpg"
