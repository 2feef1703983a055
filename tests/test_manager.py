import json

import pytest

from cloudsecure_config.config import ConfigStore
from cloudsecure_config.config.defaults import CONFIG_ENV_VAR, DEFAULT_CONFIG_DIR, get_default_config_path
from cloudsecure_config.errors import ConfigError, ProfileNotFoundError
from cloudsecure_config.models import CredentialProfile


@pytest.fixture
def store(write_config, sample_data, make_prompter):
    """A store over an existing two-profile file."""
    return ConfigStore(write_config(sample_data), make_prompter())


def _on_disk(store):
    return json.loads(store.config_path.read_text(encoding="utf-8"))


class TestConfigStore:
    """Test cases for ConfigStore."""

    def test_config_property_bootstraps_once(self, config_path, make_prompter):
        store = ConfigStore(config_path, make_prompter("k", "s", "t", "prod"))

        first = store.config
        second = store.config

        assert first is second
        assert first.default_profile_name == "prod"
        assert config_path.exists()

    def test_load_does_not_prompt(self, store):
        config = store.load()
        assert config.default_profile_name == "prod"
        assert store.prompter.output.getvalue() == ""

    def test_get_profile(self, store):
        assert store.get_profile().api_key == "pk"
        assert store.get_profile("backup").api_key == "bk"
        with pytest.raises(ProfileNotFoundError):
            store.get_profile("staging")

    def test_save_without_config(self, config_path, make_prompter):
        store = ConfigStore(config_path, make_prompter())
        with pytest.raises(ValueError, match="No configuration loaded"):
            store.save()

    def test_add_profile(self, store):
        store.add_profile("staging", CredentialProfile(api_key="sk"))

        data = _on_disk(store)
        assert data["cloudsecures"]["staging"]["apiKey"] == "sk"
        assert data["default_cloud_name"] == "prod"

    def test_add_profile_as_default(self, store):
        store.add_profile("staging", CredentialProfile(), make_default=True)
        assert _on_disk(store)["default_cloud_name"] == "staging"

    def test_add_profile_fills_missing_default(self, write_config, make_prompter):
        store = ConfigStore(write_config({"cloudsecures": {}}), make_prompter())
        store.load()

        store.add_profile("first", CredentialProfile())

        assert store.config.default_profile_name == "first"

    def test_prompt_new_profile(self, write_config, sample_data, make_prompter):
        store = ConfigStore(write_config(sample_data), make_prompter("k", "s", "t", " staging "))

        name, profile = store.prompt_new_profile(make_default=True)

        assert name == "staging"
        assert profile.tenant_id == "t"
        assert _on_disk(store)["default_cloud_name"] == "staging"

    def test_set_default(self, store):
        store.set_default("backup")
        assert _on_disk(store)["default_cloud_name"] == "backup"

    def test_set_default_unknown(self, store):
        with pytest.raises(ProfileNotFoundError):
            store.set_default("staging")
        assert _on_disk(store)["default_cloud_name"] == "prod"

    def test_remove_profile(self, store):
        removed = store.remove_profile("backup")

        assert removed.api_key == "bk"
        assert set(_on_disk(store)["cloudsecures"]) == {"prod"}

    def test_remove_default_profile_refused(self, store):
        with pytest.raises(ConfigError, match="default"):
            store.remove_profile("prod")
        assert set(_on_disk(store)["cloudsecures"]) == {"prod", "backup"}

    def test_remove_last_profile_refused(self, write_config, make_prompter):
        store = ConfigStore(
            write_config({"cloudsecures": {"prod": {}}, "default_cloud_name": "prod"}),
            make_prompter(),
        )
        with pytest.raises(ConfigError, match="only"):
            store.remove_profile("prod")

    def test_remove_unknown_profile(self, store):
        with pytest.raises(ProfileNotFoundError):
            store.remove_profile("staging")


class TestDefaultPath:
    """Test cases for default configuration path resolution."""

    def test_home_default(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert get_default_config_path() == DEFAULT_CONFIG_DIR / "config.json"

    def test_env_override(self, monkeypatch, temp_dir):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(temp_dir / "custom.json"))
        assert get_default_config_path() == temp_dir / "custom.json"

    def test_blank_env_is_ignored(self, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, "  ")
        assert get_default_config_path() == DEFAULT_CONFIG_DIR / "config.json"

    def test_store_uses_default_path(self, monkeypatch, temp_dir):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(temp_dir / "custom.json"))
        assert ConfigStore().config_path == temp_dir / "custom.json"
