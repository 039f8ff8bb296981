"""Unit tests for notelinks.api.config.NotesConfig module."""

import json

import pytest

from notelinks.api.config.ConfigError import ConfigError
from notelinks.api.config.LogConfig import LogConfig
from notelinks.api.config.NotesConfig import DEFAULT_DOCUMENTS, NotesConfig


class TestNotesConfigLoad:
    """Test NotesConfig.load() method."""

    def test_defaults_without_file(self, notes_dir):
        config = NotesConfig.load()

        assert config.documents == DEFAULT_DOCUMENTS
        assert config.selector == ".pagination a"
        assert config.log == LogConfig(level="WARNING", file=None)

    def test_defaults_are_not_shared(self, notes_dir):
        first = NotesConfig.load()
        first.documents.append("extra.html")
        assert NotesConfig.load().documents == DEFAULT_DOCUMENTS

    def test_load_from_working_directory(self, notes_dir):
        (notes_dir / "notelinks.json").write_text(
            json.dumps({"documents": ["a.html", "b.html"], "log": {"level": "DEBUG"}}),
            encoding="utf-8",
        )

        config = NotesConfig.load()

        assert config.documents == ["a.html", "b.html"]
        assert config.selector == ".pagination a"
        assert config.log.level == "DEBUG"

    def test_load_explicit_path(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"selector": "nav a"}), encoding="utf-8")

        assert NotesConfig.load(path).selector == "nav a"

    def test_invalid_json(self, notes_dir):
        (notes_dir / "notelinks.json").write_text("{invalid json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            NotesConfig.load()

    def test_not_an_object(self, notes_dir):
        (notes_dir / "notelinks.json").write_text("[]", encoding="utf-8")
        with pytest.raises(ConfigError, match="must contain a JSON object"):
            NotesConfig.load()

    def test_unknown_key_rejected(self, notes_dir):
        (notes_dir / "notelinks.json").write_text(json.dumps({"pages": []}), encoding="utf-8")
        with pytest.raises(ConfigError, match="pages"):
            NotesConfig.load()

    def test_invalid_nested_value_names_field(self, notes_dir):
        (notes_dir / "notelinks.json").write_text(json.dumps({"log": {"level": "LOUD"}}), encoding="utf-8")
        with pytest.raises(ConfigError, match=r"log\.level"):
            NotesConfig.load()

    def test_empty_selector_rejected(self, notes_dir):
        (notes_dir / "notelinks.json").write_text(json.dumps({"selector": ""}), encoding="utf-8")
        with pytest.raises(ConfigError, match="selector"):
            NotesConfig.load()

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)


def test_to_dict():
    config = NotesConfig(documents=["a.html"])
    assert config.to_dict() == {
        "documents": ["a.html"],
        "selector": ".pagination a",
        "log": {"level": "WARNING", "file": None},
    }
