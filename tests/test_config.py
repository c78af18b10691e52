"""Test YAML configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config import AppConfig, load_config


class TestLoadConfig:
    """Test cases for load_config."""

    def test_defaults(self):
        config = AppConfig()
        assert config.inputs_path == Path("inputs")
        assert config.file_extension == ".txt"
        assert config.symbols.wall == "0"
        assert config.show_timing is True
        assert config.log_level == "WARNING"

    def test_load_yaml(self, tmp_path):
        """Values and nested symbols are read from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "inputs_dir: mazes\n"
            "show_timing: false\n"
            "log_level: DEBUG\n"
            "symbols:\n"
            "  wall: '#'\n"
        )

        config = load_config(path)
        assert config.inputs_dir == "mazes"
        assert config.show_timing is False
        assert config.log_level == "DEBUG"
        assert config.symbols.wall == "#"
        assert config.symbols.open == "."

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == AppConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_values(self, tmp_path):
        """Bad values are rejected by validation."""
        path = tmp_path / "config.yaml"
        path.write_text("log_level: LOUD\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_repository_config(self):
        """The bundled config.yaml is valid."""
        config = load_config(Path(__file__).parent.parent / "config.yaml")
        assert config.symbols.start == "S"
        assert config.symbols.target == "F"
