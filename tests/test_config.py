"""Tests for ClientConfig and JSON persistence."""

import json

import pytest
from pydantic import BaseModel, ValidationError

from awtrix_control.exceptions import ConfigFileInvalidError, ConfigValidationError
from awtrix_control.models import ClientConfig
from awtrix_control.utils import PydanticPersistence


class SampleModel(BaseModel):
    """Simple model for testing."""

    name: str = "test"
    value: int = 42


class TestClientConfig:
    """Test the ClientConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test default values."""
        config = ClientConfig()
        assert config.host is None
        assert config.timeout == 5.0

    @pytest.mark.unit
    def test_blank_host_is_unset(self):
        """Test whitespace-only hosts become None and others are stripped."""
        assert ClientConfig(host="   ").host is None
        assert ClientConfig(host=" 10.0.0.2 ").host == "10.0.0.2"

    @pytest.mark.unit
    @pytest.mark.parametrize("timeout", [0, -1])
    def test_timeout_must_be_positive(self, timeout):
        """Test timeout must be greater than zero."""
        with pytest.raises(ValidationError):
            ClientConfig(timeout=timeout)

    @pytest.mark.unit
    def test_save_and_load(self, temp_dir):
        """Test a saved config loads back unchanged."""
        path = temp_dir / "config.json"
        ClientConfig(host="10.0.0.2", timeout=2.5).save(path)

        loaded = ClientConfig.load_or_default(path)
        assert loaded == ClientConfig(host="10.0.0.2", timeout=2.5)

    @pytest.mark.unit
    def test_missing_file_gives_default(self, temp_dir):
        """Test a missing file returns defaults without creating it."""
        path = temp_dir / "missing.json"
        assert ClientConfig.load_or_default(path) == ClientConfig()
        assert not path.exists()

    @pytest.mark.unit
    def test_invalid_value(self, temp_dir):
        """Test invalid values raise ConfigValidationError naming the field."""
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"host": "10.0.0.2", "timeout": -3}))

        with pytest.raises(ConfigValidationError) as exc_info:
            ClientConfig.load_or_default(path)
        assert exc_info.value.field == "timeout"
        assert str(path) in exc_info.value.recovery_hint

    @pytest.mark.unit
    def test_invalid_json(self, temp_dir):
        """Test malformed JSON raises ConfigFileInvalidError."""
        path = temp_dir / "config.json"
        path.write_text('{"host": "10.0.0.2",}')

        with pytest.raises(ConfigFileInvalidError):
            ClientConfig.load_or_default(path)

    @pytest.mark.unit
    def test_empty_file(self, temp_dir):
        """Test an empty file raises ConfigFileInvalidError."""
        path = temp_dir / "config.json"
        path.write_text("  \n")

        with pytest.raises(ConfigFileInvalidError):
            ClientConfig.load_or_default(path)


class TestPersistence:
    """Test PydanticPersistence safety features."""

    @pytest.mark.unit
    def test_save_creates_parents(self, temp_dir):
        """Test missing parent directories are created."""
        path = temp_dir / "nested" / "dir" / "model.json"
        PydanticPersistence.save_json(SampleModel(), path)
        assert PydanticPersistence.load_json(path, SampleModel) == SampleModel()

    @pytest.mark.unit
    def test_save_creates_backup(self, temp_dir):
        """Test overwriting keeps the previous file as .bak."""
        path = temp_dir / "model.json"
        PydanticPersistence.save_json(SampleModel(name="original", value=1), path)
        PydanticPersistence.save_json(SampleModel(name="modified", value=2), path)

        backup = PydanticPersistence.load_json(path.with_suffix(".json.bak"), SampleModel)
        assert backup.name == "original"
        assert PydanticPersistence.load_json(path, SampleModel).name == "modified"

    @pytest.mark.unit
    def test_save_without_backup(self, temp_dir):
        """Test backups can be disabled."""
        path = temp_dir / "model.json"
        PydanticPersistence.save_json(SampleModel(), path, backup=False)
        PydanticPersistence.save_json(SampleModel(value=7), path, backup=False)
        assert not path.with_suffix(".json.bak").exists()

    @pytest.mark.unit
    def test_no_temp_file_left(self, temp_dir):
        """Test the atomic write leaves no temp file behind."""
        path = temp_dir / "model.json"
        PydanticPersistence.save_json(SampleModel(), path)
        assert not path.with_suffix(".json.tmp").exists()

    @pytest.mark.unit
    def test_load_missing_raises(self, temp_dir):
        """Test load_json raises FileNotFoundError for missing files."""
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(temp_dir / "nope.json", SampleModel)

    @pytest.mark.unit
    def test_load_or_default_factory(self, temp_dir):
        """Test the default factory is used for missing files."""
        model = PydanticPersistence.load_json_or_default(
            temp_dir / "nope.json", SampleModel, default_factory=lambda: SampleModel(value=3)
        )
        assert model.value == 3
