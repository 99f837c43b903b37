"""Test configuration management."""

from pathlib import Path

from turncue.config.config import Config
from turncue.config.paths import default_config_path


def test_default_config(portable_repo_root: Path) -> None:
    """Test default configuration creation at portable repo location."""
    _ = portable_repo_root
    config = Config()
    assert config.log_file is None
    assert config.display_scale is None
    config.save()
    assert default_config_path().exists()


def test_save_load_toml(portable_repo_root: Path) -> None:
    """Test saving and loading configuration in TOML format at repo path."""
    _ = portable_repo_root
    original_config = Config(
        log_file=Path("/test/logs/turncue.log"),
        display_scale=2,
    )
    original_config.save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded_config = Config.load()

    assert loaded_config.log_file == Path("/test/logs/turncue.log")
    assert loaded_config.display_scale == 2


def test_save_load_none_values(portable_repo_root: Path) -> None:
    """Test saving and loading configuration with None values."""
    _ = portable_repo_root
    Config(log_file=None, display_scale=None).save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded_config = Config.load()

    assert loaded_config.log_file is None
    assert loaded_config.display_scale is None


def test_load_creates_default_file(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    assert not default_config_path().exists()

    config = Config.load()

    assert default_config_path().exists()
    assert config.display_scale is None


def test_singleton_behavior(portable_repo_root: Path) -> None:
    """Test singleton pattern behavior with a fixed config path."""
    _ = portable_repo_root
    config1 = Config.load()
    config1.display_scale = 3
    config1.save()

    config2 = Config.load()
    assert config2 is config1
    assert config2.display_scale == 3


def test_toml_comments(portable_repo_root: Path) -> None:
    """Test TOML file contains comments."""
    _ = portable_repo_root
    Config(display_scale=2).save()

    content = default_config_path().read_text(encoding="utf-8")

    assert "# turncue Configuration File" in content
    assert "# Log file path" in content
    assert "# Display scale for component image URLs" in content
    assert "display_scale = 2" in content
