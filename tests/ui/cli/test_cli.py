"""Tests for CLI functionality."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from turncue.features.instructions import (
    ManeuverDirection,
    ManeuverType,
    VisualInstructionComponent,
    VisualInstructionComponentType,
)
from turncue.platform.archive import archive, unarchive
from turncue.ui.cli import CommandProcessor


@pytest.fixture(autouse=True)
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    """Keep CLI runs from attaching real file handlers."""

    return mocker.patch("turncue.ui.cli.args.parser.setup_logger")


@pytest.fixture
def mock_display(mocker: MockerFixture) -> MagicMock:
    """Replace console rendering with a mock."""

    mock = mocker.patch("turncue.ui.cli.commands.executor.ComponentDisplay")
    return mock.return_value


@pytest.fixture
def mock_logger(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("turncue.ui.cli.cli.logger")


def _write_json(path: Path, document: object) -> Path:
    _ = path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_build_command_displays_components(tmp_path: Path, mock_display: MagicMock) -> None:
    source = _write_json(
        tmp_path / "banner.json",
        [
            {"text": "I 280", "type": "icon", "imageBaseURL": "https://example.com/i-280"},
            {"text": "/", "type": "delimiter"},
            {"text": "Junipero Serra Freeway", "abbr": "Junipero Serra Fwy", "abbr_priority": 0},
        ],
    )

    CommandProcessor.process_command(
        ["build", str(source), "--maneuver-type", "merge", "--maneuver-direction", "left", "--scale", "2"]
    )

    components = mock_display.show_components.call_args.args[0]
    assert [c.text for c in components] == ["I 280", "/", "Junipero Serra Freeway"]
    assert components[0].image_url == "https://example.com/i-280@2x.png"
    assert all(c.maneuver_type is ManeuverType.MERGE for c in components)
    assert all(c.maneuver_direction is ManeuverDirection.LEFT for c in components)


def test_archive_then_unarchive(tmp_path: Path, mock_display: MagicMock) -> None:
    source = _write_json(
        tmp_path / "component.json",
        {
            "text": "US 101",
            "type": "icon",
            "imageBaseURL": "https://example.com/us-101",
            "abbr": "101",
            "abbr_priority": 1,
        },
    )
    output = tmp_path / "archives" / "component.bin"

    CommandProcessor.process_command(
        [
            "archive",
            str(source),
            str(output),
            "--maneuver-type",
            "on ramp",
            "--maneuver-direction",
            "right",
            "--scale",
            "3",
        ]
    )

    stored = unarchive(output.read_bytes(), VisualInstructionComponent)
    assert stored.image_url == "https://example.com/us-101@3x.png"
    assert stored.type is VisualInstructionComponentType.IMAGE
    assert stored.maneuver_type is ManeuverType.TAKE_ON_RAMP

    CommandProcessor.process_command(["unarchive", str(output)])

    shown = mock_display.show_components.call_args.args[0]
    assert shown == [stored]


def test_archive_requires_single_component(
    tmp_path: Path, mock_display: MagicMock, mock_logger: MagicMock
) -> None:
    _ = mock_display
    source = _write_json(tmp_path / "banner.json", [{"text": "A"}, {"text": "B"}])

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["archive", str(source), str(tmp_path / "out.bin")])

    assert excinfo.value.code == 1
    assert "exactly one component" in str(mock_logger.error.call_args.args[1])
    assert not (tmp_path / "out.bin").exists()


def test_unarchive_reports_decode_failure(
    tmp_path: Path, mock_display: MagicMock, mock_logger: MagicMock
) -> None:
    component = VisualInstructionComponent(
        type=VisualInstructionComponentType.TEXT,
        text="Main St",
        image_url=None,
        maneuver_type=ManeuverType.TURN,
        maneuver_direction=ManeuverDirection.RIGHT,
        abbreviation="Main",
        abbreviation_priority=1,
    )
    archive_file = tmp_path / "component.bin"
    _ = archive_file.write_bytes(archive(component))

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["unarchive", str(archive_file)])

    assert excinfo.value.code == 1
    assert "imageURL" in str(mock_logger.error.call_args.args[1])
    mock_display.show_components.assert_not_called()


def test_unarchive_rejects_garbage(
    tmp_path: Path, mock_display: MagicMock, mock_logger: MagicMock
) -> None:
    _ = mock_display
    archive_file = tmp_path / "garbage.bin"
    _ = archive_file.write_bytes(b"definitely not an archive")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["unarchive", str(archive_file)])

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once()


def test_keyboard_interrupt_exits_130(mocker: MockerFixture, mock_logger: MagicMock) -> None:
    _ = mock_logger
    _ = mocker.patch(
        "turncue.ui.cli.cli.ArgumentParser.process_args",
        side_effect=KeyboardInterrupt,
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["build", "ignored.json"])

    assert excinfo.value.code == 130
