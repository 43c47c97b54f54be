"""Tests for the catalog command line."""

import json
import logging
from pathlib import Path

from purine_catalog.cli import main
from tests.conftest import alcohol_csv, csv_row, food_csv


def _write_snapshot(data_dir: Path) -> None:
    folder = data_dir / "2024-05-05"
    folder.mkdir(parents=True)
    (folder / "usda_food_purines.csv").write_text(
        food_csv(csv_row("Salmon, raw", "180"), csv_row("Tofu", "ND")),
        encoding="utf-8",
    )
    (folder / "usda_alcohol_purines.csv").write_text(
        alcohol_csv(csv_row("Beer, regular", "14")), encoding="utf-8"
    )


def test_update_command_writes_catalog(tmp_path: Path, settings) -> None:
    data_dir = tmp_path / "source"
    output = tmp_path / "out" / "catalog.json"
    _write_snapshot(data_dir)

    exit_code = main(
        ["update", "--data-dir", str(data_dir), "--output", str(output)],
        settings=settings,
    )

    assert exit_code == 0
    records = json.loads(output.read_text(encoding="utf-8"))
    assert [record["name"] for record in records] == ["Beer, Regular", "Salmon"]


def test_update_uses_settings_paths(settings) -> None:
    _write_snapshot(settings.catalog_data_dir)

    exit_code = main(["update"], settings=settings)

    assert exit_code == 0
    assert settings.catalog_output_file.exists()


def test_update_without_snapshot_fails(tmp_path: Path, settings) -> None:
    output = tmp_path / "catalog.json"

    exit_code = main(
        ["update", "--data-dir", str(tmp_path / "empty"), "--output", str(output)],
        settings=settings,
    )

    assert exit_code == 1
    assert not output.exists()


def test_clear_command_resets_catalog(tmp_path: Path, settings) -> None:
    output = tmp_path / "catalog.json"
    output.write_text('[{"name": "Salmon"}]\n', encoding="utf-8")

    exit_code = main(["clear", "--output", str(output)], settings=settings)

    assert exit_code == 0
    assert output.read_text(encoding="utf-8") == "[]\n"


def test_verbose_flag_enables_debug_logging(tmp_path: Path, settings) -> None:
    output = tmp_path / "catalog.json"

    exit_code = main(
        ["--verbose", "clear", "--output", str(output)], settings=settings
    )

    assert exit_code == 0
    assert logging.getLogger("purine_catalog").level == logging.DEBUG
    main(["clear", "--output", str(output)], settings=settings)
    assert logging.getLogger("purine_catalog").level == logging.INFO
