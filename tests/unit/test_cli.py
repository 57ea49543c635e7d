"""Tests for the gigaplanner command line interface."""

from __future__ import annotations

import io
import json
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from gigaplanner_codec import cli
from gigaplanner_codec.codec.transcoding import encode_payload
from gigaplanner_codec.core.exceptions import CatalogError
from gigaplanner_codec.models import CharacterRecord


@pytest.fixture(autouse=True)
def isolated_cli(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[list[dict[str, Any]], None, None]:
    """Run the CLI away from any .env file with log output captured."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GIGAPLANNER_CATALOG_DIR", raising=False)
    monkeypatch.setattr(cli, "configure_logging", lambda **_: None)
    with capture_logs() as logs:
        yield logs


class TestDecodeCommand:
    """Tests for ``gigaplanner decode``."""

    def test_decode_url(
        self,
        catalog_dir: Path,
        build_payload: Callable[..., bytes],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """A share URL prints the full decode result."""
        url = f"https://gigaplanner.com?b={encode_payload(build_payload(race=1))}&p=0"

        exit_code = cli.main(["--catalog-dir", str(catalog_dir), "decode", url])

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert output["success"] is True
        assert output["preset"] == "Mage Preset"
        assert output["character"]["race"] == "Imperial"
        assert output["character"]["configuration"]["perkList"] == "Warrior"

    def test_decode_url_failure(
        self,
        catalog_dir: Path,
        build_payload: Callable[..., bytes],
        capsys: pytest.CaptureFixture[str],
        isolated_cli: list[dict[str, Any]],
    ) -> None:
        """A failed decode prints the result and exits non-zero."""
        url = f"https://gigaplanner.com?b={encode_payload(build_payload(perk_list=9))}"

        exit_code = cli.main(["--catalog-dir", str(catalog_dir), "decode", url])

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 1
        assert output == {
            "success": False,
            "preset": None,
            "character": None,
            "error": "Invalid perk list ID: 9",
        }
        assert any(entry["event"] == "Failed to decode share URL" for entry in isolated_cli)

    def test_decode_bare_code(
        self,
        catalog_dir: Path,
        build_payload: Callable[..., bytes],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """A bare build code prints the character record."""
        code = encode_payload(build_payload(level=33, oghma=0x20))

        exit_code = cli.main(["--catalog-dir", str(catalog_dir), "decode", code])

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert output["level"] == 33
        assert output["oghmaChoice"] == "Magicka"

    def test_decode_bare_code_error(
        self,
        catalog_dir: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """A malformed bare code reports an error on stderr."""
        exit_code = cli.main(["--catalog-dir", str(catalog_dir), "decode", "AgAAAAAU"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert captured.err.startswith("Error: ")


class TestEncodeCommand:
    """Tests for ``gigaplanner encode``."""

    @pytest.fixture
    def character_file(self, tmp_path: Path, warrior_character: CharacterRecord) -> Path:
        """Write the warrior character as camelCase JSON."""
        path = tmp_path / "character.json"
        path.write_text(warrior_character.model_dump_json(by_alias=True), encoding="utf-8")
        return path

    def test_encode_url(
        self,
        catalog_dir: Path,
        character_file: Path,
        converter: Any,
        warrior_character: CharacterRecord,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """The share URL is printed on its own line."""
        exit_code = cli.main(["--catalog-dir", str(catalog_dir), "encode", str(character_file)])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == converter.encode_url(warrior_character)

    def test_encode_code_only_from_stdin(
        self,
        catalog_dir: Path,
        character_file: Path,
        converter: Any,
        warrior_character: CharacterRecord,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """``-`` reads the character from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO(character_file.read_text(encoding="utf-8")))

        exit_code = cli.main(["--catalog-dir", str(catalog_dir), "encode", "-", "--code-only"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == converter.encode_build_code(warrior_character)

    def test_encode_custom_base_url(
        self,
        catalog_dir: Path,
        character_file: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """--base-url replaces the configured base URL."""
        exit_code = cli.main(
            [
                "--catalog-dir",
                str(catalog_dir),
                "encode",
                str(character_file),
                "--base-url",
                "http://localhost:5173/",
            ]
        )

        assert exit_code == 0
        assert capsys.readouterr().out.startswith("http://localhost:5173/?b=")

    def test_encode_invalid_character(
        self,
        catalog_dir: Path,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Invalid character JSON is reported on stderr."""
        path = tmp_path / "broken.json"
        path.write_text('{"level": 900}', encoding="utf-8")

        exit_code = cli.main(["--catalog-dir", str(catalog_dir), "encode", str(path)])

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().err


class TestCatalogCommands:
    """Tests for ``mappings`` and ``perks``."""

    def test_mappings(
        self,
        catalog_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """The catalog directory can come from the environment."""
        monkeypatch.setenv("GIGAPLANNER_CATALOG_DIR", str(catalog_dir))

        exit_code = cli.main(["mappings"])

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert output["perkLists"] == [{"id": 0, "name": "Warrior"}, {"id": 3, "name": "Mage"}]
        assert output["standingStones"][1] == {"id": 1, "name": "Mage Stone"}

    def test_perks(self, catalog_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Perks are listed with camelCase keys."""
        exit_code = cli.main(["--catalog-dir", str(catalog_dir), "perks", "Mage"])

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert len(output) == 8
        assert output[0] == {
            "id": 0,
            "name": "Mage Perk 0",
            "skill": "Illusion",
            "skillReq": 20,
            "description": "",
        }


class TestCatalogDirectory:
    """Tests for catalog directory resolution."""

    def test_missing_catalog_dir(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without a catalog directory the CLI exits with an error."""
        exit_code = cli.main(["mappings"])

        assert exit_code == 1
        assert "--catalog-dir" in capsys.readouterr().err

    def test_unreadable_catalogs(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Missing catalog files are reported on stderr."""
        exit_code = cli.main(["--catalog-dir", str(tmp_path / "nowhere"), "mappings"])

        assert exit_code == 1
        assert "Catalog file not found" in capsys.readouterr().err


class TestLoggingSetup:
    """Tests for log configuration and context binding."""

    @pytest.fixture
    def logging_calls(self, monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
        """Record the keyword arguments configure_logging is called with."""
        calls: list[dict[str, Any]] = []
        monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: calls.append(kwargs))
        monkeypatch.delenv("GIGAPLANNER_LOG_LEVEL", raising=False)
        return calls

    def test_debug_setting_forces_debug_level(
        self,
        catalog_dir: Path,
        logging_calls: list[dict[str, Any]],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """GIGAPLANNER_DEBUG switches logging to DEBUG."""
        monkeypatch.setenv("GIGAPLANNER_DEBUG", "true")

        assert cli.main(["--catalog-dir", str(catalog_dir), "mappings"]) == 0

        assert logging_calls == [{"level": "DEBUG", "json_format": False}]

    def test_log_level_flag_wins(
        self,
        catalog_dir: Path,
        logging_calls: list[dict[str, Any]],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """An explicit --log-level overrides the debug setting."""
        monkeypatch.setenv("GIGAPLANNER_DEBUG", "true")

        cli.main(["--catalog-dir", str(catalog_dir), "--log-level", "ERROR", "mappings"])

        assert logging_calls[0]["level"] == "ERROR"

    def test_command_bound_while_running(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """The subcommand is bound to the log context and cleared after."""
        seen: list[dict[str, Any]] = []

        def from_directory(directory: Path, settings: Any = None) -> Any:
            seen.append(structlog.contextvars.get_contextvars())
            raise CatalogError("Catalog file not found", catalog="races")

        monkeypatch.setattr(
            cli.GigaPlannerConverter, "from_directory", staticmethod(from_directory)
        )

        exit_code = cli.main(["--catalog-dir", str(tmp_path), "mappings"])

        assert exit_code == 1
        assert seen == [{"command": "mappings"}]
        assert structlog.contextvars.get_contextvars() == {}
        assert "Catalog file not found" in capsys.readouterr().err
