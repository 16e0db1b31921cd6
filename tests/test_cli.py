from __future__ import annotations

from pathlib import Path

import pytest

import ouch.cli as cli


def test_main_compresses_and_decompresses(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "notes.txt").write_text("notes", encoding="utf-8")
    archive = tmp_path / "notes.zip"

    assert cli.main(["compress", str(tmp_path / "notes.txt"), str(archive)]) == 0
    assert cli.main(["decompress", str(archive), "-o", str(tmp_path / "out")]) == 0

    captured = capsys.readouterr()
    assert f"Compressed 1 file into {archive}\n" in captured.out
    assert f"Decompressed 1 file into {tmp_path / 'out'}\n" in captured.out
    assert (tmp_path / "out" / "notes.txt").read_text(encoding="utf-8") == "notes"


def test_main_reports_missing_compression_arguments(
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = cli.main(["compress", "only.txt"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out.startswith(
        "[ERROR] The compress subcommands demands at least 2 arguments"
    )


@pytest.mark.parametrize("typo", ["compres", "comprss", "compresss"])
def test_main_suggests_compress_for_typos(
    typo: str, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main([typo, "a.txt", "a.zip"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == "Did you mean ouch compress?\n"


@pytest.mark.parametrize("typo", ["decompres", "decompess", "dekompress"])
def test_main_does_not_suggest_compress_for_decompress_typos(
    typo: str, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main([typo, "a.zip"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Did you mean" not in captured.out
    assert captured.out.startswith(f"[ERROR] argument command: invalid choice: '{typo}'")


def test_main_skips_option_values_when_looking_for_typos(
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = cli.main(["--log-file", "compres", "explode"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out.startswith("[ERROR] argument command: invalid choice: 'explode'")


def test_main_reports_argument_errors(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main([])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out.startswith("[ERROR] the following arguments are required")


def test_main_reports_unrecognized_flags(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main(["decompress", "a.zip", "--fast"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == "[ERROR] unrecognized arguments: --fast\n"


def test_main_refuses_to_compress_root(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main(["compress", Path.cwd().anchor, "root.zip"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "It seems you're trying to compress the root folder." in captured.out


def test_main_reports_missing_archive_with_quoted_path(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = tmp_path / "missing.zip"

    exit_code = cli.main(["decompress", str(missing), "-o", str(tmp_path / "out")])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == f'[ERROR] file "{missing}" not found!\n'
    assert not (tmp_path / "out").exists()


def test_main_reports_existing_output(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "a.zip").write_bytes(b"existing")

    exit_code = cli.main(["compress", str(tmp_path / "a.txt"), str(tmp_path / "a.zip")])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == "[ERROR] output file already exists, refusing to overwrite it.\n"
    assert cli.main(
        ["compress", str(tmp_path / "a.txt"), str(tmp_path / "a.zip"), "--yes"]
    ) == 0


def test_main_reports_unknown_extension(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main(["compress", "a.txt", str(tmp_path / "a.tar")])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == '[ERROR] ".tar" is not a supported extension.\n'


def test_main_colors_errors_when_forced(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("OUCH_COLOR", "always")

    exit_code = cli.main(["compress"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out.startswith("\033[31m[ERROR]\033[39m The compress subcommands")


def test_main_reaching_an_unknown_command_is_an_internal_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    real_parse_args = cli._parse_args

    def _parse_with_unknown_command(parser, argv):
        args = real_parse_args(parser, argv)
        args.command = "explode"
        return args

    monkeypatch.setattr(cli, "_parse_args", _parse_with_unknown_command)

    exit_code = cli.main(["decompress", "a.zip"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out.startswith("[ERROR] You've reached an internal error!")


def test_main_writes_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "ouch.log"

    exit_code = cli.main(["--log-file", str(log_file), "decompress", str(tmp_path / "x.zip")])

    assert exit_code == 1
    assert "command failed with MissingFileError" in log_file.read_text(encoding="utf-8")
