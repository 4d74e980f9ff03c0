"""CLI argument parsing and entry-point tests."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

import cryptonotes.core as core
from cryptonotes import __version__
from cryptonotes.core import build_parser, encrypt_text, main

PASSWORD = "mypass123"


@pytest.fixture()
def parser() -> argparse.ArgumentParser:
    return build_parser()


class TestParser:
    @pytest.mark.parametrize("command", core.COMMANDS)
    def test_every_command_accepted(
        self, parser: argparse.ArgumentParser, command: str
    ) -> None:
        args = parser.parse_args([command, "target", "pw"])
        assert args.command == command
        assert args.target == "target"
        assert args.passphrase == "pw"
        assert args.verbose is False
        assert args.workers is None

    def test_passphrase_optional(self, parser: argparse.ArgumentParser) -> None:
        args = parser.parse_args(["encrypt-file", "notes.md"])
        assert args.passphrase is None

    def test_flags(self, parser: argparse.ArgumentParser) -> None:
        args = parser.parse_args(["encrypt-dir", "private/", "pw", "-v", "--workers", "8"])
        assert args.verbose is True
        assert args.workers == 8

    def test_unknown_command_exits(self, parser: argparse.ArgumentParser) -> None:
        with pytest.raises(SystemExit) as info:
            parser.parse_args(["shred-file", "x", "pw"])
        assert info.value.code == 2

    def test_missing_target_exits(self, parser: argparse.ArgumentParser) -> None:
        with pytest.raises(SystemExit):
            parser.parse_args(["encrypt-text"])

    @pytest.mark.parametrize("workers", ["0", "-3", "many"])
    def test_invalid_workers_exit(
        self, parser: argparse.ArgumentParser, workers: str
    ) -> None:
        with pytest.raises(SystemExit):
            parser.parse_args(["encrypt-dir", "x", "pw", "--workers", workers])

    @pytest.mark.parametrize(
        "payload",
        ["; rm -rf /", "$(cat /etc/shadow)", "`whoami`", "| cat"],
        ids=["semicolon", "subshell", "backtick", "pipe"],
    )
    def test_passphrase_parsed_literally(
        self, parser: argparse.ArgumentParser, payload: str
    ) -> None:
        args = parser.parse_args(["encrypt-text", "secret", payload])
        assert args.passphrase == payload

    def test_version(
        self, parser: argparse.ArgumentParser, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])
        assert __version__ in capsys.readouterr().out


class TestMain:
    def test_encrypt_text_prints_token(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["encrypt-text", "README.MD", PASSWORD])
        assert capsys.readouterr().out.strip() == "WHJp18ZhXYTQghLBh99svHwIYQrJA0fkwQ=="

    def test_decrypt_text_prints_plaintext(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        token = encrypt_text("my super secret", PASSWORD)
        main(["decrypt-text", token, PASSWORD])
        assert capsys.readouterr().out.strip() == "my super secret"

    def test_decrypt_failure_exits_nonzero(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        token = encrypt_text("my super secret", PASSWORD)
        with pytest.raises(SystemExit) as info:
            main(["decrypt-text", token, "wrong"])
        assert info.value.code == 1
        assert "Error: Failed to decrypt" in capsys.readouterr().err

    def test_missing_file_exits_nonzero(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as info:
            main(["encrypt-file", str(tmp_path / "ghost"), PASSWORD])
        assert info.value.code == 1
        assert "not found" in capsys.readouterr().err

    def test_file_round_trip(self, private_dir: Path) -> None:
        src = private_dir / "MySecrets" / "README.MD"
        original = src.read_bytes()
        main(["encrypt-file", str(src), PASSWORD])
        enc = src.parent / "WHJp18ZhXYTQghLBh99svHwIYQrJA0fkwQ=="
        assert enc.is_file() and not src.exists()
        main(["decrypt-file", str(enc), PASSWORD])
        assert src.read_bytes() == original

    def test_dir_round_trip_verbose(
        self, private_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["encrypt-dir", str(private_dir), PASSWORD, "-v", "--workers", "2"])
        assert not (private_dir / "MySecrets").exists()
        main(["decrypt-dir", str(private_dir), PASSWORD, "-v"])
        assert (private_dir / "MySecrets" / "README.MD").is_file()
        err = capsys.readouterr().err
        assert "Done." in err
        assert PASSWORD not in err

    def test_prompts_for_passphrase_with_confirmation(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        prompts: list[str] = []

        def fake_getpass(prompt: str) -> str:
            prompts.append(prompt)
            return PASSWORD

        monkeypatch.setattr(core, "getpass", fake_getpass)
        main(["encrypt-text", "README.MD"])
        assert prompts == ["Passphrase: ", "Confirm passphrase: "]
        assert capsys.readouterr().out.strip() == "WHJp18ZhXYTQghLBh99svHwIYQrJA0fkwQ=="

    def test_decrypt_prompt_skips_confirmation(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        prompts: list[str] = []

        def fake_getpass(prompt: str) -> str:
            prompts.append(prompt)
            return PASSWORD

        monkeypatch.setattr(core, "getpass", fake_getpass)
        main(["decrypt-text", "WHJp18ZhXYTQghLBh99svHwIYQrJA0fkwQ=="])
        assert prompts == ["Passphrase: "]

    def test_mismatched_confirmation_exits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        answers = iter(["one", "two"])
        monkeypatch.setattr(core, "getpass", lambda prompt: next(answers))
        with pytest.raises(SystemExit) as info:
            main(["encrypt-text", "secret"])
        assert info.value.code == 1

    def test_empty_prompted_passphrase_exits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(core, "getpass", lambda prompt: "")
        with pytest.raises(SystemExit) as info:
            main(["decrypt-text", "x"])
        assert info.value.code == 1
