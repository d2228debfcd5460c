"""Unit tests for the argument parser module in the localingest CLI."""

from pathlib import Path

import pytest

from localingest.cli.argparser import ALWAYS_EXCLUDED_EXTENSIONS, build_config, create_parser, validate_args
from localingest.file_system_tree.error_action import ErrorAction


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    args = parser.parse_args([])
    assert args.exclude == ""
    assert args.output == Path("output.txt")
    assert args.size_limit is False
    assert args.max_size == 51200
    assert args.ignore == []
    assert args.on_error == "fail"
    assert args.summary is None
    assert args.tokenizer is None


def test_single_dash_long_options(parser):
    args = parser.parse_args(["-exclude", ".jpg,.png", "-o", "snap.txt", "-size-limit", "-max-size", "1024"])
    assert args.exclude == ".jpg,.png"
    assert args.output == Path("snap.txt")
    assert args.size_limit is True
    assert args.max_size == 1024


def test_double_dash_long_options(parser):
    args = parser.parse_args(["--exclude", ".go", "--output", "x.txt", "--size-limit", "--max-size", "10"])
    assert args.exclude == ".go"
    assert args.output == Path("x.txt")
    assert args.size_limit is True
    assert args.max_size == 10


def test_human_readable_max_size(parser):
    assert parser.parse_args(["-max-size", "50KB"]).max_size == 50000


def test_invalid_max_size(parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["-max-size", "lots"])
    assert exc_info.value.code == 2
    assert "Invalid size format" in capsys.readouterr().err


def test_repeated_ignore(parser):
    args = parser.parse_args(["-i", "docs/", "--ignore", "*.lock"])
    assert args.ignore == ["docs/", "*.lock"]


def test_summary_and_on_error_choices(parser):
    args = parser.parse_args(["-s", "stdout", "-t", "gpt-4", "-P", "skip"])
    assert args.summary == "stdout"
    assert args.tokenizer == "gpt-4"
    assert args.on_error == "skip"

    with pytest.raises(SystemExit):
        parser.parse_args(["-s", "file"])


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("local-ingest ")


def test_validate_args(parser):
    validate_args(parser.parse_args(["-s", "stderr", "-t", "gpt-4"]))
    with pytest.raises(ValueError, match="requires -s/--summary"):
        validate_args(parser.parse_args(["-t", "gpt-4"]))


def test_build_config_always_excludes_extensionless_files(parser, tmp_path):
    config = build_config(parser.parse_args(["-exclude", ".jpg, .png"]), tmp_path)
    assert config.root == tmp_path
    assert config.exclude_extensions == ALWAYS_EXCLUDED_EXTENSIONS | {".jpg", ".png"}
    assert "" in config.exclude_extensions


def test_build_config_flags(parser, tmp_path):
    outside = str(tmp_path.parent / "o.txt")
    args = parser.parse_args(["-size-limit", "-max-size", "3", "-P", "skip", "-i", "docs/", "-o", outside])
    config = build_config(args, tmp_path)
    assert config.size_limit is True
    assert config.max_size == 3
    assert config.error_action == ErrorAction.SKIP
    assert config.ignore_patterns == ("docs/",)


def test_build_config_excludes_output_inside_root(parser, tmp_path):
    args = parser.parse_args(["-o", str(tmp_path / "out" / "snap.txt")])
    config = build_config(args, tmp_path)
    assert config.ignore_patterns == ("/out/snap.txt",)


def test_build_config_relative_output(parser, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = build_config(parser.parse_args([]), tmp_path)
    assert config.ignore_patterns == ("/output.txt",)
