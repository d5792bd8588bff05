"""Tests for the command-line interface."""

import os
from unittest.mock import patch

import pytest

from enumfiles import __version__
from enumfiles.cli import build_parser, main
from enumfiles.config import EnumConfig


def test_files_shallow(sample_tree, capsys):
    assert main(["files", sample_tree]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "test/testFolder/test1.txt",
        "test/testFolder/test2.txt",
    ]


def test_dirs_recursive(sample_tree, capsys):
    assert main(["dirs", sample_tree, "-r"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "test/testFolder/test1",
        "test/testFolder/test1/test1_1",
        "test/testFolder/test1/test1_2",
        "test/testFolder/test2",
    ]


def test_sequential_matches_default(sample_tree, capsys):
    main(["files", sample_tree, "--recursive"])
    default = capsys.readouterr().out
    main(["files", sample_tree, "--recursive", "--sequential", "--max-concurrent", "1"])
    assert capsys.readouterr().out == default
    assert len(default.splitlines()) == 6


def test_missing_path_prints_nothing(sample_tree, capsys):
    assert main(["dirs", "test/testFolder/test100", "-r"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_listing_failure_exits_nonzero(sample_tree, capsys):
    with patch("os.scandir", side_effect=PermissionError(13, "Permission denied")):
        assert main(["files", sample_tree]) == 1
    assert "enumfiles: [Errno 13] Permission denied" in capsys.readouterr().err


def test_file_as_root_exits_nonzero(sample_tree, capsys):
    assert main(["dirs", os.path.join(sample_tree, "test1.txt")]) == 1
    assert capsys.readouterr().err.startswith("enumfiles: ")


def test_invalid_max_concurrent(sample_tree, capsys):
    assert main(["files", sample_tree, "--max-concurrent", "0"]) == 2
    assert "max_concurrent" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip() == f"enumfiles {__version__}"


def test_max_concurrent_default_follows_config():
    args = build_parser().parse_args(["files", "somewhere"])
    assert args.max_concurrent == EnumConfig().max_concurrent
    assert args.sequential is False
