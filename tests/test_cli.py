"""Tests for the batch command-line driver."""

import logging

import pytest
from PIL import Image

from frequency_screener.cli import build_parser, main
from frequency_screener.dataset import SplitLabel
from frequency_screener.frequency_detector import FrequencyScreener


@pytest.fixture
def dataset_root(tmp_path):
    """Create a small dataset with one or two images per split/label pair."""
    colors = {
        ("train", "fake"): [10, 200],
        ("train", "real"): [50],
        ("test", "fake"): [120],
        ("test", "real"): [250],
    }
    for (split, label), values in colors.items():
        leaf = tmp_path / split / label
        leaf.mkdir(parents=True)
        for i, value in enumerate(values):
            img = Image.new("L", (12, 10), color=value)
            img.putpixel((3, 4), 255 - value)
            img.save(leaf / f"img_{i}.jpg")
        (leaf / "readme.txt").write_text("skip me")
    return tmp_path


def test_parser_defaults():
    """Test default arguments."""
    args = build_parser().parse_args([])

    assert args.root == "dataset"
    assert args.pair is None
    assert args.ext is None
    assert args.progress is False


def test_parser_pairs():
    """Test repeatable --pair parsing."""
    args = build_parser().parse_args(["data", "--pair", "test/fake", "--pair", "test/real"])

    assert args.root == "data"
    assert args.pair == [SplitLabel("test", "fake"), SplitLabel("test", "real")]


def test_main_prints_report(dataset_root, capsys):
    """Test the full report: headers in order, one line per accepted file."""
    exit_code = main([str(dataset_root)])

    assert exit_code == 0
    out = capsys.readouterr().out
    lines = out.splitlines()

    assert lines[0] == ""
    assert lines[1] == "[TRAIN / FAKE]"
    headers = [line for line in lines if line.startswith("[")]
    assert headers == ["[TRAIN / FAKE]", "[TRAIN / REAL]", "[TEST / FAKE]", "[TEST / REAL]"]

    score_lines = [line for line in lines if "score =" in line]
    assert len(score_lines) == 5
    assert "readme.txt" not in out

    screener = FrequencyScreener()
    expected = screener.analyze(dataset_root / "train" / "fake" / "img_0.jpg").score
    assert lines[2] == f"{'img_0.jpg':<20}  score = {expected:.4f}"


def test_main_selected_pairs(dataset_root, capsys):
    """Test that --pair replaces the default pairs."""
    exit_code = main([str(dataset_root), "--pair", "test/real"])

    assert exit_code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:2] == ["", "[TEST / REAL]"]
    assert len(lines) == 3
    assert lines[2].startswith("img_0.jpg ")


def test_main_missing_directory(tmp_path, capsys, caplog):
    """Test that a missing directory aborts the run with status 1."""
    leaf = tmp_path / "train" / "fake"
    leaf.mkdir(parents=True)
    Image.new("L", (4, 4), color=7).save(leaf / "ok.jpg")

    with caplog.at_level(logging.ERROR):
        exit_code = main([str(tmp_path)])

    assert exit_code == 1
    out = capsys.readouterr().out
    assert "[TRAIN / FAKE]" in out
    assert "ok.jpg" in out
    assert "[TRAIN / REAL]" in out
    assert "[TEST / FAKE]" not in out
    assert str(tmp_path / "train" / "real") in caplog.text


def test_main_corrupt_image(dataset_root, capsys, caplog):
    """Test that an undecodable image aborts the run with status 1."""
    bad = dataset_root / "train" / "real" / "broken.jpg"
    bad.write_bytes(b"\xff\xd8 not really a jpeg")

    with caplog.at_level(logging.ERROR):
        exit_code = main([str(dataset_root)])

    assert exit_code == 1
    assert "broken.jpg" in caplog.text
    assert "[TEST / FAKE]" not in capsys.readouterr().out


def test_main_custom_extension(tmp_path, capsys):
    """Test that --ext replaces the default extension list."""
    leaf = tmp_path / "train" / "fake"
    leaf.mkdir(parents=True)
    Image.new("L", (4, 4), color=7).save(leaf / "a.png")
    Image.new("L", (4, 4), color=7).save(leaf / "b.jpg")

    exit_code = main([str(tmp_path), "--pair", "train/fake", "--ext", ".png", "--progress"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "a.png" in out
    assert "b.jpg" not in out


def test_main_invalid_extension(tmp_path):
    """Test that a malformed extension is a configuration error."""
    assert main([str(tmp_path), "--ext", "png"]) == 2


def test_main_image_exceeding_pixel_limit(tmp_path, capsys, caplog, write_oversized_png):
    """Test that an oversized image aborts the run with status 1 and names the file."""
    write_oversized_png(tmp_path / "train" / "fake" / "huge.jpg")

    with caplog.at_level(logging.ERROR):
        exit_code = main([str(tmp_path), "--pair", "train/fake"])

    assert exit_code == 1
    assert "huge.jpg" in caplog.text
    assert "score =" not in capsys.readouterr().out
