"""Tests for the diffgraph command line."""

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from diffgraph.cli import EXIT_CONFIG_ERROR, EXIT_NO_DATA, EXIT_OK, main  # noqa: E402


@pytest.fixture
def survey_csv(tmp_path):
    path = tmp_path / "survey.csv"
    path.write_text("Q1,Q2\n5,1\n8,1\n5,4\n", encoding="utf-8")
    return path


def test_writes_dot(survey_csv, tmp_path):
    dot = tmp_path / "out.dot"

    code = main(["--input", str(survey_csv), "--dot", str(dot), "--no-show"])

    assert code == EXIT_OK
    content = dot.read_text(encoding="utf-8")
    assert 'R1 -- R2 [label="3"];' in content
    assert "pos=" not in content


def test_writes_pinned_dot(survey_csv, tmp_path):
    dot = tmp_path / "out.dot"
    assert main(["--input", str(survey_csv), "--dot", str(dot), "--pinned", "--no-show"]) == EXIT_OK
    assert "pos=" in dot.read_text(encoding="utf-8")


def test_writes_png(survey_csv, tmp_path):
    png = tmp_path / "out.png"
    assert main(["--input", str(survey_csv), "--png", str(png), "--no-show"]) == EXIT_OK
    assert png.exists()


def test_question_override(survey_csv, tmp_path):
    dot = tmp_path / "out.dot"
    main(["--input", str(survey_csv), "--question", "1", "--dot", str(dot), "--no-show"])
    content = dot.read_text(encoding="utf-8")
    assert 'label="Question 2";' in content
    assert 'R1 -- R3 [label="3"];' in content


def test_config_file(survey_csv, tmp_path):
    config = tmp_path / "run.yaml"
    config.write_text(f"input_path: {survey_csv.name}\nquestion_index: 1\n", encoding="utf-8")
    dot = tmp_path / "out.dot"

    assert main(["--config", str(config), "--dot", str(dot), "--no-show"]) == EXIT_OK
    assert 'label="Question 2";' in dot.read_text(encoding="utf-8")


def test_missing_input(tmp_path):
    assert main(["--input", str(tmp_path / "absent.csv"), "--no-show"]) == EXIT_NO_DATA


def test_question_out_of_range(survey_csv):
    assert main(["--input", str(survey_csv), "--question", "7", "--no-show"]) == EXIT_CONFIG_ERROR


def test_negative_question(survey_csv):
    assert main(["--input", str(survey_csv), "--question", "-1", "--no-show"]) == EXIT_CONFIG_ERROR


def test_missing_config_file(tmp_path):
    assert main(["--config", str(tmp_path / "none.yaml"), "--no-show"]) == EXIT_CONFIG_ERROR


def test_print_config(capsys, survey_csv):
    assert main(["--input", str(survey_csv), "--question", "1", "--print-config"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "question_index: 1" in out
    assert f"input_path: {survey_csv}" in out


@pytest.mark.parametrize("line", ["question_index: 1.0", "input_path: 123", "question_index: true"])
def test_mistyped_config_value(survey_csv, tmp_path, line):
    config = tmp_path / "run.yaml"
    config.write_text(f"input_path: {survey_csv.name}\n{line}\n", encoding="utf-8")
    assert main(["--config", str(config), "--no-show"]) == EXIT_CONFIG_ERROR
