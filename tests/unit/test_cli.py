from __future__ import annotations

import json
from pathlib import Path

import pytest


def _write_profile(path: Path, profile) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(profile.to_dict()), encoding="utf-8")
    return path


@pytest.fixture
def profile_files(tmp_path, candidate_profile, leader_profile, sales_ideal):
    return {
        "candidate": _write_profile(tmp_path / "candidate.json", candidate_profile),
        "leader": _write_profile(tmp_path / "leader.json", leader_profile),
        "ideal": _write_profile(tmp_path / "vendedor.json", sales_ideal),
    }


def test_cli_without_command_prints_help(capsys) -> None:
    from behavioral_fit.__main__ import main

    assert main([]) == 0
    assert "behavioral-fit" in capsys.readouterr().out


def test_cli_parser_supports_subcommands() -> None:
    from behavioral_fit.__main__ import create_parser

    parser = create_parser()

    assert parser.parse_args(["pairwise", "--a", "a.yaml", "--b", "b.yaml"]).mode == (
        "pairwise"
    )
    range_args = parser.parse_args(
        ["range", "--profile", "c.yaml", "--template", "vendedor"]
    )
    assert range_args.mode == "range"
    assert range_args.template == "vendedor"

    evaluate_args = parser.parse_args(["evaluate", "c1", "vendas", "--leader", "l1"])
    assert evaluate_args.candidate_id == "c1"
    assert evaluate_args.leader == "l1"


def test_cli_range_requires_exactly_one_ideal_source() -> None:
    from behavioral_fit.__main__ import create_parser

    parser = create_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["range", "--profile", "c.yaml"])
    with pytest.raises(SystemExit):
        parser.parse_args(
            ["range", "--profile", "c.yaml", "--ideal", "i.yaml", "--template", "rh"]
        )


def test_cli_pairwise_prints_text_report(profile_files, capsys) -> None:
    from behavioral_fit.__main__ import main

    exit_code = main(
        [
            "pairwise",
            "--a",
            str(profile_files["candidate"]),
            "--b",
            str(profile_files["leader"]),
            "--format",
            "text",
        ]
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Score Geral: 88/100 (ALTO)" in out


def test_cli_range_json_output_and_out_file(profile_files, tmp_path, capsys) -> None:
    from behavioral_fit.__main__ import main

    out_path = tmp_path / "artifacts" / "fit.json"

    exit_code = main(
        [
            "range",
            "--profile",
            str(profile_files["candidate"]),
            "--ideal",
            str(profile_files["ideal"]),
            "--format",
            "json",
            "--out",
            str(out_path),
        ]
    )

    assert exit_code == 0
    captured = capsys.readouterr()
    printed = json.loads(captured.out)
    assert printed["kind"] == "range"
    assert printed["role_name"] == "Vendedor"
    assert json.loads(out_path.read_text(encoding="utf-8")) == printed
    assert "Wrote:" in captured.err


def test_cli_relative_out_resolves_under_output_dir(
    profile_files, tmp_path, monkeypatch, capsys
) -> None:
    from behavioral_fit.__main__ import main

    output_dir = tmp_path / "outs"
    monkeypatch.setenv("OUTPUT_DIR", str(output_dir))

    exit_code = main(
        [
            "pairwise",
            "--a",
            str(profile_files["candidate"]),
            "--b",
            str(profile_files["leader"]),
            "--out",
            "fit.json",
        ]
    )

    assert exit_code == 0
    written = output_dir / "fit.json"
    assert written.exists()
    assert json.loads(written.read_text(encoding="utf-8"))["overall_score"] == 88
    assert str(written) in capsys.readouterr().err


def test_cli_consolidated_with_template_and_leader(profile_files, capsys) -> None:
    from behavioral_fit.__main__ import main

    exit_code = main(
        [
            "consolidated",
            "--profile",
            str(profile_files["candidate"]),
            "--template",
            "vendedor",
            "--leader",
            str(profile_files["leader"]),
            "--format",
            "json",
        ]
    )

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["leader_fit"]["overall_score"] == 88
    assert payload["consolidated"]["leader_score"] == 88


def test_cli_evaluate_reads_data_dir(
    tmp_path, candidate_profile, leader_profile, sales_ideal, capsys
) -> None:
    from behavioral_fit.__main__ import main

    _write_profile(tmp_path / "profiles" / "c1.json", candidate_profile)
    _write_profile(tmp_path / "profiles" / "l1.json", leader_profile)
    _write_profile(tmp_path / "roles" / "vendas.json", sales_ideal)

    exit_code = main(
        [
            "evaluate",
            "c1",
            "vendas",
            "--leader",
            "l1",
            "--data-dir",
            str(tmp_path),
            "--format",
            "text",
        ]
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Função: Vendedor" in out
    assert "Score Consolidado:" in out


def test_cli_evaluate_unknown_candidate_errors_cleanly(tmp_path, capsys) -> None:
    from behavioral_fit.__main__ import main

    exit_code = main(["evaluate", "ghost", "vendas", "--data-dir", str(tmp_path)])

    assert exit_code == 1
    assert "ghost" in capsys.readouterr().err


def test_cli_invalid_profile_errors_cleanly(tmp_path, profile_files, capsys) -> None:
    from behavioral_fit.__main__ import main

    bad = tmp_path / "bad.json"
    bad.write_text(
        json.dumps(
            {"dominance": 150, "influence": 1, "steadiness": 1, "conformity": 1}
        ),
        encoding="utf-8",
    )

    exit_code = main(
        ["pairwise", "--a", str(bad), "--b", str(profile_files["leader"])]
    )

    assert exit_code == 1
    assert "dominance" in capsys.readouterr().err


def test_cli_unknown_template_errors_cleanly(profile_files, capsys) -> None:
    from behavioral_fit.__main__ import main

    exit_code = main(
        [
            "range",
            "--profile",
            str(profile_files["candidate"]),
            "--template",
            "astronauta",
        ]
    )

    assert exit_code == 1
    assert "Unknown ideal profile template" in capsys.readouterr().err


def test_cli_templates_lists_presets(capsys) -> None:
    from behavioral_fit.__main__ import main

    assert main(["templates"]) == 0
    out = capsys.readouterr().out
    assert "vendedor: Vendedor" in out
    assert "analista: Analista de Dados" in out
