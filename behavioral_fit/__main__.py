"""Main entry point for behavioral-fit."""

import argparse
import json
import sys
from pathlib import Path

from behavioral_fit import __version__
from behavioral_fit.config.settings import OutputFormat, Settings
from behavioral_fit.utils.logging import configure_logging


def _write_json(path: Path, payload: object) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        model_dump = getattr(value, "model_dump", None)
        if callable(model_dump):
            return model_dump(mode="json")
        return str(value)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(payload, indent=2, ensure_ascii=False, default=_default),
        encoding="utf-8",
    )


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help=(
            "Optional path to write the result as JSON "
            "(relative paths resolve under OUTPUT_DIR)"
        ),
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Console output format (overrides settings)",
    )


def _add_ideal_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--ideal", type=Path, help="Path to the role's ideal profile (YAML or JSON)"
    )
    group.add_argument(
        "--template", help="Preset ideal profile key (see the 'templates' command)"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="behavioral-fit",
        description="behavioral-fit: DISC/MBTI fit scoring for recruitment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m behavioral_fit pairwise --a candidate.yaml --b leader.yaml
  python -m behavioral_fit range --profile candidate.yaml --template vendedor
  python -m behavioral_fit evaluate cand-1 role-1 --leader lead-1
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="commands",
        description="Available commands",
    )

    pairwise_parser = subparsers.add_parser(
        "pairwise",
        help="Score fit between two measured profiles (e.g. candidate vs leader)",
    )
    pairwise_parser.add_argument(
        "--a", type=Path, required=True, help="Path to the first measured profile"
    )
    pairwise_parser.add_argument(
        "--b", type=Path, required=True, help="Path to the second measured profile"
    )
    _add_output_arguments(pairwise_parser)

    range_parser = subparsers.add_parser(
        "range",
        help="Score a measured profile against a role's ideal profile",
    )
    range_parser.add_argument(
        "--profile", type=Path, required=True, help="Path to the measured profile"
    )
    _add_ideal_arguments(range_parser)
    _add_output_arguments(range_parser)

    consolidated_parser = subparsers.add_parser(
        "consolidated",
        help="Blend role fit and optional leader fit into one score",
    )
    consolidated_parser.add_argument(
        "--profile", type=Path, required=True, help="Path to the candidate profile"
    )
    _add_ideal_arguments(consolidated_parser)
    consolidated_parser.add_argument(
        "--leader",
        type=Path,
        default=None,
        help="Optional path to the leader's measured profile",
    )
    _add_output_arguments(consolidated_parser)

    evaluate_parser = subparsers.add_parser(
        "evaluate",
        help="Evaluate a candidate by id using the profile directory",
    )
    evaluate_parser.add_argument("candidate_id", help="Candidate profile id")
    evaluate_parser.add_argument("role_id", help="Role ideal profile id")
    evaluate_parser.add_argument(
        "--leader", default=None, help="Optional leader profile id"
    )
    evaluate_parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Profile directory root (overrides settings)",
    )
    _add_output_arguments(evaluate_parser)

    subparsers.add_parser(
        "templates",
        help="List preset ideal profiles",
    )

    return parser


def _resolve_ideal(parsed: argparse.Namespace, profile_service):
    from behavioral_fit.scoring.templates import get_template

    if parsed.template:
        return get_template(parsed.template)
    return profile_service.load_ideal_profile(parsed.ideal)


def _emit(
    parsed: argparse.Namespace,
    settings: Settings,
    payload: dict,
    report: str,
) -> None:
    output_format = (
        OutputFormat(parsed.format) if parsed.format else settings.output_format
    )
    if output_format == OutputFormat.JSON:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(report)

    if parsed.out is not None:
        out_path = parsed.out
        if not out_path.is_absolute():
            out_path = settings.output_dir / out_path
        _write_json(out_path, payload)
        print(f"Wrote: {out_path}", file=sys.stderr)


def _run(parsed: argparse.Namespace, settings: Settings) -> int:
    from behavioral_fit.scoring.profile import ProfileService
    from behavioral_fit.scoring.service import FitScoringService

    profile_service = ProfileService()
    scoring_service = FitScoringService()

    if parsed.mode == "templates":
        from behavioral_fit.scoring.templates import get_template, list_templates

        for key in list_templates():
            print(f"{key}: {get_template(key).role_name}")
        return 0

    if parsed.mode == "pairwise":
        a = profile_service.load_measured_profile(parsed.a)
        b = profile_service.load_measured_profile(parsed.b)
        fit = scoring_service.compute_pairwise_fit(a, b)
        _emit(parsed, settings, fit.to_dict(), scoring_service.format_result(fit))
        return 0

    if parsed.mode == "range":
        candidate = profile_service.load_measured_profile(parsed.profile)
        ideal = _resolve_ideal(parsed, profile_service)
        fit = scoring_service.compute_range_fit(candidate, ideal)
        _emit(parsed, settings, fit.to_dict(), scoring_service.format_result(fit))
        return 0

    if parsed.mode == "consolidated":
        candidate = profile_service.load_measured_profile(parsed.profile)
        ideal = _resolve_ideal(parsed, profile_service)
        role_fit = scoring_service.compute_range_fit(candidate, ideal)

        leader_fit = None
        if parsed.leader is not None:
            leader = profile_service.load_measured_profile(parsed.leader)
            leader_fit = scoring_service.compute_pairwise_fit(candidate, leader)

        consolidated = scoring_service.compute_consolidated_fit(role_fit, leader_fit)
        payload = {
            "role_fit": role_fit.to_dict(),
            "leader_fit": leader_fit.to_dict() if leader_fit else None,
            "consolidated": consolidated.to_dict(),
        }
        report_parts = [scoring_service.format_result(role_fit)]
        if leader_fit is not None:
            report_parts.append(scoring_service.format_result(leader_fit))
        report_parts.append(f"Score Consolidado: {consolidated.consolidated_score}/100")
        _emit(parsed, settings, payload, "\n\n".join(report_parts))
        return 0

    if parsed.mode == "evaluate":
        from behavioral_fit.scoring.sources import DirectoryProfileSource

        data_dir = parsed.data_dir or settings.data_dir
        source = DirectoryProfileSource(data_dir, profile_service=profile_service)
        evaluation = scoring_service.evaluate_candidate(
            source, parsed.candidate_id, parsed.role_id, leader_id=parsed.leader
        )
        report_parts = [scoring_service.format_result(evaluation.role_fit)]
        if evaluation.leader_fit is not None:
            report_parts.append(scoring_service.format_result(evaluation.leader_fit))
        report_parts.append(
            f"Score Consolidado: {evaluation.consolidated.consolidated_score}/100"
        )
        _emit(parsed, settings, evaluation.to_dict(), "\n\n".join(report_parts))
        return 0

    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from behavioral_fit.scoring.errors import FitEngineError

    parser = create_parser()
    parsed = parser.parse_args(args)

    # Load settings
    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Configure logging
    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    # If no mode specified, show help
    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.debug(f"behavioral-fit v{__version__} running '{parsed.mode}'")

    try:
        return _run(parsed, settings)
    except (FitEngineError, FileNotFoundError, ValueError, KeyError) as e:
        message = e.args[0] if isinstance(e, KeyError) and e.args else e
        print(f"Error: {message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
