"""
Command line interface for talentrank.

This module exposes subcommands to rank a candidate pool against one
job and write the matches to CSV, to explain a single candidate's
score and to print a human‑readable report with histograms.  The CLI
is intentionally lightweight and delegates the work to functions in
the `ingest` and `rank` packages.

Candidates and employers are read from JSON array files.  Scoring
weights, the availability vocabulary and visa exemptions can be
overridden with a YAML file passed via ``--config``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Tuple

from .config import ScoringWeights, filter_settings_from_config, load_config, weights_from_config
from .ingest.json_loader import load_candidates, load_employers
from .ingest.write_csv import write_matches_csv
from .normalize.schema import Candidate, Employer, MatchResult
from .rank.aggregate import rank
from .rank.distribution import (
    Bucket,
    age_distribution,
    salary_distribution,
    score_distribution,
    token_distribution,
)
from .rank.explain import explain
from .rank.scoring import match_percentage, max_possible_score

logger = logging.getLogger("talentrank.cli")


def _select_job(employers: List[Employer], job_id: int) -> Employer:
    for employer in employers:
        if employer.job_id == job_id:
            return employer
    raise SystemExit(f"No employer with job_id {job_id}")


def _load_and_rank(
    args: argparse.Namespace,
) -> Tuple[List[Candidate], Employer, List[MatchResult], ScoringWeights]:
    cfg = load_config(args.config)
    weights = weights_from_config(cfg)
    candidates = load_candidates(args.candidates)
    employer = _select_job(load_employers(args.employers), args.job_id)
    results = rank(
        candidates,
        employer,
        weights=weights,
        settings=filter_settings_from_config(cfg),
    )
    return candidates, employer, results, weights


def cmd_match(args: argparse.Namespace) -> None:
    """Rank candidates for one job and write matches CSV."""
    _, employer, results, _ = _load_and_rank(args)
    if not results:
        logger.warning("No candidates passed the elimination criteria")
    topk = args.topk or len(results)
    written = write_matches_csv(results[:topk], employer, args.out)
    logger.info("Wrote %d matches to %s", written, args.out)


def cmd_explain(args: argparse.Namespace) -> None:
    """Print the score breakdown of one candidate as JSON."""
    candidates, employer, results, weights = _load_and_rank(args)
    if not any(c.candidate_id == args.candidate_id for c in candidates):
        raise SystemExit(f"No candidate with candidate_id {args.candidate_id}")
    for result in results:
        if result.candidate.candidate_id == args.candidate_id:
            explanation = explain(result, employer, weights)
            payload = {
                "candidate_id": args.candidate_id,
                "rank": result.rank,
                "matchingScore": result.matching_score,
                **explanation.to_dict(),
            }
            print(json.dumps(payload, indent=2, ensure_ascii=False))
            return
    raise SystemExit(f"Candidate {args.candidate_id} was eliminated for job {employer.job_id}")


def _print_histogram(title: str, buckets: List[Bucket]) -> None:
    print(title)
    for bucket in buckets:
        print(f"   {bucket.label:>15} | {'#' * bucket.count} {bucket.count}")
    print()


def cmd_report(args: argparse.Namespace) -> None:
    """Print a simple ranking report with histograms."""
    _, employer, results, weights = _load_and_rank(args)
    max_score = max_possible_score(employer, weights)
    print(f"{employer.job_title or 'Job'} at {employer.employer_name or 'unknown'} (job {employer.job_id})")
    print(f"{len(results)} candidates ranked, max possible score {max_score}")
    print()
    limit = args.limit or len(results)
    for result in results[:limit]:
        candidate = result.candidate
        pct = match_percentage(result.matching_score, max_score)
        name = candidate.full_name or f"Candidate {candidate.candidate_id}"
        print(f"{result.rank:02d}. {name} – score {result.matching_score} ({pct:.0%})")
    print()
    if not results:
        return
    _print_histogram("Match score", score_distribution(results, max_score))
    _print_histogram("Expected monthly salary", salary_distribution(results))
    _print_histogram("Age", age_distribution(results))
    _print_histogram("Domain knowledge", token_distribution(results, "past_current_domain"))
    _print_histogram("Functional skills", token_distribution(results, "past_current_function"))


def _add_pool_arguments(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--candidates", required=True, help="Path to candidates JSON array")
    cmd.add_argument("--employers", required=True, help="Path to employers JSON array")
    cmd.add_argument("--job-id", type=int, required=True, dest="job_id", help="Job to rank against")
    cmd.add_argument("--config", help="YAML config overriding weights and vocabularies")


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="talentrank", description="Rules-based candidate ranking")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Match
    match_cmd = subparsers.add_parser("match", help="Rank candidates for a job")
    _add_pool_arguments(match_cmd)
    match_cmd.add_argument("--topk", type=int, default=0, help="Maximum number of matches to output (0 = all)")
    match_cmd.add_argument("--out", default="matches.csv", help="Output CSV path")
    match_cmd.set_defaults(func=cmd_match)

    # Explain
    explain_cmd = subparsers.add_parser("explain", help="Explain one candidate's score")
    _add_pool_arguments(explain_cmd)
    explain_cmd.add_argument("--candidate-id", type=int, required=True, dest="candidate_id")
    explain_cmd.set_defaults(func=cmd_explain)

    # Report
    report_cmd = subparsers.add_parser("report", help="Print a ranking report with histograms")
    _add_pool_arguments(report_cmd)
    report_cmd.add_argument("--limit", type=int, default=20, help="Number of top candidates to display")
    report_cmd.set_defaults(func=cmd_report)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main(sys.argv[1:])
