"""
Command-line entry point: `analyze` and `recommend`.
"""

import sys
import json
import argparse

import pandas as pd

from ecoclassifier.analysis import EcosystemAnalyzer, run_analysis
from ecoclassifier.classification import generate_recommendation
from ecoclassifier.constants import STRATEGIES, STRATEGY_KEYWORD, STRATEGY_TRAINED_MODEL
from ecoclassifier.exceptions import EcoClassifierError, UsageError
from ecoclassifier.loaders import load_all
from ecoclassifier.models import AnalysisConfig
from ecoclassifier.scoring import ModelManager
from ecoclassifier.strategies import build_strategy

USAGE = "Usage: ecoclassifier <command> [args...]"


def _model_manager(strategy: str, model_dir: str = None):
    """Load a saved model when asked to, otherwise train on the built-in corpus."""
    if strategy != STRATEGY_TRAINED_MODEL:
        return None
    manager = ModelManager()
    if model_dir and manager.load(model_dir):
        return manager
    return manager.train()


def _add_common_args(parser):
    parser.add_argument("paths", nargs='+', help="JSON, CSV, TXT or PDF files with historical texts")
    parser.add_argument("--strategy", choices=STRATEGIES, default=STRATEGY_KEYWORD,
                        help=f"Classifier strategy (default: {STRATEGY_KEYWORD})")
    parser.add_argument("--model-dir", type=str, default=None,
                        help="Directory with a saved Bayesian model (trained-model strategy only)")


def results_to_csv(results: list) -> str:
    rows = []
    for r in results:
        row = r.model_dump()
        row['extracted_features'] = ';'.join(row['extracted_features'])
        rows.append(row)
    columns = list(rows[0].keys()) if rows else ['text_id', 'ecosystem_type', 'confidence']
    return pd.DataFrame(rows, columns=columns).to_csv(index=False)


def analyze_command(args: list) -> int:
    parser = argparse.ArgumentParser(prog="ecoclassifier analyze",
                                     description="Classify historical texts into ecosystem types")
    _add_common_args(parser)
    parser.add_argument("--temporal", action="store_true", help="Include trend analysis")
    parser.add_argument("--compare", type=str, default=None, metavar="MODERN_FILE",
                        help="Compare results against a modern text sample")
    parser.add_argument("--threshold", type=float, default=0.0, help="Minimum confidence to report")
    parser.add_argument("--format", choices=['json', 'csv'], default='json')
    opts = parser.parse_args(args)

    config = AnalysisConfig(
        include_temporal_analysis=opts.temporal,
        confidence_threshold=opts.threshold,
        include_comparative_analysis=opts.compare is not None,
        strategy=opts.strategy,
    )
    modern_data = None
    if opts.compare:
        with open(opts.compare, 'rb') as f:
            modern_data = f.read()

    texts = load_all(opts.paths)
    report = run_analysis(texts, config, modern_data=modern_data,
                          model_manager=_model_manager(opts.strategy, opts.model_dir))

    if opts.format == 'csv':
        sys.stdout.write(results_to_csv(report.results))
    else:
        print(json.dumps(report.model_dump(), indent=2))
    return 0


def recommend_command(args: list) -> int:
    parser = argparse.ArgumentParser(prog="ecoclassifier recommend",
                                     description="Conservation recommendation for historical texts")
    _add_common_args(parser)
    opts = parser.parse_args(args)

    strategy = build_strategy(opts.strategy, _model_manager(opts.strategy, opts.model_dir))
    results = EcosystemAnalyzer(strategy).analyze(load_all(opts.paths))
    print(generate_recommendation(results))
    return 0


COMMANDS = {
    'analyze': analyze_command,
    'recommend': recommend_command,
}


def dispatch(argv: list) -> int:
    if not argv:
        raise UsageError(USAGE)
    command = argv[0]
    if command not in COMMANDS:
        raise UsageError(f"Unknown command: {command}\nAvailable commands: {', '.join(COMMANDS)}")
    return COMMANDS[command](argv[1:])


def main(argv: list = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        return dispatch(argv)
    except EcoClassifierError as e:
        print(e.detail, file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
