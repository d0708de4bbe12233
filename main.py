"""
D&R Protocol - Deconstruction -> Focal Point -> Re-architecture

CLI entry point for running the heuristic text-analysis pipeline.
"""

import argparse
import json
import logging
import sys

from src.agents.ingestion import IngestionAgent
from src.orchestrator import PipelineOrchestrator
from src.utils.storage import ReportStorage
from src.errors import DRProtocolError
import config.settings as settings


def setup_logging(log_level: str = "WARNING", log_file: str = None):
    """Configure logging for the entire application."""
    # stdout is reserved for the JSON report
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=handlers,
        force=True
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="D&R Protocol - Deconstruction, Focal Point, Re-architecture",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a file
  python main.py --file notes/incident.txt

  # Analyze piped text
  echo "The cron workflow failed. We should rotate the secret." | python main.py

  # Analyze text given as arguments
  python main.py Why does the workflow push with the gh token?

  # Analyze a GitHub issue (requires the gh CLI, authenticated)
  python main.py --issue 123 --repo owner/repo

Exit codes: 0 success, 1 fatal error, 2 no input, 3 input too large.
        """
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Text to analyze (joined with spaces)"
    )

    parser.add_argument(
        "--file",
        help="Read input text from this file (UTF-8)"
    )

    parser.add_argument(
        "--issue",
        type=int,
        help="GitHub issue number to fetch with the gh CLI"
    )

    parser.add_argument(
        "--repo",
        help="GitHub repository for --issue (OWNER/REPO)"
    )

    parser.add_argument(
        "--results-dir",
        default=str(settings.RESULTS_DIR),
        help=f"Directory for report files (default: {settings.RESULTS_DIR})"
    )

    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Print the report without writing it to disk"
    )

    parser.add_argument(
        "--keywords-csv",
        action="store_true",
        help="Also write a keyword table CSV next to the report"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    parser.add_argument(
        "--log-file",
        help="Also write logs to this file"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.issue is not None and not args.repo:
        parser.error("--issue requires --repo OWNER/REPO")

    setup_logging(args.log_level, args.log_file)
    logger = logging.getLogger(__name__)

    try:
        ingestion = IngestionAgent(
            max_input_chars=settings.MAX_INPUT_CHARS,
            gh_command=settings.GH_COMMAND,
            gh_timeout_seconds=settings.GH_TIMEOUT_SECONDS
        )
        text = ingestion.acquire(
            file_path=args.file,
            issue=args.issue,
            repo=args.repo,
            words=args.text,
            stdin=sys.stdin
        )

        storage = None if args.no_save else ReportStorage(args.results_dir)
        orchestrator = PipelineOrchestrator(
            storage=storage,
            write_keyword_table=args.keywords_csv
        )
        report, output_path = orchestrator.run(text)

        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
        if output_path:
            print(f"Wrote {output_path}", file=sys.stderr)

        logger.info("D&R Protocol completed successfully")
        sys.exit(0)

    except DRProtocolError as e:
        logger.debug(f"Aborting with exit code {e.exit_code}: {e}")
        prefix = "Fatal: " if e.exit_code == 1 else ""
        print(f"{prefix}{e}", file=sys.stderr)
        sys.exit(e.exit_code)

    except KeyboardInterrupt:
        logger.warning("Pipeline interrupted by user")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Pipeline failed: {e}", exc_info=True)
        print(f"Fatal: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
