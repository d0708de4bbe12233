"""
Ingestion Agent.

Acquires the input text from exactly one source: a file, a GitHub
issue (via the gh CLI), positional command-line words, or stdin.
Applies the input size guard before any processing begins.
"""

import json
import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from src.errors import InputMissingError, InputTooLargeError, IssueFetchError

logger = logging.getLogger(__name__)


class IngestionAgent:
    """
    Reads input text for a pipeline run.

    Source precedence: file, issue, positional words, stdin.
    """

    def __init__(
        self,
        max_input_chars: int = 200_000,
        gh_command: str = "gh",
        gh_timeout_seconds: int = 30
    ):
        """
        Initialize ingestion agent.

        Args:
            max_input_chars: Reject input longer than this
            gh_command: GitHub CLI executable
            gh_timeout_seconds: Timeout for a single gh invocation
        """
        self.max_input_chars = max_input_chars
        self.gh_command = gh_command
        self.gh_timeout_seconds = gh_timeout_seconds

    def acquire(
        self,
        file_path: Optional[str] = None,
        issue: Optional[int] = None,
        repo: Optional[str] = None,
        words: Optional[List[str]] = None,
        stdin: Optional[TextIO] = None
    ) -> str:
        """
        Read input text from the first configured source and validate it.

        Args:
            file_path: Path to a UTF-8 text file
            issue: GitHub issue number (requires repo)
            repo: GitHub repository as OWNER/REPO
            words: Positional command-line words, joined by single spaces
            stdin: Input stream; ignored when it is an interactive terminal

        Returns:
            Input text

        Raises:
            InputMissingError: No source produced text
            InputTooLargeError: Text exceeds max_input_chars
            IssueFetchError: gh failed or returned malformed output
        """
        if file_path:
            text = self.read_file(file_path)
        elif issue is not None:
            text = self.fetch_issue(issue, repo)
        elif words:
            text = " ".join(words)
            logger.info(f"Read {len(text)} chars from command-line arguments")
        else:
            text = self.read_stream(stdin if stdin is not None else sys.stdin)

        self.validate(text)
        return text

    def validate(self, text: Optional[str]) -> None:
        if not text:
            raise InputMissingError()

        if len(text) > self.max_input_chars:
            logger.error(f"Input rejected: {len(text)} chars > {self.max_input_chars}")
            raise InputTooLargeError(len(text), self.max_input_chars)

        if not text.strip():
            raise InputMissingError("Input contains only whitespace.")

    def read_file(self, file_path: str) -> str:
        path = Path(file_path).resolve()
        # Undecodable bytes become U+FFFD instead of aborting the run
        text = path.read_text(encoding="utf-8", errors="replace")
        logger.info(f"Read {len(text)} chars from {path}")
        return text

    def read_stream(self, stream: TextIO) -> Optional[str]:
        """
        Read a stream to EOF. Returns None for an interactive terminal.

        Text streams backed by a binary buffer (sys.stdin) are decoded
        here as UTF-8 with replacement, like read_file().
        """
        if stream.isatty():
            logger.debug("stdin is a terminal, not reading")
            return None

        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            text = buffer.read().decode("utf-8", errors="replace")
        else:
            text = stream.read()
        logger.info(f"Read {len(text)} chars from stdin")
        return text

    def fetch_issue(self, issue: int, repo: Optional[str]) -> str:
        """
        Fetch a GitHub issue's title, body, and comments via the gh CLI.

        Each part becomes its own paragraph so the splitter treats it
        as a separate sentence block.
        """
        if not repo:
            raise IssueFetchError("--issue requires --repo OWNER/REPO")

        command = [
            self.gh_command, "issue", "view", str(issue),
            "--repo", repo,
            "--json", "title,body,comments"
        ]
        logger.info(f"Fetching issue #{issue} from {repo}")

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.gh_timeout_seconds
            )
        except FileNotFoundError as e:
            raise IssueFetchError(f"GitHub CLI not found: {self.gh_command}") from e
        except subprocess.CalledProcessError as e:
            logger.error(f"gh exited with {e.returncode}: {e.stderr.strip()}")
            raise IssueFetchError(
                f"Failed to fetch issue #{issue} from {repo}: {e.stderr.strip()}"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise IssueFetchError(
                f"Timed out after {self.gh_timeout_seconds}s fetching issue #{issue}"
            ) from e

        return self._parse_issue_json(result.stdout, issue)

    def _parse_issue_json(self, output: str, issue: int) -> str:
        try:
            data = json.loads(output)
        except json.JSONDecodeError as e:
            raise IssueFetchError(f"Malformed gh output for issue #{issue}: {e}") from e

        if not isinstance(data, dict):
            raise IssueFetchError(f"Unexpected gh output for issue #{issue}")

        parts = [data.get("title") or "", data.get("body") or ""]
        for comment in data.get("comments") or []:
            parts.append(comment.get("body") or "")

        text = "\n\n".join(part.strip() for part in parts if part and part.strip())
        logger.info(
            f"Fetched issue #{issue}: {len(data.get('comments') or [])} comments, {len(text)} chars"
        )
        return text
