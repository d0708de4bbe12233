"""
Configuration settings for the D&R Protocol.

Centralized configuration for all agents and pipeline parameters.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
RESULTS_DIR = Path(os.getenv("DR_RESULTS_DIR", "dr_results"))

# Input guard
MAX_INPUT_CHARS = int(os.getenv("DR_MAX_INPUT_CHARS", "200000"))

# Keyword Scorer
TOP_KEYWORDS = 12

# Focal Point Selector
TRIGGER_KEYWORDS = 6  # Top keywords used as sentence triggers and K-points
MAX_FOCAL_POINTS = 5

# Re-architecture
MAX_PROPOSALS = 3

# Issue tracker ingestion (GitHub CLI)
GH_COMMAND = os.getenv("DR_GH_COMMAND", "gh")
GH_TIMEOUT_SECONDS = 30

# Logging
LOG_LEVEL = os.getenv("DR_LOG_LEVEL", "WARNING")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Design Rationale and Trade-offs:
#
# 1. Why environment overrides for paths and the size guard only?
#    - These vary between CI runners and local use
#    - Heuristic limits (12 / 6 / 5 / 3) are part of the report contract
#    - Trade-off: Tuning the heuristics means editing this file
#
# 2. Why default log level WARNING?
#    - stdout carries the JSON report, stderr carries the written path
#    - INFO chatter on every run would bury that path
#    - Trade-off: Use --log-level INFO when debugging a run
