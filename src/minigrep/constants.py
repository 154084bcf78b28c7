#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants shared across the minigrep package.

Constants are organized by category:
1. Command-line tokens - Flag prefix and recognized flags
2. Environment variables - Override and logging variables
3. Exit codes - Process exit statuses returned by the CLI
"""

from __future__ import annotations

# =============================================================================
# Command-line tokens
# =============================================================================

FLAG_PREFIX = "--"
IGNORE_CASE_FLAG = "--ignore_case"

USAGE = "usage: minigrep <query> <file_path> [--ignore_case]"

# =============================================================================
# Environment variables
# =============================================================================

# Strict "true"/"false" override for --ignore_case
IGNORE_CASE_ENV = "IGNORE_CASE"

ENV_PREFIX = "MINIGREP_"
LOG_LEVEL_ENV = f"{ENV_PREFIX}LOG_LEVEL"
LOG_FILE_ENV = f"{ENV_PREFIX}LOG_FILE"
TRACE_ENV = f"{ENV_PREFIX}TRACE"

DEFAULT_LOG_LEVEL = "WARNING"

# Accepted spellings for the ambient (non-override) boolean variables
TRUTHY_ENV_VALUES = ("true", "1", "yes", "on")

# =============================================================================
# Exit codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_ARGUMENT_ERROR = 2
EXIT_ENVIRONMENT_ERROR = 3
EXIT_FILE_ERROR = 4
