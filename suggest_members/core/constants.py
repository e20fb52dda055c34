"""Application-wide constants for the suggestion engine.

This module contains the values that form part of the observable contract
of the diagnostics (suggestion cap, supported extensions) along with the
tuning knobs used by the ranker.
"""

# ========================================
# Suggestion Ranking Constants
# ========================================

MAX_SUGGESTIONS = 5  # Hard cap on suggestions per diagnostic
MIN_SIMILARITY_SCORE = 0.4  # Candidates must score strictly above this

# ========================================
# Workspace Constants
# ========================================

MANIFEST_FILE_NAME = "package.json"
VENDOR_DIRECTORY = "node_modules"

# Dependency sections read from every manifest, in merge order
DEPENDENCY_SECTIONS = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)

# Extensions indexed as local files and probed during relative resolution
SUPPORTED_EXTENSIONS = (
    ".ts",
    ".tsx",
    ".mts",
    ".cts",
    ".js",
    ".jsx",
    ".mjs",
    ".cjs",
    ".json",
    ".css",
    ".scss",
    ".sass",
    ".less",
)

# Extensions dropped when a file is rendered as an import specifier
SCRIPT_EXTENSIONS = (
    ".ts",
    ".tsx",
    ".mts",
    ".cts",
    ".js",
    ".jsx",
    ".mjs",
    ".cjs",
    ".json",
)

DECLARATION_SUFFIXES = (".d.ts", ".d.mts", ".d.cts")

INDEX_FILE_STEM = "index"

# ========================================
# Message Constants
# ========================================

SUGGESTION_LINE_PREFIX = "  - "
DID_YOU_MEAN = " Did you mean:\n"
NO_SUGGESTIONS_MESSAGE = "No similar suggestions found."
