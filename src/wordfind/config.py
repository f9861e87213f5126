from __future__ import annotations
import os

# Dictionary source (override with WORDFIND_DICT)
DEFAULT_DICTIONARY: str = os.environ.get("WORDFIND_DICT", "/usr/share/dict/words")
ENCODING: str = "utf-8"
FALLBACK_ENCODING: str = "latin-1"

# Dedupe/compare policy: False -> "Apple" and "apple" are the same word
CASE_SENSITIVE: bool = False

# Rows returned when the caller does not pass a limit
TOP_K: int = 10

# /* ~~~ sharded scan: worker threads and the size below which we stay sequential ~~~ */
WORKERS: int = int(os.environ.get("WORDFIND_WORKERS", "0")) or min(4, os.cpu_count() or 1)
PARALLEL_MIN_WORDS: int = 50_000

# /* ~~~ how many words a scan visits between cancel checks ~~~ */
CANCEL_CHECK_EVERY: int = 2048

# Repeat queries (backspacing) are served from here
RESULT_CACHE_SIZE: int = 128

# Terminal input poll timeout
POLL_INTERVAL_MS: int = 100

# Progress logging (set WORDFIND_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("WORDFIND_VERBOSE") == "1"
