# statespace/core/config.py
from __future__ import annotations
import os

# ---- Tunables (overridable via environment variables) -----------------------
WORKERS      = int(os.getenv("STATESPACE_WORKERS", str(min(8, os.cpu_count() or 1))))  # parallel DFS pool size
LOG_LEVEL    = os.getenv("STATESPACE_LOG_LEVEL", "WARNING").upper()                    # CLI log level
TRACE_MEMORY = os.getenv("STATESPACE_TRACE_MEMORY", "0") == "1"                        # tracemalloc peak_kb on results
