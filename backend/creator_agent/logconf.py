# backend/creator_agent/logconf.py
import logging
import sys


def init(level: str = "INFO"):
    """Configure the root logger once at startup."""
    fmt = "%(asctime)s | %(levelname)-5s | %(module)s | %(message)s"
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=fmt,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
