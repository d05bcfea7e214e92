#!/usr/bin/env python3
"""
Demo: seed five items, save, simulate a new session, load and print.

Uso:
  python scripts/inventory_demo.py
"""
from __future__ import annotations

from pathlib import Path
import sys

# Garantir que o pacote inventory seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inventory.app import run_demo  # noqa: E402
from inventory.core.logging_config import configure_logging  # noqa: E402


if __name__ == "__main__":
    configure_logging()
    raise SystemExit(run_demo())
