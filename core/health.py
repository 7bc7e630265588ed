"""
core/health.py
--------------
System health diagnostics for the HealthInfoBot backend.

Purpose
-------
- Used by the FastAPI `/health` endpoint.
- Validates database connectivity and reports the catalog size.
- Reports backend uptime, version and CPU/memory usage.
- Returns JSON-safe dict ready for serialization.
"""

from __future__ import annotations

import time
import platform
import psutil
from typing import Dict, Any

from core.logger import get_logger
from core.metadata import __version__
from database.errors import DiseaseStoreError
from database.queries import count_diseases

logger = get_logger(__name__)

# Cache the process start time for uptime calculation
START_TIME = time.time()


def system_health() -> Dict[str, Any]:
    """
    Return structured backend health diagnostics.

    Returns
    -------
    dict
        {"status": "ok" | "degraded", "database_connected": bool,
         "disease_count": int | None, ...}
    """
    status = "ok"
    message = "Backend operational."
    database_connected = False
    disease_count = None

    # --- Database connectivity test ---
    try:
        disease_count = count_diseases()
        database_connected = True
    except DiseaseStoreError as e:
        status = "degraded"
        message = f"Database check failed: {e.__class__.__name__}"
        logger.warning(f"Health check could not reach the database: {e}")

    # --- System metrics ---
    try:
        cpu_load = psutil.cpu_percent(interval=0.2)
        memory_usage = round(psutil.Process().memory_info().rss / (1024 * 1024), 2)
    except psutil.Error:
        cpu_load = None
        memory_usage = None

    return {
        "status": status,
        "message": message,
        "version": __version__,
        "database_connected": database_connected,
        "disease_count": disease_count,
        "cpu_load": cpu_load,
        "memory_usage": memory_usage,
        "uptime_sec": round(time.time() - START_TIME, 2),
        "system": platform.system(),
        "release": platform.release(),
    }
