"""
Process health snapshot for the /api/health endpoint.

Collects uptime and memory usage of the running service with psutil.
"""
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import psutil

logger = logging.getLogger(__name__)


def get_process_uptime(process: Optional[psutil.Process] = None) -> float:
    """Seconds since the current process started."""
    process = process or psutil.Process()
    return max(time.time() - process.create_time(), 0.0)


def get_memory_usage(process: Optional[psutil.Process] = None) -> Dict[str, Any]:
    """
    Memory usage of the current process.

    Returns:
        dict: resident and virtual size in bytes, and percent of system memory
    """
    process = process or psutil.Process()
    try:
        info = process.memory_info()
        return {
            "rss": info.rss,
            "vms": info.vms,
            "percent": round(process.memory_percent(), 2),
        }
    except psutil.Error as e:
        logger.error(f"Error collecting process memory: {e}", exc_info=True)
        return {"error": "Failed to collect memory usage"}


def get_health_snapshot() -> Dict[str, Any]:
    process = psutil.Process()
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": get_process_uptime(process),
        "memory": get_memory_usage(process),
    }
