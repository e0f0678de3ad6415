# GotOpts — (c) 2025 Spencer James — MIT Licensed
"""Package-wide logger for gotopts."""
import logging

logger: logging.Logger = logging.getLogger("gotopts")
