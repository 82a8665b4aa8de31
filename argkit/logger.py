# Argkit Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package logger for argkit."""
import logging

logger: logging.Logger = logging.getLogger("argkit")
