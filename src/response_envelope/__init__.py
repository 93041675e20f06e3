import sys
from pathlib import Path

from response_envelope.config import configuration
from response_envelope.utils.logging import setup_logging

# =============================================================================
#   Logging – Initialization from config
# =============================================================================
setup_logging(
    log_dir=configuration.logging.resolved_log_dir,
    log_level=configuration.logging.log_level,
    main_function_name=Path(sys.argv[0]).stem or "response_envelope",
    file_log_level=configuration.logging.file_log_level,
    file_log_file_size_mb=configuration.logging.file_log_file_size_mb,
    file_log_max_files=configuration.logging.file_log_max_files,
)

__all__ = ["configuration"]
