# File: src/mstair/i18n/xlogging/logger_constants.py

import logging


K_KLASS_NAME = "klass_name"

TRACE = logging.DEBUG - 1  # (9) LOG.trace() will not output at DEBUG level
SUPPRESS = -1  # Custom level for logs that will never be shown


_logging_constants_initialized = False


def initialize_logger_constants() -> None:
    """Register the TRACE and SUPPRESS level names once per process."""
    global _logging_constants_initialized
    if _logging_constants_initialized:
        return
    _logging_constants_initialized = True
    for key, value in {"TRACE": TRACE, "SUPPRESS": SUPPRESS}.items():
        if key not in logging.getLevelNamesMapping():
            logging.addLevelName(value, key)


# End of file: src/mstair/i18n/xlogging/logger_constants.py
