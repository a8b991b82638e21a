import logging

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")


def trace(self, message, *args, **kwargs):
    if self.isEnabledFor(TRACE_LEVEL):
        self._log(TRACE_LEVEL, message, args, **kwargs)


logging.Logger.trace = trace


def get_logger(name: str) -> logging.Logger:
    """
    Returns a standard logger that also understands the TRACE level (below DEBUG).
    """
    return logging.getLogger(name)
