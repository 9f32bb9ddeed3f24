"""Library-wide constants for logdorak.

Backend output (renderers, destinations, level filtering) is configured by the
host application through structlog or the standard logging module; these
values only cover what the facade itself needs.
"""

# =============================================================================
# MESSAGE RENDERING
# =============================================================================

# Text used for a None fragment, same as str(None)
NULL_PLACEHOLDER = "None"

# Characters removed from every rendered fragment (log injection)
LINE_ENDING_CHARACTERS = "\r\n"


# =============================================================================
# TRACE LEVEL
# =============================================================================

# Below logging.DEBUG (10); registered with the logging module by the stdlib backend
TRACE_LEVEL_NUM = 5
TRACE_LEVEL_NAME = "TRACE"

# structlog has no trace method, trace records go through debug with this marker
TRACE_VERBOSITY_KEY = "verbosity"
TRACE_VERBOSITY_VALUE = "trace"


# =============================================================================
# BACKEND SELECTION
# =============================================================================

# Value of logdorak.backends.BackendKind used when Logger gets no backend
DEFAULT_BACKEND_KIND = "structlog"


# =============================================================================
# CALL SITE
# =============================================================================

# Facade frames between application code and a backend method
# (public Logger method, Logger._dispatch)
FACADE_FRAMES = 2
