"""Default ambient context providers.

These resolve the read-only context the LogBuilder stamps on every record:
the current time, the identity of the calling thread and the running
application's version.
"""

import re
import threading
import time
from collections.abc import Callable

from logprep.core.models import ApplicationInfo, ExecutionContext

# Names Python gives threads nobody named explicitly
_GENERATED_THREAD_NAME = re.compile(
    r"^(Thread-\d+( \(.*\))?|Dummy-\d+|ThreadPoolExecutor-\d+_\d+)$"
)


def system_clock() -> float:
    """Return the current Unix timestamp in seconds."""
    return time.time()


def current_execution_context() -> ExecutionContext:
    """Describe the calling thread.

    Returns:
        ExecutionContext with is_main set on the main thread, and the
        thread's name only when it was assigned explicitly.
    """
    thread = threading.current_thread()
    if thread is threading.main_thread():
        return ExecutionContext(is_main=True, name=thread.name)
    name = thread.name
    if not name or _GENERATED_THREAD_NAME.match(name):
        return ExecutionContext(is_main=False)
    return ExecutionContext(is_main=False, name=name)


def static_application_info(
    version: str | None = None,
    short_version: str | None = None,
) -> Callable[[], ApplicationInfo]:
    """Create a provider returning fixed application version metadata.

    Args:
        version: Full application version.
        short_version: Short application version.

    Returns:
        Zero-argument callable returning the same ApplicationInfo on every call.
    """
    info = ApplicationInfo(version=version, short_version=short_version)

    def provider() -> ApplicationInfo:
        return info

    return provider
