"""Tests for default context providers."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from logprep.core.context import (
    current_execution_context,
    static_application_info,
    system_clock,
)
from logprep.core.models import ApplicationInfo, ExecutionContext


def _context_in_thread(**thread_kwargs: object) -> ExecutionContext:
    """Resolve the execution context inside a new thread."""
    result: list[ExecutionContext] = []
    thread = threading.Thread(
        target=lambda: result.append(current_execution_context()), **thread_kwargs
    )
    thread.start()
    thread.join()
    return result[0]


class TestSystemClock:
    """Tests for system_clock()."""

    @pytest.mark.core
    def test_returns_time_time(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The clock reads time.time() on every call."""
        monkeypatch.setattr(time, "time", lambda: 1702300000.0)
        assert system_clock() == 1702300000.0


class TestCurrentExecutionContext:
    """Tests for current_execution_context()."""

    @pytest.mark.core
    def test_main_thread(self) -> None:
        """Tests run on the main thread."""
        assert current_execution_context().is_main is True

    @pytest.mark.core
    def test_unnamed_thread_has_no_name(self) -> None:
        """Generated thread names are not treated as assigned names."""
        context = _context_in_thread()
        assert context == ExecutionContext(is_main=False, name=None)

    @pytest.mark.core
    def test_named_thread_reports_name(self) -> None:
        """Explicit thread names are reported."""
        context = _context_in_thread(name="custom-thread-name")
        assert context == ExecutionContext(is_main=False, name="custom-thread-name")

    @pytest.mark.core
    def test_executor_default_names_are_unnamed(self) -> None:
        """ThreadPoolExecutor's generated worker names are not assigned names."""
        with ThreadPoolExecutor(max_workers=1) as executor:
            context = executor.submit(current_execution_context).result()
        assert context.name is None

    @pytest.mark.core
    def test_executor_prefix_counts_as_a_name(self) -> None:
        """A thread_name_prefix is an assigned name."""
        with ThreadPoolExecutor(max_workers=1, thread_name_prefix="shipper") as executor:
            context = executor.submit(current_execution_context).result()
        assert context.name == "shipper_0"


class TestStaticApplicationInfo:
    """Tests for static_application_info()."""

    @pytest.mark.core
    def test_returns_fixed_info(self) -> None:
        """The provider returns the versions it was created with."""
        provider = static_application_info("1.4.2+381", "1.4.2")
        assert provider() == ApplicationInfo(version="1.4.2+381", short_version="1.4.2")

    @pytest.mark.core
    def test_defaults_to_no_versions(self) -> None:
        """Without arguments no version is known."""
        assert static_application_info()() == ApplicationInfo()
