# Path: benchutil/output/formatters/base_formatter.py
"""
Base Formatter and Formatter Registry

Abstract base class for output formatters and a registry
to look them up by format name.

A render call runs in a fixed order:
1. Reject an empty record set (nothing is written)
2. Build the LayoutPlan once
3. Fetch system information, if requested and supported
4. Stream the preamble and the body to the sink

To add a new format:
1. Subclass BaseFormatter
2. Implement _render_body()
3. Register via FormatterRegistry.register()
"""

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence, Type

from ...constants import DEFAULT_REPORT_BASENAME, FORMAT_ALIASES
from ...core.logger import get_output_logger
from ...core.system_info import get_system_info
from ...errors import EmptyInputError, SinkWriteError
from ..layout import LayoutPlan, build_layout
from ..report_models import MeasurementRecord, ReportConfiguration


logger = get_output_logger('formatter')

SystemInfoProvider = Callable[[bool], str]


class SinkWriter:
    """
    Append-only writer over a caller-supplied sink.

    Text sinks receive str; binary sinks (BytesIO, sys.stdout.buffer,
    files opened with 'wb') receive UTF-8 bytes. A bytes-only sink that
    is not an io.RawIOBase or io.BufferedIOBase is sent str and fails.
    Any failure of the sink, including a rejected type, is raised as
    SinkWriteError.
    """

    def __init__(self, sink):
        self._sink = sink
        self._binary = isinstance(sink, (io.RawIOBase, io.BufferedIOBase))

    def write(self, text: str) -> None:
        data = text.encode('utf-8') if self._binary else text
        try:
            self._sink.write(data)
        except (OSError, ValueError, TypeError) as e:
            raise SinkWriteError(f"output sink rejected write: {e}") from e

    def line(self, text: str = '') -> None:
        self.write(text + '\n')


class BaseFormatter(ABC):
    """
    Abstract base for report formatters.

    Each subclass renders a record sequence into one format, using
    the shared LayoutPlan and group partitioner.
    """

    # Whether system information may be prepended to this format.
    supports_system_info: bool = True

    def __init__(self, system_info_provider: Optional[SystemInfoProvider] = None):
        self.system_info_provider = system_info_provider or get_system_info

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short name for this format (e.g., 'text', 'csv')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """File extension including dot (e.g., '.txt', '.csv')."""

    @abstractmethod
    def _render_body(
        self,
        records: Sequence[MeasurementRecord],
        plan: LayoutPlan,
        out: SinkWriter,
    ) -> None:
        """Write the table(s) for records to out."""

    def render(
        self,
        records: Sequence[MeasurementRecord],
        config: Optional[ReportConfiguration],
        sink,
    ) -> None:
        """
        Render records to a sink.

        Args:
            records: Records in presentation order
            config: Active configuration (defaults when None)
            sink: Text or binary stream; written sequentially

        Raises:
            EmptyInputError: If records is empty
            SinkWriteError: If the sink fails
            CollaboratorError: If system info or a transform stage fails
        """
        if len(records) == 0:
            raise EmptyInputError(self.format_name)
        config = config or ReportConfiguration()

        plan = build_layout(records, config)
        preamble = self._system_info(config)

        out = SinkWriter(sink)
        if preamble:
            out.write(preamble if preamble.endswith('\n') else preamble + '\n')
            out.line()
        self._render_body(records, plan, out)

        logger.info(f"Rendered {len(records)} records as {self.format_name}")

    def format_report(
        self,
        records: Sequence[MeasurementRecord],
        config: Optional[ReportConfiguration] = None,
    ) -> str:
        """
        Render report to string.

        Args:
            records: Records in presentation order
            config: Active configuration

        Returns:
            Formatted string representation
        """
        buffer = io.StringIO()
        self.render(records, config, buffer)
        return buffer.getvalue()

    def write_report(
        self,
        records: Sequence[MeasurementRecord],
        config: Optional[ReportConfiguration],
        output_path: Path,
        basename: str = DEFAULT_REPORT_BASENAME,
    ) -> Path:
        """
        Write report to file.

        Args:
            records: Records in presentation order
            config: Active configuration
            output_path: Directory to write into
            basename: File name without extension

        Returns:
            Path to the written file
        """
        if len(records) == 0:
            raise EmptyInputError(self.format_name)

        output_path.mkdir(parents=True, exist_ok=True)
        filepath = output_path / f"{basename}{self.file_extension}"

        with open(filepath, 'w', encoding='utf-8', newline='') as fh:
            self.render(records, config, fh)
        return filepath

    def _system_info(self, config: ReportConfiguration) -> str:
        """Return the system-info preamble, or '' when not wanted."""
        if not (self.supports_system_info and config.wants_system_info):
            return ''
        detailed = config.include_detailed_system_info
        return self.system_info_provider(detailed)


class FormatterRegistry:
    """
    Registry of available formatters.

    Lookup by format name. The ReportGenerator uses this to
    find the right formatter for each requested output format.
    """

    _formatters: Dict[str, Type[BaseFormatter]] = {}

    @classmethod
    def register(cls, formatter_class: Type[BaseFormatter]) -> None:
        """Register a formatter class."""
        instance = formatter_class()
        name = instance.format_name
        cls._formatters[name] = formatter_class

    @classmethod
    def get(
        cls,
        format_name: str,
        system_info_provider: Optional[SystemInfoProvider] = None,
    ) -> Optional[BaseFormatter]:
        """Get a formatter instance by name or alias."""
        name = format_name.lower()
        name = FORMAT_ALIASES.get(name, name)
        formatter_class = cls._formatters.get(name)
        if formatter_class:
            return formatter_class(system_info_provider)
        return None

    @classmethod
    def get_available(cls) -> list[str]:
        """Return list of registered format names."""
        return list(cls._formatters.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations (for testing)."""
        cls._formatters.clear()


__all__ = ['BaseFormatter', 'FormatterRegistry', 'SinkWriter', 'SystemInfoProvider']
