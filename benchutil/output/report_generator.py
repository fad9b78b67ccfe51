# Path: benchutil/output/report_generator.py
"""
Report Generator

Entry point for rendering a record set by format name. Looks up the
formatter in the FormatterRegistry and sends the report to a sink, a
string, or one file per format.

Architecture:
    RecordSet + ReportConfiguration  ->  [Formatter]  ->  sink / files

Usage:
    from benchutil.output import ReportGenerator

    generator = ReportGenerator()
    generator.render(records, report_config, 'markdown', sys.stdout)
    paths = generator.write(records, report_config, Path('out'), ['text', 'csv'])
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..config_loader import ConfigLoader
from ..constants import DEFAULT_REPORT_BASENAME
from ..core.logger import get_output_logger
from .formatters import (
    BaseFormatter,
    FormatterRegistry,
    TextFormatter,
    CsvFormatter,
    MarkdownFormatter,
)
from .formatters.base_formatter import SystemInfoProvider
from .report_models import MeasurementRecord, ReportConfiguration


def _register_defaults() -> None:
    """Register built-in formatters."""
    FormatterRegistry.register(TextFormatter)
    FormatterRegistry.register(CsvFormatter)
    FormatterRegistry.register(MarkdownFormatter)


# Auto-register on module import
_register_defaults()


class ReportGenerator:
    """
    Renders benchmark reports by format name.

    Example:
        generator = ReportGenerator()
        text = generator.to_string(records, ReportConfiguration(), 'text')
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        system_info_provider: Optional[SystemInfoProvider] = None,
    ):
        """
        Initialize report generator.

        Args:
            config: ConfigLoader instance (creates one if not provided)
            system_info_provider: Override for the system-info probe
        """
        self.config = config or ConfigLoader()
        self.system_info_provider = system_info_provider
        self.logger = get_output_logger('report_generator')

    def formatter(self, format_name: str) -> BaseFormatter:
        """
        Look up a formatter.

        Raises:
            ValueError: If no formatter is registered under format_name
        """
        formatter = FormatterRegistry.get(format_name, self.system_info_provider)
        if formatter is None:
            available = ', '.join(FormatterRegistry.get_available())
            raise ValueError(f"No formatter for: {format_name} (available: {available})")
        return formatter

    def render(
        self,
        records: Sequence[MeasurementRecord],
        report_config: Optional[ReportConfiguration],
        format_name: str,
        sink,
    ) -> None:
        """Render records in one format to a sink."""
        self.logger.info(f"Rendering {len(records)} records as {format_name}")
        self.formatter(format_name).render(records, report_config, sink)

    def to_string(
        self,
        records: Sequence[MeasurementRecord],
        report_config: Optional[ReportConfiguration],
        format_name: str,
    ) -> str:
        """Render records in one format to a string."""
        return self.formatter(format_name).format_report(records, report_config)

    def write(
        self,
        records: Sequence[MeasurementRecord],
        report_config: Optional[ReportConfiguration],
        output_dir: Optional[Path] = None,
        formats: Optional[List[str]] = None,
        basename: str = DEFAULT_REPORT_BASENAME,
    ) -> Dict[str, Path]:
        """
        Write the report to files in the requested formats.

        Args:
            records: Records in presentation order
            report_config: Active configuration
            output_dir: Override output directory (default from config)
            formats: List of format names (default from config)
            basename: File name without extension

        Returns:
            Dict mapping format name to written file path
        """
        if output_dir is None:
            output_dir = self._resolve_output_dir()

        if formats is None:
            formats = self._get_enabled_formats()

        written = {}
        for fmt_name in formats:
            formatter = self.formatter(fmt_name)
            filepath = formatter.write_report(records, report_config, output_dir, basename)
            written[formatter.format_name] = filepath
            self.logger.info(f"Wrote {formatter.format_name}: {filepath}")

        return written

    def _resolve_output_dir(self) -> Path:
        """Read the output directory from config."""
        output_dir = self.config.get('output_dir')
        if not output_dir:
            raise ValueError("output_dir not configured (BENCHUTIL_OUTPUT_DIR)")
        return Path(output_dir)

    def _get_enabled_formats(self) -> List[str]:
        """Read the comma-separated format list from config."""
        value = self.config.get('output_format', 'text') or 'text'
        return [name.strip() for name in value.split(',') if name.strip()]


__all__ = ['ReportGenerator']
