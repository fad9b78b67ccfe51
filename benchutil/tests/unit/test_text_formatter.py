# Path: benchutil/tests/unit/test_text_formatter.py
"""
Unit Tests for the Text Formatter

Tests aligned layout, section boundaries, descriptors, and the
system-information preamble.
"""

import io

from benchutil.output.formatters import TextFormatter, render_text
from benchutil.output.layout import build_layout
from benchutil.output.report_models import (
    ColumnHeaders,
    MeasurementRecord,
    ReportConfiguration,
    Result,
)

from conftest import FAKE_DETAILED_SYSTEM_INFO, FAKE_SYSTEM_INFO


def _render(records, config=None, provider=None):
    sink = io.StringIO()
    render_text(records, config, sink, system_info_provider=provider)
    return sink.getvalue()


def _expected_header(padding=2):
    pad = ' ' * padding
    return (
        'Group'.ljust(5 + padding)
        + 'Name'.ljust(4 + padding)
        + 'Operations'.rjust(10) + pad
        + 'Ns/Op'.rjust(5) + pad
        + 'Bytes/Op'.rjust(8) + pad
        + 'Allocs/Op'.rjust(9) + pad
    )


class TestTextLayout:
    """Test the aligned table."""

    def test_header_and_separator(self, two_group_records):
        """Header comes first, then a dash line of the full width."""
        lines = _render(two_group_records).splitlines()

        assert lines[0] == _expected_header()
        assert lines[1] == '-' * len(_expected_header())

    def test_record_line(self, two_group_records):
        """Text cells are left-justified, numbers right-justified."""
        lines = _render(two_group_records).splitlines()

        expected = (
            'g1'.ljust(7) + 'A'.ljust(6)
            + '1'.rjust(10) + '  '
            + '100'.rjust(5) + '  '
            + '10'.rjust(8) + '  '
            + '1'.rjust(9) + '  '
        )
        assert lines[2] == expected

    def test_lines_share_width(self, two_group_records):
        """Header and record lines all have the same length."""
        lines = _render(two_group_records).splitlines()

        assert len({len(line) for line in lines}) == 1

    def test_zero_padding(self, two_group_records):
        """With padding 0 columns touch."""
        lines = _render(two_group_records, ReportConfiguration(column_padding=0)).splitlines()

        assert lines[0] == _expected_header(padding=0)
        assert lines[0].startswith('GroupName')

    def test_empty_text_column_not_rendered(self, two_group_records):
        """Columns empty for every record do not appear."""
        out = _render(two_group_records)

        assert 'Description' not in out
        assert 'SubGroup' not in out
        assert 'Note' not in out

    def test_custom_headers(self, two_group_records):
        """Configured header labels replace the defaults."""
        config = ReportConfiguration(headers=ColumnHeaders(name='Benchmark Name'))

        header = _render(two_group_records, config).splitlines()[0]

        assert 'Benchmark Name' in header
        assert header.startswith('Group  Benchmark Name  ')

    def test_iterations_expand_operations(self):
        """1000 operations over 4 iterations show as 4000."""
        record = MeasurementRecord(name='x', result=Result(1000, 40, 0, 0), iterations=4)

        line = _render([record]).splitlines()[2]

        assert '4000' in line
        assert ' 10  ' in line

    def test_descriptors(self):
        """Descriptors append units and keep columns aligned."""
        record = MeasurementRecord(name='x', result=Result(1, 500, 0, 0))
        config = ReportConfiguration(include_ops_descriptors=True)

        lines = _render([record], config).splitlines()

        assert '500 ns/op' in lines[2]
        assert '1 ops' in lines[2]
        assert len(lines[0]) == len(lines[2])


class TestTextRecordSet:
    """Test set-level name, description and note."""

    def test_name_description_and_note(self, full_record_set):
        """Name and description come before the table, the note after."""
        lines = _render(full_record_set).splitlines()

        assert lines[0] == 'String building'
        assert lines[1] == '64 parts of 16 characters'
        assert lines[2].startswith('Group')
        assert lines[-1] == 'lower is better'

    def test_note_column_last(self, full_record_set):
        """The note column closes the header and its record line."""
        lines = _render(full_record_set).splitlines()

        assert lines[2].endswith('Note')
        assert lines[5].endswith('quadratic')


class TestTextSections:
    """Test group sections."""

    def test_sections_with_headers(self, two_group_records):
        """A boundary writes a blank line and repeats the header."""
        config = ReportConfiguration(section_per_group=True)

        lines = _render(two_group_records, config).splitlines()

        assert len(lines) == 7
        assert lines[2].startswith('g1')
        assert lines[3] == ''
        assert lines[4] == _expected_header()
        assert lines[5].startswith('---')
        assert lines[6].startswith('g2')

    def test_sections_without_headers(self, two_group_records):
        """Without section headers only a blank line separates groups."""
        config = ReportConfiguration(section_per_group=True, section_headers=False)

        lines = _render(two_group_records, config).splitlines()

        assert lines[2:] == [lines[2], '', lines[4]]
        assert lines[2].startswith('g1')
        assert lines[4].startswith('g2')

    def test_no_sections(self, mixed_group_records):
        """Without section_per_group there are no blank lines."""
        lines = _render(mixed_group_records).splitlines()

        assert '' not in lines
        assert len(lines) == 2 + len(mixed_group_records)

    def test_blank_lines_match_boundaries(self, mixed_group_records):
        """One blank line per group change."""
        config = ReportConfiguration(section_per_group=True, section_headers=False)

        lines = _render(mixed_group_records, config).splitlines()

        assert lines.count('') == 3


class TestTextSystemInfo:
    """Test the system-information preamble."""

    def test_basic_system_info(self, two_group_records, fake_system_info):
        """System info is written first, then a blank line."""
        config = ReportConfiguration(include_system_info=True)

        out = _render(two_group_records, config, fake_system_info)

        assert out.startswith(FAKE_SYSTEM_INFO + '\n\n' + 'Group')
        fake_system_info.assert_called_once_with(False)

    def test_detailed_overrides_basic(self, two_group_records, fake_system_info):
        """Detailed info wins when both flags are set."""
        config = ReportConfiguration(
            include_system_info=True, include_detailed_system_info=True,
        )

        out = _render(two_group_records, config, fake_system_info)

        assert out.startswith(FAKE_DETAILED_SYSTEM_INFO + '\n\n')
        fake_system_info.assert_called_once_with(True)

    def test_not_requested(self, two_group_records, fake_system_info):
        """Without the flags no probe runs."""
        _render(two_group_records, None, fake_system_info)

        fake_system_info.assert_not_called()


class TestTextFormatterClass:
    """Test the formatter object."""

    def test_identity(self):
        """Format name and extension."""
        formatter = TextFormatter()

        assert formatter.format_name == 'text'
        assert formatter.file_extension == '.txt'

    def test_format_report(self, two_group_records):
        """format_report() returns what render() writes."""
        assert TextFormatter().format_report(two_group_records) == _render(two_group_records)

    def test_header_line_matches_plan(self, two_group_records):
        """header_line() is as wide as the plan."""
        plan = build_layout(two_group_records, ReportConfiguration())

        assert len(TextFormatter().header_line(plan)) == plan.line_width
