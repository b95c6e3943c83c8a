"""
CSV Report Generator Module

Writes the coverage and frequency sections of a profile as flat CSV rows.
"""

import csv
import io
from pathlib import Path
from typing import Any, Dict, List

from ..profiling.stats_calculator import ProfileReport


class CSVGenerator:
    """Generate CSV reports from profile results."""

    FIELDNAMES = ['section', 'field', 'type', 'count', 'percentage', 'value', 'comment']

    @staticmethod
    def _rows(report: ProfileReport) -> List[Dict[str, Any]]:
        rows = []
        for column in report.columns:
            rows.append({
                'section': 'coverage',
                'field': column.name,
                'type': column.type,
                'count': column.count,
                'percentage': round(column.percentage, 2),
                'value': '',
                'comment': column.summary
            })

        for frequency in report.frequencies or []:
            if not frequency.available:
                rows.append({
                    'section': 'frequency',
                    'field': frequency.name,
                    'type': 'string',
                    'count': 0,
                    'percentage': 0.0,
                    'value': '',
                    'comment': 'NOT AVAILABLE'
                })
                continue
            for entry in frequency.values:
                rows.append({
                    'section': 'frequency',
                    'field': frequency.name,
                    'type': 'string',
                    'count': entry.count,
                    'percentage': round(entry.percentage, 2),
                    'value': entry.value,
                    'comment': ''
                })
        return rows

    @classmethod
    def write_coverage_csv(cls, report: ProfileReport, stream) -> None:
        writer = csv.DictWriter(stream, fieldnames=cls.FIELDNAMES)
        writer.writeheader()
        writer.writerows(cls._rows(report))

    @classmethod
    def render_coverage_csv(cls, report: ProfileReport) -> str:
        """Return the CSV report as a string."""
        buffer = io.StringIO()
        cls.write_coverage_csv(report, buffer)
        return buffer.getvalue()

    @classmethod
    def generate_coverage_csv(cls, report: ProfileReport, output_path: Path) -> None:
        """
        Write the CSV report to a file.

        Args:
            report: Profile result
            output_path: Path to output CSV file
        """
        with open(output_path, 'w', newline='', encoding='utf-8') as f:
            cls.write_coverage_csv(report, f)
