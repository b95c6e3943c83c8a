"""Report rendering for profile results."""

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from .csv_generator import CSVGenerator
from ..profiling.stats_calculator import ProfileReport
from ..utils.logger import get_logger


logger = get_logger('report_generator')

MIN_FIELD_WIDTH = 30
SUPPORTED_FORMATS = ('text', 'json', 'csv')


class ReportGenerator:
    """Renders profile reports as text, JSON or CSV."""

    def __init__(self, output_dir: Optional[str] = None):
        """
        Initialize report generator.

        Args:
            output_dir: Directory to save reports; only needed by generate_report
        """
        self.output_dir = output_dir

    @staticmethod
    def render_text(report: ProfileReport) -> str:
        """
        Render the classic fixed-width coverage report.

        Args:
            report: Profile result

        Returns:
            Report text, newline terminated
        """
        lines = [
            f"File: {report.file_name}",
            f"Info: {report.file_info}",
        ]
        if report.no_data:
            lines.append('No data found')
            return '\n'.join(lines) + '\n'

        width = max([MIN_FIELD_WIDTH] + [len(column.name) for column in report.columns])

        lines += ['=================', ' coverage report ', '=================']
        header = f"{'field':<{width}} : {'count':<8} : {'%':<6} : {'type':<16} : comment"
        lines += [header, '-' * len(header)]
        for column in report.columns:
            lines.append(
                f"{column.name:<{width}} : {column.count:<8d} : {column.percentage:<6.2f} : "
                f"{column.type:<16} : {column.summary}"
            )
        lines.append('')

        if report.frequencies is not None:
            which = 'least' if report.least_frequent else 'most'
            title = f"{report.sample_size} {which} frequent string values"
            lines += [title, '=' * len(title)]
            header = f"{'field':<{width}} : {'count':<8} : {'%':<6} : {'value':<16}"
            lines += [header, '-' * len(header)]
            for frequency in report.frequencies:
                lines.append(frequency.name)
                if not frequency.available:
                    lines.append(f"{'':<{width}} : --- NOT AVAILABLE ---")
                    continue
                for entry in frequency.values:
                    lines.append(f"{'':<{width}} : {entry.count:<8d} : {entry.percentage:<6.2f} : {entry.value}")

        lines.append(f"Done in {report.elapsed_seconds:.3f} seconds.")
        return '\n'.join(lines) + '\n'

    @staticmethod
    def render_json(report: ProfileReport) -> str:
        """Render the report as indented JSON."""
        return json.dumps(report.to_dict(), indent=2, default=str)

    def render(self, report: ProfileReport, fmt: str) -> str:
        """Render the report in one of SUPPORTED_FORMATS."""
        if fmt == 'text':
            return self.render_text(report)
        if fmt == 'json':
            return self.render_json(report)
        if fmt == 'csv':
            return CSVGenerator.render_coverage_csv(report)
        raise ValueError(f"Unsupported report format: {fmt}")

    def generate_report(
        self,
        report: ProfileReport,
        formats: List[str] = None
    ) -> Dict[str, str]:
        """
        Write the report to files in the output directory.

        Args:
            report: Profile result
            formats: List of formats to generate ['text', 'json', 'csv']

        Returns:
            Dictionary mapping format to file path
        """
        if formats is None:
            formats = ['text']
        if not self.output_dir:
            raise ValueError("output_dir is required to write report files")

        os.makedirs(self.output_dir, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        filename_prefix = f"profile_{Path(report.file_name).name.replace('.', '_')}_{timestamp}"
        extensions = {'text': 'txt', 'json': 'json', 'csv': 'csv'}

        logger.info(f"Generating reports in formats: {formats}")
        report_files = {}
        for fmt in formats:
            filepath = os.path.join(self.output_dir, f"{filename_prefix}.{extensions[fmt]}")
            if fmt == 'csv':
                CSVGenerator.generate_coverage_csv(report, Path(filepath))
            else:
                with open(filepath, 'w', encoding='utf-8') as f:
                    f.write(self.render(report, fmt))
            logger.info(f"{fmt.upper()} report generated: {filepath}")
            report_files[fmt] = filepath

        return report_files
