"""Command-line interface for fcheck."""

import click
import sys
from typing import Optional

from . import __version__
from .exceptions import FileCheckError
from .profiling.profiler import FileProfiler
from .readers.file_type import create_reader
from .reporting.report_generator import ReportGenerator, SUPPORTED_FORMATS
from .utils.config_loader import ConfigLoader
from .utils.logger import setup_logging


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.version_option(version=__version__)
@click.argument('file_name', type=click.Path(dir_okay=False))
@click.option('--no-sort', '-ns', 'no_sort', is_flag=True, default=None,
              help='Do not sort fields alphabetically (keep the file order)')
@click.option('--least-frequent', '-lf', 'least_frequent', is_flag=True, default=None,
              help='Show least frequent values instead of most frequent')
@click.option('--samples', '-m', type=click.IntRange(min=0), default=None,
              help='Number of sample values per string field (default 5)')
@click.option('--delimiter', '-d', default=None,
              help='CSV delimiter; forces CSV for non-binary files')
@click.option('--config', '-c', help='Path to config YAML file')
@click.option('--env', '-e', help='Path to .env file')
@click.option('--format', '-f', 'formats', multiple=True, type=click.Choice(SUPPORTED_FORMATS),
              help='Report formats (text, json, csv)')
@click.option('--output-dir', '-o', default=None,
              help='Write reports to this directory instead of stdout')
@click.option('--threaded/--no-threaded', default=None,
              help='Decode rows on a separate thread')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def cli(
    file_name: str,
    no_sort: Optional[bool],
    least_frequent: Optional[bool],
    samples: Optional[int],
    delimiter: Optional[str],
    config: Optional[str],
    env: Optional[str],
    formats: tuple,
    output_dir: Optional[str],
    threaded: Optional[bool],
    verbose: bool
):
    """
    Generate coverage and data validity report for FILE_NAME.

    Supports CSV (and other delimited text), Avro and Parquet files.

    Examples:
        fcheck data.csv

        fcheck -ns -m 10 -d ';' export.txt

        fcheck events.avro -f json -o ./reports
    """
    try:
        setup_logging(verbose=verbose)

        config_loader = ConfigLoader(config_path=config, env_path=env)

        reader_options = config_loader.get_reader_options()
        if delimiter:
            reader_options['delimiter'] = delimiter

        profiler_options = config_loader.get_profiler_options()
        if no_sort is not None:
            profiler_options['sort_fields'] = not no_sort
        if least_frequent is not None:
            profiler_options['least_frequent'] = least_frequent
        if samples is not None:
            profiler_options['sample_size'] = samples
        if threaded is not None:
            profiler_options['threaded'] = threaded

        formats = list(formats) or list(config_loader.get('reporting.formats', ['text']))
        output_dir = output_dir or config_loader.get('reporting.output_dir')

        reader = create_reader(file_name, **reader_options)
        report = FileProfiler(**profiler_options).profile(reader)

        report_gen = ReportGenerator(output_dir)
        if output_dir:
            report_files = report_gen.generate_report(report, formats=formats)
            for fmt, path in report_files.items():
                click.echo(f"{fmt.upper()}: {path}")
        else:
            for fmt in formats:
                click.echo(report_gen.render(report, fmt), nl=False)
                if fmt != 'text':
                    click.echo()

    except FileCheckError as e:
        click.echo(f"Error ({e.stage}): {e.message}", err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    cli()
