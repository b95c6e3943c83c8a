"""
Basic usage example for fcheck.

This script demonstrates how to:
1. Load configuration
2. Open a file with the matching reader
3. Profile it
4. Generate reports
"""

import sys

from fcheck import ConfigLoader, FileProfiler, ReportGenerator, create_reader

def main(file_name):
    # Load configuration
    config = ConfigLoader()

    # Pick the reader from the file's magic bytes or extension
    reader = create_reader(file_name, **config.get_reader_options())

    # Profile every row
    print(f"Profiling {file_name}...")
    profiler = FileProfiler(**config.get_profiler_options())
    report = profiler.profile(reader)

    # Generate reports
    report_gen = ReportGenerator(output_dir="./reports")
    report_files = report_gen.generate_report(report, formats=['text', 'json'])

    print(f"\nProfile complete: {report.row_count:,} rows")
    print(f"Reports generated:")
    for fmt, path in report_files.items():
        print(f"  - {fmt.upper()}: {path}")

    # Access specific results
    sparse = [c for c in report.columns if c.percentage < 50]
    if sparse:
        print(f"\nColumns under 50% coverage:")
        for column in sparse:
            print(f"  - {column.name}: {column.percentage:.1f}%")

if __name__ == '__main__':
    main(sys.argv[1] if len(sys.argv) > 1 else 'data.csv')
