"""
Summarizer

Turns one raw CSV upload into a DataSummary:
- Unique column headers and the data row count
- Inferred type and statistics for every column
- A bounded, deterministic sample of leading rows

The engine is pure and synchronous: no shared state between calls and no
I/O. The batch helpers (summarize_file, run_all, main) read uploads from
disk and write JSON summaries for offline use.
"""

from pathlib import Path
from typing import Dict, Optional, Union
from tqdm import tqdm

from .config import Config, SummarizerSettings
from .errors import DataSummarizerError, InputTooLargeError
from .models import DataSummary
from .parsing.row_parser import RowParser
from .profiling.column_stats import StatisticsComputer
from .profiling.sampling import SampleFormatter
from .profiling.type_inference import TypeInferencer
from .utils.file_utils import get_file_list, load_csv_bytes, save_json
from .utils.logging_utils import get_logger, setup_logger

logger = get_logger(__name__)


class Summarizer:
    """
    Summarizes CSV uploads for prompt construction.

    Attributes:
        settings: Input ceilings and sample size

    Example:
        >>> summarizer = Summarizer()
        >>> summary = summarizer.summarize_text("city,temp\\nParis,21\\nOslo,12\\n")
        >>> summary.column_stats["temp"].mean
        16.5
    """

    def __init__(self, settings: Optional[SummarizerSettings] = None):
        self.settings = settings or SummarizerSettings()
        self.parser = RowParser(max_rows=self.settings.max_rows)
        self.inferencer = TypeInferencer()
        self.computer = StatisticsComputer()
        self.formatter = SampleFormatter(max_cell_length=self.settings.max_cell_length)

    def summarize_text(self, text: Union[str, bytes]) -> DataSummary:
        """
        Summarize one CSV upload.

        Args:
            text: Raw CSV as str, or UTF-8 bytes

        Returns:
            DataSummary with headers, row count, per-column stats and sample rows

        Raises:
            InputTooLargeError: If the upload exceeds the byte or row ceiling
            EmptyInputError: If the upload has no rows at all
            MalformedCsvError: If a quoted field is never closed
        """
        size = len(text) if isinstance(text, bytes) else len(text.encode('utf-8'))
        if size > self.settings.max_input_bytes:
            raise InputTooLargeError("bytes", size, self.settings.max_input_bytes)

        table = self.parser.parse(text)

        column_stats = {}
        for index, header in enumerate(table.headers):
            values = table.column(index)
            inferred_type = self.inferencer.infer(values)
            column_stats[header] = self.computer.compute(values, inferred_type)
            logger.debug(f"  {header}: {inferred_type.value}")

        sample_rows = self.formatter.format(table.rows, self.settings.sample_rows)

        logger.info(f"Summarized {table.row_count} rows x {len(table.headers)} columns")

        return DataSummary(
            headers=table.headers,
            row_count=table.row_count,
            column_stats=column_stats,
            sample_rows=sample_rows,
            warnings=table.warnings,
        )

    def summarize_file(self, file_path: Union[str, Path]) -> DataSummary:
        """Summarize a CSV file from disk."""
        file_path = Path(file_path)
        logger.info(f"Summarizing file: {file_path.name}")
        return self.summarize_text(load_csv_bytes(file_path))

    def run_all(
        self,
        data_dir: Union[str, Path],
        output_dir: Union[str, Path]
    ) -> Dict[str, DataSummary]:
        """
        Summarize every CSV file in a directory.

        Each summary is saved as ``<stem>.summary.json`` in output_dir, plus a
        ``summaries_index.json`` listing processed and failed files. A file
        that cannot be summarized is logged and skipped.

        Returns:
            Mapping of file name to DataSummary for the files that succeeded
        """
        output_dir = Path(output_dir)
        csv_files = get_file_list(data_dir, "*.csv")

        if not csv_files:
            logger.warning(f"No CSV files found in {data_dir}")
            return {}

        summaries: Dict[str, DataSummary] = {}
        failed: Dict[str, str] = {}

        for file_path in tqdm(csv_files, desc="Summarizing files"):
            try:
                summary = self.summarize_file(file_path)
            except (DataSummarizerError, OSError) as e:
                logger.error(f"Failed to process {file_path.name}: {e}")
                failed[file_path.name] = str(e)
                continue

            summaries[file_path.name] = summary
            save_json(
                {'fileName': file_path.name, **summary.to_dict()},
                output_dir / f"{file_path.stem}.summary.json"
            )

        logger.info(f"Successfully processed {len(summaries)} of {len(csv_files)} files")

        save_json(
            {
                'totalFiles': len(summaries),
                'files': list(summaries),
                'failed': failed,
            },
            output_dir / "summaries_index.json"
        )

        return summaries


def summarize_csv_text(
    text: Union[str, bytes],
    settings: Optional[SummarizerSettings] = None
) -> DataSummary:
    """Summarize one CSV upload with the given (or default) settings."""
    return Summarizer(settings).summarize_text(text)


def main(argv=None):
    """
    CLI entry point.

    Usage:
        data-summarizer --data-dir data/raw --output-dir data/summaries
        data-summarizer --file upload.csv
    """
    import argparse

    parser = argparse.ArgumentParser(description="Summarize CSV files for LLM prompts")
    parser.add_argument(
        '--config',
        default=None,
        help='Path to YAML config file'
    )
    parser.add_argument(
        '--data-dir',
        default=None,
        help='Directory with raw CSV files'
    )
    parser.add_argument(
        '--output-dir',
        default=None,
        help='Directory for output summaries'
    )
    parser.add_argument(
        '--file',
        default=None,
        help='Summarize a single CSV file and print the JSON summary'
    )
    parser.add_argument(
        '--sample-rows',
        type=int,
        default=None,
        help='Number of leading rows to include in each summary'
    )

    args = parser.parse_args(argv)

    config = Config(args.config)
    if args.sample_rows is not None:
        config.set('sampling.sample_rows', args.sample_rows)

    setup_logger(
        'data_summarizer',
        log_file=config.get('logging.file.path') if config.get('logging.file.enabled') else None,
        level=config.get('logging.level', 'INFO')
    )

    summarizer = Summarizer(SummarizerSettings.from_config(config))

    if args.file:
        try:
            summary = summarizer.summarize_file(args.file)
        except (DataSummarizerError, OSError) as e:
            logger.error(f"Failed to summarize {args.file}: {e}")
            return 1
        print(summary.model_dump_json(by_alias=True, indent=2))
        return 0

    data_dir = args.data_dir or config.get('data.raw_dir', 'data/raw')
    output_dir = args.output_dir or config.get('data.summaries_dir', 'data/summaries')

    try:
        summaries = summarizer.run_all(data_dir, output_dir)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1

    print(f"\n✓ Summarized {len(summaries)} files")
    print(f"✓ Outputs saved to: {output_dir}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
