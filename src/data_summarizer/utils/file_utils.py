"""
File I/O utilities for the batch summarizer CLI.
The summarization engine itself never touches the filesystem.
"""

import json
import yaml
from pathlib import Path
from typing import Any, Dict, List, Union
from .logging_utils import get_logger

logger = get_logger(__name__)


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is malformed
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.debug(f"Loading config from: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)

    return config or {}


def load_csv_bytes(file_path: Union[str, Path]) -> bytes:
    """
    Read a CSV upload as raw bytes.

    Decoding is left to the parser so BOM and UTF-8 errors are
    handled the same way as inline uploads.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"CSV file not found: {file_path}")

    logger.debug(f"Loading CSV: {file_path}")
    return file_path.read_bytes()


def save_json(
    data: Union[Dict, List],
    file_path: Union[str, Path],
    indent: int = 2
) -> None:
    """
    Save data to JSON file.

    Args:
        data: Data to save (dict or list)
        file_path: Output file path
        indent: JSON indentation (default: 2)
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)

    logger.info(f"Saved JSON to: {file_path}")


def get_file_list(
    directory: Union[str, Path],
    pattern: str = "*.csv"
) -> List[Path]:
    """
    Get sorted list of files matching pattern in directory.

    Raises:
        FileNotFoundError: If the directory doesn't exist
    """
    directory = Path(directory)

    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")

    files = sorted(directory.glob(pattern))
    logger.info(f"Found {len(files)} files matching '{pattern}' in {directory}")

    return files
