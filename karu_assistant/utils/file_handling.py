# karu_assistant/utils/file_handling.py
"""
Utility functions for reading the packaged data files.
"""

import json
from pathlib import Path
from typing import Union, Dict, List

from karu_assistant.utils.logger import setup_logger

logger = setup_logger(__name__)


def read_file(file_path: Union[str, Path]) -> str:
    """
    Read content from a file.

    Args:
        file_path (Union[str, Path]): Path to the file

    Returns:
        str: The content of the file

    Raises:
        FileNotFoundError: If the path does not point to a file.
    """
    abs_file_path = Path(file_path).resolve()
    if not abs_file_path.is_file():
        raise FileNotFoundError(f"File not found: {str(abs_file_path)}")

    with open(abs_file_path, "r", encoding="utf-8") as f:
        content = f.read()
    logger.debug(f"Content read from file: {str(abs_file_path)}")
    return content


def read_json(file_path: Union[str, Path]) -> Union[Dict, List]:
    """
    Read JSON data from a file.

    Args:
        file_path (Union[str, Path]): Path to the JSON file

    Returns:
        Union[Dict, List]: The data from the JSON file

    Raises:
        FileNotFoundError: If the file is missing.
        ValueError: If the file is not valid JSON.
    """
    content = read_file(file_path) # Use read_file to handle path resolution and errors
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON format in file: {file_path}") from e
    logger.debug(f"JSON data read from file: {str(Path(file_path).resolve())}")
    return data
