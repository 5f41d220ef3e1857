"""
File processor - runs the engine over every HTML file below a folder.

Files are handled one at a time. A file that cannot be read, scanned or
written is recorded under its path and the run moves on; only a folder that
cannot be listed fails the run as a whole.
"""

import logging
import os
from typing import Any, Optional

from .compiler import PatternSpec
from .engine import RedactionEngine, get_default_engine

logger = logging.getLogger(__name__)

HTML_EXTENSION = ".html"


def find_html_files(directory: str) -> list[str]:
    """
    Recursively find all HTML files in a directory.

    Args:
        directory: Folder to scan.

    Returns:
        Paths of regular files whose extension is ``.html`` in any case,
        depth first, entries visited in name order. Symlinks are skipped.

    Raises:
        OSError: If the folder (or a subfolder) cannot be listed.
    """
    files = []

    def scan(current: str) -> None:
        logger.debug(f"Scanning directory: {current}")
        with os.scandir(current) as it:
            entries = sorted(it, key=lambda entry: entry.name)
        logger.debug(f"Found {len(entries)} entries in {current}")

        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                scan(entry.path)
            elif (
                entry.is_file(follow_symlinks=False)
                and os.path.splitext(entry.name)[1].lower() == HTML_EXTENSION
            ):
                files.append(entry.path)

    scan(directory)
    logger.info(f"Total HTML files found: {len(files)}")
    return files


def ensure_output_path(input_path: str, input_root: str, output_root: str) -> str:
    """
    Create the output folder mirroring ``input_path`` and return the target path.

    Example:
        ensure_output_path("site/a/b.html", "site", "site_redacted")
        # "site_redacted/a/b.html", with site_redacted/a created
    """
    relative_dir = os.path.relpath(os.path.dirname(input_path), input_root)
    output_dir = os.path.normpath(os.path.join(output_root, relative_dir))
    os.makedirs(output_dir, exist_ok=True)
    return os.path.join(output_dir, os.path.basename(input_path))


def _read_text(path: str) -> str:
    # newline="" keeps line endings exactly as on disk
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: str, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def process_html_files_for_preview(
    input_folder: str,
    patterns: PatternSpec = None,
    engine: Optional[RedactionEngine] = None,
) -> dict[str, Any]:
    """
    Build a highlighted preview of every HTML file in a folder.

    Args:
        input_folder: Folder to scan recursively.
        patterns: Pattern spec; the defaults when omitted.
        engine: Engine to use. Defaults to the shared engine.

    Returns:
        A dictionary containing:
        - success: False only if the folder itself could not be scanned
        - results: Preview markup keyed by path relative to input_folder
        - errors: Error messages keyed by file path, or None
        - file_count: Number of files previewed
        On folder failure, ``error`` holds the reason and results is None.
    """
    engine = engine or get_default_engine()
    results = {}
    errors = {}

    try:
        html_files = find_html_files(input_folder)
    except OSError as e:
        logger.warning(f"Failed to scan {input_folder}: {e}")
        return {
            "success": False,
            "error": f"Failed to process directory: {e}",
            "results": None,
            "file_count": 0,
        }

    for file_path in html_files:
        try:
            content = _read_text(file_path)
            relative_path = os.path.relpath(file_path, input_folder)
            results[relative_path] = engine.preview(content, patterns)
        except Exception as e:
            logger.warning(f"Preview failed for {file_path}: {e}")
            errors[file_path] = f"Error processing file: {e}"

    return {
        "success": True,
        "results": results,
        "errors": errors or None,
        "file_count": len(results),
    }


def process_html_files_for_redaction(
    input_folder: str,
    output_folder: str,
    patterns: PatternSpec = None,
    engine: Optional[RedactionEngine] = None,
) -> dict[str, Any]:
    """
    Write a redacted copy of every HTML file in a folder to a mirrored tree.

    Args:
        input_folder: Folder to scan recursively.
        output_folder: Root of the mirrored output tree. Created as needed.
        patterns: Pattern spec; the defaults when omitted.
        engine: Engine to use. Defaults to the shared engine.

    Returns:
        A dictionary containing:
        - success: False only if the folder itself could not be scanned
        - processed: Relative paths of the files written
        - errors: Error messages keyed by file path, or None
        - file_count: Number of files written
        - output_folder: Where the redacted tree was written
    """
    engine = engine or get_default_engine()
    processed = []
    errors = {}

    try:
        html_files = find_html_files(input_folder)
    except OSError as e:
        logger.warning(f"Failed to scan {input_folder}: {e}")
        return {
            "success": False,
            "error": f"Failed to process directory: {e}",
            "processed": [],
            "file_count": 0,
        }

    for file_path in html_files:
        try:
            content = _read_text(file_path)
            redacted_content = engine.redact(content, patterns)

            output_path = ensure_output_path(file_path, input_folder, output_folder)
            _write_text(output_path, redacted_content)

            processed.append(os.path.relpath(file_path, input_folder))
        except Exception as e:
            logger.warning(f"Redaction failed for {file_path}: {e}")
            errors[file_path] = f"Error processing file: {e}"

    return {
        "success": True,
        "processed": processed,
        "errors": errors or None,
        "file_count": len(processed),
        "output_folder": output_folder,
    }
