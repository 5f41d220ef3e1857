"""
HTML Redactor - MCP Server for previewing and redacting HTML folders

A local MCP (Model Context Protocol) server that lets an agent check a folder
of HTML files for sensitive data and write redacted copies of it.

Tools:
    - preview_folder: Highlight sensitive text in every HTML file of a folder
    - redact_folder: Write redacted copies to a sibling "<folder>_redacted" tree
    - identify_sensitive_text: List the sensitive matches in a piece of text

Configuration (environment or .env file):
    - REDACTOR_BASE_DIR: Base for relative folder paths (default: cwd)
    - REDACTOR_OUTPUT_SUFFIX: Suffix of the redacted folder (default: _redacted)
    - REDACTOR_LOG_LEVEL: Log level when run as a script (default: INFO)
"""

import logging
import os
from typing import Any, Optional, Union

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from redactor import InvalidInputError, identify
from redactor.file_processor import (
    process_html_files_for_preview,
    process_html_files_for_redaction,
)

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP(
    "html-redactor",
    instructions="MCP Server for previewing and redacting sensitive data in HTML folders"
)

DEFAULT_OUTPUT_SUFFIX = "_redacted"

Patterns = Optional[Union[str, list[str]]]


def get_base_dir() -> str:
    """Return the directory relative folder paths are resolved against."""
    return os.getenv("REDACTOR_BASE_DIR") or os.getcwd()


def get_output_suffix() -> str:
    """Return the suffix appended to a folder name for its redacted copy."""
    return os.getenv("REDACTOR_OUTPUT_SUFFIX") or DEFAULT_OUTPUT_SUFFIX


def resolve_folder(folder: str) -> str:
    """Resolve a folder path against the configured base directory."""
    return os.path.abspath(os.path.join(get_base_dir(), os.path.expanduser(folder)))


def output_folder_for(folder_path: str) -> str:
    """Sibling folder that receives the redacted copy of ``folder_path``."""
    return os.path.join(
        os.path.dirname(folder_path),
        f"{os.path.basename(folder_path)}{get_output_suffix()}"
    )


@mcp.tool()
def preview_folder(folder: str, patterns: Patterns = None) -> dict[str, Any]:
    """
    Highlight sensitive text in every HTML file below a folder.

    Args:
        folder: Folder to scan, absolute or relative to REDACTOR_BASE_DIR.
                Example: "site" or "/var/www/export"
        patterns: Optional regexes replacing the defaults, either a comma
                  separated string ("foo,/bar\\d+/g") or a list of strings.
                  Defaults to emails, phone numbers, SSNs and credit cards.

    Returns:
        A dictionary containing:
        - success: True if the folder could be scanned
        - results: Preview markup keyed by relative file path, each match
                   wrapped in <mark class="redact-highlight">
        - errors: Per-file error messages, or None
        - file_count: Number of files previewed
        - error: Reason for failure when success is False

    Example usage:
        preview_folder("site")
        preview_folder("site", "ACCT-\\d{6}")
    """
    if not folder:
        return {"success": False, "error": "Folder path is required"}

    try:
        folder_path = resolve_folder(folder)
        logger.info(f"Processing folder: {folder_path}")

        result = process_html_files_for_preview(folder_path, patterns)

        if not result["success"]:
            logger.warning(f"Preview failed: {result['error']}")
            return {"success": False, "error": result["error"]}

        return result

    except Exception as e:
        logger.exception("Preview error")
        return {"success": False, "error": f"Server error: {str(e)}"}


@mcp.tool()
def redact_folder(folder: str, patterns: Patterns = None) -> dict[str, Any]:
    """
    Write redacted copies of every HTML file below a folder.

    The copies go to a sibling folder named after the input plus
    REDACTOR_OUTPUT_SUFFIX ("site" -> "site_redacted"), mirroring the input
    layout. Every match is replaced by [REDACTED]. Input files are not touched.

    Args:
        folder: Folder to redact, absolute or relative to REDACTOR_BASE_DIR.
        patterns: Optional regexes replacing the defaults (see preview_folder).

    Returns:
        A dictionary containing:
        - success: True if the folder could be scanned
        - processed: Relative paths of the files written
        - errors: Per-file error messages, or None
        - file_count: Number of files written
        - output_folder: Absolute path of the redacted tree
        - error: Reason for failure when success is False
    """
    if not folder:
        return {"success": False, "error": "Folder path is required"}

    try:
        folder_path = resolve_folder(folder)
        output_folder = output_folder_for(folder_path)
        logger.info(f"Redacting {folder_path} into {output_folder}")

        result = process_html_files_for_redaction(folder_path, output_folder, patterns)

        if not result["success"]:
            logger.warning(f"Redaction failed: {result['error']}")
            return {"success": False, "error": result["error"]}

        return result

    except Exception as e:
        logger.exception("Redaction error")
        return {"success": False, "error": f"Server error: {str(e)}"}


@mcp.tool()
def identify_sensitive_text(content: str, patterns: Patterns = None) -> dict[str, Any]:
    """
    List the sensitive matches in a piece of text without changing it.

    Args:
        content: Text (typically HTML) to scan.
        patterns: Optional regexes replacing the defaults (see preview_folder).

    Returns:
        A dictionary containing:
        - success: True unless content was not text
        - matches: Each with text, index (0-based offset), length and pattern,
                   grouped by pattern in application order
        - count: Number of matches
    """
    try:
        scan = identify(content, patterns)
    except InvalidInputError as e:
        return {"success": False, "error": str(e)}

    return {"success": True, **scan.to_dict()}


if __name__ == "__main__":
    # stdout carries the stdio transport, so logs go to stderr
    logging.basicConfig(
        level=os.getenv("REDACTOR_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    mcp.run()
