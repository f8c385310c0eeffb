from .fetch_main_files import decode_content, fetch_file, fetch_main_files
from .select_files import fetch_tree, file_priority, is_eligible, select_main_files

__all__ = [
    "decode_content",
    "fetch_file",
    "fetch_main_files",
    "fetch_tree",
    "file_priority",
    "is_eligible",
    "select_main_files",
]
