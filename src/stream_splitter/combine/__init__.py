"""Concatenate split pieces back into one stream."""

from stream_splitter.combine.combine import (
    combine_files,
    expand_patterns,
    read_path_list,
    transfer_file_content,
)

__all__ = ["combine_files", "expand_patterns", "read_path_list", "transfer_file_content"]
