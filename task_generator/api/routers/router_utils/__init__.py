"""
Router utility functions.

Contains helper functions extracted from router endpoints to keep them clean.
"""

from task_generator.api.routers.router_utils.delivery import TemporaryFileResponse
from task_generator.api.routers.router_utils.form_utils import (
    decode_string_list,
    parse_form_flag,
)
from task_generator.api.routers.router_utils.upload_utils import (
    read_pattern_upload,
    save_upload_to_temp,
)

__all__ = [
    "TemporaryFileResponse",
    "decode_string_list",
    "parse_form_flag",
    "read_pattern_upload",
    "save_upload_to_temp",
]
