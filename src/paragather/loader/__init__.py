"""Reading and writing tables"""
from .tables import (
    read_table,
    write_table,
    download_file,
    get_sheet_names,
    is_url,
)
