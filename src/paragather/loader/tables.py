"""Read wide source tables and write gathered long tables"""
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd
import requests

from ..settings import get_http_timeout

logger = logging.getLogger(__name__)

CSV_EXTENSIONS = ['.csv', '.txt', '.tsv']
EXCEL_EXTENSIONS = ['.xlsx', '.xls']
# pandas names blank headers "Unnamed: 3"
PLACEHOLDER_RE = re.compile(r'Unnamed: \d+(_level_\d+)?')


def is_url(source: str) -> bool:
    return str(source).lower().startswith(('http://', 'https://'))


def download_file(url: str, target_dir: Optional[str] = None) -> str:
    """
    Download a file from URL to local path.

    Returns the local file path.
    """
    if target_dir is None:
        target_dir = tempfile.mkdtemp()

    filename = url.split('/')[-1].split('?')[0] or 'download.csv'
    local_path = os.path.join(target_dir, filename)

    logger.debug(f"Downloading {url}")
    response = requests.get(url, timeout=get_http_timeout())
    response.raise_for_status()

    with open(local_path, 'wb') as f:
        f.write(response.content)

    return local_path


def read_table(source: Union[str, Path], sheet_name: Optional[str] = None) -> pd.DataFrame:
    """
    Read a wide table from a CSV/Excel file or an http(s) URL.

    Fully empty rows and columns are dropped, as are pandas' 'Unnamed: n'
    placeholder columns from blank headers.
    """
    source = str(source)
    if is_url(source):
        with tempfile.TemporaryDirectory() as tmpdir:
            return _read_local(download_file(source, tmpdir), sheet_name)
    return _read_local(source, sheet_name)


def _read_local(source: str, sheet_name: Optional[str]) -> pd.DataFrame:
    ext = os.path.splitext(source)[1].lower()
    if ext in CSV_EXTENSIONS:
        sep = '\t' if ext == '.tsv' else ','
        df = pd.read_csv(source, sep=sep)
    elif ext in EXCEL_EXTENSIONS:
        df = pd.read_excel(source, sheet_name=sheet_name or 0)
    else:
        raise ValueError(f"Unsupported file type: {ext or source}")

    df = df.dropna(how='all').dropna(axis=1, how='all').reset_index(drop=True)

    unnamed_cols = [c for c in df.columns if PLACEHOLDER_RE.fullmatch(str(c))]
    if unnamed_cols:
        df = df.drop(columns=unnamed_cols)

    logger.debug(f"Read {Path(source).name}: {df.shape[0]} rows x {df.shape[1]} columns")
    return df


def write_table(df: pd.DataFrame, target: Union[str, Path]) -> Path:
    """Write a gathered table as CSV (tab separated for .tsv)."""
    target = Path(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    sep = '\t' if target.suffix.lower() == '.tsv' else ','
    df.to_csv(target, index=False, sep=sep)
    logger.debug(f"Wrote {len(df)} rows to {target}")
    return target


def get_sheet_names(file_path: str) -> List[str]:
    """Get list of sheet names from an Excel file."""
    xl = pd.ExcelFile(file_path)
    return xl.sheet_names
