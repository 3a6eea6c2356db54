"""Tests for reading and writing tables."""
import os
from unittest.mock import MagicMock, patch

import pandas as pd
import pytest

from paragather.loader import download_file, is_url, read_table, write_table


class TestReadTable:

    def test_csv(self, tmp_path, pocmajsum):
        path = tmp_path / 'majors.csv'
        pocmajsum.to_csv(path, index=False)
        df = read_table(path)
        pd.testing.assert_frame_equal(df, pocmajsum)

    def test_tsv(self, tmp_path, pocmajsum):
        path = tmp_path / 'majors.tsv'
        pocmajsum.to_csv(path, index=False, sep='\t')
        assert read_table(path).columns.tolist() == pocmajsum.columns.tolist()

    def test_drops_empty_rows_and_unnamed_columns(self, tmp_path):
        path = tmp_path / 'messy.csv'
        path.write_text('site,,temp\nA,,1\n,,\nB,x,2\n')
        df = read_table(path)
        assert df.columns.tolist() == ['site', 'temp']
        assert df['site'].tolist() == ['A', 'B']

    def test_keeps_real_columns_named_unnamed(self, tmp_path):
        path = tmp_path / 'sites.csv'
        path.write_text('unnamed_site,Unnamed,Ca\nA,x,1\nB,y,2\n')
        df = read_table(path)
        assert df.columns.tolist() == ['unnamed_site', 'Unnamed', 'Ca']

    def test_excel(self, tmp_path, pocmajsum):
        pytest.importorskip('openpyxl')
        path = tmp_path / 'majors.xlsx'
        pocmajsum.to_excel(path, index=False, sheet_name='majors')
        df = read_table(path, sheet_name='majors')
        assert df.shape == pocmajsum.shape

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / 'data.parquet'
        path.write_bytes(b'')
        with pytest.raises(ValueError, match='Unsupported file type'):
            read_table(path)

    def test_url_is_downloaded(self, tmp_path, pocmajsum):
        path = tmp_path / 'majors.csv'
        pocmajsum.to_csv(path, index=False)
        with patch('paragather.loader.tables.download_file', return_value=str(path)) as download:
            df = read_table('https://example.org/data/majors.csv')
        url, target_dir = download.call_args[0]
        assert url == 'https://example.org/data/majors.csv'
        assert len(df) == 2
        assert not os.path.exists(target_dir)


class TestDownload:

    def test_download_file(self, tmp_path):
        response = MagicMock()
        response.content = b'a,b\n1,2\n'
        with patch('paragather.loader.tables.requests.get', return_value=response) as get:
            local = download_file('https://example.org/x/data.csv?raw=1', str(tmp_path))
        get.assert_called_once()
        response.raise_for_status.assert_called_once()
        assert local.endswith('data.csv')
        assert open(local, 'rb').read() == b'a,b\n1,2\n'

    def test_is_url(self):
        assert is_url('https://example.org/a.csv')
        assert is_url('HTTP://example.org/a.csv')
        assert not is_url('/tmp/a.csv')


class TestWriteTable:

    def test_write_csv(self, tmp_path, pocmajsum):
        path = write_table(pocmajsum, tmp_path / 'out' / 'long.csv')
        assert pd.read_csv(path).shape == pocmajsum.shape
