import os

import pytest

# set environment variables
os.environ.setdefault('NETWORK', 'mainnet')
os.environ.setdefault('LOG_LEVEL', 'INFO')


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / 'payout.json'
