"""Test configuration and utilities for the Fuel wallet SDK."""

import logging
import sys
from pathlib import Path

# Add the src directory to the path so the tests run from a plain checkout
test_dir = Path(__file__).parent
project_dir = test_dir.parent
src_dir = project_dir / "src"
sys.path.insert(0, str(src_dir))

# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

# Suppress noisy logs during testing
logging.getLogger('aiohttp').setLevel(logging.WARNING)
logging.getLogger('asyncio').setLevel(logging.WARNING)

# Test configuration
TEST_CONFIG = {
    'timeout': 5.0,
    'max_retries': 2,
    'retry_delay': 0.01,
    'test_provider_url': 'http://127.0.0.1:4000/v1/rpc',
}

# Test addresses and assets for consistent testing
TEST_ADDRESSES = {
    'owner': '0x09c0b2d1a486c439a87bcba6b46a7a1a23f3897cc83a94521a96da5c23bc58db',
    'receiver': '0x0202020202020202020202020202020202020202020202020202020202020202',
    'genesis': '0x69a2b736b60159b43bb8a4f98c0589f6da5fa3a3d101e8e269c499eb942753ba',
    'invalid': '0xinvalid',
}

TEST_ASSETS = {
    'base': '0x0000000000000000000000000000000000000000000000000000000000000000',
    'asset_a': '0x0101010101010101010101010101010101010101010101010101010101010101',
    'asset_b': '0x0202020202020202020202020202020202020202020202020202020202020202',
}
