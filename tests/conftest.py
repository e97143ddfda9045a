from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def offset_codec():
    from mailchimp_client.core.timestamps import TimestampCodec, TimestampFormat

    return TimestampCodec(TimestampFormat.OFFSET)


@pytest.fixture
def naive_codec():
    from mailchimp_client.core.timestamps import TimestampCodec, TimestampFormat

    return TimestampCodec(TimestampFormat.NAIVE)
