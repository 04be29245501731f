from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from lib_safe_fs.domain.paths import file_name_safe_timestamp, label_file_name


def test_file_name_safe_timestamp_basics() -> None:
    moment = datetime(2019, 3, 17, 16, 43, 0, tzinfo=timezone.utc)
    assert file_name_safe_timestamp(moment) == "20190317T164300000Z"


def test_file_name_safe_timestamp_converts_to_utc() -> None:
    moment = datetime(2019, 3, 17, 18, 43, 0, 250000, tzinfo=timezone(timedelta(hours=2)))
    assert file_name_safe_timestamp(moment) == "20190317T164300250Z"


def test_file_name_safe_timestamp_has_no_separator_characters() -> None:
    token = file_name_safe_timestamp(datetime.now(timezone.utc))
    assert not set("-:.") & set(token)


@pytest.mark.parametrize(
    ("path", "label", "expected"),
    [
        ("/aaa/bbb/ccc.txt", "ddd", "/aaa/bbb/ccc-ddd.txt"),
        ("/aaa/bbb/ccc", "ddd", "/aaa/bbb/ccc-ddd"),
        ("ccc.txt", "ddd", "ccc-ddd.txt"),
        ("ccc", "ddd", "ccc-ddd"),
        ("archive.tar.gz", "ddd", "archive.tar-ddd.gz"),
    ],
)
def test_label_file_name(path: str, label: str, expected: str) -> None:
    assert label_file_name(Path(path), label) == Path(expected)


def test_label_file_name_without_name_returns_none() -> None:
    assert label_file_name(Path("/"), "ddd") is None
