"""
tests/test_package.py

Covers:
  - Every name in jdtools.__all__ is importable from the top level
  - Top-level re-exports are the subpackage objects
  - Exception hierarchy
"""

import jdtools
from jdtools import ISOFormatError, JDToolsError
from jdtools.iso import iso_to_jd
from jdtools.julian import ymd_to_jd


def test_all_names_resolve():
    missing = [name for name in jdtools.__all__ if not hasattr(jdtools, name)]
    assert missing == []


def test_no_duplicate_exports():
    assert len(jdtools.__all__) == len(set(jdtools.__all__))


def test_reexports_are_identical():
    assert jdtools.ymd_to_jd is ymd_to_jd
    assert jdtools.iso_to_jd is iso_to_jd


def test_exception_hierarchy():
    assert issubclass(ISOFormatError, JDToolsError)
    assert issubclass(ISOFormatError, ValueError)


def test_week_date_and_calendar_date_agree():
    assert jdtools.iso_to_jd("2015-W05-2") == jdtools.ymd_to_jd(2015, 1, 27)
