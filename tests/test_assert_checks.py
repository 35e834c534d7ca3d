import pytest

from halfprec import assert_checks as tas


def test_passing_checks():
  tas.check(True)
  tas.check_eq(512, 512)
  tas.check_le(13, 24)
  tas.check_lt(13, 24)


def test_failing_checks():
  with pytest.raises(AssertionError, match='1 == 2'):
    tas.check_eq(1, 2)
  with pytest.raises(AssertionError, match='25 <= 24'):
    tas.check_le(25, 24, msg='shift')
  with pytest.raises(AssertionError, match='3 < 3'):
    tas.check_lt(3, 3)
  with pytest.raises(AssertionError, match='Check failed'):
    tas.check(False)


def test_failure_location():
  with pytest.raises(AssertionError, match='test_assert_checks.py'):
    tas.check_eq('a', 'b', msg='location')
