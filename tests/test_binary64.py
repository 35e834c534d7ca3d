import math

from halfprec import binary64 as b64


def test_bits():
  assert b64.to_bits(1.0) == 0x3FF0000000000000
  assert b64.to_bits(-0.0) == b64.NEGATIVE_ZERO_BITS
  assert b64.to_bits(math.inf) == 0x7FF0000000000000
  assert b64.from_bits(0x4000000000000000) == 2.0
  nz = b64.from_bits(b64.NEGATIVE_ZERO_BITS)
  assert nz == 0.0 and math.copysign(1.0, nz) < 0
  assert math.isnan(b64.from_bits(0x7FF8000000000000))


def test_fields():
  assert b64.unpack_sign(-3.0) == 1
  assert b64.unpack_sign(3.0) == 0
  assert b64.unpack_unbiased_exponent(1.0) == 0
  assert b64.unpack_unbiased_exponent(1024.0) == 10
  assert b64.unpack_unbiased_exponent(0.0) == -b64.BIAS
  assert b64.unpack_unbiased_exponent(-math.inf) == 1024
  assert b64.unpack_significand(1.5) == 0x8000000000000
  assert b64.unpack_significand(2.0) == 0
