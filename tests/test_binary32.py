import math

import numpy as np

from halfprec import binary32 as b32


def test_bits():
  assert b32.to_bits(1.0) == 0x3F800000
  assert b32.to_bits(-2.0) == 0xC0000000
  assert b32.to_bits(-0.0) == b32.NEGATIVE_ZERO_BITS
  assert b32.to_bits(math.inf) == b32.INFINITY_BITS
  assert b32.to_bits(np.float32(0.5)) == 0x3F000000


def test_from_bits():
  assert b32.from_bits(0x3F800000) == 1.0
  assert isinstance(b32.from_bits(0x3F800000), np.float32)
  nz = b32.from_bits(b32.NEGATIVE_ZERO_BITS)
  assert nz == 0.0 and math.copysign(1.0, nz) < 0
  assert math.isnan(b32.from_bits(0x7FC00000))
  assert b32.from_bits(0x1_3F800000) == 1.0


def test_narrow():
  assert b32.narrow(1e300) == np.inf
  assert b32.narrow(-1e300) == -np.inf
  assert b32.narrow(1e-50) == 0.0
  assert b32.narrow(0.1) == np.float32(0.1)


def test_fields():
  assert b32.unpack_sign(-1.0) == 1
  assert b32.unpack_sign(1.0) == 0
  assert b32.unpack_sign(-0.0) == 1
  assert b32.unpack_unbiased_exponent(1.0) == 0
  assert b32.unpack_unbiased_exponent(8.0) == 3
  assert b32.unpack_unbiased_exponent(0.25) == -2
  assert b32.unpack_unbiased_exponent(0.0) == -b32.BIAS
  assert b32.unpack_unbiased_exponent(math.inf) == 128
  assert b32.unpack_significand(1.5) == 0x400000
  assert b32.unpack_significand(1.0) == 0
