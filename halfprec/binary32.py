import numpy as np


BIAS = 127

MASK_SIGN = 0x80000000
MASK_EXPONENT = 0x7F800000
MASK_SIGNIFICAND = 0x007FFFFF

NEGATIVE_ZERO_BITS = 0x80000000
INFINITY_BITS = 0x7F800000


def narrow(v):
  # Doubles outside the single range become infinities, like a C (float) cast.
  with np.errstate(over='ignore'):
    return np.float32(v)


def to_bits(v):
  return int(narrow(v).view(np.uint32))


def from_bits(b):
  return np.uint32(b & 0xFFFFFFFF).view(np.float32)


def unpack_sign(v):
  return (to_bits(v) >> 31) & 1


def unpack_unbiased_exponent(v):
  return ((to_bits(v) & MASK_EXPONENT) >> 23) - BIAS


def unpack_significand(v):
  return to_bits(v) & MASK_SIGNIFICAND
