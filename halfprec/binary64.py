import struct


BIAS = 1023

MASK_SIGN = 0x8000000000000000
MASK_EXPONENT = 0x7FF0000000000000
MASK_SIGNIFICAND = 0x000FFFFFFFFFFFFF

NEGATIVE_ZERO_BITS = 0x8000000000000000

_DOUBLE_PACKER = struct.Struct('<d')
_BITS_PACKER = struct.Struct('<Q')


def to_bits(v):
  return _BITS_PACKER.unpack(_DOUBLE_PACKER.pack(v))[0]


def from_bits(b):
  return _DOUBLE_PACKER.unpack(_BITS_PACKER.pack(b & 0xFFFFFFFFFFFFFFFF))[0]


def unpack_sign(v):
  return (to_bits(v) >> 63) & 1


def unpack_unbiased_exponent(v):
  return ((to_bits(v) & MASK_EXPONENT) >> 52) - BIAS


def unpack_significand(v):
  return to_bits(v) & MASK_SIGNIFICAND
