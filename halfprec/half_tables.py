import numpy as np

from . import alog
from . import assert_checks as tas
from . import binary16 as b16
from . import binary32 as b32


# Lookup tables for the truncating (round toward zero) conversion:
#
#   pack:   h = BASE[(f >> 23) & 0x1ff] + ((f & 0x007fffff) >> SHIFT[(f >> 23) & 0x1ff])
#   unpack: f = MANTISSA[OFFSET[h >> 10] + (h & 0x3ff)] + EXPONENT[h >> 10]


def _build_base_shift():
  base = np.zeros(512, dtype=np.uint16)
  shift = np.zeros(512, dtype=np.uint8)
  for index in range(256):
    e = index - b32.BIAS
    if e < -24:
      # Too small even for a half subnormal.
      hbase, hshift = b16.POSITIVE_ZERO, 24
    elif e < -14:
      hbase, hshift = 0x0400 >> (-e - 14), -e - 1
    elif e <= 15:
      hbase, hshift = (e + b16.BIAS) << 10, 13
    elif e < 128:
      hbase, hshift = b16.POSITIVE_INFINITY, 24
    else:
      # Infinities and NaNs keep the top mantissa bits.
      hbase, hshift = b16.POSITIVE_INFINITY, 13

    base[index], base[index | 0x100] = hbase, hbase | b16.MASK_SIGN
    shift[index], shift[index | 0x100] = hshift, hshift

  return base, shift


def _convert_mantissa(i):
  m, e = i << 13, 0
  while not (m & 0x00800000):
    e -= 0x00800000
    m <<= 1

  m &= ~0x00800000
  # Rebias from the half subnormal exponent (1 - 15) to the single one.
  e += 0x38800000

  return m | e


def _build_mantissas():
  mantissas = np.zeros(2048, dtype=np.uint32)
  for index in range(1, 1024):
    mantissas[index] = _convert_mantissa(index)
  for index in range(1024, 2048):
    mantissas[index] = 0x38000000 + ((index - 1024) << 13)

  return mantissas


def _build_offsets():
  offsets = np.full(64, 1024, dtype=np.uint16)
  offsets[0] = offsets[32] = 0

  return offsets


def _build_exponents():
  exponents = np.zeros(64, dtype=np.uint32)
  for index in range(1, 31):
    exponents[index] = index << 23
  exponents[31] = 0x47800000
  exponents[32] = b32.MASK_SIGN
  for index in range(33, 63):
    exponents[index] = b32.MASK_SIGN + ((index - 32) << 23)
  exponents[63] = 0xC7800000

  return exponents


BASE_TABLE, SHIFT_TABLE = _build_base_shift()
MANTISSA_TABLE = _build_mantissas()
OFFSET_TABLE = _build_offsets()
EXPONENT_TABLE = _build_exponents()

tas.check_eq(len(BASE_TABLE), 512)
tas.check_eq(len(SHIFT_TABLE), 512)
tas.check_eq(len(MANTISSA_TABLE), 2048)
tas.check_eq(len(OFFSET_TABLE), 64)
tas.check_eq(len(EXPONENT_TABLE), 64)
tas.check_le(int(SHIFT_TABLE.max()), 24, msg='Shift exceeds the single mantissa width')
tas.check_lt(int(OFFSET_TABLE.max()) + b16.MASK_SIGNIFICAND, len(MANTISSA_TABLE),
             msg='Offsets overrun the mantissa table')
tas.check(bool(np.all(MANTISSA_TABLE[1:1024] & b32.MASK_EXPONENT)),
          msg='Half subnormal mantissas must convert to single normals')

alog.debug(f'Built binary16 tables: base/shift={len(BASE_TABLE)} '
           f'mantissa={len(MANTISSA_TABLE)} offset/exponent={len(OFFSET_TABLE)}')


def pack_float32(v):
  bits = b32.to_bits(v)
  index = (bits >> 23) & 0x1FF
  h = int(BASE_TABLE[index]) + ((bits & b32.MASK_SIGNIFICAND) >> int(SHIFT_TABLE[index]))
  # NaNs with a payload only in the discarded bits would read as infinities.
  if (bits & 0x7FFFFFFF) > b32.INFINITY_BITS and not b16.is_nan(h):
    h |= b16.example_nan()

  return h


def pack_float64(v):
  return pack_float32(b32.narrow(v))


def unpack_float32(h):
  index = (h >> 10) & 0x3F
  mantissa = int(MANTISSA_TABLE[int(OFFSET_TABLE[index]) + (h & b16.MASK_SIGNIFICAND)])

  return b32.from_bits(mantissa + int(EXPONENT_TABLE[index]))


def unpack_float64(h):
  return float(unpack_float32(h))
