#!/usr/bin/env python3
# -*- coding: utf_8 -*-

"""
User-friendly address buffer, 36 bytes, big-endian:

	[0]      flag byte
	[1]      workchain, low 8 bits only
	[2:34]   hash part
	[34:36]  CRC-16/XMODEM of [0:34]

The workchain is stored as a single byte, so only workchains in 0..255
survive a round trip. Masterchain -1 is written as 0xff and read back as 255.
"""

from .crc import crc16, crc16_bytes
from .errors import ParseReason, parse_error


ADDRESS_LEN = 36
PAYLOAD_LEN = 34
HASH_PART_LEN = 32

# (bounceable, production) -> flag
# 0x40 marks a non-bounceable address, 0x80 a non-production one
FLAGS = {
	(True, True): 0x11,
	(False, True): 0x51,
	(True, False): 0x91,
	(False, False): 0xD1,
}
FLAGS_REVERSED = {flag: key for key, flag in FLAGS.items()}


def pack(workchain, hash_part, bounceable=True, production=True):
	flag = FLAGS[(bool(bounceable), bool(production))]
	payload = bytes([flag, workchain & 0xFF]) + bytes(hash_part)
	return payload + crc16_bytes(payload)
#end define

def unpack(data, address):
	"""
	Returns (workchain, hash_part, non_bounceable, non_production).
	`address` is the caller's original string, used in errors.
	"""
	flags = FLAGS_REVERSED.get(data[0])
	if flags is None:
		raise parse_error(address, ParseReason.B64_FLAG)
	bounceable, production = flags

	crc = int.from_bytes(data[PAYLOAD_LEN:ADDRESS_LEN], "big")
	check_crc = crc16(data[:PAYLOAD_LEN])
	if crc != check_crc:
		raise parse_error(address, ParseReason.B64_CRC)
	#end if

	workchain = data[1]
	hash_part = bytes(data[2:PAYLOAD_LEN])
	assert len(hash_part) == HASH_PART_LEN

	return workchain, hash_part, not bounceable, not production
#end define
