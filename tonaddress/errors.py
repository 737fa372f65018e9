#!/usr/bin/env python3
# -*- coding: utf_8 -*-

import logging
from enum import Enum

from .settings import settings


logger = logging.getLogger(__name__)


class ParseReason(Enum):
	RAW_FORMAT = "Invalid raw address string: wrong address format"
	RAW_WORKCHAIN = "Invalid raw address string: workchain number is not a 32-bit integer"
	RAW_HASH_DECODE = "Invalid raw address string: failed to decode hash part"
	RAW_HASH_LENGTH = "Invalid raw address string: hash part length must be 32 bytes"
	B64_LENGTH = "Invalid base64 address string: length must be 48 characters"
	B64_DECODE = "Invalid base64 address string: base64 decode error"
	B64_BYTES_LENGTH = "Invalid base64 address string: length of decoded bytes must be 36"
	B64_FLAG = "Invalid base64 address string: invalid flag"
	B64_CRC = "Invalid base64 address string: CRC16 hashes do not match"
#end class

class ParseError(ValueError):
	"""
	Raised when a string is not a well-formed TON address.
	`address` is the input exactly as the caller passed it.
	"""

	def __init__(self, address, reason):
		self.address = address
		self.reason = reason
		super().__init__(f"Error parsing TON address: {reason.value}")
	#end define

	def __eq__(self, other):
		if not isinstance(other, ParseError):
			return NotImplemented
		return self.address == other.address and self.reason == other.reason
	#end define

	def __hash__(self):
		return hash((self.address, self.reason))
	#end define

	def __reduce__(self):
		return (self.__class__, (self.address, self.reason))
	#end define
#end class

def parse_error(address, reason):
	if settings.debug:
		logger.debug(f"parse_error: {reason.value}: {address!r}")
	return ParseError(address, reason)
#end define
