#!/usr/bin/env python3
# -*- coding: utf_8 -*-

import re
import binascii

from pydantic import BaseModel, ConfigDict, Field

from . import layout
from .alphabet import Base64Alphabet, guess_alphabet, b64decode, b64encode
from .errors import ParseReason, parse_error


WORKCHAIN_MIN = -2**31
WORKCHAIN_MAX = 2**31 - 1
BASE64_ADDRESS_LEN = 48

_workchain_pattern = re.compile(r"[+-]?[0-9]+")


class Base64Encoder(BaseModel):
	"""Preferences for Address.to_base64"""
	model_config = ConfigDict(frozen=True)

	alphabet: Base64Alphabet = Base64Alphabet.URL_SAFE
	bounceable: bool = True
	production: bool = True
#end class

BASE64_STD_DEFAULT = Base64Encoder(alphabet=Base64Alphabet.STANDARD, bounceable=True, production=True)
BASE64_URL_DEFAULT = Base64Encoder(alphabet=Base64Alphabet.URL_SAFE, bounceable=True, production=True)


class Address(BaseModel):
	"""
	TON account address: workchain and 32-byte hash part.

	Whatever form the address was parsed from, only `workchain` and
	`hash_part` are kept, and only they take part in comparison.

	Note: the base64 form stores the workchain in one byte. Workchains
	outside 0..255 do not survive a round trip through `to_base64` and
	`from_base64`, e.g. -1 comes back as 255.
	"""
	model_config = ConfigDict(frozen=True)

	workchain: int = Field(strict=True, ge=WORKCHAIN_MIN, le=WORKCHAIN_MAX)
	hash_part: bytes = Field(strict=True, min_length=layout.HASH_PART_LEN, max_length=layout.HASH_PART_LEN)

	@classmethod
	def new(cls, workchain, hash_part):
		if isinstance(hash_part, (bytearray, memoryview)):
			hash_part = bytes(hash_part)
		return cls(workchain=workchain, hash_part=hash_part)
	#end define

	@classmethod
	def empty(cls):
		return cls(workchain=0, hash_part=bytes(layout.HASH_PART_LEN))
	#end define

	def get_workchain(self):
		return self.workchain
	#end define

	def get_hash_part(self):
		return self.hash_part
	#end define

	@classmethod
	def from_raw_address(cls, text):
		"""Parse "0:e4d954ef..." """
		buff = text.split(':')
		if len(buff) != 2:
			raise parse_error(text, ParseReason.RAW_FORMAT)
		workchain_text, hash_text = buff

		if _workchain_pattern.fullmatch(workchain_text) is None:
			raise parse_error(text, ParseReason.RAW_WORKCHAIN)
		workchain = int(workchain_text)
		if not WORKCHAIN_MIN <= workchain <= WORKCHAIN_MAX:
			raise parse_error(text, ParseReason.RAW_WORKCHAIN)
		#end if

		try:
			hash_part = binascii.unhexlify(hash_text)
		except ValueError:
			raise parse_error(text, ParseReason.RAW_HASH_DECODE) from None
		if len(hash_part) != layout.HASH_PART_LEN:
			raise parse_error(text, ParseReason.RAW_HASH_LENGTH)
		#end if

		return cls(workchain=workchain, hash_part=hash_part)
	#end define

	@classmethod
	def from_base64(cls, text, alphabet=None):
		"""
		Decode a user-friendly address into a DecodeResult.
		If `alphabet` is None it is guessed from the string.
		"""
		# length in utf-8 bytes, not characters
		if len(text.encode("utf-8", "surrogatepass")) != BASE64_ADDRESS_LEN:
			raise parse_error(text, ParseReason.B64_LENGTH)
		if alphabet is None:
			alphabet = guess_alphabet(text)
		#end if

		data = b64decode(text, alphabet)
		if len(data) != layout.ADDRESS_LEN:
			raise parse_error(text, ParseReason.B64_BYTES_LENGTH)
		#end if

		workchain, hash_part, non_bounceable, non_production = layout.unpack(data, text)
		address = cls(workchain=workchain, hash_part=hash_part)
		return DecodeResult(
			address = address,
			non_bounceable = non_bounceable,
			non_production = non_production,
			alphabet = alphabet
		)
	#end define

	@classmethod
	def parse(cls, text):
		if ':' in text:
			return cls.from_raw_address(text)
		return cls.from_base64(text).address
	#end define

	@classmethod
	def from_string(cls, text):
		return cls.parse(text)
	#end define

	def to_raw_address(self):
		return f"{self.workchain}:{self.hash_part.hex()}"
	#end define

	def to_base64(self, encoder=BASE64_URL_DEFAULT):
		data = layout.pack(self.workchain, self.hash_part, encoder.bounceable, encoder.production)
		return b64encode(data, encoder.alphabet)
	#end define

	def __str__(self):
		return self.to_base64(BASE64_URL_DEFAULT)
	#end define

	def __repr__(self):
		return f"Address('{self.to_raw_address()}')"
	#end define
#end class

class DecodeResult(BaseModel):
	"""
	Address decoded from the base64 form, plus the flags and the
	alphabet found in it. Compares by address only.
	"""
	model_config = ConfigDict(frozen=True)

	address: Address
	non_bounceable: bool
	non_production: bool
	alphabet: Base64Alphabet

	def is_non_bounceable(self):
		return self.non_bounceable
	#end define

	def is_non_production(self):
		return self.non_production
	#end define

	def is_bounceable(self):
		return not self.non_bounceable
	#end define

	def is_production(self):
		return not self.non_production
	#end define

	def __eq__(self, other):
		if not isinstance(other, DecodeResult):
			return NotImplemented
		return self.address == other.address
	#end define

	def __hash__(self):
		return hash(self.address)
	#end define
#end class
