#!/usr/bin/env python3
# -*- coding: utf_8 -*-

import base64
import binascii
import string
from enum import Enum

from .errors import ParseReason, parse_error


class Base64Alphabet(Enum):
	STANDARD = "standard"
	URL_SAFE = "url_safe"

	@property
	def chars(self):
		return _ALPHABET_CHARS[self]
	#end define

	@property
	def altchars(self):
		if self is Base64Alphabet.URL_SAFE:
			return b"-_"
		return b"+/"
	#end define
#end class

_BASE_CHARS = string.ascii_uppercase + string.ascii_lowercase + string.digits
_ALPHABET_CHARS = {
	Base64Alphabet.STANDARD: frozenset(_BASE_CHARS + "+/"),
	Base64Alphabet.URL_SAFE: frozenset(_BASE_CHARS + "-_"),
}


def guess_alphabet(text):
	if '+' in text or '/' in text:
		return Base64Alphabet.STANDARD
	elif '-' in text or '_' in text:
		return Base64Alphabet.URL_SAFE

	# no alphabet-specific characters, both alphabets decode it the same way
	return Base64Alphabet.STANDARD
#end define

def b64decode(text, alphabet):
	"""
	Strict unpadded decode. `=`, the other alphabet's special
	characters and non-zero trailing bits are rejected.
	"""
	if not set(text) <= alphabet.chars:
		raise parse_error(text, ParseReason.B64_DECODE)
	if len(text) % 4 == 1:
		raise parse_error(text, ParseReason.B64_DECODE)
	#end if

	padding = '=' * (-len(text) % 4)
	buff = (text + padding).encode("ascii")
	try:
		data = base64.b64decode(buff, altchars=alphabet.altchars, validate=True)
	except binascii.Error:
		raise parse_error(text, ParseReason.B64_DECODE) from None

	# non-zero trailing bits
	if b64encode(data, alphabet) != text:
		raise parse_error(text, ParseReason.B64_DECODE)
	return data
#end define

def b64encode(data, alphabet):
	buff = base64.b64encode(data, altchars=alphabet.altchars)
	return buff.decode("ascii").rstrip('=')
#end define
