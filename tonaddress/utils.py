#!/usr/bin/env python3
# -*- coding: utf_8 -*-

from .address import Address, BASE64_URL_DEFAULT
from .errors import ParseError


def parse_addr(input_addr):
	"""
	:return: (workchain, hash_part hex)
	:raises ParseError:
	"""
	address = Address.parse(input_addr)
	return address.workchain, address.hash_part.hex()
#end define

def normalize_address(input_addr, encoder=BASE64_URL_DEFAULT):
	address = Address.parse(input_addr)
	return address.to_base64(encoder)
#end define

def is_address(addr):
	return is_base64_address(addr) or is_raw_address(addr)
#end define

def is_base64_address(addr):
	try:
		Address.from_base64(addr)
		return True
	except ParseError:
		return False
#end define

def is_raw_address(addr):
	try:
		Address.from_raw_address(addr)
		return True
	except ParseError:
		return False
#end define
