#!/usr/bin/env python3
# -*- coding: utf_8 -*-

import fastcrc # pip3 install fastcrc


def crc16(data):
	"""CRC-16/XMODEM: poly 0x1021, init 0, no reflection, no final xor"""
	return fastcrc.crc16.xmodem(bytes(data))
#end define

def crc16_bytes(data):
	crc = crc16(data)
	return crc.to_bytes(2, byteorder="big")
#end define
