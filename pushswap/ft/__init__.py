"""Helpers for characters, integer conversion, strings, byte buffers, linked lists and formatted output."""