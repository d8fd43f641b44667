"""Byte streams over memory and files."""