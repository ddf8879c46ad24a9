"""Helpers for characters, memory, strings, linked lists, output, printf and line reading."""