"""
Risus character sheet package.

This package models Risus characters and their cliches, and provides the
compact text format used to pack a character into a single string and to
unpack it again.
"""
