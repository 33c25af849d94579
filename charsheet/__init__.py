"""
Character sheet creator package.

This package turns a list of class/level selections into a finished character
sheet, including the class aggregation engine, the reference content
repository, snapshot persistence and the interactive command line.
"""
