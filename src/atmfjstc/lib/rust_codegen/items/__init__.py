"""
The items that can be placed in a `Scope` (structs, functions, comments etc.), along with the smaller pieces they are
made of (types, fields, bounds).
"""
