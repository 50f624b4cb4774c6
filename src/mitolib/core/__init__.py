"""
Core coordinate and alphabet primitives: positions, windows and codon tables.
"""
