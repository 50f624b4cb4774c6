"""
Containers for the molecules, loci and variant maps of a mitochondrial sample.
"""
