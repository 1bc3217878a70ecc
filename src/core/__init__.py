"""
Core building blocks of the frame element library.

Scalar cells, their kinds, operator dispatch and the float primitives
they rely on. Independent of the table/column structures that store them.
"""
