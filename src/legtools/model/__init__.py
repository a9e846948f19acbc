"""
The MODEL layer reads, validates and rebuilds legend state.
It has no knowledge of the operations built on top of it.
"""
