"""
Bridges to other Result libraries.

    from fallible.interop import generic as G  # any library, extract + wrap pattern
    from fallible.interop import kungfu as K   # pip install fallible[kungfu]

The kungfu bridge is an optional extra and is imported explicitly.
"""
