"""
Compiled-in target state.

Hand-authored records describing the desired on-chain configuration.
Edit these lists and re-run the matching task to apply a change.
"""
