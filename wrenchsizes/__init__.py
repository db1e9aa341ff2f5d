"""
wrenchsizes: how close metric wrench sizes are to fractional inch (SAE) sizes.

Walks a range of sizes on one measurement grid, finds the nearest step on the
other grid, and reports the closeness of every match.
"""
