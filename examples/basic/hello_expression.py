"""Scan an expression in 3 lines — zero config, zero deps."""

from cifras import tokenize

tokens = tokenize("1500+89 / 6 -9*45  ")
print([t.value for t in tokens])
