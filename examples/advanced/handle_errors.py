"""Report the location of an invalid character and keep the partial scan."""

from cifras import UnrecognizedCharacterError, tokenize

source = "12 + 7 ^ 2"

try:
    tokenize(source, source_file="<stdin>")
except UnrecognizedCharacterError as e:
    print(e)
    print(source)
    print(" " * e.offset + "^")
    print("Scanned before failure:", [t.value for t in e.tokens])
