"""Each scan is independent — tokenize 1000 expressions in parallel."""

from concurrent.futures import ThreadPoolExecutor

from cifras import tokenize

exprs = [f"{i} * {i + 1} - {i * 3} / 2" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tokenize, exprs))

print(f"Scanned {len(results)} expressions in parallel")
print("First:", [t.value for t in results[0]])
print("Last:", [t.value for t in results[-1]])
