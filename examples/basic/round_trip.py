"""Strip markup into text + entities and put it back — zero config, zero deps."""

from entitas import parse, unparse

text, entities = parse("Hello **World**, see [the docs](https://example.com) 😀 `x = 1`")
print(text)
for entity in entities:
    print(f"  {entity.kind:<10} offset={entity.offset} length={entity.length}")

print(unparse(text, entities))
