"""Parse user mentions and keep unclosed delimiters as text."""

from entitas import CodecConfig, MarkupCodec, entity_text

codec = MarkupCodec(
    CodecConfig(mention_links_enabled=True, drop_unclosed_delimiters=False),
)

text, entities = codec.parse("ping [Ann](tg://user?id=42) about **2 * 3 = 6")
print(repr(text))
for entity in entities:
    print(f"  {entity!r} covers {entity_text(text, entity)!r}")

print(codec.unparse(text, entities))
