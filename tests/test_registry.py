from docsite_ext import MacroRegistry, register_extensions
from docsite_ext.document import Document


def test_registered_macros(context):
    registry = register_extensions(MacroRegistry(), context)
    assert set(registry.inline_macros) == {"component", "news", "fref"}
    assert set(registry.block_macros) == {"news"}


def test_inline_dispatch_with_attrlist_text(context):
    registry = register_extensions(MacroRegistry(), context)
    assert registry.process_inline("component", None, "core@latest", "displayVersion") == "1.0.0"
    assert registry.process_inline("fref", None, "docs/intro.adoc", "Intro") == '<a href="docs/intro.html">Intro</a>'
    assert registry.process_inline("unknown", None, "x", "y") is None


def test_block_dispatch(context, catalog):
    registry = register_extensions(MacroRegistry(), context)
    doc = Document()
    registry.process_block("news", doc, "generate", "refs=news/*.adoc")
    assert len(doc.blocks) == 3
    assert any(f.src.relative == "news.atom" for f in catalog.get_files())


def test_inline_and_block_take_parent_first(context):
    registry = register_extensions(MacroRegistry(), context)
    doc = Document()
    assert registry.process_inline("news", doc, "feed", "Feed") == '<a href="../_attachments/news.atom">Feed</a>'
    registry.process_block("news", doc, "generate", "refs=news/*.adoc")
    assert doc.blocks
