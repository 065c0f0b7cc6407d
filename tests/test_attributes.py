from docsite_ext import MacroAttributes, parse_attrlist


def test_presence_without_value_differs_from_absence():
    attributes = MacroAttributes({"flag": None})
    assert attributes.has("flag")
    assert attributes.named("flag") is None
    assert not attributes.has("other")
    assert len(attributes) == 1


def test_parse_positional():
    attributes = parse_attrlist("version")
    assert list(attributes.keys()) == [1]
    assert attributes.positional(1) == "version"
    assert attributes.only_positional() == "version"


def test_parse_named_and_positional():
    attributes = parse_attrlist('Read this, refs=news/*.adoc, "a, b"')
    assert attributes.positional(1) == "Read this"
    assert attributes.named("refs") == "news/*.adoc"
    assert attributes.positional(2) == "a, b"
    assert attributes.only_positional() is None


def test_parse_empty():
    assert len(parse_attrlist("")) == 0
    assert parse_attrlist("").only_positional() is None


def test_only_positional_needs_position_one():
    assert MacroAttributes({"refs": "x"}).only_positional() is None
