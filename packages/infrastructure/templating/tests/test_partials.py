"""Tests for partial and partial collection rendering."""


def test_render_partial_inherits_attributes(factory) -> None:
    template = factory.open("foo")
    template.set_attributes({"whom": "parent"})

    assert template.render_partial("foo") == "Hallo, parent!"


def test_render_partial_attributes_take_precedence(factory) -> None:
    template = factory.open("foo")
    template.set_attributes({"whom": "parent"})

    assert template.render_partial("foo", {"whom": "child"}) == "Hallo, child!"
    assert template.get_attribute("whom") == "parent"


def test_render_partial_collection(factory) -> None:
    template = factory.open("foo")

    result = template.render_partial_collection("entry", ["lorem", "ipsum"])

    assert result == "<li>lorem</li><li>ipsum</li>"


def test_render_partial_collection_with_spacer(factory) -> None:
    template = factory.open("foo")

    result = template.render_partial_collection("entry", ["lorem", "ipsum"], "spacer")

    assert result == "<li>lorem</li>,<li>ipsum</li>"


def test_render_partial_collection_empty_collection(factory) -> None:
    template = factory.open("foo")

    assert template.render_partial_collection("entry", [], "spacer") == ""


def test_render_partial_collection_accepts_generators(factory) -> None:
    template = factory.open("foo")

    result = template.render_partial_collection("entry", (str(i) for i in range(3)))

    assert result == "<li>0</li><li>1</li><li>2</li>"


def test_render_partial_collection_merges_attributes(factory) -> None:
    template = factory.open("foo")
    template.set_attributes({"label": "parent", "sep": "|"})

    result = template.render_partial_collection(
        "labelled_entry",
        ["a", "b"],
        spacer="labelled_spacer",
        attributes={"label": "item"},
    )

    assert result == "item:a|item:b"


def test_render_partial_collection_uses_file_stem_as_variable(factory) -> None:
    template = factory.open("foo")

    assert template.render_partial_collection("partials/item.txt", [1, 2]) == "[1][2]"


def test_render_partial_collection_with_open_template(factory) -> None:
    template = factory.open("foo")
    entry = factory.open("entry")

    assert template.render_partial_collection(entry, ["x"]) == "<li>x</li>"
