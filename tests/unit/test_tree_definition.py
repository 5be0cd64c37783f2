import pytest

from domain.taxonomy import Node, RequireFieldError, parse_tree_definition


def test_list_definition() -> None:
    roots = parse_tree_definition([{"data": "a", "children": ["b", {"data": "c"}]}, "d"])

    assert [r.data for r in roots] == ["a", "d"]
    assert [c.data for c in roots[0].children] == ["b", "c"]
    assert all(c.id and c.attributes["id"] == c.id for c in roots[0].children)
    assert roots[1].is_leaf is True


@pytest.mark.parametrize("key", ["tree", "roots"])
def test_mapping_definition(key: str) -> None:
    roots = parse_tree_definition({key: [{"data": "a"}]})
    assert roots[0].data == "a"


def test_empty_definition() -> None:
    assert parse_tree_definition(None) == []
    assert parse_tree_definition({"tree": None}) == []


def test_node_instances_are_kept() -> None:
    node = Node(data="kept")
    roots = parse_tree_definition([node])
    assert roots[0] is node
    assert node.id is not None


@pytest.mark.parametrize("bad", ["just a string", {"nodes": []}, 42])
def test_wrong_shape_raises(bad) -> None:
    with pytest.raises(ValueError):
        parse_tree_definition(bad)


def test_nested_node_without_data_raises() -> None:
    with pytest.raises(RequireFieldError, match=r"roots\[0\]\.children\[1\]"):
        parse_tree_definition([{"data": "a", "children": [{"data": "ok"}, {"title": "no data"}]}])
