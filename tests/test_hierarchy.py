from core.services.evm.hierarchy import (
    build_hierarchy,
    children_by_parent,
    descendants,
    sort_by_code,
    wbs_code_key,
)


def test_codes_sort_naturally(node_factory):
    nodes = [
        node_factory("x10", code="1.10"),
        node_factory("x2", code="1.2"),
        node_factory("x9", code="1.9"),
        node_factory("y", code="2"),
        node_factory("x", code="1"),
    ]
    assert [n.code for n in sort_by_code(nodes)] == ["1", "1.2", "1.9", "1.10", "2"]
    assert wbs_code_key("1.10") > wbs_code_key("1.9")


def test_build_hierarchy_nests_children_in_code_order(site_wbs):
    shuffled = list(reversed(site_wbs))
    forest = build_hierarchy(shuffled)

    assert [t.node.id for t in forest] == ["S1", "S2"]
    foundations = forest[0]
    assert [c.node.id for c in foundations.children] == ["W11", "W12"]
    assert [c.node.id for c in foundations.children[1].children] == ["A121", "A122"]
    assert forest[1].children[0].children[1].node.id == "A212"


def test_descendants_walk_depth_first(site_wbs):
    children = children_by_parent(site_wbs)
    assert [n.id for n in descendants("S1", children)] == ["W11", "A111", "W12", "A121", "A122"]
    assert descendants("A111", children) == []
