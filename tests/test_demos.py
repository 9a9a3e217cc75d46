import re

import pytest

from binarytrees import demos


def _drawing_and_lines(text, pattern):
    lines = text.splitlines()
    matches = [re.fullmatch(pattern, line) for line in lines]
    return [m for m in matches if m]


def _boxes(text):
    return [int(v) for v in re.findall(r"\((\d{3})\)", text)]


def _number_lines(text):
    return [int(line) for line in text.splitlines() if re.fullmatch(r"-?\d+", line)]


def test_demo_node_draws_every_value():
    text = demos.demo_node()
    assert sorted(_boxes(text)) == sorted([98, 12, 6, 16, 402, 256, 512])
    assert text.endswith("\n")
    assert "(098)" in text.splitlines()[0]


def test_demo_insert_left_adds_new_values_only_in_second_drawing():
    first, second = demos.demo_insert_left().split("\n\n", 1)
    assert sorted(_boxes(first)) == [12, 98, 402]
    assert sorted(_boxes(second)) == [12, 54, 98, 128, 402]


def test_demo_insert_right_adds_new_values_only_in_second_drawing():
    first, second = demos.demo_insert_right().split("\n\n", 1)
    assert sorted(_boxes(first)) == [12, 98, 402]
    assert sorted(_boxes(second)) == [12, 54, 98, 128, 402]


def test_demo_delete_draws_the_grown_tree():
    _, second = demos.demo_insert_right().split("\n\n", 1)
    assert demos.demo_delete() == second


def test_demo_is_leaf_results():
    text = demos.demo_is_leaf()
    assert text.startswith(demos.demo_delete())
    results = {int(m[1]): int(m[2]) for m in _drawing_and_lines(text, r"Is (\d+) a leaf: (\d)")}
    assert results == {98: 0, 128: 0, 402: 1}


def test_demo_is_root_only_the_root_is_root():
    text = demos.demo_is_root()
    results = {int(m[1]): int(m[2]) for m in _drawing_and_lines(text, r"Is (\d+) a root: (\d)")}
    assert set(results) == {98, 128, 402}
    assert results[98] == 1
    assert results[128] == results[402] == 0


def test_traversals_visit_the_same_values():
    pre = _number_lines(demos.demo_preorder())
    ino = _number_lines(demos.demo_inorder())
    post = _number_lines(demos.demo_postorder())
    assert sorted(pre) == sorted(ino) == sorted(post) == sorted([98, 12, 402, 6, 56, 256, 512])


def test_inorder_of_search_tree_is_sorted():
    values = _number_lines(demos.demo_inorder())
    assert values == sorted(values)


def test_preorder_starts_and_postorder_ends_with_root():
    assert _number_lines(demos.demo_preorder())[0] == 98
    assert _number_lines(demos.demo_postorder())[-1] == 98


def test_traversal_demos_share_the_drawing():
    drawing = demos.demo_preorder().split("98\n")[0]
    assert demos.demo_inorder().startswith(drawing)
    assert demos.demo_postorder().startswith(drawing)


def _measures(text, label):
    return {int(m[1]): int(m[2]) for m in _drawing_and_lines(text, label + r" (\d+): (\d+)")}


def test_demo_size_matches_drawing():
    text = demos.demo_size()
    sizes = _measures(text, "Size of")
    assert sizes[98] == len(_boxes(demos.demo_delete()))
    assert sizes[98] > sizes[128] > sizes[54]


def test_leaves_and_nodes_sum_to_size():
    sizes = _measures(demos.demo_size(), "Size of")
    leaf_counts = _measures(demos.demo_leaves(), "Leaves in")
    inner = _measures(demos.demo_nodes(), "Nodes in")
    assert set(sizes) == set(leaf_counts) == set(inner) == {98, 128, 54}
    for value in sizes:
        assert leaf_counts[value] + inner[value] == sizes[value]


def test_depth_and_height_relations():
    depths = _measures(demos.demo_depth(), "Depth of")
    heights = _measures(demos.demo_height(), "Height from")
    assert depths[98] == 0
    assert heights[54] == 0
    assert depths[128] + heights[128] <= heights[98]
    assert depths[54] + heights[54] <= heights[98]


def test_height_matches_number_of_drawing_rows():
    heights = _measures(demos.demo_height(), "Height from")
    drawing = demos.demo_delete()
    assert heights[98] + 1 == len(drawing.splitlines())


def test_demo_balance_is_signed():
    text = demos.demo_balance()
    matches = _drawing_and_lines(text, r"Balance of (\d+): ([+-]\d+)")
    assert [int(m[1]) for m in matches] == [98, 128, 54]
    assert all(m[2][0] in "+-" for m in matches)


def test_demo_is_full_reports_three_flags():
    text = demos.demo_is_full()
    matches = _drawing_and_lines(text, r"Is (\d+) full: ([01])")
    assert [int(m[1]) for m in matches] == [98, 12, 128]
    flags = {int(m[1]): int(m[2]) for m in matches}
    assert flags[12] == 1
    assert flags[128] == 0
    assert flags[98] == 0


def test_demo_is_perfect_sequence():
    text = demos.demo_is_perfect()
    flags = [int(m[1]) for m in _drawing_and_lines(text, r"Perfect: ([01])")]
    assert flags == [1, 0, 0]


def test_demo_sibling_root_has_none():
    text = demos.demo_sibling()
    assert text.endswith("Sibling of 98: (nil)\n")
    matches = _drawing_and_lines(text, r"Sibling of (\d+): (\S+)")
    assert [int(m[1]) for m in matches] == [12, 110, 54, 98]
    pairs = {int(m[1]): m[2] for m in matches}
    assert pairs[12] == "128"


def test_demo_uncle_child_of_root_has_none():
    text = demos.demo_uncle()
    assert text.endswith("Uncle of 12: (nil)\n")
    matches = _drawing_and_lines(text, r"Uncle of (\d+): (\S+)")
    assert [int(m[1]) for m in matches] == [110, 54, 12]
    assert text.startswith(demos.demo_sibling().split("Sibling")[0])


def test_main_runs_a_named_demo(capsys):
    assert demos.main(["node"]) == 0
    assert capsys.readouterr().out == demos.demo_node()


def test_main_runs_several_demos_separated(capsys):
    assert demos.main(["node", "uncle"]) == 0
    assert capsys.readouterr().out == demos.demo_node() + "\n" + demos.demo_uncle()


def test_main_runs_everything_by_default(capsys):
    assert demos.main([]) == 0
    out = capsys.readouterr().out
    assert demos.demo_uncle() in out
    assert demos.demo_is_perfect() in out


def test_main_lists_demos(capsys):
    assert demos.main(["--list"]) == 0
    names = capsys.readouterr().out.splitlines()
    assert names == list(demos.DEMOS)
    assert "heap_extract" in names


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit) as excinfo:
        demos.main(["no_such_demo"])
    assert excinfo.value.code == 2