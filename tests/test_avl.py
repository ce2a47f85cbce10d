import io
import random

import pytest

from structkit.avl import AVLTree, main


def _check_balanced(preorder):
    """Rebuild the BST shape from a preorder listing and check AVL balance; return height."""
    if not preorder:
        return 0
    root = preorder[0]
    left = [v for v in preorder[1:] if v < root]
    right = [v for v in preorder[1:] if v > root]
    assert preorder[1:] == left + right
    lh = _check_balanced(left)
    rh = _check_balanced(right)
    assert abs(lh - rh) <= 1
    return max(lh, rh) + 1


def test_right_right_case_rotates_left():
    tree = AVLTree()
    for v in (10, 20, 30):
        tree.insert(v)
    assert tree.preorder() == [20, 10, 30]


def test_left_right_case_double_rotation():
    tree = AVLTree([30, 10, 20])
    assert tree.preorder()[0] == 20
    assert tree.inorder() == [10, 20, 30]


def test_insert_reports_duplicates():
    tree = AVLTree()
    assert tree.insert(5) is True
    assert tree.insert(5) is False
    assert len(tree) == 1


def test_delete_reports_missing():
    tree = AVLTree([1, 2, 3])
    assert tree.delete(4) is False
    assert tree.delete(2) is True
    assert tree.inorder() == [1, 3]
    assert len(tree) == 2


def test_delete_from_empty_tree():
    tree = AVLTree()
    assert tree.delete(1) is False
    assert len(tree) == 0


def test_contains_and_iter():
    values = [8, 3, 10, 1, 6, 14, 4, 7, 13]
    tree = AVLTree(values)
    assert all(v in tree for v in values)
    assert 2 not in tree
    assert list(tree) == sorted(values)


def test_traversals_share_elements():
    values = list(range(1, 16))
    tree = AVLTree(values)
    assert sorted(tree.preorder()) == values
    assert sorted(tree.postorder()) == values
    assert tree.preorder()[0] == tree.postorder()[-1]


def test_sequential_insert_stays_balanced():
    tree = AVLTree(range(100))
    height = _check_balanced(tree.preorder())
    assert height <= 8


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_operations_keep_invariants(seed):
    rng = random.Random(seed)
    tree = AVLTree()
    reference = set()
    for _ in range(400):
        v = rng.randint(0, 80)
        if rng.random() < 0.6:
            assert tree.insert(v) == (v not in reference)
            reference.add(v)
        else:
            assert tree.delete(v) == (v in reference)
            reference.discard(v)
        assert len(tree) == len(reference)
    assert tree.inorder() == sorted(reference)
    _check_balanced(tree.preorder())


def test_delete_all_empties_tree():
    values = [50, 20, 70, 10, 30, 60, 80]
    tree = AVLTree(values)
    for v in values:
        assert tree.delete(v)
        _check_balanced(tree.preorder())
    assert tree.inorder() == []
    assert len(tree) == 0


def test_main_menu_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 5\n1 5\n4\n2 9\n2 5\n3\n7\n6\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "5 inserted into the tree" in out
    assert "5 already exists in the tree" in out
    assert "In order traversal is : 5" in out
    assert "9 not found in the tree" in out
    assert "5 deleted successfully" in out
    assert "Tree is empty" in out
    assert "Invalid option entered" in out
    assert "Exiting the program" in out


def test_main_ends_on_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 3\n"))
    assert main([]) == 0
    assert "3 inserted into the tree" in capsys.readouterr().out