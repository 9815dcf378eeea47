import random

from checkers.piece import Piece, Team
from checkers.tree import PositionTree, TreeNode


def _diagonal_pieces(count):
    return [Piece(i, i + 1) for i in range(count)]


def _starting_tree():
    tree = PositionTree()
    count = 0
    for i in range(8):
        for j in range(i % 2, 3, 2):
            tree.insert(Piece(i, j, Team.BLACK))
            count += 1
        for j in range(7 - (i % 2), 4, -2):
            tree.insert(Piece(7 - i, j, Team.RED))
            count += 1
    return tree, count


def test_insert_and_lookup():
    pieces = _diagonal_pieces(150)
    tree = PositionTree()
    for p in pieces:
        tree.insert(p)
    assert len(tree) == len(pieces)
    for p in pieces:
        node = tree.get_item(p.x, p.y)
        assert node is not None
        assert node.primary == p.x
        assert node.secondary == p.y
        assert tree.get_item(p.x, p.y) is node


def test_remove_each_piece():
    rng = random.Random(7)
    pieces = _diagonal_pieces(120)
    tree = PositionTree(pieces)
    order = pieces[:]
    rng.shuffle(order)
    for p in order:
        before = len(tree)
        tree.remove(p)
        assert tree.get_item(p.x, p.y) is None
        assert len(tree) == before - 1
    assert len(tree) == 0
    assert tree.inorder() == []


def test_remove_then_reinsert_keeps_size():
    rng = random.Random(11)
    pieces = _diagonal_pieces(120)
    tree = PositionTree(pieces)
    for _ in range(len(pieces)):
        p1 = rng.choice(pieces)
        before = len(tree)
        tree.remove(p1)
        tree.insert(p1)
        node = tree.get_item(p1.x, p1.y)
        assert node is not None
        assert node.value == p1
        assert len(tree) == before


def test_disappearing_pieces():
    tree, count = _starting_tree()
    node = tree.get_item(0, 2)
    pce = node.value.copy()
    tree.remove(pce)
    pce.r_move_right(8)
    tree.insert(pce)
    assert len(tree) == count
    assert tree.get_item(pce.x, pce.y) is not None

    node = tree.get_item(5, 5)
    pce = node.value.copy()
    tree.remove(pce)
    pce.r_move_right(8)
    tree.insert(pce)
    assert len(tree) == count
    assert tree.get_item(5, 5) is None


def test_inorder_is_sorted():
    rng = random.Random(3)
    pieces = [Piece(x, y) for x in range(8) for y in range(8)]
    rng.shuffle(pieces)
    tree = PositionTree(pieces)
    keys = [(p.x, p.y) for p in tree.inorder()]
    assert keys == sorted((p.x, p.y) for p in pieces)


def test_traversals_hold_same_values():
    tree, count = _starting_tree()
    key = lambda p: (p.x, p.y)
    inorder = tree.inorder()
    assert len(inorder) == count
    assert sorted(tree.preorder(), key=key) == inorder
    assert sorted(tree.postorder(), key=key) == inorder


def test_traversal_returns_copies():
    tree = PositionTree([Piece(2, 2, Team.BLACK)])
    listed = tree.inorder()[0]
    listed.r_move_left(8)
    assert tree.get_item(2, 2) is not None
    assert tree.inorder()[0] == Piece(2, 2, Team.BLACK)


def test_insert_stores_copy():
    piece = Piece(4, 4, Team.RED)
    tree = PositionTree([piece])
    piece.r_move_left(8)
    node = tree.get_item(4, 4)
    assert node is not None
    assert node.value == Piece(4, 4, Team.RED)
    assert tree.get_item(piece.x, piece.y) is None
    assert tree.inorder() == [Piece(4, 4, Team.RED)]


def test_tree_rep():
    assert PositionTree().tree_rep() == ""
    tree, count = _starting_tree()
    rep = tree.tree_rep()
    assert rep.count(">>") == count
    single = PositionTree([Piece(1, 2)])
    assert single.tree_rep() == "\n>>[1 < red, 1, 2 >]"


def test_node_height_and_str():
    node = TreeNode(Piece(1, 2))
    assert str(node) == "[1 < red, 1, 2 >]"
    node.left = TreeNode(Piece(0, 0))
    node.left.left = TreeNode(Piece(0, 0))
    node.left.update_height()
    node.update_height()
    assert node.height == node.left.height + 1


def test_heights_stay_small_for_sorted_inserts():
    tree = PositionTree(_diagonal_pieces(64))
    root_height = max(n.height for n in (tree.get_item(p.x, p.y) for p in _diagonal_pieces(64)))
    assert root_height < 64