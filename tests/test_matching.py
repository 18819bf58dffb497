from algokit.matching import max_matching


def test_complete_bipartite():
    adj = [[], [1, 2, 3], [1, 2, 3], [1, 2, 3]]
    assert max_matching(3, 3, adj) == 3


def test_augmenting_path_needed():
    adj = [[], [1, 2], [1]]
    assert max_matching(2, 2, adj) == 2


def test_no_edges():
    adj = [[], [], []]
    assert max_matching(2, 2, adj) == 0


def test_shared_single_right_vertex():
    adj = [[], [1], [1], [1]]
    assert max_matching(3, 1, adj) == 1


def test_zero_based():
    adj = [[0, 1], [0], [1]]
    result = max_matching(3, 2, adj, base=0)
    assert result == 2
    assert result <= min(3, 2)


def test_right_vertices_outside_range_not_counted():
    adj = [[], [5]]
    assert max_matching(1, 2, adj) == 0