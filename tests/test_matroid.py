from contestlib.matroid import matroid_intersection


def _partition_oracles():
    state = {"left": set(), "right": set()}

    def rebuild(chosen):
        state["left"] = {e[0] for e in chosen}
        state["right"] = {e[1] for e in chosen}

    def check1(edge):
        return edge[0] not in state["left"]

    def check2(edge):
        return edge[1] not in state["right"]

    return rebuild, check1, check2


def _is_matching(edges):
    lefts = [e[0] for e in edges]
    rights = [e[1] for e in edges]
    return len(set(lefts)) == len(lefts) and len(set(rights)) == len(rights)


def test_bipartite_matching_needs_augmenting_path():
    edges = [(0, "a"), (0, "b"), (1, "a")]
    result = matroid_intersection(edges, *_partition_oracles())
    assert len(result) == 2
    assert _is_matching(result)
    assert set(result) <= set(edges)


def test_result_is_maximal():
    edges = [(0, "a"), (0, "b"), (1, "b"), (2, "c"), (2, "a"), (3, "c")]
    rebuild, check1, check2 = _partition_oracles()
    result = matroid_intersection(edges, rebuild, check1, check2)
    assert _is_matching(result)
    rebuild(result)
    for edge in edges:
        if edge not in result:
            assert not (check1(edge) and check2(edge))


def test_uniform_matroids_give_smaller_rank():
    rank1, rank2 = 2, 3
    state = {"size": 0}

    def rebuild(chosen):
        state["size"] = len(chosen)

    result = matroid_intersection(
        range(6),
        rebuild,
        lambda x: state["size"] < rank1,
        lambda x: state["size"] < rank2,
    )
    assert len(result) == min(rank1, rank2)


def test_empty_ground_set():
    assert matroid_intersection([], *_partition_oracles()) == []