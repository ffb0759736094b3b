import pytest

from sdnmap.antcolony import (
    AntColonyParams,
    PathStatus,
    TreeStatus,
    format_path,
    map_indices_to_ids,
    parse_path_status,
    parse_tree_status,
    path_length,
)

SWITCH_IDS = [101, 102, 103]


def test_default_params_match_dialog():
    params = AntColonyParams()
    assert (params.num_ants, params.num_iterations) == (20, 50)
    assert (params.alpha, params.beta, params.evaporation, params.q) == (1.0, 3.0, 0.5, 100.0)
    assert params.percentage == 40
    assert params.tree_mode is False


def test_path_payload_contains_end():
    params = AntColonyParams(start_index=1, end_index=2)
    payload = params.to_payload("metrics")
    assert payload["end"] == 2
    assert payload["start"] == 1
    assert payload["Q"] == params.q
    assert payload["metric_content"] == "metrics"
    assert params.start_endpoint == "/antcolony/start"
    assert params.status_endpoint == "/antcolony/status"


def test_tree_payload_omits_end():
    params = AntColonyParams(start_index=1, end_index=2, tree_mode=True)
    payload = params.to_payload("metrics")
    assert "end" not in payload
    assert set(payload) == {
        "num_ants", "num_iterations", "alpha", "beta", "evaporation",
        "Q", "start", "percentage", "metric_content",
    }
    assert params.start_endpoint == "/antcolony/tree"
    assert params.status_endpoint == "/antcolony/status_tree"


def test_for_switches_uses_name_positions():
    params = AntColonyParams.for_switches(["s1", "s2", "s3"], "s3", "missing", num_ants=5)
    assert params.start_index == 2
    assert params.end_index == -1
    assert params.num_ants == 5


def test_map_indices_drops_out_of_range():
    assert map_indices_to_ids([0, 2, 3, -1], SWITCH_IDS) == [101, 103]


def test_map_indices_treats_non_integers_as_zero():
    assert map_indices_to_ids([1.0, 1.5, "x", True], SWITCH_IDS) == [102, 101, 101, 101]


def test_parse_path_status_full():
    obj = {"best_path": [0, 1, 2], "all_paths": [[0, 1], [7]], "best_length": 4.5, "finished": True}
    status = parse_path_status(obj, SWITCH_IDS)
    assert status == PathStatus(
        best_path=[101, 102, 103], all_paths=[[101, 102], []], best_length=4.5, finished=True
    )


def test_parse_path_status_length_fallback_and_missing():
    assert parse_path_status({"length": 2.0}, SWITCH_IDS).best_length == 2.0
    empty = parse_path_status({}, SWITCH_IDS)
    assert empty.best_length is None
    assert empty.all_paths is None
    assert empty.best_path == []
    assert empty.finished is False


def test_parse_path_status_negative_length_hidden():
    assert parse_path_status({"best_length": -3}, SWITCH_IDS).best_length is None


def test_parse_tree_status_edges_filtered():
    obj = {"edges": [[0, 1], [1, 5], [2], [2, 0]], "finished": False}
    status = parse_tree_status(obj, SWITCH_IDS)
    assert status == TreeStatus(edges=[(101, 102), (103, 101)], all_paths=None, finished=False)


def test_parse_tree_status_drops_empty_paths():
    obj = {"all_paths": [[0, 2], [9], []], "finished": True}
    status = parse_tree_status(obj, SWITCH_IDS)
    assert status.all_paths == [[101, 103]]
    assert status.finished is True


def test_path_length_skips_missing_links():
    delays = {(1, 2): 1.5, (2, 3): 2.5}
    total = path_length([1, 2, 3, 4], lambda a, b: delays.get((a, b)))
    assert total == pytest.approx(delays[(1, 2)] + delays[(2, 3)])


def test_path_length_of_single_node_is_zero():
    assert path_length([1], lambda a, b: 1.0) == 0.0


def test_format_path_joins_known_names():
    names = {101: "s1", 102: "s2"}
    assert format_path([101, 999, 102], names) == "s1 -> s2"
    assert format_path([], names) == ""