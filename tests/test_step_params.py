# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import pytest

from pathgc_lib.core.error import ParameterError
from pathgc_lib.step.params import (
    JOB_ID,
    TO_DELETE_PATHS,
    Params,
    decode_paths,
    encode_paths,
)
from pathgc_lib.step.request import DeletionRequest


def test_encode_paths_joins_with_comma():
    assert encode_paths(["a", "b", "c"]) == "a,b,c"


def test_encode_paths_empty():
    assert encode_paths([]) == ""


def test_encode_paths_rejects_comma():
    with pytest.raises(ParameterError, match="contains ','"):
        encode_paths(["/wd/a", "/wd/b,c"])


def test_encode_then_decode_preserves_order():
    paths = ["/wd/job1/stats*", "/wd/job1/hfiles", "/wd/job0"]

    assert decode_paths(encode_paths(paths)) == paths


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, []),
        ("", []),
        ("a", ["a"]),
        ("a,b,c", ["a", "b", "c"]),
        ("a,,b", ["a", "b"]),
        (",a,", ["a"]),
    ],
)
def test_decode_paths(value, expected):
    assert decode_paths(value) == expected


def test_params_set_and_get():
    params = Params()
    params.set("key", "value")

    assert params.get("key") == "value"
    assert params.get("missing") is None


def test_params_set_none_removes_parameter():
    params = Params({"key": "value"})
    params.set("key", None)

    assert params.get("key") is None
    assert params.toDict() == {}


def test_params_list_round_trip():
    params = Params()
    params.setList(TO_DELETE_PATHS, ["a", "b", "c"])

    assert params.get(TO_DELETE_PATHS) == "a,b,c"
    assert params.getList(TO_DELETE_PATHS) == ["a", "b", "c"]


def test_params_get_list_absent():
    assert Params().getList(TO_DELETE_PATHS) == []


def test_params_to_dict_returns_copy():
    params = Params({"a": "1"})
    data = params.toDict()
    data["b"] = "2"

    assert params.get("b") is None


def test_params_from_dict():
    params = Params.fromDict({"a": "1", "b": "2"})

    assert params == Params({"a": "1", "b": "2"})


def test_params_from_none():
    assert Params.fromDict(None) == Params()


@pytest.mark.parametrize(
    "data, message",
    [
        (["a", "b"], "must be a mapping"),
        ({"a": 1}, "names and values must be strings"),
        ({1: "a"}, "names and values must be strings"),
    ],
)
def test_params_from_dict_invalid(data, message):
    with pytest.raises(ParameterError, match=message):
        Params.fromDict(data)


def test_deletion_request_from_params():
    params = Params()
    params.setList(TO_DELETE_PATHS, ["/wd/job1/stats*", "/wd/job1/hfiles"])
    params.set(JOB_ID, "job1")

    request = DeletionRequest.fromParams(params)

    assert request == DeletionRequest(
        paths=("/wd/job1/stats*", "/wd/job1/hfiles"), job_id="job1"
    )


def test_deletion_request_from_empty_params():
    assert DeletionRequest.fromParams(Params()) == DeletionRequest()
