import pytest

from webporto.response import (
    ERR_VALIDATION,
    MSG_SUCCESS,
    new_error_response,
    new_paginated_response,
    new_success_response,
    new_validation_error_response,
)


def test_success_response_default_message():
    resp = new_success_response({"a": 1}, "")
    assert resp.success is True
    assert resp.message == MSG_SUCCESS
    assert resp.data == {"a": 1}
    assert resp.to_dict() == {"success": True, "message": "success", "data": {"a": 1}}


def test_success_response_custom_message():
    resp = new_success_response([1], "Created")
    assert resp.message == "Created"
    assert "error" not in resp.to_dict()


def test_error_response_without_details():
    resp = new_error_response("bad")
    assert resp.error == ""
    assert resp.to_dict() == {"success": False, "message": "bad"}


def test_error_response_with_details():
    assert new_error_response("bad", "detail").error == "detail"
    assert new_error_response("bad", "", "later").error == ""


def test_paginated_response_rounds_up():
    resp = new_paginated_response([], 1, 10, 25, "")
    assert resp.pagination.total_pages == 3
    assert resp.message == MSG_SUCCESS


def test_paginated_response_zero_total():
    assert new_paginated_response([], 1, 10, 0, "x").pagination.total_pages == 0


@pytest.mark.parametrize("total", [1, 9, 10, 11, 250])
@pytest.mark.parametrize("limit", [1, 3, 10])
def test_paginated_response_page_invariant(total, limit):
    tp = new_paginated_response([], 1, limit, total, "").pagination.total_pages
    assert tp * limit >= total
    assert (tp - 1) * limit < total


def test_paginated_to_dict_has_pagination():
    d = new_paginated_response(["x"], 2, 5, 7, "ok").to_dict()
    assert set(d["pagination"]) == {"page", "limit", "total", "total_pages"}
    assert d["pagination"]["page"] == 2
    assert d["data"] == ["x"]


def test_paginated_zero_limit_raises():
    with pytest.raises(ZeroDivisionError):
        new_paginated_response([], 1, 0, 5, "")


def test_validation_error_response():
    resp = new_validation_error_response("")
    assert resp.error == ERR_VALIDATION
    assert resp.to_dict() == {"success": False, "error": "validation failed"}
    assert new_validation_error_response("Name is required").error == "Name is required"