"""Tests for the /api/jobs proxy route."""

from __future__ import annotations

import httpx

from tests.fakes import API_KEY, make_hit, make_search, serpapi_results


def test_post_returns_normalized_jobs(client, use_search) -> None:
    use_search(make_search(serpapi_results([make_hit(1), make_hit(2, apply_link=None)])))

    response = client.post("/api/jobs", json={"title": "Backend Developer", "skills": ["Python"]})

    assert response.status_code == 200
    jobs = response.json()["jobs"]
    assert jobs == [
        {
            "title": "Backend Engineer 1",
            "company_name": "Company 1",
            "location": "Bengaluru, Karnataka, India",
            "link": "https://jobs.example.com/1/apply",
        },
        {
            "title": "Backend Engineer 2",
            "company_name": "Company 2",
            "location": "Bengaluru, Karnataka, India",
            "link": "https://www.google.com/search?ibp=htl;jobs#2",
        },
    ]


def test_post_caps_at_five_jobs(client, use_search) -> None:
    use_search(make_search(serpapi_results([make_hit(i) for i in range(7)])))

    response = client.post("/api/jobs", json={"title": "Dev", "skills": ["Go"]})

    assert response.status_code == 200
    assert [j["title"] for j in response.json()["jobs"]] == [f"Backend Engineer {i}" for i in range(5)]


def test_identical_requests_return_identical_jobs(client, use_search) -> None:
    use_search(make_search(serpapi_results([make_hit(i) for i in range(3)])))
    body = {"title": "Dev", "skills": ["Go", "Rust"]}

    assert client.post("/api/jobs", json=body).json() == client.post("/api/jobs", json=body).json()


def test_empty_results_are_not_an_error(client, use_search) -> None:
    use_search(make_search(serpapi_results([])))

    response = client.post("/api/jobs", json={"title": "Dev", "skills": ["Go"]})

    assert response.status_code == 200
    assert response.json() == {"jobs": []}


def test_provider_error_field_is_empty_result(client, use_search) -> None:
    use_search(make_search(lambda request: httpx.Response(200, json={"error": "No results"})))

    response = client.post("/api/jobs", json={"title": "Dev", "skills": ["Go"]})

    assert response.status_code == 200
    assert response.json() == {"jobs": []}


def test_missing_title_is_bad_request(client, use_search) -> None:
    use_search(make_search(serpapi_results([make_hit(1)])))

    response = client.post("/api/jobs", json={"skills": ["Python"]})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing title or skills"}


def test_missing_or_empty_skills_is_bad_request(client, use_search) -> None:
    use_search(make_search(serpapi_results([make_hit(1)])))

    assert client.post("/api/jobs", json={"title": "Dev"}).status_code == 400
    assert client.post("/api/jobs", json={"title": "Dev", "skills": []}).status_code == 400
    assert client.post("/api/jobs", json={"title": "", "skills": ["Go"]}).status_code == 400


def test_malformed_body_is_bad_request(client, use_search) -> None:
    use_search(make_search(serpapi_results([make_hit(1)])))

    response = client.post(
        "/api/jobs", content=b"not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_missing_credential_is_server_error_regardless_of_input(client, use_search) -> None:
    use_search(make_search(serpapi_results([make_hit(1)]), api_key=""))

    valid = client.post("/api/jobs", json={"title": "Dev", "skills": ["Go"]})
    invalid = client.post("/api/jobs", json={})

    for response in (valid, invalid):
        assert response.status_code == 500
        assert response.json() == {"error": "API key is not configured"}


def test_upstream_failure_is_generic_server_error(client, use_search) -> None:
    use_search(make_search(lambda request: httpx.Response(403, text=f"quota exceeded for {API_KEY}")))

    response = client.post("/api/jobs", json={"title": "Dev", "skills": ["Go"]})

    assert response.status_code == 500
    error = response.json()["error"]
    assert "quota" not in error
    assert API_KEY not in response.text


def test_unexpected_exception_is_server_error(client, use_search) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    use_search(make_search(handler))

    response = client.post("/api/jobs", json={"title": "Dev", "skills": ["Go"]})

    assert response.status_code == 500
    assert response.json() == {"error": "connection refused"}


def test_get_is_method_not_allowed(client) -> None:
    response = client.get("/api/jobs")

    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}


def test_other_methods_are_not_allowed(client) -> None:
    assert client.delete("/api/jobs").status_code == 405
    assert client.put("/api/jobs", json={}).status_code == 405


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "healthy"}


def test_missing_credential_wins_over_malformed_body(client, use_search) -> None:
    use_search(make_search(serpapi_results([make_hit(1)]), api_key=""))

    mistyped = client.post("/api/jobs", json={"title": "Dev", "skills": "Go"})
    not_json = client.post(
        "/api/jobs", content=b"not json", headers={"Content-Type": "application/json"}
    )

    for response in (mistyped, not_json):
        assert response.status_code == 500
        assert response.json() == {"error": "API key is not configured"}


def test_mistyped_or_non_object_body_is_bad_request(client, use_search) -> None:
    use_search(make_search(serpapi_results([make_hit(1)])))

    for body in ({"title": "Dev", "skills": "Go"}, ["Dev", "Go"], None):
        response = client.post("/api/jobs", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Missing title or skills"}


def test_head_and_options_are_not_allowed(client) -> None:
    assert client.head("/api/jobs").status_code == 405

    response = client.options("/api/jobs")
    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}
