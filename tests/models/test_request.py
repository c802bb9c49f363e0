"""Tests for RequestContext."""

from io import BytesIO

from htmlform.models.request import RequestContext


class TestRequestContext:
    def test_defaults(self) -> None:
        request = RequestContext()
        assert request.method == "GET"
        assert request.submitted == {}
        assert request.current_url == "/"

    def test_get_submits_query(self) -> None:
        request = RequestContext(method="get", query={"q": "forms"}, body={"q": "ignored"})
        assert request.submitted == {"q": "forms"}

    def test_post_submits_body(self) -> None:
        request = RequestContext(method="POST", query={"q": "ignored"}, body={"q": "forms"})
        assert request.submitted == {"q": "forms"}

    def test_current_url_with_query(self) -> None:
        request = RequestContext(path="/search", query_string="q=forms&page=2")
        assert request.current_url == "/search?q=forms&page=2"

    def test_list_values(self) -> None:
        request = RequestContext(method="POST", body={"fruit": ["a", "b"]})
        assert request.submitted["fruit"] == ["a", "b"]


class TestFromWsgi:
    def test_get(self) -> None:
        request = RequestContext.from_wsgi(
            {
                "REQUEST_METHOD": "GET",
                "SCRIPT_NAME": "/app",
                "PATH_INFO": "/search",
                "QUERY_STRING": "q=forms&tag=a&tag=b&empty=",
            }
        )
        assert request.method == "GET"
        assert request.current_url == "/app/search?q=forms&tag=a&tag=b&empty="
        assert request.submitted == {"q": "forms", "tag": ["a", "b"], "empty": ""}

    def test_urlencoded_post(self) -> None:
        body = b"name=Ada+Lovelace&fruit=a&fruit=b"
        request = RequestContext.from_wsgi(
            {
                "REQUEST_METHOD": "POST",
                "PATH_INFO": "/signup",
                "CONTENT_TYPE": "application/x-www-form-urlencoded; charset=utf-8",
                "CONTENT_LENGTH": str(len(body)),
                "wsgi.input": BytesIO(body),
            }
        )
        assert request.submitted == {"name": "Ada Lovelace", "fruit": ["a", "b"]}

    def test_undecodable_body_bytes_replaced(self) -> None:
        body = b"name=Ad\xffa"
        request = RequestContext.from_wsgi(
            {
                "REQUEST_METHOD": "POST",
                "CONTENT_TYPE": "application/x-www-form-urlencoded",
                "CONTENT_LENGTH": str(len(body)),
                "wsgi.input": BytesIO(body),
            }
        )
        assert request.submitted == {"name": "Ad\ufffda"}

    def test_other_content_type_leaves_body_empty(self) -> None:
        request = RequestContext.from_wsgi(
            {
                "REQUEST_METHOD": "POST",
                "CONTENT_TYPE": "application/json",
                "CONTENT_LENGTH": "2",
                "wsgi.input": BytesIO(b"{}"),
            }
        )
        assert request.body == {}
        assert request.path == "/"
