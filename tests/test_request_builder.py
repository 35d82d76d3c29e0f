import pytest
from pydantic import TypeAdapter, ValidationError

from core.domain.models import GetRequest, HttpMethod, PostRequest, RequestDescriptor, UrlKeyValue
from core.errors import ArgumentError
from core.services.request_builder import build_post_body, build_request, parse_key_value, parse_url


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com",
        "http://example.com/path?q=1",
        "http://localhost:8080/api/v1/items",
        "https://user@example.com/a/b#frag",
        "http://127.0.0.1:3000",
    ],
)
def test_parse_url__valid(url: str):
    assert parse_url(url) == url


@pytest.mark.parametrize(
    "url",
    ["example.com", "/just/a/path", "", "http://", "mailto:someone@example.com", "not a url"],
)
def test_parse_url__invalid(url: str):
    with pytest.raises(ArgumentError, match="invalid url"):
        parse_url(url)


def test_parse_key_value():
    assert parse_key_value("a=b") == UrlKeyValue(key="a", value="b")
    assert parse_key_value("name=httpeek") == UrlKeyValue(key="name", value="httpeek")


def test_parse_key_value__discards_empty_fragments():
    # "a==b" splits into ["a", "", "b"]; the empty fragment is dropped.
    assert parse_key_value("a==b") == UrlKeyValue(key="a", value="b")
    assert parse_key_value("a=b=") == UrlKeyValue(key="a", value="b")


@pytest.mark.parametrize("token", ["a=b=c", "=b", "a=", "noequals", "=", ""])
def test_parse_key_value__invalid(token: str):
    with pytest.raises(ArgumentError) as e:
        parse_key_value(token)
    assert str(e.value) == f"parse url param error: {token}"


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_key_value("noequals")


def test_build_post_body__last_wins():
    pairs = [UrlKeyValue(key="a", value="1"), UrlKeyValue(key="a", value="2")]
    assert build_post_body(pairs) == {"a": "2"}


def test_build_post_body__keeps_order():
    pairs = [parse_key_value(t) for t in ["b=1", "a=2", "b=3"]]
    assert list(build_post_body(pairs).items()) == [("b", "3"), ("a", "2")]


def test_build_request__get():
    request = build_request(HttpMethod.GET, "https://example.com")
    assert request == GetRequest(url="https://example.com")
    assert request.method is HttpMethod.GET
    assert not hasattr(request, "body")


def test_build_request__get_rejects_body():
    with pytest.raises(ArgumentError, match="GET requests do not take body parameters"):
        build_request(HttpMethod.GET, "https://example.com", ["a=1"])


def test_build_request__post_from_tokens_and_pairs():
    request = build_request(
        HttpMethod.POST,
        "https://example.com/post",
        ["a=1", UrlKeyValue(key="b", value="2"), "a=3"],
    )
    assert isinstance(request, PostRequest)
    assert request.body == {"a": "3", "b": "2"}


def test_build_request__post_without_params():
    request = build_request("POST", "https://example.com/post")
    assert request == PostRequest(url="https://example.com/post", body={})


def test_build_request__invalid_url():
    with pytest.raises(ArgumentError):
        build_request(HttpMethod.POST, "example.com", ["a=1"])


def test_build_request__invalid_token():
    with pytest.raises(ArgumentError, match="parse url param error: oops"):
        build_request(HttpMethod.POST, "https://example.com", ["a=1", "oops"])


def test_request_descriptor_discriminator():
    adapter = TypeAdapter(RequestDescriptor)
    assert isinstance(adapter.validate_python({"method": HttpMethod.GET, "url": "https://x.test"}), GetRequest)
    post = adapter.validate_python({"method": HttpMethod.POST, "url": "https://x.test", "body": {"k": "v"}})
    assert isinstance(post, PostRequest)
    assert post.body == {"k": "v"}
    with pytest.raises(ValidationError):
        adapter.validate_python({"method": "PUT", "url": "https://x.test"})


def test_descriptors_are_frozen():
    request = GetRequest(url="https://example.com")
    with pytest.raises(ValidationError):
        request.url = "https://other.test"  # type: ignore[misc]
