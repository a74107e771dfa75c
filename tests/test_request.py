import pytest

from proxyparse.request import (
    MAX_REQUEST_LENGTH,
    ParseError,
    ParsedHeader,
    ParsedRequest,
    parse_request,
)

EXAMPLE = (
    "GET http://www.google.com:80/index.html/ HTTP/1.0\r\nContent-Length:"
    " 80\r\nIf-Modified-Since: Sat, 29 Oct 1994 19:43:31 GMT\r\n\r\n"
)


@pytest.fixture
def request_obj():
    return parse_request(EXAMPLE)


def test_request_line_fields(request_obj):
    assert request_obj.method == "GET"
    assert request_obj.protocol == "http"
    assert request_obj.host == "www.google.com"
    assert request_obj.port == "80"
    assert request_obj.path == "/index.html/"
    assert request_obj.version == "HTTP/1.0"


def test_headers_parsed(request_obj):
    assert request_obj.get_header("Content-Length") == ParsedHeader("Content-Length", "80")
    assert request_obj.get_header("If-Modified-Since").value == "Sat, 29 Oct 1994 19:43:31 GMT"
    assert request_obj.get_header("content-length") is None


def test_unparse_round_trip(request_obj):
    assert request_obj.unparse() == EXAMPLE
    assert parse_request(request_obj.unparse()) == request_obj


def test_lengths_match_serialisation(request_obj):
    assert request_obj.total_len() == len(request_obj.unparse())
    assert request_obj.headers_len() == len(request_obj.unparse_headers())
    assert request_obj.total_len() == len(EXAMPLE)


def test_unparse_headers(request_obj):
    expected = EXAMPLE[EXAMPLE.index("\r\n") + 2:]
    assert request_obj.unparse_headers() == expected


def test_request_line_without_headers():
    req = ParsedRequest.parse("GET http://example.com/ HTTP/1.1\r\n\r\n")
    assert req.path == "/"
    assert req.port is None
    assert req.unparse_headers() == "\r\n"
    assert req.request_line() == "GET http://example.com/ HTTP/1.1\r\n"


def test_bytes_input():
    req = parse_request(EXAMPLE.encode("ascii"))
    assert req.host == "www.google.com"
    assert req.unparse() == EXAMPLE


def test_remove_header(request_obj):
    request_obj.remove_header("If-Modified-Since")
    assert request_obj.get_header("If-Modified-Since") is None
    assert "If-Modified-Since" not in request_obj.unparse()


def test_remove_missing_header_raises(request_obj):
    with pytest.raises(KeyError):
        request_obj.remove_header("Last-Modified")


def test_set_header_replaces_and_moves_to_end(request_obj):
    request_obj.set_header("Content-Length", "42")
    assert request_obj.get_header("Content-Length").value == "42"
    assert list(request_obj.headers) == ["If-Modified-Since", "Content-Length"]


def test_set_new_header(request_obj):
    request_obj.set_header("Last-Modified", " Wed, 12 Feb 2014 12:43:31 GMT")
    header = request_obj.get_header("Last-Modified")
    assert header.value == " Wed, 12 Feb 2014 12:43:31 GMT"
    assert request_obj.unparse_headers().endswith(header.line() + "\r\n")


@pytest.mark.parametrize(
    "data",
    [
        "GET",
        "GET http://example.com/ HTTP/1.0\r\n",
        "POST http://example.com/ HTTP/1.0\r\n\r\n",
        "GET http://example.com/ FTP/1.0\r\n\r\n",
        "GET http://example.com HTTP/1.0\r\n\r\n",
        "GET http://example.com// HTTP/1.0\r\n\r\n",
        "GET http://example.com:abc/ HTTP/1.0\r\n\r\n",
        "GET http://example.com/ HTTP/1.0\r\nNoColonHere\r\n\r\n",
        "GET http://example.com/\r\n\r\n",
        "   \r\n\r\n",
    ],
)
def test_invalid_requests(data):
    with pytest.raises(ParseError):
        parse_request(data)


def test_request_too_long():
    data = "GET http://example.com/ HTTP/1.0\r\n\r\n"
    data += "x" * (MAX_REQUEST_LENGTH + 1 - len(data))
    with pytest.raises(ParseError):
        parse_request(data)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_request("PUT http://example.com/ HTTP/1.0\r\n\r\n")