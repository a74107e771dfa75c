# proxyparse

Parse and rebuild the HTTP requests that a forward proxy receives.

A proxy gets requests whose request line holds an absolute URI, for example
`GET http://www.example.com:80/index.html HTTP/1.0`. `proxyparse` splits such a
request into its method, protocol, host, port, path and version. It keeps the
headers as key/value pairs that you can read, change and remove, and it can
rebuild the request text.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parsing a request

```python
from proxyparse.request import ParsedRequest, ParseError, parse_request

raw = (
    "GET http://www.example.com:80/index.html HTTP/1.0\r\n"
    "Content-Length: 80\r\n"
    "If-Modified-Since: Sat, 29 Oct 1994 19:43:31 GMT\r\n"
    "\r\n"
)

req = ParsedRequest.parse(raw)      # or parse_request(raw)
req.method      # "GET"
req.protocol    # "http"
req.host        # "www.example.com"
req.port        # "80"  (None when the URI has no port)
req.path        # "/index.html"  ("/" when the URI has no path)
req.version     # "HTTP/1.0"
req.headers     # {"Content-Length": "80", "If-Modified-Since": "..."}
```

The input can be `str`, `bytes` or `bytearray`. Bytes are decoded as Latin-1.
`ParseError`, a subclass of `ValueError`, is raised in these cases:

- the buffer is shorter than `MIN_REQUEST_LENGTH` (4) or longer than
  `MAX_REQUEST_LENGTH` (65535);
- there is no blank line (`\r\n\r\n`) that ends the headers;
- the method is not `GET`;
- the request line has no absolute URI, or its version does not start with
  `HTTP/`;
- the URI has no host, has no `/` after the host, or has a path that starts
  with `//`;
- the port does not start with a number;
- a header line has no colon.

The header parser skips the two characters after each colon, so it expects
lines of the form `Key: value`.

## Working with headers

```python
req.get_header("If-Modified-Since").value   # a ParsedHeader, or None
req.remove_header("If-Modified-Since")      # KeyError if the key is absent
req.set_header("Last-Modified", "Wed, 12 Feb 2014 12:43:31 GMT")
```

Keys match exactly, so case matters. `set_header` replaces a header that
already exists and moves it to the end of the header order. A `ParsedHeader`
has the attributes `key` and `value`, and its `line()` method returns
`"key: value\r\n"`.

## Rebuilding the request

```python
req.request_line()      # "GET http://www.example.com:80/index.html HTTP/1.0\r\n"
req.unparse()           # request line, headers and the closing blank line
req.unparse_headers()   # headers and the closing blank line only
req.total_len()         # len(req.unparse())
req.headers_len()       # len(req.unparse_headers())
```

## The `proxyparse-server` command

```
proxyparse-server 8080
```

The command takes exactly one argument, the port. It reads a leading integer
from the argument: `"8080x"` gives 8080, and text with no digits gives 0. Then
it prints `Starting proxy server at port: <port>`. Next it creates a TCP socket
with `SO_REUSEADDR` set, closes the socket again, and exits with status 0. With
any other number of arguments it prints `Too few arguments` and exits with
status 1. The same steps are available from `proxyparse.server` as
`parse_port(argv)`, which raises `UsageError`, and `create_proxy_socket(port)`.
`main(argv=None)` runs both steps.

## What the package does not do

`proxyparse` is not a working proxy. The `proxyparse-server` command does not
bind the socket to the port, does not listen for or accept connections, and
does not forward requests upstream. There is also no response cache and no
limit on concurrent clients. The constants `DEFAULT_PORT` and `MAX_CLIENTS` in
`proxyparse.server` are defined, but nothing uses them.