# webserv

A small HTTP/1.1 server that listens on several ports at once and serves
static files from a document root.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
webserv [PORT ...] [--root DIR] [--host ADDR]
```

With no ports given, the server listens on ports 8080, 8081, 8082 and 2.
`--root` sets the directory files are served from (default: the current
directory) and `--host` the address to bind to (default: all interfaces).
Each listener is polled in turn until the process is interrupted. If a
socket cannot be set up, the command prints the error and exits with
status 1. Every received request is logged at debug level.

Paths in requests are resolved against the document root:

- `GET /` serves `html/index.html`.
- `GET /some/file.css` serves `some/file.css`, with a `Content-Type` taken
  from the file extension (`text/css` here) and a `Content-Length` header.
  Unknown or missing extensions are sent as `application/octet-stream`.
- A file that cannot be opened, or a path that leads outside the root,
  gives `404 Not Found` with the body of `html/NOT_FOUND.html`.
- A malformed request line, an HTTP version other than `HTTP/1.1`, or a
  method other than `GET` or `POST` gives `400 BAD REQUEST`.
- `POST` answers `204 No Content` and logs the `&`-separated form fields
  from the last line of the request.

Every response carries a `Host` header naming the address the connection
was accepted on.

## Using it from Python

```python
from webserv.server import Server

with Server(ports=[8080, 8081], root="site", host="127.0.0.1") as server:
    server.serve_forever()
```

`Server.run_once(timeout)` polls every listener a single time, which is
handy when driving the server from your own loop. A single port can be
handled with `Listener` directly; `Listener.address()` reports the address
it is bound to. Setup failures raise `webserv.tools.FatalError`.

Responses can also be built without any sockets, through
`webserv.request.Request(raw, address, root)`, whose `http_string()` and
`to_bytes()` return the complete response.

Helpers:

```python
from webserv.mime import content_type
from webserv.status import status_message
from webserv.tools import split

content_type("index.html")   # "text/html"
status_message(404)          # "Not Found"
split("a=1&b=2", "&")        # ["a=1", "b=2"]
```

## What it does not do

There is no separate echo server or connectivity-check command; the
package provides only the HTTP server. Methods other than `GET` and `POST`
are not handled, there is no configuration file, and `POST` data is only
logged, never stored.