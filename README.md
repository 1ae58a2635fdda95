# jsonrest

A small, dependency-free library in three parts:

- **A lenient JSON document tree** (`jsonrest.document.JSON`, built from the
  nodes in `jsonrest.nodes`). `JSON.parse` does not raise on malformed text; it
  keeps whatever it could read. A lookup that misses returns the shared invalid
  node (`jsonrest.nodes.INVALID`). That node ignores changes and reads as
  `{invalid}`. Objects read as `{object}` and lists read as `{list}`.
- **A REST dispatch engine** (`jsonrest.engine.RESTEngine`). It routes a URL
  and an HTTP method to a registered `jsonrest.callback.RESTCallBack`:
  - routes are regular expressions that must match the whole path;
  - methods are compared without regard to case;
  - required query parameters are checked before the handler runs;
  - the engine can describe its routes, including as a Swagger 2.0 document.
- **Utilities**:
  - Base64 encoding (`jsonrest.encoding.base64_encode`);
  - MD5 (`jsonrest.hashing.MD5`), and SHA-1 and SHA-256 (`jsonrest.sha.SHA1`,
    `jsonrest.sha.SHA256`);
  - a process-wide pluggable log sink (`jsonrest.logs`);
  - a bounded ring buffer (`jsonrest.ringbuffer.RingBuffer`).

## Installation

```
pip install .
```

## JSON documents

```python
from jsonrest.document import JSON, json_path_query

doc = JSON()
doc.parse('{"key1": "val1", "key2": {"sub": [1, 2.5, true]}}')

doc["key1"].text()                 # "val1"
doc["key2"].text()                 # "{object}"
doc["key2"]["sub"][1].to_double()  # 2.5
doc["missing"].text()              # "{invalid}"
json_path_query(doc, "key2/sub[2]").to_bool()  # True

doc.add_value("hello", "greeting")
items = doc.add_list("items")
items.add_value(3)
print(doc.stringify(True))         # tab-indented, CRLF line ends
```

`JSON.parse_file(filename)` reads and parses a UTF-8 file and raises `OSError`
when the file cannot be read. `add_object`, `add_list` and `add_value` without
a name pick a free key of the form `key<n>`. `JSON.assign(other)` and
`JSON.copy()` make deep copies.

## REST engine

```python
from jsonrest.callback import RESTCallBack
from jsonrest.document import JSON
from jsonrest.engine import RESTEngine, ResponseCode

def show_product(context):
    context.return_data.add_value(context.matches[1], "id")

engine = RESTEngine()
callback = RESTCallBack(show_product, "Show one product")
engine.add_callback("/products/([a-z0-9]*)", "GET", callback)

reply = JSON()
code = engine.invoke(reply, "/products/abc123", "GET", "", None)
assert code is ResponseCode.OK

swagger = JSON()
engine.document_swagger_interface(
    swagger, "1", "title", "description", "http", "localhost", "/api"
)
```

A handler receives a `jsonrest.callback.RESTContext` that holds:

- `return_data`: the document to fill;
- `params`: a `jsonrest.parameters.RESTParameters`; `get(name)` returns `""`
  when the parameter is absent;
- `data`: the request body;
- `matches`: the regular-expression match;
- `response_code`: set it to change the code that `invoke` returns;
- `user_data`: the value passed to `invoke`.

`RESTCallBack.add_param` declares parameters. A required query parameter that
is missing makes `invoke` return `ResponseCode.BAD_REQUEST` without running
the handler. The error message is written to `"error"` in the document. An
unknown method gives `ResponseCode.METHOD_NOT_ALLOWED`, and an unmatched path
gives `ResponseCode.NOT_FOUND`. `RESTEngine.document_interface` writes an
`"api"` list that describes every route.

## Hashing and encoding

```python
from jsonrest.encoding import base64_encode
from jsonrest.hashing import MD5
from jsonrest.sha import SHA1, SHA256

MD5(b"test").hexdigest()     # "098f6bcd4621d373cade4e832627b4f6"
SHA1(b"test").digest()       # 20 raw bytes
SHA256(b"test").hexdigest()
base64_encode(b"test")       # "dGVzdA=="
```

## Logging and the ring buffer

```python
from jsonrest import logs
from jsonrest.ringbuffer import RingBuffer

logs.set_logger(logs.ConsoleLogger())  # returns the previous sink
logs.log("started\n")                  # written to stdout as is

ring = RingBuffer(4)                   # holds at most 3 items
ring.put("a")
ring.get()                             # "a"
```

`RingBuffer.put` raises `queue.Full` when the ring is full. `RingBuffer.get`
raises `queue.Empty` when nothing is waiting.

## What this package does not do

There is no HTTP server or WebSocket support. `RESTEngine.invoke` is called
with a URL, a method and a body, and nothing in the package listens on a
network socket. The JSON parser does not support number exponents, `null`, or
`\uXXXX` escapes.

## Running the tests

```
pip install .[test]
pytest
```