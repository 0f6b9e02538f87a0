# lowlevelkit

A collection of small systems-programming tools and building blocks:

- **Prime factorisation** (`lowlevelkit.primes`) – `prime_factors("1024")`
  returns the prime factors of a decimal string, smallest first, and raises
  `ValueError` if the string is not entirely a number.
- **Convolution blur** (`lowlevelkit.blur`) – `Pixel`, `Image`, `Kernel` and
  `BlurPortion`, with `apply_kernel`, `blur_portion` and `blur_image`.
- **Todo list** (`lowlevelkit.todos`) – an in-memory `TodoList` of `TodoTask`
  entries with sequential ids starting at 0.
- **Todo HTTP API** (`lowlevelkit.todo_api`) – answers `POST /todos` and
  `GET /todos` over raw sockets; `handle_request` processes one raw request.
- **TCP demos** (`lowlevelkit.tcp_demo`) – a listener, a one-shot message
  receiver and a client that only connects.
- **Object inspection** (`lowlevelkit.pyobject_info`) – text reports on Python
  lists, bytes, floats, strings and integers.
- **Binutils wrappers** (`lowlevelkit.binutils`) – run `nm -p` and
  `objdump -sf` and report files without symbols.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

Run the todo API (listens on port 8080 unless a port is given):

```
lowlevelkit-todo-api
lowlevelkit-todo-api 9000
```

Then, from another shell:

```
curl -X POST -H 'Content-Length: 29' -d 'title=Dinner&description=Soup' http://localhost:8080/todos
curl http://localhost:8080/todos
```

A POST needs a `Content-Length` header (otherwise 411) and non-empty `title`
and `description` form fields (otherwise 422); any other method or path gets
404. Each request is logged as `ip method path -> status`.

Run a demo TCP server on port 12345 (or `--port`). The mode `listen` just
listens, `accept` accepts one client and reports it, and `receive` (the
default) also prints the client's first message:

```
lowlevelkit-tcp-server
lowlevelkit-tcp-server accept --port 4000
```

Connect to a server and report success:

```
lowlevelkit-tcp-client localhost 12345
```

List symbols of one object file, or dump headers and sections of several
(needs `nm` and `objdump` on the `PATH`):

```
lowlevelkit-nm a.out
lowlevelkit-objdump a.out libfoo.o
```

Both exit with status 1 when the tool reports "no symbols"; for
`lowlevelkit-objdump` only the last file decides the status.

## Library use

```python
from lowlevelkit.primes import prime_factors

print(prime_factors("1000"))  # [2, 2, 2, 5, 5, 5]
```

```python
from lowlevelkit.blur import Image, Kernel, Pixel, blur_image

img = Image(2, 1, [Pixel(0, 0, 0), Pixel(200, 100, 50)])
out = Image.blank(2, 1)
blur_image(out, img, Kernel(3, [[1.0] * 3 for _ in range(3)]))
print(out.pixels)
```

```python
from lowlevelkit.todos import TodoList
from lowlevelkit.todo_api import handle_request

todos = TodoList()
raw = "POST /todos HTTP/1.1\r\nContent-Length: 21\r\n\r\ntitle=a&description=b"
response, status = handle_request(raw, todos)
print(status)  # 201 Created
```

```python
from lowlevelkit.pyobject_info import python_list_info

print(python_list_info([1, b"hi", 2.0]), end="")
```

## What this package does not do

- It has no threaded task runner or thread-safe print helper; prime
  factorisation runs in the calling thread, and there is no command for it.
- It has no server that prints the parts (request line, query string,
  headers, body) of arbitrary incoming HTTP requests; only the todo API
  parses requests.