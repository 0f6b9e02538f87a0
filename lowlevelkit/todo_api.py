"""A minimal HTTP to-do API: POST /todos creates a task, GET /todos lists them."""

from __future__ import annotations

import re
import socket
import sys

from lowlevelkit.todos import TodoList, TodoTask

PORT = 8080
BUFFER_SIZE = 4096

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

_WS = r"[ \t\n\v\f\r]"
_NON_WS = r"[^ \t\n\v\f\r]"

_REQUEST_FIELDS = tuple(
    re.compile(rf"{_WS}*({_NON_WS}{{1,{width}}})") for width in (15, 255, 15)
)
_HEADER = re.compile(rf"([^:]{{1,49}}):{_WS}*([^\r\n]{{1,49}})")
_PARAM = re.compile(rf"([^=]{{1,255}})={_WS}*({_NON_WS}{{1,255}})")

_NOT_FOUND = "404 Not Found"
_LENGTH_REQUIRED = "411 Length Required"
_UNPROCESSABLE = "422 Unprocessable Entity"
_SERVER_ERROR = "500 Internal Server Error"
_OK = "200 OK"
_CREATED = "201 Created"


def _request_fields(raw: str) -> list[str]:
    """Split the request line into up to three bounded whitespace-separated words."""
    fields: list[str] = []
    pos = 0
    for pattern in _REQUEST_FIELDS:
        match = pattern.match(raw, pos)
        if match is None:
            break
        fields.append(match.group(1))
        pos = match.end()
    return fields


def _bare_response(status: str) -> str:
    return f"HTTP/1.1 {status}\r\n\r\n"


def _json_response(status: str, body: str) -> str:
    length = len(body.encode(_ENCODING, _ERRORS))
    return (
        f"HTTP/1.1 {status}\r\n"
        f"Content-Length: {length}\r\n"
        "Content-Type: application/json\r\n"
        "\r\n"
        f"{body}"
    )


def check_method_and_path(raw: str) -> str | None:
    """Return "POST" or "GET" for a request on /todos, None for anything else."""
    fields = _request_fields(raw)
    if len(fields) != 3:
        return None
    method, path, _version = fields
    if path != "/todos":
        return None
    return method if method in ("POST", "GET") else None


def check_header(raw: str) -> bool:
    """Return whether the request carries a Content-Length header."""
    start = raw.find("\r\n")
    if start < 0:
        return False
    pos = start + 2
    while pos < len(raw) and raw[pos] not in "\r\n":
        end = raw.find("\r\n", pos)
        if end < 0:
            break
        match = _HEADER.match(raw, pos)
        if match is not None and match.group(1) == "Content-Length":
            return True
        pos = end + 2
    return False


def check_body(body: str, todos: TodoList) -> TodoTask | None:
    """Add a task from the form-encoded ``title`` and ``description`` fields.

    Returns the new task, or None if either field is missing or empty.
    """
    title = description = ""
    for token in filter(None, body.split("&")):
        match = _PARAM.match(token)
        if match is None:
            continue
        key, value = match.groups()
        if key == "title":
            title = value
        elif key == "description":
            description = value
    if not title or not description:
        return None
    return todos.add(title, description)


def created_response(todos: TodoList) -> str | None:
    """Return the 201 response describing the last task, or None if there is none."""
    task = todos.last()
    if task is None:
        return None
    return _json_response(_CREATED, task.to_json())


def list_response(todos: TodoList) -> str:
    """Return the 200 response holding every task as a JSON array."""
    body = "[" + ",".join(task.to_json() for task in todos) + "]"
    return _json_response(_OK, body)


def handle_request(raw: str, todos: TodoList) -> tuple[str, str]:
    """Process one raw request; return the response text and its status."""
    method = check_method_and_path(raw)
    if method is None:
        return _bare_response(_NOT_FOUND), _NOT_FOUND
    if method == "GET":
        return list_response(todos), _OK
    if not check_header(raw):
        return _bare_response(_LENGTH_REQUIRED), _LENGTH_REQUIRED
    separator = raw.find("\r\n\r\n")
    if separator >= 0 and check_body(raw[separator + 4:], todos) is None:
        return _bare_response(_UNPROCESSABLE), _UNPROCESSABLE
    response = created_response(todos)
    if response is None:
        return _bare_response(_SERVER_ERROR), _SERVER_ERROR
    return response, _CREATED


def _serve_client(client: socket.socket, ip: str, todos: TodoList) -> None:
    try:
        data = client.recv(BUFFER_SIZE - 1)
    except OSError:
        data = b""
    if not data:
        print("Failed to read from client.", flush=True)
        return
    raw = data.decode(_ENCODING, _ERRORS)
    response, status = handle_request(raw, todos)
    client.sendall(response.encode(_ENCODING, _ERRORS))
    method, path = (_request_fields(raw) + ["", ""])[:2]
    print(f"{ip} {method} {path} -> {status}", flush=True)


def serve(host: str = "", port: int = PORT, todos: TodoList | None = None) -> None:
    """Listen on ``host:port`` and answer to-do requests until interrupted."""
    if todos is None:
        todos = TodoList()
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(3)
        print(f"Server listening on port {server.getsockname()[1]}", flush=True)
        while True:
            try:
                client, address = server.accept()
            except OSError as exc:
                print(f"Accept failed: {exc}", file=sys.stderr)
                continue
            with client:
                _serve_client(client, address[0], todos)


def main(argv: list[str] | None = None) -> int:
    """Run the to-do server on the given port (default 8080)."""
    if argv is None:
        argv = sys.argv[1:]
    port = PORT
    if argv:
        if len(argv) > 1 or not argv[0].isdigit() or int(argv[0]) > 65535:
            print("Usage: todo_api [port]", file=sys.stderr)
            return 1
        port = int(argv[0])
    try:
        serve("", port, TodoList())
    except OSError as exc:
        print(f"Bind failed: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())