# postboard

A small JSON web service that stores posts in SQLite and serves them over HTTP.
It needs nothing beyond the Python standard library. The code is split into
layers, and each one can be replaced on its own:

- `postboard.entity`: the `Post` dataclass (`id`, `title`, `text`), with
  `to_dict()` and `Post.from_dict(data)`. `from_dict` matches keys without
  regard to case and ignores unknown keys and `null` values. A value of the
  wrong type raises `TypeError`, and an `id` outside the signed 64-bit range
  raises `ValueError`.
- `postboard.repository`: `PostRepository`, the abstract storage interface
  (`save`, `find_all`, `delete`), and `SQLiteRepository(path="posts.db")`.
  `SQLiteRepository` deletes any existing file at `path` and creates a fresh
  `posts` table there.
- `postboard.service`: `PostService(repository)`. `validate(post)` raises
  `PostValidationError` (a `ValueError`) with the message "the post is empty"
  or "the post title is empty". `create(post)` gives the post a random
  non-negative 63-bit id and saves it. `find_all()` returns every post. If the
  service has no repository, `create` and `find_all` raise `RuntimeError`.
- `postboard.controller`: `PostController(service)`, whose `get_posts` and
  `add_posts` handlers turn a `Request` into a JSON `Response`.
- `postboard.router`: the `Request` and `Response` dataclasses and
  `MuxRouter(stop)`. The router maps exact paths and methods to handlers with
  `get(uri, handler)` and `post(uri, handler)`. `dispatch(request)` returns the
  handler's response: 404 for an unknown path and 405 for a known path with a
  method that has no handler. `serve(port)` serves HTTP on a `"host:port"`
  address until the `threading.Event` passed as `stop` is set, then shuts down.
- `postboard.app`: `build_router(repository_path, stop)` wires the layers
  together, and `main(argv=None)` runs the server.

## Installing

```
pip install .
```

## Running

```
postboard
```

| Option   | Default    | Meaning                             |
|----------|------------|-------------------------------------|
| `--port` | `:8080`    | address to listen on, `host:port`   |
| `--db`   | `posts.db` | SQLite database file                |

The server prints a line when it starts and when it shuts down. It stops on
Ctrl-C (SIGINT). It starts with a new, empty database every time, so posts are
not kept from one run to the next.

| Method | Path     | Result                                             |
|--------|----------|----------------------------------------------------|
| GET    | `/`      | `Up and running...`                                |
| GET    | `/posts` | JSON array of all posts                            |
| POST   | `/posts` | Creates a post from `{"title": ..., "text": ...}`  |

Example:

```
curl -X POST localhost:8080/posts -d '{"title": "Hello", "text": "First post"}'
curl localhost:8080/posts
```

A successful request returns `200` with a JSON body. If the request body is not
valid JSON, has a field of the wrong type or has an empty title, or if storage
fails, the server returns `500` with
`{"error": "error getting all posts data"}`.

## Using the layers directly

```python
from postboard.entity import Post
from postboard.repository import SQLiteRepository
from postboard.service import PostService

service = PostService(SQLiteRepository("posts.db"))
post = Post(title="Hello", text="First post")
service.validate(post)
saved = service.create(post)
print(saved.to_dict())
print([p.to_dict() for p in service.find_all()])
```

You can test a router without a network. Pass a `Request` to
`MuxRouter.dispatch` and it returns a `Response`:

```python
import threading
from postboard.app import build_router
from postboard.router import Request

router = build_router("posts.db", threading.Event())
print(router.dispatch(Request("GET", "/")).body)
```

## What it does not do

- The HTTP API cannot delete posts. Deletion is only available through
  `PostRepository.delete`.
- SQLite is the only storage backend.
- Data does not survive a restart.

## Tests

```
pip install '.[test]'
pytest
```