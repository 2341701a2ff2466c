# webporto

The core of a content backend for a portfolio site with a blog. The package
holds the parts that do not depend on a particular web framework or database:

- `webporto.models`: dataclasses for users, articles, projects, experiences,
  pages, posts, comments, categories, tags, media, menus, roles, settings,
  logs and page views. Records with UUID keys have an `ensure_id()` method
  that gives them a fresh UUID when they have none yet.
  `encode_string_array` and `decode_string_array` turn a list of strings into
  stored JSON and back.
- `webporto.validation`: checks for e-mail, password strength, usernames,
  slugs, statuses, roles, ids and lengths. Each check returns the value or
  raises `ValidationError`; `ValidationErrors` gathers several `FieldError`s.
- `webporto.domain_services`: `PostDomainService`, `PageDomainService`,
  `CommentDomainService` and `UserDomainService` prepare records before they
  are saved (slugs, timestamps, publication date, default role) and check the
  comment nesting and the role hierarchy. Rule violations raise `DomainError`.
- `webporto.auth`: `AuthService` hashes passwords with bcrypt and issues and
  checks HS256 JWTs that last 24 hours, returning `Claims`. A token that fails
  the check raises `TokenError` (`empty token`, `token expired`,
  `token not valid yet`, `malformed token`, `invalid token signature`).
- `webporto.response`: the standard API envelope (`APIResponse`,
  `PaginatedResponse`) and its constructors.
- `webporto.pagination`: `calculate_pagination` and `PaginationInfo`.
- `webporto.utils`: `new_pagination`, `string_to_slug`, `truncate`,
  `is_valid_email`, `parse_id`, `parse_int_id`, `validate_page_and_limit`.
- `webporto.helper`: date formatting, HTML stripping, excerpts, reading time,
  file sizes, masked e-mails, random strings, unique slugs and "time ago" text.
- `webporto.logger`: a JSON-lines logger with levels and bound fields, a
  process-wide default (`get_logger`, `set_default_logger`) and
  `RequestLogger`, which carries a request id.
- `webporto.realtime`: an in-process `Manager` that sends view-count updates
  to registered `Client` queues and replays the latest counts to new clients.
- `webporto.config`: settings loaded from `config.json`, which environment
  variables such as `SERVER_PORT`, `DB_HOST` and `JWT_SECRET` override.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

Issue a session token and check it:

```python
from webporto.auth import AuthService, TokenError

service = AuthService("secret")
signed = service.generate_token(1, "alice", "admin")
claims = service.validate_token(signed)
assert claims.user_id == 1 and claims.role == "admin"

try:
    service.validate_token("token")
except TokenError as exc:
    print(exc)          # malformed token
```

Validate input:

```python
from webporto.validation import validate_username, ValidationError

try:
    validate_username("al")
except ValidationError as exc:
    print(exc)          # username must be at least 3 characters long
```

Build a paginated response:

```python
from webporto.response import new_paginated_response

resp = new_paginated_response(["a", "b"], page=1, limit=10, total=25, message="")
print(resp.to_dict()["pagination"])
# {'page': 1, 'limit': 10, 'total': 25, 'total_pages': 3}
```

Helpers:

```python
from webporto.helper import extract_excerpt, format_file_size, mask_email
from webporto.utils import string_to_slug

string_to_slug("Hello, World!")          # 'hello-world'
format_file_size(1536)                   # '1.5 KB'
mask_email("alice@example.com")          # 'a***e@example.com'
extract_excerpt("<p>Some long text</p>", 150)   # 'Some long text'
```

Live view counts:

```python
from webporto.realtime import Client, Manager, ViewCountsUpdate

manager = Manager()
client = Client()
manager.register(client)
manager.update_view_counts(ViewCountsUpdate(total=10, today=2), page="/about")
print(client.receive(timeout=1))
# b'{"type":"view_counts","data":{"total":10,...},"channel":"page:/about"}'
```

Load configuration:

```python
from webporto.config import load_config

config = load_config("config.json", {"SERVER_PORT": "9000"})
print(config.server.port)   # 9000
```

## What the package does not do

It has no HTTP server, routes or request handlers, no database layer and no
file-upload handling: the models are plain dataclasses with no storage behind
them. `webporto.realtime` keeps subscribers in memory and does not open
network connections; carrying its messages over a WebSocket is left to the
application. There is no command-line program.