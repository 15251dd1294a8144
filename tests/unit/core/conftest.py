"""Shared fixtures for core unit tests"""

import pytest

from mdsite.core.events import make_parser


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text and a [link](https://example.com).

## Heading 2

- item one
- item two

```python
print("hello")
```

    indented code

| a | b |
|---|---|
| 1 | 2 |

---

Footer paragraph.
"""


@pytest.fixture(name="md")
def md_fixture():
    return make_parser("gfm-like")


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
