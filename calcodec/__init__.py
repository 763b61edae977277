"""
A library for decoding and encoding line folded calendar content.

```python
from calcodec import decode, encode

document = decode(content)
assert encode(document) == content
```
"""

from .decoder import Decoder, decode
from .encoder import Encoder, encode
from .model import Block, Document, Parameter, Property

__all__ = [
    "Block",
    "Decoder",
    "Document",
    "Encoder",
    "Parameter",
    "Property",
    "compat",
    "decode",
    "diagnostics",
    "encode",
    "exceptions",
    "model",
    "timezones",
    "types",
]
