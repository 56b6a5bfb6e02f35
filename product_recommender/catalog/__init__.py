"""
Catalog access layer.

Responsibilities:
- Fetch the product catalog from json-server over HTTP, or from a local file.
- Validate records into immutable Product models.
- Degrade to an empty catalog when the source is unavailable.
"""
